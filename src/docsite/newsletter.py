"""Mailing-list subscription client."""

from __future__ import annotations

import httpx

from docsite.config import SignupSettings
from docsite.exceptions import FetchError
from docsite.http_utils import post_form
from docsite.utils.logging_config import get_logger

logger = get_logger(__name__)


async def subscribe_email(
    email: str,
    *,
    settings: SignupSettings,
    client: httpx.AsyncClient | None = None,
) -> bool:
    """Submit an address to the mailing-list subscription form.

    Failures are logged and reported through the return value only; the
    signup response does not depend on them.

    Returns:
        True if the subscription endpoint accepted the request.
    """
    form = {"email": email, "l": settings.newsletter_list_id}

    try:
        response = await post_form(settings.subscribe_url, form, client=client)
    except FetchError as exc:
        logger.warning("Newsletter subscription request failed", extra={"error": str(exc)})
        return False

    if response.is_error:
        logger.warning(
            "Newsletter subscription rejected",
            extra={"status_code": response.status_code, "list_id": settings.newsletter_list_id},
        )
        return False

    logger.info("Newsletter subscription submitted", extra={"list_id": settings.newsletter_list_id})
    return True
