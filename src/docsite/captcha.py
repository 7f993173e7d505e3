"""Cloudflare Turnstile token verification."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from docsite.config import SignupSettings
from docsite.http_utils import post_form
from docsite.schemas import TurnstileOutcome
from docsite.utils.logging_config import get_logger

logger = get_logger(__name__)


async def verify_turnstile_token(
    token: str | None,
    remote_ip: str | None,
    *,
    settings: SignupSettings,
    client: httpx.AsyncClient | None = None,
) -> bool:
    """Ask the verification endpoint whether a captcha token is valid.

    Args:
        token: Value of the ``cf-turnstile-response`` form field.
        remote_ip: Address of the visitor, sent along when known.
        settings: Signup settings holding the secret and endpoint.
        client: Optional shared HTTP client.

    Returns:
        True only when the endpoint reports ``success``.

    Raises:
        FetchError: If the verification endpoint cannot be reached.
    """
    if not token or not token.strip():
        logger.info("Captcha token missing from signup form")
        return False

    form = {"secret": settings.turnstile_secret, "response": token}
    if remote_ip:
        form["remoteip"] = remote_ip

    response = await post_form(settings.verify_url, form, client=client)

    try:
        outcome = TurnstileOutcome.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning(
            "Unreadable captcha verification response",
            extra={"status_code": response.status_code, "error": str(exc)},
        )
        return False

    if not outcome.success:
        logger.info("Captcha verification rejected", extra={"error_codes": outcome.error_codes})
    return outcome.success
