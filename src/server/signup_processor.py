"""Process a newsletter signup by verifying the captcha and subscribing."""

from __future__ import annotations

from contextlib import AsyncExitStack

import httpx

from docsite.captcha import verify_turnstile_token
from docsite.config import SignupSettings
from docsite.http_utils import create_client
from docsite.newsletter import subscribe_email
from docsite.utils.logging_config import get_logger
from server.models import SignupErrorResponse, SignupResponse, SignupSuccessResponse
from server.server_config import CAPTCHA_INVALID_MESSAGE, SIGNUP_SUCCESS_MESSAGE

# Initialize logger for this module
logger = get_logger(__name__)


async def process_signup(
    email: str,
    token: str | None,
    remote_ip: str | None,
    *,
    settings: SignupSettings,
    client: httpx.AsyncClient | None = None,
) -> SignupResponse:
    """Verify the captcha token and forward the address to the mailing list.

    The subscription outcome does not change the response: once the captcha
    passes, the visitor is told the signup succeeded.

    Parameters
    ----------
    email : str
        Address to subscribe.
    token : str | None
        Captcha response token from the form.
    remote_ip : str | None
        Visitor address, forwarded to the captcha check.
    settings : SignupSettings
        Secrets and endpoints for both outbound calls.
    client : httpx.AsyncClient | None
        Shared client; one is opened for this signup when omitted.

    Returns
    -------
    SignupResponse
        ``SignupErrorResponse`` when the captcha fails, else ``SignupSuccessResponse``.

    """
    async with AsyncExitStack() as stack:
        if client is None:
            client = await stack.enter_async_context(
                create_client(timeout_s=settings.timeout_s, user_agent=settings.user_agent)
            )

        if not await verify_turnstile_token(token, remote_ip, settings=settings, client=client):
            _print_rejected(remote_ip)
            return SignupErrorResponse(message=CAPTCHA_INVALID_MESSAGE)

        subscribed = await subscribe_email(email, settings=settings, client=client)

    _print_success(remote_ip, subscribed=subscribed)
    return SignupSuccessResponse(message=SIGNUP_SUCCESS_MESSAGE)


def _print_rejected(remote_ip: str | None) -> None:
    logger.info("Signup rejected by captcha", extra={"remote_ip": remote_ip})


def _print_success(remote_ip: str | None, *, subscribed: bool) -> None:
    """Log a completed signup, noting whether the mailing list accepted it."""
    logger.info(
        "Signup processed",
        extra={
            "remote_ip": remote_ip,
            "subscribed": subscribed,
        },
    )
