"""Local configuration for docsite."""

from __future__ import annotations

import os
from dataclasses import dataclass

from docsite.exceptions import ConfigurationError

DEFAULT_TURNSTILE_VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"
DEFAULT_NEWSLETTER_SUBSCRIBE_URL = "https://newsletter.kolaente.de/subscription/form"
DEFAULT_HTTP_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "docsite/0.1"
DEFAULT_MAX_SCHEMA_DEPTH = 64
DEFAULT_LOG_LEVEL = "INFO"

DOCSITE_TURNSTILE_VERIFY_URL = os.getenv("DOCSITE_TURNSTILE_VERIFY_URL", DEFAULT_TURNSTILE_VERIFY_URL)
DOCSITE_NEWSLETTER_SUBSCRIBE_URL = os.getenv("DOCSITE_NEWSLETTER_SUBSCRIBE_URL", DEFAULT_NEWSLETTER_SUBSCRIBE_URL)
DOCSITE_HTTP_TIMEOUT_S = float(os.getenv("DOCSITE_HTTP_TIMEOUT_S", str(DEFAULT_HTTP_TIMEOUT_S)))
DOCSITE_USER_AGENT = os.getenv("DOCSITE_USER_AGENT", DEFAULT_USER_AGENT)
# Schema files come from disk, so the traversal gets a nesting bound there.
DOCSITE_MAX_SCHEMA_DEPTH = int(os.getenv("DOCSITE_MAX_SCHEMA_DEPTH", str(DEFAULT_MAX_SCHEMA_DEPTH)))
DOCSITE_LOG_LEVEL = os.getenv("DOCSITE_LOG_LEVEL", DEFAULT_LOG_LEVEL)


@dataclass(frozen=True)
class SignupSettings:
    """Settings for the newsletter-signup flow.

    Attributes:
        turnstile_secret: Shared secret sent to the captcha verification API.
        newsletter_list_id: Identifier of the mailing list to subscribe to.
        verify_url: Captcha verification endpoint.
        subscribe_url: Mailing-list subscription endpoint.
        timeout_s: Timeout applied to each outbound call.
        user_agent: User-Agent header for outbound calls.
    """

    turnstile_secret: str
    newsletter_list_id: str
    verify_url: str = DOCSITE_TURNSTILE_VERIFY_URL
    subscribe_url: str = DOCSITE_NEWSLETTER_SUBSCRIBE_URL
    timeout_s: float = DOCSITE_HTTP_TIMEOUT_S
    user_agent: str = DOCSITE_USER_AGENT


def load_signup_settings() -> SignupSettings:
    """Build signup settings from the environment.

    Secrets are read at call time rather than import time so the server can
    fail fast on startup when they are missing.

    Raises:
        ConfigurationError: If the captcha secret or list id is not set.
    """
    secret = os.getenv("DOCSITE_TURNSTILE_SECRET", "").strip()
    list_id = os.getenv("DOCSITE_NEWSLETTER_LIST_ID", "").strip()

    missing = [
        name
        for name, value in (
            ("DOCSITE_TURNSTILE_SECRET", secret),
            ("DOCSITE_NEWSLETTER_LIST_ID", list_id),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(f"Missing required setting(s): {', '.join(missing)}")

    return SignupSettings(turnstile_secret=secret, newsletter_list_id=list_id)
