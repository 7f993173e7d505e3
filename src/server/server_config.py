"""Server-level constants for the docsite API."""

from __future__ import annotations

import os

SERVER_HOST = os.getenv("HOST", "0.0.0.0")  # noqa: S104
SERVER_PORT = int(os.getenv("PORT", "8000"))
SERVER_RELOAD = os.getenv("RELOAD", "false").lower() == "true"

# Turnstile's widget injects the token under this form field name.
CAPTCHA_FIELD = "cf-turnstile-response"

# Cloudflare puts the visitor address here when proxying.
CLIENT_IP_HEADER = "CF-Connecting-IP"

CAPTCHA_INVALID_MESSAGE = "The provided captcha was not valid!"
SIGNUP_SUCCESS_MESSAGE = "success"
UPSTREAM_UNAVAILABLE_MESSAGE = "Upstream service unavailable"
