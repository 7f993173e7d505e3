"""Reusable form type aliases for FastAPI form parameters."""

from __future__ import annotations

from typing import Annotated, Optional, TypeAlias

from fastapi import Form

from server.server_config import CAPTCHA_FIELD

StrForm: TypeAlias = Annotated[str, Form(...)]
CaptchaTokenForm: TypeAlias = Annotated[Optional[str], Form(alias=CAPTCHA_FIELD)]
