"""Models for the captcha verification response."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TurnstileOutcome(BaseModel):
    """Parsed body of a Turnstile ``siteverify`` response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")
    hostname: str | None = None
    challenge_ts: str | None = None
    action: str | None = None
    cdata: str | None = None
