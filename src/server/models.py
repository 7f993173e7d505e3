"""Pydantic models for the newsletter-signup form."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

# Resolved at runtime by FastAPI when building the form dependency.
from server.form_types import CaptchaTokenForm, StrForm  # noqa: TC001


class SignupForm(BaseModel):
    """Form data submitted by the newsletter-signup widget.

    Attributes
    ----------
    email : str
        Address to subscribe.
    token : str | None
        Captcha response token, absent when the widget did not run.

    """

    email: str
    token: str | None = None

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        """Strip surrounding whitespace from ``email``."""
        return v.strip()

    @classmethod
    def as_form(
        cls,
        email: StrForm,
        token: CaptchaTokenForm = None,
    ) -> SignupForm:
        """Create a SignupForm from FastAPI form parameters.

        Parameters
        ----------
        email : StrForm
            The address entered by the visitor.
        token : CaptchaTokenForm
            The ``cf-turnstile-response`` field.

        Returns
        -------
        SignupForm
            The SignupForm instance.

        """
        return cls(email=email, token=token)


class SignupSuccessResponse(BaseModel):
    """Body returned when the signup was forwarded.

    Attributes
    ----------
    message : str
        Always ``"success"``.

    """

    message: str = Field(..., description="Outcome message")


class SignupErrorResponse(BaseModel):
    """Body returned when the captcha was rejected.

    Attributes
    ----------
    message : str
        Error message describing what went wrong.

    """

    message: str = Field(..., description="Error message")


# Union type for API responses
SignupResponse = Union[SignupSuccessResponse, SignupErrorResponse]
