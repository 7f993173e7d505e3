"""Newsletter-signup endpoint for the API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from server.models import SignupErrorResponse, SignupForm, SignupSuccessResponse
from server.server_config import CLIENT_IP_HEADER
from server.signup_processor import process_signup

router = APIRouter()

SIGNUP_RESPONSES = {
    status.HTTP_200_OK: {"model": SignupSuccessResponse, "description": "Signup forwarded"},
    status.HTTP_400_BAD_REQUEST: {"model": SignupErrorResponse, "description": "Captcha rejected"},
}


@router.post("/api/newsletter-signup", responses=SIGNUP_RESPONSES)
async def newsletter_signup(
    request: Request,
    form: Annotated[SignupForm, Depends(SignupForm.as_form)],
) -> JSONResponse:
    """Subscribe an email address to the newsletter.

    **The captcha token is verified first;** only a verified submission is
    forwarded to the mailing list.

    **Form fields**

    - **email** (`str`): Address to subscribe
    - **cf-turnstile-response** (`str`, optional): Captcha response token

    **Returns**

    - **JSONResponse**: ``200`` with ``{"message": "success"}`` or ``400`` when the captcha is invalid

    """
    response = await process_signup(
        email=form.email,
        token=form.token,
        remote_ip=_client_ip(request),
        settings=request.app.state.signup_settings,
    )

    if isinstance(response, SignupErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump())


def _client_ip(request: Request) -> str | None:
    """Return the visitor address, preferring the proxy header."""
    forwarded = request.headers.get(CLIENT_IP_HEADER)
    if forwarded:
        return forwarded.strip()
    return request.client.host if request.client else None
