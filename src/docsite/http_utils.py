"""HTTP utilities for outbound form submissions."""

from __future__ import annotations

from typing import Final, Mapping

import httpx

from docsite.config import DOCSITE_HTTP_TIMEOUT_S, DOCSITE_USER_AGENT
from docsite.exceptions import FetchError

_MAX_REDIRECTS: Final[int] = 5


def create_client(
    *,
    timeout_s: float = DOCSITE_HTTP_TIMEOUT_S,
    user_agent: str = DOCSITE_USER_AGENT,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the project's defaults."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_s),
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def post_form(
    url: str,
    data: Mapping[str, str],
    *,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """POST form-encoded data to a URL once.

    There are no retries: status codes are left for the caller to judge.

    Args:
        url: Endpoint to post to.
        data: Form fields.
        client: Optional client for connection reuse. If not provided, a new
            client is created for this request.

    Returns:
        The HTTP response, whatever its status code.

    Raises:
        FetchError: If the request could not be completed.
    """

    async def do_post(http_client: httpx.AsyncClient) -> httpx.Response:
        try:
            return await http_client.post(url, data=dict(data))
        except httpx.RequestError as exc:
            raise FetchError(f"Failed to POST {url}: {exc}") from exc

    if client is not None:
        return await do_post(client)

    async with create_client() as new_client:
        return await do_post(new_client)
