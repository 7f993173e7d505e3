"""Tests for the mailing-list subscription client."""

from __future__ import annotations

import logging
from urllib.parse import parse_qs

import httpx
import pytest

from docsite.config import SignupSettings
from docsite.newsletter import subscribe_email


class TestSubscribeEmail:
    """Tests for subscribe_email."""

    @pytest.mark.asyncio
    async def test_posts_email_and_list_id(self, signup_settings: SignupSettings) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="subscribed")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            assert await subscribe_email("reader@example.com", settings=signup_settings, client=client)

        assert str(seen[0].url) == signup_settings.subscribe_url
        assert parse_qs(seen[0].content.decode()) == {"email": ["reader@example.com"], "l": ["test-list"]}

    @pytest.mark.asyncio
    async def test_error_status_is_logged_not_raised(
        self, signup_settings: SignupSettings, caplog: pytest.LogCaptureFixture
    ) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500))

        with caplog.at_level(logging.WARNING, logger="docsite.newsletter"):
            async with httpx.AsyncClient(transport=transport) as client:
                assert not await subscribe_email("reader@example.com", settings=signup_settings, client=client)

        assert "Newsletter subscription rejected" in caplog.text

    @pytest.mark.asyncio
    async def test_network_error_is_logged_not_raised(
        self, signup_settings: SignupSettings, caplog: pytest.LogCaptureFixture
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with caplog.at_level(logging.WARNING, logger="docsite.newsletter"):
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                assert not await subscribe_email("reader@example.com", settings=signup_settings, client=client)

        assert "Newsletter subscription request failed" in caplog.text
