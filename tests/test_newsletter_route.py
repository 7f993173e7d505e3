"""Tests for the newsletter-signup endpoint."""

from __future__ import annotations

import logging
from typing import Iterator
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from docsite.config import SignupSettings
from docsite.exceptions import FetchError
from server.main import create_app

SIGNUP_URL = "/api/newsletter-signup"


@pytest.fixture
def client(signup_settings: SignupSettings) -> Iterator[TestClient]:
    with TestClient(create_app(signup_settings)) as test_client:
        yield test_client


class TestNewsletterSignup:
    """Tests for POST /api/newsletter-signup."""

    def test_invalid_captcha_returns_400(self, client: TestClient) -> None:
        with (
            patch("server.signup_processor.verify_turnstile_token", AsyncMock(return_value=False)),
            patch("server.signup_processor.subscribe_email", AsyncMock()) as subscribe,
        ):
            response = client.post(
                SIGNUP_URL, data={"email": "reader@example.com", "cf-turnstile-response": "bad"}
            )

        assert response.status_code == 400
        assert response.json() == {"message": "The provided captcha was not valid!"}
        subscribe.assert_not_awaited()

    def test_valid_captcha_returns_success(self, client: TestClient, signup_settings: SignupSettings) -> None:
        with (
            patch("server.signup_processor.verify_turnstile_token", AsyncMock(return_value=True)) as verify,
            patch("server.signup_processor.subscribe_email", AsyncMock(return_value=True)) as subscribe,
        ):
            response = client.post(
                SIGNUP_URL,
                data={"email": " reader@example.com ", "cf-turnstile-response": "tok"},
                headers={"CF-Connecting-IP": "203.0.113.7"},
            )

        assert response.status_code == 200
        assert response.json() == {"message": "success"}
        assert verify.await_args.args == ("tok", "203.0.113.7")
        assert verify.await_args.kwargs["settings"] == signup_settings
        assert subscribe.await_args.args == ("reader@example.com",)

    def test_subscription_failure_does_not_change_response(self, client: TestClient) -> None:
        with (
            patch("server.signup_processor.verify_turnstile_token", AsyncMock(return_value=True)),
            patch("server.signup_processor.subscribe_email", AsyncMock(return_value=False)),
        ):
            response = client.post(SIGNUP_URL, data={"email": "reader@example.com", "cf-turnstile-response": "tok"})

        assert response.status_code == 200
        assert response.json() == {"message": "success"}

    def test_falls_back_to_peer_address(self, client: TestClient) -> None:
        with (
            patch("server.signup_processor.verify_turnstile_token", AsyncMock(return_value=False)) as verify,
            patch("server.signup_processor.subscribe_email", AsyncMock()),
        ):
            client.post(SIGNUP_URL, data={"email": "reader@example.com", "cf-turnstile-response": "tok"})

        assert verify.await_args.args == ("tok", "testclient")

    def test_missing_token_is_passed_as_none(self, client: TestClient) -> None:
        with (
            patch("server.signup_processor.verify_turnstile_token", AsyncMock(return_value=False)) as verify,
            patch("server.signup_processor.subscribe_email", AsyncMock()),
        ):
            response = client.post(SIGNUP_URL, data={"email": "reader@example.com"})

        assert response.status_code == 400
        assert verify.await_args.args[0] is None

    def test_missing_email_is_rejected(self, client: TestClient) -> None:
        response = client.post(SIGNUP_URL, data={"cf-turnstile-response": "tok"})

        assert response.status_code == 422

    def test_upstream_failure_returns_502(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        failure = FetchError("Failed to POST https://captcha.test/siteverify: timed out")
        with (
            patch("server.signup_processor.verify_turnstile_token", AsyncMock(side_effect=failure)),
            caplog.at_level(logging.ERROR, logger="server.main"),
        ):
            response = client.post(SIGNUP_URL, data={"email": "reader@example.com", "cf-turnstile-response": "tok"})

        assert response.status_code == 502
        assert response.json() == {"message": "Upstream service unavailable"}
        assert "captcha.test" not in response.text
        assert caplog.records[-1].error == str(failure)
