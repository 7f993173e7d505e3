"""Test setup for docsite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from docsite.config import SignupSettings  # noqa: E402


@pytest.fixture
def signup_settings() -> SignupSettings:
    """Signup settings pointing at placeholder endpoints."""
    return SignupSettings(
        turnstile_secret="test-secret",
        newsletter_list_id="test-list",
        verify_url="https://captcha.test/siteverify",
        subscribe_url="https://newsletter.test/subscription/form",
        timeout_s=1.0,
        user_agent="docsite-tests",
    )
