"""Shared schemas for docsite."""

from docsite.schemas.config_tree import ConfigNode, HeadingEntry
from docsite.schemas.signup import TurnstileOutcome

__all__ = ["ConfigNode", "HeadingEntry", "TurnstileOutcome"]
