"""docsite: helpers for the documentation website."""

from docsite.config import SignupSettings, load_signup_settings
from docsite.exceptions import (
    ConfigurationError,
    DocsiteError,
    FetchError,
    HeadingDepthError,
    SchemaError,
)
from docsite.headings import count_config_headings, generate_config_heading_id, generate_config_headings
from docsite.schema_loader import headings_for_schema, load_config_tree, parse_config_tree
from docsite.schemas import ConfigNode, HeadingEntry

__all__ = [
    "ConfigNode",
    "ConfigurationError",
    "DocsiteError",
    "FetchError",
    "HeadingDepthError",
    "HeadingEntry",
    "SchemaError",
    "SignupSettings",
    "count_config_headings",
    "generate_config_heading_id",
    "generate_config_headings",
    "headings_for_schema",
    "load_config_tree",
    "load_signup_settings",
    "parse_config_tree",
]
