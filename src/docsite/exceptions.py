"""Custom exceptions for docsite."""


class DocsiteError(Exception):
    """Base exception for docsite operations."""


class ConfigurationError(DocsiteError):
    """A required setting is missing or invalid."""


class SchemaError(DocsiteError):
    """Configuration schema document is missing or malformed."""


class HeadingDepthError(DocsiteError):
    """Schema tree is nested deeper than the allowed maximum."""


class FetchError(DocsiteError):
    """Error during an outbound HTTP call."""
