"""Load configuration schema trees from JSON documents."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from docsite.config import DOCSITE_MAX_SCHEMA_DEPTH
from docsite.exceptions import SchemaError
from docsite.headings import generate_config_headings
from docsite.schemas import ConfigNode, HeadingEntry
from docsite.utils.logging_config import get_logger

logger = get_logger(__name__)


def parse_config_tree(text: str | bytes) -> ConfigNode:
    """Validate a JSON document into a ``ConfigNode`` tree.

    Raises:
        SchemaError: If the document is not valid JSON or does not match the
            ``ConfigNode`` shape.
    """
    try:
        return ConfigNode.model_validate_json(text)
    except ValidationError as exc:
        raise SchemaError(f"Invalid configuration schema: {exc.error_count()} error(s)\n{exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaError(f"Configuration schema is not valid UTF-8: {exc}") from exc


def load_config_tree(path: Path) -> ConfigNode:
    """Read and parse a schema file.

    Raises:
        SchemaError: If the file is missing or its content is invalid.
    """
    if not path.is_file():
        raise SchemaError(f"Schema file not found: {path}")
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise SchemaError(f"Cannot read schema file {path}: {exc}") from exc
    tree = parse_config_tree(raw)
    logger.debug("Loaded configuration schema", extra={"path": str(path)})
    return tree


def headings_for_schema(path: Path, *, max_depth: int | None = DOCSITE_MAX_SCHEMA_DEPTH) -> list[HeadingEntry]:
    """Load a schema file and generate its headings."""
    tree = load_config_tree(path)
    headings = generate_config_headings(tree, max_depth=max_depth)
    logger.info("Generated configuration headings", extra={"path": str(path), "headings": len(headings)})
    return headings
