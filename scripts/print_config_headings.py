"""Print the heading anchors generated for a configuration schema file."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from docsite.config import DOCSITE_MAX_SCHEMA_DEPTH
from docsite.schema_loader import headings_for_schema
from docsite.utils.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="List configuration headings and their anchor slugs.")
    parser.add_argument("schema", help="Path to a JSON configuration schema")
    parser.add_argument("--json", action="store_true", help="Emit the headings as a JSON array")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DOCSITE_MAX_SCHEMA_DEPTH,
        help="Deepest nesting level accepted (default: %(default)s)",
    )
    args = parser.parse_args()
    configure_logging()

    headings = headings_for_schema(Path(args.schema), max_depth=args.max_depth)

    if args.json:
        print(json.dumps([heading.model_dump() for heading in headings], indent=2))
        return

    for heading in headings:
        indent = "  " * (heading.depth - 2)
        print(f"{indent}{heading.text}  #{heading.slug}")


if __name__ == "__main__":
    main()
