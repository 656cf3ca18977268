"""Command line entry point: parse a document and list its component schemas."""

from __future__ import annotations

import argparse
import sys

from oaspec.document import load_description_file
from oaspec.primitives import SchemaError


def main(argv: list[str] | None = None) -> int:
    """Parse an OpenAPI document and print each component schema."""
    parser = argparse.ArgumentParser(
        prog="oaspec",
        description="Parse an OpenAPI document and list its component schemas.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="openapi.yaml",
        help="document to read (default: openapi.yaml)",
    )
    args = parser.parse_args(argv)
    try:
        spec = load_description_file(args.path)
    except (OSError, SchemaError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    schemas = spec.components.schemas if spec.components is not None else None
    for name, item in (schemas or {}).items():
        print()
        print(f"{name!r}: {item!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())