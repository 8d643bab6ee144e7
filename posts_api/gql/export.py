"""GraphQL schema export.

Usage:
    posts-api-schema [PATH] [--no-sort]
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from graphql import lexicographic_sort_schema, print_schema
from loguru import logger

from ..core.config import get_settings
from .graphql import schema


def schema_sdl(sort: bool = True) -> str:
    """Render the GraphQL schema as SDL.

    Args:
        sort: Order types and fields lexicographically

    Returns:
        The schema definition language text
    """
    if not sort:
        return schema.as_str()
    return print_schema(lexicographic_sort_schema(schema._schema))


def write_schema_file(path: str | Path, sort: bool = True) -> Path:
    """Write the schema SDL to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(schema_sdl(sort=sort) + "\n", encoding="utf-8")
    logger.info(f"GraphQL schema written to {path}")
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Export the GraphQL schema")
    parser.add_argument(
        "path",
        nargs="?",
        default=settings.schema_file,
        help="Output file (prints to stdout when omitted)",
    )
    parser.add_argument(
        "--no-sort",
        dest="sort",
        action="store_false",
        default=settings.sort_schema,
        help="Keep declaration order instead of sorting",
    )
    args = parser.parse_args(argv)

    if args.path:
        write_schema_file(args.path, sort=args.sort)
    else:
        sys.stdout.write(schema_sdl(sort=args.sort) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
