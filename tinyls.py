#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "pydantic>=2.0.0",
# ]
# ///

"""List directory contents with color, type markers and long-format metadata."""

import logging
import os
import sys
from typing import Mapping, Optional, Sequence

from arguments import classify
from errors import ArgumentParseError, DirectoryReadError, MetadataReadError
from printer import render

LOG_LEVEL_VARIABLE = "TINYLS_LOG_LEVEL"


def log_level(environ: Mapping[str, str]) -> int:
    name = environ.get(LOG_LEVEL_VARIABLE, "WARNING").upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)


def configure_logging(environ: Mapping[str, str]) -> None:
    """Send log records to stderr at the level named in TINYLS_LOG_LEVEL."""
    logging.basicConfig(
        level=log_level(environ),
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def color_enabled(environ: Mapping[str, str]) -> bool:
    # https://no-color.org/
    return not environ.get("NO_COLOR")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    configure_logging(os.environ)

    try:
        config = classify(sys.argv if argv is None else argv)
    except ArgumentParseError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        render(config, sys.stdout, color=color_enabled(os.environ))
    except (DirectoryReadError, MetadataReadError) as e:
        sys.stdout.flush()
        print(f"Problem reading input directory: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
