#!/usr/bin/env python3
"""
CLI for routing a FNOL document.

Usage:
    python -m fnol_router.cli samples/fnol.txt
    cat samples/fnol.txt | python -m fnol_router.cli -
"""

import argparse
import json
import logging
import sys

from fnol_router.config import settings
from fnol_router.pipeline import process_document
from fnol_router.schemas import ErrorResponse


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract FNOL fields and recommend a claims queue",
    )
    parser.add_argument("path", help="FNOL text file, or '-' to read stdin")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def read_document(path: str) -> bytes:
    """Read raw document bytes from a file or stdin."""
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        content = read_document(args.path)
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e.strerror}", file=sys.stderr)
        return 1

    result = process_document(content)
    print(json.dumps(result.model_dump(), indent=2))
    return 1 if isinstance(result, ErrorResponse) else 0


if __name__ == "__main__":
    sys.exit(main())
