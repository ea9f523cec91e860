"""Command-line entry point for recon."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Sequence

from .errors import ReconError
from .parser import Parser

logger = logging.getLogger("recon.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="recon",
        description="Scrape a URL for its OpenGraph metadata and best images, printed as JSON.",
    )
    parser.add_argument("url", help="URL of the page to parse")
    return parser.parse_args(argv)


def _configure_logging() -> None:
    # Logs go to stderr so stdout only ever carries JSON.
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging()

    try:
        result = Parser().parse(args.url)
    except ReconError as exc:
        logger.debug("Parse failed", exc_info=True)
        sys.stderr.write(f"Error parsing {args.url}: {exc}\n")
        return 1

    sys.stdout.write(json.dumps(result.to_dict(), indent=3, ensure_ascii=False) + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
