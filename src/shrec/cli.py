"""Command-line entry point: ``shrec shares.json``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from shrec import __version__
from shrec.document import load_document
from shrec.errors import ReconstructionError
from shrec.models import to_decimal

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shrec",
        description="Reconstruct a Shamir secret from a JSON share document.",
    )
    parser.add_argument("path", help="JSON document with 'keys' and share entries")
    parser.add_argument(
        "-k",
        "--threshold",
        type=int,
        default=None,
        help="threshold k; overrides or supplies the document's k",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log decoding details"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = load_document(args.path, args.threshold)
        secret = document.recover()
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.path, exc)
        return 1
    except ReconstructionError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return exc.exit_code

    print(to_decimal(secret))
    return 0


if __name__ == "__main__":
    sys.exit(main())
