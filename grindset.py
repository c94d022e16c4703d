"""
Command-line entry point.

    grindset two-sum py

Creates py/1_Two_Sum/<timestamp>/ under the current directory (or
$GRINDSET_ROOT) and prints the attempt folder on stdout.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from doc_converter import check_pandoc
from errors import ConverterUnavailable, GrindsetError
from language_map import supported_extensions
from practice_logger import log_practice

logger = logging.getLogger("grindset")

USAGE = (
    "Usage: `grindset <problem_title_slug e.g. two-sum> "
    "<language file extension WITHOUT dot; one of: {exts}>`"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grindset",
        description="Scaffold a LeetCode practice attempt.",
    )
    parser.add_argument("title_slug", nargs="?", help="e.g. two-sum")
    parser.add_argument("language_file_ext", nargs="?", help="e.g. py, js, cpp, rs")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        check_pandoc()
    except ConverterUnavailable as e:
        logger.error(str(e))
        return 1

    args = build_parser().parse_args(argv)
    if not (args.title_slug and args.language_file_ext):
        print(USAGE.format(exts=", ".join(supported_extensions())), file=sys.stderr)
        return 0

    try:
        attempt_folder = asyncio.run(log_practice(args.title_slug, args.language_file_ext))
    except GrindsetError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    logger.info("All done. Grindset time!")
    print(attempt_folder)
    return 0


if __name__ == "__main__":
    sys.exit(main())
