"""Command-line entry point: ``kana-trans <mode> <text>``."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from cmu.dictionary import CMUBridgeError
from common.config import get_settings
from core.pipeline import ConversionMode, transliterate
from kana.errors import TransliterationError

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONVERSION_FAILED = 2

MODE_HELP = ", ".join(mode.value for mode in ConversionMode)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kana-trans",
        description="Transliterate between Latin text and Japanese kana",
    )
    parser.add_argument("mode", help=f"One of: {MODE_HELP}")
    parser.add_argument("text", help="Latin text, kana, or an English word for cmu_* modes")
    return parser


def _configure_logging() -> None:
    level = get_settings().log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if len(args_list) != 2 and not {"-h", "--help"} & set(args_list):
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    args = parser.parse_args(args_list)
    _configure_logging()

    try:
        mode = ConversionMode(args.mode)
    except ValueError:
        print(f"Unknown mode '{args.mode}'. Available modes: {MODE_HELP}")
        parser.print_usage(sys.stdout)
        return EXIT_OK

    try:
        result = transliterate(args.text, mode)
    except (TransliterationError, CMUBridgeError) as exc:
        LOGGER.debug("conversion failed mode=%s", mode.value, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONVERSION_FAILED

    print(result.text)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
