#!/usr/bin/env python3
import argparse
import logging
import sys
from dataclasses import replace
from typing import List

from sedwords import __version__
from sedwords.config import config
from sedwords.error_handler import format_error_for_logging, format_user_friendly_error
from sedwords.errors import SedWordsError
from sedwords.finder import find_sed_pairs
from sedwords.output import write_matches

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sedwords",
        description="Find words that work as sed substitute commands, and the word pairs they convert",
    )
    p.add_argument("wordlist", help="Word list file, one word per line")
    p.add_argument("-v", "--verbose", action="store_true", help="Trace both passes on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(argv)

    cfg = replace(config, enable_debug=True) if args.verbose else config
    setup_logging(cfg.effective_log_level)

    try:
        matches = find_sed_pairs(args.wordlist, cfg)
    except SedWordsError as e:
        logger.debug(format_error_for_logging(e, context=args.wordlist))
        friendly = format_user_friendly_error(e)
        print(f"{e}", file=sys.stderr)
        print(friendly["suggestion"], file=sys.stderr)
        return 1

    write_matches(matches, sys.stdout, cfg.column_width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
