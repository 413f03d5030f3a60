# lambda/lexweigh/cli.py
"""
lexweigh - pair generated word forms with definitions by weight.

Words are sorted by the summed weight of their tokens (lightest first) and
matched with definitions sorted by their leading numeric weight, so the
lightest words land on the most common meanings.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import RunOptions, read_lines, read_text, read_words
from .errors import ConfigError, LexweighError
from .observability import logger, set_debug
from .pairing import format_pair
from .pipeline import run

EPILOG = """\
If -s/--sorted is not given, every line of the definitions file must be a
numeric weight, whitespace, then the definition. The weight column is
dropped in the output.

Rule (format) files hold clauses of the form
    <weight> <token> [<token> ...];
with # comments. Without one, each letter counts as one token of weight 1.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexweigh",
        description="Match weight-sorted words with ranked definitions.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--format", dest="format_file", help="format file with weights for each token")
    parser.add_argument("-w", "--wordlist", help="file with list of words (default stdin)")
    parser.add_argument("-d", "--definitions", required=True,
                        help="file with list of definitions to match with the weight-sorted word list")
    parser.add_argument("-o", "--output", help="output file (default stdout)")
    parser.add_argument("-s", "--sorted", dest="presorted", action="store_true",
                        help="definition list is already sorted")
    parser.add_argument("-D", "--debug", action="store_true", help="debug logging")
    return parser


def _options_from_args(args: argparse.Namespace) -> RunOptions:
    rules = read_text(args.format_file) if args.format_file else None
    words = read_words(args.wordlist) if args.wordlist else read_words(sys.stdin)
    return RunOptions(
        words=words,
        definitions=read_lines(args.definitions),
        rules=rules,
        presorted=args.presorted,
    )


def _write(lines: List[str], output: Optional[str]) -> None:
    if not output:
        sys.stdout.writelines(lines)
        sys.stdout.flush()
        return
    try:
        with open(output, "w", encoding="utf-8", newline="") as fh:
            fh.writelines(lines)
    except OSError as exc:
        raise ConfigError(f"can't open {output} for writing") from exc


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_debug(args.debug)

    try:
        result = run(_options_from_args(args))
        _write([format_pair(p) for p in result.pairs], args.output)
    except LexweighError as exc:
        logger.error(str(exc), extra={"error": type(exc).__name__})
        return 1

    logger.debug("Lexicon written", extra={"pairs": len(result.pairs), "output": args.output or "stdout"})
    return 0


if __name__ == "__main__":
    sys.exit(main())
