from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .analyzer import analyze
from .config import AnalyzerConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError("--workers must be positive")
    return parsed


def build_parser(config: AnalyzerConfig) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="lexicon_sentiment",
        description="Score texts against a word lexicon and append the results to a file",
    )
    ap.add_argument("lexicon", nargs="?", default=config.lexicon_path, help="lexicon file, one 'word weight' per line")
    ap.add_argument("output", nargs="?", default=config.output_path, help="file to append records to")
    ap.add_argument("--text", action="append", dest="texts", help="text to score; repeat for several")
    ap.add_argument("--workers", type=_positive_int, default=config.max_workers)
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=config.log_level)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    config = AnalyzerConfig.from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r}; choose from {', '.join(LOG_LEVELS)}")
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    report = analyze(args.lexicon, args.output, texts=args.texts, max_workers=args.workers)
    print(f"{report.written}/{report.submitted} records written to {args.output} ({report.failed} failed)")
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
