"""Command-line entrypoint.

Responsibilities (and nothing more):
- Load Settings and configure structlog
- Build the Classifier from settings
- Dispatch to the ``check`` or ``bench`` subcommand
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import TYPE_CHECKING

import structlog

from absolute_url import __version__
from absolute_url.benchmark import format_results, run_benchmarks
from absolute_url.cache import ResultCache
from absolute_url.classifier import Classifier
from absolute_url.config import Settings
from absolute_url.log import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

log = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="absolute-url",
        description="Decide whether strings are absolute URLs.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="classify one or more strings")
    check.add_argument("urls", nargs="+", metavar="URL")
    policy = check.add_mutually_exclusive_group()
    policy.add_argument(
        "--any-scheme",
        dest="http_only",
        action="store_false",
        default=None,
        help="accept any RFC 3986 scheme, not only http/https",
    )
    policy.add_argument(
        "--http-only",
        dest="http_only",
        action="store_true",
        default=None,
        help="accept only http: and https: (the default)",
    )
    check.add_argument("--json", action="store_true", help="print one JSON object per line")

    bench = subparsers.add_parser("bench", help="run the throughput benchmark")
    bench.add_argument("--iterations", type=int, default=None, metavar="N")

    return parser


def _run_check(args: argparse.Namespace, classifier: Classifier) -> int:
    results = [(url, classifier.is_absolute(url, http_only=args.http_only)) for url in args.urls]

    for url, absolute in results:
        if args.json:
            print(json.dumps({"url": url, "absolute": absolute}))
        else:
            print(f"{str(absolute).lower()}\t{url}")

    rejected = sum(1 for _, absolute in results if not absolute)
    log.info("check_complete", checked=len(results), rejected=rejected)
    return 0 if rejected == 0 else 1


def _run_bench(args: argparse.Namespace, classifier: Classifier, settings: Settings) -> int:
    iterations = args.iterations if args.iterations is not None else settings.benchmark.iterations
    if iterations < 1:
        print(f"absolute-url: --iterations must be at least 1, got {iterations}", file=sys.stderr)
        return 2

    print(f"Running {iterations:,} iterations per test...\n")
    results = run_benchmarks(iterations, classifier)
    print(format_results(results))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = Settings()
    setup_logging(settings)

    classifier = Classifier(
        ResultCache(max_size=settings.cache.max_size),
        http_only=settings.classifier.http_only,
    )

    if args.command == "bench":
        return _run_bench(args, classifier, settings)
    return _run_check(args, classifier)
