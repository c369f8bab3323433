"""Command line interface for hanja lookups."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import List, Optional

from tabulate import tabulate

from .config import LookupConfig
from .fetcher import HttpFetcher
from .lookup import HanjaDictionary
from .models import FAILED, LookupResult

LOGGER = logging.getLogger("hanja_lookup")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up hanja in the Daum dictionary")
    parser.add_argument("queries", nargs="+", metavar="QUERY", help="Character(s) to look up")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--summary", action="store_true", help="Print a summary table instead of entries")
    parser.add_argument("--timeout", help="Per-request timeout in seconds")
    parser.add_argument("--base-url", help="Dictionary site root URL")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


async def run_lookups(queries: List[str], config: LookupConfig, progress: bool = True) -> List[LookupResult]:
    async with HttpFetcher(config) as fetcher:
        dictionary = HanjaDictionary(fetcher, config)
        return await dictionary.lookup_many(queries, progress=progress)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    queries = [query.strip() for query in args.queries]
    if not all(queries):
        parser.error("queries must not be empty")
    try:
        config = LookupConfig.from_env().with_overrides(timeout=args.timeout, base_url=args.base_url)
    except ValueError as exc:
        parser.error(str(exc))

    results = asyncio.run(run_lookups(queries, config, progress=not args.no_progress))

    if args.json:
        print(json.dumps([result.to_dict() for result in results], ensure_ascii=False, indent=2))
    elif args.summary:
        _print_summary(results)
    else:
        _print_results(results)
    return 0 if all(result.found for result in results) else 1


def _print_results(results: List[LookupResult]) -> None:
    for index, result in enumerate(results):
        if index:
            print()
        if result.status == FAILED:
            print(f"Lookup failed for {result.query}: {result.error}")
        else:
            print(result.text, end="" if result.found else "\n")


def _print_summary(results: List[LookupResult]) -> None:
    rows = []
    for result in results:
        entry = result.entry
        rows.append(
            [
                result.query,
                result.status,
                entry.reading.strip() if entry else "",
                len(entry.blocks) if entry else "",
            ]
        )
    print(tabulate(rows, headers=["Query", "Status", "Reading", "Blocks"]))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
