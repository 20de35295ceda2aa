from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from .analyze import Analyzer
from .config import AnalyzerConfig
from .errors import FetchError, ValidationError


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="seo-keywords",
        description="Fetch a page and report its most frequent keywords, bigrams and trigrams.",
    )
    parser.add_argument("url", help="Absolute page URL to analyze (e.g., https://example.com/post)")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Output the JSON result to stdout")
    parser.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds (default: 15)")
    parser.add_argument(
        "--strip-chrome",
        action="store_true",
        help="Also drop <header>, <footer>, <nav> and <aside> before extracting text",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = AnalyzerConfig.from_env()
    if args.timeout is not None and args.timeout > 0:
        config = replace(config, timeout=args.timeout)
    if args.strip_chrome:
        config = replace(config, strip_chrome=True)

    try:
        result = Analyzer(config).analyze(args.url)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except FetchError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    # Human-readable output
    print(f"URL: {result.url}")
    print(f"Tokens counted: {result.token_count}")
    print(f"\nText preview:\n  {result.text}")

    print("\nTop keywords:")
    if result.unigrams:
        for entry in result.unigrams:
            print(f"  - {entry.key}: {entry.count}")
    else:
        print("  (none)")

    for label, entries in (("Bigrams", result.bigrams), ("Trigrams", result.trigrams)):
        print(f"\n{label}:")
        if not entries:
            print("  (none)")
        for entry in entries:
            print(f"  - {entry.key} ({entry.count})")

    print("\nSample data (placeholders, not computed):")
    print(f"  Competitor keywords: {', '.join(result.competitor_keywords) or '(none)'}")
    print(f"  Trend categories: {', '.join(result.google_trends) or '(none)'}")
    for s in result.ai_suggestions:
        print(f"  - {s}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
