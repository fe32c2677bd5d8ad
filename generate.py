#!/usr/bin/env python3
"""Scrape Pealim dictionary pages into copy-friendly HTML tables.

For every URL: fetch the page (or read it from the cache or --html-file),
parse the noun, adjective or verb tables, render them and save the result
as <last-url-segment>.html in the output folder.

Usage:
    python generate.py https://www.pealim.com/dict/1-lichtov/ --verbose
    python generate.py https://www.pealim.com/dict/2-patur/ --html-file page.html --no-save --json

Exit codes: 0 on success, 1 if any page could not be fetched, 2 on usage,
config or part-of-speech errors.
"""

import argparse
import dataclasses
import json
import time
from pathlib import Path
from typing import List, Optional

from pealim.common.config import ScraperConfig, get_cache_dir, get_output_dir, load_config
from pealim.common.cache import read_cached_page, write_cached_page
from pealim.common.errors import PageFetchError, PartOfSpeechError
from pealim.common.logging import log_debug, log_error, log_verbose
from pealim.input import fetch_page_html, parse_page
from pealim.output import generate_html, save_html_file
from pealim.schema import PARTS_OF_SPEECH


EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_USAGE = 2


def load_page(url: str, config: ScraperConfig, html_file: Optional[Path], verbose: bool) -> str:
    """Return page HTML from --html-file, the cache, or the network (in that order)."""
    if html_file is not None:
        log_verbose(verbose, "input", f"Reading {html_file}")
        return html_file.read_text(encoding="utf-8")

    cache_dir = get_cache_dir(config)
    if cache_dir is not None:
        cached = read_cached_page(cache_dir, url, verbose=verbose)
        if cached is not None:
            return cached

    html = fetch_page_html(url, timeout=config.timeout, max_retries=config.max_retries, verbose=verbose)
    if cache_dir is not None:
        write_cached_page(cache_dir, url, html, verbose=verbose)
    return html


def process_url(url: str, config: ScraperConfig, args: argparse.Namespace) -> int:
    """Fetch, parse, render and save one page. Returns an exit code for that page."""
    html_file = Path(args.html_file) if args.html_file else None
    try:
        page = load_page(url, config, html_file, args.verbose)
    except PageFetchError as e:
        log_error(str(e))
        return EXIT_FETCH_FAILED
    except OSError as e:
        log_error(f"Could not read {html_file}: {e}")
        return EXIT_USAGE

    try:
        result = parse_page(
            page,
            url,
            part_of_speech=args.pos,
            use_ch_to_kh=config.use_ch_to_kh,
            use_tz_to_c=config.use_tz_to_c,
            debug=args.debug,
        )
    except PartOfSpeechError as e:
        log_error(f"{url}: {e}")
        return EXIT_USAGE

    log_verbose(args.verbose, "parse", f"{url} -> {result.pos}")

    if not args.no_save:
        rendered = generate_html(result)
        save_html_file(rendered, url, get_output_dir(config), verbose=args.verbose)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape Pealim noun, adjective and verb pages into HTML tables"
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="Pealim dictionary page URL(s)")
    parser.add_argument(
        "--pos",
        choices=PARTS_OF_SPEECH,
        help="Part of speech (default: detected from the page)",
    )
    parser.add_argument(
        "--html-file",
        help="Parse this local HTML file instead of fetching (single URL only)",
    )
    parser.add_argument(
        "--no-ch-to-kh",
        action="store_true",
        help='Keep "ch" in transliterations',
    )
    parser.add_argument(
        "--no-tz-to-c",
        action="store_true",
        help='Keep "tz" in transliterations',
    )
    parser.add_argument(
        "--output-dir",
        help="Folder for generated HTML files (overrides config)",
    )
    parser.add_argument(
        "--config",
        help="Path to pealim.config.json (default: ./pealim.config.json)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write HTML files",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each parsed record as JSON",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait between pages (overrides config)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.html_file and len(args.urls) != 1:
        log_error("--html-file takes exactly one URL")
        return EXIT_USAGE

    try:
        config = load_config(Path(args.config) if args.config else None)
        overrides = {}
        if args.output_dir:
            overrides["output_dir"] = args.output_dir
        if args.no_ch_to_kh:
            overrides["use_ch_to_kh"] = False
        if args.no_tz_to_c:
            overrides["use_tz_to_c"] = False
        if args.delay is not None:
            overrides["delay"] = args.delay
        config = dataclasses.replace(config, **overrides)
    except (OSError, ValueError) as e:
        log_error(f"Invalid configuration: {e}")
        return EXIT_USAGE

    log_debug(args.debug, f"config: {config}")

    exit_code = EXIT_OK
    for index, url in enumerate(args.urls):
        if index > 0 and config.delay > 0:
            time.sleep(config.delay)
        exit_code = max(exit_code, process_url(url, config, args))

    if args.verbose:
        status = "done" if exit_code == EXIT_OK else f"finished with errors (exit {exit_code})"
        print(f"[done] {len(args.urls)} page(s) {status}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
