#!/usr/bin/env python3
"""Command line interface for earthquake searches.

Usage:
    # Full search, opens the map in the browser
    quake-locator search Warsaw --start 01-01-2024 --end 31-03-2024 \\
        --min-magnitude 2.5 --radius 300

    # Last six months around a place, listed in the terminal
    quake-locator quick "Reykjavik"

    # Open the map for the third quick search result only
    quake-locator quick "Reykjavik" --open 3

    # Most recent earthquake worldwide
    quake-locator latest

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: WARNING)
"""

import argparse
import logging
import os
import sys
import webbrowser

from quake_locator.core.earthquake import format_record_line
from quake_locator.core.geo import distance_from
from quake_locator.core.links import build_map_link
from quake_locator.core.search import SearchForm
from quake_locator.core.state import SearchState, Status
from quake_locator.orchestrator import Orchestrator
from quake_locator.session import SearchSession
from quake_locator.shell.config_loader import load_config


EXIT_CODES = {
    Status.READY: 0,
    Status.EMPTY: 0,
    Status.INVALID: 2,
    Status.NOT_FOUND: 1,
    Status.FAILED: 1,
}


def print_state(state: SearchState) -> None:
    """Render a state on the terminal."""
    if state.status == Status.LOADING:
        print("Searching...")
    elif state.status == Status.INVALID:
        for error in state.field_errors:
            print(f"  {error.field}: {error.message}", file=sys.stderr)
    elif state.status in (Status.NOT_FOUND, Status.EMPTY, Status.FAILED):
        stream = sys.stdout if state.status == Status.EMPTY else sys.stderr
        print(state.message, file=stream)


def open_link(url: str, no_browser: bool) -> None:
    """Open a map link, or just print it."""
    if no_browser:
        print(url)
        return
    print("Opening map in browser...")
    webbrowser.open(url)


def _wait(session: SearchSession, future) -> SearchState:
    if future is None:
        return session.state
    return future.result()


def cmd_search(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    form = SearchForm(
        location=args.location,
        start_date=args.start,
        end_date=args.end,
        min_magnitude=args.min_magnitude,
        radius_km=args.radius,
    )

    with SearchSession(orchestrator, on_state=print_state) as session:
        state = _wait(session, session.submit_search(form))

    if state.status == Status.READY and state.map_url:
        print(f"Found {len(state.earthquakes)} earthquakes")
        open_link(state.map_url, args.no_browser)

    return EXIT_CODES.get(state.status, 1)


def cmd_quick(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    with SearchSession(orchestrator, on_state=print_state) as session:
        state = _wait(session, session.submit_quick_search(args.location))

    if state.status != Status.READY:
        return EXIT_CODES.get(state.status, 1)

    print(f"Found {len(state.earthquakes)} earthquakes:")
    for index, record in enumerate(state.earthquakes, start=1):
        line = f"  {index:3d}. {format_record_line(record)}"
        if state.center is not None:
            line += f" ({distance_from(record, state.center):.0f} km away)"
        print(line)

    if args.open is not None:
        if not 1 <= args.open <= len(state.earthquakes):
            print(f"No result number {args.open}", file=sys.stderr)
            return 2
        record = state.earthquakes[args.open - 1]
        open_link(
            build_map_link([record], base_url=orchestrator.config.map_viewer_url),
            args.no_browser,
        )
    elif args.map and state.earthquakes and state.map_url:
        open_link(state.map_url, args.no_browser)

    return 0


def cmd_latest(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    print(orchestrator.latest_summary())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quake-locator",
        description="Find earthquakes near a place and view them on a map",
    )
    parser.add_argument(
        "--config",
        help="Path to config file (default: CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Print map links instead of opening them",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search with full criteria")
    search.add_argument("location", help="Place name to search around")
    search.add_argument("--start", required=True, help="Start date (DD-MM-YYYY)")
    search.add_argument("--end", required=True, help="End date (DD-MM-YYYY)")
    search.add_argument("--min-magnitude", required=True, help="Minimum magnitude (0-10)")
    search.add_argument("--radius", required=True, help="Search radius in km")
    search.set_defaults(handler=cmd_search)

    quick = subparsers.add_parser("quick", help="Last months around a place")
    quick.add_argument("location", help="Place name to search around")
    quick.add_argument("--open", type=int, metavar="N", help="Open the map for result N")
    quick.add_argument("--map", action="store_true", help="Open the map for all results")
    quick.set_defaults(handler=cmd_quick)

    latest = subparsers.add_parser("latest", help="Most recent earthquake worldwide")
    latest.set_defaults(handler=cmd_latest)

    return parser


def main(argv: list[str] | None = None) -> int:
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(levelname)s: %(message)s",
    )

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return args.handler(args, Orchestrator(config))


if __name__ == "__main__":
    sys.exit(main())
