#!/usr/bin/env python3
"""Command-line employee lookup.

Runs the live-suggestion and navigation logic against either a JSON roster
file or the configured roster source. Run from the backend/ directory:

    python3 scripts/lookup.py "Ana" [--commit] [--policy strict|loose]
                              [--roster-file roster.json] [--limit N] [--verbose]

Prints the suggestions and, with --commit, the resolved destination as JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from staff_lookup.core.config import NavigationPolicy, Settings  # noqa: E402
from staff_lookup.core.match_index import build_index  # noqa: E402
from staff_lookup.core.navigation import resolve  # noqa: E402
from staff_lookup.core.roster import RosterSnapshot  # noqa: E402
from staff_lookup.models.employee import EmployeeDetail  # noqa: E402
from staff_lookup.services.employee_service import employee_service  # noqa: E402
from staff_lookup.services.roster_api_client import roster_api_client  # noqa: E402
from staff_lookup.services.roster_store import RosterStore  # noqa: E402
from staff_lookup.services.suggestion_service import compute_suggestions  # noqa: E402

logger = logging.getLogger(__name__)


def load_roster_file(path: str | Path) -> list[EmployeeDetail]:
    """Read a roster from a JSON array of employee objects."""
    with Path(path).open(encoding="utf-8") as f:
        items = json.load(f)

    if isinstance(items, dict):
        items = items.get("value", [])

    records: list[EmployeeDetail] = []
    for item in items:
        if not isinstance(item, dict) or item.get("id") in (None, ""):
            logger.warning("Skipping roster entry without an id")
            continue
        data = {key: str(value) if isinstance(value, (int, float)) else value for key, value in item.items()}
        records.append(EmployeeDetail.model_validate(data))
    return records


async def fetch_roster(settings: Settings) -> RosterSnapshot:
    store = RosterStore()
    source = roster_api_client if settings.ROSTER_SOURCE == "http" else employee_service
    try:
        await source.initialize(settings)
        await store.initialize(settings, source=source)
    finally:
        await source.close()

    if not store.snapshot.available:
        logger.warning("Roster unavailable: %s", store.last_error)
    return store.snapshot


def run_lookup(snapshot: RosterSnapshot, args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    index = build_index(snapshot, threshold=settings.MATCH_THRESHOLD)
    limit = args.limit if args.limit is not None else settings.SUGGESTION_LIMIT
    suggestions = compute_suggestions(index, args.query, limit=limit)

    result: dict[str, Any] = {
        "query": args.query,
        "roster_size": len(snapshot),
        "suggestions": [s.model_dump() for s in suggestions],
    }
    if args.commit:
        policy = NavigationPolicy(args.policy) if args.policy else settings.NAVIGATION_POLICY
        result["destination"] = resolve(args.query, suggestions, policy=policy).model_dump()
    return result


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Look up employees by partial name or identifier",
    )
    parser.add_argument("query", help="Search text as typed by the user")
    parser.add_argument(
        "--commit",
        action="store_true",
        help="Also resolve the query as a committed search",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in NavigationPolicy],
        default=None,
        help="Navigation policy (default: NAVIGATION_POLICY setting)",
    )
    parser.add_argument(
        "--roster-file",
        default=None,
        help="JSON roster file to use instead of the configured source",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of suggestions (default: SUGGESTION_LIMIT setting)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def lookup(args: argparse.Namespace) -> dict[str, Any]:
    settings = Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s", stream=sys.stderr)

    if args.roster_file:
        logger.info("Loading roster from %s", args.roster_file)
        snapshot = RosterSnapshot(load_roster_file(args.roster_file), version=1)
    else:
        logger.info("Fetching roster from %s source...", settings.ROSTER_SOURCE)
        snapshot = await fetch_roster(settings)

    logger.info("Roster has %d employees", len(snapshot))
    return run_lookup(snapshot, args, settings)


def main() -> None:
    args = parse_args()
    result = asyncio.run(lookup(args))
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
