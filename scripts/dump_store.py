#!/usr/bin/env python3
"""Print the seeded record store as JSON.

Run from the repository root:

    python3 scripts/dump_store.py [--collection NAME] [--stats] [--overview] [--indent N]

Builds a fresh RecordStore without simulated latency and writes the
requested collections (all by default), the dashboard stats and/or the
department overview to stdout using the API's camelCase field names.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from staffboard.services.record_store import RecordStore, StoreDelays  # noqa: E402

logger = logging.getLogger(__name__)

COLLECTIONS = ("employees", "roles", "departments", "reviews")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dump the seeded staffboard record store as JSON",
    )
    parser.add_argument(
        "--collection",
        choices=COLLECTIONS,
        action="append",
        help="Collection to include; repeatable (default: all collections)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Include the dashboard stats",
    )
    parser.add_argument(
        "--overview",
        action="store_true",
        help="Include the per-department overview",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def build_snapshot(store: RecordStore, args: argparse.Namespace) -> dict[str, Any]:
    loaders = {
        "employees": store.list_employees,
        "roles": store.list_roles,
        "departments": store.list_departments,
        "reviews": store.list_reviews,
    }
    snapshot: dict[str, Any] = {}

    for name in args.collection or COLLECTIONS:
        records = await loaders[name]()
        snapshot[name] = [r.model_dump(mode="json", by_alias=True) for r in records]
        logger.debug("Loaded %d %s", len(records), name)

    if args.stats:
        stats = await store.get_dashboard_stats()
        snapshot["stats"] = stats.model_dump(mode="json", by_alias=True)

    if args.overview:
        overview = await store.get_department_overview()
        snapshot["overview"] = [o.model_dump(mode="json", by_alias=True) for o in overview]

    return snapshot


async def dump(args: argparse.Namespace) -> str:
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s", stream=sys.stderr)

    store = RecordStore(StoreDelays())
    try:
        snapshot = await build_snapshot(store, args)
    finally:
        await store.close()
    return json.dumps(snapshot, indent=args.indent)


def main() -> None:
    args = parse_args()
    print(asyncio.run(dump(args)))


if __name__ == "__main__":
    main()
