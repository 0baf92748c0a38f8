#!/usr/bin/env python3
"""Compute and print the executive summary for one condominium.

Usage:
    python scripts/print_executive_summary.py --condominium-id <uuid>
    python scripts/print_executive_summary.py --condominium-id <uuid> --as-of 2026-10-01

Reads from the configured database (DATABASE_URL). Prints the summary as JSON.
Exits 0 on success, 1 on failure.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import get_settings
from app.db.session import SessionLocal
from app.schemas.executive import ExecutiveSummaryResponse
from app.services.executive.dashboard_engine import compute_executive_summary
from app.services.executive.dataset_loader import load_dataset_sync
from app.storage import DataFetchError, SqlStorage


def _parse_as_of(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--condominium-id", default=None, help="Tenant id (default: all rows)")
    parser.add_argument("--as-of", default=None, help="Reference date YYYY-MM-DD (default: now)")
    args = parser.parse_args(argv)

    settings = get_settings()
    try:
        dataset = load_dataset_sync(SqlStorage(SessionLocal), args.condominium_id)
        summary = compute_executive_summary(
            dataset,
            _parse_as_of(args.as_of),
            condominium_id=args.condominium_id,
            expiring_days=settings.expiring_window_days,
            recent_decisions_days=settings.recent_decisions_days,
            recent_announcements_days=settings.recent_announcements_days,
        )
    except (DataFetchError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    response = ExecutiveSummaryResponse.model_validate(summary, from_attributes=True)
    print(response.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
