"""Regenerate daily attendance outside of the HTTP API (e.g. from a nightly cron).

    python scripts/generate_attendance.py --start 2024-03-01 --end 2024-03-31
    python scripts/generate_attendance.py --employee-id 7 --start 2024-03-04 --end 2024-03-04
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_reconciliation.attendance_reconciliation.container import build_container

logger = logging.getLogger("generate_attendance")


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate/update daily attendance records")
    parser.add_argument("--start", required=True, help="YYYY-MM-DD")
    parser.add_argument("--end", required=True, help="YYYY-MM-DD")
    parser.add_argument("--employee-id", type=int, help="only this employee (default: every active employee)")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    container = build_container(db_config=settings.DB_CONFIG, engine_config=getattr(settings, "ENGINE_CONFIG", {}))
    service = container.attendance_service
    if args.employee_id is not None:
        result = service.generate(args.employee_id, args.start, args.end)
    else:
        result = service.generate_active(args.start, args.end)

    logger.info(result["message"])
    for error in result["errors"]:
        logger.error("employee=%s date=%s: %s", error["employee_id"], error["date"], error["reason"])
    return 1 if result["errors"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
