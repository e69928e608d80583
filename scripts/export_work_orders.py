#!/usr/bin/env python3
"""Export all work orders to work_orders_YYYY-MM-DD.json.

Usage:
  python3 scripts/export_work_orders.py --api http://localhost:4000 --out exports/

When the API is unreachable the last locally cached list (--cache) is exported instead.
"""
import sys
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.client import LocalStore, WorkOrderApi, WorkOrderBoard, export_json
from app.core.logging_config import configure_logging


def main():
    parser = argparse.ArgumentParser(description='Export work orders as JSON')
    parser.add_argument("--api", default="http://localhost:4000", help="API base URL")
    parser.add_argument("--out", default=".", help="Output directory")
    parser.add_argument("--cache", default=".work_orders_cache.json", help="Local fallback cache file")
    parser.add_argument("--status", default=None, help="Only export orders with this status")
    parser.add_argument("--q", default=None, help="Only export orders matching this search text")
    args = parser.parse_args()

    configure_logging()
    board = WorkOrderBoard(WorkOrderApi(args.api), LocalStore(args.cache))
    board.load()
    if board.degraded:
        print(f"Warning: {board.warning}")

    orders = board.filtered(status=args.status, q=args.q)
    path = export_json(orders, args.out)
    print(f"Exported {len(orders)} work orders to {path}")


if __name__ == '__main__':
    main()
