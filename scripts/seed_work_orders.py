#!/usr/bin/env python3
"""Seed a few sample work orders for local development.

This script is runnable directly (python scripts/seed_work_orders.py) and also import-safe.
If you see `ModuleNotFoundError: No module named 'app'`, run from the project root or set PYTHONPATH=. before running.
"""
import sys
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.db import Base, engine, transaction
from app import crud, schemas


import argparse

SAMPLE_ORDERS = [
    {
        "jobNumber": "A1024",
        "jobName": "Acme Office Renovation",
        "jobPM": "Dana Reyes",
        "jobAddress": "100 Main St",
        "status": "Issued",
        "items": [
            {"type": "Door", "scope": "Assemble", "elevation": "A1", "quantity": 2,
             "completionDates": ["2025-01-10", "2025-01-15"]},
            {"type": "Storefront", "scope": "Kit", "elevation": "B2", "quantity": 1},
        ],
    },
    {
        "jobNumber": "B2048",
        "jobName": "Harbor Clinic",
        "jobPM": "Sam Ortiz",
        "jobAddress": "42 Pier Rd",
        "status": "On Hold",
        "items": [
            {"type": "Curtainwall", "elevation": "North", "quantity": 6, "status": "On Hold",
             "holdReason": "Short Material"},
        ],
    },
]


def seed(force=False):
    """Insert SAMPLE_ORDERS; returns the created work orders (empty when already seeded)."""
    created = []
    with transaction() as db:
        if crud.list_work_orders(db) and not force:
            return created
        for raw in SAMPLE_ORDERS:
            order = crud.create_work_order(db, schemas.WorkOrderCreate.model_validate(raw))
            created.append((order.work_order_number, order.job_name))
    return created


def main():
    parser = argparse.ArgumentParser(description='Seed sample work orders.')
    parser.add_argument('--force', action='store_true', help='Seed even if work orders already exist')
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)

    created = seed(force=args.force)
    if not created:
        print("Work orders already seeded")
    for number, job_name in created:
        print(f"Created {number} ({job_name})")


if __name__ == '__main__':
    main()
