#!/usr/bin/env python3
"""
Add a project directly to the configured database.

Usage:
  python scripts/add_project.py --name "Kitchen refresh" --description "..." --image https://...
"""
from __future__ import annotations

import argparse
import sys

from realty_api.db.create_tables import create_all
from realty_api.domain.errors import RecordError, ValidationError
from realty_api.domain.records import PROJECT
from realty_api.repositories.sql_repository import SQLRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a project to the database")
    ap.add_argument("--name", required=True, help="Project title")
    ap.add_argument("--description", required=True, help="Short description shown on the card")
    ap.add_argument("--image", required=True, help="Image URL")
    args = ap.parse_args()

    create_all()
    repo = SQLRepository()
    try:
        record = repo.create(PROJECT, {"name": args.name, "description": args.description, "image": args.image})
    except ValidationError:
        raise SystemExit("name, description and image must not be blank")
    print("OK: project added")
    print(f"  id: {record['_id']}")
    print(f"  name: {record['name']}")


if __name__ == "__main__":
    try:
        main()
    except RecordError as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
