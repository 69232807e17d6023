#!/usr/bin/env python3
"""
Database management script for the Freelance Hub backend.
Checks connectivity, creates indexes and reports collection sizes.
"""

import sys
import asyncio
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import get_settings
from app.infrastructure.db.database import INDEXES, MongoDatabase


async def ping():
    """Check that the configured deployment answers."""
    database = MongoDatabase(get_settings())
    try:
        await database.ping()
        print(f"Connected to {database.settings.db_name}")
    finally:
        database.close()


async def create_indexes():
    """Create the job and accepted task indexes."""
    database = MongoDatabase(get_settings())
    try:
        await database.ensure_indexes()
        for collection, indexes in INDEXES.items():
            names = ", ".join(index.document["name"] for index in indexes)
            print(f"{collection}: {names}")
    finally:
        database.close()


async def convert_dates():
    """Convert string postingDate values to dates."""
    database = MongoDatabase(get_settings())
    try:
        converted = await database.convert_legacy_posting_dates()
        print(f"Converted {converted} job posting dates")
    finally:
        database.close()


async def show_stats():
    """Show document counts per collection."""
    database = MongoDatabase(get_settings())
    try:
        for collection, count in (await database.collection_stats()).items():
            print(f"{collection}: {count} documents")
    finally:
        database.close()


COMMANDS = {
    "ping": ping,
    "indexes": create_indexes,
    "stats": show_stats,
    "dates": convert_dates,
}


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  ping           - Check the database connection")
        print("  indexes        - Create collection indexes")
        print("  stats          - Show document counts")
        print("  dates          - Convert string posting dates to dates")
        return

    command_name = sys.argv[1]

    if command_name not in COMMANDS:
        print(f"Unknown command: {command_name}")
        sys.exit(1)

    asyncio.run(COMMANDS[command_name]())


if __name__ == "__main__":
    main()
