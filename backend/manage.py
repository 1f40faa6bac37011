#!/usr/bin/env python3
"""
Project management commands.

Usage:
    python manage.py create-tables
    python manage.py seed-db
    python manage.py check-db
    python manage.py reset-db
"""
import argparse
import asyncio

from evcharge.core.config import settings
from evcharge.core.database import AsyncSessionLocal, engine, init_db, drop_db
from evcharge.core.logging import configure_logging
from evcharge.services.seed import seed_database
from evcharge.services.stations import list_stations


async def create_tables():
    await init_db()
    print("Tables created")


async def seed_db():
    await init_db()
    async with AsyncSessionLocal() as session:
        inserted = await seed_database(session)
    print(f"Inserted {inserted['users']} users and {inserted['stations']} stations")


async def check_db():
    """Print every station in the database."""
    async with AsyncSessionLocal() as session:
        stations = await list_stations(session)

    print(f"\n{len(stations)} charging stations in {settings.database_url}\n")
    for station in stations:
        print(
            f"#{station.id:<4} {station.name:<30} {station.status.value:<9}"
            f" {station.power_output:>7.1f} kW  {station.connector_type}"
            f"  ({station.latitude:.4f}, {station.longitude:.4f})"
        )


async def reset_db():
    """Drop and recreate all tables, then seed them."""
    confirm = input("This deletes all data. Continue? (yes/no): ")
    if confirm.lower() != "yes":
        print("Cancelled")
        return
    await drop_db()
    await seed_db()


COMMANDS = {
    "create-tables": create_tables,
    "seed-db": seed_db,
    "check-db": check_db,
    "reset-db": reset_db,
}


async def run(command: str):
    try:
        await COMMANDS[command]()
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Manage the EV charging station database")
    parser.add_argument("command", choices=list(COMMANDS), help="Command to run")
    args = parser.parse_args()

    configure_logging(settings.log_level)
    asyncio.run(run(args.command))


if __name__ == "__main__":
    main()
