"""QuickBite database management CLI.

Creates and drops the database schema for the configured SQL provider and
loads the demo data.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load the admin user and demo menu
"""

import argparse
import sys


def setup_database():
    """Create the database schema."""
    from quickbite.domain import quickbite
    from quickbite.utils.db import setup_db

    print("Initializing quickbite domain...")
    quickbite.init()
    print("Creating database schema...")
    if setup_db(quickbite) == 0:
        print("  No SQL database configured (set PROTEAN_ENV=development or production).")
    else:
        print("  Schema ready.")

    print("Done.")


def drop_database():
    """Drop the database schema."""
    from quickbite.domain import quickbite
    from quickbite.utils.db import drop_db

    print("Initializing quickbite domain...")
    quickbite.init()
    print("Dropping database schema...")
    drop_db(quickbite)
    print("  Schema dropped.")

    print("Done.")


def seed_database():
    """Load demo data into an empty store."""
    from quickbite.domain import quickbite
    from quickbite.seed import seed_demo_data

    quickbite.init()
    with quickbite.domain_context():
        if seed_demo_data():
            print("Demo data loaded.")
        else:
            print("Store already has data, nothing to do.")


def main():
    parser = argparse.ArgumentParser(description="QuickBite database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load the admin user and demo menu")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
