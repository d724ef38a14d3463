#!/usr/bin/env python3
"""
Database Clear Script for the Recipe Instructions Backend

Removes all rows from the database tables while keeping the table structure.

Usage:
    python scripts/clear_database.py
    python scripts/clear_database.py --force   # Skip confirmation prompt
"""

import sys
from pathlib import Path

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.database import engine
from app.models import User, Recipe, RecipeInstruction


def clear_database() -> bool:
    """Clear all data from database tables"""
    print("🗑️  Clearing Recipe Instructions database...")

    db = Session(bind=engine)

    try:
        # Children first so foreign keys never dangle
        print("  - Clearing recipe instructions...")
        db.query(RecipeInstruction).delete()

        print("  - Clearing recipes...")
        db.query(Recipe).delete()

        print("  - Clearing users...")
        db.query(User).delete()

        db.commit()
        print("✅ Database cleared successfully!")

        print("\n📊 Table counts after clearing:")
        print(f"  - Users: {db.query(User).count()}")
        print(f"  - Recipes: {db.query(Recipe).count()}")
        print(f"  - Recipe Instructions: {db.query(RecipeInstruction).count()}")

    except SQLAlchemyError as e:
        print(f"❌ Error clearing database: {e}")
        db.rollback()
        return False
    finally:
        db.close()

    return True


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Clear Recipe Instructions database")
    parser.add_argument("--force", action="store_true", help="Skip confirmation prompt")
    args = parser.parse_args()

    if not args.force:
        response = input(
            "⚠️  This will delete ALL data from the database. Continue? (y/N): "
        )
        if response.lower() != "y":
            print("Operation cancelled.")
            sys.exit(0)

    sys.exit(0 if clear_database() else 1)
