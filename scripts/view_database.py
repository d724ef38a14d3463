#!/usr/bin/env python3
"""
Database Viewer Script for the Recipe Instructions Backend

Displays the database contents in a readable format.

Usage:
    python scripts/view_database.py
    python scripts/view_database.py --table recipes   # View specific table
    python scripts/view_database.py --summary         # Show summary only
"""

import sys
from pathlib import Path
from datetime import datetime

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from sqlalchemy.orm import Session
from app.database import engine
from app.models import User, Recipe, RecipeInstruction
from app.services.instruction_store import InstructionStore
from typing import Optional

TABLES = {
    "users": User,
    "recipes": Recipe,
    "recipe_instructions": RecipeInstruction,
}


def view_table(db: Session, table_name: str, model_class, limit: Optional[int] = None):
    """View data from a specific table"""
    print(f"📊 TABLE: {table_name.upper()}")
    print("-" * 50)

    count = db.query(model_class).count()
    print(f"Total records: {count}")

    if count == 0:
        print("No records found")
        print()
        return

    query = db.query(model_class)
    if limit:
        query = query.limit(limit)

    for i, record in enumerate(query.all(), 1):
        print(f"\nRecord {i}:")
        for column in model_class.__table__.columns:
            value = getattr(record, column.name)
            if column.name == "hashed_password":
                value = "********"
            elif isinstance(value, datetime):
                value = value.strftime("%Y-%m-%d %H:%M:%S UTC")
            print(f"  {column.name}: {value}")

        if i >= 10 and not limit:  # Limit display to 10 records by default
            remaining = count - 10
            if remaining > 0:
                print(f"  ... and {remaining} more records")
            break

    print("-" * 50)
    print()


def view_database_summary(db: Session):
    """Show table counts and each recipe's steps in display order"""
    print("=" * 60)
    print("RECIPE INSTRUCTIONS DATABASE SUMMARY")
    print("=" * 60)
    print(f"Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print()

    print("📊 TABLE COUNTS:")
    for table_name, model_class in TABLES.items():
        print(f"  {table_name}: {db.query(model_class).count()}")
    print()

    store = InstructionStore()
    recipes = db.query(Recipe).order_by(Recipe.recipe_id).all()
    if recipes:
        print("📖 RECIPES:")
        for recipe in recipes:
            print(f"  - [{recipe.recipe_id}] {recipe.title} (owner {recipe.user_id})")
            for step in store.list_by_recipe(recipe.recipe_id, db):
                print(f"      {step.step_number}. {step.description}")
    print()


def main():
    """Main function to handle command line arguments"""
    import argparse

    parser = argparse.ArgumentParser(description="View Recipe Instructions database")
    parser.add_argument(
        "--table", choices=list(TABLES), help="View specific table only"
    )
    parser.add_argument("--summary", action="store_true", help="Show summary only")
    parser.add_argument(
        "--limit", type=int, help="Limit number of records to display per table"
    )

    args = parser.parse_args()

    db = Session(bind=engine)

    try:
        if args.summary:
            view_database_summary(db)
        elif args.table:
            view_table(db, args.table, TABLES[args.table], args.limit)
        else:
            for table_name, model_class in TABLES.items():
                view_table(db, table_name, model_class, args.limit)
    finally:
        db.close()


if __name__ == "__main__":
    main()
