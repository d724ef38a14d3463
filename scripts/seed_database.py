#!/usr/bin/env python3
"""
Database Seed Script for the Recipe Instructions Backend

Creates a demo user owning one recipe and loads its steps through
InstructionStore, so the seed goes through the same ownership checks as the API.

Usage:
    python scripts/seed_database.py
    python scripts/seed_database.py --clear  # Clear database first
"""

import sys
from pathlib import Path

# Add the backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import InstructionStoreError
from app.database import engine, create_tables
from app.models import User, Recipe, RecipeInstruction
from app.services.instruction_store import InstructionStore
from app.utils.password import hash_password

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo123"

DEMO_RECIPES = {
    "Spaghetti Aglio e Olio": [
        "Bring a large pot of salted water to a boil",
        "Cook the spaghetti until al dente",
        "Gently fry sliced garlic and chili flakes in olive oil",
        "Toss the pasta with the oil and a splash of pasta water",
        "Finish with chopped parsley and serve",
    ],
    "Soft Boiled Eggs": [
        "Boil water",
        "Lower the eggs into the water and cook for 6 minutes",
        "Cool in ice water and peel",
    ],
}


def seed_database(clear_first: bool = False) -> bool:
    """Seed the database with a demo user and recipes"""
    print("🌱 Seeding Recipe Instructions database...")

    if clear_first:
        from scripts.clear_database import clear_database

        print("Clearing existing data first...")
        clear_database()

    create_tables()

    db = Session(bind=engine)
    store = InstructionStore()

    try:
        user = db.query(User).filter(User.email == DEMO_EMAIL).first()
        if user is None:
            print("\n👤 Creating demo user...")
            user = User(
                email=DEMO_EMAIL,
                username="demo",
                hashed_password=hash_password(DEMO_PASSWORD),
            )
            db.add(user)
            db.commit()
            db.refresh(user)

        for title, steps in DEMO_RECIPES.items():
            recipe = Recipe(user_id=user.user_id, title=title)
            db.add(recipe)
            db.commit()
            db.refresh(recipe)

            store.create_batch(
                recipe.recipe_id,
                [
                    {"step_number": number, "description": description}
                    for number, description in enumerate(steps, start=1)
                ],
                user.user_id,
                db,
            )
            print(f"  ✅ {title}: {len(steps)} steps")

        print("\n📊 Database seeding complete! Summary:")
        print(f"  - Users: {db.query(User).count()}")
        print(f"  - Recipes: {db.query(Recipe).count()}")
        print(f"  - Recipe Instructions: {db.query(RecipeInstruction).count()}")
        print(f"\n👤 Demo login: {DEMO_EMAIL} / {DEMO_PASSWORD}")

        return True

    except (SQLAlchemyError, InstructionStoreError) as e:
        print(f"❌ Error seeding database: {e}")
        db.rollback()
        return False
    finally:
        db.close()


def main():
    """Main function to handle command line arguments"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Seed Recipe Instructions database with sample data"
    )
    parser.add_argument(
        "--clear", action="store_true", help="Clear database before seeding"
    )
    args = parser.parse_args()

    sys.exit(0 if seed_database(clear_first=args.clear) else 1)


if __name__ == "__main__":
    main()
