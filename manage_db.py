#!/usr/bin/env python3
"""
Database Management Script for the Recipe Instructions Backend

Thin wrapper that forwards to the scripts in scripts/.

Usage:
    python manage_db.py clear              # Clear database
    python manage_db.py seed               # Seed demo user, recipes and steps
    python manage_db.py seed --clear       # Clear then seed
    python manage_db.py view               # View all data
    python manage_db.py view --summary     # Recipes with their ordered steps
    python manage_db.py reset              # Clear and seed (full reset)
"""

import sys
import subprocess
import argparse
from pathlib import Path
from typing import Optional, List

SCRIPTS_DIR = Path(__file__).parent / "scripts"


def run_script(script_name: str, args: Optional[List[str]] = None) -> bool:
    """Run a script in the scripts directory"""
    script_path = SCRIPTS_DIR / f"{script_name}.py"

    if not script_path.exists():
        print(f"❌ Script not found: {script_path}")
        return False

    cmd = [sys.executable, str(script_path)] + (args or [])
    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        print(f"❌ Script failed with exit code {e.returncode}")
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recipe Instructions Database Management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python manage_db.py clear --force                     # Clear without prompting
  python manage_db.py view --table recipe_instructions  # One table only
  python manage_db.py reset                             # Full reset (clear + seed)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    clear_parser = subparsers.add_parser("clear", help="Clear database")
    clear_parser.add_argument("--force", action="store_true", help="Skip confirmation")

    seed_parser = subparsers.add_parser("seed", help="Seed database with sample data")
    seed_parser.add_argument(
        "--clear", action="store_true", help="Clear database first"
    )

    view_parser = subparsers.add_parser("view", help="View database contents")
    view_parser.add_argument("--summary", action="store_true", help="Show summary only")
    view_parser.add_argument(
        "--table",
        choices=["users", "recipes", "recipe_instructions"],
        help="View specific table",
    )
    view_parser.add_argument("--limit", type=int, help="Limit records displayed")

    subparsers.add_parser("reset", help="Full reset: clear and seed database")
    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "clear":
        success = run_script("clear_database", ["--force"] if args.force else [])
    elif args.command == "seed":
        success = run_script("seed_database", ["--clear"] if args.clear else [])
    elif args.command == "view":
        script_args = []
        if args.summary:
            script_args.append("--summary")
        if args.table:
            script_args.extend(["--table", args.table])
        if args.limit:
            script_args.extend(["--limit", str(args.limit)])
        success = run_script("view_database", script_args)
    elif args.command == "reset":
        print("🔄 Performing full database reset...")
        success = run_script("seed_database", ["--clear"])
    else:
        parser.print_help()
        return

    if not success:
        sys.exit(1)


if __name__ == "__main__":
    main()
