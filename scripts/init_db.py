#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the meals/menus schema and can seed a few sample meals
"""

import argparse
import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from app.exceptions import DuplicateMealError, StoreError
from domain.enums import MealCategory
from domain.models import Database
from repositories import MealRepository

logger = logging.getLogger("menucalendar.scripts.init_db")

SAMPLE_MEALS = {
    MealCategory.BREAKFAST: ["Pancakes", "Oatmeal", "Scrambled Eggs"],
    MealCategory.LUNCH: ["Soup", "Caesar Salad", "Grilled Cheese"],
    MealCategory.DINNER: ["Pasta", "Roast Chicken", "Vegetable Curry"],
}


def seed(store: Database) -> int:
    """Insert the sample meals, skipping the ones already present"""
    added = 0
    with store.session() as db:
        repo = MealRepository(db)
        for category, names in SAMPLE_MEALS.items():
            for name in names:
                try:
                    repo.create_meal(name, category)
                    added += 1
                except DuplicateMealError:
                    logger.info("Meal %s (%s) already exists", name, category.value)
    return added


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the menu calendar database")
    parser.add_argument("--path", default=settings.database_path, help="SQLite database file")
    parser.add_argument("--seed", action="store_true", help="Insert sample meals")
    args = parser.parse_args(argv)

    try:
        with Database(args.path, echo=settings.db_echo) as store:
            if args.seed:
                added = seed(store)
                logger.info("Seeded %d meals", added)
    except StoreError as e:
        logger.error("Database initialization failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    print("\n" + "=" * 60)
    print(f"{settings.app_name} Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! The database is ready to use.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
