from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import anyio
import anyio.to_thread

from domain.enums import MealCategory
from domain.models import Database
from repositories import MealRepository, MenuRepository
from services.concurrency import run_concurrently
from services.meal_service import require_category
from app.exceptions import (
    MissingParameterError,
    NotFoundError,
    ServiceValidationError,
)

logger = logging.getLogger("menucalendar.menus")

RANDOM_TOKEN = "random"


class MenuService:
    """
    Menu calendar operations.

    - reads a date's menu with meal names resolved
    - saves a full menu after resolving all three meal names
    - swaps a single slot, optionally for a random meal of that category

    Lookups that do not depend on each other run concurrently, each on its
    own session. A request issues at most one write.
    """

    @staticmethod
    def get_menu(store: Database, date: Optional[str]) -> Dict[str, Any]:
        if not date:
            raise MissingParameterError("Date parameter is required")
        with store.session() as db:
            return MenuRepository(db).get_menu_by_date(date)

    @staticmethod
    def _meal_id(store: Database, name: str, category: MealCategory) -> int:
        with store.session() as db:
            return MealRepository(db).get_id_by_name(name, category)

    @staticmethod
    def _save_menu(
        store: Database,
        date: str,
        breakfast_id: int,
        lunch_id: int,
        dinner_id: int,
    ) -> None:
        with store.session() as db:
            MenuRepository(db).upsert_menu(date, breakfast_id, lunch_id, dinner_id)

    @staticmethod
    async def add_menu(
        store: Database,
        date: Optional[str],
        breakfast: Optional[str],
        lunch: Optional[str],
        dinner: Optional[str],
    ) -> str:
        """
        Create or fully overwrite the menu for a date.

        All three names must resolve in their own category before anything
        is written; the first MealNotFoundError aborts the request.
        """
        if not date or not breakfast or not lunch or not dinner:
            raise MissingParameterError("Date, breakfast, lunch, and dinner are required")

        breakfast_id, lunch_id, dinner_id = await run_concurrently(
            lambda: MenuService._meal_id(store, breakfast, MealCategory.BREAKFAST),
            lambda: MenuService._meal_id(store, lunch, MealCategory.LUNCH),
            lambda: MenuService._meal_id(store, dinner, MealCategory.DINNER),
        )

        await anyio.to_thread.run_sync(
            MenuService._save_menu, store, date, breakfast_id, lunch_id, dinner_id
        )

        logger.info(
            "Saved menu for %s (breakfast=%s lunch=%s dinner=%s)",
            date,
            breakfast_id,
            lunch_id,
            dinner_id,
        )
        return f"Menu for {date} added/updated successfully"

    @staticmethod
    def _resolve_meal(store: Database, name: str, category: str) -> Tuple[int, str]:
        # category is passed as sent so error messages echo it
        with store.session() as db:
            repo = MealRepository(db)
            if name.lower() == RANDOM_TOKEN:
                meal = repo.get_random(category)
                return meal.id, meal.name
            return repo.get_id_by_name(name, category), name

    @staticmethod
    def _ensure_menu(store: Database, date: str) -> None:
        with store.session() as db:
            MenuRepository(db).get_by_date(date)

    @staticmethod
    def _save_slot(store: Database, date: str, category: MealCategory, meal_id: int) -> None:
        with store.session() as db:
            MenuRepository(db).set_menu_slot(date, category, meal_id)

    @staticmethod
    async def change_meal(
        store: Database,
        date: Optional[str],
        category: Optional[str],
        new_meal: Optional[str],
    ) -> Tuple[str, str]:
        """
        Replace one slot of an existing menu.

        new_meal is either an exact meal name or "random" (any case), which
        picks uniformly from the category. Returns the confirmation message
        and the name of the meal now in the slot.
        """
        if not date or not category or not new_meal:
            raise MissingParameterError("Date, category, and newMeal are required")
        cat = require_category(category)

        try:
            (meal_id, meal_name), _ = await run_concurrently(
                lambda: MenuService._resolve_meal(store, new_meal, category),
                lambda: MenuService._ensure_menu(store, date),
            )
        except NotFoundError as e:
            # a missing menu is the caller's mistake here, not a 404
            raise ServiceValidationError(e.message, code=e.code) from e

        await anyio.to_thread.run_sync(MenuService._save_slot, store, date, cat, meal_id)

        logger.info("Menu for %s: %s set to %s (id=%s)", date, cat.value, meal_name, meal_id)
        return (
            f'Menu for {date} updated: {category} changed to "{meal_name}"',
            meal_name,
        )
