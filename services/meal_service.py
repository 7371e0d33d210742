from typing import List, Optional, Tuple
import logging

from domain.enums import MealCategory
from domain.models import Database, Meal
from repositories import MealRepository
from app.exceptions import InvalidCategoryError, MissingParameterError

logger = logging.getLogger("menucalendar.meals")


def require_category(category: str) -> MealCategory:
    """Case-insensitive check against breakfast, lunch and dinner"""
    parsed = MealCategory.parse(category)
    if parsed is None:
        raise InvalidCategoryError()
    return parsed


class MealService:
    @staticmethod
    def list_meals(store: Database, category: Optional[str]) -> List[Meal]:
        if not category:
            raise MissingParameterError("Category parameter is required")
        cat = require_category(category)
        with store.session() as db:
            return MealRepository(db).list_by_category(cat)

    @staticmethod
    def add_meal(
        store: Database, name: Optional[str], category: Optional[str]
    ) -> Tuple[int, str]:
        """
        Add a meal to the catalog.

        Returns the new id and a confirmation message. Raises
        DuplicateMealError when the name already exists in the category.
        """
        if not name or not category:
            raise MissingParameterError("Name and category are required")
        require_category(category)

        with store.session() as db:
            meal_id = MealRepository(db).create_meal(name, category)

        logger.info("Added meal %s (%s) id=%s", name, category.lower(), meal_id)
        return meal_id, f'Meal "{name}" added to category "{category}" successfully'
