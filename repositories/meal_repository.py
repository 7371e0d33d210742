"""
Meal Repository - Data access layer for the meal catalog
"""

from typing import List, Union
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import MealCategory
from domain.models import Meal
from app.exceptions import (
    DuplicateMealError,
    MealNotFoundError,
    NoMealsInCategoryError,
    StoreError,
)


def _label(category: Union[str, MealCategory]) -> str:
    # error messages echo the category the caller sent
    return category.value if isinstance(category, MealCategory) else category


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def list_by_category(self, category: Union[str, MealCategory]) -> List[Meal]:
        """All meals in a category, oldest first. Empty list when there are none."""
        cat = self.parse_category(category)
        with self.store_errors():
            stmt = select(Meal).where(Meal.category == cat.value).order_by(Meal.id)
            return list(self.db.scalars(stmt).all())

    def create_meal(self, name: str, category: Union[str, MealCategory]) -> int:
        """Insert a meal and return its new id"""
        cat = self.parse_category(category)
        meal = Meal(name=name, category=cat.value)
        try:
            self.db.add(meal)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "UNIQUE constraint failed" in str(e.orig):
                raise DuplicateMealError(
                    f'Meal "{name}" already exists in category "{_label(category)}"'
                ) from e
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e
        return meal.id

    def get_id_by_name(self, name: str, category: Union[str, MealCategory]) -> int:
        """Exact, case-sensitive name match within the category"""
        cat = self.parse_category(category)
        with self.store_errors():
            stmt = select(Meal.id).where(Meal.name == name, Meal.category == cat.value)
            meal_id = self.db.scalars(stmt).first()
        if meal_id is None:
            raise MealNotFoundError(
                f'Meal "{name}" not found in category "{_label(category)}"'
            )
        return meal_id

    def get_random(self, category: Union[str, MealCategory]) -> Meal:
        """Uniformly random meal from the category"""
        cat = self.parse_category(category)
        with self.store_errors():
            stmt = (
                select(Meal)
                .where(Meal.category == cat.value)
                .order_by(func.random())
                .limit(1)
            )
            meal = self.db.scalars(stmt).first()
        if meal is None:
            raise NoMealsInCategoryError(
                f'No meals found in category "{_label(category)}"'
            )
        return meal

    def count_by_category(self, category: Union[str, MealCategory]) -> int:
        cat = self.parse_category(category)
        with self.store_errors():
            stmt = select(func.count()).select_from(Meal).where(Meal.category == cat.value)
            return self.db.scalar(stmt)
