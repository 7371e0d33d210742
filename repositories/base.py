"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from contextlib import contextmanager
from typing import Generic, TypeVar, Type, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import InvalidCategoryError, StoreError
from domain.enums import MealCategory

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository holding the session and the mapped model.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def store_errors(self):
        """
        Translate engine errors into StoreError.

        Rolls back the session so it stays usable. Domain errors raised
        inside the block pass through untouched.
        """
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(getattr(e, "orig", None) or e)) from e

    @staticmethod
    def parse_category(category: Union[str, MealCategory]) -> MealCategory:
        """Normalize a category value or raise InvalidCategoryError"""
        parsed = MealCategory.parse(category)
        if parsed is None:
            raise InvalidCategoryError()
        return parsed
