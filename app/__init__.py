"""
App package - Application configuration and core utilities.
Contains settings and the error taxonomy.
"""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    MissingParameterError,
    InvalidCategoryError,
    MealNotFoundError,
    NoMealsInCategoryError,
    DuplicateMealError,
    NotFoundError,
    MenuNotFoundError,
    StoreError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "MissingParameterError",
    "InvalidCategoryError",
    "MealNotFoundError",
    "NoMealsInCategoryError",
    "DuplicateMealError",
    "NotFoundError",
    "MenuNotFoundError",
    "StoreError",
]
