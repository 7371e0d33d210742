"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.meal_repository import MealRepository
from repositories.menu_repository import MenuRepository

__all__ = [
    "BaseRepository",
    "MealRepository",
    "MenuRepository",
]
