"""Services package - Business logic layer"""

from services.meal_service import MealService
from services.menu_service import MenuService

__all__ = [
    "MealService",
    "MenuService",
]
