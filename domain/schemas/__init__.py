"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.menu_schemas import (
    AddMenuRequest,
    ChangeMealRequest,
    MenuResponse,
    MenuSavedResponse,
    ChangeMealResponse,
)
from domain.schemas.meal_schemas import (
    AddMealRequest,
    MealSummary,
    MealListResponse,
    MealCreatedResponse,
)

__all__ = [
    # Menu schemas
    "AddMenuRequest",
    "ChangeMealRequest",
    "MenuResponse",
    "MenuSavedResponse",
    "ChangeMealResponse",
    # Meal schemas
    "AddMealRequest",
    "MealSummary",
    "MealListResponse",
    "MealCreatedResponse",
]
