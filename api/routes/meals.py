"""Meal catalog routes"""

from fastapi import APIRouter, Depends, Query
import logging
from typing import Optional

from api.dependencies import get_store
from domain.models import Database
from domain.schemas import (
    AddMealRequest,
    MealCreatedResponse,
    MealListResponse,
    MealSummary,
)
from services.meal_service import MealService

router = APIRouter(tags=["Meals"])
logger = logging.getLogger("menucalendar.api.meals")


@router.get("/getMeals", response_model=MealListResponse)
def get_meals(
    category: Optional[str] = Query(None, description="breakfast, lunch or dinner"),
    store: Database = Depends(get_store),
):
    """List every meal in a category. An empty category gives an empty list."""
    meals = MealService.list_meals(store, category)
    return MealListResponse(meals=[MealSummary.model_validate(m) for m in meals])


@router.post("/addMeal", response_model=MealCreatedResponse)
def add_meal(payload: AddMealRequest, store: Database = Depends(get_store)):
    """Add a meal; (name, category) must be new."""
    meal_id, message = MealService.add_meal(store, payload.name, payload.category)
    return MealCreatedResponse(success=message, meal_id=meal_id)
