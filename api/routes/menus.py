"""Menu calendar routes"""

from fastapi import APIRouter, Depends, Query
import logging
from typing import Optional

from api.dependencies import get_store
from domain.models import Database
from domain.schemas import (
    AddMenuRequest,
    ChangeMealRequest,
    ChangeMealResponse,
    MenuResponse,
    MenuSavedResponse,
)
from services.menu_service import MenuService

router = APIRouter(tags=["Menus"])
logger = logging.getLogger("menucalendar.api.menus")


@router.get("/getMenu", response_model=MenuResponse)
def get_menu(
    date: Optional[str] = Query(None, description="Menu date, as stored"),
    store: Database = Depends(get_store),
):
    """Get the menu for a date with meal names resolved"""
    return MenuResponse(**MenuService.get_menu(store, date))


@router.post("/addMenu", response_model=MenuSavedResponse)
async def add_menu(payload: AddMenuRequest, store: Database = Depends(get_store)):
    """
    Create or replace the menu for a date.

    breakfast, lunch and dinner are meal names looked up in their own
    category. If any of them is unknown nothing is written.

    Example:
    - {"date": "2024-01-01", "breakfast": "Pancakes", "lunch": "Soup", "dinner": "Pasta"}
    """
    message = await MenuService.add_menu(
        store, payload.date, payload.breakfast, payload.lunch, payload.dinner
    )
    return MenuSavedResponse(success=message)


@router.post("/changeMeal", response_model=ChangeMealResponse)
async def change_meal(payload: ChangeMealRequest, store: Database = Depends(get_store)):
    """
    Swap the meal in one slot of an existing menu.

    Use newMeal="random" to pick any meal of that category.

    Examples:
    - {"date": "2024-01-01", "category": "lunch", "newMeal": "Soup"}
    - {"date": "2024-01-01", "category": "dinner", "newMeal": "random"}
    """
    message, meal_name = await MenuService.change_meal(
        store, payload.date, payload.category, payload.new_meal
    )
    return ChangeMealResponse(success=message, new_meal=meal_name)
