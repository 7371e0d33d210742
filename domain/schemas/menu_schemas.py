from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AddMenuRequest(BaseModel):
    """Body of POST /addMenu. Presence is checked by the service, not here."""

    date: Optional[str] = None
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None


class ChangeMealRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: Optional[str] = None
    category: Optional[str] = None
    new_meal: Optional[str] = Field(default=None, alias="newMeal")


class MenuResponse(BaseModel):
    """A date's menu with each slot resolved to the meal's display name"""

    date: str
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None


class MenuSavedResponse(BaseModel):
    success: str


class ChangeMealResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: str
    new_meal: str = Field(..., alias="newMeal")
