from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AddMealRequest(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None


class MealSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class MealListResponse(BaseModel):
    meals: List[MealSummary] = Field(default_factory=list)


class MealCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: str
    meal_id: int = Field(..., alias="mealId")
