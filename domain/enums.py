"""
Domain enums for the menu calendar.
"""

import enum
from typing import Optional


class MealCategory(str, enum.Enum):
    """Serving slot a meal belongs to"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @classmethod
    def parse(cls, value: str) -> Optional["MealCategory"]:
        """Case-insensitive lookup; returns None for unknown values."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @property
    def slot_column(self) -> str:
        """Name of the menus column holding this category's meal id."""
        return f"{self.value}_id"


CATEGORY_VALUES = tuple(c.value for c in MealCategory)
