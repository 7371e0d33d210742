"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.meal import Meal
from domain.models.menu import Menu

__all__ = [
    # Database
    "Base",
    "Database",
    # Tables
    "Meal",
    "Menu",
]
