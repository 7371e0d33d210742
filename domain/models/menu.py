"""
Daily menu model.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text

from domain.models.database import Base


class Menu(Base):
    """One row per calendar date, one meal reference per slot"""

    __tablename__ = "menus"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Text, nullable=False, unique=True)  # kept exactly as received
    breakfast_id = Column(Integer, ForeignKey("meals.id"), nullable=True)
    lunch_id = Column(Integer, ForeignKey("meals.id"), nullable=True)
    dinner_id = Column(Integer, ForeignKey("meals.id"), nullable=True)
