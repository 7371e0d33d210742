"""
Meal catalog model.
"""

from sqlalchemy import CheckConstraint, Column, Integer, Text, UniqueConstraint

from domain.enums import CATEGORY_VALUES
from domain.models.database import Base


class Meal(Base):
    """A named dish served in one category"""

    __tablename__ = "meals"
    __table_args__ = (
        UniqueConstraint("name", "category", name="uq_meals_name_category"),
        CheckConstraint(
            "category IN ({})".format(", ".join(f"'{c}'" for c in CATEGORY_VALUES)),
            name="ck_meals_category",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)  # stored lowercase
