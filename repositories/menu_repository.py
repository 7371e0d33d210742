"""
Menu Repository - Data access layer for daily menus
"""

from typing import Any, Dict, Optional, Union
from sqlalchemy import select, update
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.orm import Session, aliased

from repositories.base import BaseRepository
from domain.enums import MealCategory
from domain.models import Meal, Menu
from app.exceptions import MenuNotFoundError


class MenuRepository(BaseRepository[Menu]):
    """Repository for menu data access"""

    def __init__(self, db: Session):
        super().__init__(db, Menu)

    def get_by_date(self, date: str) -> Menu:
        """Raw menu row for a date"""
        with self.store_errors():
            menu = self.db.scalars(select(Menu).where(Menu.date == date)).first()
        if menu is None:
            raise MenuNotFoundError(f'Menu for date "{date}" not found')
        return menu

    def get_menu_by_date(self, date: str) -> Dict[str, Any]:
        """
        Menu for a date with every slot resolved to the meal name.

        A slot that is unset, or whose id no longer resolves, comes back as None.
        Raises MenuNotFoundError when no row exists for the date.
        """
        bm = aliased(Meal)
        lm = aliased(Meal)
        dm = aliased(Meal)
        stmt = (
            select(
                Menu.date,
                bm.name.label("breakfast"),
                lm.name.label("lunch"),
                dm.name.label("dinner"),
            )
            .outerjoin(bm, Menu.breakfast_id == bm.id)
            .outerjoin(lm, Menu.lunch_id == lm.id)
            .outerjoin(dm, Menu.dinner_id == dm.id)
            .where(Menu.date == date)
        )
        with self.store_errors():
            row = self.db.execute(stmt).mappings().first()
        if row is None:
            raise MenuNotFoundError("Menu not available for this date")
        return dict(row)

    def upsert_menu(
        self,
        date: str,
        breakfast_id: Optional[int],
        lunch_id: Optional[int],
        dinner_id: Optional[int],
    ) -> None:
        """Insert the menu for a date or overwrite all three slots of the existing one"""
        stmt = insert(Menu).values(
            date=date,
            breakfast_id=breakfast_id,
            lunch_id=lunch_id,
            dinner_id=dinner_id,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Menu.date],
            set_={
                "breakfast_id": stmt.excluded.breakfast_id,
                "lunch_id": stmt.excluded.lunch_id,
                "dinner_id": stmt.excluded.dinner_id,
            },
        )
        with self.store_errors():
            self.db.execute(stmt)
            self.db.commit()

    def set_menu_slot(
        self, date: str, category: Union[str, MealCategory], meal_id: int
    ) -> None:
        """Overwrite one slot of an existing menu; never creates a row"""
        cat = self.parse_category(category)
        stmt = (
            update(Menu)
            .where(Menu.date == date)
            .values({cat.slot_column: meal_id})
            .execution_options(synchronize_session=False)
        )
        with self.store_errors():
            result = self.db.execute(stmt)
            self.db.commit()
        if result.rowcount == 0:
            raise MenuNotFoundError(f'Menu for date "{date}" not found')
