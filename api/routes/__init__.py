"""API routes package"""

from . import menus, meals, health

__all__ = ["menus", "meals", "health"]
