"""Menu categories and menu items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from dineflow.domain.shared import NIL_ID, URL, Price, Timestamp


@dataclass
class Category:
    id: UUID = NIL_ID
    name: str = ""
    timestamps: Timestamp = field(default_factory=Timestamp)


@dataclass
class Menu:
    id: UUID = NIL_ID
    category_id: UUID = NIL_ID
    name: str = ""
    image_url: URL = field(default_factory=lambda: URL.from_schema(""))
    price: Price = field(default_factory=Price)
    is_available: bool = False
    cooking_time: timedelta = timedelta(0)
    description: str = ""
    timestamps: Timestamp = field(default_factory=Timestamp)


@runtime_checkable
class CategoryRepository(Protocol):
    """Storage of menu categories."""

    def get_all_categories(self, tx: Any) -> list[Category]:
        """Return every category."""

    def get_category_by_id(self, tx: Any, category_id: str) -> Category:
        """Return the category with this identifier."""


@runtime_checkable
class MenuRepository(Protocol):
    """Storage of menu items."""

    def get_all_menus(self, tx: Any) -> list[Menu]:
        """Return every menu item."""

    def get_menu_by_id(self, tx: Any, menu_id: str) -> Menu:
        """Return the menu item with this identifier."""

    def get_menus_by_category_id(self, tx: Any, category_id: str) -> list[Menu]:
        """Return the menu items of one category."""

    def update_menu_availability(self, tx: Any, menu_id: str, is_available: bool) -> Menu:
        """Set whether a menu item can be ordered and return the updated item."""