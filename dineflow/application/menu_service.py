"""Read and availability access to menu items."""

from __future__ import annotations

from dineflow.application.responses import CategoryResponse, MenuResponse
from dineflow.domain.errors import (
    GetAllMenusError,
    GetCategoryByIDError,
    GetMenuByIDError,
    MenuCategoryNotFoundError,
    UpdateMenuAvailabilityError,
)
from dineflow.domain.menu import CategoryRepository, Menu, MenuRepository


class MenuService:
    """Lists menu items with their categories and toggles availability."""

    def __init__(self, menu_repository: MenuRepository, category_repository: CategoryRepository) -> None:
        self.menu_repository = menu_repository
        self.category_repository = category_repository

    def _to_response(self, menu: Menu) -> MenuResponse:
        try:
            category = self.category_repository.get_category_by_id(None, str(menu.category_id))
        except Exception as exc:
            raise GetCategoryByIDError() from exc
        return MenuResponse(
            id=str(menu.id),
            name=menu.name,
            description=menu.description,
            image_url=menu.image_url.path,
            is_available=menu.is_available,
            price=menu.price.amount,
            category=CategoryResponse(id=str(category.id), name=category.name),
        )

    def get_all_menus(self) -> list[MenuResponse]:
        """Return every menu item."""
        try:
            menus = self.menu_repository.get_all_menus(None)
        except Exception as exc:
            raise MenuCategoryNotFoundError() from exc
        return [self._to_response(menu) for menu in menus]

    def get_menu_by_id(self, menu_id: str) -> MenuResponse:
        """Return the menu item with this identifier."""
        try:
            menu = self.menu_repository.get_menu_by_id(None, menu_id)
        except Exception as exc:
            raise GetMenuByIDError() from exc
        return self._to_response(menu)

    def get_menus_by_category_id(self, category_id: str) -> list[MenuResponse]:
        """Return the menu items of one category."""
        try:
            menus = self.menu_repository.get_menus_by_category_id(None, category_id)
        except Exception as exc:
            raise GetAllMenusError() from exc
        return [self._to_response(menu) for menu in menus]

    def update_menu_availability(self, menu_id: str, is_available: bool) -> MenuResponse:
        """Set whether a menu item can be ordered and return it."""
        try:
            menu = self.menu_repository.update_menu_availability(None, menu_id, is_available)
        except Exception as exc:
            raise UpdateMenuAvailabilityError() from exc
        return self._to_response(menu)