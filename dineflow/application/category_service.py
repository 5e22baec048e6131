"""Read access to menu categories."""

from __future__ import annotations

from dineflow.application.responses import CategoryResponse
from dineflow.domain.errors import GetAllCategoriesError, GetCategoryByIDError
from dineflow.domain.menu import Category, CategoryRepository


def _to_response(category: Category) -> CategoryResponse:
    return CategoryResponse(id=str(category.id), name=category.name)


class CategoryService:
    """Lists menu categories and looks them up."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    def get_all_categories(self) -> list[CategoryResponse]:
        """Return every category."""
        try:
            categories = self.category_repository.get_all_categories(None)
        except Exception as exc:
            raise GetAllCategoriesError() from exc
        return [_to_response(category) for category in categories]

    def get_category_by_id(self, category_id: str) -> CategoryResponse:
        """Return the category with this identifier."""
        try:
            category = self.category_repository.get_category_by_id(None, category_id)
        except Exception as exc:
            raise GetCategoryByIDError() from exc
        return _to_response(category)