"""Pricing of whole orders."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from dineflow.application.requests import OrderItem
from dineflow.domain.errors import MenuNotFoundError
from dineflow.domain.menu import MenuRepository
from dineflow.domain.order import OrderPricing, OrderRepository
from dineflow.domain.shared import Price


class OrderService:
    """Computes the total price of a list of order lines."""

    def __init__(
        self,
        order_repository: OrderRepository,
        menu_repository: MenuRepository,
        order_pricing: OrderPricing,
    ) -> None:
        self.order_repository = order_repository
        self.menu_repository = menu_repository
        self.order_pricing = order_pricing

    def calculate_total_price(self, orders: Iterable[OrderItem]) -> Price:
        """Sum the price of each line; stops at the first unknown menu or bad quantity."""
        total = Decimal(0)
        for item in orders:
            try:
                menu = self.menu_repository.get_menu_by_id(None, item.menu_id)
            except Exception as exc:
                raise MenuNotFoundError() from exc
            line_price = self.order_pricing.calculate_price(menu.price, item.quantity)
            total += line_price.amount
        return Price(total)