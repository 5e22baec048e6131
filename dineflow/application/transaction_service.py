"""Placing orders, taking payment notifications and moving orders through the kitchen."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any
from uuid import UUID

from dineflow.application.order_service import OrderService
from dineflow.application.requests import (
    FinishCookingRequest,
    FinishDeliveringRequest,
    StartCookingRequest,
    StartDeliveringRequest,
    TransactionCreateRequest,
)
from dineflow.application.responses import (
    FinishCookingResponse,
    FinishDeliveringResponse,
    MenuForTransaction,
    NextOrder,
    OrderForTransaction,
    OrderForTransactionCreate,
    StartCookingResponse,
    StartDeliveringResponse,
    TableResponse,
    TransactionCreateResponse,
    TransactionResponse,
)
from dineflow.application.unit_of_work import unit_of_work
from dineflow.domain.errors import (
    DomainError,
    InvalidOrderStatusError,
    NextOrderNotFoundError,
)
from dineflow.domain.menu import MenuRepository
from dineflow.domain.order import Order, OrderRepository
from dineflow.domain.table import TableRepository
from dineflow.domain.transaction import (
    OrderQuery,
    OrderStatus,
    Payment,
    PaymentGateway,
    PaymentStatus,
    Transaction,
    TransactionRepository,
    TransactionRules,
)
from dineflow.domain.user import UserRepository


def _trim_fraction(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(fraction).zfill(digits).rstrip('0')}"


def format_duration(duration: timedelta) -> str:
    """Render a duration the way the kitchen displays it, e.g. 45m0s or 1h30m0s."""
    micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 1_000_000:
        if micros < 1_000:
            return f"{sign}{micros}µs"
        return f"{sign}{_trim_fraction(micros, 1_000)}ms"
    hours, rest = divmod(micros, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds = _trim_fraction(rest, 1_000_000)
    if hours:
        prefix = f"{hours}h{minutes}m"
    elif minutes:
        prefix = f"{minutes}m"
    else:
        prefix = ""
    return f"{sign}{prefix}{seconds}s"


def _order_responses(orders: Iterable[OrderQuery]) -> list[OrderForTransaction]:
    return [
        OrderForTransaction(
            menu=MenuForTransaction(
                id=str(line.menu.id),
                name=line.menu.name,
                price=str(line.menu.price),
            ),
            quantity=line.order.quantity,
        )
        for line in orders
    ]


class TransactionService:
    """Creates transactions and drives them from pending to served."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        user_repository: UserRepository,
        table_repository: TableRepository,
        order_repository: OrderRepository,
        menu_repository: MenuRepository,
        transaction_rules: TransactionRules | None,
        payment_gateway: PaymentGateway,
        transaction: Any,
        order_service: OrderService | None,
    ) -> None:
        self.transaction_repository = transaction_repository
        self.user_repository = user_repository
        self.table_repository = table_repository
        self.order_repository = order_repository
        self.menu_repository = menu_repository
        self.transaction_rules = transaction_rules
        self.payment_gateway = payment_gateway
        self.transaction = transaction
        self.order_service = order_service

    def create_transaction(self, user_id: str, req: TransactionCreateRequest) -> TransactionCreateResponse:
        """Record a new pending transaction with its orders and open its payment."""
        with unit_of_work(self.transaction) as tx:
            user = self.user_repository.get_user_by_id(tx, user_id)
            table = self.table_repository.get_table_by_id(tx, req.table_id)
            total_price = self.order_service.calculate_total_price(req.orders)

            created = self.transaction_repository.create_transaction(
                tx,
                Transaction(
                    user_id=user.id,
                    table_id=table.id,
                    order_status=OrderStatus.PENDING,
                    payment=Payment("", PaymentStatus.PENDING),
                    total_price=total_price,
                ),
            )

            created_orders = []
            for item in req.orders:
                menu = self.menu_repository.get_menu_by_id(tx, item.menu_id)
                order = self.order_repository.create_order(
                    tx,
                    Order(transaction_id=created.id, menu_id=menu.id, quantity=item.quantity),
                )
                created_orders.append(
                    OrderForTransactionCreate(
                        menu=MenuForTransaction(id=str(menu.id), name=menu.name, price=str(menu.price)),
                        quantity=order.quantity,
                    )
                )

            payment = self.payment_gateway.process_payment(tx, created)

        return TransactionCreateResponse(
            transaction_id=str(created.id),
            total_price=str(total_price),
            token=payment.token,
            payment_link=payment.payment_link,
            orders=created_orders,
        )

    def hook_transaction(self, data: Mapping[str, Any]) -> None:
        """Apply a payment gateway notification to the transaction it names."""
        with unit_of_work(self.transaction) as tx:
            transaction_id = data.get("order_id")
            if not isinstance(transaction_id, str):
                raise ValueError("order_id is required in datas")
            parsed = UUID(transaction_id)
            try:
                self.payment_gateway.hook_payment(tx, parsed, data)
            except Exception as exc:
                raise DomainError(f"failed to hook payment: {exc}") from exc

    def get_transaction_by_id(self, transaction_id: str) -> TransactionResponse:
        """Return a transaction with its orders, table, estimate and delay."""
        query = self.transaction_repository.get_detailed_transaction_by_id(None, transaction_id)
        transaction = query.transaction
        max_cooking_time = self.transaction_rules.calculate_max_cooking_time(query.orders)
        is_delayed = self.transaction_rules.get_order_delay_status(
            max_cooking_time, transaction.cooked_at, transaction.served_at
        )
        return TransactionResponse(
            id=str(transaction.id),
            queue_code=transaction.queue_code.code,
            estimate_time=format_duration(max_cooking_time),
            orders=_order_responses(query.orders),
            total_price=transaction.total_price.amount,
            table=TableResponse(id=str(query.table.id), table_number=query.table.table_number),
            order_status=str(transaction.order_status),
            is_delayed=is_delayed,
        )

    def get_next_order(self) -> NextOrder:
        """Return the next order waiting for the kitchen."""
        next_order = self.transaction_repository.get_next_order(None)
        if not next_order.queue_code:
            raise NextOrderNotFoundError()
        return next_order

    def start_cooking(self, req: StartCookingRequest) -> StartCookingResponse:
        """Move a pending order to preparing and record when cooking began."""
        with unit_of_work(self.transaction) as tx:
            query = self.transaction_repository.get_transaction_by_queue_code(tx, req.queue_code)
            if query.transaction.order_status != OrderStatus.PENDING:
                raise InvalidOrderStatusError()
            transaction_id = str(query.transaction.id)
            self.transaction_repository.update_transaction_cooking_status_start(tx, transaction_id)
            self.transaction_repository.update_cooked_at(tx, transaction_id)
        return StartCookingResponse(
            queue_code=query.transaction.queue_code.code,
            orders=_order_responses(query.orders),
        )

    def finish_cooking(self, req: FinishCookingRequest) -> FinishCookingResponse:
        """Move a preparing order to ready to serve."""
        query = self.transaction_repository.get_transaction_by_queue_code(None, req.queue_code)
        if query.transaction.order_status != OrderStatus.PREPARING:
            raise InvalidOrderStatusError()
        self.transaction_repository.update_transaction_cooking_status_finish(None, str(query.transaction.id))
        return FinishCookingResponse(
            queue_code=query.transaction.queue_code.code,
            orders=_order_responses(query.orders),
        )

    def start_delivering(self, req: StartDeliveringRequest) -> StartDeliveringResponse:
        """Move a ready order to delivering."""
        query = self.transaction_repository.get_transaction_by_queue_code(None, req.queue_code)
        if query.transaction.order_status != OrderStatus.READY_TO_SERVE:
            raise InvalidOrderStatusError()
        self.transaction_repository.update_transaction_delivering_status_start(None, str(query.transaction.id))
        return StartDeliveringResponse(
            queue_code=query.transaction.queue_code.code,
            orders=_order_responses(query.orders),
        )

    def finish_delivering(self, req: FinishDeliveringRequest) -> FinishDeliveringResponse:
        """Mark a delivering order as served and record when it was served."""
        with unit_of_work(self.transaction) as tx:
            query = self.transaction_repository.get_transaction_by_queue_code(None, req.queue_code)
            if query.transaction.order_status != OrderStatus.DELIVERING:
                raise InvalidOrderStatusError()
            transaction_id = str(query.transaction.id)
            self.transaction_repository.update_transaction_delivering_status_finish(None, transaction_id)
            self.transaction_repository.update_served_at(tx, transaction_id)
        return FinishDeliveringResponse()