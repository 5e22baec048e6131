"""Errors raised by the domain layer and its repositories."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for every error raised by the domain."""

    default_message = "domain error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    @property
    def message(self) -> str:
        return str(self)


class RecordNotFoundError(DomainError, LookupError):
    """A repository found no record for the given key."""

    default_message = "record not found"


# Orders

class InvalidQuantityError(DomainError, ValueError):
    default_message = "invalid quantity, must be greater than zero"


class GetOrdersByTransactionIDError(DomainError):
    default_message = "failed to get orders by transaction id"


# Tables

class GetAllTablesError(DomainError):
    default_message = "failed to get all tables"


class GetTableByIDError(DomainError):
    default_message = "failed to get table by id"


class TableNotFoundError(DomainError):
    default_message = "table not found"


# Transactions

class InvalidTransactionError(DomainError):
    default_message = "invalid transaction"


class GetAllTransactionsError(DomainError):
    default_message = "failed to get all transactions"


class InvalidOrderStatusError(DomainError):
    default_message = "invalid order status"


class NextOrderNotFoundError(DomainError):
    default_message = "next order not found"


# Users

class CreateUserError(DomainError):
    default_message = "failed to create user"


class GetAllUsersError(DomainError):
    default_message = "failed to get all users"


class GetUserByIDError(DomainError):
    default_message = "failed to get user by id"


class GetUserByEmailError(DomainError):
    default_message = "failed to get user by email"


class EmailAlreadyExistsError(DomainError):
    default_message = "email already exist"


class UpdateUserError(DomainError):
    default_message = "failed to update user"


class UserNotFoundError(DomainError):
    default_message = "user not found"


class EmailNotFoundError(DomainError):
    default_message = "email not found"


class DeleteUserError(DomainError):
    default_message = "failed to delete user"


class TokenInvalidError(DomainError):
    default_message = "token invalid"


class TokenExpiredError(DomainError):
    default_message = "token expired"


# Menu categories

class GetAllCategoriesError(DomainError):
    default_message = "failed to get all categories"


class GetCategoryByIDError(DomainError):
    default_message = "failed to get category by id"


class CategoryNotFoundError(DomainError):
    default_message = "category not found"


# Menu items

class GetAllMenusError(DomainError):
    default_message = "failed to get all menus"


class GetMenuByIDError(DomainError):
    default_message = "failed to get menu by id"


class GetMenusByCategoryIDError(DomainError):
    default_message = "failed to get menus by category id"


class MenuCategoryNotFoundError(DomainError):
    default_message = "category not found"


class MenuNotFoundError(DomainError):
    default_message = "menu not found"


class UpdateMenuAvailabilityError(DomainError):
    default_message = "failed to update menu availability"