"""Registration, lookup and login of users."""

from __future__ import annotations

from typing import Any, Protocol

from dineflow.application.requests import UserLoginRequest, UserRegisterRequest
from dineflow.application.responses import AccessToken, UserRegisterResponse, UserResponse
from dineflow.application.unit_of_work import unit_of_work
from dineflow.domain.errors import (
    CreateUserError,
    EmailAlreadyExistsError,
    EmailNotFoundError,
    GetUserByEmailError,
    GetUserByIDError,
    RecordNotFoundError,
)
from dineflow.domain.user import Password, Role, User, UserRepository


class _TokenIssuer(Protocol):
    def generate_access_token(self, user_id: str, role: str) -> str: ...


def _role_name(role: Role | None) -> str:
    return role.value if role is not None else ""


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        email=user.email,
        name=user.name,
        phone_number=user.phone_number,
        role=_role_name(user.role),
    )


class UserService:
    """Registers customers, looks users up and issues access tokens."""

    def __init__(self, user_repository: UserRepository, jwt_service: _TokenIssuer, transaction: Any) -> None:
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.transaction = transaction

    def register(self, req: UserRegisterRequest) -> UserRegisterResponse:
        """Create a customer account; the email must not be taken."""
        try:
            existing = self.user_repository.check_email(None, req.email)
        except RecordNotFoundError:
            existing = None
        if existing is not None:
            raise EmailAlreadyExistsError()

        user = User(
            email=req.email,
            password=Password.from_plain(req.password),
            name=req.name,
            phone_number=req.phone_number,
            role=Role.CUSTOMER,
        )
        try:
            registered = self.user_repository.register(None, user)
        except Exception as exc:
            raise CreateUserError() from exc

        return UserRegisterResponse(
            id=str(registered.id),
            email=registered.email,
            name=registered.name,
            phone_number=registered.phone_number,
            role=_role_name(registered.role),
        )

    def get_user_by_id(self, user_id: str) -> UserResponse:
        """Return the user with this identifier."""
        try:
            user = self.user_repository.get_user_by_id(None, user_id)
        except Exception as exc:
            raise GetUserByIDError() from exc
        return _to_response(user)

    def get_user_by_email(self, email: str) -> UserResponse:
        """Return the user with this email."""
        try:
            user = self.user_repository.get_user_by_email(None, email)
        except Exception as exc:
            raise GetUserByEmailError() from exc
        return _to_response(user)

    def verify(self, req: UserLoginRequest) -> AccessToken:
        """Check credentials and return an access token for the user."""
        with unit_of_work(self.transaction) as tx:
            try:
                user = self.user_repository.get_user_by_email(tx, req.email)
            except Exception as exc:
                raise EmailNotFoundError() from exc
            user.password.verify(req.password)
            token = self.jwt_service.generate_access_token(str(user.id), _role_name(user.role))
        return AccessToken(access_token=token)