import uuid

import pytest

from dineflow.application.requests import UserLoginRequest, UserRegisterRequest
from dineflow.application.responses import UserRegisterResponse, UserResponse
from dineflow.application.user_service import UserService
from dineflow.domain.errors import (
    CreateUserError,
    EmailAlreadyExistsError,
    EmailNotFoundError,
    GetUserByEmailError,
    GetUserByIDError,
    InvalidTransactionError,
    RecordNotFoundError,
)
from dineflow.domain.user import Password, PasswordMismatchError, Role, User

PASSWORD = "password"
EMAIL = "alice@example.com"


class FakeUserRepository:
    def __init__(self, users=(), check_error=None, register_error=None):
        self.users = {u.email: u for u in users}
        self.check_error = check_error
        self.register_error = register_error
        self.calls = []

    def register(self, tx, user):
        if self.register_error is not None:
            raise self.register_error
        user.id = uuid.uuid4()
        self.users[user.email] = user
        return user

    def get_user_by_id(self, tx, user_id):
        for user in self.users.values():
            if str(user.id) == user_id:
                return user
        raise RecordNotFoundError()

    def get_user_by_email(self, tx, email):
        self.calls.append(("get_user_by_email", tx, email))
        try:
            return self.users[email]
        except KeyError:
            raise RecordNotFoundError() from None

    def check_email(self, tx, email):
        if self.check_error is not None:
            raise self.check_error
        return self.users.get(email)


class FakeTokenIssuer:
    def __init__(self):
        self.calls = []

    def generate_access_token(self, user_id, role):
        self.calls.append((user_id, role))
        return "token"


class FakeUnitOfWork:
    def __init__(self):
        self.outcomes = []

    def begin(self):
        return "tx"

    def commit_or_rollback(self, tx, error):
        self.outcomes.append((tx, error))


def stored_user():
    return User(
        id=uuid.uuid4(),
        email=EMAIL,
        password=Password.from_plain(PASSWORD),
        name="Alice",
        role=Role.CUSTOMER,
    )


def make_service(repository, uow=None):
    return UserService(repository, FakeTokenIssuer(), uow if uow is not None else FakeUnitOfWork())


def test_register_creates_customer():
    repository = FakeUserRepository()
    service = make_service(repository)
    password = PASSWORD

    result = service.register(UserRegisterRequest(email=EMAIL, password=password, name="Alice"))

    stored = repository.users[EMAIL]
    assert result == UserRegisterResponse(
        id=str(stored.id), email=EMAIL, name="Alice", phone_number="", role="customer"
    )
    assert stored.role is Role.CUSTOMER
    assert stored.password.hashed != PASSWORD
    assert stored.password.verify(PASSWORD) is True


def test_register_rejects_taken_email():
    service = make_service(FakeUserRepository([stored_user()]))
    password = PASSWORD
    with pytest.raises(EmailAlreadyExistsError) as info:
        service.register(UserRegisterRequest(email=EMAIL, password=password, name="Alice"))
    assert str(info.value) == "email already exist"


def test_register_treats_not_found_as_free():
    repository = FakeUserRepository(check_error=RecordNotFoundError())
    service = make_service(repository)
    password = PASSWORD

    result = service.register(UserRegisterRequest(email=EMAIL, password=password, name="Alice"))

    assert result.email == EMAIL
    assert EMAIL in repository.users


def test_register_propagates_other_check_errors():
    service = make_service(FakeUserRepository(check_error=RuntimeError("database down")))
    password = PASSWORD
    with pytest.raises(RuntimeError):
        service.register(UserRegisterRequest(email=EMAIL, password=password, name="Alice"))


def test_register_wraps_storage_error():
    service = make_service(FakeUserRepository(register_error=RuntimeError("database down")))
    password = PASSWORD
    with pytest.raises(CreateUserError) as info:
        service.register(UserRegisterRequest(email=EMAIL, password=password, name="Alice"))
    assert str(info.value) == "failed to create user"


def test_get_user_by_id():
    user = stored_user()
    service = make_service(FakeUserRepository([user]))
    assert service.get_user_by_id(str(user.id)) == UserResponse(
        id=str(user.id), email=EMAIL, name="Alice", phone_number="", role="customer"
    )


def test_get_user_by_id_missing():
    service = make_service(FakeUserRepository())
    with pytest.raises(GetUserByIDError) as info:
        service.get_user_by_id(str(uuid.uuid4()))
    assert str(info.value) == "failed to get user by id"


def test_get_user_by_email():
    user = stored_user()
    service = make_service(FakeUserRepository([user]))
    result = service.get_user_by_email(EMAIL)
    assert result.id == str(user.id)
    assert result.email == EMAIL


def test_get_user_by_email_missing():
    service = make_service(FakeUserRepository())
    with pytest.raises(GetUserByEmailError) as info:
        service.get_user_by_email(EMAIL)
    assert str(info.value) == "failed to get user by email"


def test_verify_issues_token_and_commits():
    user = stored_user()
    repository = FakeUserRepository([user])
    issuer = FakeTokenIssuer()
    uow = FakeUnitOfWork()
    service = UserService(repository, issuer, uow)
    password = PASSWORD

    result = service.verify(UserLoginRequest(email=EMAIL, password=password))

    assert result.access_token == "token"
    assert issuer.calls == [(str(user.id), "customer")]
    assert repository.calls == [("get_user_by_email", "tx", EMAIL)]
    assert uow.outcomes == [("tx", None)]


def test_verify_unknown_email_rolls_back():
    uow = FakeUnitOfWork()
    service = make_service(FakeUserRepository(), uow)
    password = PASSWORD

    with pytest.raises(EmailNotFoundError):
        service.verify(UserLoginRequest(email=EMAIL, password=password))

    assert len(uow.outcomes) == 1
    assert isinstance(uow.outcomes[0][1], EmailNotFoundError)


def test_verify_wrong_password():
    uow = FakeUnitOfWork()
    issuer = FakeTokenIssuer()
    service = UserService(FakeUserRepository([stored_user()]), issuer, uow)
    password = "placeholder"

    with pytest.raises(PasswordMismatchError):
        service.verify(UserLoginRequest(email=EMAIL, password=password))

    assert issuer.calls == []
    assert isinstance(uow.outcomes[0][1], PasswordMismatchError)


def test_verify_requires_unit_of_work():
    service = UserService(FakeUserRepository([stored_user()]), FakeTokenIssuer(), None)
    password = PASSWORD
    with pytest.raises(InvalidTransactionError) as info:
        service.verify(UserLoginRequest(email=EMAIL, password=password))
    assert str(info.value) == "invalid transaction"