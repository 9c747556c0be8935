from __future__ import annotations

from datetime import UTC, datetime

import pytest

from todo_backend.application.use_cases.users.login_user import LoginUserUseCase
from todo_backend.application.use_cases.users.register_user import RegisterUserUseCase
from todo_backend.domain.users.entities import AuthContext, User
from todo_backend.domain.users.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from todo_backend.domain.users.repositories import (
    PasswordHasher,
    TokenService,
    UserRepository,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email.lower())

    def add(self, name: str, email: str, password_hash: str) -> User:
        user = User(
            id=self._seq,
            name=name,
            email=email.lower(),
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._users[user.email] = user
        return user


class FakeTokenService(TokenService):
    def issue(self, user: User) -> str:
        return f"token-{user.id}"

    def verify(self, token: str | None) -> AuthContext:
        raise NotImplementedError


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, tokens=FakeTokenService(), password_hasher=DeterministicHasher()
    )


def test_register_user_success(
    users: InMemoryUserRepository, register: RegisterUserUseCase
) -> None:
    user = register.execute("Alice", "alice@gmail.com", "secret123")

    assert user.name == "Alice"
    assert user.email == "alice@gmail.com"
    assert users.find_by_email("alice@gmail.com") is not None


def test_register_stores_hash_not_plaintext(
    users: InMemoryUserRepository, register: RegisterUserUseCase
) -> None:
    register.execute("Alice", "alice@gmail.com", "secret123")

    stored = users.find_by_email("alice@gmail.com")
    assert stored is not None
    assert stored.password_hash != "secret123"


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("Alice", "alice@gmail.com", "secret123")

    with pytest.raises(EmailAlreadyRegisteredError) as excinfo:
        register.execute("Alice 2", "alice@gmail.com", "other-secret")

    assert excinfo.value.status == 409


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    registered = register.execute("Alice", "alice@gmail.com", "secret123")

    user, token = login.execute("alice@gmail.com", "secret123")

    assert user.id == registered.id
    assert token == f"token-{registered.id}"


def test_wrong_password_and_unknown_email_look_the_same(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("Alice", "alice@gmail.com", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice@gmail.com", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("bob@gmail.com", "secret123")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert wrong_password.value.status == unknown_email.value.status == 401


class CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.verifications = 0

    def verify(self, password: str, hashed: str) -> bool:
        self.verifications += 1
        return super().verify(password, hashed)


def test_unknown_email_still_checks_a_hash(users: InMemoryUserRepository) -> None:
    hasher = CountingHasher()
    login = LoginUserUseCase(users=users, tokens=FakeTokenService(), password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@gmail.com", "secret123")

    assert hasher.verifications == 1


def test_decoy_hash_never_matches(users: InMemoryUserRepository) -> None:
    login = LoginUserUseCase(
        users=users, tokens=FakeTokenService(), password_hasher=DeterministicHasher()
    )

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@gmail.com", "")
