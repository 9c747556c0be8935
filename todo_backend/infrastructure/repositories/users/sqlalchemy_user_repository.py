# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todo_backend.domain.users.entities import User as DomainUser
from todo_backend.domain.users.exceptions import EmailAlreadyRegisteredError
from todo_backend.domain.users.repositories import UserRepository
from todo_backend.infrastructure.db.models import User
from todo_backend.infrastructure.unit_of_work import unit_of_work_scope
from todo_backend.shared.utils.timezones import as_utc


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, readonly=True) as session:
            row = session.query(User).filter(User.email == email.lower()).first()
            return _to_domain(row) if row else None

    def add(self, name: str, email: str, password_hash: str) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(name=name, email=email.lower(), password_hash=password_hash)
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # lost a race with a concurrent signup for the same address
            raise EmailAlreadyRegisteredError() from exc
