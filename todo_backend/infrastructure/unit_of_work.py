# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction scope shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass

from sqlalchemy.orm import Session

from todo_backend.shared.logging import logger


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """One session per repository call.

    Writes commit on a clean exit; read-only scopes and failed scopes roll back.
    """

    session_factory: Callable[[], Session]
    readonly: bool = False
    _session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        try:
            if exc is not None:
                logger.debug(f"uow: rollback ({exc_type.__name__})")
                session.rollback()
            elif self.readonly:
                session.rollback()
            else:
                session.commit()
        except Exception:
            logger.exception("uow: commit failed, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("unit of work used outside its with-block")
        return self._session


@contextmanager
def unit_of_work_scope(
    factory: Callable[[], Session], *, readonly: bool = False
) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory, readonly=readonly) as uow:
        yield uow.session
