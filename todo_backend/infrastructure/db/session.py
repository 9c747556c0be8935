# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from sqlalchemy import create_engine, event, func, select
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from todo_backend.shared.config import DatabaseConfig
from todo_backend.shared.logging import logger, sanitize_message


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


def build_engine(config: DatabaseConfig) -> Engine:
    url = config.resolved_url()
    kwargs: dict[str, object] = {"echo": False, "pool_pre_ping": True}

    if _is_sqlite(url):
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
        if make_url(url).database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(pool_size=config.pool_size, max_overflow=config.max_overflow)
    else:
        kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )

    engine = create_engine(url, **kwargs)
    if _is_sqlite(url):
        event.listen(engine, "connect", _set_sqlite_pragmas)
    logger.info(f"db.engine: created for {sanitize_message(url)}")
    return engine


class Database:
    """Explicit store handle: engine plus session factory, created once per app."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> Database:
        return cls(build_engine(config))

    def init_schema(self) -> None:
        # model classes must be registered on Base.metadata first
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def current_time(self) -> datetime:
        with self.engine.connect() as connection:
            return connection.execute(select(func.current_timestamp())).scalar_one()

    def dispose(self) -> None:
        self.engine.dispose()
