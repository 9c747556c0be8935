# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from todo_backend.infrastructure.db import Database


def check_database(database: Database) -> datetime:
    """Round-trip to the store; returns the database's own clock."""
    return database.current_time()


__all__ = ["check_database"]
