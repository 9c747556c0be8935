# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from todo_backend.infrastructure.db import Database
from todo_backend.infrastructure.health import check_database
from todo_backend.shared.errors import StoreError
from todo_backend.shared.logging import logger


class MiscController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/healthcheck", view_func=self.healthcheck, methods=["GET"])
        return bp

    def healthcheck(self):
        try:
            db_time = check_database(self._database)
        except SQLAlchemyError as exc:
            logger.exception("healthcheck: database unreachable")
            raise StoreError("store_unreachable", message="Database is unreachable") from exc
        rendered = db_time.isoformat() if isinstance(db_time, datetime) else str(db_time)
        return jsonify({"status": "OK", "db_time": rendered})
