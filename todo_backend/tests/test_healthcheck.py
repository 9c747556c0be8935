from __future__ import annotations

from flask import Flask
from sqlalchemy.exc import OperationalError

from todo_backend.interfaces.http.controllers.misc_controller import MiscController
from todo_backend.shared.middleware.error_handler import configure_error_handling


class UnreachableDatabase:
    def current_time(self):
        raise OperationalError("SELECT CURRENT_TIMESTAMP", {}, Exception("connection refused"))


def test_unreachable_database_uses_shared_error_shape() -> None:
    app = Flask(__name__)
    configure_error_handling(app)
    app.register_blueprint(MiscController(database=UnreachableDatabase()).as_blueprint())

    resp = app.test_client().get("/api/healthcheck")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Database is unreachable", "code": "store_unreachable"}
