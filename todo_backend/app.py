# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from todo_backend.infrastructure.container import Container
from todo_backend.infrastructure.db import Database
from todo_backend.shared.config import AppConfig, load_config
from todo_backend.shared.logging import logger, setup_logging
from todo_backend.shared.middleware.error_handler import configure_error_handling
from todo_backend.shared.middleware.request_logger import configure_request_logging
from todo_backend.shared.middleware.security_headers import configure_security_headers

CONTAINER_KEY = "todo_backend.container"


def create_app(config: AppConfig | None = None, database: Database | None = None) -> Flask:
    config = config or load_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    database = database or Database.from_config(config.database)
    database.init_schema()
    container = Container(config=config, database=database)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[CONTAINER_KEY] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.todos_controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env}, tz={config.timezone})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.server_host, port=config.server_port, debug=not config.is_production())


if __name__ == "__main__":
    main()
