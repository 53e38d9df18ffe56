# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from notes_api.container import Container
from notes_api.shared.config import AppConfig, load_config
from notes_api.shared.logging import logger, setup_logging
from notes_api.shared.middleware.error_handler import configure_error_handling
from notes_api.shared.middleware.request_logger import configure_request_logging
from notes_api.shared.middleware.security_headers import configure_security_headers

CONTAINER_KEY = "notes_api.container"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    container = Container(config)
    container.database.init_db()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions[CONTAINER_KEY] = container

    hops = config.security.trusted_proxy_hops
    if hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops)  # type: ignore[method-assign]

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.notes_controller.as_blueprint())

    logger.info(
        f"Flask app initialized (env={config.app_env}, auth_strategy={config.auth.strategy})"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host="0.0.0.0", port=config.port, debug=False)


if __name__ == "__main__":
    main()
