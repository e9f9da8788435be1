# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import timedelta

from flask import Flask
from flask_cors import CORS

from classtrack.infrastructure.container import container
from classtrack.infrastructure.db import init_db
from classtrack.interfaces.http.access_gate import configure_auth_context
from classtrack.interfaces.http.controllers.misc_controller import MiscController
from classtrack.shared.config import load_config
from classtrack.shared.logging import logger, setup_logging
from classtrack.shared.middleware.error_handler import configure_error_handling
from classtrack.shared.middleware.request_logger import configure_request_logging

_config = load_config()


def create_app() -> Flask:
    init_db()
    setup_logging(debug_mode=_config.debug_logging)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)
    configure_auth_context(
        app,
        container.resolve_token_use_case.execute,
        container.resolve_session_use_case.execute,
    )

    app.config.update(
        SECRET_KEY=_config.secret_key,
        SESSION_PERMANENT=True,
        PERMANENT_SESSION_LIFETIME=timedelta(seconds=_config.security.session_lifetime),
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE=_config.security.cookie_samesite,
        SESSION_COOKIE_SECURE=_config.security.cookie_secure,
    )

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}}
    }
    if any(o != "*" for o in _config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.courses_controller.as_blueprint())
    app.register_blueprint(container.notifications_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
