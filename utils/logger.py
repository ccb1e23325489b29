"""
Logging Setup

Console logging for the tactics analysis service with per-request
timing. Health checks are not logged.
"""

import logging
import sys
import time
from flask import g, request, has_request_context

QUIET_PATHS = ('/health',)


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Sets up:
    - Timestamped log format on stdout
    - Request/response logging with elapsed time
    - Log level from LOG_LEVEL, or DEBUG when app.debug is set

    Every app instance shares the logger named after the import module,
    so the stdout handler is only attached once.

    Args:
        app: Flask application instance
    """
    if not any(getattr(h, '_tactics_handler', False) for h in app.logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        handler._tactics_handler = True
        app.logger.addHandler(handler)

    level = 'DEBUG' if app.debug else app.config.get('LOG_LEVEL', 'INFO')
    app.logger.setLevel(level)
    app.logger.propagate = False

    @app.before_request
    def log_request_info():
        g.request_started = time.perf_counter()
        if request.path in QUIET_PATHS:
            return
        app.logger.info(
            f"Request: {request.method} {request.path} "
            f"({request.content_length or 0} bytes) from {request.remote_addr}"
        )

    @app.after_request
    def log_response_info(response):
        if not has_request_context() or request.path in QUIET_PATHS:
            return response
        started = g.get('request_started')
        elapsed = f" in {(time.perf_counter() - started) * 1000:.1f}ms" if started else ""
        message = f"Response: {response.status_code} for {request.method} {request.path}{elapsed}"
        if response.status_code >= 400:
            app.logger.warning(message)
        else:
            app.logger.info(message)
        return response

    app.logger.debug(f"Logging configured - Level: {logging.getLevelName(app.logger.level)}")

    return app
