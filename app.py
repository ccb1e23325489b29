"""
Tactics Board Analysis - Formation analysis and player chemistry service
"""
from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
import os
from config import get_config
from extensions import csrf, limiter
from routes import main_bp, tactics_bp
from utils.logger import setup_logger


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def register_error_handlers(app):
    """Return JSON bodies for HTTP and unexpected errors."""

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.name, 'message': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.error(f"Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
        return jsonify({'error': 'Internal Server Error'}), 500


def create_app(config_class=None):
    """
    Application factory.

    Args:
        config_class: Config class to load; defaults to the FLASK_ENV config

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())
    app.json.sort_keys = False

    csrf.init_app(app)
    limiter.init_app(app)

    app.register_blueprint(main_bp)
    app.register_blueprint(tactics_bp)

    app.after_request(set_security_headers)
    register_error_handlers(app)
    setup_logger(app)

    return app


if __name__ == "__main__":
    app = create_app()

    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    app.logger.info(f"Environment: {env_name} | Debug Mode: {debug_mode} | "
                    f"Config: {app.config.__class__.__name__}")

    if debug_mode and env_name == 'production':
        app.logger.warning("Debug mode enabled in production! Set FLASK_DEBUG=false")

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)
