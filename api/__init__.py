# ABOUTME: Newsboard REST API blueprint (/api) and its registration hook
# ABOUTME: register_api() wires routes, rate limiting and JSON error handlers onto a Flask app

from flask import Blueprint, Flask

api_v1 = Blueprint("api_v1", __name__, url_prefix="/api")


def register_api(app: Flask) -> None:
    """Attach the API blueprint, its rate limiter and error handlers to ``app``."""
    from .errors import register_error_handlers
    from .routes import api_limiter

    api_limiter.init_app(app)
    app.register_blueprint(api_v1)
    register_error_handlers(app)
