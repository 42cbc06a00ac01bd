# ABOUTME: Error mapper from classified Results to HTTP responses
# ABOUTME: Every error body has the shape {"msg": str}; 500s never include internal detail

from typing import Any

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from core.results import ErrorKind, Failure, Result
from utils.error_handling import GENERIC_ERROR_MESSAGE, format_user_error

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNCLASSIFIED: 500,
}

DEFAULT_MESSAGES = {
    400: "Bad Request",
    404: "Not Found",
    500: GENERIC_ERROR_MESSAGE,
}


def error_response(failure: Failure):
    """Translate a Failure into a (response, status) pair."""
    status = STATUS_BY_KIND[failure.kind]

    # Only 400s may carry a specific message (sort_by / order violations)
    if failure.kind is ErrorKind.INVALID_ARGUMENT and failure.msg:
        message = failure.msg
    else:
        message = DEFAULT_MESSAGES[status]

    return jsonify({"msg": message}), status


def serialize(value: Any) -> Any:
    if isinstance(value, list):
        return [item.to_dict() for item in value]
    return value.to_dict()


def respond(result: Result, key: str, status: int = 200):
    """Render a successful Result as ``{key: value}``, or map its failure."""
    if not result.is_ok:
        return error_response(result.failure)
    return jsonify({key: serialize(result.value)}), status


def respond_no_content(result: Result):
    if not result.is_ok:
        return error_response(result.failure)
    return "", 204


def register_error_handlers(app: Flask) -> None:
    """Install app-wide JSON handlers for routing errors and unexpected exceptions."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        # Unmatched routes (404), wrong methods (405), rate limits (429), malformed bodies (400)
        return jsonify({"msg": error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_exception(error: Exception):
        return jsonify({"msg": format_user_error(error, "api_unhandled")}), 500
