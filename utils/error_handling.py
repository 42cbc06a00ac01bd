# ABOUTME: Safe error reporting for API handlers and repositories
# ABOUTME: Logs full exception detail server-side, returns a message fit for clients

import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal Server Error"


def format_user_error(error: BaseException, context: str) -> str:
    """
    Log an unexpected error and return a client-safe message.

    Args:
        error: The exception that was raised
        context: Short label for where it happened (e.g. "articles.list")

    Returns:
        Generic message that never includes internal detail
    """
    logger.error("[%s] %s: %s", context, type(error).__name__, error, exc_info=error)
    return GENERIC_ERROR_MESSAGE
