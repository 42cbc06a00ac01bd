# ABOUTME: Input validation for path parameters, query strings and request bodies
# ABOUTME: Rejects malformed identifiers, non-allow-listed sort/order values and bad payloads before any SQL runs

import re
from typing import Any

from core.results import Result

# Largest value a PostgreSQL INTEGER (and SERIAL) column can hold
MAX_SERIAL_ID = 2_147_483_647

IDENTIFIER_PATTERN = re.compile(r"[0-9]+")
SIGNED_INTEGER_PATTERN = re.compile(r"-?[0-9]+")

VALID_ORDERS = ("asc", "desc")

INVALID_SORT_BY_MESSAGE = "Bad Request: Invalid sort_by column"
INVALID_ORDER_MESSAGE = "Bad Request: Invalid order value"


def parse_identifier(raw: Any) -> Result:
    """
    Parse an entity identifier from a path parameter.

    Only a non-negative integer literal with no sign, whitespace or decimal
    point is accepted ("1" is valid, "1.5", "-1" and "not-a-number" are not).

    Returns:
        Result holding the int on success, INVALID_ARGUMENT otherwise
    """
    if not isinstance(raw, str) or not IDENTIFIER_PATTERN.fullmatch(raw):
        return Result.invalid()
    return Result.ok(int(raw))


def is_storable_text(value: str) -> bool:
    """PostgreSQL text columns cannot hold NUL bytes."""
    return "\x00" not in value


def validate_text_value(raw: str) -> Result:
    """Check a free-text lookup value (topic slug, username) can be sent to storage."""
    if not is_storable_text(raw):
        return Result.invalid()
    return Result.ok(raw)


def is_storable_identifier(identifier: int) -> bool:
    """True when the id fits the SERIAL range and could therefore exist in storage."""
    return identifier <= MAX_SERIAL_ID


def validate_sort_by(raw: str | None, allowed: frozenset[str], default: str) -> Result:
    """Check a sort_by query value against a resource's column allow-list."""
    if not raw:
        return Result.ok(default)
    if raw not in allowed:
        return Result.invalid(INVALID_SORT_BY_MESSAGE)
    return Result.ok(raw)


def validate_order(raw: str | None, default: str = "desc") -> Result:
    """
    Check an order query value.

    Case-insensitive: "ASC", "Asc" and "asc" all normalize to "asc".
    """
    if not raw:
        return Result.ok(default)
    normalized = raw.lower()
    if normalized not in VALID_ORDERS:
        return Result.invalid(INVALID_ORDER_MESSAGE)
    return Result.ok(normalized)


def parse_vote_delta(payload: Any) -> Result:
    """
    Extract the signed vote adjustment from a PATCH body.

    Accepts ``{"newVotes": <int>}`` or an integer literal string such as "-3".
    Booleans, floats, null, non-numeric strings and values outside the
    INTEGER column range are rejected.
    """
    if not isinstance(payload, dict) or "newVotes" not in payload:
        return Result.invalid()

    delta = payload["newVotes"]
    if isinstance(delta, bool):
        return Result.invalid()
    if isinstance(delta, str) and SIGNED_INTEGER_PATTERN.fullmatch(delta.strip()):
        delta = int(delta.strip())
    if not isinstance(delta, int) or abs(delta) > MAX_SERIAL_ID:
        return Result.invalid()
    return Result.ok(delta)


def validate_comment_submission(payload: Any) -> Result:
    """
    Check a new comment body has a non-blank username and body.

    Neither may contain a NUL byte.

    Returns:
        Result holding ``(username, body)`` on success
    """
    if not isinstance(payload, dict):
        return Result.invalid()

    username = payload.get("username")
    body = payload.get("body")
    if not isinstance(username, str) or not username.strip() or not is_storable_text(username):
        return Result.invalid()
    if not isinstance(body, str) or not body.strip() or not is_storable_text(body):
        return Result.invalid()

    return Result.ok((username, body))
