#!/usr/bin/env python
"""
ABOUTME: Unit tests for identifier, sort/order, vote delta and comment payload validation
ABOUTME: Pure functions, no database required
"""

import pytest

from core.results import ErrorKind
from utils.input_validation import (
    INVALID_ORDER_MESSAGE,
    INVALID_SORT_BY_MESSAGE,
    MAX_SERIAL_ID,
    is_storable_identifier,
    parse_identifier,
    parse_vote_delta,
    validate_comment_submission,
    validate_order,
    validate_sort_by,
    validate_text_value,
)

SORT_FIELDS = frozenset({"title", "votes", "created_at"})


class TestParseIdentifier:
    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("0", 0), ("007", 7)])
    def test_accepts_integer_literals(self, raw, expected):
        result = parse_identifier(raw)
        assert result.is_ok
        assert result.value == expected

    @pytest.mark.parametrize("raw", ["not-a-number", "1.5", "-1", "+1", " 1", "1\n", "", "1e3", None])
    def test_rejects_everything_else(self, raw):
        result = parse_identifier(raw)
        assert not result.is_ok
        assert result.failure.kind is ErrorKind.INVALID_ARGUMENT

    def test_huge_identifier_is_well_formed_but_not_storable(self):
        result = parse_identifier("99999999999999")
        assert result.is_ok
        assert not is_storable_identifier(result.value)
        assert is_storable_identifier(MAX_SERIAL_ID)


class TestSortAndOrder:
    def test_missing_sort_by_uses_default(self):
        assert validate_sort_by(None, SORT_FIELDS, "created_at").value == "created_at"
        assert validate_sort_by("", SORT_FIELDS, "created_at").value == "created_at"

    def test_allowed_sort_by_passes_through(self):
        assert validate_sort_by("title", SORT_FIELDS, "created_at").value == "title"

    @pytest.mark.parametrize("raw", ["body", "Title", "votes; DROP TABLE articles", "a.title"])
    def test_unknown_sort_by_is_rejected_with_message(self, raw):
        result = validate_sort_by(raw, SORT_FIELDS, "created_at")
        assert result.failure.kind is ErrorKind.INVALID_ARGUMENT
        assert result.failure.msg == INVALID_SORT_BY_MESSAGE

    @pytest.mark.parametrize("raw,expected", [(None, "desc"), ("", "desc"), ("asc", "asc"), ("DESC", "desc"), ("Asc", "asc")])
    def test_order_normalizes_case(self, raw, expected):
        assert validate_order(raw).value == expected

    def test_invalid_order_is_rejected_with_message(self):
        result = validate_order("sideways")
        assert result.failure.kind is ErrorKind.INVALID_ARGUMENT
        assert result.failure.msg == INVALID_ORDER_MESSAGE


class TestParseVoteDelta:
    @pytest.mark.parametrize("value,expected", [(1, 1), (-100, -100), (0, 0), ("5", 5), ("-3", -3)])
    def test_accepts_integers(self, value, expected):
        result = parse_vote_delta({"newVotes": value})
        assert result.is_ok
        assert result.value == expected

    @pytest.mark.parametrize("value", ["not-a-number", 1.5, True, None, [1], MAX_SERIAL_ID + 1, -(MAX_SERIAL_ID + 1)])
    def test_rejects_non_integers_and_out_of_range(self, value):
        result = parse_vote_delta({"newVotes": value})
        assert result.failure.kind is ErrorKind.INVALID_ARGUMENT

    @pytest.mark.parametrize("payload", [None, {}, {"votes": 1}, [1], "newVotes"])
    def test_rejects_missing_field(self, payload):
        assert not parse_vote_delta(payload).is_ok


class TestValidateCommentSubmission:
    def test_returns_username_and_body(self):
        result = validate_comment_submission({"username": "lurker", "body": "hello", "votes": 9})
        assert result.value == ("lurker", "hello")

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {},
            {"body": "hello"},
            {"username": "lurker"},
            {"username": "", "body": "hello"},
            {"username": "lurker", "body": "   "},
            {"username": 5, "body": "hello"},
            {"username": "lurker", "body": "hel\x00lo"},
            {"username": "lur\x00ker", "body": "hello"},
        ],
    )
    def test_rejects_incomplete_payloads(self, payload):
        result = validate_comment_submission(payload)
        assert result.failure.kind is ErrorKind.INVALID_ARGUMENT


class TestValidateTextValue:
    def test_accepts_plain_text(self):
        assert validate_text_value("mitch").value == "mitch"

    @pytest.mark.parametrize("raw", ["\x00", "mitch\x00", "\x00mitch"])
    def test_rejects_nul_bytes(self, raw):
        result = validate_text_value(raw)
        assert result.failure.kind is ErrorKind.INVALID_ARGUMENT
