#!/usr/bin/env python
"""
ABOUTME: Unit tests for response models and timestamp formatting
ABOUTME: Checks row mapping, body omission on summaries and UTC millisecond timestamps
"""

from datetime import datetime, timedelta, timezone

from core.models import ArticleDetail, ArticleSummary, Comment, format_timestamp

ARTICLE_ROW = {
    "article_id": 1,
    "author": "butter_bridge",
    "title": "Living in the shadow of a great man",
    "body": "I find this existence challenging",
    "topic": "mitch",
    "created_at": datetime(2020, 7, 9, 20, 11, tzinfo=timezone.utc),
    "votes": 100,
    "article_img_url": "https://example.com/img.jpg",
    "comment_count": 11,
}


def test_format_timestamp_uses_utc_with_milliseconds():
    value = datetime(2020, 7, 9, 20, 11, 0, 123456, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2020-07-09T20:11:00.123Z"


def test_format_timestamp_converts_offsets_to_utc():
    value = datetime(2020, 7, 9, 22, 11, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(value) == "2020-07-09T20:11:00.000Z"


def test_format_timestamp_none():
    assert format_timestamp(None) is None


def test_article_summary_omits_body():
    data = ArticleSummary.from_row(ARTICLE_ROW).to_dict()
    assert "body" not in data
    assert data["created_at"] == "2020-07-09T20:11:00.000Z"
    assert data["comment_count"] == 11


def test_article_detail_includes_body():
    data = ArticleDetail.from_row(ARTICLE_ROW).to_dict()
    assert data["body"] == "I find this existence challenging"
    assert data["article_id"] == 1


def test_comment_to_dict():
    row = {
        "comment_id": 5,
        "article_id": 1,
        "author": "icellusedkars",
        "body": "I hate streaming noses",
        "votes": 0,
        "created_at": datetime(2020, 11, 3, 21, 0, tzinfo=timezone.utc),
    }
    assert Comment.from_row(row).to_dict() == {**row, "created_at": "2020-11-03T21:00:00.000Z"}
