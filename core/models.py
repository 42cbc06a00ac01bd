# ABOUTME: Response shapes for topics, users, articles and comments
# ABOUTME: ArticleSummary (list view, no body) and ArticleDetail (single view) are separate types

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any


def format_timestamp(value: datetime | None) -> str | None:
    """Render a timestamp as ISO 8601 UTC with millisecond precision, e.g. 2020-07-09T20:11:00.000Z."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class Topic:
    slug: str
    description: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Topic":
        return cls(slug=row["slug"], description=row["description"])

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class User:
    username: str
    name: str
    avatar_url: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "User":
        return cls(username=row["username"], name=row["name"], avatar_url=row["avatar_url"])

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ArticleSummary:
    """Article as it appears in GET /api/articles (body omitted)."""

    article_id: int
    author: str
    title: str
    topic: str
    created_at: datetime
    votes: int
    article_img_url: str
    comment_count: int

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ArticleSummary":
        return cls(
            article_id=row["article_id"],
            author=row["author"],
            title=row["title"],
            topic=row["topic"],
            created_at=row["created_at"],
            votes=row["votes"],
            article_img_url=row["article_img_url"],
            comment_count=int(row["comment_count"]),
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["created_at"] = format_timestamp(self.created_at)
        return data


@dataclass(frozen=True)
class ArticleDetail:
    """Article as it appears in GET/PATCH /api/articles/<id>."""

    article_id: int
    author: str
    title: str
    body: str
    topic: str
    created_at: datetime
    votes: int
    article_img_url: str
    comment_count: int

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ArticleDetail":
        return cls(
            article_id=row["article_id"],
            author=row["author"],
            title=row["title"],
            body=row["body"],
            topic=row["topic"],
            created_at=row["created_at"],
            votes=row["votes"],
            article_img_url=row["article_img_url"],
            comment_count=int(row["comment_count"]),
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["created_at"] = format_timestamp(self.created_at)
        return data


@dataclass(frozen=True)
class Comment:
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Comment":
        return cls(
            comment_id=row["comment_id"],
            article_id=row["article_id"],
            author=row["author"],
            body=row["body"],
            votes=row["votes"],
            created_at=row["created_at"],
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["created_at"] = format_timestamp(self.created_at)
        return data
