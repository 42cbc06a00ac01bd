# ABOUTME: Topic, article, comment and user repositories over PostgresDatabase
# ABOUTME: Validates raw request values, runs parameterized SQL and returns classified Results

import functools
import logging
from dataclasses import dataclass

import psycopg
from psycopg import errors, sql

from core.models import ArticleDetail, ArticleSummary, Comment, Topic, User
from core.postgres_database import PostgresDatabase
from core.results import Result
from utils.error_handling import format_user_error
from utils.input_validation import (
    is_storable_identifier,
    parse_identifier,
    parse_vote_delta,
    validate_comment_submission,
    validate_order,
    validate_sort_by,
    validate_text_value,
)

logger = logging.getLogger(__name__)

# Sortable article columns. Values are the only identifiers ever placed in ORDER BY.
ARTICLE_SORT_COLUMNS = {
    "author": sql.Identifier("a", "author"),
    "title": sql.Identifier("a", "title"),
    "article_id": sql.Identifier("a", "article_id"),
    "topic": sql.Identifier("a", "topic"),
    "created_at": sql.Identifier("a", "created_at"),
    "votes": sql.Identifier("a", "votes"),
    "comment_count": sql.Identifier("comment_count"),
    "article_img_url": sql.Identifier("a", "article_img_url"),
}
ARTICLE_SORT_FIELDS = frozenset(ARTICLE_SORT_COLUMNS)

SORT_DIRECTIONS = {"asc": sql.SQL("ASC"), "desc": sql.SQL("DESC")}

DEFAULT_ARTICLE_SORT = "created_at"
DEFAULT_ARTICLE_ORDER = "desc"

ARTICLE_DETAIL_QUERY = """
    SELECT a.article_id, a.author, a.title, a.body, a.topic, a.created_at,
           a.votes, a.article_img_url, COUNT(c.comment_id)::INT AS comment_count
    FROM articles a
    LEFT JOIN comments c ON c.article_id = a.article_id
    WHERE a.article_id = %s
    GROUP BY a.article_id
"""

ARTICLE_VOTE_UPDATE = """
    WITH updated AS (
        UPDATE articles SET votes = votes + %s
        WHERE article_id = %s
        RETURNING *
    )
    SELECT u.article_id, u.author, u.title, u.body, u.topic, u.created_at,
           u.votes, u.article_img_url,
           (SELECT COUNT(*) FROM comments c WHERE c.article_id = u.article_id)::INT AS comment_count
    FROM updated u
"""


def classify_storage_errors(context: str):
    """Decorator turning storage exceptions into an UNCLASSIFIED Result.

    Args:
        context: Label used when logging the failure (e.g. "articles.get")

    Returns:
        Decorated repository method
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except psycopg.Error as e:
                return Result.unclassified(format_user_error(e, context))

        return wrapper

    return decorator


class Repository:
    """Base class holding the storage handle passed in at application startup."""

    def __init__(self, db: PostgresDatabase):
        self.db = db


class TopicRepository(Repository):
    @classify_storage_errors("topics.list")
    def list_topics(self) -> Result:
        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT slug, description FROM topics")
                return Result.ok([Topic.from_row(row) for row in cur.fetchall()])


class ArticleRepository(Repository):
    @classify_storage_errors("articles.get")
    def get_article_by_id(self, raw_article_id: str) -> Result:
        """Fetch one article with its comment count."""
        parsed = parse_identifier(raw_article_id)
        if not parsed.is_ok:
            return parsed
        if not is_storable_identifier(parsed.value):
            return Result.not_found()

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(ARTICLE_DETAIL_QUERY, (parsed.value,))
                row = cur.fetchone()

        if row is None:
            return Result.not_found()
        return Result.ok(ArticleDetail.from_row(row))

    @classify_storage_errors("articles.list")
    def list_articles(self, topic: str | None = None, sort_by: str | None = None, order: str | None = None) -> Result:
        """
        List article summaries, optionally filtered by topic.

        An existing topic with no articles yields an empty list; an unknown
        topic is NOT_FOUND. Both are decided by one query. sort_by and order
        are checked against allow-lists before any SQL is built.
        """
        sort_result = validate_sort_by(sort_by, ARTICLE_SORT_FIELDS, DEFAULT_ARTICLE_SORT)
        if not sort_result.is_ok:
            return sort_result
        order_result = validate_order(order, DEFAULT_ARTICLE_ORDER)
        if not order_result.is_ok:
            return order_result

        if topic:
            topic_result = validate_text_value(topic)
            if not topic_result.is_ok:
                return topic_result
            # Topic row drives the join: no rows means unknown topic, a null article means none yet
            source = sql.SQL("""
            FROM topics t
            LEFT JOIN articles a ON a.topic = t.slug
            LEFT JOIN comments c ON c.article_id = a.article_id
            WHERE t.slug = %s
            GROUP BY t.slug, a.article_id""")
            params = (topic,)
        else:
            source = sql.SQL("""
            FROM articles a
            LEFT JOIN comments c ON c.article_id = a.article_id
            GROUP BY a.article_id""")
            params = ()

        query = sql.SQL("""
            SELECT a.article_id, a.author, a.title, a.topic, a.created_at,
                   a.votes, a.article_img_url, COUNT(c.comment_id)::INT AS comment_count
            {source}
            ORDER BY {column} {direction}
        """).format(
            source=source,
            column=ARTICLE_SORT_COLUMNS[sort_result.value],
            direction=SORT_DIRECTIONS[order_result.value],
        )

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, params)
                rows = cur.fetchall()

        if topic and not rows:
            return Result.not_found()
        return Result.ok([ArticleSummary.from_row(row) for row in rows if row["article_id"] is not None])

    @classify_storage_errors("articles.patch_votes")
    def patch_article_votes(self, raw_article_id: str, payload) -> Result:
        """Apply a signed vote delta in a single UPDATE and return the updated article."""
        parsed = parse_identifier(raw_article_id)
        if not parsed.is_ok:
            return parsed
        delta = parse_vote_delta(payload)
        if not delta.is_ok:
            return delta
        if not is_storable_identifier(parsed.value):
            return Result.not_found()

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                try:
                    cur.execute(ARTICLE_VOTE_UPDATE, (delta.value, parsed.value))
                except errors.NumericValueOutOfRange:
                    # Resulting vote count does not fit the INTEGER column
                    conn.rollback()
                    return Result.invalid()
                row = cur.fetchone()
            conn.commit()

        if row is None:
            return Result.not_found()

        logger.info("Article %s votes adjusted by %+d", parsed.value, delta.value)
        return Result.ok(ArticleDetail.from_row(row))


class CommentRepository(Repository):
    @classify_storage_errors("comments.list")
    def list_comments_by_article(self, raw_article_id: str) -> Result:
        """Comments for an article, newest first. The article itself must exist."""
        parsed = parse_identifier(raw_article_id)
        if not parsed.is_ok:
            return parsed
        if not is_storable_identifier(parsed.value):
            return Result.not_found()

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                # LEFT JOIN keeps one null-comment row for an article without comments
                cur.execute(
                    """
                    SELECT c.comment_id, a.article_id, c.author, c.body, c.votes, c.created_at
                    FROM articles a
                    LEFT JOIN comments c ON c.article_id = a.article_id
                    WHERE a.article_id = %s
                    ORDER BY c.created_at DESC
                """,
                    (parsed.value,),
                )
                rows = cur.fetchall()

        if not rows:
            return Result.not_found()
        return Result.ok([Comment.from_row(row) for row in rows if row["comment_id"] is not None])

    @classify_storage_errors("comments.create")
    def create_comment(self, raw_article_id: str, payload) -> Result:
        """
        Insert a comment on an article.

        Unknown article ids and unknown usernames both surface from storage as
        foreign key violations and are reported as NOT_FOUND.
        """
        parsed = parse_identifier(raw_article_id)
        if not parsed.is_ok:
            return parsed
        submission = validate_comment_submission(payload)
        if not submission.is_ok:
            return submission
        if not is_storable_identifier(parsed.value):
            return Result.not_found()

        username, body = submission.value

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                try:
                    cur.execute(
                        """
                        INSERT INTO comments (article_id, author, body)
                        VALUES (%s, %s, %s)
                        RETURNING comment_id, article_id, author, body, votes, created_at
                    """,
                        (parsed.value, username, body),
                    )
                except errors.ForeignKeyViolation:
                    conn.rollback()
                    return Result.not_found()
                row = cur.fetchone()
            conn.commit()

        logger.info("Comment %s created on article %s by %s", row["comment_id"], parsed.value, username)
        return Result.ok(Comment.from_row(row))

    @classify_storage_errors("comments.delete")
    def delete_comment(self, raw_comment_id: str) -> Result:
        parsed = parse_identifier(raw_comment_id)
        if not parsed.is_ok:
            return parsed
        if not is_storable_identifier(parsed.value):
            return Result.not_found()

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM comments WHERE comment_id = %s RETURNING comment_id", (parsed.value,))
                deleted = cur.fetchone()
            conn.commit()

        if deleted is None:
            return Result.not_found()

        logger.info("Comment %s deleted", parsed.value)
        return Result.ok()


class UserRepository(Repository):
    @classify_storage_errors("users.list")
    def list_users(self) -> Result:
        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT username, name, avatar_url FROM users")
                return Result.ok([User.from_row(row) for row in cur.fetchall()])

    @classify_storage_errors("users.get")
    def get_user(self, username: str) -> Result:
        checked = validate_text_value(username)
        if not checked.is_ok:
            return checked

        with self.db.pool.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT username, name, avatar_url FROM users WHERE username = %s", (username,))
                row = cur.fetchone()

        if row is None:
            return Result.not_found()
        return Result.ok(User.from_row(row))


@dataclass(frozen=True)
class Repositories:
    """Repository set bound to one database handle, created once per application."""

    db: PostgresDatabase
    topics: TopicRepository
    articles: ArticleRepository
    comments: CommentRepository
    users: UserRepository

    @classmethod
    def from_database(cls, db: PostgresDatabase) -> "Repositories":
        return cls(
            db=db,
            topics=TopicRepository(db),
            articles=ArticleRepository(db),
            comments=CommentRepository(db),
            users=UserRepository(db),
        )
