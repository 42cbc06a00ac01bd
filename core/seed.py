# ABOUTME: Seed runner that rebuilds the schema and loads a topics/users/articles/comments dataset
# ABOUTME: Used by the `seed` CLI command and before every integration test

import time
from datetime import datetime, timezone
from typing import Any

from core.postgres_database import PostgresDatabase
from core.seed_data import DEFAULT_IMG_URL
from utils.console_output import print_info, print_success


def from_epoch_millis(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def build_title_lookup(rows: list[dict[str, Any]]) -> dict[str, int]:
    """Map article titles to their assigned article_id."""
    return {row["title"]: row["article_id"] for row in rows}


def seed(db: PostgresDatabase, data: dict[str, list[dict[str, Any]]], quiet: bool = False) -> dict[str, int]:
    """
    Drop and recreate all tables, then load ``data``.

    Args:
        db: Open database handle
        data: Dict with "topics", "users", "articles" and "comments" lists.
              Comments name their article via "article_title".
        quiet: Suppress console output (test runs)

    Returns:
        Row counts inserted per table
    """
    start = time.time()

    db.execute_sql_file("drop.sql")
    db.execute_sql_file("schema.sql")
    db.execute_sql_file("indexes.sql")

    with db.pool.get_connection() as conn:
        with conn.cursor() as cur:
            cur.executemany(
                "INSERT INTO topics (slug, description) VALUES (%s, %s)",
                [(t["slug"], t["description"]) for t in data["topics"]],
            )
            cur.executemany(
                "INSERT INTO users (username, name, avatar_url) VALUES (%s, %s, %s)",
                [(u["username"], u["name"], u["avatar_url"]) for u in data["users"]],
            )

            inserted_articles = []
            for article in data["articles"]:
                cur.execute(
                    """
                    INSERT INTO articles (title, topic, author, body, created_at, votes, article_img_url)
                    VALUES (%s, %s, %s, %s, COALESCE(%s, NOW()), %s, %s)
                    RETURNING article_id, title
                """,
                    (
                        article["title"],
                        article["topic"],
                        article["author"],
                        article["body"],
                        from_epoch_millis(article.get("created_at")),
                        article.get("votes", 0),
                        article.get("article_img_url", DEFAULT_IMG_URL),
                    ),
                )
                inserted_articles.append(cur.fetchone())

            title_to_id = build_title_lookup(inserted_articles)

            cur.executemany(
                """
                INSERT INTO comments (body, article_id, author, votes, created_at)
                VALUES (%s, %s, %s, %s, COALESCE(%s, NOW()))
            """,
                [
                    (
                        c["body"],
                        title_to_id[c["article_title"]],
                        c["author"],
                        c.get("votes", 0),
                        from_epoch_millis(c.get("created_at")),
                    )
                    for c in data["comments"]
                ],
            )
        conn.commit()

    counts = {
        "topics": len(data["topics"]),
        "users": len(data["users"]),
        "articles": len(inserted_articles),
        "comments": len(data["comments"]),
    }

    if not quiet:
        print_success(f"Seeded database in {time.time() - start:.2f}s")
        for table, count in counts.items():
            print_info(f"  {table}: {count}")

    return counts
