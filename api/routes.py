#!/usr/bin/env python
# ABOUTME: REST API route handlers for Newsboard topics, articles, comments and users
# ABOUTME: Thin adapters: pull request values, call a repository, hand the Result to the error mapper

import os
from datetime import datetime, timezone
from pathlib import Path

import orjson
from flask import current_app, jsonify, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from core.models import format_timestamp
from core.repositories import Repositories

from . import api_v1
from .errors import respond, respond_no_content

# ============================================================================
# CORS AND RATE LIMITING CONFIGURATION
# ============================================================================

CORS(
    api_v1,
    origins="*",
    methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Default limit applies to every API route; RATELIMIT_ENABLED=False turns it off (tests)
api_limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[os.environ.get("NEWSBOARD_RATE_LIMIT", "100 per minute")],
    storage_uri="memory://",
)

# ============================================================================
# ENDPOINT DOCUMENTATION
# ============================================================================

ENDPOINTS_FILE = Path(__file__).with_name("endpoints.json")
ENDPOINTS = orjson.loads(ENDPOINTS_FILE.read_bytes())

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def get_repositories() -> Repositories:
    """Repositories bound to the database handle opened at startup."""
    return current_app.extensions["newsboard"]


def get_json_body():
    """Request body as parsed JSON, or None when absent or malformed."""
    return request.get_json(silent=True)


# ============================================================================
# API ENDPOINTS
# ============================================================================


@api_v1.route("", methods=["GET"])
def get_endpoints():
    """Describe every available endpoint."""
    return jsonify(ENDPOINTS), 200


@api_v1.route("/health", methods=["GET"])
def api_health():
    """
    Health check endpoint for monitoring.

    Returns:
        JSON with health status and timestamp (503 when the database is unreachable)
    """
    healthy = get_repositories().db.health_check()
    return jsonify(
        {
            "status": "healthy" if healthy else "unhealthy",
            "database": "connected" if healthy else "disconnected",
            "timestamp": format_timestamp(datetime.now(timezone.utc)),
        }
    ), (200 if healthy else 503)


@api_v1.route("/topics", methods=["GET"])
def get_topics():
    return respond(get_repositories().topics.list_topics(), "topics")


@api_v1.route("/articles", methods=["GET"])
def get_articles():
    """
    List articles.

    Query Parameters:
        topic (str): Only articles with this topic slug (404 if the topic does not exist)
        sort_by (str): author|title|article_id|topic|created_at|votes|comment_count|article_img_url
                       (default: created_at)
        order (str): asc|desc, case-insensitive (default: desc)
    """
    result = get_repositories().articles.list_articles(
        topic=request.args.get("topic"),
        sort_by=request.args.get("sort_by"),
        order=request.args.get("order"),
    )
    return respond(result, "articles")


@api_v1.route("/articles/<article_id>", methods=["GET"])
def get_article(article_id: str):
    return respond(get_repositories().articles.get_article_by_id(article_id), "article")


@api_v1.route("/articles/<article_id>", methods=["PATCH"])
def patch_article(article_id: str):
    """
    Adjust an article's votes.

    Body:
        {"newVotes": int} - signed delta added to the current vote count
    """
    return respond(get_repositories().articles.patch_article_votes(article_id, get_json_body()), "article")


@api_v1.route("/articles/<article_id>/comments", methods=["GET"])
def get_article_comments(article_id: str):
    return respond(get_repositories().comments.list_comments_by_article(article_id), "comments")


@api_v1.route("/articles/<article_id>/comments", methods=["POST"])
def post_article_comment(article_id: str):
    """
    Add a comment to an article.

    Body:
        {"username": str, "body": str} - username must belong to an existing user
    """
    result = get_repositories().comments.create_comment(article_id, get_json_body())
    return respond(result, "comment", status=201)


@api_v1.route("/comments/<comment_id>", methods=["DELETE"])
def delete_comment(comment_id: str):
    return respond_no_content(get_repositories().comments.delete_comment(comment_id))


@api_v1.route("/users", methods=["GET"])
def get_users():
    return respond(get_repositories().users.list_users(), "users")


@api_v1.route("/users/<username>", methods=["GET"])
def get_user(username: str):
    return respond(get_repositories().users.get_user(username), "user")
