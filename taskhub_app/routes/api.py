"""
JSON API endpoints for authentication, projects and tasks.

All endpoints return JSON.  Errors are raised as
:class:`~taskhub_app.errors.ApiError` subclasses and turned into
``{"error": "..."}`` responses by the application error handlers.

Endpoints:
    POST /api/auth/register - Create a user and return a token
    POST /api/auth/login    - Exchange email/password for a token
    GET  /api/me            - Stored profile of the caller (auth)
    GET  /api/projects      - List all projects (auth)
    POST /api/projects      - Create a project owned by the caller (auth)
    GET  /api/tasks         - List all tasks (auth)
    POST /api/tasks         - Create a task (auth)
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, g, jsonify, request

from .. import get_services
from ..auth import require_auth
from ..errors import AuthError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

INVALID_CREDENTIALS = "Invalid email or password"


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def read_json_body() -> dict[str, Any]:
    """
    Parse the request body as a JSON object.

    An empty body is treated as ``{}``.

    Raises:
        ValidationError: If the body is not valid JSON or not an object.
    """
    if not request.get_data(cache=True):
        return {}

    data = request.get_json(force=True, silent=True)
    if data is None:
        raise ValidationError("Malformed JSON body")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def has_required_fields(data: dict[str, Any], required_fields: list[str]) -> bool:
    """Return True when every field is a string with non-blank content."""
    for field in required_fields:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            return False
    return True


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------

@api_bp.route("/auth/register", methods=["POST"], provide_automatic_options=False)
def register() -> tuple[Response, int]:
    """
    Register a new user account.

    Request Body (JSON):
        name, email, password (all required)

    Returns:
        201 with ``user`` (no password hash) and ``token``.
        400 if a field is missing or the email is already registered.
    """
    logger.info("POST /api/auth/register - Registering user")

    data = read_json_body()
    if not has_required_fields(data, ["name", "email", "password"]):
        logger.warning("Registration rejected: missing fields")
        raise ValidationError("Missing fields")

    services = get_services()
    user = services.users.create(
        name=data["name"],
        email=data["email"],
        password=data["password"],
        hash_password=services.credentials.hash_password,
    )
    token = services.credentials.issue_token(user.claims())

    logger.info("Registered user %s", user.id)
    return jsonify({"user": user.to_public_dict(), "token": token}), 201


@api_bp.route("/auth/login", methods=["POST"], provide_automatic_options=False)
def login() -> tuple[Response, int]:
    """
    Authenticate a user and issue a token.

    The same ``"Invalid email or password"`` message is used for an
    unknown email and a wrong password so callers cannot tell which one
    failed.

    Returns:
        200 with ``user`` and ``token`` on success.
        401 if the credentials are incorrect or missing.
    """
    logger.info("POST /api/auth/login - Authenticating user")

    data = read_json_body()
    email = data.get("email")
    password = data.get("password")

    services = get_services()
    user = services.users.find_by_email(email) if isinstance(email, str) else None
    if user is None or not services.credentials.verify_password(password, user.password_hash):
        logger.warning("Login failed")
        raise AuthError(INVALID_CREDENTIALS)

    token = services.credentials.issue_token(user.claims())
    return jsonify({"user": user.to_public_dict(), "token": token}), 200


@api_bp.route("/me", methods=["GET"], provide_automatic_options=False)
@require_auth
def me() -> tuple[Response, int]:
    """
    Return the stored profile of the authenticated user.

    This is the full stored record except ``passwordHash``, which is
    deliberately withheld so the hash never leaves the server.

    Returns:
        200 with ``user`` (without the password hash).
        404 if the user in the token no longer exists.
    """
    user = get_services().users.find_by_id(g.current_user["id"])
    if user is None:
        logger.warning("Token subject %s not found", g.current_user["id"])
        raise NotFoundError("Not found")
    return jsonify({"user": user.to_public_dict()}), 200


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------

@api_bp.route("/projects", methods=["GET"], provide_automatic_options=False)
@require_auth
def get_projects() -> tuple[Response, int]:
    """List every project in file order."""
    projects = get_services().projects.list_all()
    logger.info("GET /api/projects - Found %d projects", len(projects))
    return jsonify({"projects": projects}), 200


@api_bp.route("/projects", methods=["POST"], provide_automatic_options=False)
@require_auth
def create_project() -> tuple[Response, int]:
    """
    Create a project owned by the caller.

    Request Body (JSON):
        name: Project name
        description: Project description
        dueDate: Due date, stored as sent

    Returns:
        201 with the created ``project``.
    """
    data = read_json_body()
    project = get_services().projects.create(
        owner=g.current_user["id"],
        name=data.get("name"),
        description=data.get("description"),
        due_date=data.get("dueDate"),
    )
    return jsonify({"project": project.to_dict()}), 201


# -----------------------------------------------------------------------------
# Tasks
# -----------------------------------------------------------------------------

@api_bp.route("/tasks", methods=["GET"], provide_automatic_options=False)
@require_auth
def get_tasks() -> tuple[Response, int]:
    """List every task in file order."""
    tasks = get_services().tasks.list_all()
    logger.info("GET /api/tasks - Found %d tasks", len(tasks))
    return jsonify({"tasks": tasks}), 200


@api_bp.route("/tasks", methods=["POST"], provide_automatic_options=False)
@require_auth
def create_task() -> tuple[Response, int]:
    """
    Create a task.

    Request Body (JSON):
        title: Task title
        description: Task description
        projectId: Project reference (not checked)
        priority: Task priority (optional, default: Medium)
        status: Task status (optional, default: todo)

    Returns:
        201 with the created ``task``.
    """
    data = read_json_body()
    task = get_services().tasks.create(
        title=data.get("title"),
        description=data.get("description"),
        project_id=data.get("projectId"),
        priority=data.get("priority"),
        status=data.get("status"),
    )
    return jsonify({"task": task.to_dict()}), 201
