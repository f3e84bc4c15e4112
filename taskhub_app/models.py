"""
Record types for the TaskHub collections.

Each record is a small dataclass that converts to and from the camelCase
dictionaries stored in the JSON files and returned by the API.  Fields
other than the identifier and timestamps are kept as the client sent
them; only presence is ever checked.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Enumeration of task statuses used by the front-end."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskPriority(str, Enum):
    """Enumeration of task priorities used by the front-end."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def new_id() -> str:
    """Return a fresh collision-free record identifier."""
    return uuid.uuid4().hex


def utc_now_iso() -> str:
    """Return the current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class User:
    """
    Registered user.

    Attributes:
        id: Unique identifier.
        name: Display name.
        email: Login email, unique across users (case-sensitive).
        password_hash: Werkzeug hash of the password; never the raw value.
        created_at: ISO-8601 UTC timestamp of registration.
    """

    id: str
    name: str
    email: str
    password_hash: str
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(
            id=data["id"],
            name=data.get("name"),
            email=data.get("email"),
            password_hash=data.get("passwordHash"),
            created_at=data.get("createdAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the stored representation, including the password hash."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "passwordHash": self.password_hash,
            "createdAt": self.created_at,
        }

    def to_public_dict(self) -> dict[str, Any]:
        """
        Return a client-safe representation.

        ``passwordHash`` is left out so the output can be returned
        directly in API responses.
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at,
        }

    def claims(self) -> dict[str, Any]:
        """Identity claims embedded in this user's bearer tokens."""
        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.email}>"


@dataclass
class Project:
    """Project owned by the user who created it."""

    id: str
    name: str | None
    description: str | None
    due_date: str | None
    owner: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "dueDate": self.due_date,
            "owner": self.owner,
            "createdAt": self.created_at,
        }

    def __repr__(self) -> str:
        return f"<Project {self.id}: {self.name}>"


@dataclass
class Task:
    """
    Task belonging to a project.

    ``project_id`` is stored as given; it is not checked against the
    projects collection.
    """

    id: str
    title: str | None
    description: str | None
    project_id: Any
    priority: str
    status: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "projectId": self.project_id,
            "priority": self.priority,
            "status": self.status,
            "createdAt": self.created_at,
        }

    def __repr__(self) -> str:
        return f"<Task {self.id}: {self.title}>"
