"""
Repositories for the users, projects and tasks collections.

Each repository wraps one :class:`~taskhub_app.storage.JsonFileStore`
collection.  ``create`` is a whole-collection read-modify-write: one
load, append, one save.  No lock guards that sequence, so concurrent
creators of the same collection can lose each other's records.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .errors import ValidationError
from .models import Project, Task, TaskPriority, TaskStatus, User, new_id, utc_now_iso
from .storage import JsonFileStore, Record

logger = logging.getLogger(__name__)


class DuplicateEmailError(ValidationError):
    """Registration attempted with an email that is already taken."""


class Repository:
    """Base class binding a collection name to a store."""

    collection: str = ""

    def __init__(self, store: JsonFileStore) -> None:
        self.store = store

    def list_all(self) -> list[Record]:
        """Return the full collection exactly as stored, in file order."""
        return self.store.load(self.collection)

    def _append(self, record: dict[str, Any], records: list[Record] | None = None) -> None:
        if records is None:
            records = self.store.load(self.collection)
        existing_ids = {item.get("id") for item in records}
        # never reuse an identifier already in the collection
        while record["id"] in existing_ids:
            record["id"] = new_id()
        records.append(record)
        self.store.save(self.collection, records)
        logger.info("Created %s record %s", self.collection, record["id"])


class UserRepository(Repository):
    collection = "users"

    def find_by_email(self, email: str) -> User | None:
        """Return the user whose email matches *email* exactly, if any."""
        for record in self.list_all():
            if record.get("email") == email:
                return User.from_dict(record)
        return None

    def find_by_id(self, user_id: Any) -> User | None:
        """Return the user with identifier *user_id*, if any."""
        for record in self.list_all():
            if record.get("id") == user_id:
                return User.from_dict(record)
        return None

    def create(
        self,
        name: str,
        email: str,
        password: str,
        hash_password: Callable[[str], str],
    ) -> User:
        """
        Append a new user and persist the collection.

        The duplicate-email check, hashing and save all happen against a
        single load of the collection.

        Args:
            name: Display name.
            email: Login email; must not already be registered.
            password: Plain-text password, hashed with *hash_password*
                before anything is stored.
            hash_password: One-way hashing function.

        Raises:
            DuplicateEmailError: If *email* is already registered.
        """
        records = self.store.load(self.collection)
        if any(record.get("email") == email for record in records):
            raise DuplicateEmailError("Email already exists")

        user = User(
            id=new_id(),
            name=name,
            email=email,
            password_hash=hash_password(password),
            created_at=utc_now_iso(),
        )
        record = user.to_dict()
        self._append(record, records)
        user.id = record["id"]
        return user


class ProjectRepository(Repository):
    collection = "projects"

    def create(
        self,
        owner: Any,
        name: str | None = None,
        description: str | None = None,
        due_date: str | None = None,
    ) -> Project:
        """Append a project owned by *owner* and persist the collection."""
        project = Project(
            id=new_id(),
            name=name,
            description=description,
            due_date=due_date,
            owner=owner,
            created_at=utc_now_iso(),
        )
        record = project.to_dict()
        self._append(record)
        project.id = record["id"]
        return project


class TaskRepository(Repository):
    collection = "tasks"

    def create(
        self,
        title: str | None = None,
        description: str | None = None,
        project_id: Any = None,
        priority: str | None = None,
        status: str | None = None,
    ) -> Task:
        """
        Append a task and persist the collection.

        An absent or empty priority becomes ``Medium`` and an absent or
        empty status becomes ``todo``.  *project_id* is not checked
        against the projects collection.
        """
        task = Task(
            id=new_id(),
            title=title,
            description=description,
            project_id=project_id,
            priority=priority or TaskPriority.MEDIUM.value,
            status=status or TaskStatus.TODO.value,
            created_at=utc_now_iso(),
        )
        record = task.to_dict()
        self._append(record)
        task.id = record["id"]
        return task
