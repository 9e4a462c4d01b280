"""In-memory Entity Store: copy-on-write collections of clients, sellers and projects.

Every effective mutation swaps in a new tuple for the affected collection and
bumps ``version``; records are replaced with ``dataclasses.replace`` and never
mutated in place, so snapshots handed out earlier stay unchanged.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar
from uuid import uuid4

from app.application.interfaces import EntityStore
from app.domain.entities import Client, Project, Seller

logger = logging.getLogger(__name__)

T = TypeVar("T", Client, Seller, Project)

# Fields owned by the store; callers cannot overwrite them through an update
_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


def _copy_lists(values: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-copy list values so callers cannot mutate stored records later."""
    return {key: list(value) if isinstance(value, list) else value for key, value in values.items()}


class _Collection(Generic[T]):
    """Ordered, immutable-snapshot collection of one entity kind."""

    def __init__(self, label: str, records: Iterable[T] = ()):
        self.label = label
        self.records: tuple[T, ...] = tuple(records)

    def ids(self) -> set[str]:
        return {record.id for record in self.records}

    def find(self, record_id: str) -> T | None:
        return next((r for r in self.records if r.id == record_id), None)

    def append(self, record: T) -> None:
        self.records = (*self.records, record)

    def replace(self, record_id: str, build: Callable[[T], T]) -> T | None:
        current = self.find(record_id)
        if current is None:
            return None
        updated = build(current)
        self.records = tuple(updated if r.id == record_id else r for r in self.records)
        return updated

    def remove(self, record_id: str) -> bool:
        remaining = tuple(r for r in self.records if r.id != record_id)
        if len(remaining) == len(self.records):
            return False
        self.records = remaining
        return True


class InMemoryEntityStore(EntityStore):
    """Process-local Entity Store. State is lost when the process exits."""

    def __init__(
        self,
        clients: Iterable[Client] = (),
        sellers: Iterable[Seller] = (),
        projects: Iterable[Project] = (),
        *,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._clients: _Collection[Client] = _Collection("Client", clients)
        self._sellers: _Collection[Seller] = _Collection("Seller", sellers)
        self._projects: _Collection[Project] = _Collection("Project", projects)
        self._clock = clock
        self._id_factory = id_factory
        self._version = 0

    # ── Snapshots ───────────────────────────────────────────────────

    @property
    def clients(self) -> tuple[Client, ...]:
        return self._clients.records

    @property
    def sellers(self) -> tuple[Seller, ...]:
        return self._sellers.records

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects.records

    @property
    def version(self) -> int:
        return self._version

    # ── Internal helpers ────────────────────────────────────────────

    def _generate_id(self, collection: _Collection) -> str:
        taken = collection.ids()
        new_id = self._id_factory()
        while new_id in taken:
            new_id = self._id_factory()
        return new_id

    def _changes(self, collection: _Collection, record_id: str, changes: Mapping[str, Any]) -> dict[str, Any]:
        ignored = _PROTECTED_FIELDS.intersection(changes)
        if ignored:
            logger.debug(
                "Ignoring store-owned fields %s on %s '%s'",
                sorted(ignored), collection.label, record_id,
            )
        return _copy_lists({k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS})

    def _bump(self, action: str, collection: _Collection, record_id: str) -> None:
        self._version += 1
        logger.debug(
            "%s %s '%s' (version=%d)", action, collection.label, record_id, self._version
        )

    def _update(self, collection: _Collection, record_id: str, changes: Mapping[str, Any]):
        fields = self._changes(collection, record_id, changes)
        updated = collection.replace(record_id, lambda r: dataclasses.replace(r, **fields))
        if updated is None:
            logger.debug("Update skipped, %s '%s' not found", collection.label, record_id)
            return None
        self._bump("Updated", collection, record_id)
        return updated

    def _delete(self, collection: _Collection, record_id: str) -> bool:
        if not collection.remove(record_id):
            logger.debug("Delete skipped, %s '%s' not found", collection.label, record_id)
            return False
        self._bump("Deleted", collection, record_id)
        return True

    def _next_updated_at(self, previous: datetime) -> datetime:
        """Current time, nudged forward so ``updated_at`` always strictly increases."""
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    # ── Clients ─────────────────────────────────────────────────────

    def add_client(self, fields: Mapping[str, Any]) -> Client:
        client = Client(
            **_copy_lists(fields),
            id=self._generate_id(self._clients),
            created_at=self._clock(),
        )
        self._clients.append(client)
        self._bump("Added", self._clients, client.id)
        return client

    def update_client(self, client_id: str, changes: Mapping[str, Any]) -> Client | None:
        return self._update(self._clients, client_id, changes)

    def delete_client(self, client_id: str) -> bool:
        return self._delete(self._clients, client_id)

    def get_client_by_id(self, client_id: str) -> Client | None:
        return self._clients.find(client_id)

    # ── Sellers ─────────────────────────────────────────────────────

    def add_seller(self, fields: Mapping[str, Any]) -> Seller:
        seller = Seller(**_copy_lists(fields), id=self._generate_id(self._sellers))
        self._sellers.append(seller)
        self._bump("Added", self._sellers, seller.id)
        return seller

    def update_seller(self, seller_id: str, changes: Mapping[str, Any]) -> Seller | None:
        return self._update(self._sellers, seller_id, changes)

    def delete_seller(self, seller_id: str) -> bool:
        return self._delete(self._sellers, seller_id)

    def get_seller_by_id(self, seller_id: str) -> Seller | None:
        return self._sellers.find(seller_id)

    # ── Projects ────────────────────────────────────────────────────

    def add_project(self, fields: Mapping[str, Any]) -> Project:
        now = self._clock()
        project = Project(
            **_copy_lists(fields),
            id=self._generate_id(self._projects),
            created_at=now,
            updated_at=now,
        )
        self._projects.append(project)
        self._bump("Added", self._projects, project.id)
        return project

    def update_project(self, project_id: str, changes: Mapping[str, Any]) -> Project | None:
        fields = self._changes(self._projects, project_id, changes)
        updated = self._projects.replace(
            project_id,
            lambda p: dataclasses.replace(
                p, **fields, updated_at=self._next_updated_at(p.updated_at)
            ),
        )
        if updated is None:
            logger.debug("Update skipped, Project '%s' not found", project_id)
            return None
        self._bump("Updated", self._projects, project_id)
        return updated

    def delete_project(self, project_id: str) -> bool:
        return self._delete(self._projects, project_id)

    def get_project_by_id(self, project_id: str) -> Project | None:
        return self._projects.find(project_id)

    def get_projects_by_client_id(self, client_id: str) -> list[Project]:
        return [p for p in self._projects.records if p.client_id == client_id]
