"""Abstract Entity Store interface (port) for clients, sellers and projects."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from app.domain.entities import Client, Project, Seller


class EntityStore(ABC):
    """Port for the single source of truth behind every read and write.

    Implementations never raise for unknown ids: updates and deletes of a
    missing record are no-ops. No referential integrity is enforced between
    projects and the clients/sellers they point at.
    """

    # ── Snapshots ───────────────────────────────────────────────────

    @property
    @abstractmethod
    def clients(self) -> tuple[Client, ...]:
        """Current client collection, in insertion order."""
        ...

    @property
    @abstractmethod
    def sellers(self) -> tuple[Seller, ...]:
        ...

    @property
    @abstractmethod
    def projects(self) -> tuple[Project, ...]:
        ...

    @property
    @abstractmethod
    def version(self) -> int:
        """Counter bumped on every effective mutation."""
        ...

    # ── Clients ─────────────────────────────────────────────────────

    @abstractmethod
    def add_client(self, fields: Mapping[str, Any]) -> Client:
        """Append a client; the store assigns ``id`` and ``created_at``."""
        ...

    @abstractmethod
    def update_client(self, client_id: str, changes: Mapping[str, Any]) -> Client | None:
        """Apply ``changes`` to the matching client. Returns None if absent."""
        ...

    @abstractmethod
    def delete_client(self, client_id: str) -> bool:
        """Remove a client. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    def get_client_by_id(self, client_id: str) -> Client | None:
        ...

    # ── Sellers ─────────────────────────────────────────────────────

    @abstractmethod
    def add_seller(self, fields: Mapping[str, Any]) -> Seller:
        """Append a seller; the store assigns ``id``."""
        ...

    @abstractmethod
    def update_seller(self, seller_id: str, changes: Mapping[str, Any]) -> Seller | None:
        ...

    @abstractmethod
    def delete_seller(self, seller_id: str) -> bool:
        ...

    @abstractmethod
    def get_seller_by_id(self, seller_id: str) -> Seller | None:
        ...

    # ── Projects ────────────────────────────────────────────────────

    @abstractmethod
    def add_project(self, fields: Mapping[str, Any]) -> Project:
        """Append a project; the store assigns ``id``, ``created_at`` and ``updated_at``."""
        ...

    @abstractmethod
    def update_project(self, project_id: str, changes: Mapping[str, Any]) -> Project | None:
        """Apply ``changes`` and stamp ``updated_at``. Returns None if absent."""
        ...

    @abstractmethod
    def delete_project(self, project_id: str) -> bool:
        ...

    @abstractmethod
    def get_project_by_id(self, project_id: str) -> Project | None:
        ...

    @abstractmethod
    def get_projects_by_client_id(self, client_id: str) -> list[Project]:
        """All projects referencing ``client_id``, in collection order."""
        ...
