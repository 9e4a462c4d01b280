"""Application service (use case) for Client operations."""

from dataclasses import dataclass

from app.application.interfaces import EntityStore
from app.application.schemas import ClientCreate, ClientUpdate
from app.domain.entities import Client, Project
from app.domain.exceptions import EntityNotFoundError

from ._search import matches_search


@dataclass
class ClientOverview:
    """A client together with the number of projects that reference it."""

    client: Client
    project_count: int


class ClientService:
    """Orchestrates client CRUD logic. Depends on the Entity Store port (DI)."""

    def __init__(self, store: EntityStore):
        self._store = store

    def get_client(self, client_id: str) -> Client:
        client = self._store.get_client_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    def list_clients(self, search: str | None = None) -> list[ClientOverview]:
        """Clients whose name or email contains ``search``, in collection order."""
        return [
            ClientOverview(
                client=client,
                project_count=len(self._store.get_projects_by_client_id(client.id)),
            )
            for client in self._store.clients
            if matches_search(search, client.name, client.email)
        ]

    def list_client_projects(self, client_id: str) -> list[Project]:
        """Projects referencing ``client_id``, even when the client no longer exists."""
        return self._store.get_projects_by_client_id(client_id)

    def create_client(self, data: ClientCreate) -> Client:
        return self._store.add_client(data.model_dump())

    def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        self.get_client(client_id)
        updated = self._store.update_client(client_id, data.model_dump(exclude_unset=True))
        if updated is None:
            raise EntityNotFoundError("Client", client_id)
        return updated

    def delete_client(self, client_id: str) -> bool:
        """Delete a client. Projects referencing it are left in place."""
        self.get_client(client_id)
        return self._store.delete_client(client_id)
