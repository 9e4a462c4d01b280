"""Application service (use case) for Project operations."""

import logging
from collections.abc import Set
from dataclasses import dataclass
from typing import Any

from app.application.interfaces import BlobStorage, EntityStore
from app.application.schemas import ProjectCreate, ProjectUpdate
from app.domain.entities import (
    Company,
    Extra,
    Measurement,
    Project,
    ProjectFile,
    ProjectImage,
    ProjectStatus,
)
from app.domain.exceptions import EntityNotFoundError

from ._search import matches_search

logger = logging.getLogger(__name__)

# Nested list fields → domain entity constructors
_NESTED_FIELDS = {
    "extras": Extra,
    "measurements": Measurement,
    "images": ProjectImage,
    "files": ProjectFile,
}


@dataclass
class ProjectOverview:
    """A project with its client and seller names resolved for list views.

    Names are None when the referenced record no longer exists.
    """

    project: Project
    client_name: str | None
    seller_name: str | None


def to_domain_fields(values: dict[str, Any]) -> dict[str, Any]:
    """Turn a dumped project schema into Entity Store field values."""
    fields = dict(values)
    for key, entity_cls in _NESTED_FIELDS.items():
        if fields.get(key) is not None:
            fields[key] = [entity_cls(**item) for item in fields[key]]
    return fields


def build_overview(store: EntityStore, project: Project) -> ProjectOverview:
    client = store.get_client_by_id(project.client_id)
    seller = store.get_seller_by_id(project.seller_id)
    return ProjectOverview(
        project=project,
        client_name=client.name if client else None,
        seller_name=seller.name if seller else None,
    )


class ProjectService:
    """Orchestrates project CRUD logic. Depends on the Entity Store port (DI).

    Attachment bytes live in blob storage keyed by file id; whenever a file
    leaves a project here, its blob is discarded too.
    """

    def __init__(self, store: EntityStore, blobs: BlobStorage):
        self._store = store
        self._blobs = blobs

    def _discard_blobs(self, files: list[ProjectFile], keep: Set[str] = frozenset()) -> None:
        for project_file in files:
            if project_file.id not in keep:
                self._blobs.delete(project_file.id)

    def get_project(self, project_id: str) -> Project:
        project = self._store.get_project_by_id(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    def list_projects(
        self,
        *,
        search: str | None = None,
        status: ProjectStatus | None = None,
        company: Company | None = None,
        client_id: str | None = None,
    ) -> list[ProjectOverview]:
        """Projects matching every given filter, in collection order."""
        projects = (
            self._store.get_projects_by_client_id(client_id)
            if client_id
            else self._store.projects
        )
        return [
            build_overview(self._store, project)
            for project in projects
            if matches_search(search, project.name)
            and (status is None or project.status == status)
            and (company is None or project.company == company)
        ]

    def create_project(self, data: ProjectCreate) -> Project:
        return self._store.add_project(to_domain_fields(data.model_dump()))

    def update_project(self, project_id: str, data: ProjectUpdate) -> Project:
        """Apply the set fields. A replacement ``files`` list drops the bytes of omitted files."""
        current = self.get_project(project_id)
        changes = to_domain_fields(data.model_dump(exclude_unset=True))
        updated = self._store.update_project(project_id, changes)
        if updated is None:
            raise EntityNotFoundError("Project", project_id)
        if "files" in changes:
            self._discard_blobs(current.files, keep={f.id for f in updated.files})
        return updated

    def delete_project(self, project_id: str) -> bool:
        project = self.get_project(project_id)
        deleted = self._store.delete_project(project_id)
        if deleted:
            self._discard_blobs(project.files)
            logger.info("Deleted project %s and %d attachment(s)", project_id, len(project.files))
        return deleted
