"""Application service for project file attachments.

Attachments are metadata entries inside the owning Project; every change goes
through ``EntityStore.update_project`` with a rewritten ``files`` list. The
bytes themselves sit in blob storage keyed by file id.
"""

import dataclasses
import logging
import mimetypes
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePath
from uuid import uuid4

from app.application.interfaces import BlobStorage, EntityStore, StoredBlob
from app.application.schemas import FileSortField, SortDirection
from app.domain.entities import (
    MAX_FILE_NAME_LENGTH,
    Project,
    ProjectFile,
    classify_file_type,
    fit_file_name,
    is_allowed_file,
)
from app.domain.exceptions import (
    EntityNotFoundError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from app.infrastructure.logging.colored_logger import UploadLogger, UploadStage

from ._search import matches_search
from .upload_progress import UploadProgressAnimator

logger = logging.getLogger(__name__)
upload_log = UploadLogger(__name__)

CONTENT_URL_TEMPLATE = "/api/v1/projects/{project_id}/files/{file_id}/content"


@dataclass
class FileUpload:
    """One incoming file as received from the client."""

    filename: str
    content: bytes
    content_type: str | None = None


def _sort_key(field: FileSortField):
    if field is FileSortField.NAME:
        return lambda f: f.name.casefold()
    if field is FileSortField.TYPE:
        return lambda f: f.type.value
    return lambda f: f.uploaded_at


class ProjectFileService:
    """Attach, list, rename, delete and serve files belonging to a project."""

    def __init__(
        self,
        store: EntityStore,
        blobs: BlobStorage,
        *,
        uploader_name: str,
        max_upload_bytes: int,
        progress: UploadProgressAnimator | None = None,
        content_url_template: str = CONTENT_URL_TEMPLATE,
    ):
        self._store = store
        self._blobs = blobs
        self._uploader_name = uploader_name
        self._max_upload_bytes = max_upload_bytes
        self._progress = progress
        self._content_url_template = content_url_template

    # ── Helpers ─────────────────────────────────────────────────────

    def _get_project(self, project_id: str) -> Project:
        project = self._store.get_project_by_id(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    @staticmethod
    def _find_file(project: Project, file_id: str) -> ProjectFile:
        for project_file in project.files:
            if project_file.id == file_id:
                return project_file
        raise EntityNotFoundError("ProjectFile", file_id)

    def _validate_batch(self, uploads: list[FileUpload]) -> None:
        """Reject the whole batch before anything is stored."""
        rejected = [u.filename for u in uploads if not is_allowed_file(u.filename)]
        if rejected:
            raise UnsupportedFileTypeError(rejected)
        for upload in uploads:
            if len(upload.content) > self._max_upload_bytes:
                raise FileTooLargeError(upload.filename, len(upload.content), self._max_upload_bytes)

    # ── Operations ──────────────────────────────────────────────────

    def attach_files(self, project_id: str, uploads: list[FileUpload]) -> list[ProjectFile]:
        """Store the bytes, append metadata to the project, start progress feedback."""
        project = self._get_project(project_id)
        if not uploads:
            return []
        with upload_log.timed_step(UploadStage.INTAKE, f"Validating {len(uploads)} file(s)", project=project_id):
            self._validate_batch(uploads)

        uploaded_at = datetime.now(timezone.utc)
        new_files: list[ProjectFile] = []
        with upload_log.timed_step(UploadStage.STORAGE, "Storing file contents"):
            for upload in uploads:
                file_id = str(uuid4())
                name = fit_file_name(PurePath(upload.filename).name)
                mime_type = (
                    upload.content_type
                    or mimetypes.guess_type(name)[0]
                    or "application/octet-stream"
                )
                self._blobs.put(file_id, upload.content, mime_type)
                upload_log.detail(name, size=len(upload.content), mime_type=mime_type)
                new_files.append(
                    ProjectFile(
                        id=file_id,
                        name=name,
                        url=self._content_url_template.format(project_id=project_id, file_id=file_id),
                        size=len(upload.content),
                        mime_type=mime_type,
                        type=classify_file_type(name),
                        uploaded_at=uploaded_at,
                        uploaded_by=self._uploader_name,
                    )
                )

        self._store.update_project(project_id, {"files": [*project.files, *new_files]})
        upload_log.step_complete(
            UploadStage.ATTACH, f"Attached {len(new_files)} file(s)", project=project_id
        )

        if self._progress is not None:
            upload_log.step_start(UploadStage.PROGRESS, "Starting progress feedback", files=len(new_files))
            for project_file in new_files:
                self._progress.start(project_id, project_file.id)
        return new_files

    def list_files(
        self,
        project_id: str,
        *,
        search: str | None = None,
        sort_field: FileSortField = FileSortField.UPLOADED_AT,
        direction: SortDirection | None = None,
    ) -> list[ProjectFile]:
        """Files whose name contains ``search``, sorted.

        Without an explicit direction, names sort ascending and the other
        fields descending.
        """
        if direction is None:
            direction = SortDirection.ASC if sort_field is FileSortField.NAME else SortDirection.DESC
        project = self._get_project(project_id)
        matching = [f for f in project.files if matches_search(search, f.name)]
        return sorted(matching, key=_sort_key(sort_field), reverse=direction is SortDirection.DESC)

    def rename_file(self, project_id: str, file_id: str, name: str) -> ProjectFile:
        new_name = name.strip()
        if not new_name:
            raise ValueError("File name cannot be blank")
        if len(new_name) > MAX_FILE_NAME_LENGTH:
            raise ValueError(f"File name cannot exceed {MAX_FILE_NAME_LENGTH} characters")
        project = self._get_project(project_id)
        self._find_file(project, file_id)

        files = [
            dataclasses.replace(f, name=new_name) if f.id == file_id else f
            for f in project.files
        ]
        updated = self._store.update_project(project_id, {"files": files})
        if updated is None:
            raise EntityNotFoundError("Project", project_id)
        return self._find_file(updated, file_id)

    def delete_file(self, project_id: str, file_id: str) -> bool:
        project = self._get_project(project_id)
        self._find_file(project, file_id)
        self._store.update_project(
            project_id, {"files": [f for f in project.files if f.id != file_id]}
        )
        self._blobs.delete(file_id)
        logger.info("Removed file %s from project %s", file_id, project_id)
        return True

    def get_file_content(self, project_id: str, file_id: str) -> tuple[ProjectFile, StoredBlob]:
        project_file = self._find_file(self._get_project(project_id), file_id)
        blob = self._blobs.get(file_id)
        if blob is None:
            raise EntityNotFoundError("FileContent", file_id)
        return project_file, blob
