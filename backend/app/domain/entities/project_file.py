"""Domain entities for project attachments (files and images).

File types are derived from the file extension only; the content is never
inspected.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import PurePath
from uuid import uuid4


class ProjectFileType(str, Enum):
    """Coarse category of an attached file, used for icons and previews."""

    PDF = "pdf"
    IMAGE = "image"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    ARCHIVE = "archive"
    OTHER = "other"


_EXTENSION_TYPES: dict[str, ProjectFileType] = {
    "pdf": ProjectFileType.PDF,
    "jpg": ProjectFileType.IMAGE,
    "jpeg": ProjectFileType.IMAGE,
    "png": ProjectFileType.IMAGE,
    "webp": ProjectFileType.IMAGE,
    "doc": ProjectFileType.DOCUMENT,
    "docx": ProjectFileType.DOCUMENT,
    "xls": ProjectFileType.SPREADSHEET,
    "xlsx": ProjectFileType.SPREADSHEET,
    "zip": ProjectFileType.ARCHIVE,
    "rar": ProjectFileType.ARCHIVE,
}

# Extensions accepted at upload intake
ALLOWED_EXTENSIONS: frozenset[str] = frozenset(_EXTENSION_TYPES)


# Longest file name kept on a ProjectFile
MAX_FILE_NAME_LENGTH = 255


def file_extension(filename: str) -> str:
    """Lower-cased text after the last dot, or '' when there is no dot.

    A bare ``.pdf`` counts as a pdf.
    """
    name = PurePath(filename).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def fit_file_name(filename: str, limit: int = MAX_FILE_NAME_LENGTH) -> str:
    """Shorten an over-long name, keeping its extension when it fits."""
    if len(filename) <= limit:
        return filename
    extension = file_extension(filename)
    suffix = f".{filename.rsplit('.', 1)[-1]}" if extension else ""
    if len(suffix) >= limit:
        return filename[:limit]
    return filename[: limit - len(suffix)] + suffix


def classify_file_type(filename: str) -> ProjectFileType:
    """Map a filename to its ProjectFileType by extension."""
    return _EXTENSION_TYPES.get(file_extension(filename), ProjectFileType.OTHER)


def is_allowed_file(filename: str) -> bool:
    return file_extension(filename) in ALLOWED_EXTENSIONS


@dataclass(frozen=True)
class ProjectFile:
    """Metadata of a file attached to a project.

    ``url`` points at the locally held bytes; it is not a durable location.
    """

    name: str
    url: str
    size: int
    mime_type: str
    type: ProjectFileType
    uploaded_by: str
    id: str = field(default_factory=lambda: str(uuid4()))
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ProjectImage:
    """An image shown in a project's gallery."""

    url: str
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
