from .client import Client
from .seller import Seller
from .project import (
    Company,
    Environment,
    Extra,
    Measurement,
    Project,
    ProjectStatus,
)
from .project_file import (
    ALLOWED_EXTENSIONS,
    MAX_FILE_NAME_LENGTH,
    ProjectFile,
    ProjectFileType,
    ProjectImage,
    classify_file_type,
    file_extension,
    fit_file_name,
    is_allowed_file,
)

__all__ = [
    "Client",
    "Seller",
    "Company",
    "Environment",
    "Extra",
    "Measurement",
    "Project",
    "ProjectStatus",
    "ALLOWED_EXTENSIONS",
    "MAX_FILE_NAME_LENGTH",
    "ProjectFile",
    "ProjectFileType",
    "ProjectImage",
    "classify_file_type",
    "file_extension",
    "fit_file_name",
    "is_allowed_file",
]
