from .client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListItemResponse,
)
from .seller import (
    SellerCreate,
    SellerUpdate,
    SellerResponse,
    SellerListItemResponse,
)
from .project import (
    ExtraSchema,
    MeasurementSchema,
    ProjectImageSchema,
    ProjectFileSchema,
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectSummaryResponse,
)
from .files import (
    FileSortField,
    SortDirection,
    ProjectFileResponse,
    FileRenameRequest,
    UploadResultSchema,
)
from .dashboard import (
    DashboardPeriod,
    StatusCountSchema,
    CompanyCountSchema,
    DashboardResponse,
)

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "ClientListItemResponse",
    "SellerCreate",
    "SellerUpdate",
    "SellerResponse",
    "SellerListItemResponse",
    "ExtraSchema",
    "MeasurementSchema",
    "ProjectImageSchema",
    "ProjectFileSchema",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectSummaryResponse",
    "FileSortField",
    "SortDirection",
    "ProjectFileResponse",
    "FileRenameRequest",
    "UploadResultSchema",
    "DashboardPeriod",
    "StatusCountSchema",
    "CompanyCountSchema",
    "DashboardResponse",
]
