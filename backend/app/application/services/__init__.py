from .client_service import ClientOverview, ClientService
from .seller_service import SellerOverview, SellerService
from .project_service import ProjectOverview, ProjectService
from .project_file_service import FileUpload, ProjectFileService
from .dashboard_service import DashboardService, DashboardSummary
from .sse_manager import SSEManager
from .upload_progress import UploadProgressAnimator

__all__ = [
    "ClientOverview",
    "ClientService",
    "SellerOverview",
    "SellerService",
    "ProjectOverview",
    "ProjectService",
    "FileUpload",
    "ProjectFileService",
    "DashboardService",
    "DashboardSummary",
    "SSEManager",
    "UploadProgressAnimator",
]
