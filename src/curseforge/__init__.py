"""
curseforge package initializer.

This file exposes the high-level public API for the package:
 - CurseForge (async client for the CurseForge Core API)
 - CFWidget (async client for the CFWidget API)
 - create_client (convenience factory)
 - params, response and resource types
 - exceptions (re-exported)

Implementation notes:
 - Avoid heavy work at import time.
"""

__version__ = "0.3.1"

# re-export exceptions for convenience
from .exceptions import (
    BadRequestError,
    ConfigurationError,
    CurseForgeError,
    DataValidationError,
    ForbiddenError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    map_http_status,
)
from .config import ClientOptions, UnknownFields, options_from_env
from .endpoints import (
    API_PAGINATION_RESULTS_LIMIT,
    CFWIDGET_API_BASE,
    CURSEFORGEAPIURLS,
    DEFAULT_API_BASE,
)
from .types_models import *  # noqa: F401,F403
from .types_models import __all__ as _types_all
from .params import (
    CategoriesParams,
    FeaturedProjectsBody,
    FileIdsBody,
    GamesParams,
    ProjectFilesParams,
    ProjectIdsBody,
    ProjectSearchParams,
    SearchSort,
    SortOrder,
)
from .paginate import PaginatedStream
from .client import ApiResponse, CurseForge, create_client
from .cfwidget import (
    CFWidget,
    WidgetProject,
    WidgetProjectDownloads,
    WidgetProjectFile,
    WidgetProjectMember,
    WidgetProjectUrls,
    WidgetReleaseType,
)

__all__ = [
    "__version__",
    "CurseForge",
    "CFWidget",
    "create_client",
    "ApiResponse",
    "PaginatedStream",
    "ClientOptions",
    "UnknownFields",
    "options_from_env",
    "API_PAGINATION_RESULTS_LIMIT",
    "CFWIDGET_API_BASE",
    "CURSEFORGEAPIURLS",
    "DEFAULT_API_BASE",
    "CategoriesParams",
    "FeaturedProjectsBody",
    "FileIdsBody",
    "GamesParams",
    "ProjectFilesParams",
    "ProjectIdsBody",
    "ProjectSearchParams",
    "SearchSort",
    "SortOrder",
    "WidgetProject",
    "WidgetProjectDownloads",
    "WidgetProjectFile",
    "WidgetProjectMember",
    "WidgetProjectUrls",
    "WidgetReleaseType",
    "BadRequestError",
    "ConfigurationError",
    "CurseForgeError",
    "DataValidationError",
    "ForbiddenError",
    "InvalidResponseError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "map_http_status",
    *_types_all,
]
