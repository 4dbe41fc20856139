"""
endpoints.py

API roots, documented limits and endpoint path templates.

Paths are relative to the API root so that proxies mounted under a sub-path
(e.g. ``https://api.curse.tools/v1/cf/``) keep working: the client joins
them onto whatever base URL it was given.
"""

DEFAULT_API_BASE = "https://api.curseforge.com/v1/"
"""Official CurseForge Core API root. Requires an x-api-key."""

CFWIDGET_API_BASE = "https://api.cfwidget.com/"
"""CFWidget API root. No authentication."""

API_PAGINATION_RESULTS_LIMIT = 10_000
"""The API never returns results past this offset (index + pageSize <= 10,000).
See https://docs.curseforge.com/#pagination-limits"""

DEFAULT_PAGE_SIZE = 50
"""Page size the API uses when `pageSize` is not sent."""


class CURSEFORGEAPIURLS:
    """
    Centralized container for the CurseForge Core API endpoint paths.

    Templates use ``str.format`` placeholders, e.g.:

        >>> CURSEFORGEAPIURLS.GET_MOD_FILE.format(mod_id=238222, file_id=3847140)
        'mods/238222/files/3847140'

    Documentation Source:
        - https://docs.curseforge.com
    """

    # ------------------------------------------
    # GAMES & VERSIONS
    # ------------------------------------------
    GAMES = "games"
    """GET → Paginated list of all games available to the API key."""

    GAME = "games/{game_id}"
    """GET → A single game by numeric ID."""

    GAME_VERSIONS = "games/{game_id}/versions"
    """GET → Version strings for a game, grouped by version type."""

    GAME_VERSION_TYPES = "games/{game_id}/version-types"
    """GET → Version types (major release lines, loaders, ...) for a game."""

    # ------------------------------------------
    # CATEGORIES
    # ------------------------------------------
    CATEGORIES = "categories"
    """GET → Categories and classes. Query: gameId, classId (optional)."""

    # ------------------------------------------
    # MODS / PROJECTS
    # ------------------------------------------
    SEARCH_MODS = "mods/search"
    """GET → Paginated project search."""

    GET_MOD = "mods/{mod_id}"
    """GET → A single project."""

    GET_MODS = "mods"
    """POST {"modIds": [...]} → Several projects at once."""

    FEATURED_MODS = "mods/featured"
    """POST → Featured, popular and recently updated projects for a game."""

    GET_MOD_DESCRIPTION = "mods/{mod_id}/description"
    """GET → Project description as an HTML string."""

    # ------------------------------------------
    # FILES
    # ------------------------------------------
    GET_MOD_FILE = "mods/{mod_id}/files/{file_id}"
    """GET → A single file of a project."""

    GET_MOD_FILES = "mods/{mod_id}/files"
    """GET → Paginated files of a project."""

    GET_FILES = "mods/files"
    """POST {"fileIds": [...]} → Several files at once, from any projects."""

    GET_MOD_FILE_CHANGELOG = "mods/{mod_id}/files/{file_id}/changelog"
    """GET → File changelog as an HTML string."""

    GET_FILE_DOWNLOAD_URL = "mods/{mod_id}/files/{file_id}/download-url"
    """GET → Direct CDN download URL for a file."""


class CFWIDGETURLS:
    """Endpoint paths for the CFWidget API."""

    PROJECT = "{project_id}"
    """GET → Project by numeric CurseForge ID."""

    PROJECT_BY_PATH = "{path}"
    """GET → Project by its CurseForge URL path, e.g. ``minecraft/mc-mods/jei``."""
