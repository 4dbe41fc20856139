"""
client.py - Core CurseForge async client.

Provides the CurseForge class that is the primary entrypoint for library users.
Every operation builds a request (path + query params or JSON body), sends it
through an `httpx.AsyncClient`, decodes the JSON body and converts it into the
typed models from types_models.py. Failures are raised as CurseForgeError
subclasses; nothing is retried or cached.

Usage example:
    from curseforge import CurseForge, ProjectSearchParams
    async with CurseForge(api_key="MY_KEY") as cf:
        jei = await cf.project(238222)
        async for project in cf.search_projects_iter(ProjectSearchParams.game(432)):
            ...
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

import httpx

from .config import (
    ClientOptions,
    UnknownFields,
    api_base_from_env,
    api_key_from_env,
    options_from_env,
)
from .endpoints import API_PAGINATION_RESULTS_LIMIT, CURSEFORGEAPIURLS, DEFAULT_API_BASE
from .exceptions import (
    ConfigurationError,
    DataValidationError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    map_http_status,
)
from .paginate import PaginatedStream
from .params import (
    CategoriesParams,
    FeaturedProjectsBody,
    FileIdsBody,
    GamesParams,
    ProjectFilesParams,
    ProjectIdsBody,
    ProjectSearchParams,
)
from .types_models import (
    STR,
    Category,
    DataResponse,
    FeaturedProjects,
    Game,
    GameVersions,
    GameVersionType,
    PaginatedResponse,
    Project,
    ProjectFile,
    list_of,
    model_of,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# error bodies are attached to exception messages up to this many characters
_ERROR_TEXT_LIMIT = 1000


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    A decoded response together with the bytes it was decoded from.

    Attributes
    ----------
    body : bytes
        Raw response body.
    value : T
        Decoded JSON (or a typed value, for callers converting it further).
    status_code : int
    """
    body: bytes
    value: T
    status_code: int


def _normalize_base_url(base_url: str) -> str:
    """Require an absolute http(s) URL and make sure it ends with a slash."""
    if not isinstance(base_url, str):
        raise ConfigurationError(f"base_url must be a string, got {type(base_url).__name__}")
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise ConfigurationError(f"invalid base_url {base_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"base_url must be an absolute http/https URL, got {base_url!r}")
    if url.query or url.fragment:
        raise ConfigurationError(f"base_url cannot carry a query or fragment, got {base_url!r}")
    return base_url if base_url.endswith("/") else base_url + "/"


class BaseClient:
    """
    Async HTTP plumbing shared by the CurseForge and CFWidget clients.

    Parameters
    ----------
    base_url : str
        API root; relative endpoint paths are appended to it.
    options : Optional[ClientOptions]
        Timeout, connection limit, User-Agent and unknown-field policy.
    http_client : Optional[httpx.AsyncClient]
        Pre-built client (custom transport, proxies, tests). It is not closed
        by `aclose()`; its owner remains responsible for it.
    """

    def __init__(
        self,
        base_url: str,
        *,
        options: Optional[ClientOptions] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = _normalize_base_url(base_url)
        self.options = options if options is not None else ClientOptions()
        self.headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": self.options.user_agent,
        }
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            kwargs: Dict[str, Any] = {"timeout": httpx.Timeout(self.options.timeout)}
            if self.options.max_connections is not None:
                kwargs["limits"] = httpx.Limits(max_connections=self.options.max_connections)
            self._http = httpx.AsyncClient(**kwargs)
            self._owns_http = True

    @property
    def unknown_fields(self) -> UnknownFields:
        return self.options.unknown_fields

    def _build_url(self, endpoint: str, **path_params) -> str:
        """
        Fill the placeholders of an endpoint template and join it onto base_url.

        Example:
            _build_url(CURSEFORGEAPIURLS.GET_MOD_FILE, mod_id=123, file_id=456)
        """
        try:
            path = endpoint.format(**path_params) if path_params else endpoint
        except (KeyError, IndexError) as exc:
            raise ValueError(f"Failed to format endpoint path '{endpoint}' with {path_params}: {exc}") from exc
        return self.base_url + path.lstrip("/")

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Any] = None,
        path_params: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse[Any]:
        """
        Perform one HTTP request and decode its JSON body.

        Parameters
        ----------
        method : str
            HTTP method (GET/POST).
        endpoint : str
            Path template relative to base_url (see endpoints.py).
        params : dict, optional
            Query parameters.
        json_body : Any, optional
            JSON body for POST requests.
        path_params : dict, optional
            Variables to format into the endpoint path.

        Returns
        -------
        ApiResponse
            Raw bytes plus the decoded JSON value.

        Raises
        ------
        NetworkError
            The request could not be sent or the response not received.
        CurseForgeError subclass
            HTTP status >= 400, see exceptions.map_http_status.
        InvalidResponseError
            The body is not valid JSON.
        """
        method = method.upper()
        url = self._build_url(endpoint, **(path_params or {}))
        headers = dict(self.headers)
        if json_body is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = await self._http.request(method, url, params=params, json=json_body, headers=headers)
        except httpx.RequestError as exc:
            logger.debug("%s %s transport error: %s", method, url, exc, exc_info=True)
            raise NetworkError(f"{method} {url} failed: {exc}") from exc

        body = resp.content
        logger.debug("%s %s -> %s (%d bytes)", method, url, resp.status_code, len(body))

        if resp.status_code >= 400:
            text = body.decode("utf-8", errors="replace")[:_ERROR_TEXT_LIMIT]
            err = map_http_status(resp.status_code, text, resp)
            logger.debug("%s %s error: %s", method, url, err)
            raise err

        try:
            value = json.loads(body)
        except ValueError as exc:
            logger.debug("%s %s returned invalid JSON", method, url, exc_info=True)
            raise InvalidResponseError(
                f"{method} {url} returned a body that is not valid JSON: {exc}",
                resp.status_code,
                resp,
                body,
            ) from exc
        return ApiResponse(body=body, value=value, status_code=resp.status_code)

    async def _fetch(self, method: str, endpoint: str, decode: Callable[[Any], T], **kwargs) -> T:
        """`request()` followed by `decode(value)`, with the body attached to decode errors."""
        raw = await self.request(method, endpoint, **kwargs)
        try:
            return decode(raw.value)
        except DataValidationError as exc:
            exc.body = raw.body
            logger.debug("%s %s decode error: %s", method, endpoint, exc, exc_info=True)
            raise

    async def aclose(self) -> None:
        """Close the underlying httpx client if this object created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} base_url={self.base_url!r}>"


class CurseForge(BaseClient):
    """
    Async client for the CurseForge Core API.

    Parameters
    ----------
    api_key : Optional[str]
        Your CurseForge x-api-key. Required by the official API, not by
        keyless proxies.
    base_url : str
        API root (defaults to DEFAULT_API_BASE).
    options : Optional[ClientOptions]
        See config.ClientOptions.
    http_client : Optional[httpx.AsyncClient]
        Pre-built client; see BaseClient.

    Examples
    --------
    >>> async with CurseForge(api_key="MY_KEY") as cf:
    ...     game = await cf.game(432)
    ...     print(game.name)
    Minecraft
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_API_BASE,
        *,
        options: Optional[ClientOptions] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(base_url, options=options, http_client=http_client)
        self.api_key: Optional[str] = None
        self.set_api_key(api_key)

    @classmethod
    def from_env(cls, environ=None, *, http_client: Optional[httpx.AsyncClient] = None) -> "CurseForge":
        """
        Build a client from ``CURSEFORGE_*`` environment variables (see config.py).
        """
        return cls(
            api_key=api_key_from_env(environ),
            base_url=api_base_from_env(environ) or DEFAULT_API_BASE,
            options=options_from_env(environ),
            http_client=http_client,
        )

    def set_api_key(self, api_key: Optional[str]) -> None:
        """
        Set or update the x-api-key header for subsequent requests.

        Parameters
        ----------
        api_key : Optional[str]
            API key string or None to remove it.
        """
        self.api_key = api_key
        if api_key:
            self.headers["x-api-key"] = api_key
        else:
            self.headers.pop("x-api-key", None)

    # Response decoding helpers
    def _data(self, item):
        mode = self.unknown_fields
        return lambda value: DataResponse.from_dict(value, item, mode).data

    def _page(self, item):
        mode = self.unknown_fields
        return lambda value: PaginatedResponse.from_dict(value, item, mode)

    # Games
    async def game(self, game_id: int) -> Game:
        """
        Retrieve metadata for a specific game by numeric ID.

        https://docs.curseforge.com/#get-game
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.GAME, self._data(Game),
                                 path_params={"game_id": game_id})

    async def games(self, params: Optional[GamesParams] = None) -> PaginatedResponse[Game]:
        """
        Retrieve one page of the games available to this API key.

        https://docs.curseforge.com/#get-games
        """
        params = params or GamesParams()
        return await self._fetch("GET", CURSEFORGEAPIURLS.GAMES, self._page(Game), params=params.to_query())

    def games_iter(self, params: Optional[GamesParams] = None,
                   limit: int = API_PAGINATION_RESULTS_LIMIT) -> PaginatedStream[Game]:
        """Every game, across as many pages as needed."""
        return PaginatedStream(self.games, params or GamesParams(), limit)

    async def game_versions(self, game_id: int) -> List[GameVersions]:
        """
        Return the version groups for a given game (grouped by version-type).

        https://docs.curseforge.com/#get-versions
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.GAME_VERSIONS,
                                 self._data(list_of(model_of(GameVersions))),
                                 path_params={"game_id": game_id})

    async def game_version_types(self, game_id: int) -> List[GameVersionType]:
        """https://docs.curseforge.com/#get-version-types"""
        return await self._fetch("GET", CURSEFORGEAPIURLS.GAME_VERSION_TYPES,
                                 self._data(list_of(model_of(GameVersionType))),
                                 path_params={"game_id": game_id})

    # Categories
    async def categories(self, params: CategoriesParams) -> List[Category]:
        """
        Retrieve categories for a game, optionally restricted to one class.

        Parameters
        ----------
        params : CategoriesParams
            e.g. ``CategoriesParams.game(432)``

        Returns
        -------
        List[Category]
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.CATEGORIES,
                                 self._data(list_of(model_of(Category))),
                                 params=params.to_query())

    # Projects
    async def search_projects(self, params: ProjectSearchParams) -> PaginatedResponse[Project]:
        """
        Search projects using the CurseForge search endpoint. Returns one page.

        https://docs.curseforge.com/#search-mods
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.SEARCH_MODS, self._page(Project),
                                 params=params.to_query())

    def search_projects_iter(self, params: ProjectSearchParams,
                             limit: int = API_PAGINATION_RESULTS_LIMIT) -> PaginatedStream[Project]:
        """
        Every search result, across as many pages as needed.

        This adheres to the API's limit of 10,000 results
        (https://docs.curseforge.com/#pagination-limits).
        """
        return PaginatedStream(self.search_projects, params, limit)

    async def project(self, project_id: int) -> Project:
        """
        Get detailed metadata for a project.

        https://docs.curseforge.com/#get-mod
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.GET_MOD, self._data(Project),
                                 path_params={"mod_id": project_id})

    async def projects(self, project_ids: Iterable[int]) -> List[Project]:
        """
        Get multiple projects in a single request.

        Projects that do not exist are left out of the result rather than
        failing the request.
        """
        return await self._fetch("POST", CURSEFORGEAPIURLS.GET_MODS,
                                 self._data(list_of(model_of(Project))),
                                 json_body=ProjectIdsBody(list(project_ids)).to_json())

    async def featured_projects(self, body: FeaturedProjectsBody) -> FeaturedProjects:
        """https://docs.curseforge.com/#get-featured-mods"""
        return await self._fetch("POST", CURSEFORGEAPIURLS.FEATURED_MODS, self._data(FeaturedProjects),
                                 json_body=body.to_json())

    async def project_description(self, project_id: int) -> str:
        """Return the HTML description of a project."""
        return await self._fetch("GET", CURSEFORGEAPIURLS.GET_MOD_DESCRIPTION, self._data(STR),
                                 path_params={"mod_id": project_id})

    # Files
    async def project_file(self, project_id: int, file_id: int) -> ProjectFile:
        """
        Get metadata for a specific file of a project.

        https://docs.curseforge.com/#get-mod-file
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.GET_MOD_FILE, self._data(ProjectFile),
                                 path_params={"mod_id": project_id, "file_id": file_id})

    async def project_file_by_id(self, file_id: int) -> ProjectFile:
        """
        Alternative to `project_file` that does not need the project id.

        Uses the bulk files endpoint and returns its only item.

        Raises
        ------
        NotFoundError
            The API returned no file for this id.
        """
        files = await self.project_files_by_ids([file_id])
        if not files:
            logger.debug("project_file_by_id(%s): empty response", file_id)
            raise NotFoundError(f"File {file_id} not found", 404)
        return files[0]

    async def project_files(self, project_id: int,
                            params: Optional[ProjectFilesParams] = None) -> PaginatedResponse[ProjectFile]:
        """
        List one page of files of a project, optionally filtered by game version or loader.

        https://docs.curseforge.com/#get-mod-files
        """
        params = params or ProjectFilesParams()
        return await self._fetch("GET", CURSEFORGEAPIURLS.GET_MOD_FILES, self._page(ProjectFile),
                                 path_params={"mod_id": project_id}, params=params.to_query())

    def project_files_iter(self, project_id: int, params: Optional[ProjectFilesParams] = None,
                           limit: int = API_PAGINATION_RESULTS_LIMIT) -> PaginatedStream[ProjectFile]:
        """Every file of a project, across as many pages as needed."""
        async def fetch(page_params: ProjectFilesParams) -> PaginatedResponse[ProjectFile]:
            return await self.project_files(project_id, page_params)

        return PaginatedStream(fetch, params or ProjectFilesParams(), limit)

    async def project_files_by_ids(self, file_ids: Iterable[int]) -> List[ProjectFile]:
        """https://docs.curseforge.com/#get-files"""
        return await self._fetch("POST", CURSEFORGEAPIURLS.GET_FILES,
                                 self._data(list_of(model_of(ProjectFile))),
                                 json_body=FileIdsBody(list(file_ids)).to_json())

    async def project_file_changelog(self, project_id: int, file_id: int) -> str:
        """Return changelog HTML for a file."""
        return await self._fetch("GET", CURSEFORGEAPIURLS.GET_MOD_FILE_CHANGELOG, self._data(STR),
                                 path_params={"mod_id": project_id, "file_id": file_id})

    async def project_file_download_url(self, project_id: int, file_id: int) -> str:
        """
        Get the CDN download URL for a file.

        The API answers 403 when the project does not allow third-party
        distribution; that surfaces as ForbiddenError.
        """
        return await self._fetch("GET", CURSEFORGEAPIURLS.GET_FILE_DOWNLOAD_URL, self._data(STR),
                                 path_params={"mod_id": project_id, "file_id": file_id})

    def __repr__(self) -> str:
        return f"<CurseForge base_url={self.base_url!r} api_key_set={bool(self.api_key)}>"


# module-level helper: convenience factory
def create_client(api_key: Optional[str] = None, *, base_url: Optional[str] = None, **kwargs) -> CurseForge:
    """
    Convenience factory to create a configured CurseForge client.

    Parameters
    ----------
    api_key : Optional[str]
        API key to set on the client.
    base_url : Optional[str]
        API root; DEFAULT_API_BASE when omitted.
    kwargs : additional args forwarded to CurseForge constructor.

    Returns
    -------
    CurseForge
    """
    return CurseForge(api_key=api_key, base_url=base_url or DEFAULT_API_BASE, **kwargs)
