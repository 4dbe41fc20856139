"""
types_models.py

Typed, immutable dataclasses mirroring the CurseForge Core API objects.

Purpose
-------
- Provide typed, documented containers for every object the API returns.
- Supply `from_dict()` factories that validate raw API JSON against the
  upstream schema (field names, nullability, enum encodings).
- Supply `to_dict()` to turn a value back into its wire representation.
- Keep the original raw payload available in `.data` for debugging/forward-compatibility.

Notes
-----
- Attribute names are snake_case; the JSON key of every attribute is declared
  next to it with `wire()`. A few keys are renamed on purpose: the API calls
  projects "mods", so ``modId`` becomes ``project_id``; ``type`` becomes ``kind``.
- Unknown keys are handled according to `UnknownFields` (see config.py).
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from .config import UnknownFields
from .exceptions import DataValidationError
from .utils import format_datetime, nullable_datetime, nullable_string, parse_datetime

T = TypeVar("T")
M = TypeVar("M", bound="ApiModel")

Converter = Callable[[Any, UnknownFields], Any]


# Enums
class ApiIntEnum(IntEnum):
    """
    Integer-encoded enumeration. `UNKNOWN` is only produced when decoding with
    ``UnknownFields.ALLOW`` and the API sent a value this library predates.
    """


class CoreStatus(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_CoreStatus"""
    DRAFT = 1
    TEST = 2
    PENDING_REVIEW = 3
    REJECTED = 4
    APPROVED = 5
    LIVE = 6
    UNKNOWN = 255


class CoreApiStatus(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_CoreApiStatus"""
    PRIVATE = 1
    PUBLIC = 2
    UNKNOWN = 255


class ProjectStatus(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_ModStatus"""
    NEW = 1
    CHANGES_REQUIRED = 2
    UNDER_SOFT_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    CHANGES_MADE = 6
    INACTIVE = 7
    ABANDONED = 8
    DELETED = 9
    UNDER_REVIEW = 10
    UNKNOWN = 255


class ModLoaderType(ApiIntEnum):
    """
    https://docs.curseforge.com/#tocS_ModLoaderType

    Also used as the ``modLoaderType`` filter in search / file listing params.
    """
    ANY = 0
    FORGE = 1
    CAULDRON = 2
    LITELOADER = 3
    FABRIC = 4
    QUILT = 5
    NEOFORGE = 6
    UNKNOWN = 255


class FileReleaseType(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_FileReleaseType"""
    RELEASE = 1
    BETA = 2
    ALPHA = 3
    UNKNOWN = 255


class FileStatus(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_FileStatus"""
    PROCESSING = 1
    CHANGES_REQUIRED = 2
    UNDER_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    MALWARE_DETECTED = 6
    DELETED = 7
    ARCHIVED = 8
    TESTING = 9
    RELEASED = 10
    READY_FOR_REVIEW = 11
    DEPRECATED = 12
    BAKING = 13
    AWAITING_PUBLISHING = 14
    FAILED_PUBLISHING = 15
    UNKNOWN = 255


class HashAlgorithm(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_HashAlgo"""
    SHA1 = 1
    MD5 = 2
    UNKNOWN = 255


class FileRelationType(ApiIntEnum):
    """https://docs.curseforge.com/#tocS_FileRelationType"""
    EMBEDDED_LIBRARY = 1
    OPTIONAL_DEPENDENCY = 2
    REQUIRED_DEPENDENCY = 3
    TOOL = 4
    INCOMPATIBLE = 5
    INCLUDE = 6
    UNKNOWN = 255


# Field declaration / conversion helpers
def wire(key: str, convert: Optional[Converter] = None, *, nullable: bool = False,
         default: Any = MISSING, default_factory: Any = MISSING) -> Any:
    """
    Declare a dataclass field backed by JSON key `key`.

    - No default: the key must be present. Its value may be null only when
      `nullable` is set.
    - With a default / default_factory: the key may be absent or null, in which
      case the default is used.
    """
    metadata = {"key": key, "convert": convert, "nullable": nullable}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    if default is not MISSING:
        return field(default=default, metadata=metadata)
    return field(metadata=metadata)


def _of(*types: type) -> Converter:
    names = " or ".join(t.__name__ for t in types)

    def convert(value: Any, mode: UnknownFields) -> Any:
        if isinstance(value, bool) and bool not in types:
            raise TypeError(f"expected {names}, got bool")
        if not isinstance(value, types):
            raise TypeError(f"expected {names}, got {type(value).__name__}")
        if float in types and int in types:
            return float(value)
        return value

    return convert


INT = _of(int)
STR = _of(str)
BOOL = _of(bool)
NUMBER = _of(int, float)


def _plain(fn: Callable[[Any], Any]) -> Converter:
    return lambda value, mode: fn(value)


DATETIME = _plain(parse_datetime)
NULLABLE_DATETIME = _plain(nullable_datetime)
NULLABLE_STR = _plain(nullable_string)


def enum_of(enum_cls: Type[Enum]) -> Converter:
    """Converter for an enum encoded by value (int or string)."""

    def convert(value: Any, mode: UnknownFields) -> Enum:
        if isinstance(value, bool):
            raise DataValidationError(f"invalid {enum_cls.__name__} value {value!r}")
        try:
            member = enum_cls(value)
        except ValueError:
            member = None
        unknown = getattr(enum_cls, "UNKNOWN", None)
        if member is not None and (member is not unknown or mode is UnknownFields.ALLOW):
            return member
        if unknown is not None and mode is UnknownFields.ALLOW:
            return unknown
        raise DataValidationError(f"invalid {enum_cls.__name__} value {value!r}")

    return convert


def model_of(model_cls: Type["ApiModel"]) -> Converter:
    return lambda value, mode: model_cls.from_dict(value, mode)


def list_of(item: Converter) -> Converter:
    def convert(value: Any, mode: UnknownFields) -> List[Any]:
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        return [_convert(index, item, element, mode) for index, element in enumerate(value)]

    return convert


def map_of(item: Converter) -> Converter:
    def convert(value: Any, mode: UnknownFields) -> Dict[str, Any]:
        if not isinstance(value, Mapping):
            raise TypeError(f"expected an object, got {type(value).__name__}")
        return {str(k): _convert(str(k), item, v, mode) for k, v in value.items()}

    return convert


def _convert(where: Union[str, int], convert: Optional[Converter], value: Any, mode: UnknownFields) -> Any:
    if convert is None:
        return value
    try:
        return convert(value, mode)
    except DataValidationError as exc:
        raise exc.with_prefix(where) from exc.__cause__
    except (TypeError, ValueError, OverflowError) as exc:
        raise DataValidationError(str(exc), [where]) from exc


def _require_mapping(payload: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise DataValidationError(f"{owner}: expected an object, got {type(payload).__name__}")
    return payload


def _unknown_keys(payload: Mapping[str, Any], known, mode: UnknownFields, owner: str) -> Dict[str, Any]:
    extra = {k: v for k, v in payload.items() if k not in known}
    if extra and mode is UnknownFields.DENY:
        first = sorted(extra)[0]
        raise DataValidationError(f"{owner}: unknown field {first!r}", [first])
    return extra if mode is UnknownFields.ALLOW else {}


def dump(value: Any) -> Any:
    """Recursively convert typed values back into JSON-compatible data."""
    if isinstance(value, (ApiModel, PaginatedResponse, DataResponse)):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (list, tuple)):
        return [dump(v) for v in value]
    if isinstance(value, Mapping):
        return {k: dump(v) for k, v in value.items()}
    return value


class ApiModel:
    """
    Base class for the frozen dataclasses below.

    `data` (the raw payload) and `other_fields` (unknown keys collected under
    ``UnknownFields.ALLOW``) are attached after construction and take no
    part in equality or repr.
    """

    _raw: Optional[Dict[str, Any]] = None
    _extra: Optional[Dict[str, Any]] = None

    @property
    def data(self) -> Dict[str, Any]:
        return self._raw if self._raw is not None else {}

    @property
    def other_fields(self) -> Dict[str, Any]:
        return dict(self._extra or {})

    @classmethod
    def from_dict(cls: Type[M], d: Any, unknown_fields: Union[UnknownFields, str, None] = None) -> M:
        """
        Validate and convert a raw API object into an instance of `cls`.

        Raises
        ------
        DataValidationError
            When a required key is missing, a value has the wrong type, an
            enum value is not recognised, or (in deny mode) a key is unknown.
        """
        mode = UnknownFields.parse(unknown_fields)
        d = _require_mapping(d, cls.__name__)
        kwargs: Dict[str, Any] = {}
        known = set()
        for f in fields(cls):
            key = f.metadata.get("key")
            if key is None:
                continue
            known.add(key)
            has_default = f.default is not MISSING or f.default_factory is not MISSING
            value = d.get(key)
            if value is None:
                if key not in d and not has_default:
                    raise DataValidationError(f"{cls.__name__}: missing field {key!r}", [key])
                if not has_default and not f.metadata["nullable"]:
                    raise DataValidationError(f"{cls.__name__}: field {key!r} must not be null", [key])
                if not has_default:
                    kwargs[f.name] = None
                continue
            kwargs[f.name] = _convert(key, f.metadata["convert"], value, mode)
        extra = _unknown_keys(d, known, mode, cls.__name__)
        obj = cls(**kwargs)
        object.__setattr__(obj, "_raw", dict(d))
        object.__setattr__(obj, "_extra", extra)
        return obj

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            key = f.metadata.get("key")
            if key is not None:
                out[key] = dump(getattr(self, f.name))
        for k, v in (self._extra or {}).items():
            out.setdefault(k, v)
        return out


# Core
@dataclass(frozen=True)
class Pagination(ApiModel):
    """
    https://docs.curseforge.com/#tocS_Pagination

    Attributes
    ----------
    index : int
        Offset of the first item in this page.
    page_size : int
        Requested page size.
    result_count : int
        Number of items actually in this page.
    total_count : int
        Total number of matches. May exceed what the API lets you page through,
        see API_PAGINATION_RESULTS_LIMIT.
    """
    index: int = wire("index", INT)
    page_size: int = wire("pageSize", INT)
    result_count: int = wire("resultCount", INT)
    total_count: int = wire("totalCount", INT)


# Games
@dataclass(frozen=True)
class GameAssets(ApiModel):
    """Artwork URLs for a game; empty strings from the API become None."""
    icon_url: Optional[str] = wire("iconUrl", NULLABLE_STR, nullable=True)
    tile_url: Optional[str] = wire("tileUrl", NULLABLE_STR, nullable=True)
    cover_url: Optional[str] = wire("coverUrl", NULLABLE_STR, nullable=True)


@dataclass(frozen=True)
class Game(ApiModel):
    """
    A game supported by CurseForge (https://docs.curseforge.com/#tocS_Game).

    Attributes
    ----------
    id : int
        Numeric game id (432 is Minecraft).
    name : str
    slug : str
    date_modified : datetime
    assets : GameAssets
    status : CoreStatus
    api_status : CoreApiStatus
        Whether the game is public to all API keys.
    """
    id: int = wire("id", INT)
    name: str = wire("name", STR)
    slug: str = wire("slug", STR)
    date_modified: datetime = wire("dateModified", DATETIME)
    assets: GameAssets = wire("assets", model_of(GameAssets))
    status: CoreStatus = wire("status", enum_of(CoreStatus))
    api_status: CoreApiStatus = wire("apiStatus", enum_of(CoreApiStatus))


@dataclass(frozen=True)
class GameVersions(ApiModel):
    """Version strings of one version type (``type`` is the GameVersionType id)."""
    kind: int = wire("type", INT)
    versions: List[str] = wire("versions", list_of(STR))


@dataclass(frozen=True)
class GameVersionType(ApiModel):
    id: int = wire("id", INT)
    game_id: int = wire("gameId", INT)
    name: str = wire("name", STR)
    slug: str = wire("slug", STR)


# Categories
@dataclass(frozen=True)
class Category(ApiModel):
    """
    Represents a category entry returned by the CurseForge API.

    A category with ``is_class`` set is a "class" (top-level grouping such as
    Mods or Modpacks); other categories point at their class via ``class_id``.
    """
    id: int = wire("id", INT)
    game_id: int = wire("gameId", INT)
    name: str = wire("name", STR)
    icon_url: str = wire("iconUrl", STR)
    date_modified: datetime = wire("dateModified", DATETIME)
    slug: Optional[str] = wire("slug", STR, default=None)
    url: Optional[str] = wire("url", STR, default=None)
    is_class: Optional[bool] = wire("isClass", BOOL, default=None)
    class_id: Optional[int] = wire("classId", INT, default=None)
    parent_category_id: Optional[int] = wire("parentCategoryId", INT, default=None)


# Files
@dataclass(frozen=True)
class FileHash(ApiModel):
    value: str = wire("value", STR)
    algo: HashAlgorithm = wire("algo", enum_of(HashAlgorithm))


@dataclass(frozen=True)
class SortableGameVersion(ApiModel):
    """
    Game version metadata attached to a file.

    The API uses ``"0001-01-01T00:00:00"`` for an unknown release date; that
    decodes to None.
    """
    game_version_name: str = wire("gameVersionName", STR)
    game_version_padded: Optional[str] = wire("gameVersionPadded", NULLABLE_STR, nullable=True)
    game_version: Optional[str] = wire("gameVersion", NULLABLE_STR, nullable=True)
    game_version_release_date: Optional[datetime] = wire(
        "gameVersionReleaseDate", NULLABLE_DATETIME, nullable=True
    )
    game_version_type_id: Optional[int] = wire("gameVersionTypeId", INT, default=None)


@dataclass(frozen=True)
class FileDependency(ApiModel):
    project_id: int = wire("modId", INT)
    relation_type: FileRelationType = wire("relationType", enum_of(FileRelationType))


@dataclass(frozen=True)
class FileModule(ApiModel):
    """A top-level entry of the file archive with its CurseForge fingerprint."""
    name: str = wire("name", STR)
    fingerprint: int = wire("fingerprint", INT)


@dataclass(frozen=True)
class ProjectFile(ApiModel):
    """
    Typed representation of a project's file record (a single uploaded file/version).

    Important fields:
      - id: file id
      - project_id: project this file belongs to (``modId`` on the wire)
      - file_name: server filename (used for saving)
      - file_length: file size in bytes
      - download_url: None when the author disabled third-party distribution;
        see `CurseForge.project_file_download_url`
      - hashes: list of FileHash objects (or empty)
    """
    id: int = wire("id", INT)
    game_id: int = wire("gameId", INT)
    project_id: int = wire("modId", INT)
    is_available: bool = wire("isAvailable", BOOL)
    display_name: str = wire("displayName", STR)
    file_name: str = wire("fileName", STR)
    release_type: FileReleaseType = wire("releaseType", enum_of(FileReleaseType))
    file_status: FileStatus = wire("fileStatus", enum_of(FileStatus))
    hashes: List[FileHash] = wire("hashes", list_of(model_of(FileHash)))
    file_date: datetime = wire("fileDate", DATETIME)
    file_length: int = wire("fileLength", INT)
    download_count: int = wire("downloadCount", INT)
    game_versions: List[str] = wire("gameVersions", list_of(STR))
    sortable_game_versions: List[SortableGameVersion] = wire(
        "sortableGameVersions", list_of(model_of(SortableGameVersion))
    )
    dependencies: List[FileDependency] = wire("dependencies", list_of(model_of(FileDependency)))
    is_server_pack: bool = wire("isServerPack", BOOL)
    file_fingerprint: int = wire("fileFingerprint", INT)
    modules: List[FileModule] = wire("modules", list_of(model_of(FileModule)))
    download_url: Optional[str] = wire("downloadUrl", STR, default=None)
    expose_as_alternative: bool = wire("exposeAsAlternative", BOOL, default=False)
    parent_project_file_id: Optional[int] = wire("parentProjectFileId", INT, default=None)
    alternate_file_id: Optional[int] = wire("alternateFileId", INT, default=None)
    server_pack_file_id: Optional[int] = wire("serverPackFileId", INT, default=None)


@dataclass(frozen=True)
class FileIndex(ApiModel):
    """Entry of ``latestFilesIndexes``: the newest file per game version / loader."""
    game_version: str = wire("gameVersion", STR)
    file_id: int = wire("fileId", INT)
    filename: str = wire("filename", STR)
    release_type: FileReleaseType = wire("releaseType", enum_of(FileReleaseType))
    game_version_type_id: Optional[int] = wire("gameVersionTypeId", INT, default=None)
    mod_loader: Optional[ModLoaderType] = wire("modLoader", enum_of(ModLoaderType), default=None)


# Projects
@dataclass(frozen=True)
class ProjectLinks(ApiModel):
    """
    Container for external links related to a project.

    Attributes
    ----------
    website_url : str
        Project page on curseforge.com.
    wiki_url, issues_url, source_url : Optional[str]
        Author-provided links; None when the author left them blank.
    """
    website_url: str = wire("websiteUrl", STR)
    wiki_url: Optional[str] = wire("wikiUrl", NULLABLE_STR, nullable=True)
    issues_url: Optional[str] = wire("issuesUrl", NULLABLE_STR, nullable=True)
    source_url: Optional[str] = wire("sourceUrl", NULLABLE_STR, nullable=True)


@dataclass(frozen=True)
class ProjectAuthor(ApiModel):
    id: int = wire("id", INT)
    name: str = wire("name", STR)
    url: str = wire("url", STR)


@dataclass(frozen=True)
class ProjectAsset(ApiModel):
    """Logo or screenshot of a project."""
    id: int = wire("id", INT)
    project_id: int = wire("modId", INT)
    title: str = wire("title", STR)
    description: Optional[str] = wire("description", NULLABLE_STR, nullable=True)
    thumbnail_url: str = wire("thumbnailUrl", STR)
    url: str = wire("url", STR)


@dataclass(frozen=True)
class Project(ApiModel):
    """
    A CurseForge project (https://docs.curseforge.com/#tocS_Mod).

    The API calls every project a "mod", whether it is a mod, a modpack, a
    resource pack or a world; `class_id` tells them apart.

    Attributes
    ----------
    id : int
    game_id : int
    name : str
    slug : str
    links : ProjectLinks
    summary : str
    status : ProjectStatus
    download_count : float
        The API sends this as a JSON number that does not always fit an integer.
    is_featured : bool
    primary_category_id : int
    categories : List[Category]
    authors : List[ProjectAuthor]
    screenshots : List[ProjectAsset]
    main_file_id : int
    latest_files : List[ProjectFile]
    latest_files_indexes : List[FileIndex]
    date_created, date_modified, date_released : datetime
    game_popularity_rank : int
    is_available : bool
    class_id : Optional[int]
    logo : Optional[ProjectAsset]
    allow_mod_distribution : Optional[bool]
        False means `ProjectFile.download_url` will be None for this project.
    """
    id: int = wire("id", INT)
    game_id: int = wire("gameId", INT)
    name: str = wire("name", STR)
    slug: str = wire("slug", STR)
    links: ProjectLinks = wire("links", model_of(ProjectLinks))
    summary: str = wire("summary", STR)
    status: ProjectStatus = wire("status", enum_of(ProjectStatus))
    download_count: float = wire("downloadCount", NUMBER)
    is_featured: bool = wire("isFeatured", BOOL)
    primary_category_id: int = wire("primaryCategoryId", INT)
    categories: List[Category] = wire("categories", list_of(model_of(Category)))
    authors: List[ProjectAuthor] = wire("authors", list_of(model_of(ProjectAuthor)))
    screenshots: List[ProjectAsset] = wire("screenshots", list_of(model_of(ProjectAsset)))
    main_file_id: int = wire("mainFileId", INT)
    latest_files: List[ProjectFile] = wire("latestFiles", list_of(model_of(ProjectFile)))
    latest_files_indexes: List[FileIndex] = wire("latestFilesIndexes", list_of(model_of(FileIndex)))
    date_created: datetime = wire("dateCreated", DATETIME)
    date_modified: datetime = wire("dateModified", DATETIME)
    date_released: datetime = wire("dateReleased", DATETIME)
    game_popularity_rank: int = wire("gamePopularityRank", INT)
    is_available: bool = wire("isAvailable", BOOL)
    class_id: Optional[int] = wire("classId", INT, default=None)
    logo: Optional[ProjectAsset] = wire("logo", model_of(ProjectAsset), default=None)
    allow_mod_distribution: Optional[bool] = wire("allowModDistribution", BOOL, default=None)


@dataclass(frozen=True)
class FeaturedProjects(ApiModel):
    """https://docs.curseforge.com/#tocS_FeaturedModsResponse"""
    featured: List[Project] = wire("featured", list_of(model_of(Project)))
    popular: List[Project] = wire("popular", list_of(model_of(Project)))
    recently_updated: List[Project] = wire("recentlyUpdated", list_of(model_of(Project)))


# Response envelopes
def _envelope_convert(item: Union[Type[ApiModel], Converter, None]) -> Optional[Converter]:
    if isinstance(item, type) and issubclass(item, ApiModel):
        return model_of(item)
    return item


@dataclass(frozen=True)
class DataResponse(Generic[T]):
    """
    Wraps API responses which have the single field `data`.

    Client methods unwrap it and return `data` directly; it is exposed for
    callers decoding payloads themselves.
    """
    data: T
    other_fields: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, payload: Any, item: Union[Type[ApiModel], Converter, None] = None,
                  unknown_fields: Union[UnknownFields, str, None] = None) -> "DataResponse[T]":
        mode = UnknownFields.parse(unknown_fields)
        payload = _require_mapping(payload, cls.__name__)
        if "data" not in payload:
            raise DataValidationError(f"{cls.__name__}: missing field 'data'", ["data"])
        extra = _unknown_keys(payload, {"data"}, mode, cls.__name__)
        data = _convert("data", _envelope_convert(item), payload["data"], mode)
        return cls(data=data, other_fields=extra)

    def to_dict(self) -> Dict[str, Any]:
        out = {"data": dump(self.data)}
        for k, v in self.other_fields.items():
            out.setdefault(k, v)
        return out


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    """
    Wraps API responses which have the fields `data` and `pagination`
    (games, project search, project files).
    """
    data: List[T]
    pagination: Pagination
    other_fields: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, payload: Any, item: Union[Type[ApiModel], Converter, None] = None,
                  unknown_fields: Union[UnknownFields, str, None] = None) -> "PaginatedResponse[T]":
        mode = UnknownFields.parse(unknown_fields)
        payload = _require_mapping(payload, cls.__name__)
        for key in ("data", "pagination"):
            if payload.get(key) is None:
                raise DataValidationError(f"{cls.__name__}: missing field {key!r}", [key])
        extra = _unknown_keys(payload, {"data", "pagination"}, mode, cls.__name__)
        data = _convert("data", list_of(_envelope_convert(item) or (lambda v, m: v)), payload["data"], mode)
        pagination = _convert("pagination", model_of(Pagination), payload["pagination"], mode)
        return cls(data=data, pagination=pagination, other_fields=extra)

    def to_dict(self) -> Dict[str, Any]:
        out = {"data": dump(self.data), "pagination": self.pagination.to_dict()}
        for k, v in self.other_fields.items():
            out.setdefault(k, v)
        return out

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)


__all__ = [
    "ApiModel",
    "ApiIntEnum",
    "CoreStatus",
    "CoreApiStatus",
    "ProjectStatus",
    "ModLoaderType",
    "FileReleaseType",
    "FileStatus",
    "HashAlgorithm",
    "FileRelationType",
    "Pagination",
    "Game",
    "GameAssets",
    "GameVersions",
    "GameVersionType",
    "Category",
    "FileHash",
    "SortableGameVersion",
    "FileDependency",
    "FileModule",
    "ProjectFile",
    "FileIndex",
    "ProjectLinks",
    "ProjectAuthor",
    "ProjectAsset",
    "Project",
    "FeaturedProjects",
    "DataResponse",
    "PaginatedResponse",
    "wire",
    "enum_of",
    "model_of",
    "list_of",
    "map_of",
    "dump",
]
