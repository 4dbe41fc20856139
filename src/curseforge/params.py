"""
params.py

Query-parameter and request-body types for the CurseForge Core API.

Each params class serializes itself with `to_query()` into the exact
camelCase keys the API expects, in field order, leaving out anything that
is None. Enums are sent by value (``sortField=2``, ``sortOrder=desc``,
``modLoaderType=4``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

import httpx

from .types_models import ModLoaderType
from .utils import camel_case


class SearchSort(IntEnum):
    """https://docs.curseforge.com/#tocS_ModsSearchSortField"""
    FEATURED = 1
    POPULARITY = 2
    LAST_UPDATED = 3
    NAME = 4
    AUTHOR = 5
    TOTAL_DOWNLOADS = 6
    CATEGORY = 7
    GAME_VERSION = 8


class SortOrder(str, Enum):
    """https://docs.curseforge.com/#tocS_SortOrder"""
    ASCENDING = "asc"
    DESCENDING = "desc"


def _query_value(value: Any) -> Union[str, int, float]:
    if isinstance(value, Enum):
        return value.value
    return value


def renamed(key: str, default: Any = None) -> Any:
    """A params field whose wire name is not the camelCase of its attribute name."""
    return field(default=default, metadata={"key": key})


class QueryParams:
    """Mixin turning dataclass fields into an ordered query-string mapping."""

    def to_query(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.metadata.get("key") or camel_case(f.name)] = _query_value(value)
        return out

    def query_string(self) -> str:
        """URL-encoded form of `to_query()`, as sent on the wire."""
        return str(httpx.QueryParams(self.to_query()))


@dataclass
class GamesParams(QueryParams):
    """https://docs.curseforge.com/#get-games"""
    index: Optional[int] = None
    page_size: Optional[int] = None


@dataclass
class CategoriesParams(QueryParams):
    """
    https://docs.curseforge.com/#get-categories

    Parameters
    ----------
    game_id : int
        Game whose categories are listed.
    class_id : Optional[int]
        Restrict the listing to the categories of one class.
    """
    game_id: int
    class_id: Optional[int] = None

    @classmethod
    def game(cls, game_id: int) -> "CategoriesParams":
        """Instantiate with a `game_id` and no `class_id`."""
        return cls(game_id=game_id)


@dataclass
class ProjectSearchParams(QueryParams):
    """
    https://docs.curseforge.com/#search-mods

    Attributes
    ----------
    game_id : int
        The only mandatory filter.
    class_id, category_id : Optional[int]
        Narrow to a class (e.g. Modpacks) or a category.
    game_version : Optional[str]
        e.g. ``"1.20.1"``.
    search_filter : Optional[str]
        Free-text query matched against name and author.
    sort_field : Optional[SearchSort]
    sort_order : Optional[SortOrder]
    mod_loader : Optional[ModLoaderType]
        Sent as ``modLoaderType``.
    game_version_type_id : Optional[int]
    slug : Optional[str]
        Exact slug lookup; combine with class_id since slugs are only unique per class.
    index, page_size : Optional[int]
        Pagination window. ``index + page_size`` may not exceed 10,000.
    """
    game_id: int
    class_id: Optional[int] = None
    category_id: Optional[int] = None
    game_version: Optional[str] = None
    search_filter: Optional[str] = None
    sort_field: Optional[SearchSort] = None
    sort_order: Optional[SortOrder] = None
    mod_loader: Optional[ModLoaderType] = renamed("modLoaderType")
    game_version_type_id: Optional[int] = None
    slug: Optional[str] = None
    index: Optional[int] = None
    page_size: Optional[int] = None

    @classmethod
    def game(cls, game_id: int) -> "ProjectSearchParams":
        return cls(game_id=game_id)


@dataclass
class ProjectFilesParams(QueryParams):
    """https://docs.curseforge.com/#get-mod-files"""
    game_version: Optional[str] = None
    mod_loader: Optional[ModLoaderType] = renamed("modLoaderType")
    game_version_type_id: Optional[int] = None
    index: Optional[int] = None
    page_size: Optional[int] = None


@dataclass
class FeaturedProjectsBody:
    """
    https://docs.curseforge.com/#tocS_GetFeaturedModsRequestBody

    Attributes
    ----------
    game_id : int
    excluded_mod_ids : List[int]
        Projects to leave out of every list in the response.
    game_version_type_id : Optional[int]
    """
    game_id: int
    excluded_mod_ids: List[int] = field(default_factory=list)
    game_version_type_id: Optional[int] = None

    @classmethod
    def game(cls, game_id: int) -> "FeaturedProjectsBody":
        return cls(game_id=game_id)

    def to_json(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "gameId": self.game_id,
            "excludedModIds": list(self.excluded_mod_ids),
        }
        if self.game_version_type_id is not None:
            body["gameVersionTypeId"] = self.game_version_type_id
        return body


@dataclass
class ProjectIdsBody:
    """https://docs.curseforge.com/#tocS_GetModsByIdsListRequestBody"""
    mod_ids: List[int] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {"modIds": [int(i) for i in self.mod_ids]}


@dataclass
class FileIdsBody:
    """https://docs.curseforge.com/#tocS_GetModFilesRequestBody"""
    file_ids: List[int] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {"fileIds": [int(i) for i in self.file_ids]}
