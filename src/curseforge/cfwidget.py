"""
cfwidget.py

Secondary support for the CFWidget API (https://api.cfwidget.com), a public
service that scrapes CurseForge project pages and needs no API key.

Unlike the Core API, CFWidget answers with the bare object (no ``data``
envelope) and uses snake_case keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

import httpx

from .client import BaseClient
from .config import ClientOptions
from .endpoints import CFWIDGET_API_BASE, CFWIDGETURLS
from .types_models import (
    DATETIME,
    INT,
    STR,
    ApiModel,
    enum_of,
    list_of,
    map_of,
    model_of,
    wire,
)

logger = logging.getLogger(__name__)


class WidgetReleaseType(str, Enum):
    """Release channel, sent by name rather than by number."""
    RELEASE = "Release"
    BETA = "Beta"
    ALPHA = "Alpha"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        # accept any case, e.g. "release"
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


@dataclass(frozen=True)
class WidgetProjectUrls(ApiModel):
    curseforge: str = wire("curseforge", STR)
    project: str = wire("project", STR)


@dataclass(frozen=True)
class WidgetProjectDownloads(ApiModel):
    monthly: int = wire("monthly", INT)
    total: int = wire("total", INT)


@dataclass(frozen=True)
class WidgetProjectMember(ApiModel):
    title: str = wire("title", STR)
    username: str = wire("username", STR)
    id: int = wire("id", INT)


@dataclass(frozen=True)
class WidgetProjectFile(ApiModel):
    """
    A file as listed by CFWidget.

    Attributes
    ----------
    id : int
    url : str
    display : str
        Display name.
    name : str
        File name.
    quality : WidgetReleaseType
    game_version : str
        Primary game version (``version`` on the wire).
    filesize : int
        Bytes.
    versions : List[str]
        Every game version and loader the file is tagged with, e.g. ``["1.18.1", "Forge"]``.
    downloads : int
    uploaded_at : datetime
    """
    id: int = wire("id", INT)
    url: str = wire("url", STR)
    display: str = wire("display", STR)
    name: str = wire("name", STR)
    quality: WidgetReleaseType = wire("quality", enum_of(WidgetReleaseType))
    game_version: str = wire("version", STR)
    filesize: int = wire("filesize", INT)
    versions: List[str] = wire("versions", list_of(STR))
    downloads: int = wire("downloads", INT)
    uploaded_at: datetime = wire("uploaded_at", DATETIME)


@dataclass(frozen=True)
class WidgetProject(ApiModel):
    """
    Project summary returned by CFWidget.

    `versions` maps a game version (e.g. ``"1.19.2"``) to the newest file
    for it; `download` is the newest file overall.
    """
    id: int = wire("id", INT)
    title: str = wire("title", STR)
    summary: str = wire("summary", STR)
    description: str = wire("description", STR)
    game: str = wire("game", STR)
    release_type: str = wire("type", STR)
    urls: WidgetProjectUrls = wire("urls", model_of(WidgetProjectUrls))
    thumbnail: str = wire("thumbnail", STR)
    created_at: datetime = wire("created_at", DATETIME)
    downloads: WidgetProjectDownloads = wire("downloads", model_of(WidgetProjectDownloads))
    license: str = wire("license", STR)
    donate: str = wire("donate", STR)
    categories: List[str] = wire("categories", list_of(STR))
    members: List[WidgetProjectMember] = wire("members", list_of(model_of(WidgetProjectMember)))
    links: List[str] = wire("links", list_of(STR))
    files: List[WidgetProjectFile] = wire("files", list_of(model_of(WidgetProjectFile)))
    versions: Dict[str, WidgetProjectFile] = wire("versions", map_of(model_of(WidgetProjectFile)))
    download: WidgetProjectFile = wire("download", model_of(WidgetProjectFile))


class CFWidget(BaseClient):
    """
    Async client for the CFWidget API.

    Parameters
    ----------
    base_url : str
        API root (defaults to CFWIDGET_API_BASE).
    options : Optional[ClientOptions]
    http_client : Optional[httpx.AsyncClient]
    """

    def __init__(
        self,
        base_url: str = CFWIDGET_API_BASE,
        *,
        options: Optional[ClientOptions] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(base_url, options=options, http_client=http_client)

    def _project(self):
        mode = self.unknown_fields
        return lambda value: WidgetProject.from_dict(value, mode)

    async def project(self, project_id: Union[int, str]) -> WidgetProject:
        """Look a project up by its numeric CurseForge id."""
        logger.debug("CFWidget lookup by id %s", project_id)
        return await self._fetch("GET", CFWIDGETURLS.PROJECT, self._project(),
                                 path_params={"project_id": int(project_id)})

    async def project_by_path(self, path: str) -> WidgetProject:
        """
        Look a project up by the path of its curseforge.com page.

        Parameters
        ----------
        path : str
            e.g. ``"minecraft/mc-mods/jei"``; leading/trailing slashes are ignored.
        """
        path = path.strip().strip("/")
        if not path:
            raise ValueError("path must not be empty")
        logger.debug("CFWidget lookup by path %s", path)
        return await self._fetch("GET", CFWIDGETURLS.PROJECT_BY_PATH, self._project(),
                                 path_params={"path": path})
