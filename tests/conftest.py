"""
Shared fixtures: sample API payloads and an httpx.MockTransport-backed fake server.
"""

import copy
import json
import os

import httpx
import pytest
import pytest_asyncio

from curseforge import CFWidget, ClientOptions, CurseForge

API_BASE = "https://api.example.test/v1/"
WIDGET_BASE = "https://widget.example.test/"


def game_payload(**overrides):
    data = {
        "id": 432,
        "name": "Minecraft",
        "slug": "minecraft",
        "dateModified": "2022-09-30T14:21:12.513Z",
        "assets": {
            "iconUrl": "https://media.forgecdn.net/game/432/icon.png",
            "tileUrl": "",
            "coverUrl": None,
        },
        "status": 6,
        "apiStatus": 2,
    }
    data.update(overrides)
    return data


def category_payload(**overrides):
    data = {
        "id": 423,
        "gameId": 432,
        "name": "Map and Information",
        "slug": "map-information",
        "url": "https://www.curseforge.com/minecraft/mc-mods/map-information",
        "iconUrl": "https://media.forgecdn.net/avatars/6/38/map.png",
        "dateModified": "2014-05-08T17:44:39.057Z",
        "isClass": False,
        "classId": 6,
        "parentCategoryId": 6,
    }
    data.update(overrides)
    return data


def file_payload(**overrides):
    data = {
        "id": 3847140,
        "gameId": 432,
        "modId": 238222,
        "isAvailable": True,
        "displayName": "jei-1.19.2-11.3.0.262.jar",
        "fileName": "jei-1.19.2-11.3.0.262.jar",
        "releaseType": 1,
        "fileStatus": 4,
        "hashes": [
            {"value": "5c1d8b4ec5dd3d4c7b16fa19a5d2e1d4f6c1e1aa", "algo": 1},
            {"value": "6f2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d", "algo": 2},
        ],
        "fileDate": "2022-09-24T01:18:51.097Z",
        "fileLength": 1234567,
        "downloadCount": 98765,
        "downloadUrl": "https://edge.forgecdn.net/files/3847/140/jei-1.19.2-11.3.0.262.jar",
        "gameVersions": ["1.19.2", "Forge"],
        "sortableGameVersions": [
            {
                "gameVersionName": "1.19.2",
                "gameVersionPadded": "0000000001.0000000019.0000000002",
                "gameVersion": "1.19.2",
                "gameVersionReleaseDate": "2022-08-05T11:57:05.791Z",
                "gameVersionTypeId": 73407,
            },
            {
                "gameVersionName": "Forge",
                "gameVersionPadded": "0",
                "gameVersion": "",
                "gameVersionReleaseDate": "0001-01-01T00:00:00",
                "gameVersionTypeId": 68441,
            },
        ],
        "dependencies": [{"modId": 306612, "relationType": 2}],
        "alternateFileId": 0,
        "isServerPack": False,
        "fileFingerprint": 3089143260,
        "modules": [
            {"name": "META-INF", "fingerprint": 3810402446},
            {"name": "mezz", "fingerprint": 1628843342},
        ],
    }
    data.update(overrides)
    return data


def project_payload(**overrides):
    data = {
        "id": 238222,
        "gameId": 432,
        "name": "Just Enough Items (JEI)",
        "slug": "jei",
        "links": {
            "websiteUrl": "https://www.curseforge.com/minecraft/mc-mods/jei",
            "wikiUrl": "",
            "issuesUrl": "https://github.com/mezz/JustEnoughItems/issues",
            "sourceUrl": None,
        },
        "summary": "View Items and Recipes",
        "status": 4,
        "downloadCount": 187437392.0,
        "isFeatured": False,
        "primaryCategoryId": 423,
        "categories": [category_payload()],
        "classId": 6,
        "authors": [{"id": 32358, "name": "mezz", "url": "https://www.curseforge.com/members/17072262-mezz"}],
        "logo": {
            "id": 29069,
            "modId": 238222,
            "title": "635838945588716414.jpeg",
            "description": "",
            "thumbnailUrl": "https://media.forgecdn.net/avatars/thumbnails/29/69/256/256/635838945588716414.jpeg",
            "url": "https://media.forgecdn.net/avatars/29/69/635838945588716414.jpeg",
        },
        "screenshots": [],
        "mainFileId": 3847140,
        "latestFiles": [file_payload()],
        "latestFilesIndexes": [
            {
                "gameVersion": "1.19.2",
                "fileId": 3847140,
                "filename": "jei-1.19.2-11.3.0.262.jar",
                "releaseType": 1,
                "gameVersionTypeId": 73407,
                "modLoader": 1,
            }
        ],
        "dateCreated": "2015-11-23T06:27:26.853Z",
        "dateModified": "2022-09-24T01:23:29.35Z",
        "dateReleased": "2022-09-24T01:18:51.097Z",
        "allowModDistribution": True,
        "gamePopularityRank": 3,
        "isAvailable": True,
    }
    data.update(overrides)
    return data


def widget_file_payload(**overrides):
    data = {
        "id": 3847140,
        "url": "https://www.curseforge.com/minecraft/mc-mods/jei/files/3847140",
        "display": "jei-1.19.2-11.3.0.262.jar",
        "name": "jei-1.19.2-11.3.0.262.jar",
        "quality": "Release",
        "version": "1.19.2",
        "filesize": 1234567,
        "versions": ["1.19.2", "Forge"],
        "downloads": 98765,
        "uploaded_at": "2022-09-24T01:18:51+00:00",
    }
    data.update(overrides)
    return data


def widget_project_payload(**overrides):
    data = {
        "id": 238222,
        "title": "Just Enough Items (JEI)",
        "summary": "View Items and Recipes",
        "description": "<p>JEI is an item and recipe viewing mod.</p>",
        "game": "Minecraft",
        "type": "Mods",
        "urls": {
            "curseforge": "https://www.curseforge.com/minecraft/mc-mods/jei",
            "project": "https://minecraft.curseforge.com/projects/238222",
        },
        "thumbnail": "https://media.forgecdn.net/avatars/thumbnails/29/69/64/64/635838945588716414.jpeg",
        "created_at": "2015-11-23T06:27:26+00:00",
        "downloads": {"monthly": 3000000, "total": 187437392},
        "license": "MIT License",
        "donate": "",
        "categories": ["Map and Information"],
        "members": [{"title": "Owner", "username": "mezz", "id": 17072262}],
        "links": [],
        "files": [widget_file_payload()],
        "versions": {"1.19.2": widget_file_payload()},
        "download": widget_file_payload(),
    }
    data.update(overrides)
    return data


def paginated(items, index=0, page_size=50, total=None):
    return {
        "data": items,
        "pagination": {
            "index": index,
            "pageSize": page_size,
            "resultCount": len(items),
            "totalCount": len(items) if total is None else total,
        },
    }


class FakeApi:
    """
    Routes requests to canned JSON and records every request it sees.

    `routes` maps ``(method, path)`` (path relative to the API base) to either
    a JSON-serialisable payload, an ``httpx.Response``, or a callable taking
    the request and returning one of those.
    """

    def __init__(self, base=API_BASE):
        self.base = base
        self.routes = {}
        self.requests = []

    def add(self, method, path, payload):
        self.routes[(method.upper(), path)] = payload
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = str(request.url).split("?", 1)[0]
        assert path.startswith(self.base), path
        key = (request.method, path[len(self.base):])
        if key not in self.routes:
            return httpx.Response(404, json={"error": f"no route for {key}"})
        result = self.routes[key]
        if callable(result):
            result = result(request)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, content=json.dumps(copy.deepcopy(result)).encode("utf-8"),
                              headers={"Content-Type": "application/json"})

    def http_client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's CURSEFORGE_* variables out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("CURSEFORGE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def fake_widget():
    return FakeApi(WIDGET_BASE)


@pytest_asyncio.fixture
async def client(fake_api):
    http = fake_api.http_client()
    cf = CurseForge(api_key="test-key", base_url=API_BASE, http_client=http)
    yield cf
    await http.aclose()


@pytest_asyncio.fixture
async def strict_client(fake_api):
    http = fake_api.http_client()
    cf = CurseForge(
        api_key="test-key",
        base_url=API_BASE,
        options=ClientOptions(unknown_fields="deny"),
        http_client=http,
    )
    yield cf
    await http.aclose()


@pytest_asyncio.fixture
async def widget(fake_widget):
    http = fake_widget.http_client()
    cf = CFWidget(WIDGET_BASE, http_client=http)
    yield cf
    await http.aclose()
