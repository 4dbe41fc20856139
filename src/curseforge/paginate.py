"""
paginate.py

Async iteration over paginated endpoints (games, project search, project files).

A `PaginatedStream` owns a copy of the request params and moves their `index`
forward page by page:

    >>> async for project in client.search_projects_iter(ProjectSearchParams.game(432)):
    ...     print(project.name)

It stops when a page comes back empty or when the offset reaches
``min(limit, pagination.total_count)``. The limit defaults to the API's hard cap
of 10,000 results. Errors raised while fetching a page propagate out of the
iteration and end the stream.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import AsyncIterator, Awaitable, Callable, Generic, List, Optional, Tuple, TypeVar

from .endpoints import API_PAGINATION_RESULTS_LIMIT, DEFAULT_PAGE_SIZE
from .types_models import PaginatedResponse, Pagination

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")

PageFetcher = Callable[[P], Awaitable[PaginatedResponse[T]]]


class PaginatedStream(Generic[T]):
    """
    Async iterator yielding every item of a paginated endpoint.

    Parameters
    ----------
    fetch_page : Callable[[params], Awaitable[PaginatedResponse]]
        Performs one request with the given params.
    params : dataclass with `index` and `page_size` attributes
        Copied; the caller's object is never modified.
    limit : int
        Maximum offset the stream will reach.
    """

    def __init__(self, fetch_page: PageFetcher, params, limit: int = API_PAGINATION_RESULTS_LIMIT):
        if limit < 0:
            raise ValueError("limit must be >= 0")
        self._fetch_page = fetch_page
        self._params = dataclasses.replace(params)
        if self._params.index is None:
            self._params.index = 0
        self._limit = limit
        self._pagination: Optional[Pagination] = None
        self._buffer: List[T] = []
        self._done = False

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def pagination(self) -> Optional[Pagination]:
        """`Pagination` of the most recent page, None before the first request."""
        return self._pagination

    @property
    def offset(self) -> int:
        """Index the next request will be made at."""
        return self._params.index

    def total_items(self) -> Optional[int]:
        if self._pagination is None:
            return None
        return min(self._limit, self._pagination.total_count)

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """
        Lower and upper bound on the number of items.

        The upper bound is None until a page has been fetched, then it is the
        total count reported by the API capped at `limit`. It counts from the
        start of the result set, not from the current position.
        """
        return 0, self.total_items()

    def _exhausted(self) -> bool:
        if self.offset >= self._limit:
            return True
        total = self.total_items()
        return total is not None and self.offset >= total

    async def _next_page(self) -> List[T]:
        page_size = self._params.page_size or DEFAULT_PAGE_SIZE
        if self.offset + page_size > self._limit:
            self._params.page_size = self._limit - self.offset
        page = await self._fetch_page(dataclasses.replace(self._params))
        self._pagination = page.pagination
        self._params.index = self.offset + len(page.data)
        logger.debug(
            "fetched page: %d items, offset now %d of %s",
            len(page.data), self.offset, self.total_items(),
        )
        return list(page.data)

    async def pages(self) -> AsyncIterator[List[T]]:
        """Iterate whole pages instead of single items."""
        while not self._done:
            if self._buffer:
                chunk, self._buffer = self._buffer, []
                yield chunk
                continue
            if self._exhausted():
                self._done = True
                return
            try:
                chunk = await self._next_page()
            except BaseException:
                self._done = True
                raise
            if not chunk:
                self._done = True
                return
            yield chunk

    def __aiter__(self) -> "PaginatedStream[T]":
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            if self._done or self._exhausted():
                self._done = True
                raise StopAsyncIteration
            try:
                page = await self._next_page()
            except BaseException:
                self._done = True
                raise
            if not page:
                self._done = True
                raise StopAsyncIteration
            self._buffer = page
        return self._buffer.pop(0)

    async def collect(self) -> List[T]:
        """Drain the stream into a list."""
        return [item async for item in self]

    def __repr__(self) -> str:
        return f"<PaginatedStream offset={self.offset} limit={self._limit} total={self.total_items()}>"
