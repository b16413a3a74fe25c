"""Cursor over paginated Telerivet list endpoints."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from telerivet._internal.models import CursorPage

if TYPE_CHECKING:
    from telerivet.client import TelerivetClient
    from telerivet.models.entity import Entity

MAX_LIMIT_PAGE_SIZE = 200


class ApiCursor:
    """Iterates over the items of a list endpoint, fetching pages on demand.

    The first request uses the caller's parameters (filters, `page_size`,
    `offset`). Each following page is requested with the `marker` returned by
    the previous response, and only once the buffered page is exhausted and
    the response reported `truncated`.

    Example:
        cursor = project.query_contacts({"name": {"prefix": "John"}}).limit(50)
        for contact in cursor:
            print(contact.name)
    """

    def __init__(
        self,
        api: "TelerivetClient",
        item_cls: "type[Entity] | None",
        path: str,
        params: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the cursor.

        Args:
            api: Client used to issue requests.
            item_cls: Entity class to wrap each item in, or None for raw dicts.
            path: Path of the list endpoint.
            params: Query parameters for the list endpoint.

        Raises:
            ValueError: If `params` contains `count`; use `count()` instead.
        """
        params = dict(params or {})
        if "count" in params:
            raise ValueError(
                "Cannot construct ApiCursor with 'count' parameter. Call the count() method instead."
            )

        self._api = api
        self._item_cls = item_cls
        self._path = path
        self._params = params

        self._count: int | None = None
        self._pos = 0
        self._data: list[dict[str, Any]] | None = None
        self._truncated = False
        self._next_marker: str | None = None
        self._limit: int | None = None
        self._offset = 0

    def limit(self, limit: int) -> "ApiCursor":
        """Limit the total number of items returned by this cursor."""
        self._limit = limit
        return self

    def count(self) -> int:
        """Return the total number of items matching the query.

        Issues a single request with `count=1`; no items are fetched. The
        result is cached.
        """
        if self._count is None:
            params = dict(self._params)
            params["count"] = 1
            page = CursorPage.model_validate(self._api.do_request("GET", self._path, params))
            self._count = int(page.count or 0)
        return self._count

    def all(self) -> list[Any]:
        """Return all remaining items as a list."""
        return list(self)

    def has_next(self) -> bool:
        """Return True if another item is available, fetching a page if needed."""
        if self._limit_reached():
            return False

        data = self._data if self._data is not None else self._load_next_page()
        if self._pos < len(data):
            return True
        if not self._truncated:
            return False

        return self._pos < len(self._load_next_page())

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._limit_reached():
            raise StopIteration

        data = self._data
        if data is None or (self._pos >= len(data) and self._truncated):
            data = self._load_next_page()

        if self._pos >= len(data):
            raise StopIteration

        item_data = data[self._pos]
        self._pos += 1
        self._offset += 1
        if self._item_cls is not None:
            return self._item_cls(self._api, item_data, True)
        return item_data

    def _limit_reached(self) -> bool:
        return self._limit is not None and self._offset >= self._limit

    def _load_next_page(self) -> list[Any]:
        """Fetch the next page and return its items."""
        request_params = dict(self._params)

        if self._next_marker is not None:
            request_params["marker"] = self._next_marker

        if self._limit is not None and "page_size" not in request_params:
            request_params["page_size"] = min(self._limit, MAX_LIMIT_PAGE_SIZE)

        page = CursorPage.model_validate(self._api.do_request("GET", self._path, request_params))

        self._data = page.data
        self._truncated = page.truncated
        self._next_marker = page.next_marker
        self._pos = 0
        return page.data
