"""Search requests scoped to indices and types, and their results."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator, Optional, Union

from .query import Query, QueryLike
from .response import Response

if TYPE_CHECKING:
    from .client import Client
    from .doc_type import DocumentType
    from .index import Index

logger = logging.getLogger(__name__)

# Keys of a search options mapping that belong in the body, not the URL.
_BODY_OPTIONS = {"size", "from"}

SearchOptions = Union[int, dict[str, Any], None]


class ResultSet:
    """Hits of a search response, paired with the query that produced them."""

    def __init__(self, response: Response, query: Query) -> None:
        self.response = response
        self.query = query

    @property
    def _hits(self) -> dict[str, Any]:
        return self.response.data.get("hits", {})

    @property
    def results(self) -> list[dict[str, Any]]:
        return list(self._hits.get("hits", []))

    @property
    def total_hits(self) -> int:
        total = self._hits.get("total", 0)
        # 7.x reports {"value": n, "relation": "eq"}
        if isinstance(total, dict):
            return int(total.get("value", 0))
        return int(total)

    @property
    def max_score(self) -> Optional[float]:
        return self._hits.get("max_score")

    @property
    def took(self) -> Optional[int]:
        return self.response.data.get("took")

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.results)


class Search:
    """A search over one or more indices and types."""

    def __init__(self, client: "Client") -> None:
        self.client = client
        self.indices: list[str] = []
        self.types: list[str] = []
        self.query = Query()
        self.options: dict[str, Any] = {}

    def add_index(self, index: Union["Index", str]) -> "Search":
        name = index if isinstance(index, str) else index.name
        if name not in self.indices:
            self.indices.append(name)
        return self

    def add_type(self, doc_type: Union["DocumentType", str]) -> "Search":
        name = doc_type if isinstance(doc_type, str) else doc_type.name
        if name not in self.types:
            self.types.append(name)
        return self

    def set_query(self, query: QueryLike) -> "Search":
        self.query = Query.create(query)
        return self

    def set_options_and_query(
        self,
        options: SearchOptions = None,
        query: QueryLike = "",
    ) -> "Search":
        """Apply a query plus either a result limit or an options mapping.

        ``size``/``limit`` and ``from`` go into the request body; every
        other option is sent as a URL parameter.
        """
        self.set_query(query)
        if options is None:
            return self
        if isinstance(options, bool) or not isinstance(options, (int, dict)):
            raise TypeError(f"Unsupported search options: {options!r}")
        if isinstance(options, int):
            self.query.set_size(options)
            return self
        for key, value in options.items():
            if key == "limit":
                key = "size"
            if key in _BODY_OPTIONS:
                self.query.set_param(key, value)
            else:
                self.options[key] = value
        return self

    def _path(self, endpoint: str) -> str:
        parts = [",".join(self.indices) if self.indices else "_all"]
        if self.types:
            parts.append(",".join(self.types))
        parts.append(endpoint)
        return "/".join(parts)

    def search(self) -> ResultSet:
        path = self._path("_search")
        logger.debug("Searching %s", path)
        response = self.client.request(path, "GET", self.query.to_dict(), self.options)
        return ResultSet(response, self.query)

    def count(self) -> int:
        path = self._path("_count")
        response = self.client.request(path, "GET", {"query": self.query.query}, self.options)
        return int(response.data.get("count", 0))
