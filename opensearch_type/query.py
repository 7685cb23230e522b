"""Normalisation of caller-supplied queries into request bodies.

This is not a query DSL; it only accepts the shapes callers pass to
``search``, ``count``, ``delete_by_query`` and ``more_like_this``.
"""

from __future__ import annotations

import copy
from typing import Any, Optional, Union

QueryLike = Union["Query", dict[str, Any], str, None]


class Query:
    """A full search request body (``{"query": ..., "size": ...}``)."""

    def __init__(self, body: Optional[dict[str, Any]] = None) -> None:
        self._body: dict[str, Any] = copy.deepcopy(body) if body else {}
        self._body.setdefault("query", {"match_all": {}})

    @classmethod
    def create(cls, value: QueryLike = None) -> "Query":
        """Build a Query from any accepted shape.

        - ``None`` / ``""`` -> ``match_all``
        - ``str`` -> ``query_string`` query
        - ``dict`` with a ``query`` key -> used as the full body
        - other ``dict`` -> used as the inner query
        - ``Query`` -> returned as is
        """
        if isinstance(value, Query):
            return value
        if value is None or value == "" or value == {}:
            return cls()
        if isinstance(value, str):
            return cls({"query": {"query_string": {"query": value}}})
        if isinstance(value, dict):
            if "query" in value:
                return cls(value)
            return cls({"query": value})
        raise TypeError(f"Unsupported query type: {type(value).__name__}")

    @property
    def query(self) -> dict[str, Any]:
        """The inner query clause."""
        return self._body["query"]

    def set_param(self, key: str, value: Any) -> "Query":
        self._body[key] = value
        return self

    def set_size(self, size: int) -> "Query":
        return self.set_param("size", size)

    def set_from(self, offset: int) -> "Query":
        return self.set_param("from", offset)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._body)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self._body == other._body

    def __repr__(self) -> str:
        return f"Query({self._body!r})"
