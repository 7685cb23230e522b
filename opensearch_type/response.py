"""Server responses and the rules that turn them into domain errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import NotFoundError


@dataclass(frozen=True)
class Response:
    """A decoded server reply. Read-only and never kept past the call."""

    data: dict[str, Any] = field(default_factory=dict)

    def is_ok(self) -> bool:
        # non-2xx replies raise in the transport
        return "error" not in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


def raise_if_absent(response: Response, marker: str, message: str) -> Response:
    """Raise :class:`NotFoundError` when *marker* is present and false.

    A missing marker counts as success.
    """
    if marker in response.data and not response.data[marker]:
        raise NotFoundError(message)
    return response


def raise_if_missing(response: Response, message: str) -> Response:
    """Raise :class:`NotFoundError` unless the fetch payload says it exists.

    Older servers report ``exists``, newer ones ``found``.
    """
    flag = response.data.get("exists", response.data.get("found"))
    if not flag:
        raise NotFoundError(message)
    return response
