"""Documents and update scripts.

``Document`` and ``Script`` are the two kinds of update payload: both carry
an id, per-call options and know how to render an ``_update`` request body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from .options import filter_options


@runtime_checkable
class UpdatePayload(Protocol):
    """Anything that can be sent to the ``_update`` endpoint."""

    id: str
    options: dict[str, Any]

    def has_id(self) -> bool: ...

    def get_options(self, operation: str) -> dict[str, Any]: ...

    def to_update_body(self) -> dict[str, Any]: ...


@dataclass
class Document:
    """A single document and the options used when writing it.

    ``DocumentType.add_document`` writes the server-assigned ``id`` and
    ``version`` back into the instance it is given; no other field is
    touched by a request.
    """

    id: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    type: Optional[str] = None
    index: Optional[str] = None
    version: Optional[int] = None
    options: dict[str, Any] = field(default_factory=dict)
    auto_populate: bool = False
    doc_as_upsert: bool = False

    def has_id(self) -> bool:
        return self.id is not None and str(self.id) != ""

    def set_option(self, key: str, value: Any) -> "Document":
        self.options[key] = value
        return self

    def get_options(self, operation: str) -> dict[str, Any]:
        """Options recognised by *operation* (``add``, ``delete``, ``update``)."""
        return filter_options(self.options, operation)

    def to_update_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"doc": self.data}
        if self.doc_as_upsert:
            body["doc_as_upsert"] = True
        return body


@dataclass
class Script:
    """A scripted partial update."""

    script: str
    params: dict[str, Any] = field(default_factory=dict)
    lang: Optional[str] = None
    id: str = ""
    upsert: Optional[dict[str, Any]] = None
    options: dict[str, Any] = field(default_factory=dict)

    def has_id(self) -> bool:
        return self.id is not None and str(self.id) != ""

    def get_options(self, operation: str) -> dict[str, Any]:
        return filter_options(self.options, operation)

    def to_update_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"script": self.script}
        if self.params:
            body["params"] = self.params
        if self.lang:
            body["lang"] = self.lang
        if self.upsert is not None:
            body["upsert"] = self.upsert
        return body
