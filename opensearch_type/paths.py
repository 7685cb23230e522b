"""Request path and HTTP method construction."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote


def encode_id(doc_id: Any) -> str:
    """Percent-encode a document id for use as a single path segment."""
    if doc_id is None:
        return ""
    return quote(str(doc_id), safe="")


def build_path(type_name: str, sub_path: str = "") -> str:
    """Join a type name and a relative path: ``{type}/{sub_path}``."""
    return f"{type_name}/{sub_path}"


def document_method(doc_id: Any) -> str:
    """Pick the verb for writing a document.

    ``PUT`` creates or replaces at the given id; with no id, ``POST`` lets
    the server generate one.
    """
    if encode_id(doc_id):
        return "PUT"
    return "POST"
