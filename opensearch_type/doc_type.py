"""A named document type inside an index.

The hierarchy is client -> index -> type -> document. Every request made
here is relative to ``{index}/{type}/``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence

from opensearchpy.exceptions import ConnectionError as TransportConnectionError
from opensearchpy.exceptions import TransportError

from .document import Document, UpdatePayload
from .exceptions import ArgumentError, ConfigurationError, NotFoundError, ValidationError
from .mapping import Mapping
from .options import filter_options
from .paths import build_path, document_method, encode_id
from .query import Query, QueryLike
from .response import Response, raise_if_absent, raise_if_missing
from .search import ResultSet, Search, SearchOptions
from .serializer import Serializer, SerializerLike, as_serializer

if TYPE_CHECKING:
    from .index import Index

logger = logging.getLogger(__name__)


class DocumentType:
    """Document operations for one type of one index.

    Args:
        index: The owning index.
        name: Type name; fixed for the life of the instance.
        serializer: Used by :meth:`add_object` / :meth:`add_objects`.
        auto_populate: Write server-assigned ids back into added documents.
            ``None`` takes the client's configured default.
    """

    def __init__(
        self,
        index: "Index",
        name: str,
        serializer: Optional[SerializerLike] = None,
        auto_populate: Optional[bool] = None,
    ) -> None:
        self._index = index
        self._name = name
        self._serializer: Optional[Serializer] = None
        if serializer is not None:
            self.set_serializer(serializer)
        if auto_populate is None:
            auto_populate = index.auto_populate
        self.auto_populate = auto_populate

    @property
    def name(self) -> str:
        return self._name

    @property
    def index(self) -> "Index":
        return self._index

    @property
    def serializer(self) -> Optional[Serializer]:
        return self._serializer

    def set_serializer(self, serializer: SerializerLike) -> None:
        self._serializer = as_serializer(serializer)

    def _require_serializer(self) -> Serializer:
        if self._serializer is None:
            raise ConfigurationError("No serializer defined")
        return self._serializer

    def __repr__(self) -> str:
        return f"DocumentType(index={self._index.name!r}, name={self._name!r})"

    # ── documents ──────────────────────────────────

    def add_document(self, doc: Document) -> Response:
        """Index *doc*, creating or replacing it.

        Without an id the server generates one. When auto-populate is on
        (on the document or this type) the generated id is written to
        ``doc.id`` and the returned version to ``doc.version``; nothing
        else on *doc* changes.
        """
        path = encode_id(doc.id)
        method = document_method(doc.id)
        options = doc.get_options("add")

        response = self.request(path, method, doc.data, options)

        if (doc.auto_populate or self.auto_populate) and response.is_ok():
            if not doc.has_id() and "_id" in response.data:
                doc.id = response.data["_id"]
            if "_version" in response.data:
                doc.version = response.data["_version"]

        return response

    def add_object(self, obj: Any, doc: Optional[Document] = None) -> Response:
        """Serialize *obj* into *doc* (or a new document) and add it."""
        serializer = self._require_serializer()
        data = serializer.serialize(obj)
        if doc is None:
            doc = Document()
        doc.data = data
        return self.add_document(doc)

    def update_document(self, payload: UpdatePayload) -> Response:
        """Apply a partial :class:`Document` or :class:`Script` update."""
        if not payload.has_id():
            raise ValidationError("Document or Script id is not set")

        return self._index.client.update_document(
            payload.id,
            payload,
            self._index.name,
            self._name,
        )

    def get_document(self, doc_id: str, options: Optional[dict[str, Any]] = None) -> Document:
        """Fetch a document by id.

        Raises :class:`NotFoundError` when the server reports the document
        missing and also when it answers the request with an error status.
        Connection failures are not reclassified.
        """
        path = encode_id(doc_id)
        message = f"doc id {doc_id} not found"

        try:
            response = self.request(path, "GET", None, options)
        except TransportConnectionError:
            raise
        except TransportError as exc:
            logger.warning("Fetching %s/%s failed with %s", self._name, doc_id, exc.status_code)
            raise NotFoundError(message) from exc

        raise_if_missing(response, message)

        return Document(
            id=doc_id,
            data=response.data.get("_source", {}),
            type=self._name,
            index=self._index.name,
            version=response.data.get("_version"),
        )

    def create_document(self, doc_id: str = "", data: Optional[dict[str, Any]] = None) -> Document:
        """Build a document bound to this type without sending it."""
        return Document(
            id=doc_id,
            data=data if data is not None else {},
            type=self._name,
            index=self._index.name,
        )

    def delete_document(self, doc: Document) -> Response:
        return self.delete_by_id(doc.id, doc.get_options("delete"))

    def delete_by_id(self, doc_id: Any, options: Optional[dict[str, Any]] = None) -> Response:
        """Delete one document.

        Raises:
            ArgumentError: *doc_id* is empty or only whitespace.
            NotFoundError: the server answered ``found: false``.
        """
        if doc_id is None or not str(doc_id).strip():
            raise ArgumentError(f"Invalid document id: {doc_id!r}")

        path = encode_id(doc_id)
        response = self.request(path, "DELETE", None, filter_options(options, "delete"))

        return raise_if_absent(
            response,
            "found",
            f"Doc id {doc_id} not found and can not be deleted",
        )

    def delete_ids(self, ids: Iterable[str]) -> tuple[int, list]:
        return self._index.client.delete_ids(ids, self._index, self)

    def delete_by_query(self, query: QueryLike) -> Response:
        query = Query.create(query)
        logger.info("Deleting from %s/%s by query", self._index.name, self._name)
        return self.request("_query", "DELETE", {"query": query.query})

    def delete(self) -> Response:
        """Delete the whole type: its mapping and all of its documents."""
        logger.info("Deleting type %s/%s", self._index.name, self._name)
        return self.request("", "DELETE")

    # ── bulk ───────────────────────────────────────

    def add_documents(self, docs: Sequence[Document]) -> tuple[int, list]:
        """Bulk-index *docs* after stamping each with this type's name."""
        for doc in docs:
            doc.type = self._name
        return self._index.add_documents(docs)

    def add_objects(self, objects: Iterable[Any]) -> tuple[int, list]:
        serializer = self._require_serializer()
        docs = [Document(data=serializer.serialize(obj), type=self._name) for obj in objects]
        return self.add_documents(docs)

    # ── search & mapping ───────────────────────────

    def create_search(self, query: QueryLike = "", options: SearchOptions = None) -> Search:
        search = Search(self._index.client)
        search.add_index(self._index)
        search.add_type(self)
        search.set_options_and_query(options, query)
        return search

    def search(self, query: QueryLike = "", options: SearchOptions = None) -> ResultSet:
        return self.create_search(query, options).search()

    def count(self, query: QueryLike = "") -> int:
        return self.create_search(query).count()

    def more_like_this(
        self,
        doc: Document,
        params: Optional[dict[str, Any]] = None,
        query: QueryLike = None,
    ) -> ResultSet:
        """Find documents similar to *doc*, which must have an id."""
        path = f"{encode_id(doc.id)}/_mlt"
        query = Query.create(query)
        response = self.request(path, "GET", query.to_dict(), params)
        return ResultSet(response, query)

    def set_mapping(self, mapping: Mapping | dict[str, Any]) -> Response:
        mapping = Mapping.create(mapping)
        mapping.set_type(self)
        return mapping.send()

    def get_mapping(self) -> dict[str, Any]:
        return self.request("_mapping", "GET").data

    def request(
        self,
        path: str,
        method: str,
        data: Optional[dict[str, Any]] = None,
        query: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Send a request relative to ``{index}/{type}/``."""
        return self._index.request(build_path(self._name, path), method, data, query)
