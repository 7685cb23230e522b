"""Index handle: scopes requests and bulk writes to one index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .document import Document
from .response import Response

if TYPE_CHECKING:
    from .client import Client
    from .doc_type import DocumentType
    from .serializer import SerializerLike

logger = logging.getLogger(__name__)


class Index:
    """A named index on a :class:`Client`. Outlives the types it hands out."""

    def __init__(self, client: "Client", name: str) -> None:
        self.client = client
        self.name = name

    @property
    def auto_populate(self) -> bool:
        return self.client.config.auto_populate

    def get_type(
        self,
        name: str,
        serializer: Optional["SerializerLike"] = None,
    ) -> "DocumentType":
        from .doc_type import DocumentType

        return DocumentType(self, name, serializer=serializer)

    def request(
        self,
        path: str,
        method: str,
        data: Optional[dict[str, Any]] = None,
        query: Optional[dict[str, Any]] = None,
    ) -> Response:
        return self.client.request(f"{self.name}/{path}", method, data, query)

    def add_documents(self, docs: Sequence[Document]) -> tuple[int, list]:
        for doc in docs:
            doc.index = self.name
        return self.client.add_documents(docs)

    def exists(self) -> bool:
        return self.client.connection.indices.exists(index=self.name)

    def create(
        self,
        mappings: Optional[dict[str, Any]] = None,
        settings: Optional[dict[str, Any]] = None,
        shards: int = 1,
        replicas: int = 0,
    ) -> dict:
        """Create the index with optional mappings and settings.

        ``shards`` and ``replicas`` are defaults; they won't overwrite values
        already present in *settings*.
        """
        settings = dict(settings) if settings else {}
        settings.setdefault("number_of_shards", shards)
        settings.setdefault("number_of_replicas", replicas)

        body: dict[str, Any] = {"settings": settings}
        if mappings:
            body["mappings"] = mappings

        logger.info("Creating index %s", self.name)
        return self.client.connection.indices.create(index=self.name, body=body)

    def delete(self) -> dict:
        logger.info("Deleting index %s", self.name)
        return self.client.connection.indices.delete(index=self.name)

    def refresh(self) -> dict:
        return self.client.connection.indices.refresh(index=self.name)
