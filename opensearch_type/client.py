"""Client factory and request dispatch for OpenSearch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence

from opensearchpy import OpenSearch, helpers

from .config import ConnectionConfig, load_config
from .document import Document, UpdatePayload
from .paths import encode_id
from .response import Response

if TYPE_CHECKING:
    from .doc_type import DocumentType
    from .index import Index

logger = logging.getLogger(__name__)

# Document options that become bulk action metadata.
_BULK_META_OPTIONS = ("version", "version_type", "routing", "parent")

_BULK_META_FIELDS = ("_index", "_type", "_id") + _BULK_META_OPTIONS


def _expand_typed_action(action: dict[str, Any]) -> tuple[dict[str, Any], Optional[dict[str, Any]]]:
    """Split a bulk action into its metadata line and source.

    Unlike ``helpers.expand_action`` this keeps ``_type`` in the metadata.
    """
    action = dict(action)
    op_type = action.pop("_op_type", "index")
    meta = {key: action.pop(key) for key in _BULK_META_FIELDS if key in action}
    if op_type == "delete":
        return {op_type: meta}, None
    return {op_type: meta}, action.pop("_source", action)


def _escape_params(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Render query-string values the way the server parses them."""
    if not params:
        return None
    escaped: dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(item) for item in value)
        escaped[key] = value
    return escaped


def create_client(
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> Any:
    """Create and return a low-level OpenSearch client.

    Args:
        config: An explicit :class:`ConnectionConfig`.  When ``None``,
            one is built via :func:`load_config` (env vars + *overrides*).
        **overrides: Passed to :func:`load_config` when *config* is ``None``.

    Returns:
        A configured OpenSearch client instance.
    """
    if config is None:
        config = load_config(**overrides)

    kwargs: dict = {
        "hosts": config.hosts,
        "use_ssl": config.use_ssl,
        "verify_certs": config.verify_certs,
        "ssl_show_warn": config.ssl_show_warn,
        "timeout": config.timeout,
        "max_retries": config.max_retries,
        "retry_on_timeout": config.retry_on_timeout,
        "http_compress": config.http_compress,
    }

    http_auth = config.http_auth
    if http_auth:
        kwargs["http_auth"] = http_auth

    if config.ca_certs:
        kwargs["ca_certs"] = config.ca_certs

    return OpenSearch(**kwargs)


class Client:
    """Owns the connection and configuration shared by indices and types.

    Args:
        config: Connection settings; loaded from the environment when omitted.
        connection: A ready low-level client. Built with
            :func:`create_client` when omitted.
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        connection: Any = None,
    ) -> None:
        self.config = config if config is not None else load_config()
        self.connection = connection if connection is not None else create_client(self.config)

    def get_index(self, name: str) -> "Index":
        from .index import Index

        return Index(self, name)

    def request(
        self,
        path: str,
        method: str,
        data: Optional[dict[str, Any]] = None,
        query: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Send one request and wrap the decoded body.

        Non-2xx replies raise opensearch-py's ``TransportError`` subclasses.
        """
        url = "/" + path.lstrip("/")
        logger.debug("%s %s params=%s", method, url, query)
        body = self.connection.transport.perform_request(
            method=method,
            url=url,
            params=_escape_params(query),
            body=data,
        )
        return Response(data=body if isinstance(body, dict) else {})

    def update_document(
        self,
        doc_id: str,
        payload: UpdatePayload,
        index: str,
        type_name: str,
    ) -> Response:
        """Partially update a document through ``_update``."""
        path = f"{index}/{type_name}/{encode_id(doc_id)}/_update"
        return self.request(path, "POST", payload.to_update_body(), payload.get_options("update"))

    def delete_ids(
        self,
        ids: Iterable[str],
        index: "Index | str",
        doc_type: "DocumentType | str",
    ) -> tuple[int, list]:
        """Delete documents by id with one bulk request per chunk."""
        index_name = index if isinstance(index, str) else index.name
        type_name = doc_type if isinstance(doc_type, str) else doc_type.name

        def iter_actions():
            for doc_id in ids:
                yield {
                    "_op_type": "delete",
                    "_index": index_name,
                    "_type": type_name,
                    "_id": doc_id,
                }

        return self._bulk(iter_actions())

    def add_documents(self, docs: Sequence[Document]) -> tuple[int, list]:
        """Index documents in bulk.

        Each document must already carry its ``index`` and ``type``.

        Returns:
            A tuple of ``(success_count, error_list)``.
        """

        def iter_actions():
            for doc in docs:
                action: dict[str, Any] = {
                    "_op_type": "index",
                    "_index": doc.index,
                    "_type": doc.type,
                    "_source": doc.data,
                }
                if doc.has_id():
                    action["_id"] = doc.id
                for key in _BULK_META_OPTIONS:
                    if key in doc.options:
                        action[key] = doc.options[key]
                yield action

        return self._bulk(iter_actions())

    def _bulk(self, actions) -> tuple[int, list]:
        return helpers.bulk(
            self.connection,
            actions,
            chunk_size=self.config.bulk_chunk,
            raise_on_error=False,
            expand_action_callback=_expand_typed_action,
        )
