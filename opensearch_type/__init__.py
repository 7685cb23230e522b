"""Document types on top of OpenSearch / Elasticsearch 7.x indices."""

from .client import Client, create_client
from .config import ConnectionConfig, load_config
from .doc_type import DocumentType
from .document import Document, Script, UpdatePayload
from .exceptions import (
    ArgumentError,
    ConfigurationError,
    NotFoundError,
    OpenSearchTypeError,
    TransportError,
    ValidationError,
)
from .index import Index
from .mapping import Mapping
from .options import OPTION_WHITELISTS, filter_options
from .query import Query
from .response import Response
from .search import ResultSet, Search
from .serializer import CallableSerializer, Serializer

__all__ = [
    # client
    "Client",
    "create_client",
    "Index",
    # config
    "ConnectionConfig",
    "load_config",
    # type & documents
    "DocumentType",
    "Document",
    "Script",
    "UpdatePayload",
    "Serializer",
    "CallableSerializer",
    "OPTION_WHITELISTS",
    "filter_options",
    "Response",
    # search & mapping
    "Query",
    "Search",
    "ResultSet",
    "Mapping",
    # errors
    "OpenSearchTypeError",
    "ConfigurationError",
    "ValidationError",
    "ArgumentError",
    "NotFoundError",
    "TransportError",
]
