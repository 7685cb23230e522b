"""Connection settings for OpenSearch/Elasticsearch 7.x clusters.

  - Separate host / port (not combined URL)
  - opensearch-py is used as the client library for OpenSearch

All settings can be overridden via environment variables or by passing
values directly to ``ConnectionConfig``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class ConnectionConfig:
    """Connection and document defaults for a cluster.

    ``auto_populate`` is the client-wide default for writing server-assigned
    ids and versions back into added documents. Types capture it when they
    are created.
    """

    host: str = "localhost"
    port: int = 9200
    user: str = "admin"
    password: str = "admin"
    use_ssl: bool = True
    verify_certs: bool = False
    ssl_show_warn: bool = False
    ca_certs: Optional[str] = None
    bulk_chunk: int = 500
    timeout: int = 30
    max_retries: int = 3
    retry_on_timeout: bool = True
    http_compress: bool = True
    auto_populate: bool = False

    @property
    def http_auth(self) -> Optional[tuple[str, str]]:
        if self.user and self.password:
            return (self.user, self.password)
        return None

    @property
    def hosts(self) -> list[dict]:
        """Return hosts list in the format expected by opensearch-py."""
        scheme = "https" if self.use_ssl else "http"
        return [{"host": self.host, "port": self.port, "scheme": scheme}]


_STR_ENV = {
    "host": "OPENSEARCH_HOST",
    "user": "OPENSEARCH_USER",
    "password": "OPENSEARCH_PASSWORD",
    "ca_certs": "OPENSEARCH_CA_CERTS",
}

_INT_ENV = {
    "port": "OPENSEARCH_PORT",
    "bulk_chunk": "OPENSEARCH_BULK_CHUNK",
    "timeout": "OPENSEARCH_TIMEOUT",
    "max_retries": "OPENSEARCH_MAX_RETRIES",
}

_BOOL_ENV = {
    "use_ssl": "OPENSEARCH_USE_SSL",
    "verify_certs": "OPENSEARCH_VERIFY_CERTS",
    "retry_on_timeout": "OPENSEARCH_RETRY_ON_TIMEOUT",
    "http_compress": "OPENSEARCH_HTTP_COMPRESS",
    "auto_populate": "OPENSEARCH_AUTO_POPULATE",
}


def load_config(**overrides) -> ConnectionConfig:
    """Build a ConnectionConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables (``OPENSEARCH_HOST``, etc.)
      3. Explicit keyword arguments

    Supported env vars:
      - OPENSEARCH_HOST / OPENSEARCH_PORT
      - OPENSEARCH_USER / OPENSEARCH_PASSWORD
      - OPENSEARCH_USE_SSL  ("true"/"false")
      - OPENSEARCH_VERIFY_CERTS  ("true"/"false")
      - OPENSEARCH_CA_CERTS
      - OPENSEARCH_BULK_CHUNK
      - OPENSEARCH_TIMEOUT
      - OPENSEARCH_MAX_RETRIES
      - OPENSEARCH_RETRY_ON_TIMEOUT ("true"/"false")
      - OPENSEARCH_HTTP_COMPRESS ("true"/"false")
      - OPENSEARCH_AUTO_POPULATE ("true"/"false")
    """
    cfg = ConnectionConfig()

    # Env-var layer
    for attr, env in _STR_ENV.items():
        value = os.getenv(env)
        if value:
            setattr(cfg, attr, value)

    for attr, env in _INT_ENV.items():
        value = os.getenv(env)
        if value:
            setattr(cfg, attr, int(value))

    for attr, env in _BOOL_ENV.items():
        value = os.getenv(env)
        if value is not None:
            setattr(cfg, attr, _parse_bool(value))

    # Explicit overrides layer
    for key, value in overrides.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    return cfg
