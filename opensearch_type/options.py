"""Per-operation whitelists of request options."""

from __future__ import annotations

from typing import Any, Mapping

OPTION_WHITELISTS: dict[str, tuple[str, ...]] = {
    "add": (
        "version",
        "version_type",
        "routing",
        "percolate",
        "parent",
        "ttl",
        "timestamp",
        "op_type",
        "consistency",
        "replication",
        "refresh",
        "timeout",
    ),
    "delete": (
        "version",
        "version_type",
        "routing",
        "parent",
        "replication",
        "consistency",
        "refresh",
        "timeout",
    ),
    "update": (
        "version",
        "version_type",
        "routing",
        "parent",
        "timeout",
        "consistency",
        "replication",
        "refresh",
        "retry_on_conflict",
        "fields",
        "percolate",
    ),
}


def filter_options(options: Mapping[str, Any] | None, operation: str) -> dict[str, Any]:
    """Return only the options *operation* sends downstream.

    Unrecognised keys are dropped; values are passed through untouched.
    Raises ``KeyError`` for an operation with no whitelist.
    """
    whitelist = OPTION_WHITELISTS[operation]
    if not options:
        return {}
    return {key: value for key, value in options.items() if key in whitelist}
