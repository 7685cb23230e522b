"""Type mappings."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from .response import Response

if TYPE_CHECKING:
    from .doc_type import DocumentType

logger = logging.getLogger(__name__)


class Mapping:
    """Field properties plus type-level params (``_source``, ``_routing`` ...)."""

    def __init__(
        self,
        doc_type: Optional["DocumentType"] = None,
        properties: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> None:
        self.type = doc_type
        self.properties: dict[str, Any] = copy.deepcopy(properties) if properties else {}
        self.params: dict[str, Any] = dict(params) if params else {}

    @classmethod
    def create(cls, value: Union["Mapping", dict[str, Any]]) -> "Mapping":
        """Accept a Mapping or a plain properties dict.

        A dict holding a ``properties`` key is split into properties and
        params; any other dict is treated as the properties themselves.
        """
        if isinstance(value, Mapping):
            return value
        if not isinstance(value, dict):
            raise TypeError(f"Unsupported mapping type: {type(value).__name__}")
        if "properties" in value:
            params = {k: v for k, v in value.items() if k != "properties"}
            return cls(properties=value["properties"], params=params)
        return cls(properties=value)

    def set_type(self, doc_type: "DocumentType") -> "Mapping":
        self.type = doc_type
        return self

    def set_param(self, key: str, value: Any) -> "Mapping":
        self.params[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        if self.type is None:
            raise ValueError("Mapping has no type; call set_type() first")
        body: dict[str, Any] = {"properties": copy.deepcopy(self.properties)}
        body.update(self.params)
        return {self.type.name: body}

    def send(self) -> Response:
        """PUT this mapping to ``{type}/_mapping``."""
        body = self.to_dict()
        logger.info("Putting mapping for type %s", self.type.name)
        return self.type.request("_mapping", "PUT", body)
