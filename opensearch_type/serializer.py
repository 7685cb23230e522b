"""Strategies for turning application objects into document data."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class Serializer(Protocol):
    def serialize(self, obj: Any) -> dict[str, Any]: ...


class CallableSerializer:
    """Adapt a plain ``obj -> dict`` function to :class:`Serializer`."""

    def __init__(self, func: Callable[[Any], dict[str, Any]]) -> None:
        self.func = func

    def serialize(self, obj: Any) -> dict[str, Any]:
        return self.func(obj)

    def __repr__(self) -> str:
        return f"CallableSerializer({self.func!r})"


SerializerLike = Union[Serializer, Callable[[Any], dict[str, Any]]]


def as_serializer(value: SerializerLike) -> Serializer:
    if isinstance(value, Serializer):
        return value
    if callable(value):
        return CallableSerializer(value)
    raise TypeError(f"Expected a Serializer or callable, got {type(value).__name__}")
