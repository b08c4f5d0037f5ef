"""Domain models for listener bookkeeping and dispatched events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict


class ListenerRecord(BaseModel):
    """One registration inside a type bucket.

    ``dispatch_fn`` is what actually runs on dispatch. It is the handler itself
    unless a wrapper was supplied or synthesised for a once-listener.
    """

    model_config = ConfigDict(frozen=True)

    handler: Callable[..., Any]
    dispatch_fn: Callable[..., Any]
    is_once: bool = False


class Event(BaseModel):
    """Event object handed to every listener.

    Nothing is validated: payload fields become extra attributes as-is, so
    ``event.data`` is the very object that was emitted. Keys that collide with
    BaseModel attributes (``copy``, ``model_fields``) stay reachable through
    ``event["copy"]``.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    type: Any
    target: Any

    @classmethod
    def build(cls, type: Any, target: Any, fields: Mapping[Any, Any] | None = None) -> Event:
        values: dict[str, Any] = {"type": type, "target": target}
        if fields:
            values.update({str(key): value for key, value in fields.items()})
        return cls.model_construct(**values)

    def __getitem__(self, key: str) -> Any:
        fields = {"type": self.type, "target": self.target}
        fields.update(self.__pydantic_extra__ or {})
        return fields[key]
