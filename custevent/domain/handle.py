"""EventHandle: on/once/off/emit bound to a single target."""

from __future__ import annotations

from typing import Any, Callable

from custevent.api import get_default_registry
from custevent.domain.errors import InvalidTargetError
from custevent.domain.registry import ListenerRegistry
from custevent.services.predicates import is_primitive

_ASSIGNED_METHODS = ("on", "once", "off", "emit")


class EventHandle:
    """Chainable event API for one target.

    Without a target the handle is its own event bus. With ``assign=True`` the
    target gains ``on``, ``once``, ``off`` and ``emit`` attributes that act on
    this handle's target. Handles over the same target share listeners as long
    as they use the same registry.
    """

    def __init__(
        self,
        target: object | None = None,
        assign: bool = False,
        *,
        registry: ListenerRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else get_default_registry()
        self._target: object = self

        if target is None:
            return
        if is_primitive(target):
            raise InvalidTargetError(target)
        self._target = target

        if assign:
            self._assign_methods(target)

    def _assign_methods(self, target: object) -> None:
        """Set on/once/off/emit on ``target``, all or none."""
        assigned: list[str] = []
        for name in _ASSIGNED_METHODS:
            try:
                setattr(target, name, getattr(self, name))
            except (AttributeError, TypeError) as exc:
                for done in assigned:
                    delattr(target, done)
                raise InvalidTargetError(
                    target, f"can not assign '{name}' to target"
                ) from exc
            assigned.append(name)

    @property
    def target(self) -> object:
        return self._target

    @property
    def registry(self) -> ListenerRegistry:
        return self._registry

    def on(self, type: str, handler: Callable[..., Any], is_once: bool = False) -> EventHandle:
        self._registry.register(self._target, type, handler, is_once=is_once)
        return self

    def once(self, type: str, handler: Callable[..., Any]) -> EventHandle:
        return self.on(type, handler, True)

    def off(
        self,
        type: str,
        handler: Callable[..., Any] | None = None,
        is_once: bool = False,
    ) -> EventHandle:
        """Remove ``handler`` for ``type``, or every listener when omitted."""
        self._registry.unregister(self._target, type, handler, is_once=is_once)
        return self

    def emit(self, type: str, data: Any = None) -> EventHandle:
        """Dispatch ``type``; ``data`` always arrives as ``event.data``."""
        self._registry.dispatch(self._target, type, {"data": data})
        return self
