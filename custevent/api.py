"""Module-level listener API backed by a process-wide registry."""

from __future__ import annotations

from typing import Any, Callable

from custevent.config import RegistrySettings
from custevent.domain.registry import ListenerRegistry

# ── Singleton (created at import time, configured from the environment) ──
default_registry = ListenerRegistry(settings=RegistrySettings.from_env())


def get_default_registry() -> ListenerRegistry:
    return default_registry


def reset_default_registry() -> None:
    """Forget every listener held by the default registry."""
    default_registry.reset()


def register_listener(
    target: object,
    type: str,
    handler: Callable[..., Any],
    is_once: bool = False,
    wrapper: Callable[..., Any] | None = None,
) -> None:
    default_registry.register(target, type, handler, is_once=is_once, wrapper=wrapper)


def unregister_listener(
    target: object,
    type: str,
    handler: Callable[..., Any] | None = None,
    is_once: bool = False,
) -> Callable[..., Any] | None:
    return default_registry.unregister(target, type, handler, is_once=is_once)


def dispatch_event(target: object, type: str, payload: Any = None) -> None:
    default_registry.dispatch(target, type, payload)
