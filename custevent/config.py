"""Runtime settings for listener registries."""

from __future__ import annotations

import os

from pydantic import BaseModel

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


class RegistrySettings(BaseModel):
    """Behaviour switches for a ListenerRegistry.

    ``isolate_errors`` keeps dispatching after a listener raises, logging the
    failure instead of propagating it. ``log_dispatch`` emits a DEBUG record
    for every dispatch.
    """

    isolate_errors: bool = False
    log_dispatch: bool = False

    @classmethod
    def from_env(cls) -> RegistrySettings:
        return cls(
            isolate_errors=_env_flag("CUSTEVENT_ISOLATE_ERRORS"),
            log_dispatch=_env_flag("CUSTEVENT_LOG_DISPATCH"),
        )
