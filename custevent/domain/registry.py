"""Process-wide listener registry: register, unregister and dispatch."""

from __future__ import annotations

import logging
from types import MethodType
from typing import Any, Callable

from custevent.config import RegistrySettings
from custevent.domain.models import Event, ListenerRecord
from custevent.repos.memory import IdentityRepository, ListenerCacheRepository
from custevent.services.predicates import is_callable, is_plain_mapping

logger = logging.getLogger(__name__)


def _same_handler(stored: Callable[..., Any], handler: Callable[..., Any]) -> bool:
    """Identity match; bound methods match when they bind the same function and object."""
    if isinstance(stored, MethodType) and isinstance(handler, MethodType):
        return stored == handler
    return stored is handler


class ListenerRegistry:
    """Keeps ordered listener buckets per (target, event type).

    Listeners run synchronously in registration order. Dispatch walks the live
    bucket, so listeners removed mid-dispatch by an earlier listener do not run.
    """

    def __init__(
        self,
        settings: RegistrySettings | None = None,
        identities: IdentityRepository | None = None,
        cache: ListenerCacheRepository | None = None,
    ) -> None:
        self.settings = settings if settings is not None else RegistrySettings()
        self.identities = identities if identities is not None else IdentityRepository()
        self.cache = cache if cache is not None else ListenerCacheRepository()

    # ------------------------------------------------------------------
    # Buckets
    # ------------------------------------------------------------------

    def identify(self, target: object) -> int:
        return self.identities.get_or_assign(target)

    def bucket(self, target: object, type: str) -> list[ListenerRecord]:
        """Return the live bucket for ``(target, type)``, creating it if needed."""
        return self.cache.get_or_create(self.identify(target), type)

    def reset(self) -> None:
        """Drop every bucket and identity assignment (useful in tests)."""
        self.cache.clear()
        self.identities.clear()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def register(
        self,
        target: object,
        type: str,
        handler: Callable[..., Any],
        is_once: bool = False,
        wrapper: Callable[..., Any] | None = None,
    ) -> None:
        """Append a listener for ``type`` on ``target``.

        Args:
            target: Object owning the event.
            type: Event type name.
            handler: Callable receiving the Event.
            is_once: Remove the listener before its first invocation.
            wrapper: Callable to run instead of ``handler``. When given, no
                automatic removal is synthesised even if ``is_once`` is set.
        """
        if not is_callable(handler):
            raise TypeError(f"listener for '{type}' is not callable: {handler!r}")

        dispatch_fn = wrapper
        if is_once and dispatch_fn is None:
            dispatch_fn = self._once_wrapper(target, type, handler)

        record = ListenerRecord(
            handler=handler,
            dispatch_fn=dispatch_fn if dispatch_fn is not None else handler,
            is_once=bool(is_once),
        )
        bucket = self.bucket(target, type)
        bucket.append(record)
        logger.debug(
            "Registered %s for '%s' on target #%d (once=%s, %d in bucket)",
            handler,
            type,
            self.identify(target),
            record.is_once,
            len(bucket),
        )

    def _once_wrapper(
        self, target: object, type: str, handler: Callable[..., Any]
    ) -> Callable[[Event], Any]:
        def run_once(event: Event) -> Any:
            # Deregister first so a re-entrant dispatch can not run it again.
            self.unregister(target, type, handler, is_once=True)
            return handler(event)

        return run_once

    def unregister(
        self,
        target: object,
        type: str,
        handler: Callable[..., Any] | None = None,
        is_once: bool = False,
    ) -> Callable[..., Any] | None:
        """Remove listeners for ``type`` on ``target``.

        With ``handler`` or ``is_once`` the first matching record is removed and
        its dispatch function returned. Without either the whole bucket is
        cleared. Returns None when nothing was removed or the bucket was cleared.
        """
        bucket = self.bucket(target, type)

        if handler is None and not is_once:
            del bucket[:]
            logger.debug("Cleared '%s' on target #%d", type, self.identify(target))
            return None

        for index, record in enumerate(bucket):
            if (handler is None or _same_handler(record.handler, handler)) and (
                not is_once or record.is_once
            ):
                del bucket[index]
                logger.debug(
                    "Unregistered %s for '%s' on target #%d",
                    record.handler,
                    type,
                    self.identify(target),
                )
                return record.dispatch_fn
        return None

    def dispatch(self, target: object, type: str, payload: Any = None) -> None:
        """Call every listener for ``type`` on ``target`` with a fresh Event.

        A plain-mapping payload is merged into the event; any other value is
        attached as ``event.data``.
        """
        if payload is None:
            event = Event.build(type, target)
        elif is_plain_mapping(payload):
            event = Event.build(type, target, payload)
        else:
            event = Event.build(type, target, {"data": payload})

        bucket = self.bucket(target, type)
        length = len(bucket)
        if self.settings.log_dispatch:
            logger.debug(
                "Dispatching '%s' on target #%d to %d listeners",
                type,
                self.identify(target),
                length,
            )

        # Index walk over the live list: records appended during dispatch are
        # not visited, removals shift later records forward.
        for index in range(length):
            if index >= len(bucket):
                break
            record = bucket[index]
            if not self.settings.isolate_errors:
                record.dispatch_fn(event)
                continue
            try:
                record.dispatch_fn(event)
            except Exception:
                logger.exception(
                    "Listener %s failed for '%s' on target #%d",
                    record.handler,
                    type,
                    self.identify(target),
                )
