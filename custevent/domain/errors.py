"""Exceptions raised by the custom-event package."""

from __future__ import annotations


class CustEventError(Exception):
    """Base class for every error raised by this package."""


class InvalidTargetError(CustEventError, TypeError):
    """Raised when an EventHandle is given a target that can not own events."""

    def __init__(self, target: object, reason: str = "target is not an object") -> None:
        self.target = target
        super().__init__(f"{reason}: {target!r}")
