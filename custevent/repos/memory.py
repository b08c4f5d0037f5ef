"""In-memory stores for target identities and listener buckets."""

from __future__ import annotations

from custevent.domain.models import ListenerRecord


class IdentityRepository:
    """Side table assigning monotonically increasing ids to targets.

    Targets are kept alive by the table, so ``id()`` values are never recycled
    and an identity always names the same object for the life of the process.
    """

    def __init__(self) -> None:
        self._store: dict[int, tuple[object, int]] = {}
        self._count = 0

    def get(self, target: object) -> int | None:
        entry = self._store.get(id(target))
        return entry[1] if entry is not None else None

    def get_or_assign(self, target: object) -> int:
        ident = self.get(target)
        if ident is None:
            self._count += 1
            ident = self._count
            self._store[id(target)] = (target, ident)
        return ident

    def clear(self) -> None:
        """Forget every target; the counter keeps running."""
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


class ListenerCacheRepository:
    """Dict-backed store of type buckets, keyed by ``"<targetId>_<type>"``."""

    def __init__(self) -> None:
        self._store: dict[str, list[ListenerRecord]] = {}

    @staticmethod
    def key(ident: int, type: str) -> str:
        return f"{ident}_{type}"

    def get_or_create(self, ident: int, type: str) -> list[ListenerRecord]:
        return self._store.setdefault(self.key(ident, type), [])

    def keys(self) -> list[str]:
        return list(self._store)

    def clear(self) -> None:
        self._store.clear()
