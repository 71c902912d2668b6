"""Unsaved-edit tracking per (language, key) cell."""

import itertools

Mark = tuple[str, str]
Snapshot = dict[Mark, int]


class DirtyTracker:
    """Records which cells were edited since their last confirmed save.

    Every mark carries a revision number that changes on each edit, so a
    snapshot taken when a save starts can later be cleared without touching
    cells that were edited again while the save was in flight.
    """

    def __init__(self) -> None:
        self._marks: dict[Mark, int] = {}
        self._revisions = itertools.count(1)

    def mark(self, lang: str, key: str) -> None:
        self._marks[(lang, key)] = next(self._revisions)

    def is_dirty(self, lang: str, key: str) -> bool:
        return (lang, key) in self._marks

    def marks(self) -> frozenset[Mark]:
        return frozenset(self._marks)

    @property
    def count(self) -> int:
        return len(self._marks)

    def snapshot(self, key: str | None = None) -> Snapshot:
        """Capture current marks, optionally only those for one key."""
        return {
            mark: revision
            for mark, revision in self._marks.items()
            if key is None or mark[1] == key
        }

    def clear(self, snapshot: Snapshot) -> int:
        """Drop marks still at their snapshotted revision. Returns how many."""
        cleared = 0
        for mark, revision in snapshot.items():
            if self._marks.get(mark) == revision:
                del self._marks[mark]
                cleared += 1
        return cleared

    def discard(self, lang: str, key: str) -> None:
        self._marks.pop((lang, key), None)
