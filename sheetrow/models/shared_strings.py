from __future__ import annotations

"""Minimal shared string table.

Maps each distinct text to a stable 0-based index in first-seen order, which
is what a shared-string cell stores in its <v> element.
"""

__all__ = [
    "SharedStrings",
]


class SharedStrings:
    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._count = 0  # total references, including repeats

    def add(self, text: str) -> int:
        """Register one use of text and return its index."""
        self._count += 1
        idx = self._index.get(text)
        if idx is None:
            idx = len(self._index)
            self._index[text] = idx
        return idx

    @property
    def count(self) -> int:
        return self._count

    @property
    def unique_count(self) -> int:
        return len(self._index)

    def strings(self) -> list[str]:
        return list(self._index)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._index)
