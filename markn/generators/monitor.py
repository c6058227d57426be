"""
Position monitor: the requirements that apply to one (digit, place) cell.

Each scored round pushes exactly one requirement handle onto every cell, so
a cell's stack doubles as an undo log: retracting a round pops one handle
per cell. The stack has a fixed capacity chosen when the generator is built.
"""

from __future__ import annotations
from typing import List

from .requirements import RequirementStore


class Monitor:
    __slots__ = ("_store", "_handles", "_depth")

    def __init__(self, store: RequirementStore, capacity: int):
        self._store = store
        self._handles: List[int] = [0] * capacity
        self._depth = 0

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def capacity(self) -> int:
        return len(self._handles)

    def add_requirement(self, handle: int) -> None:
        if self._depth == len(self._handles):
            raise OverflowError(f"monitor is full ({len(self._handles)} rounds)")
        self._handles[self._depth] = handle
        self._depth += 1

    def remove_requirement(self) -> bool:
        """Drop the most recent requirement; True if none are left."""
        if self._depth > 0:
            self._depth -= 1
        return self._depth == 0

    def pick(self, digit: int, left: int) -> bool:
        """
        Pick `digit` here if every requirement approves.

        All-or-nothing: nothing is changed unless all of them say ok.
        """
        store, handles = self._store, self._handles
        for i in range(self._depth):
            if not store[handles[i]].ok(digit, left):
                return False
        for i in range(self._depth):
            store[handles[i]].pick(digit)
        return True

    def unpick(self, digit: int) -> None:
        """Undo a successful pick()."""
        store, handles = self._store, self._handles
        for i in range(self._depth):
            store[handles[i]].unpick(digit)
