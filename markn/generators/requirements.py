"""
Requirements and the per-generator requirement store.

A Requirement says: from this set of digits, exactly `needs` more must be
placed in the guess being assembled. One scored round produces three of
them, and each is consulted from many (digit, place) monitor cells. Cells
hold integer handles into a RequirementStore rather than the objects
themselves; a pick through any handle is visible through all the others.

Availability sets are plain lists of booleans indexed by digit. The
"placed" and "misplaced" requirements of a round share one list (the digits
in the guess), so picking a digit through either one removes it from both.
"""

from __future__ import annotations
from typing import List


class Requirement:
    __slots__ = ("available", "needs")

    def __init__(self, available: List[bool], needs: int):
        self.available = available  # digit -> still pickable from this set
        self.needs = needs          # digits still needed from this set

    def ok(self, digit: int, left: int) -> bool:
        """
        Can `digit` be picked with `left` places still open (this one included)?

        It must be in the set, at least one digit must still be needed, and
        no more must be needed than there are places left.
        """
        return self.available[digit] and 1 <= self.needs <= left

    def pick(self, digit: int) -> None:
        self.available[digit] = False
        self.needs -= 1

    def unpick(self, digit: int) -> None:
        self.available[digit] = True
        self.needs += 1

    def __repr__(self) -> str:
        ds = "".join(str(d) for d, a in enumerate(self.available) if a)
        return f"Requirement([{ds}], {self.needs})"


class RequirementStore:
    """Owns every Requirement of one generator; hands out integer handles."""

    def __init__(self):
        self._items: List[Requirement] = []

    def add(self, available: List[bool], needs: int) -> int:
        self._items.append(Requirement(available, needs))
        return len(self._items) - 1

    def pop(self, count: int = 1) -> None:
        """Forget the `count` most recently added requirements."""
        if count > len(self._items):
            raise IndexError(f"cannot pop {count} requirements from a store of {len(self._items)}")
        del self._items[len(self._items) - count:]

    def __getitem__(self, handle: int) -> Requirement:
        return self._items[handle]

    def __len__(self) -> int:
        return len(self._items)
