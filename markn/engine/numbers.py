"""
N digit numbers.

A Number is an ordered sequence of `places` digits drawn from
0..digits-1. It is valid iff no digit repeats. Places that have not been
set yet hold None (a number under construction during a search).
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence

from .config import GameConfig, DEFAULT_CONFIG
from .scoring import Score, score as score_fn


class Number:
    def __init__(self, places: int = DEFAULT_CONFIG.places,
                 digits: Iterable[int] | None = None):
        self._digit: List[Optional[int]] = [None] * places
        if digits is not None:
            ds = list(digits)
            if len(ds) != places:
                raise ValueError(f"expected {places} digits; got {len(ds)}")
            self._digit = ds

    @classmethod
    def of(cls, digits: Sequence[int]) -> "Number":
        """Build a number directly from a digit sequence, e.g. Number.of([0, 1, 2, 3])."""
        return cls(len(digits), digits)

    @classmethod
    def parse(cls, text: str, config: GameConfig = DEFAULT_CONFIG) -> "Number":
        """
        Parse "0123" (whitespace ignored) into a Number.

        Raises ValueError when the text is not exactly `config.places`
        decimal digits. Repeated digits are NOT rejected here; use valid().
        """
        t = "".join(text.split())
        if len(t) != config.places or not t.isdigit():
            raise ValueError(f"number must be {config.places} digits; got {text!r}")
        return cls(config.places, (int(ch) for ch in t))

    @classmethod
    def random(cls, config: GameConfig = DEFAULT_CONFIG,
               rng: random.Random | None = None) -> "Number":
        """A random valid number: `places` distinct digits dealt without replacement."""
        rng = rng or random.Random()
        return cls(config.places, rng.sample(range(config.digits), config.places))

    @property
    def places(self) -> int:
        return len(self._digit)

    @property
    def digits(self) -> tuple:
        return tuple(self._digit)

    def set_digit(self, digit: int, place: int) -> None:
        self._digit[place] = digit

    def get_digit(self, place: int) -> Optional[int]:
        return self._digit[place]

    def complete(self) -> bool:
        return all(d is not None for d in self._digit)

    def valid(self) -> bool:
        """No two places hold the same digit."""
        seen = set()
        for d in self._digit:
            if d in seen:
                return False
            seen.add(d)
        return True

    def score(self, guess: "Number") -> Score:
        """Score `guess` with this number as the target."""
        return score_fn(self._digit, guess._digit)

    def copy(self) -> "Number":
        return Number(self.places, self._digit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._digit == other._digit

    def __hash__(self) -> int:
        return hash(tuple(self._digit))

    def __iter__(self):
        return iter(self._digit)

    def __len__(self) -> int:
        return len(self._digit)

    def __str__(self) -> str:
        return "".join("?" if d is None else str(d) for d in self._digit)

    def __repr__(self) -> str:
        return f"Number({str(self)!r})"
