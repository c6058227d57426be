"""
The complete sequence of valid numbers for a configuration.

Order is lexicographic with place 0 most significant, so the first number
is the canonical 0,1,2,...,places-1 and the last uses the highest digits in
descending order. For the default game (10 digits, 4 places) the sequence
has 10*9*8*7 = 5040 numbers.
"""

from __future__ import annotations

from itertools import permutations
from math import perm
from typing import Iterator

from .config import GameConfig, DEFAULT_CONFIG
from .numbers import Number


def number_sequence(config: GameConfig = DEFAULT_CONFIG) -> Iterator[Number]:
    """Yield every valid number of the configuration, in order."""
    for digits in permutations(range(config.digits), config.places):
        yield Number(config.places, digits)


def sequence_length(config: GameConfig = DEFAULT_CONFIG) -> int:
    return perm(config.digits, config.places)
