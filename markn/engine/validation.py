"""
Input validation at the player boundary.

Generators assume their input is sane: a score whose counters break the
score arithmetic turns into garbage requirements rather than an error. This
module answers "is this acceptable right now?" before anything reaches a
generator:
  - a number must have exactly `places` digits, each within the alphabet,
    with no digit repeated
  - a score must satisfy Score.valid for the configured number of places
"""

from __future__ import annotations

from .config import GameConfig, DEFAULT_CONFIG
from .numbers import Number
from .scoring import Score


def validate_number(number: Number, config: GameConfig = DEFAULT_CONFIG) -> bool:
    if not isinstance(number, Number):
        return False
    if number.places != config.places or not number.complete():
        return False
    if any(not (0 <= d < config.digits) for d in number):
        return False
    return number.valid()


def validate_score(score: Score, config: GameConfig = DEFAULT_CONFIG) -> bool:
    if not isinstance(score, Score):
        return False
    return score.valid(config.places)
