from .config import GameConfig, DEFAULT_CONFIG
from .scoring import Score, score
from .numbers import Number
from .sequence import number_sequence, sequence_length
from .constraints import filter_candidates, is_consistent
from .validation import validate_number, validate_score
from .scrambler import NumberScrambler, IdentityScrambler

__all__ = [
    "GameConfig", "DEFAULT_CONFIG", "Score", "score", "Number",
    "number_sequence", "sequence_length", "filter_candidates", "is_consistent",
    "validate_number", "validate_score", "NumberScrambler", "IdentityScrambler",
]
