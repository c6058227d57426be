from __future__ import annotations
from typing import List

from markn.engine import GameConfig, DEFAULT_CONFIG
from .base import BaseGenerator, GeneratorState, InvariantError, REGISTRY, register

from . import monitors  # noqa: F401
from . import brute_force  # noqa: F401

from .monitors import MonitorsGenerator
from .brute_force import BruteForceGenerator

__all__ = [
    "BaseGenerator", "GeneratorState", "InvariantError", "REGISTRY", "register",
    "MonitorsGenerator", "BruteForceGenerator", "create_generator", "get_generator_ids",
]


def create_generator(generator_id: str, config: GameConfig = DEFAULT_CONFIG) -> BaseGenerator:
    """
    Factory: instantiate a registered generator by id.
    """
    try:
        cls = REGISTRY[generator_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown generator id: {generator_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config)


def get_generator_ids() -> List[str]:
    """
    Return all registered generator ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
