from .core import run_case, run_batch, guess_distribution, summarize, format_distribution
from .io import write_csv, write_manifest
from .session import GameSession, SecretSession

__all__ = [
    "run_case", "run_batch", "guess_distribution", "summarize", "format_distribution",
    "write_csv", "write_manifest", "GameSession", "SecretSession",
]
