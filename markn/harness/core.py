"""
Experiment harness core primitives.

- run_case:  play one game (one hidden target) with a given generator,
             scoring every guess honestly against the target.
- run_batch: run many games in sequence (e.g. every valid target).
- guess_distribution / summarize: how many guesses the games needed.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

import numpy as np

from markn.engine import Number, validate_number

# Longest game reported in distributions; the monitors generator needs at
# most this many guesses for any target of the default 10 digit, 4 place game.
MAX_TURNS = 10


def _assert_turns(max_turns: int | None) -> None:
    """Guardrail: a turn cap, when given, must allow at least one guess."""
    if max_turns is not None and max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(generator, target: Number, *, max_turns: int | None = None) -> Dict:
    """
    Play one game until the generator guesses `target` or the turn cap hits.

    Args:
        generator: a BaseGenerator; it is reset() before the game
        target:    the hidden number for this case
        max_turns: optional cap on guesses (None = play until solved)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, score)]), target (Number)

    Raises:
        ValueError:   target is not a valid number for the generator's game
        RuntimeError: the generator found the honest scores inconsistent
    """
    _assert_turns(max_turns)
    if not validate_number(target, generator.config):
        raise ValueError(f"target {target} is not a valid number for {generator.config}")

    generator.reset()
    places = generator.config.places
    history = []

    t0 = time.perf_counter()
    turn = 0
    while max_turns is None or turn < max_turns:
        turn += 1
        guess = generator.next_guess()
        if guess is None:
            raise RuntimeError(
                f"{generator.id} reported inconsistent scores for target {target} "
                f"after {len(history)} rounds")

        s = target.score(guess)
        history.append((guess, s))

        # Win condition: every place matched
        if s.correct(places):
            dt = (time.perf_counter() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "target": target,
            }

        generator.tell_score(s)

    # Out of turns: lose
    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": False, "guesses": turn, "time_ms": dt,
        "history": history, "target": target,
    }


def run_batch(
        generator,
        targets: Iterable[Number],
        *,
        max_turns: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back with one generator (reset between games).
    If 'sample' is provided, only the first K targets are used.
    """
    _assert_turns(max_turns)

    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for t in pool:
        r = run_case(generator, t, max_turns=max_turns)
        r["generator_id"] = generator.id
        out.append(r)
    return out


def guess_distribution(results: List[Dict], max_turns: int = MAX_TURNS) -> np.ndarray:
    """
    counts[k] = number of solved games that took k guesses, for k in 1..max_turns.

    Index 0 is unused so that counts line up with guess counts; games needing
    more than max_turns guesses widen the array rather than being dropped.
    """
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    return np.bincount(solved, minlength=max_turns + 1)


def summarize(results: List[Dict]) -> Dict:
    """Aggregate stats for a batch: games, solved, mean/max guesses, total time."""
    guesses = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)
    return {
        "games": len(results),
        "solved": int(guesses.size),
        "mean_guesses": round(float(guesses.mean()), 4) if guesses.size else 0.0,
        "max_guesses": int(guesses.max()) if guesses.size else 0,
        "total_time_ms": round(float(times.sum()), 3) if times.size else 0.0,
    }


def format_distribution(counts: np.ndarray) -> str:
    """One line per guess count, right justified, e.g. ' 5:  1234'."""
    lines = []
    for k in range(1, len(counts)):
        lines.append(f"{k:2d}: {int(counts[k]):5d}")
    return "\n".join(lines)
