"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Numbers are prefixed with an apostrophe so spreadsheet apps keep leading
  zeros ("0123" would otherwise display as 123).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_number(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "0123" -> "'0123"
    """
    return "'" + text if text else text


def write_csv(results: List[Dict], path: str, places: int, max_turns: int | None = None) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      generator, places, target, success, guesses, time_ms,
      guess_1, score_1, guess_2, score_2, ..., guess_T, score_T

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.
      places   : number of places in the game.
      max_turns: number of guess/score column pairs (default: longest game).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["generator", "places", "target", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"score_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "generator": r.get("generator_id", "?"),
                "places": places,
                "target": _excel_safe_number(str(r["target"])),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, s = hist[i - 1]
                    row[f"guess_{i}"] = _excel_safe_number(str(g))
                    row[f"score_{i}"] = str(s)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"score_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (generator, digits, places, seed, sample, outdir)
      - summary: output of harness.summarize(...)
      - distribution: guess count histogram
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
