# apps/cli/run.py
"""
CLI entry point for running markn generator experiments.

This script:
  1) Builds the game configuration (digits, places) and the requested generator.
  2) Picks the targets: every valid number, or a seeded sample of them.
  3) Plays every target with a live progress indicator, prints the guess
     count distribution and writes:
       - CSV:  per-case results + guess/score history columns
       - JSON: manifest with config, summary, distribution, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List

import numpy as np
from tqdm import tqdm

from markn.engine import GameConfig, Number, number_sequence
from markn.generators import create_generator, get_generator_ids
from markn.harness import run_case, guess_distribution, summarize, format_distribution
from markn.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _pick_targets(config: GameConfig, sample: int | None, seed: int) -> List[Number]:
    """All valid numbers, or a deterministic sample (by seed) without replacement."""
    targets = list(number_sequence(config))
    if sample and sample < len(targets):
        rng = np.random.default_rng(seed)
        idx = sorted(rng.choice(len(targets), size=sample, replace=False))
        targets = [targets[i] for i in idx]
    return targets


def main():
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    # Build help text showing currently registered generator IDs
    generator_choices = ", ".join(get_generator_ids())

    ap = argparse.ArgumentParser(description="markn — run guess generator experiments")
    ap.add_argument("--generator", default="monitors",
                    help=f"generator id (one of: {generator_choices})")
    ap.add_argument("--digits", type=int, default=10, help="size of the digit alphabet")
    ap.add_argument("--places", type=int, default=4, help="places in a number (the N)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=None,
                    help="give up a game after this many guesses (default: never)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Configuration and generator
    try:
        config = GameConfig(digits=args.digits, places=args.places)
        generator = create_generator(args.generator, config)
    except ValueError as e:
        raise SystemExit(str(e))
    print(f"places = {config.places}, digits = {config.digits}, generator = {generator.id}")

    # 2) Choose cases
    cases = _pick_targets(config, args.sample, args.seed)
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, target in enumerate(iterator, 1):
        r = run_case(generator, target, max_turns=args.max_turns)
        r["generator_id"] = generator.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Report the distribution
    counts = guess_distribution(results)
    summary = summarize(results)
    print(format_distribution(counts))
    print(f"mean guesses = {summary['mean_guesses']}, worst = {summary['max_guesses']}, "
          f"solved = {summary['solved']}/{summary['games']}")

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), places=config.places)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "summary": summary,
        "distribution": {str(k): int(counts[k]) for k in range(1, len(counts))},
        "num_cases": len(results),
        "generator_id": generator.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
