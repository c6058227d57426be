# apps/cli/run_multi.py
"""
Run multiple generators in one shot with shared targets and progress.

Writes per-generator outputs to: <outdir>/<generator_id>/run_<timestamp>.csv + _manifest.json
and prints one summary line per generator.
"""

from __future__ import annotations
import argparse, sys, time
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
from tqdm import tqdm

from markn.engine import GameConfig, Number, number_sequence
from markn.generators import create_generator, get_generator_ids
from markn.harness import run_case, guess_distribution, summarize
from markn.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _pick_targets(config: GameConfig, sample: int | None, seed: int) -> List[Number]:
    targets = list(number_sequence(config))
    if sample and sample < len(targets):
        rng = np.random.default_rng(seed)
        idx = sorted(rng.choice(len(targets), size=sample, replace=False))
        targets = [targets[i] for i in idx]
    return targets


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_generator(generator_id: str, cases: List[Number], *, config: GameConfig,
                       max_turns: int | None, outdir: Path, progress: str) -> Tuple[str, str, Dict]:
    generator = create_generator(generator_id, config)
    results = []
    total = len(cases)
    mode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=f"{generator_id}", unit="game") if mode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, target in enumerate(iterator, 1):
        r = run_case(generator, target, max_turns=max_turns)
        r["generator_id"] = generator.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{generator_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # write outputs under <outdir>/<generator_id>/
    run_id = timestamp_id()
    gdir = outdir / generator_id
    gdir.mkdir(parents=True, exist_ok=True)
    csv_path = gdir / f"run_{run_id}.csv"
    manifest_path = gdir / f"run_{run_id}_manifest.json"

    counts = guess_distribution(results)
    summary = summarize(results)
    write_csv(results, str(csv_path), places=config.places)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"generator": generator_id, "digits": config.digits,
                   "places": config.places, "num_cases": len(cases)},
        "summary": summary,
        "distribution": {str(k): int(counts[k]) for k in range(1, len(counts))},
        "num_cases": len(results),
        "generator_id": generator.id,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main():
    registered = get_generator_ids()
    ap = argparse.ArgumentParser(description="markn — run many generators at once")
    ap.add_argument("--generators", nargs="+", required=True,
                    help=f"list of generator ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="generator ids to skip (only if --generators ALL)")
    ap.add_argument("--digits", type=int, default=10)
    ap.add_argument("--places", type=int, default=4)
    ap.add_argument("--sample", type=int)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--max-turns", type=int, default=None)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    args = ap.parse_args()

    # 1) configuration
    try:
        config = GameConfig(digits=args.digits, places=args.places)
    except ValueError as e:
        raise SystemExit(str(e))

    # 2) shared cases (deterministic by seed)
    cases = _pick_targets(config, args.sample, args.seed)

    # 3) expand generators
    if len(args.generators) == 1 and args.generators[0].lower() == "all":
        todo = [g for g in registered if g not in set(args.exclude)]
    else:
        todo = args.generators
        missing = [g for g in todo if g not in registered]
        if missing:
            raise SystemExit(f"Unknown generator ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 4) run each generator sequentially (shared cases) with progress
    summaries = {}
    for gid in todo:
        if args.progress != "off":
            print(f"\n=== Running {gid} on {len(cases)} cases "
                  f"(digits={config.digits}, places={config.places}) ===")
        csv_path, manifest_path, summary = _run_one_generator(
            generator_id=gid, cases=cases, config=config, max_turns=args.max_turns,
            outdir=outdir, progress=args.progress
        )
        summaries[gid] = summary
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    print()
    for gid, s in summaries.items():
        print(f"{gid:>12}: mean {s['mean_guesses']:.4f}  worst {s['max_guesses']}  "
              f"solved {s['solved']}/{s['games']}  time {s['total_time_ms']:.1f} ms")


if __name__ == "__main__":
    main()
