import csv
import json
from pathlib import Path

import pytest
from markn.engine import GameConfig, Number, number_sequence
from markn.generators import create_generator
from markn.harness import (
    run_case, run_batch, guess_distribution, summarize, format_distribution,
    write_csv, write_manifest,
)


def test_run_case_smoke():
    gen = create_generator("monitors")
    r = run_case(gen, Number.parse("4567"))
    assert r["success"] is True
    assert r["guesses"] == 2
    assert [str(g) for g, _ in r["history"]] == ["0123", "4567"]
    assert str(r["history"][0][1]) == "0 0"


def test_run_case_turn_cap():
    gen = create_generator("monitors")
    r = run_case(gen, Number.parse("9876"), max_turns=1)
    assert r["success"] is False and r["guesses"] == 1
    with pytest.raises(ValueError):
        run_case(gen, Number.parse("9876"), max_turns=0)


def test_run_case_rejects_invalid_target():
    with pytest.raises(ValueError):
        run_case(create_generator("monitors"), Number.parse("1123"))


def test_run_batch_and_distribution():
    gen = create_generator("monitors")
    results = run_batch(gen, number_sequence(), sample=30)
    assert len(results) == 30
    assert all(r["success"] for r in results)
    assert all(r["generator_id"] == "monitors" for r in results)

    counts = guess_distribution(results)
    assert counts.sum() == 30
    assert counts[1] == 1          # only 0123 is guessed at once
    s = summarize(results)
    assert s["games"] == 30 and s["solved"] == 30
    assert 1 <= s["mean_guesses"] <= s["max_guesses"] <= 10
    assert format_distribution(counts).splitlines()[0] == " 1:     1"


def test_small_config_batch():
    cfg = GameConfig(digits=6, places=2)
    results = run_batch(create_generator("brute_force", cfg), number_sequence(cfg))
    assert len(results) == 30 and all(r["success"] for r in results)


def test_write_csv_and_manifest(tmp_path: Path):
    gen = create_generator("monitors")
    results = run_batch(gen, [Number.parse("0123"), Number.parse("1234")])
    out = write_csv(results, str(tmp_path / "out" / "run.csv"), places=4)

    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["target"] == "'0123" and rows[0]["guesses"] == "1"
    assert rows[1]["guess_1"] == "'0123" and rows[1]["score_1"] == "0 3"
    assert rows[0]["guess_2"] == ""

    mpath = write_manifest({"run_id": "x", "summary": summarize(results)},
                           str(tmp_path / "m.json"))
    data = json.loads(Path(mpath).read_text(encoding="utf-8"))
    assert data["summary"]["games"] == 2
