import random

import pytest
from markn.engine import GameConfig, Number, Score, number_sequence, is_consistent
from markn.generators import (
    create_generator, get_generator_ids, GeneratorState,
    MonitorsGenerator, BruteForceGenerator,
)
from markn.harness import run_case

GENERATORS = ["monitors", "brute_force"]


def N(text):
    return Number.parse(text)


def _depths(gen: MonitorsGenerator):
    return [m.depth for row in gen.monitor for m in row]


def test_registry():
    assert {"monitors", "brute_force"} <= set(get_generator_ids())
    assert isinstance(create_generator("monitors"), MonitorsGenerator)
    assert isinstance(create_generator("brute_force"), BruteForceGenerator)
    with pytest.raises(ValueError):
        create_generator("nope")


@pytest.mark.parametrize("gid", GENERATORS)
def test_canonical_first_guess(gid):
    gen = create_generator(gid)
    assert str(gen.next_guess()) == "0123"
    assert gen.state is GeneratorState.UNSCORED
    # asking again without a score gives the same guess
    assert str(gen.next_guess()) == "0123"


def test_canonical_first_guess_other_shapes():
    gen = MonitorsGenerator(GameConfig(digits=8, places=6))
    assert str(gen.next_guess()) == "012345"


@pytest.mark.parametrize("gid", GENERATORS)
def test_known_second_guess(gid):
    # 0123 scored against 1234 -> 0 placed, 3 misplaced; the smallest number
    # using three of 0..3 in new places plus one outside digit is 1034
    gen = create_generator(gid)
    gen.next_guess()
    gen.tell_score(Score(0, 3))
    assert str(gen.next_guess()) == "1034"
    assert gen.state is GeneratorState.SCORED


@pytest.mark.parametrize("gid", GENERATORS)
def test_contradiction_detected_and_retracted(gid):
    gen = create_generator(gid)
    gen.next_guess()
    gen.tell_score(Score(4, 0))                 # 0123 is a perfect match...
    gen.tell_score(Score(1, 0), N("4567"))      # ...yet one of 4..7 is placed
    assert gen.next_guess() is None
    assert gen.state is GeneratorState.EXHAUSTED

    gen.retract_score()
    assert gen.rounds == 1
    assert str(gen.next_guess()) == "0123"


@pytest.mark.parametrize("gid", GENERATORS)
def test_absent_digits_exhaust_alphabet(gid):
    gen = create_generator(gid)
    gen.next_guess()
    gen.tell_score(Score(0, 0))
    assert str(gen.next_guess()) == "4567"
    gen.tell_score(Score(0, 0))
    # only 8 and 9 remain for four places
    assert gen.next_guess() is None
    assert str(gen.last_guess) == "4567"


@pytest.mark.parametrize("gid", GENERATORS)
def test_next_guess_is_deterministic(gid):
    gen = create_generator(gid)
    gen.next_guess()
    gen.tell_score(Score(1, 1))
    first = gen.next_guess()
    assert gen.next_guess() == first == gen.next_guess()


@pytest.mark.parametrize("gid", GENERATORS)
def test_retract_without_history_is_noop(gid):
    gen = create_generator(gid)
    gen.retract_score()
    assert gen.state is GeneratorState.UNSCORED
    assert str(gen.next_guess()) == "0123"


def test_tell_score_needs_a_valid_guess():
    gen = MonitorsGenerator()
    with pytest.raises(ValueError):
        gen.tell_score(Score(0, 0))
    with pytest.raises(ValueError):
        gen.tell_score(Score(0, 0), N("0012"))
    assert gen.rounds == 0 and set(_depths(gen)) == {0}


def test_max_rounds_overflow():
    gen = MonitorsGenerator(max_rounds=1)
    gen.next_guess()
    gen.tell_score(Score(0, 0))
    with pytest.raises(OverflowError):
        gen.tell_score(Score(0, 0))
    assert set(_depths(gen)) == {1}


def test_tell_then_retract_restores_monitors_and_guess():
    rng = random.Random(5)
    target = N("7395")
    gen = MonitorsGenerator()
    for _ in range(3):
        guess = gen.next_guess()
        if target.score(guess).correct(4):
            break
        before = gen.next_guess()
        depths = _depths(gen)
        rounds = gen.rounds

        probe = Number.random(rng=rng)
        gen.tell_score(Score(rng.randint(0, 2), rng.randint(0, 2)), probe)
        assert set(_depths(gen)) == {rounds + 1}
        gen.retract_score()

        assert _depths(gen) == depths
        assert gen.next_guess() == before
        gen.tell_score(target.score(guess), guess)


def test_search_leaves_requirements_untouched():
    gen = MonitorsGenerator()
    gen.next_guess()
    gen.tell_score(Score(1, 2))
    snapshot = [(list(gen._store[h].available), gen._store[h].needs)
                for h in range(len(gen._store))]
    gen.next_guess()
    gen.next_guess()
    assert snapshot == [(list(gen._store[h].available), gen._store[h].needs)
                        for h in range(len(gen._store))]


@pytest.mark.parametrize("target", ["0123", "4567", "1234", "9876", "3098", "5810", "2469"])
def test_every_guess_consistent_with_history(target):
    gen = MonitorsGenerator()
    r = run_case(gen, N(target))
    assert r["success"] is True
    hist = r["history"]
    for k, (guess, _) in enumerate(hist):
        assert guess.valid()
        assert is_consistent(guess, hist[:k])


def test_monitors_and_brute_force_agree():
    rng = random.Random(2024)
    targets = rng.sample(list(number_sequence()), 25)
    mon, brute = MonitorsGenerator(), BruteForceGenerator()
    for t in targets:
        a = run_case(mon, t)
        b = run_case(brute, t)
        assert [str(g) for g, _ in a["history"]] == [str(g) for g, _ in b["history"]]


def test_small_game_solves_every_target():
    cfg = GameConfig(digits=5, places=3)
    gen = MonitorsGenerator(cfg)
    for t in number_sequence(cfg):
        r = run_case(gen, t)
        assert r["success"] and r["history"][-1][0] == t


def test_brute_force_candidates_shrink():
    gen = BruteForceGenerator()
    assert len(gen.candidates) == 5040
    gen.next_guess()
    gen.tell_score(Score(0, 0))
    # no digit of 0123 anywhere: 6*5*4*3 numbers left
    assert len(gen.candidates) == 360
    gen.retract_score()
    assert len(gen.candidates) == 5040
