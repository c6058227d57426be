import pytest
from markn.engine import Number, Score
from markn.generators import MonitorsGenerator
from markn.harness import GameSession, SecretSession, run_case
from markn.harness.session import INCONSISTENT_MESSAGE


def test_session_score_and_retract():
    s = GameSession(scramble=False)
    assert str(s.start()) == "0123"
    assert str(s.score(Score(0, 3))) == "1034"
    assert len(s.rounds) == 1

    assert str(s.retract()) == "0123"
    assert s.rounds == []
    # scoring again after a retract continues from the restored state
    assert str(s.score(Score(0, 3))) == "1034"


def test_session_inconsistent_then_retract():
    s = GameSession(scramble=False)
    s.start()
    s.score(Score(0, 0))
    assert s.score(Score(0, 0)) is None
    assert s.inconsistent is True and s.message == INCONSISTENT_MESSAGE
    with pytest.raises(ValueError):
        s.score(Score(0, 0))

    assert str(s.retract()) == "4567"
    assert s.inconsistent is False and s.message == ""


def test_session_rejects_invalid_score():
    s = GameSession(scramble=False)
    s.start()
    with pytest.raises(ValueError):
        s.score(Score(3, 1))
    assert s.rounds == []


def test_session_solved():
    s = GameSession(scramble=False)
    s.start()
    assert s.score(Score(4, 0)) is None
    assert s.solved is True and s.inconsistent is False
    s.retract()
    assert s.solved is False and str(s.guess) == "0123"


def test_scrambled_solve_matches_plain_game():
    target = Number.parse("2718")
    s = GameSession(seed=42)
    n = s.solve(target)
    assert s.solved and s.rounds[-1][0] == target
    for guess, score in s.rounds:
        assert target.score(guess).equal(score)

    # the generator solved the unscrambled target in as many guesses
    plain = run_case(MonitorsGenerator(), s.scrambler.unscramble(target))
    assert plain["guesses"] == n


def test_solve_rejects_invalid_target():
    with pytest.raises(ValueError):
        GameSession().solve(Number.parse("1111"))


def test_secret_session():
    s = SecretSession(seed=1)
    secret = s.reveal()
    assert secret.valid()
    assert s.solved is False
    assert s.guess(secret).correct(4)
    assert s.solved is True
    with pytest.raises(ValueError):
        s.guess(Number.parse("0012"))
    s.new()
    assert s.rounds == [] and s.reveal().valid()
