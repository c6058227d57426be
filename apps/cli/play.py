# apps/cli/play.py
"""
Play the N digit number game in the console.

Modes:
  guesser : keep a number in mind; the machine guesses it. Score each guess
            as "placed misplaced" (e.g. "1 2"). Commands: r = retract the
            last score, n = start over, q = quit.
            With --target (or --random) the machine scores itself.
  scorer  : the machine keeps a secret; type guesses and read the scores.
            Commands: reveal, n = new secret, q = quit.
"""

from __future__ import annotations

import argparse
from typing import Callable

from markn.engine import GameConfig, Number, Score
from markn.generators import get_generator_ids
from markn.harness import GameSession, SecretSession


def _board_line(i: int, guess: Number, s: Score | None = None) -> str:
    return f"{i}: {guess}" + (f"  {s}" if s is not None else "")


def play_guesser(session: GameSession, read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print) -> None:
    guess = session.start()
    write(_board_line(1, guess))
    while True:
        try:
            line = read("score> ").strip().lower()
        except EOFError:
            return
        if line in ("q", "quit"):
            return
        if line in ("n", "new"):
            guess = session.start()
            write(_board_line(1, guess))
            continue
        if line in ("r", "retract"):
            if not session.rounds:
                write("nothing to retract")
                continue
            guess = session.retract()
            write(f"retracted; {_board_line(len(session.rounds) + 1, guess)}")
            continue

        try:
            s = Score.parse(line)
            nxt = session.score(s)
        except ValueError as e:
            write(f"Score must be legit two digits only ({e})")
            continue

        if session.solved:
            write(f"got it in {len(session.rounds)}")
            continue
        if nxt is None:
            write(session.message + " (r to retract)")
            continue
        write(_board_line(len(session.rounds) + 1, nxt))


def play_scorer(session: SecretSession, read: Callable[[str], str] = input,
                write: Callable[[str], None] = print) -> None:
    places = session.config.places
    while True:
        try:
            line = read("guess> ").strip().lower()
        except EOFError:
            return
        if line in ("q", "quit"):
            return
        if line in ("n", "new"):
            session.new()
            write("new secret")
            continue
        if line == "reveal":
            write(str(session.reveal()))
            continue
        try:
            number = Number.parse(line, session.config)
            s = session.guess(number)
        except ValueError:
            write(f"Number must have {places} unique digits")
            continue
        write(_board_line(len(session.rounds), number, s))
        if session.solved:
            write("correct!")


def main():
    ap = argparse.ArgumentParser(description="markn — play the N digit number game")
    ap.add_argument("mode", choices=["guesser", "scorer"], nargs="?", default="guesser")
    ap.add_argument("--generator", default="monitors",
                    help=f"generator id (one of: {', '.join(get_generator_ids())})")
    ap.add_argument("--digits", type=int, default=10)
    ap.add_argument("--places", type=int, default=4)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--no-scramble", action="store_true",
                    help="show guesses in the generator's own order")
    ap.add_argument("--target", help="number for the machine to guess and score by itself")
    ap.add_argument("--random", action="store_true",
                    help="machine picks a random target and guesses it")
    args = ap.parse_args()

    try:
        config = GameConfig(digits=args.digits, places=args.places)
    except ValueError as e:
        raise SystemExit(str(e))

    if args.mode == "scorer":
        play_scorer(SecretSession(config, seed=args.seed))
        return

    try:
        session = GameSession(args.generator, config, seed=args.seed,
                              scramble=not args.no_scramble)
    except ValueError as e:
        raise SystemExit(str(e))

    if args.target or args.random:
        if args.random:
            target = Number.random(config, session.rng)
        else:
            try:
                target = Number.parse(args.target, config)
            except ValueError as e:
                raise SystemExit(str(e))
        print(f"target: {target}")
        try:
            session.solve(target)
        except ValueError as e:
            raise SystemExit(str(e))
        for i, (g, s) in enumerate(session.rounds, 1):
            print(_board_line(i, g, s))
        return

    play_guesser(session)


if __name__ == "__main__":
    main()
