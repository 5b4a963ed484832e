# apps/cli/play.py
"""
Interactive terminal game.

Modes:
  player : the system picks a secret, you guess it (type 'q' to give up)
  system : you think of a secret, the solver guesses; answer with feedback
           such as "1A2B" or "1 2" (type 'q' to quit)

Usage:
    python -m apps.cli.play --mode system --strategy expected_left
"""

from __future__ import annotations

import argparse
import random
from typing import Callable, List

from packages.engine import (
    PlayerGame, Solver, InvalidInput, format_feedback, parse_feedback,
)
from packages.strategies import get_strategy_ids

Prompt = Callable[[str], str]
Echo = Callable[[str], None]


def play_player(game: PlayerGame, ask: Prompt = input, say: Echo = print) -> bool:
    """Player-guesses loop. Returns True if the player found the secret."""
    say("I picked a 4-digit code with distinct digits. Your guess?")
    while not game.solved:
        text = ask(f"[{game.attempts + 1}] guess> ").strip()
        if text.lower() == "q":
            say(f"The secret was {game.reveal()}.")
            return False
        try:
            fb = game.guess(text)
        except InvalidInput as e:
            say(f"Invalid guess: {e}")
            continue
        say(f"{text}  {format_feedback(fb)}")
    say(f"Correct! It took you {game.attempts} attempt(s).")
    return True


def play_system(solver: Solver, ask: Prompt = input, say: Echo = print) -> str:
    """
    System-guesses loop. Returns the final outcome kind:
    "solved", "contradiction" or "quit".
    """
    say("Think of a 4-digit code with distinct digits.")
    result = solver.initialize()
    while True:
        say(f"My guess: {result.next_guess}  ({result.remaining} possibilities)")
        text = ask(f"[{solver.turns + 1}] feedback (e.g. 1A2B)> ").strip()
        if text.lower() == "q":
            return "quit"
        try:
            fb = parse_feedback(text)
            result = solver.submit_feedback(fb.a, fb.b)
        except InvalidInput as e:
            say(f"Invalid feedback: {e}")
            continue

        if result.kind == "solved":
            say(f"Got it: {result.final_guess}. It took me {result.turns} attempt(s).")
            return result.kind
        if result.kind == "contradiction":
            say("Contradiction! No code matches all your feedback; please check your previous answers.")
            for t in solver.history:
                say(f"  {t.guess}  {format_feedback(t.feedback)}")
            return result.kind


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(description="bullscowsAI: play 1A2B in the terminal")
    ap.add_argument("--mode", choices=["player", "system"], default="player",
                    help="player = you guess; system = the solver guesses")
    ap.add_argument("--strategy", default="random_consistent", choices=get_strategy_ids(),
                    help="guess strategy for --mode system")
    ap.add_argument("--secret", help="fixed secret for --mode player (default: random)")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducibility)")
    args = ap.parse_args(argv)

    try:
        if args.mode == "player":
            rng = random.Random(args.seed) if args.seed is not None else None
            play_player(PlayerGame(args.secret, rng=rng))
        else:
            play_system(Solver(args.strategy, seed=args.seed))
    except InvalidInput as e:
        raise SystemExit(str(e))
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")


if __name__ == "__main__":
    main()
