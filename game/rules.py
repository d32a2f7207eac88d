# game/rules.py
import numpy as np

from gesture.types import MOVES, Move, Outcome

BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}

OUTCOME_TEXT = {
    Outcome.WIN: "You Win!",
    Outcome.LOSE: "AI Wins!",
    Outcome.DRAW: "Draw!",
}
NO_GESTURE_TEXT = "No gesture detected - try again!"


def resolve(human: Move, opponent: Move) -> Outcome:
    if human == opponent:
        return Outcome.DRAW
    if BEATS[human] == opponent:
        return Outcome.WIN
    return Outcome.LOSE


class RandomOpponent:
    """Uniform random move each call, no memory of earlier rounds."""

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def next(self) -> Move:
        return MOVES[int(self.rng.integers(0, len(MOVES)))]
