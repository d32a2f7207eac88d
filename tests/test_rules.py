import itertools

import pytest

from game.rules import RandomOpponent, resolve
from gesture.types import MOVES, Gesture, Move, Outcome

R, P, S = Move.ROCK, Move.PAPER, Move.SCISSORS


@pytest.mark.parametrize("human, opponent, expected", [
    (R, R, Outcome.DRAW), (R, P, Outcome.LOSE), (R, S, Outcome.WIN),
    (P, R, Outcome.WIN), (P, P, Outcome.DRAW), (P, S, Outcome.LOSE),
    (S, R, Outcome.LOSE), (S, P, Outcome.WIN), (S, S, Outcome.DRAW),
])
def test_resolve_table(human, opponent, expected):
    assert resolve(human, opponent) is expected


def test_resolve_mirror_pairs():
    mirror = {Outcome.WIN: Outcome.LOSE, Outcome.LOSE: Outcome.WIN, Outcome.DRAW: Outcome.DRAW}
    for a, b in itertools.product(MOVES, repeat=2):
        assert resolve(b, a) is mirror[resolve(a, b)]
        assert not (resolve(a, b) is Outcome.WIN and resolve(b, a) is Outcome.WIN)


def test_move_from_gesture():
    assert Move.from_gesture(Gesture.ROCK) is Move.ROCK
    assert Move.from_gesture(Gesture.SCISSORS) is Move.SCISSORS
    assert Move.from_gesture(Gesture.NONE) is None


def test_random_opponent_covers_all_moves():
    opponent = RandomOpponent(seed=1)
    counts = {m: 0 for m in MOVES}
    for _ in range(3000):
        counts[opponent.next()] += 1
    for n in counts.values():
        assert 850 < n < 1150


def test_random_opponent_seeded_is_reproducible():
    a, b = RandomOpponent(seed=42), RandomOpponent(seed=42)
    assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]
