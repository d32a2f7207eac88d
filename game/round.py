# game/round.py
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional

from config import COUNTDOWN_WORDS, BEAT_INTERVAL_SEC, SETTLE_SEC
from game.rules import RandomOpponent, resolve
from game.scheduler import Scheduler
from gesture.types import Gesture, GestureCell, Move, Outcome

NO_GESTURE = "NO_GESTURE"

GO_BEAT = len(COUNTDOWN_WORDS) - 1


class RoundPhase(Enum):
    IDLE = auto()
    COUNTDOWN = auto()
    RESOLVED = auto()


@dataclass(frozen=True)
class RoundRecord:
    round_number: int
    human: Optional[Move]
    opponent: Optional[Move]
    outcome: Outcome


@dataclass
class MatchState:
    human_score: int = 0
    opponent_score: int = 0
    round_number: int = 1
    history: List[RoundRecord] = field(default_factory=list)  # most recent first

    @property
    def draws(self) -> int:
        return sum(1 for r in self.history if r.outcome is Outcome.DRAW)

    def snapshot(self) -> "MatchState":
        return MatchState(self.human_score, self.opponent_score, self.round_number, list(self.history))


def _noop(*_args):
    pass


class RoundMachine:
    """
    Countdown -> sample -> resolve, one round at a time.

    The live gesture is read from `cell` exactly once per round, when the
    settle delay after the go beat expires. Hooks:
      on_beat(index)                      index 0..3, 3 is the go signal
      on_resolved(snapshot, record)       record is a RoundRecord or NO_GESTURE
      on_reset()
    """

    def __init__(
        self,
        cell: GestureCell,
        scheduler: Scheduler,
        opponent=None,
        on_beat: Callable[[int], None] = _noop,
        on_resolved: Callable[[MatchState, object], None] = _noop,
        on_reset: Callable[[], None] = _noop,
    ):
        self.cell = cell
        self.scheduler = scheduler
        self.opponent = opponent if opponent is not None else RandomOpponent()
        self.on_beat = on_beat
        self.on_resolved = on_resolved
        self.on_reset = on_reset

        self.phase = RoundPhase.IDLE
        self._match = MatchState()

    @property
    def live_gesture(self) -> Gesture:
        return self.cell.get()

    @property
    def state(self) -> MatchState:
        return self._match.snapshot()

    def start_round(self) -> bool:
        if self.phase is not RoundPhase.IDLE:
            return False

        self.phase = RoundPhase.COUNTDOWN
        print(f"[RoundMachine] Round {self._match.round_number}: countdown")
        self._beat(0)
        return True

    def reset(self) -> bool:
        if self.phase is not RoundPhase.IDLE:
            print("[RoundMachine] Reset ignored: countdown in progress")
            return False

        self._match = MatchState()
        print("[RoundMachine] Match reset")
        self.on_reset()
        return True

    def _beat(self, index: int):
        # queue the next step before the hook runs
        if index < GO_BEAT:
            self.scheduler.call_later(BEAT_INTERVAL_SEC, lambda: self._beat(index + 1))
        else:
            # settle counts from the clock, not from the go beat's due time
            self.scheduler.call_later(SETTLE_SEC, self._sample, from_now=True)
        self.on_beat(index)

    def _sample(self):
        gesture = self.cell.get()
        self.phase = RoundPhase.RESOLVED
        try:
            human = Move.from_gesture(gesture)
            if human is None:
                print(f"[RoundMachine] Round {self._match.round_number}: no gesture detected")
                self.on_resolved(self._match.snapshot(), NO_GESTURE)
                return

            record = self._score(human, self.opponent.next())
            print(f"[RoundMachine] Round {record.round_number}: "
                  f"{record.human.value} vs {record.opponent.value} -> {record.outcome.value}")
            self.on_resolved(self._match.snapshot(), record)
        finally:
            self.phase = RoundPhase.IDLE

    def _score(self, human: Move, opponent: Move) -> RoundRecord:
        m = self._match
        outcome = resolve(human, opponent)
        if outcome is Outcome.WIN:
            m.human_score += 1
        elif outcome is Outcome.LOSE:
            m.opponent_score += 1

        record = RoundRecord(m.round_number, human, opponent, outcome)
        m.history.insert(0, record)
        m.round_number += 1
        return record
