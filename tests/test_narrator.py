import pytest

pytest.importorskip("pyttsx3")

from game.narrator import Narrator, beat_line, result_lines
from game.round import NO_GESTURE, RoundRecord
from gesture.types import Move, Outcome


class FakeEngine:
    def __init__(self):
        self.props = {}
        self.pending = []
        self.spoken = []
        self.stopped = False

    def setProperty(self, name, value):
        self.props[name] = value

    def say(self, text):
        self.pending.append(text)

    def runAndWait(self):
        self.spoken += self.pending
        self.pending = []

    def stop(self):
        self.stopped = True


def test_beat_lines():
    assert [beat_line(i) for i in range(4)] == ["Stone!", "Paper!", "Scissors!", "Shoot!"]


def test_result_lines():
    record = RoundRecord(3, Move.ROCK, Move.SCISSORS, Outcome.WIN)
    assert result_lines(record) == ["Rock!", "versus Scissors!", "You win!"]
    assert result_lines(RoundRecord(1, Move.PAPER, Move.SCISSORS, Outcome.LOSE))[-1] == "A I wins!"
    assert result_lines(NO_GESTURE) == ["No gesture detected. Try again!"]


def test_narrator_speaks_in_order_off_thread():
    engine = FakeEngine()
    narrator = Narrator(engine_factory=lambda: engine)
    narrator.start()
    narrator.say("Stone!", "Paper!")
    narrator.say("Shoot!")
    narrator.stop()
    narrator.join(timeout=5)

    assert not narrator.is_alive()
    assert engine.spoken == ["Stone!", "Paper!", "Shoot!"]
    assert engine.stopped
    assert "rate" in engine.props


def test_narrator_without_tts_driver_exits_quietly():
    def broken():
        raise RuntimeError("no audio driver")

    narrator = Narrator(engine_factory=broken)
    narrator.start()
    narrator.say("Stone!")
    narrator.join(timeout=5)
    assert not narrator.is_alive()
