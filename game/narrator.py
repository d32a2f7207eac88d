# game/narrator.py
import queue
import threading
import traceback

import pyttsx3

from config import COUNTDOWN_WORDS, SPEECH_RATE, SPEECH_VOLUME
from game.round import NO_GESTURE
from gesture.types import Outcome

SPOKEN_OUTCOME = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "A I wins!",
    Outcome.DRAW: "It's a draw!",
}


def beat_line(index: int) -> str:
    word = COUNTDOWN_WORDS[index].rstrip("!")
    return word.capitalize() + "!"


def result_lines(record):
    if record == NO_GESTURE:
        return ["No gesture detected. Try again!"]
    return [
        f"{record.human.value}!",
        f"versus {record.opponent.value}!",
        SPOKEN_OUTCOME[record.outcome],
    ]


class Narrator(threading.Thread):
    """
    Speaks queued lines on its own thread; say() never blocks the frame loop.
    The TTS engine is created inside the thread (pyttsx3 engines stay on the thread that made them).
    """

    def __init__(self, engine_factory=pyttsx3.init):
        super().__init__(daemon=True)
        self.engine_factory = engine_factory
        self.lines = queue.Queue()

    def say(self, *lines):
        for line in lines:
            self.lines.put(line)

    def stop(self):
        self.lines.put(None)

    def run(self):
        try:
            engine = self.engine_factory()
            engine.setProperty("rate", SPEECH_RATE)
            engine.setProperty("volume", SPEECH_VOLUME)
        except Exception as e:
            print("[Narrator] TTS unavailable:", e)
            return

        try:
            while True:
                line = self.lines.get()
                if line is None:
                    break
                engine.say(line)
                engine.runAndWait()
        except Exception as e:
            print("[Narrator] Exception:", e)
            traceback.print_exc()
        finally:
            engine.stop()
