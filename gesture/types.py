# gesture/types.py
import threading
from enum import Enum
from typing import NamedTuple


class Keypoint(NamedTuple):
    x: float
    y: float


# Hand landmark indices (MediaPipe order)
WRIST = 0
THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
INDEX_PIP, INDEX_TIP = 6, 8
MIDDLE_PIP, MIDDLE_TIP = 10, 12
RING_PIP, RING_TIP = 14, 16
PINKY_PIP, PINKY_TIP = 18, 20

NUM_KEYPOINTS = 21

FINGERS = [
    ("index", INDEX_TIP, INDEX_PIP),
    ("middle", MIDDLE_TIP, MIDDLE_PIP),
    ("ring", RING_TIP, RING_PIP),
    ("pinky", PINKY_TIP, PINKY_PIP),
]


class Gesture(Enum):
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"
    NONE = "None"

    @property
    def label(self) -> str:
        return "No hand" if self is Gesture.NONE else self.value


class Move(Enum):
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"

    @classmethod
    def from_gesture(cls, gesture: Gesture):
        """Committed move for a gesture, or None for Gesture.NONE."""
        if gesture is Gesture.NONE:
            return None
        return cls(gesture.value)


MOVES = [Move.ROCK, Move.PAPER, Move.SCISSORS]


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class GestureCell:
    """
    Latest classified gesture plus tracker status.
    Written by the frame loop only; anyone may read.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._gesture = Gesture.NONE
        self.label = "INIT"
        self.hand_seen = False
        self.cam_info = ""

    def set(self, gesture: Gesture, label: str = "", hand_seen: bool = False):
        with self._lock:
            self._gesture = gesture
            self.label = label or gesture.label
            self.hand_seen = hand_seen

    def set_status(self, label: str, cam_info: str = None):
        with self._lock:
            self._gesture = Gesture.NONE
            self.hand_seen = False
            self.label = label
            if cam_info is not None:
                self.cam_info = cam_info

    def get(self) -> Gesture:
        with self._lock:
            return self._gesture

    def status(self):
        with self._lock:
            return self._gesture, self.label, self.hand_seen, self.cam_info
