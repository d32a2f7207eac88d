import pytest

from game.scheduler import Scheduler
from gesture.types import Keypoint

WRIST_XY = (0.5, 0.9)
FINGER_X = {"index": 0.42, "middle": 0.5, "ring": 0.58, "pinky": 0.66}


def build_hand(up=(), thumb_out=False):
    """
    21 keypoints for a right hand in a mirrored frame.
    Fingers named in `up` have tip above PIP; the rest are curled (tip below PIP).
    """
    pts = [Keypoint(*WRIST_XY)]

    # thumb: CMC, MCP, IP, TIP; MCP sits 0.05 from the wrist horizontally
    tip_x = 0.3 if thumb_out else 0.47
    pts += [Keypoint(0.47, 0.85), Keypoint(0.45, 0.78), Keypoint((0.45 + tip_x) / 2, 0.72), Keypoint(tip_x, 0.68)]

    for name in ("index", "middle", "ring", "pinky"):
        x = FINGER_X[name]
        if name in up:
            ys = [0.65, 0.5, 0.4, 0.3]      # MCP, PIP, DIP, TIP
        else:
            ys = [0.65, 0.55, 0.6, 0.62]
        pts += [Keypoint(x, y) for y in ys]

    assert len(pts) == 21
    return pts


@pytest.fixture
def hand():
    return build_hand


class FakeClock:
    def __init__(self, t=100.0):
        self.t = t

    def __call__(self):
        return self.t

    def advance(self, dt):
        self.t += dt


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock)
