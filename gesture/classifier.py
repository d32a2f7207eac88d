# gesture/classifier.py
from config import THUMB_SPLAY_RATIO
from gesture.types import FINGERS, WRIST, THUMB_MCP, THUMB_TIP, Gesture
from gesture.utils import to_points, hdist


def fingers_extended(pts):
    """
    Four fingers straight or not (rule of thumb: tip.y < pip.y)
    """
    return {name: bool(pts[tip][1] < pts[pip][1]) for name, tip, pip in FINGERS}  # smaller y is higher


def thumb_extended(pts) -> bool:
    # Splay test on x only; assumes a mirrored selfie frame
    return hdist(pts[THUMB_TIP], pts[WRIST]) > hdist(pts[THUMB_MCP], pts[WRIST]) * THUMB_SPLAY_RATIO


def classify(keypoints) -> Gesture:
    """
    21 normalized keypoints -> Gesture. Empty or malformed input gives Gesture.NONE.

    Priority: Paper > Scissors > Rock > None
    """
    pts = to_points(keypoints)
    if pts is None:
        return Gesture.NONE

    ext = fingers_extended(pts)
    thumb = thumb_extended(pts)
    count = sum(ext.values())

    if count >= 3 and (thumb or count == 4):
        return Gesture.PAPER
    if ext["index"] and ext["middle"] and (not ext["ring"]) and (not ext["pinky"]):
        return Gesture.SCISSORS
    if count <= 1 and (not ext["index"]) and (not ext["middle"]):
        return Gesture.ROCK
    return Gesture.NONE
