# gesture/camera.py
from typing import Optional, Tuple
import cv2

from config import CAM_INDEX_CANDIDATES, CAP_BACKENDS, CAM_W, CAM_H


def _open(idx, backend_name):
    if backend_name is None:
        return cv2.VideoCapture(idx)
    backend = getattr(cv2, f"CAP_{backend_name}", None)
    if backend is None:
        return None  # 当前 cv2 没编译这个 backend
    return cv2.VideoCapture(idx, backend)


def try_open_camera() -> Tuple[Optional[cv2.VideoCapture], str]:
    """
    按顺序尝试各个 index 和 backend，返回第一个能打开的 cap 以及描述信息
    """
    for idx in CAM_INDEX_CANDIDATES:
        for name in CAP_BACKENDS:
            cap = _open(idx, name)
            if cap is None:
                continue

            if cap.isOpened():
                cap.set(cv2.CAP_PROP_FRAME_WIDTH, CAM_W)
                cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CAM_H)
                return cap, f"CAM idx={idx}, backend={name or 'DEFAULT'}"

            try:
                cap.release()
            except cv2.error:
                pass

    return None, "CAMERA_OPEN_FAILED"
