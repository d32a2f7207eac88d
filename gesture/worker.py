# gesture/worker.py
import time
import threading
import traceback
import cv2
import mediapipe as mp

from config import (
    MIRROR, SHOW_CAMERA,
    MAX_HANDS, DETECTION_CONFIDENCE, TRACKING_CONFIDENCE,
)
from gesture.types import GestureCell, Keypoint
from gesture.camera import try_open_camera
from gesture.classifier import classify

PREVIEW_WINDOW = "Camera (press Q to close this window)"


def hand_keypoints(result):
    """First detected hand as 21 normalized Keypoints, or [] when no hand is visible."""
    if not result.multi_hand_landmarks:
        return []
    return [Keypoint(lm.x, lm.y) for lm in result.multi_hand_landmarks[0].landmark]


class KeypointWorker(threading.Thread):
    """
    Frame loop: camera -> MediaPipe Hands -> classify -> GestureCell.
    Sole writer of the cell.
    """

    def __init__(self, cell: GestureCell):
        super().__init__(daemon=True)
        self.cell = cell
        self._stop = threading.Event()
        self.show_camera = SHOW_CAMERA
        self._window_open = False

    def stop(self):
        self._stop.set()

    def run(self):
        cap, hands = None, None
        try:
            cap, cam_info = try_open_camera()
            if cap is None:
                self.cell.set_status("CAMERA_OPEN_FAILED", cam_info)
                print("[KeypointWorker] CAMERA_OPEN_FAILED. Close apps using camera or try other index.")
                return

            self.cell.set_status("NO_HAND", cam_info)
            print("[KeypointWorker] Opened:", cam_info)

            mp_hands = mp.solutions.hands
            # 只跟踪一只手
            hands = mp_hands.Hands(
                static_image_mode=False,
                max_num_hands=MAX_HANDS,
                model_complexity=1,
                min_detection_confidence=DETECTION_CONFIDENCE,
                min_tracking_confidence=TRACKING_CONFIDENCE,
            )
            drawer = mp.solutions.drawing_utils

            while not self._stop.is_set():
                ok, frame = cap.read()
                if not ok:
                    self.cell.set_status("CAMERA_READ_FAILED")
                    time.sleep(0.01)
                    continue

                # 镜像成自拍视角，拇指判定依赖这个方向
                if MIRROR:
                    frame = cv2.flip(frame, 1)

                rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
                result = hands.process(rgb)

                keypoints = hand_keypoints(result)
                gesture = classify(keypoints)
                hand_seen = bool(keypoints)
                self.cell.set(gesture, hand_seen=hand_seen)

                if self.show_camera:
                    self._preview(frame, result, gesture.label, cam_info, drawer, mp_hands)

        except Exception as e:
            self.cell.set_status("WORKER_EXCEPTION")
            print("[KeypointWorker] Exception:", e)
            traceback.print_exc()
        finally:
            self._release(cap, hands)

    def _release(self, cap, hands):
        # 异常退出时也要释放摄像头
        if hands is not None:
            hands.close()
        if cap is not None:
            cap.release()
        if self._window_open:
            cv2.destroyWindow(PREVIEW_WINDOW)
            self._window_open = False

    def _preview(self, frame, result, label, cam_info, drawer, mp_hands):
        if result.multi_hand_landmarks:
            drawer.draw_landmarks(frame, result.multi_hand_landmarks[0], mp_hands.HAND_CONNECTIONS)
        cv2.putText(frame, cam_info, (10, 24), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (0, 255, 0), 2)
        cv2.putText(frame, label, (10, 52), cv2.FONT_HERSHEY_SIMPLEX, 0.9, (0, 255, 0), 2)
        cv2.imshow(PREVIEW_WINDOW, frame)
        self._window_open = True
        k = cv2.waitKey(1) & 0xFF  # Q 只关预览窗口，识别继续
        if k in (ord('q'), ord('Q')):
            cv2.destroyWindow(PREVIEW_WINDOW)
            self._window_open = False
            self.show_camera = False
