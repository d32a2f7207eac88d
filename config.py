# config.py

# Camera: indices are tried in order
CAM_INDEX_CANDIDATES = [0, 1, 2]

# Camera backends, tried in order (names of cv2.CAP_* constants, None = default)
CAP_BACKENDS = ["DSHOW", "MSMF", None]

CAM_W, CAM_H = 640, 480
MIRROR = True                 # selfie view; the thumb rule assumes a mirrored frame

SHOW_CAMERA = True            # True: show the camera preview (Q closes it, tracking keeps running)

# Hand tracker
MAX_HANDS = 1
DETECTION_CONFIDENCE = 0.6
TRACKING_CONFIDENCE = 0.6

# Classifier
THUMB_SPLAY_RATIO = 1.2       # tip-to-wrist vs mcp-to-wrist horizontal distance

# Countdown: three preparatory beats, then the go signal
COUNTDOWN_WORDS = ["Stone", "Paper", "Scissors", "SHOOT!"]
BEAT_INTERVAL_SEC = 0.9
SETTLE_SEC = 0.5              # go signal -> gesture sample

# Arena window
WIN_W, WIN_H = 640, 420
HISTORY_LINES = 8
FPS = 60

# Narration (pyttsx3)
SPEAK = True
SPEECH_RATE = 180             # words per minute
SPEECH_VOLUME = 1.0
