from __future__ import annotations

import numpy as np

_BACKGROUND = (40, 60, 90)
_SKIN = (224, 172, 140)
_EYE = (60, 40, 30)
_MOUTH = (150, 60, 60)


def _fill_ellipse(img: np.ndarray, cx: int, cy: int, ax: int, ay: int, color) -> None:
    h, w = img.shape[:2]
    ys, xs = np.ogrid[:h, :w]
    inside = ((xs - cx) / float(ax)) ** 2 + ((ys - cy) / float(ay)) ** 2 <= 1.0
    img[inside] = color


def synthetic_frame(width: int = 640, height: int = 480, seed: int = 0) -> np.ndarray:
    """RGB test pattern: a skin-coloured face oval with eyes and mouth, plus noise."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:] = _BACKGROUND
    cx, cy = width // 2, height // 2
    ax, ay = max(width // 8, 1), max(height // 4, 1)
    _fill_ellipse(img, cx, cy, ax, ay, _SKIN)
    eye_dx, eye_y = ax // 2, cy - ay // 3
    eye_ax, eye_ay = max(ax // 6, 1), max(ay // 12, 1)
    _fill_ellipse(img, cx - eye_dx, eye_y, eye_ax, eye_ay, _EYE)
    _fill_ellipse(img, cx + eye_dx, eye_y, eye_ax, eye_ay, _EYE)
    _fill_ellipse(img, cx, cy + ay // 2, max(ax // 3, 1), max(ay // 12, 1), _MOUTH)

    rng = np.random.default_rng(seed)
    noise = rng.integers(-6, 7, size=img.shape)
    return np.clip(img.astype(np.int16) + noise, 0, 255).astype(np.uint8)


class SyntheticSource:
    """Stand-in frame source used when no camera is available."""

    def __init__(self, width: int = 640, height: int = 480, seed: int = 0) -> None:
        self.width = width
        self.height = height
        self._seed = seed

    def read(self) -> np.ndarray:
        frame = synthetic_frame(self.width, self.height, self._seed)
        self._seed += 1
        return frame

    def release(self) -> None:
        return None
