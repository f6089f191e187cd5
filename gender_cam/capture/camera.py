from __future__ import annotations

import logging
from typing import Optional

import cv2
import numpy as np

from gender_cam.core.errors import CameraError

logger = logging.getLogger(__name__)


class CameraSource:
    """Webcam frames via cv2.VideoCapture; BGR unless rgb=True."""

    def __init__(self, index: int = 0, *, rgb: bool = False) -> None:
        self.index = index
        self.rgb = rgb
        self._cap = cv2.VideoCapture(index)
        if not self._cap.isOpened():
            self._cap.release()
            raise CameraError(f"Cannot open webcam {index}!")
        logger.info("Camera %d opened", index)

    def read(self) -> Optional[np.ndarray]:
        ok, frame = self._cap.read()
        if not ok or frame is None or frame.size == 0:
            logger.warning("Camera %d: empty frame", self.index)
            return None
        if self.rgb:
            return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return frame

    def release(self) -> None:
        self._cap.release()
