from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import cv2
import numpy as np

from gender_cam.core.config import AppConfig
from gender_cam.core.errors import ModelLoadError
from gender_cam.core.models import FaceRect

logger = logging.getLogger(__name__)


def load_cascade(path: str | Path) -> cv2.CascadeClassifier:
    cascade = cv2.CascadeClassifier()
    if not Path(path).exists() or not cascade.load(str(path)):
        raise ModelLoadError(f"Failed to load Haar cascade: {path}")
    logger.info("Face detector: loaded cascade %s", path)
    return cascade


class CascadeFaceDetector:
    """Multi-scale Haar cascade scan over a BGR frame."""

    def __init__(
        self,
        cascade: cv2.CascadeClassifier,
        *,
        scale_factor: float = 1.1,
        min_neighbors: int = 3,
        min_size: Tuple[int, int] = (0, 0),
    ) -> None:
        self._cascade = cascade
        self.scale_factor = scale_factor
        self.min_neighbors = min_neighbors
        self.min_size = min_size

    @classmethod
    def from_config(cls, config: AppConfig) -> "CascadeFaceDetector":
        return cls(
            load_cascade(config.cascade_path),
            scale_factor=config.cascade_scale_factor,
            min_neighbors=config.cascade_min_neighbors,
            min_size=(config.cascade_min_size, config.cascade_min_size),
        )

    def detect(self, image: np.ndarray) -> List[FaceRect]:
        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY) if image.ndim == 3 else image
        found = self._cascade.detectMultiScale(
            gray,
            scaleFactor=self.scale_factor,
            minNeighbors=self.min_neighbors,
            minSize=self.min_size,
        )
        return [
            FaceRect(x=int(x), y=int(y), width=int(w), height=int(h))
            for (x, y, w, h) in found
        ]
