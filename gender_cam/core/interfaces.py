from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from gender_cam.core.models import FaceRect, GenderResult


class FaceDetector(Protocol):
    def detect(self, image: np.ndarray) -> list[FaceRect]:
        ...


class GenderClassifier(Protocol):
    def classify(self, image: np.ndarray, rect: FaceRect) -> GenderResult:
        ...


class FrameSource(Protocol):
    def read(self) -> Optional[np.ndarray]:
        ...

    def release(self) -> None:
        ...
