from __future__ import annotations

import logging

import numpy as np

from gender_cam.core.interfaces import FaceDetector, GenderClassifier
from gender_cam.core.models import FaceAnalysis

logger = logging.getLogger(__name__)


def analyze_frame(
    image: np.ndarray,
    detector: FaceDetector,
    classifier: GenderClassifier,
) -> list[FaceAnalysis]:
    """Detect faces in one frame and label each of them, in detection order."""
    rects = detector.detect(image)
    analyses = [FaceAnalysis(rect=rect, result=classifier.classify(image, rect)) for rect in rects]
    logger.debug("Analyzed frame %s: %d face(s)", image.shape, len(analyses))
    return analyses
