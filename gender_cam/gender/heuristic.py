from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from gender_cam.core.config import HeuristicConfig
from gender_cam.core.models import FaceFeatures, FaceRect, GenderResult
from gender_cam.faces.skin import intensity

logger = logging.getLogger(__name__)

# (threshold, offset) tiers, checked in order; the first match wins.
_BRIGHTNESS_TIERS = ((90.0, 0.15), (130.0, 0.05))
_BRIGHTNESS_DEFAULT = -0.05
_VARIANCE_TIERS = ((2000.0, 0.15), (800.0, 0.05))
_VARIANCE_DEFAULT = -0.05
_EDGE_TIERS = ((0.25, 0.15), (0.10, 0.05))
_EDGE_DEFAULT = -0.10
_SKIN_RATIO_TIERS = ((1.35, -0.10), (1.15, 0.0))
_SKIN_RATIO_DEFAULT = 0.05


def mean_brightness(block: np.ndarray) -> float:
    gray = intensity(block)
    return float(gray.mean()) if gray.size else 0.0


def intensity_variance(block: np.ndarray) -> float:
    gray = intensity(block)
    return float(gray.var()) if gray.size else 0.0


def edge_density(block: np.ndarray, threshold: float = 30.0) -> float:
    """Fraction of pixels whose right+lower neighbour gradient exceeds threshold."""
    gray = intensity(block)
    if gray.ndim != 2 or gray.shape[0] < 2 or gray.shape[1] < 2:
        return 0.0
    centre = gray[:-1, :-1]
    dx = np.abs(gray[:-1, 1:] - centre)
    dy = np.abs(gray[1:, :-1] - centre)
    return float(np.count_nonzero((dx + dy) > threshold)) / float(centre.size)


def skin_tone_ratio(block: np.ndarray) -> float:
    """Mean red over mean green of an RGB block."""
    if block.ndim != 3 or block.size == 0:
        return 1.0
    red = float(block[..., 0].mean())
    green = float(block[..., 1].mean())
    if green == 0:
        return 1.0
    return red / green


def extract_features(
    image: np.ndarray, rect: FaceRect, *, edge_threshold: float = 30.0
) -> FaceFeatures:
    height, width = image.shape[:2]
    clipped = rect.clip(width, height)
    if clipped is None:
        raise ValueError(f"Face rect {rect.corners()} lies outside the image")
    x1, y1, x2, y2 = clipped.corners()
    block = image[y1:y2, x1:x2]
    return FaceFeatures(
        brightness=mean_brightness(block),
        variance=intensity_variance(block),
        edge_density=edge_density(block, edge_threshold),
        skin_tone_ratio=skin_tone_ratio(block),
    )


def _above(value: float, tiers: Sequence[Tuple[float, float]], default: float) -> float:
    for threshold, offset in tiers:
        if value > threshold:
            return offset
    return default


def _below(value: float, tiers: Sequence[Tuple[float, float]], default: float) -> float:
    for threshold, offset in tiers:
        if value < threshold:
            return offset
    return default


def calculate_male_score(features: FaceFeatures) -> float:
    """
    Combine the four features into a male-likelihood score in [0, 1].

    Brighter and redder blocks lower the score; strong texture (variance,
    edges) raises it.
    """
    score = 0.5
    score += _below(features.brightness, _BRIGHTNESS_TIERS, _BRIGHTNESS_DEFAULT)
    score += _above(features.variance, _VARIANCE_TIERS, _VARIANCE_DEFAULT)
    score += _above(features.edge_density, _EDGE_TIERS, _EDGE_DEFAULT)
    score += _above(features.skin_tone_ratio, _SKIN_RATIO_TIERS, _SKIN_RATIO_DEFAULT)
    return max(0.0, min(1.0, score))


def score_to_result(score: float) -> GenderResult:
    if score > 0.5:
        return GenderResult(label="Male", confidence=score)
    return GenderResult(label="Female", confidence=1.0 - score)


class HeuristicGenderClassifier:
    def __init__(self, config: Optional[HeuristicConfig] = None) -> None:
        self.config = config or HeuristicConfig()

    def classify(self, image: np.ndarray, rect: FaceRect) -> GenderResult:
        features = extract_features(image, rect, edge_threshold=self.config.edge_threshold)
        score = calculate_male_score(features)
        logger.debug("Heuristic gender: %s -> %.2f", features, score)
        return score_to_result(score)
