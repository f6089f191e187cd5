"""
Skin-colour face candidate search that needs no trained model.

A fixed-size window slides over an RGB image; windows with enough skin-coloured
pixels become candidates, which are then filtered on aspect ratio and
intensity variance. There is no non-maximum suppression, so candidates can
overlap.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from gender_cam.core.config import HeuristicConfig
from gender_cam.core.models import FaceRect

logger = logging.getLogger(__name__)


def is_skin(rgb: np.ndarray) -> np.ndarray:
    """Boolean mask of pixels passing the RGB skin rule (uniform daylight)."""
    pixels = rgb.astype(np.int16)
    r, g, b = pixels[..., 0], pixels[..., 1], pixels[..., 2]
    spread = pixels.max(axis=-1) - pixels.min(axis=-1)
    return (
        (r > 95)
        & (g > 40)
        & (b > 20)
        & (spread > 15)
        & (np.abs(r - g) > 15)
        & (r > g)
        & (r > b)
    )


def skin_fraction(mask: np.ndarray) -> float:
    if mask.size == 0:
        return 0.0
    return float(np.count_nonzero(mask)) / float(mask.size)


def intensity(image: np.ndarray) -> np.ndarray:
    """Luminance of an RGB image as float64; grayscale input passes through."""
    if image.ndim == 2:
        return image.astype(np.float64)
    rgb = image.astype(np.float64)
    return 0.299 * rgb[..., 0] + 0.587 * rgb[..., 1] + 0.114 * rgb[..., 2]


def has_variation(block: np.ndarray, min_variance: float = 100.0) -> bool:
    """True when the block's intensity variance reaches min_variance."""
    gray = intensity(block)
    if gray.size == 0:
        return False
    return float(gray.var()) >= min_variance


def scan_skin_windows(
    image: np.ndarray,
    *,
    window: int = 60,
    stride: int = 10,
    min_skin_fraction: float = 0.3,
) -> List[FaceRect]:
    """Every window whose skin fraction is strictly above min_skin_fraction."""
    height, width = image.shape[:2]
    if height < window or width < window:
        return []
    mask = is_skin(image)
    found: List[FaceRect] = []
    for y in range(0, height - window + 1, stride):
        for x in range(0, width - window + 1, stride):
            fraction = skin_fraction(mask[y : y + window, x : x + window])
            if fraction > min_skin_fraction:
                found.append(FaceRect(x=x, y=y, width=window, height=window, confidence=fraction))
    return found


def is_face_candidate(
    image: np.ndarray,
    rect: FaceRect,
    *,
    aspect_range: Tuple[float, float] = (0.7, 1.3),
    min_variance: float = 100.0,
) -> bool:
    low, high = aspect_range
    if not low <= rect.aspect_ratio <= high:
        return False
    x1, y1, x2, y2 = rect.corners()
    return has_variation(image[y1:y2, x1:x2], min_variance)


def filter_face_candidates(
    image: np.ndarray,
    rects: Iterable[FaceRect],
    *,
    aspect_range: Tuple[float, float] = (0.7, 1.3),
    min_variance: float = 100.0,
) -> List[FaceRect]:
    return [
        rect
        for rect in rects
        if is_face_candidate(image, rect, aspect_range=aspect_range, min_variance=min_variance)
    ]


class SkinFaceDetector:
    """Skin window scan followed by the aspect/variance filter. Expects RGB."""

    def __init__(self, config: Optional[HeuristicConfig] = None) -> None:
        self.config = config or HeuristicConfig()

    def detect(self, image: np.ndarray) -> List[FaceRect]:
        cfg = self.config
        windows = scan_skin_windows(
            image,
            window=cfg.window_size,
            stride=cfg.stride,
            min_skin_fraction=cfg.min_skin_fraction,
        )
        faces = filter_face_candidates(
            image,
            windows,
            aspect_range=(cfg.aspect_min, cfg.aspect_max),
            min_variance=cfg.min_variance,
        )
        logger.debug("Skin detector: %d window(s), %d candidate(s)", len(windows), len(faces))
        return faces
