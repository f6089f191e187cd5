from __future__ import annotations

import logging
from typing import Optional

from gender_cam.capture.camera import CameraSource
from gender_cam.capture.synthetic import SyntheticSource
from gender_cam.core.config import AppConfig
from gender_cam.core.errors import CameraError
from gender_cam.core.interfaces import FrameSource

logger = logging.getLogger(__name__)


def open_heuristic_source(
    config: AppConfig,
    *,
    force_synthetic: bool = False,
    camera_index: Optional[int] = None,
) -> FrameSource:
    """RGB camera frames, or the synthetic pattern when the camera cannot be opened."""
    synthetic = SyntheticSource(config.synthetic_width, config.synthetic_height)
    if force_synthetic:
        return synthetic
    index = config.camera_index if camera_index is None else camera_index
    try:
        return CameraSource(index, rgb=True)
    except CameraError as exc:
        logger.warning("%s Falling back to synthetic test pattern.", exc)
        return synthetic
