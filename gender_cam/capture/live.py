from __future__ import annotations

import logging
from typing import Callable, Protocol

import numpy as np

from gender_cam.capture.overlay import draw_analyses
from gender_cam.capture.snapshots import SnapshotWriter
from gender_cam.core.interfaces import FaceDetector, FrameSource, GenderClassifier
from gender_cam.pipeline import analyze_frame

logger = logging.getLogger(__name__)

QUIT_KEY = "q"
SAVE_KEY = "s"


class Display(Protocol):
    def show(self, frame: np.ndarray) -> None:
        ...

    def poll_key(self) -> str:
        ...

    def close(self) -> None:
        ...


def run_live(
    source: FrameSource,
    detector: FaceDetector,
    classifier: GenderClassifier,
    snapshots: SnapshotWriter,
    display: Display,
    *,
    echo: Callable[[str], None] = print,
) -> int:
    """Run the detect/classify/draw loop until 'q' or a failed frame.

    Returns the number of frames processed. The source and display are
    released on exit, including when an exception propagates.
    """
    frames = 0
    try:
        while True:
            frame = source.read()
            if frame is None:
                logger.warning("Live loop: no frame from source; stopping")
                break
            draw_analyses(frame, analyze_frame(frame, detector, classifier))
            frames += 1
            display.show(frame)

            key = display.poll_key()
            if key == QUIT_KEY:
                break
            if key == SAVE_KEY:
                path = snapshots.save(frame)
                echo(f"Saved {path}")
    finally:
        source.release()
        display.close()
    return frames
