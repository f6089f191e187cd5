from __future__ import annotations

from typing import Iterable

import cv2
import numpy as np

from gender_cam.core.models import FaceAnalysis

BOX_COLOR = (0, 255, 0)
TEXT_COLOR = (255, 0, 255)


def draw_analyses(frame: np.ndarray, analyses: Iterable[FaceAnalysis]) -> np.ndarray:
    """Draw boxes and labels onto the frame in place; returns the frame."""
    for analysis in analyses:
        x1, y1, x2, y2 = analysis.rect.corners()
        cv2.rectangle(frame, (x1, y1), (x2, y2), BOX_COLOR, 2)
        label = analysis.result.label
        cv2.putText(
            frame,
            label,
            (x1, max(0, y1 - 10)),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.8,
            TEXT_COLOR,
            2,
        )
    return frame


class WindowDisplay:
    def __init__(self, title: str = "Gender Detection") -> None:
        self.title = title

    def show(self, frame: np.ndarray) -> None:
        cv2.imshow(self.title, frame)

    def poll_key(self) -> str:
        """Pump the window event loop once; '' when no key was pressed."""
        code = cv2.waitKey(1) & 0xFF
        if code == 0xFF:
            return ""
        return chr(code)

    def close(self) -> None:
        cv2.destroyAllWindows()
