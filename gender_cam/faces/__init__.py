"""Face detectors: OpenCV Haar cascade and skin-colour window scan."""

from .cascade import CascadeFaceDetector
from .skin import SkinFaceDetector, filter_face_candidates, scan_skin_windows

__all__ = [
    "CascadeFaceDetector",
    "SkinFaceDetector",
    "filter_face_candidates",
    "scan_skin_windows",
]
