from __future__ import annotations

import numpy as np

from gender_cam.core.config import HeuristicConfig
from gender_cam.core.models import FaceRect
from gender_cam.faces.skin import (
    SkinFaceDetector,
    filter_face_candidates,
    has_variation,
    is_face_candidate,
    is_skin,
    scan_skin_windows,
)

SKIN = (220, 170, 140)
BACKGROUND = (30, 50, 80)


def _canvas(width: int = 200, height: int = 160) -> np.ndarray:
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:] = BACKGROUND
    return img


def test_skin_rule_accepts_skin_and_rejects_background() -> None:
    pixels = np.array([[SKIN, BACKGROUND, (200, 200, 200), (120, 130, 40)]], dtype=np.uint8)
    mask = is_skin(pixels)
    assert mask.tolist() == [[True, False, False, False]]


def test_uniform_block_has_no_variation() -> None:
    block = np.full((60, 60, 3), 128, dtype=np.uint8)
    assert has_variation(block) is False


def test_uniform_skin_window_is_rejected_as_candidate() -> None:
    img = np.zeros((60, 60, 3), dtype=np.uint8)
    img[:] = SKIN
    rect = FaceRect(x=0, y=0, width=60, height=60)
    assert not is_face_candidate(img, rect)
    assert filter_face_candidates(img, [rect]) == []


def test_textured_block_has_variation() -> None:
    block = np.zeros((60, 60, 3), dtype=np.uint8)
    block[::2] = 200
    assert has_variation(block)


def test_scan_finds_window_overlapping_skin_rectangle() -> None:
    img = _canvas()
    skin_rect = FaceRect(x=70, y=40, width=70, height=70)
    x1, y1, x2, y2 = skin_rect.corners()
    img[y1:y2, x1:x2] = SKIN

    windows = scan_skin_windows(img)

    assert windows
    assert any(window.overlaps(skin_rect) for window in windows)
    assert all(window.width == 60 and window.height == 60 for window in windows)
    assert all(window.confidence > 0.3 for window in windows)


def test_scan_without_skin_finds_nothing() -> None:
    assert scan_skin_windows(_canvas()) == []


def test_scan_on_image_smaller_than_window() -> None:
    img = np.zeros((40, 40, 3), dtype=np.uint8)
    img[:] = SKIN
    assert scan_skin_windows(img) == []


def test_candidate_filter_rejects_out_of_range_aspect() -> None:
    img = np.zeros((100, 200, 3), dtype=np.uint8)
    img[:, ::2] = SKIN
    wide = FaceRect(x=0, y=0, width=150, height=60)
    square = FaceRect(x=0, y=0, width=60, height=60)
    assert not is_face_candidate(img, wide)
    assert is_face_candidate(img, square)


def test_detector_keeps_boundary_windows_of_skin_patch() -> None:
    img = _canvas()
    img[40:110, 70:140] = SKIN
    faces = SkinFaceDetector(HeuristicConfig()).detect(img)

    assert faces
    for face in faces:
        x1, y1, x2, y2 = face.corners()
        assert has_variation(img[y1:y2, x1:x2])
