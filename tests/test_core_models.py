from __future__ import annotations

import pytest
from pydantic import ValidationError

from gender_cam.core.config import AppConfig, HeuristicConfig
from gender_cam.core.models import FaceRect, GenderResult


def test_face_rect_geometry() -> None:
    rect = FaceRect(x=10, y=20, width=40, height=50, confidence=0.9)
    assert rect.corners() == (10, 20, 50, 70)
    assert rect.area == 2000
    assert rect.aspect_ratio == pytest.approx(0.8)


def test_face_rect_overlap() -> None:
    a = FaceRect(x=0, y=0, width=10, height=10)
    assert a.overlaps(FaceRect(x=5, y=5, width=10, height=10))
    assert not a.overlaps(FaceRect(x=10, y=0, width=10, height=10))


def test_face_rect_clip() -> None:
    rect = FaceRect(x=-5, y=90, width=20, height=20)
    clipped = rect.clip(100, 100)
    assert clipped is not None
    assert clipped.corners() == (0, 90, 15, 100)
    assert FaceRect(x=200, y=0, width=5, height=5).clip(100, 100) is None


def test_face_rect_rejects_empty_size() -> None:
    with pytest.raises(ValidationError):
        FaceRect(x=0, y=0, width=0, height=10)


def test_gender_result_validation() -> None:
    assert GenderResult(label="Male", confidence=0.7).label == "Male"
    with pytest.raises(ValidationError):
        GenderResult(label="Unknown", confidence=0.5)
    with pytest.raises(ValidationError):
        GenderResult(label="Female", confidence=1.5)


def test_config_defaults() -> None:
    config = AppConfig()
    assert config.gender_labels == ("Male", "Female")
    assert config.heuristic.window_size == 60
    assert config.heuristic.stride == 10
    assert config.heuristic.min_skin_fraction == pytest.approx(0.3)
    assert config.heuristic.min_variance == pytest.approx(100.0)
    assert config.gender_proto_path.name == "gender_deploy.prototxt"
    assert config.cascade_path.endswith("haarcascade_frontalface_default.xml")


def test_config_validation() -> None:
    with pytest.raises(ValidationError):
        AppConfig(gender_labels=("Male",))
    with pytest.raises(ValidationError):
        HeuristicConfig(aspect_min=1.5, aspect_max=1.0)


def test_config_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("GENDER_CAM_CAMERA_INDEX", "2")
    monkeypatch.setenv("GENDER_CAM_SNAPSHOT_DIR", str(tmp_path))
    monkeypatch.setenv("GENDER_CAM_STRIDE", "5")
    monkeypatch.setenv("GENDER_CAM_MIN_VARIANCE", "250")
    monkeypatch.setenv("GENDER_CAM_MODEL_DIR", "")

    config = AppConfig.from_env()

    assert config.camera_index == 2
    assert config.snapshot_dir == tmp_path
    assert config.heuristic.stride == 5
    assert config.heuristic.min_variance == pytest.approx(250.0)
    assert config.model_dir == AppConfig().model_dir
