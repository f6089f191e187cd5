from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from gender_cam.core.config import AppConfig
from gender_cam.core.errors import ModelLoadError
from gender_cam.core.models import FaceRect
from gender_cam.gender import network
from gender_cam.gender.network import NetGenderClassifier, ensure_model_files

# Captured before the autouse fixture swaps it for a blocking stub.
_real_download = network._download


class FakeNet:
    def __init__(self, probs):
        self._probs = np.asarray(probs, dtype=np.float32)
        self.blobs: list[np.ndarray] = []

    def setInput(self, blob):
        self.blobs.append(blob)

    def forward(self):
        return self._probs


def _frame() -> np.ndarray:
    rng = np.random.default_rng(3)
    return rng.integers(0, 256, size=(120, 160, 3), dtype=np.uint8)


def test_argmax_picks_label_and_confidence() -> None:
    net = FakeNet([[0.1, 0.9]])
    result = NetGenderClassifier(net).classify(_frame(), FaceRect(x=10, y=10, width=50, height=60))
    assert result.label == "Female"
    assert result.confidence == pytest.approx(0.9)

    net = FakeNet([[0.7, 0.3]])
    result = NetGenderClassifier(net).classify(_frame(), FaceRect(x=10, y=10, width=50, height=60))
    assert result.label == "Male"
    assert result.confidence == pytest.approx(0.7)


def test_blob_is_resized_to_network_input() -> None:
    net = FakeNet([[0.6, 0.4]])
    NetGenderClassifier(net).classify(_frame(), FaceRect(x=0, y=0, width=40, height=30))
    assert net.blobs[0].shape == (1, 3, 227, 227)


def test_blob_subtracts_channel_means() -> None:
    net = FakeNet([[0.6, 0.4]])
    face = np.zeros((50, 50, 3), dtype=np.uint8)
    face[:] = (100, 100, 100)
    NetGenderClassifier(net).classify(face, FaceRect(x=0, y=0, width=50, height=50))
    blob = net.blobs[0]
    assert blob[0, 0, 0, 0] == pytest.approx(100 - 78.4263377603, rel=1e-4)
    assert blob[0, 2, 0, 0] == pytest.approx(100 - 114.895847746, rel=1e-4)


def test_rect_partly_outside_frame_is_clipped() -> None:
    net = FakeNet([[0.6, 0.4]])
    result = NetGenderClassifier(net).classify(
        _frame(), FaceRect(x=140, y=100, width=50, height=50)
    )
    assert result.label == "Male"


def test_rect_outside_frame_raises() -> None:
    net = FakeNet([[0.6, 0.4]])
    with pytest.raises(ValueError):
        NetGenderClassifier(net).classify(_frame(), FaceRect(x=500, y=500, width=20, height=20))


def test_missing_models_raise_model_load_error(tmp_path: Path) -> None:
    config = AppConfig(model_dir=tmp_path / "models")
    with pytest.raises(ModelLoadError):
        ensure_model_files(config)


def test_existing_models_are_not_downloaded(tmp_path: Path) -> None:
    config = AppConfig(model_dir=tmp_path)
    config.gender_proto_path.write_text("proto")
    config.gender_model_path.write_bytes(b"weights")
    assert ensure_model_files(config) == (config.gender_proto_path, config.gender_model_path)


def test_download_tries_each_url(monkeypatch, tmp_path: Path) -> None:
    attempts: list[str] = []

    def fake_retrieve(url, dest):
        attempts.append(url)
        if len(attempts) == 1:
            raise OSError("mirror down")
        Path(dest).write_bytes(b"ok")

    monkeypatch.setattr(network.urllib.request, "urlretrieve", fake_retrieve)
    dest = tmp_path / "sub" / "gender_net.caffemodel"
    _real_download(["http://a.invalid/x", "http://b.invalid/x"], dest)
    assert attempts == ["http://a.invalid/x", "http://b.invalid/x"]
    assert dest.read_bytes() == b"ok"


def test_unreadable_model_raises(tmp_path: Path) -> None:
    proto = tmp_path / "gender_deploy.prototxt"
    model = tmp_path / "gender_net.caffemodel"
    proto.write_text("not a prototxt {{{")
    model.write_bytes(b"\x00\x01")
    with pytest.raises(ModelLoadError):
        network.load_gender_net(proto, model)
