from __future__ import annotations

import logging
import urllib.request
from pathlib import Path
from typing import Sequence, Tuple

import cv2
import numpy as np

from gender_cam.core.config import GENDER_LABELS, GENDER_NET_MEAN, AppConfig
from gender_cam.core.errors import ModelLoadError
from gender_cam.core.models import FaceRect, GenderResult

logger = logging.getLogger(__name__)

# Levi & Hassner age/gender Caffe models, as mirrored for the OpenCV samples.
_GENDER_PROTO_URLS = [
    "https://raw.githubusercontent.com/Isfhan/age-gender-detection/master/gender_deploy.prototxt",
]
_GENDER_MODEL_URLS = [
    "https://raw.githubusercontent.com/Isfhan/age-gender-detection/master/gender_net.caffemodel",
]


def _download(urls: list[str], dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    last_err: Exception | None = None
    for url in urls:
        try:
            logger.info("Gender net: downloading %s", url)
            urllib.request.urlretrieve(url, dest)
            return
        except Exception as exc:
            last_err = exc
            logger.warning("Gender net: download failed from %s: %s", url, exc)
    raise ModelLoadError(f"Could not download {dest.name}") from last_err


def ensure_model_files(config: AppConfig) -> Tuple[Path, Path]:
    """Return (prototxt, caffemodel), fetching whichever is missing."""
    prototxt = config.gender_proto_path
    caffemodel = config.gender_model_path
    if not prototxt.exists():
        _download(_GENDER_PROTO_URLS, prototxt)
    if not caffemodel.exists():
        _download(_GENDER_MODEL_URLS, caffemodel)
    return prototxt, caffemodel


def load_gender_net(prototxt: Path, caffemodel: Path) -> cv2.dnn_Net:
    try:
        net = cv2.dnn.readNetFromCaffe(str(prototxt), str(caffemodel))
    except cv2.error as exc:
        raise ModelLoadError(f"Failed to load gender model: {exc}") from exc
    if net.empty():
        raise ModelLoadError("Failed to load gender model!")
    return net


class NetGenderClassifier:
    """Two-class Caffe network; the arg-max class is the label."""

    def __init__(
        self,
        net,
        *,
        labels: Sequence[str] = GENDER_LABELS,
        mean: Tuple[float, float, float] = GENDER_NET_MEAN,
        input_size: int = 227,
    ) -> None:
        self._net = net
        self.labels = tuple(labels)
        self.mean = mean
        self.input_size = input_size

    @classmethod
    def from_config(cls, config: AppConfig) -> "NetGenderClassifier":
        prototxt, caffemodel = ensure_model_files(config)
        return cls(
            load_gender_net(prototxt, caffemodel),
            labels=config.gender_labels,
            mean=config.gender_mean,
            input_size=config.gender_input_size,
        )

    def _blob(self, face: np.ndarray) -> np.ndarray:
        size = (self.input_size, self.input_size)
        resized = cv2.resize(face, size, interpolation=cv2.INTER_LINEAR)
        return cv2.dnn.blobFromImage(
            resized,
            scalefactor=1.0,
            size=size,
            mean=self.mean,
            swapRB=False,
            crop=False,
        )

    def classify(self, image: np.ndarray, rect: FaceRect) -> GenderResult:
        height, width = image.shape[:2]
        clipped = rect.clip(width, height)
        if clipped is None:
            raise ValueError(f"Face rect {rect.corners()} lies outside the frame")
        x1, y1, x2, y2 = clipped.corners()
        self._net.setInput(self._blob(image[y1:y2, x1:x2]))
        probs = np.asarray(self._net.forward()).reshape(-1)
        class_id = int(probs.argmax())
        confidence = float(np.clip(probs[class_id], 0.0, 1.0))
        return GenderResult(label=self.labels[class_id], confidence=confidence)
