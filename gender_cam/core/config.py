from __future__ import annotations

from pathlib import Path
from typing import Tuple

import cv2
from pydantic import BaseModel, Field, field_validator, model_validator

from gender_cam.core.env import env_float, env_int, env_str

_ENV_PREFIX = "GENDER_CAM_"

GENDER_LABELS: Tuple[str, str] = ("Male", "Female")
# Per-channel (B, G, R) means the age/gender Caffe models were trained with.
GENDER_NET_MEAN: Tuple[float, float, float] = (78.4263377603, 87.7689143744, 114.895847746)


def _default_cascade_path() -> str:
    return str(Path(cv2.data.haarcascades) / "haarcascade_frontalface_default.xml")


def _default_model_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "models" / "gender"


class HeuristicConfig(BaseModel):
    """Thresholds for the skin-window detector and the rule-based classifier."""

    window_size: int = Field(default=60, gt=0)
    stride: int = Field(default=10, gt=0)
    min_skin_fraction: float = Field(default=0.3, ge=0.0, le=1.0)
    aspect_min: float = 0.7
    aspect_max: float = 1.3
    min_variance: float = 100.0
    edge_threshold: float = 30.0

    @model_validator(mode="after")
    def _check_aspect_range(self) -> "HeuristicConfig":
        if self.aspect_min > self.aspect_max:
            raise ValueError("aspect_min must not exceed aspect_max")
        return self


class AppConfig(BaseModel):
    camera_index: int = 0
    cascade_path: str = Field(default_factory=_default_cascade_path)
    model_dir: Path = Field(default_factory=_default_model_dir)
    gender_proto: str = "gender_deploy.prototxt"
    gender_model: str = "gender_net.caffemodel"
    gender_labels: Tuple[str, ...] = GENDER_LABELS
    gender_mean: Tuple[float, float, float] = GENDER_NET_MEAN
    gender_input_size: int = 227
    cascade_scale_factor: float = Field(default=1.1, gt=1.0)
    cascade_min_neighbors: int = Field(default=3, ge=0)
    cascade_min_size: int = Field(default=0, ge=0)
    snapshot_dir: Path = Path(".")
    snapshot_prefix: str = "captured_"
    window_title: str = "Gender Detection"
    synthetic_width: int = Field(default=640, gt=0)
    synthetic_height: int = Field(default=480, gt=0)
    heuristic: HeuristicConfig = Field(default_factory=HeuristicConfig)

    @field_validator("gender_labels")
    @classmethod
    def _two_labels(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(v) != 2:
            raise ValueError("gender_labels must hold exactly two entries")
        return v

    @property
    def gender_proto_path(self) -> Path:
        return self.model_dir / self.gender_proto

    @property
    def gender_model_path(self) -> Path:
        return self.model_dir / self.gender_model

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from GENDER_CAM_* environment variables."""
        defaults = cls()
        heuristic = HeuristicConfig(
            window_size=env_int(f"{_ENV_PREFIX}WINDOW_SIZE", defaults.heuristic.window_size),
            stride=env_int(f"{_ENV_PREFIX}STRIDE", defaults.heuristic.stride),
            min_skin_fraction=env_float(
                f"{_ENV_PREFIX}MIN_SKIN_FRACTION", defaults.heuristic.min_skin_fraction
            ),
            aspect_min=env_float(f"{_ENV_PREFIX}ASPECT_MIN", defaults.heuristic.aspect_min),
            aspect_max=env_float(f"{_ENV_PREFIX}ASPECT_MAX", defaults.heuristic.aspect_max),
            min_variance=env_float(f"{_ENV_PREFIX}MIN_VARIANCE", defaults.heuristic.min_variance),
            edge_threshold=env_float(
                f"{_ENV_PREFIX}EDGE_THRESHOLD", defaults.heuristic.edge_threshold
            ),
        )
        return cls(
            camera_index=env_int(f"{_ENV_PREFIX}CAMERA_INDEX", defaults.camera_index),
            cascade_path=env_str(f"{_ENV_PREFIX}CASCADE_PATH", defaults.cascade_path),
            model_dir=Path(env_str(f"{_ENV_PREFIX}MODEL_DIR", str(defaults.model_dir))),
            cascade_scale_factor=env_float(
                f"{_ENV_PREFIX}CASCADE_SCALE_FACTOR", defaults.cascade_scale_factor
            ),
            cascade_min_neighbors=env_int(
                f"{_ENV_PREFIX}CASCADE_MIN_NEIGHBORS", defaults.cascade_min_neighbors
            ),
            cascade_min_size=env_int(f"{_ENV_PREFIX}CASCADE_MIN_SIZE", defaults.cascade_min_size),
            snapshot_dir=Path(env_str(f"{_ENV_PREFIX}SNAPSHOT_DIR", str(defaults.snapshot_dir))),
            snapshot_prefix=env_str(f"{_ENV_PREFIX}SNAPSHOT_PREFIX", defaults.snapshot_prefix),
            heuristic=heuristic,
        )
