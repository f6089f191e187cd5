from __future__ import annotations

import logging
from pathlib import Path

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class SnapshotWriter:
    """Writes frames as <prefix><n><suffix> with n strictly increasing per run."""

    def __init__(
        self,
        directory: str | Path = ".",
        *,
        prefix: str = "captured_",
        suffix: str = ".jpg",
    ) -> None:
        self.directory = Path(directory)
        self.prefix = prefix
        self.suffix = suffix
        self._next_index = 0

    def next_path(self) -> Path:
        """Reserve the next unused filename."""
        while True:
            path = self.directory / f"{self.prefix}{self._next_index}{self.suffix}"
            self._next_index += 1
            if not path.exists():
                return path
            logger.debug("Snapshot %s exists; skipping", path)

    def save(self, frame: np.ndarray) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.next_path()
        if not cv2.imwrite(str(path), frame):
            raise OSError(f"Could not write snapshot {path}")
        logger.info("Snapshot written to %s", path)
        return path
