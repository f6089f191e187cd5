from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image


def load_image_rgb(path: str | Path) -> np.ndarray:
    """Read an image file into an (H, W, 3) uint8 RGB array."""
    image_path = Path(path).expanduser()
    if not image_path.is_file():
        raise FileNotFoundError(f"File not found: {image_path}")
    try:
        with Image.open(image_path) as img:
            return np.asarray(img.convert("RGB"), dtype=np.uint8).copy()
    except (OSError, Image.DecompressionBombError) as exc:
        # OSError covers UnidentifiedImageError and truncated data.
        raise ValueError(f"Not a readable image: {image_path}") from exc
