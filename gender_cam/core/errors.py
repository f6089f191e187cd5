from __future__ import annotations


class ModelLoadError(RuntimeError):
    """Raised when a cascade or network cannot be loaded."""


class CameraError(RuntimeError):
    """Raised when the capture device cannot be opened."""
