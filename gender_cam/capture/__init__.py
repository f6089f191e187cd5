"""Frame sources, snapshot writing, and the two interactive loops."""

from .camera import CameraSource
from .files import load_image_rgb
from .live import run_live
from .menu import HeuristicMenu, format_results_table
from .snapshots import SnapshotWriter
from .sources import open_heuristic_source
from .synthetic import SyntheticSource, synthetic_frame

__all__ = [
    "CameraSource",
    "HeuristicMenu",
    "SnapshotWriter",
    "SyntheticSource",
    "format_results_table",
    "load_image_rgb",
    "open_heuristic_source",
    "run_live",
    "synthetic_frame",
]
