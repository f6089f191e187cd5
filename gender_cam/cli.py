"""Entry points behind the scripts in scripts/; each returns a process exit code."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from gender_cam.capture import (
    CameraSource,
    HeuristicMenu,
    SnapshotWriter,
    open_heuristic_source,
    run_live,
)
from gender_cam.capture.overlay import WindowDisplay
from gender_cam.core.config import AppConfig
from gender_cam.core.env import configure_logging, load_dotenv_if_present
from gender_cam.core.errors import CameraError, ModelLoadError
from gender_cam.faces import CascadeFaceDetector, SkinFaceDetector
from gender_cam.gender import HeuristicGenderClassifier, NetGenderClassifier
from gender_cam.gender.network import ensure_model_files

EXIT_OK = 0
EXIT_INIT_FAILURE = -1


def _live_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.from_env()
    overrides = {}
    if args.camera is not None:
        overrides["camera_index"] = args.camera
    if args.cascade is not None:
        overrides["cascade_path"] = str(args.cascade)
    if args.model_dir is not None:
        overrides["model_dir"] = args.model_dir
    if args.snapshot_dir is not None:
        overrides["snapshot_dir"] = args.snapshot_dir
    return config.model_copy(update=overrides)


def live_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Label faces in a live webcam feed.")
    parser.add_argument("--camera", type=int, default=None, help="Capture device index.")
    parser.add_argument("--cascade", type=Path, default=None, help="Haar cascade XML file.")
    parser.add_argument(
        "--model-dir",
        type=Path,
        default=None,
        help="Directory holding gender_deploy.prototxt and gender_net.caffemodel.",
    )
    parser.add_argument(
        "--snapshot-dir", type=Path, default=None, help="Where captured_<n>.jpg files go."
    )
    args = parser.parse_args(argv)

    load_dotenv_if_present()
    configure_logging()
    config = _live_config(args)

    try:
        source = CameraSource(config.camera_index)
    except CameraError as exc:
        print(exc, file=sys.stderr)
        return EXIT_INIT_FAILURE
    try:
        detector = CascadeFaceDetector.from_config(config)
        classifier = NetGenderClassifier.from_config(config)
    except ModelLoadError as exc:
        source.release()
        print(exc, file=sys.stderr)
        return EXIT_INIT_FAILURE

    print("Press 's' to save image, 'q' to quit.")
    run_live(
        source,
        detector,
        classifier,
        SnapshotWriter(config.snapshot_dir, prefix=config.snapshot_prefix),
        WindowDisplay(config.window_title),
    )
    return EXIT_OK


def heuristic_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Heuristic gender detection menu.")
    parser.add_argument("--camera", type=int, default=None, help="Capture device index.")
    parser.add_argument(
        "--synthetic", action="store_true", help="Skip the camera and use a test pattern."
    )
    args = parser.parse_args(argv)

    load_dotenv_if_present()
    configure_logging()
    config = AppConfig.from_env()

    source = open_heuristic_source(
        config, force_synthetic=args.synthetic, camera_index=args.camera
    )
    HeuristicMenu(
        source,
        SkinFaceDetector(config.heuristic),
        HeuristicGenderClassifier(config.heuristic),
    ).run()
    return EXIT_OK


def fetch_models_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Download the Caffe gender network.")
    parser.parse_args(argv)

    load_dotenv_if_present()
    configure_logging()
    try:
        prototxt, caffemodel = ensure_model_files(AppConfig.from_env())
    except ModelLoadError as exc:
        print(exc, file=sys.stderr)
        return EXIT_INIT_FAILURE
    print(f"Models ready:\n  {prototxt}\n  {caffemodel}")
    return EXIT_OK
