from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

import numpy as np

from gender_cam.capture.files import load_image_rgb
from gender_cam.core.interfaces import FaceDetector, FrameSource, GenderClassifier
from gender_cam.core.models import FaceAnalysis
from gender_cam.pipeline import analyze_frame

logger = logging.getLogger(__name__)

MENU_TEXT = """
=== Gender Detection (heuristic) ===
1. Capture and analyze
2. Load image from file
3. Exit"""

CAPTURE, LOAD, EXIT = 1, 2, 3


def format_results_table(analyses: Iterable[FaceAnalysis]) -> str:
    rows = list(analyses)
    if not rows:
        return "No faces detected."
    header = f"{'#':>3}  {'X':>5}  {'Y':>5}  {'W':>5}  {'H':>5}  {'Gender':<8}  {'Confidence':>10}"
    lines = [header, "-" * len(header)]
    for idx, item in enumerate(rows, start=1):
        rect, result = item.rect, item.result
        lines.append(
            f"{idx:>3}  {rect.x:>5}  {rect.y:>5}  {rect.width:>5}  {rect.height:>5}  "
            f"{result.label:<8}  {result.confidence * 100:>9.1f}%"
        )
    lines.append(f"Detected {len(rows)} face(s).")
    return "\n".join(lines)


def parse_choice(raw: str) -> Optional[int]:
    """Menu option number, or None for anything outside 1-3."""
    try:
        choice = int(raw.strip())
    except ValueError:
        return None
    return choice if choice in (CAPTURE, LOAD, EXIT) else None


class HeuristicMenu:
    """Blocking numbered menu; one detect/classify/print cycle per selection."""

    def __init__(
        self,
        source: FrameSource,
        detector: FaceDetector,
        classifier: GenderClassifier,
        *,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.source = source
        self.detector = detector
        self.classifier = classifier
        self._prompt = prompt
        self._echo = echo
        self.runs = 0

    def analyze(self, image: np.ndarray) -> list[FaceAnalysis]:
        analyses = analyze_frame(image, self.detector, self.classifier)
        self.runs += 1
        self._echo(format_results_table(analyses))
        return analyses

    def capture_and_analyze(self) -> None:
        frame = self.source.read()
        if frame is None:
            self._echo("Failed to capture frame.")
            return
        self.analyze(frame)

    def load_and_analyze(self) -> None:
        try:
            path = self._prompt("Image path: ").strip()
        except EOFError:
            return
        try:
            image = load_image_rgb(path)
        except (FileNotFoundError, ValueError) as exc:
            logger.info("Menu: could not load %s: %s", path, exc)
            self._echo(str(exc))
            return
        self.analyze(image)

    def run(self) -> None:
        try:
            while True:
                self._echo(MENU_TEXT)
                try:
                    raw = self._prompt("Choice: ")
                except EOFError:
                    break
                choice = parse_choice(raw)
                if choice is None:
                    self._echo("Invalid choice. Enter 1, 2 or 3.")
                    continue
                if choice == EXIT:
                    break
                if choice == CAPTURE:
                    self.capture_and_analyze()
                else:
                    self.load_and_analyze()
        finally:
            self.source.release()
