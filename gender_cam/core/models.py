from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

GenderLabel = Literal["Male", "Female"]


class FaceRect(BaseModel):
    """Axis-aligned face rectangle in pixel coordinates of the source frame."""

    x: int
    y: int
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    confidence: Optional[float] = None

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def corners(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.x + self.width, self.y + self.height

    def overlaps(self, other: "FaceRect") -> bool:
        ax1, ay1, ax2, ay2 = self.corners()
        bx1, by1, bx2, by2 = other.corners()
        return ax1 < bx2 and bx1 < ax2 and ay1 < by2 and by1 < ay2

    def clip(self, frame_width: int, frame_height: int) -> Optional["FaceRect"]:
        """Clamp to the frame; None when nothing of the rect is left inside."""
        x1, y1, x2, y2 = self.corners()
        x1, y1 = max(0, x1), max(0, y1)
        x2, y2 = min(frame_width, x2), min(frame_height, y2)
        if x2 <= x1 or y2 <= y1:
            return None
        return FaceRect(x=x1, y=y1, width=x2 - x1, height=y2 - y1, confidence=self.confidence)


class GenderResult(BaseModel):
    label: GenderLabel
    confidence: float = Field(ge=0.0, le=1.0)


class FaceFeatures(BaseModel):
    """Scalar inputs of the rule-based gender score."""

    brightness: float
    variance: float
    edge_density: float
    skin_tone_ratio: float


class FaceAnalysis(BaseModel):
    rect: FaceRect
    result: GenderResult
