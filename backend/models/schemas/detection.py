"""Regions reported by the portfolio image detector."""

from pydantic import BaseModel, ConfigDict, Field


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class DetectedRegion(BaseModel):
    """A labelled box with the detector's fixed score for that label."""
    model_config = ConfigDict(frozen=True)

    name: str
    bounding_box: BoundingBox = BoundingBox()
    score: float = Field(default=0.0, ge=0.0, le=1.0)
