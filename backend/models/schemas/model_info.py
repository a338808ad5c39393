"""Descriptive record for an entry of the static model catalog."""

from pydantic import BaseModel, ConfigDict


class ModelInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    type: str  # OCR, Matching, Classification
    metrics: dict[str, float] = {}
