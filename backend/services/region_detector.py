"""Placeholder portfolio detector driven by image dimensions only.

Stands in for a real object detector: no pixel is inspected, the boxes are
guesses at where a logo or a certificate usually sits on a page.
"""

from models.schemas import BoundingBox, DetectedRegion

LOGO_SCORE = 0.75
CERTIFICATE_SCORE = 0.80
DOCUMENT_SCORE = 0.70
UNKNOWN_SCORE = 0.5


def _logo_region(width: float, height: float) -> DetectedRegion:
    # Logos usually sit near the top-left corner
    return DetectedRegion(
        name="Logo",
        score=LOGO_SCORE,
        bounding_box=BoundingBox(
            x=min(50, width * 0.1),
            y=min(50, height * 0.1),
            width=min(100, width * 0.15),
            height=min(100, height * 0.15),
        ),
    )


def _certificate_region(width: float, height: float) -> DetectedRegion:
    return DetectedRegion(
        name="Certificate",
        score=CERTIFICATE_SCORE,
        bounding_box=BoundingBox(
            x=width * 0.2,
            y=height * 0.2,
            width=width * 0.6,
            height=height * 0.5,
        ),
    )


def fallback_region(name: str = "Document", score: float = DOCUMENT_SCORE) -> DetectedRegion:
    return DetectedRegion(
        name=name,
        score=score,
        bounding_box=BoundingBox(x=0, y=0, width=100, height=100),
    )


def detect_regions(width: float, height: float) -> list[DetectedRegion]:
    """Guess logo/certificate regions from the image size."""
    regions: list[DetectedRegion] = []
    if width > 200 and height > 200:
        regions.append(_logo_region(width, height))
    if width > 400 and height > 300:
        regions.append(_certificate_region(width, height))
    if not regions:
        regions.append(fallback_region())
    return regions
