import io

from PIL import Image, UnidentifiedImageError

from services.errors import ExtractionError
from services.pipeline.base import ImageDecoder


class PillowImageDecoder(ImageDecoder):
    """Reads image dimensions from the header without decoding pixels."""

    name = "pillow"

    def decode(self, data: bytes) -> tuple[int, int]:
        try:
            with Image.open(io.BytesIO(data)) as image:
                width, height = image.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise ExtractionError(f"Could not decode image: {e}") from e
        return width, height
