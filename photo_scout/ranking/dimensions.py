import io
from typing import Tuple
from PIL import Image, UnidentifiedImageError
from ..error_handler import ImageDecodeError


def read_dimensions(data: bytes) -> Tuple[int, int]:
    """Read (width, height) from an encoded image's header

    Pillow opens images lazily, so only the header is parsed here; pixel
    data is never decoded.

    Raises:
        ImageDecodeError: payload is empty, not a recognised image format,
            or reports non-positive dimensions
    """
    if not data:
        raise ImageDecodeError("empty image payload")

    try:
        with Image.open(io.BytesIO(data)) as image:
            width, height = image.size
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(f"cannot read image header: {e}") from e

    if width <= 0 or height <= 0:
        raise ImageDecodeError(f"invalid image dimensions {width}x{height}")
    return width, height
