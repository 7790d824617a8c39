"""Read item dimensions from image files."""
from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import ExifTags, Image

from simple_masonry.logging_utils import logger
from simple_masonry.type_defs import Dimension

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable
    from pathlib import Path

# EXIF orientations that rotate the picture by 90 or 270 degrees
_TRANSPOSED_ORIENTATIONS = frozenset({5, 6, 7, 8})


def read_dimension(path: str | Path) -> Dimension:
    """
    Read the displayed size of an image without decoding its pixels.

    Sizes follow the EXIF orientation tag, so a portrait photo stored
    sideways reports portrait dimensions. The path is kept as an extra
    field on the returned dimension.

    Raises:
        FileNotFoundError: If the image file does not exist
        OSError: If the file is not a readable image

    """
    try:
        with Image.open(path) as img:
            width, height = img.size
            orientation = img.getexif().get(ExifTags.Base.Orientation)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error reading image '{path}': {e!s}"
        raise OSError(msg) from e

    if orientation in _TRANSPOSED_ORIENTATIONS:
        width, height = height, width
    logger.debug("Read %s: %dx%d", path, width, height)
    return Dimension(width=width, height=height, path=str(path))


def read_dimensions(paths: Iterable[str | Path]) -> list[Dimension]:
    """Read dimensions for several images, preserving their order."""
    return [read_dimension(path) for path in paths]
