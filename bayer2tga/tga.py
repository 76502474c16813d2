"""Uncompressed truecolor TGA output"""

import logging
import os
import struct
from typing import NamedTuple

from .errors import InvalidGeometry, ResourceUnavailable, SizeMismatch

logger = logging.getLogger(__name__)

HEADER_FORMAT = struct.Struct("<BBBHHBHHHHBB")
HEADER_SIZE = HEADER_FORMAT.size  # 18
IMAGE_TYPE_TRUECOLOR = 2
BITS_PER_PIXEL = 24
DESCRIPTOR_TOP_LEFT = 32


class TgaHeader(NamedTuple):
    """The 18 byte TGA header; every field not listed by the caller is 0"""

    width: int
    height: int
    id_length: int = 0
    colormap_type: int = 0
    image_type: int = IMAGE_TYPE_TRUECOLOR
    colormap_first: int = 0
    colormap_length: int = 0
    colormap_depth: int = 0
    x_origin: int = 0
    y_origin: int = 0
    bits_per_pixel: int = BITS_PER_PIXEL
    descriptor: int = DESCRIPTOR_TOP_LEFT

    def pack(self):
        if not (0 < self.width <= 0xFFFF and 0 < self.height <= 0xFFFF):
            raise InvalidGeometry(f"{self.width}x{self.height} does not fit a TGA header")
        return HEADER_FORMAT.pack(
            self.id_length,
            self.colormap_type,
            self.image_type,
            self.colormap_first,
            self.colormap_length,
            self.colormap_depth,
            self.x_origin,
            self.y_origin,
            self.width,
            self.height,
            self.bits_per_pixel,
            self.descriptor,
        )

    @classmethod
    def unpack(cls, data):
        (id_length, colormap_type, image_type, colormap_first, colormap_length, colormap_depth,
         x_origin, y_origin, width, height, bits_per_pixel, descriptor) = HEADER_FORMAT.unpack(data)
        return cls(width, height, id_length, colormap_type, image_type, colormap_first,
                   colormap_length, colormap_depth, x_origin, y_origin, bits_per_pixel, descriptor)


def write_tga(image, path):
    """Write `image` as header + BGR rows, top row first.

    A failure after the header has been written leaves a truncated file.
    """
    header = TgaHeader(image.width, image.height).pack()
    logger.info(f"Saving to {path}...")
    try:
        f = open(path, "wb")
    except OSError as exc:
        raise ResourceUnavailable(path, "writing", exc) from exc
    with f:
        try:
            f.write(header)
            f.write(image.tobytes())
            f.flush()
        except OSError as exc:
            raise ResourceUnavailable(path, "write", exc) from exc
    logger.debug(f"Wrote {HEADER_SIZE + image.pixels.size} bytes to {path}")


def read_tga_header(path):
    """Parse the header of a TGA file written by write_tga"""
    try:
        with open(path, "rb") as f:
            data = f.read(HEADER_SIZE)
    except OSError as exc:
        raise ResourceUnavailable(path, "reading", exc) from exc
    if len(data) != HEADER_SIZE:
        raise SizeMismatch(path, HEADER_SIZE, len(data))
    return TgaHeader.unpack(data)


def save_preview(image, path):
    """Save the image in any format Pillow can write, picked from the file name, e.g. PNG"""
    from PIL import Image

    ext = os.path.splitext(path)[1].lower()
    image_format = Image.registered_extensions().get(ext)
    if image_format is None or image_format not in Image.SAVE:
        raise ResourceUnavailable(path, "writing", ValueError(f"Pillow cannot write {ext or 'extensionless'} files"))

    logger.info(f"Saving preview to {path}...")
    try:
        Image.fromarray(image.to_rgb()).save(path, format=image_format)
    except (OSError, ValueError) as exc:
        raise ResourceUnavailable(path, "writing", exc) from exc
