"""Simple 2x2 Bayer to RGB conversion"""

import logging

import numpy as np

from .errors import InvalidGeometry

logger = logging.getLogger(__name__)

# Channel order of RGBImage.pixels, the order TGA stores them in
BLUE, GREEN, RED = 0, 1, 2


class RGBImage:
    """8-bit image owned as a (height, width, 3) array in B, G, R order"""

    def __init__(self, pixels):
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise InvalidGeometry(f"expected a (height, width, 3) array, got shape {pixels.shape}")
        self.pixels = pixels.astype(np.uint8, copy=False)

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    def pixel(self, x, y):
        """(r, g, b) of the pixel at column x, row y"""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        b, g, r = (int(v) for v in self.pixels[y, x])
        return r, g, b

    def to_rgb(self):
        return np.ascontiguousarray(self.pixels[:, :, ::-1])

    def tobytes(self):
        return np.ascontiguousarray(self.pixels).tobytes()


def scale_samples(values, geometry):
    """Reduce samples from the input bit depth to the output bit depth.

    trunc(v * output_max / input_max), computed on integers so that full
    scale maps exactly to full scale (1023 -> 255). Values above input_max
    are clipped first.
    """
    values = np.minimum(np.asarray(values, dtype=np.uint32), geometry.input_max)
    return (values * geometry.output_max // geometry.input_max).astype(np.uint8)


def demosaic(frame):
    """Turn every 2x2 mosaic block into one RGB pixel.

    Red and blue are taken as is, the two greens are averaged (integer
    division) before all three are scaled to the output depth.
    """
    frame.check()
    geometry = frame.geometry

    # Extract the colour sites (strided views, no copy)
    r = frame.plane("R")
    gr = frame.plane("Gr").astype(np.uint32)
    gb = frame.plane("Gb").astype(np.uint32)
    b = frame.plane("B")

    g = (gr + gb) // 2

    pixels = np.empty((geometry.height, geometry.width, 3), dtype=np.uint8)
    pixels[:, :, RED] = scale_samples(r, geometry)
    pixels[:, :, GREEN] = scale_samples(g, geometry)
    pixels[:, :, BLUE] = scale_samples(b, geometry)

    logger.debug(f"Demosaiced {frame.data.shape[1]}x{frame.data.shape[0]} sensor grid "
                 f"to {geometry.width}x{geometry.height} RGB")
    return RGBImage(pixels)
