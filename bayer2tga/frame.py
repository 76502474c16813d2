"""Raw Bayer frame buffer and the reader that fills it"""

import logging
import os

import numpy as np

from .config import DEFAULT_GEOMETRY, SITES
from .errors import InvalidGeometry, ResourceUnavailable, SizeMismatch

logger = logging.getLogger(__name__)

# Samples are stored little-endian on disk regardless of the host
RAW_DTYPE = np.dtype("<u2")


class SensorFrame:
    """One mosaiced sensor frame, owned as a (2*height, 2*width) uint16 array.

    Output pixel (x, y) is built from the 2x2 block whose top-left sample sits
    at sensor row 2*y, column 2*x. Where each colour lives inside the block is
    decided by the geometry's mosaic pattern.
    """

    def __init__(self, data, geometry=DEFAULT_GEOMETRY):
        data = np.asarray(data)
        if data.shape != geometry.sensor_shape:
            raise InvalidGeometry(
                f"sensor buffer has shape {data.shape}, geometry {geometry.width}x{geometry.height} "
                f"needs {geometry.sensor_shape}"
            )
        self.geometry = geometry
        self.data = data.astype(np.uint16, copy=True)

    @classmethod
    def from_samples(cls, samples, geometry=DEFAULT_GEOMETRY):
        """Build a frame from a flat sequence of samples in file order"""
        samples = np.asarray(samples, dtype=np.uint16)
        if samples.size != geometry.sample_count:
            raise InvalidGeometry(
                f"got {samples.size} samples, geometry needs {geometry.sample_count}"
            )
        return cls(samples.reshape(geometry.sensor_shape), geometry)

    def index(self, x, y, site):
        """Sensor (row, column) of colour `site` for output pixel (x, y)"""
        if not (0 <= x < self.geometry.width and 0 <= y < self.geometry.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.geometry.width}x{self.geometry.height} frame"
            )
        row, col = self.geometry.pattern.offset(site)
        return 2 * y + row, 2 * x + col

    def sample(self, x, y, site):
        return int(self.data[self.index(x, y, site)])

    def set_sample(self, x, y, site, value):
        self.data[self.index(x, y, site)] = value

    def plane(self, site):
        """Strided (height, width) view holding every sample of one colour site"""
        row, col = self.geometry.pattern.offset(site)
        return self.data[row::2, col::2]

    def planes(self):
        return {site: self.plane(site) for site in SITES}

    def check(self):
        """Raise InvalidGeometry if the buffer no longer matches the geometry"""
        if self.data.shape != self.geometry.sensor_shape:
            raise InvalidGeometry(
                f"sensor buffer has shape {self.data.shape}, expected {self.geometry.sensor_shape}"
            )


def _file_size(f, consumed):
    """Total size of an open file, `consumed` bytes of which were already read"""
    size = os.fstat(f.fileno()).st_size
    if size >= consumed:
        return size
    # pipes and other streams report no size, count what is left instead
    rest = 0
    for chunk in iter(lambda: f.read(1 << 20), b""):
        rest += len(chunk)
    return consumed + rest


def read_raw_frame(path, geometry=DEFAULT_GEOMETRY, legacy=False):
    """Read exactly one raw frame from `path`.

    A file that is too small or too large raises SizeMismatch. With `legacy`
    set, a short file is padded with zeros and trailing bytes are dropped
    instead, as older captures were handled.
    """
    expected = geometry.expected_bytes
    logger.info(f"Reading {path}...")
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise ResourceUnavailable(path, "reading", exc) from exc
    with f:
        try:
            raw = f.read(expected)
            actual = len(raw)
            if actual == expected and f.read(1):
                actual = _file_size(f, expected + 1)
        except OSError as exc:
            raise ResourceUnavailable(path, "read", exc) from exc

    logger.debug(f"Expected bytes: {expected}, actual: {actual}")

    if actual < expected:
        if not legacy:
            raise SizeMismatch(path, expected, actual)
        logger.warning(f"File too small ({actual} < {expected} bytes), padding with zeros")
        raw = raw + bytes(expected - actual)
    elif actual > expected:
        if not legacy:
            raise SizeMismatch(path, expected, actual)
        logger.warning(f"File too large ({actual} > {expected} bytes), ignoring the rest")

    samples = np.frombuffer(raw, dtype=RAW_DTYPE)
    return SensorFrame.from_samples(samples, geometry)
