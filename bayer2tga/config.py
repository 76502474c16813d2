"""Frame geometry and Bayer mosaic layout"""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidGeometry

# TGA stores width and height as unsigned 16-bit fields
MAX_DIMENSION = 0xFFFF
BYTES_PER_SAMPLE = 2
SAMPLES_PER_BLOCK = 4


class MosaicPattern(Enum):
    """Position of each colour site inside a 2x2 Bayer block.

    Values are (row, column) offsets for R, Gr (green in the red row),
    Gb (green in the blue row) and B, in that order.
    """

    RGGB = ((0, 0), (0, 1), (1, 0), (1, 1))
    GRBG = ((0, 1), (0, 0), (1, 1), (1, 0))
    GBRG = ((1, 0), (1, 1), (0, 0), (0, 1))
    BGGR = ((1, 1), (1, 0), (0, 1), (0, 0))

    def offset(self, site):
        """Return the (row, column) offset of `site` ('R', 'Gr', 'Gb' or 'B')"""
        try:
            return self.value[SITES.index(site)]
        except ValueError:
            raise KeyError(f"unknown colour site {site!r}, expected one of {SITES}") from None


SITES = ("R", "Gr", "Gb", "B")


@dataclass(frozen=True)
class FrameGeometry:
    """Immutable description of one sensor frame and its RGB output.

    `width` and `height` count output pixels, i.e. 2x2 mosaic blocks, so the
    sensor grid itself is twice as large in each direction.
    """

    width: int = 1920
    height: int = 1080
    input_bits: int = 10
    output_bits: int = 8
    pattern: MosaicPattern = MosaicPattern.RGGB

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidGeometry(f"{name} must be an integer, got {value!r}")
            if not 0 < value <= MAX_DIMENSION:
                raise InvalidGeometry(f"{name} must be in 1..{MAX_DIMENSION}, got {value}")
        if not 1 <= self.input_bits <= 16:
            raise InvalidGeometry(f"input_bits must be in 1..16, got {self.input_bits}")
        if not 1 <= self.output_bits <= 8:
            raise InvalidGeometry(f"output_bits must be in 1..8, got {self.output_bits}")
        if not isinstance(self.pattern, MosaicPattern):
            raise InvalidGeometry(f"unsupported mosaic pattern {self.pattern!r}")

    @property
    def input_max(self):
        return (1 << self.input_bits) - 1

    @property
    def output_max(self):
        return (1 << self.output_bits) - 1

    @property
    def sensor_shape(self):
        """(rows, columns) of the mosaiced sensor grid"""
        return (2 * self.height, 2 * self.width)

    @property
    def sample_count(self):
        return self.width * self.height * SAMPLES_PER_BLOCK

    @property
    def expected_bytes(self):
        return self.sample_count * BYTES_PER_SAMPLE


DEFAULT_GEOMETRY = FrameGeometry()
