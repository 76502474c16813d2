"""Raw Bayer RG10 frame to TGA converter"""

from .config import DEFAULT_GEOMETRY, FrameGeometry, MosaicPattern
from .demosaic import RGBImage, demosaic, scale_samples
from .errors import Bayer2TgaError, DegenerateFrame, InvalidGeometry, ResourceUnavailable, SizeMismatch
from .frame import SensorFrame, read_raw_frame
from .normalize import FrameStatistics, frame_statistics, normalize_frame
from .tga import TgaHeader, read_tga_header, save_preview, write_tga
from .cli import convert

__version__ = "0.1.0"
