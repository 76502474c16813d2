"""Convert a raw Bayer RG10 frame to a TGA image"""

import argparse
import logging
import sys

from .config import DEFAULT_GEOMETRY, FrameGeometry
from .demosaic import demosaic
from .errors import Bayer2TgaError
from .frame import read_raw_frame
from .normalize import normalize_frame
from .tga import save_preview, write_tga

logger = logging.getLogger(__name__)


def convert(raw_file, output, geometry=DEFAULT_GEOMETRY, normalize=True, legacy=False, preview=None):
    """Read one raw frame, stretch it, debayer it and save it as TGA"""
    frame = read_raw_frame(raw_file, geometry, legacy=legacy)

    if normalize:
        stats = normalize_frame(frame)
        logger.info(f"Sample range: {stats.min}..{stats.max}")

    logger.info("Converting Bayer to RGB...")
    image = demosaic(frame)

    write_tga(image, output)
    if preview:
        save_preview(image, preview)

    logger.info(f"✅ Saved to {output}")
    logger.info(f"   Size: {image.width}x{image.height}")
    return image


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="bayer2tga",
        description=__doc__,
        epilog="Example: bayer2tga frame.raw frame.tga",
    )
    parser.add_argument("raw_file", help="input raw file, 16-bit little-endian RGGB samples")
    parser.add_argument("output", help="output TGA file")
    parser.add_argument("--width", type=int, default=DEFAULT_GEOMETRY.width,
                        help="output width in pixels (default: %(default)s)")
    parser.add_argument("--height", type=int, default=DEFAULT_GEOMETRY.height,
                        help="output height in pixels (default: %(default)s)")
    parser.add_argument("--no-normalize", dest="normalize", action="store_false",
                        help="skip the min/max intensity stretch")
    parser.add_argument("--legacy-size", action="store_true",
                        help="pad short input with zeros and ignore extra bytes instead of failing")
    parser.add_argument("--preview", metavar="PATH",
                        help="also save the image through Pillow, e.g. as PNG")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s: %(message)s",
    )
    try:
        geometry = FrameGeometry(width=args.width, height=args.height)
        convert(args.raw_file, args.output, geometry,
                normalize=args.normalize, legacy=args.legacy_size, preview=args.preview)
    except Bayer2TgaError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
