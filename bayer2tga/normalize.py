"""Min/max intensity stretch of a raw frame"""

import logging
from typing import NamedTuple

import numpy as np

from .errors import DegenerateFrame

logger = logging.getLogger(__name__)

DEGENERATE_POLICIES = ("skip", "raise")


class FrameStatistics(NamedTuple):
    min: int
    max: int

    @property
    def span(self):
        return self.max - self.min

    @property
    def uniform(self):
        return self.max == self.min


def frame_statistics(frame):
    """Smallest and largest sample over every colour site of the frame"""
    return FrameStatistics(int(frame.data.min()), int(frame.data.max()))


def normalize_frame(frame, on_degenerate="skip"):
    """Stretch the frame in place so its samples span 0..input_max.

    Each sample v becomes round((v - min) * input_max / (max - min)), halves
    rounded away from zero. The division is done on integers so the result is
    exact and re-normalizing an already stretched frame changes nothing.

    A uniform frame has no range to stretch. With on_degenerate="skip" it is
    left untouched (a warning is logged); with "raise" DegenerateFrame is
    raised.

    Returns the statistics measured before the stretch.
    """
    if on_degenerate not in DEGENERATE_POLICIES:
        raise ValueError(f"on_degenerate must be one of {DEGENERATE_POLICIES}, got {on_degenerate!r}")
    frame.check()

    stats = frame_statistics(frame)
    input_max = frame.geometry.input_max
    logger.debug(f"Frame statistics: min={stats.min}, max={stats.max}")

    if stats.uniform:
        if on_degenerate == "raise":
            raise DegenerateFrame(stats.min)
        logger.warning(f"All samples equal {stats.min}, skipping normalization")
        return stats

    if stats.min == 0 and stats.max == input_max:
        # already spans the full range, the stretch would be the identity
        return stats

    span = stats.span
    shifted = frame.data.astype(np.int64) - stats.min
    stretched = (shifted * (2 * input_max) + span) // (2 * span)
    frame.data[...] = stretched
    logger.debug(f"Normalized {stats.min}..{stats.max} to 0..{input_max}")
    return stats
