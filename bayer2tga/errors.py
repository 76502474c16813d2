"""Errors raised by the conversion pipeline"""


class Bayer2TgaError(Exception):
    """Base class for every pipeline failure"""


class ResourceUnavailable(Bayer2TgaError):
    """A file could not be opened, read or written.

    `action` is "reading" or "writing" when the open itself failed, "read" or
    "write" when the file was open and the transfer failed.
    """

    def __init__(self, path, action, cause=None):
        self.path = path
        self.action = action
        self.cause = cause
        detail = f": {getattr(cause, 'strerror', None) or cause}" if cause is not None else ""
        if action in ("read", "write"):
            super().__init__(f"Failed to {action} file {path}{detail}")
        else:
            super().__init__(f"Unable to open file {path} for {action}{detail}")


class SizeMismatch(Bayer2TgaError):
    """The raw input does not hold exactly one frame"""

    def __init__(self, path, expected, actual):
        self.path = path
        self.expected = expected
        self.actual = actual
        qualifier = "only " if actual < expected else ""
        super().__init__(f"{path}: expected {expected} bytes for one frame, found {qualifier}{actual} bytes")


class DegenerateFrame(Bayer2TgaError):
    """Every sample has the same value, so the frame cannot be stretched"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"all samples equal {value}, normalization is undefined")


class InvalidGeometry(Bayer2TgaError):
    """Bad frame dimensions or a buffer that does not match them"""
