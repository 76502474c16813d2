import numpy as np
import pytest

from bayer2tga import FrameGeometry, InvalidGeometry, MosaicPattern, RGBImage, SensorFrame, demosaic, scale_samples
from conftest import mosaic


def test_single_block():
    geometry = FrameGeometry(width=1, height=1)
    frame = SensorFrame(mosaic([[1023]], [[0]], [[1023]], [[0]]), geometry)

    image = demosaic(frame)

    assert (image.width, image.height) == (1, 1)
    assert image.pixel(0, 0) == (255, 127, 0)
    assert image.tobytes() == bytes([0, 127, 255])


@pytest.mark.parametrize("value,expected", [
    (0, 0),
    (4, 0),
    (5, 1),
    (511, 127),
    (512, 127),
    (1022, 254),
    (1023, 255),
    (4000, 255),
])
def test_scale_truncates(value, expected):
    assert int(scale_samples(value, FrameGeometry())) == expected


def test_planes(small_geometry):
    rng = np.random.default_rng(7)
    r, gr, gb, b = (rng.integers(0, 1024, size=(3, 4)) for _ in range(4))
    frame = SensorFrame(mosaic(r, gr, gb, b), small_geometry)

    image = demosaic(frame)

    rgb = image.to_rgb()
    assert rgb.shape == (3, 4, 3)
    np.testing.assert_array_equal(rgb[:, :, 0], r * 255 // 1023)
    np.testing.assert_array_equal(rgb[:, :, 1], ((gr + gb) // 2) * 255 // 1023)
    np.testing.assert_array_equal(rgb[:, :, 2], b * 255 // 1023)
    assert image.pixel(2, 1) == tuple(int(v) for v in rgb[1, 2])


def test_frame_is_not_modified(random_frame):
    before = random_frame.data.copy()
    demosaic(random_frame)
    np.testing.assert_array_equal(random_frame.data, before)


def test_changing_red_site_touches_only_that_channel(random_frame):
    random_frame.set_sample(2, 1, "R", 0)
    before = demosaic(random_frame).pixels.copy()

    random_frame.set_sample(2, 1, "R", 1023)
    after = demosaic(random_frame).pixels

    changed = np.argwhere(before != after)
    assert changed.tolist() == [[1, 2, 2]]  # row 1, column 2, red
    assert after[1, 2, 2] == 255


@pytest.mark.parametrize("value", [0, 3, 512, 1000, 1023])
def test_uniform_frame(small_geometry, value):
    frame = SensorFrame(np.full(small_geometry.sensor_shape, value), small_geometry)
    image = demosaic(frame)
    assert (image.pixels == value * 255 // 1023).all()


def test_other_pattern_reads_its_own_sites():
    geometry = FrameGeometry(width=1, height=1, pattern=MosaicPattern.GBRG)
    # G B / R G
    frame = SensorFrame(np.array([[1023, 0], [1023, 1023]]), geometry)
    assert demosaic(frame).pixel(0, 0) == (255, 255, 0)


def test_corrupted_buffer_rejected(random_frame):
    random_frame.data = random_frame.data[:, :6]
    with pytest.raises(InvalidGeometry):
        demosaic(random_frame)


def test_rgb_image_shape_checked():
    with pytest.raises(InvalidGeometry):
        RGBImage(np.zeros((2, 2, 4), dtype=np.uint8))
