import numpy as np
import pytest

import config
import overlay
from errors import DimensionMismatch


def disk_pixels(width, height, cx, cy, radius):
    yy, xx = np.mgrid[:height, :width]
    return (xx - cx) ** 2 + (yy - cy) ** 2 <= radius ** 2


def test_no_centroid_gives_transparent_frame():
    out = overlay.render_overlay(64, 48, None)
    assert out.shape == (48, 64, 4)
    assert out.dtype == np.uint8
    assert not out.any()


@pytest.mark.parametrize("centroid, center", [
    ((50.0, 50.0), (50, 50)),
    ((10.4, 70.6), (10, 71)),
    ((0.0, 0.0), (0, 0)),
    ((99.2, 3.5), (99, 4)),
    ((22.5, 40.5), (23, 41)),
])
def test_marker_covers_exactly_the_disk(centroid, center):
    out = overlay.render_overlay(100, 80, centroid)

    inside = disk_pixels(100, 80, center[0], center[1], config.MARKER_RADIUS)

    assert (out[inside] == config.MARKER_COLOR).all()
    assert not out[~inside].any()


def test_marker_radius_and_color():
    out = overlay.render_overlay(40, 40, (20, 20))
    assert tuple(out[20, 20]) == (0, 255, 0, 255)
    assert tuple(out[20, 27]) == (0, 255, 0, 255)
    assert tuple(out[20, 28]) == (0, 0, 0, 0)
    assert out[:, :, 3].astype(bool).sum() == disk_pixels(40, 40, 20, 20, 7).sum()


def test_composite_blends_only_marker():
    bgr = np.full((30, 30, 3), 50, dtype=np.uint8)
    marker = overlay.render_overlay(30, 30, (15, 15))

    out = overlay.composite(bgr, marker)

    assert tuple(out[15, 15]) == (0, 255, 0)
    assert tuple(out[0, 0]) == (50, 50, 50)
    assert out is not bgr
    assert tuple(bgr[15, 15]) == (50, 50, 50)


def test_composite_rejects_size_mismatch():
    with pytest.raises(DimensionMismatch):
        overlay.composite(np.zeros((10, 10, 3), np.uint8), np.zeros((10, 12, 4), np.uint8))


def test_debug_view_shape():
    mask = np.zeros((20, 30), np.uint8)
    mask[5:15, 5:15] = 255
    contour = np.array([[[5, 5]], [[5, 14]], [[14, 14]], [[14, 5]]], dtype=np.int32)

    view = overlay.build_debug_view(mask, [contour], contour)

    assert view.shape == (20, 30, 3)
    assert tuple(view[5, 5]) == (0, 255, 0)
    assert tuple(view[10, 10]) == (90, 90, 90)


def test_debug_view_without_contours():
    view = overlay.build_debug_view(np.zeros((8, 8), np.uint8), [], None)
    assert not view.any()


def test_draw_latency_writes_in_corner():
    frame = np.zeros((40, 120, 3), np.uint8)
    overlay.draw_latency(frame, 12.34)
    assert frame[:30, :].any()
    assert not frame[32:, :].any()


def test_marker_center_rounds_half_up():
    out = overlay.render_overlay(40, 40, (12.5, 20.0))
    assert tuple(out[20, 20]) == (0, 255, 0, 255)
    assert tuple(out[20, 5]) == (0, 0, 0, 0)
