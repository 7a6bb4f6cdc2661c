import cv2
import numpy as np
import pytest

SKIN_MID = (170, 110, 90, 255)
BACKGROUND = (0, 0, 0, 255)


def make_frame(width=100, height=100, color=BACKGROUND):
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    frame[:] = color
    return frame


def draw_disk(frame, center, radius, color=SKIN_MID):
    cv2.circle(frame, center, radius, color, cv2.FILLED)
    return frame


@pytest.fixture
def black_frame():
    return np.zeros((100, 100, 4), dtype=np.uint8)


@pytest.fixture
def hand_frame():
    """Skin coloured disk of radius 20 at (50, 50) on a black background."""
    return draw_disk(make_frame(), (50, 50), 20)
