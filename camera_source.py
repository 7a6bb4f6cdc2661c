"""
Handles frame delivery from a desktop webcam and raw RGBA buffers.
The pipeline itself never touches the camera.
"""

import logging

import cv2
import numpy as np

from errors import DimensionMismatch

logger = logging.getLogger(__name__)


def open_camera(index):
    """
    Open the webcam at `index`, falling back to the other of 0/1 once.

    Returns the cv2.VideoCapture. Raises RuntimeError if nothing opens.
    """
    cap = cv2.VideoCapture(index)
    if cap.isOpened():
        return cap

    alt = 0 if index == 1 else 1
    logger.warning("Camera %d failed, trying %d...", index, alt)
    cap = cv2.VideoCapture(alt)
    if cap.isOpened():
        return cap

    raise RuntimeError("Could not open any webcam.")


def read_rgba(cap):
    """
    Retrieve one frame from the camera.

    Returns:
        (bgr, rgba) OR (None, None) when the read fails
    """
    ret, bgr = cap.read()
    if not ret or bgr is None:
        return None, None

    return bgr, cv2.cvtColor(bgr, cv2.COLOR_BGR2RGBA)


def release_camera(cap):
    if cap is not None:
        cap.release()


def frame_from_buffer(data, width, height):
    """
    View an interleaved RGBA byte buffer (row-major, no padding) as a frame.

    No copy is made; the frame is read-only if `data` is immutable.
    """
    expected = width * height * 4
    if len(data) != expected:
        raise DimensionMismatch(
            f"Buffer holds {len(data)} bytes, {width}x{height} RGBA needs {expected}"
        )

    return np.frombuffer(data, dtype=np.uint8).reshape(height, width, 4)


def frame_to_buffer(frame):
    return np.ascontiguousarray(frame, dtype=np.uint8).tobytes()
