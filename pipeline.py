"""
Per-frame hand tracking pipeline.

    pipeline = FramePipeline()
    pipeline.start(width, height)        # camera session started
    overlay = pipeline.process_frame(f)  # once per RGBA frame
    pipeline.stop()                      # camera session stopped

Each call to process_frame is independent: the only thing kept between
frames is the working buffer allocated in start().
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

import config
import feature_extraction
import overlay
import preprocessing
from errors import DimensionMismatch, PreconditionViolation

logger = logging.getLogger(__name__)


@dataclass
class HandDetection:
    """Everything one frame produced, for callers that want more than the overlay."""
    mask: np.ndarray
    contours: List[np.ndarray]
    hand_contour: Optional[np.ndarray]
    centroid: Optional[Tuple[float, float]]
    overlay: np.ndarray
    elapsed_ms: float

    @property
    def found(self) -> bool:
        return self.centroid is not None


class FramePipeline:
    """
    Two-state machine: Inactive (no buffer) and Active (processing).

    Transitions: start() Inactive -> Active, stop() Active -> Inactive.
    process_frame() is only valid while Active. Anything else raises
    PreconditionViolation.
    """

    def __init__(self, scale: float = config.SCALE_FACTOR):
        if scale <= 0:
            raise PreconditionViolation(f"Scale factor must be positive, got {scale}")

        self.scale = scale
        self._size: Optional[Tuple[int, int]] = None
        self._work: Optional[np.ndarray] = None

    @property
    def active(self) -> bool:
        return self._work is not None

    @property
    def size(self) -> Optional[Tuple[int, int]]:
        """(width, height) of the active session, None while inactive."""
        return self._size

    def start(self, width: int, height: int) -> None:
        if self.active:
            raise PreconditionViolation("Pipeline already started")
        if width <= 0 or height <= 0:
            raise PreconditionViolation(f"Invalid frame size {width}x{height}")

        work_w, work_h = preprocessing.working_size(width, height, self.scale)

        self._size = (width, height)
        self._work = np.empty((work_h, work_w, 4), dtype=np.uint8)
        logger.info(
            "Session started: %dx%d (working %dx%d)", width, height, work_w, work_h
        )

    def stop(self) -> None:
        if not self.active:
            raise PreconditionViolation("Pipeline is not started")

        self._work = None
        self._size = None
        logger.info("Session stopped")

    def _check_frame(self, frame: np.ndarray) -> None:
        if not self.active:
            raise PreconditionViolation("process_frame called before start()")
        if frame is None or frame.dtype != np.uint8 or frame.ndim != 3 or frame.shape[2] != 4:
            raise PreconditionViolation("Expected an 8-bit RGBA frame")

        width, height = self._size
        if frame.shape[:2] != (height, width):
            raise DimensionMismatch(
                f"Frame is {frame.shape[1]}x{frame.shape[0]}, session is {width}x{height}"
            )

    def detect(self, frame: np.ndarray) -> HandDetection:
        """Run every stage on one frame and return all intermediate results."""
        self._check_frame(frame)
        t0 = time.perf_counter()

        mask = preprocessing.isolate_hand(frame, self.scale, work=self._work)
        contours, hand, centroid = feature_extraction.locate_hand(mask, self.scale)

        width, height = self._size
        result = overlay.render_overlay(width, height, centroid)

        elapsed_ms = (time.perf_counter() - t0) * 1000
        if centroid is None:
            logger.debug("No hand (%d contours) in %.1f ms", len(contours), elapsed_ms)
        else:
            logger.debug(
                "Hand at (%.1f, %.1f) from %d contours in %.1f ms",
                centroid[0], centroid[1], len(contours), elapsed_ms
            )

        return HandDetection(mask, contours, hand, centroid, result, elapsed_ms)

    def process_frame(self, frame: np.ndarray) -> np.ndarray:
        """RGBA frame in, RGBA overlay of the same size out."""
        return self.detect(frame).overlay
