"""
Overlay rendering and display helpers.
"""

import math

import cv2
import numpy as np

import config
from errors import DimensionMismatch


def render_overlay(width, height, centroid, radius=config.MARKER_RADIUS,
                   color=config.MARKER_COLOR):
    """
    Build a fully transparent RGBA frame with a filled disk at the centroid.

    The disk covers every pixel within `radius` of the centroid rounded to
    the nearest pixel, halves rounding up. Without a centroid the frame
    stays transparent.
    """
    overlay = np.zeros((height, width, 4), dtype=np.uint8)

    if centroid is None:
        return overlay

    cx = int(math.floor(centroid[0] + 0.5))
    cy = int(math.floor(centroid[1] + 0.5))
    yy, xx = np.ogrid[:height, :width]
    disk = (xx - cx) ** 2 + (yy - cy) ** 2 <= radius * radius
    overlay[disk] = color

    return overlay


def composite(frame_bgr, overlay_rgba):
    """Alpha-blend an RGBA overlay onto a BGR frame, returns a new frame."""
    if frame_bgr.shape[:2] != overlay_rgba.shape[:2]:
        raise DimensionMismatch(
            f"Overlay {overlay_rgba.shape[:2]} does not match frame {frame_bgr.shape[:2]}"
        )

    alpha = overlay_rgba[:, :, 3:4].astype(np.float32) / 255.0
    marker = cv2.cvtColor(overlay_rgba, cv2.COLOR_RGBA2BGR).astype(np.float32)

    blended = frame_bgr.astype(np.float32) * (1.0 - alpha) + marker * alpha
    return np.clip(np.rint(blended), 0, 255).astype(np.uint8)


def build_debug_view(mask, contours, hand_contour):
    """Refined mask with all contours (thin, blue) and the hand (thick, green)."""
    view = cv2.cvtColor(mask, cv2.COLOR_GRAY2BGR)
    view[mask > 0] = (90, 90, 90)

    if contours:
        cv2.drawContours(view, contours, -1, (255, 0, 0), 1)
    if hand_contour is not None:
        cv2.drawContours(view, [hand_contour], -1, (0, 255, 0), 2)

    return view


def draw_latency(frame_bgr, ms):
    cv2.putText(frame_bgr, f"{ms:.1f} ms", (10, 24),
                cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 220, 0), 2)
