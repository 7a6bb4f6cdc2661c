"""
Colour thresholding and noise removal.
Converts a raw RGBA frame into a clean binary hand mask.
"""

import math
from functools import lru_cache

import cv2
import numpy as np

import config
from errors import PreconditionViolation


@lru_cache(maxsize=None)
def structuring_element(shape, size):
    """
    Build (once) the morphology kernel for a shape/size pair.

    The returned array is shared between callers, do not modify it.
    """
    return cv2.getStructuringElement(shape, tuple(size))


def working_size(width, height, scale=config.SCALE_FACTOR):
    """
    Return (width, height) of the frame after scaling by `scale`.

    Sizes round half up, so 0.5 * 9 gives 5.
    """
    if scale <= 0:
        raise PreconditionViolation(f"Scale factor must be positive, got {scale}")

    w = int(math.floor(scale * width + 0.5))
    h = int(math.floor(scale * height + 0.5))
    if w == 0 or h == 0:
        raise PreconditionViolation(
            f"Scale {scale} shrinks {width}x{height} to an empty frame"
        )
    return w, h


def resize_frame(frame, scale=config.SCALE_FACTOR):
    """
    Downsample the frame to the working resolution.

    With scale 1.0 the input is returned untouched. Shrinking uses
    area interpolation, enlarging uses bilinear.
    """
    h, w = frame.shape[:2]
    size = working_size(w, h, scale)

    if size == (w, h):
        return frame

    interpolation = cv2.INTER_AREA if scale < 1.0 else cv2.INTER_LINEAR
    return cv2.resize(frame, size, interpolation=interpolation)


def smooth_frame(frame, ksize=config.BLUR_KSIZE, dst=None):
    """
    Box blur (unweighted k x k mean) to suppress isolated pixel noise.

    Border pixels are averaged over an edge-replicated neighbourhood.
    If `dst` is given it must match the frame and receives the result.
    """
    return cv2.blur(frame, ksize, dst=dst, borderType=config.BLUR_BORDER)


def segment_skin(frame, lower=config.SKIN_LOWER, upper=config.SKIN_UPPER):
    """
    Mark every pixel whose channels ALL lie inside [lower, upper].

    Returns a single channel uint8 mask: 255 = skin, 0 = background.
    """
    lower = np.array(lower, dtype=np.uint8)
    upper = np.array(upper, dtype=np.uint8)
    return cv2.inRange(frame, lower, upper)


def refine_mask(mask):
    """
    Consolidate the raw skin mask into solid blobs.

    Steps (order and counts are tuned, do not reorder):
    1. Dilate 11x11 ellipse        - bridge small gaps in the hand
    2. Erode 5x5 square, 3 times   - kill speckles and thin protrusions
    3. Dilate 11x11 ellipse        - give the hand its size back
    4. Median blur 5
    5. Dilate 8x8 ellipse
    6. Median blur 5
    7. Dilate 5x5 ellipse
    8. Threshold at 127            - back to pure 0 / 255
    """
    grow = structuring_element(config.GROW_SHAPE, config.GROW_SIZE)
    shrink = structuring_element(config.SHRINK_SHAPE, config.SHRINK_SIZE)

    mask = cv2.dilate(mask, grow, anchor=(-1, -1), iterations=config.GROW_ITERATIONS)
    mask = cv2.erode(mask, shrink, anchor=(-1, -1), iterations=config.SHRINK_ITERATIONS)
    mask = cv2.dilate(mask, grow, anchor=(-1, -1), iterations=config.GROW_ITERATIONS)

    mask = cv2.medianBlur(mask, config.MEDIAN_KSIZE)
    mask = cv2.dilate(mask, structuring_element(cv2.MORPH_ELLIPSE, config.SECOND_DILATE_SIZE))

    mask = cv2.medianBlur(mask, config.MEDIAN_KSIZE)
    mask = cv2.dilate(mask, structuring_element(cv2.MORPH_ELLIPSE, config.FINAL_DILATE_SIZE))

    _, mask = cv2.threshold(
        mask, config.THRESHOLD_LEVEL, config.THRESHOLD_MAX, cv2.THRESH_BINARY
    )
    return mask


def isolate_hand(frame, scale=config.SCALE_FACTOR, work=None):
    """
    Apply resize, blur, colour threshold and morphology to isolate the hand.

    `work` is an optional preallocated buffer for the smoothed frame at
    working resolution.

    Returns the cleaned mask at working resolution.
    """
    resized = resize_frame(frame, scale)
    smoothed = smooth_frame(resized, dst=work)
    mask = segment_skin(smoothed)

    return refine_mask(mask)
