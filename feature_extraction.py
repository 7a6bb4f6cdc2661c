"""
Feature Extraction Module

Finds the hand region in a cleaned binary mask and reduces it to a
single point.

Features included:
- Contours (full hierarchy, simple point compression)
- Largest contour (assumed hand)
- Centroid (x, y) from image moments
"""

import cv2

import config


def find_contours(mask):
    """
    Trace the boundaries of every blob in the mask.

    Returns (contours, hierarchy). Contours is a list of (N, 1, 2) int32
    point arrays, hierarchy is the (1, N, 4) [next, prev, child, parent]
    table or None when the mask is empty.
    """
    contours, hierarchy = cv2.findContours(
        mask,
        cv2.RETR_TREE,
        cv2.CHAIN_APPROX_SIMPLE
    )

    return list(contours), hierarchy


def select_largest_contour(contours):
    """
    Pick the contour enclosing the largest area (hand assumption).

    On a tie the contour found first wins. Returns None for no contours.
    """
    if len(contours) == 0:
        return None

    # max() keeps the first of equal keys
    return max(contours, key=cv2.contourArea)


def compute_centroid(contour, scale=config.SCALE_FACTOR):
    """
    Centroid of the contour interior, in original-frame coordinates.

    `scale` is the resize factor the contour was found at. Returns
    (cx, cy) as floats, or None when there is no contour or it encloses
    no area.
    """
    if contour is None:
        return None

    M = cv2.moments(contour)

    if M["m00"] == 0:
        return None

    cx = M["m10"] / (scale * M["m00"])
    cy = M["m01"] / (scale * M["m00"])

    return cx, cy


def locate_hand(mask, scale=config.SCALE_FACTOR):
    """
    Run the contour stages on a mask.

    Steps:
    1. Find contours
    2. Select largest contour
    3. Compute its centroid

    Returns (contours, hand_contour, centroid); the last two may be None.
    """
    contours, _ = find_contours(mask)
    hand = select_largest_contour(contours)
    centroid = compute_centroid(hand, scale)

    return contours, hand, centroid
