"""
Configuration file for the hand tracking pipeline.
All adjustable parameters live here.
"""

import cv2

# --------------------------------------------------
# Working resolution
# --------------------------------------------------
# Shrink the frame before processing (1.0 = capture size)
SCALE_FACTOR = 1.0

# --------------------------------------------------
# Smoothing
# --------------------------------------------------
BLUR_KSIZE = (5, 5)
BLUR_BORDER = cv2.BORDER_REPLICATE

# --------------------------------------------------
# Skin colour bounds (R, G, B, A), inclusive
# Needs calibration per camera / lighting
# --------------------------------------------------
SKIN_LOWER = (160, 100, 80, 0)
SKIN_UPPER = (180, 120, 100, 255)

# --------------------------------------------------
# Mask refinement (order matters, see preprocessing.refine_mask)
# --------------------------------------------------
GROW_SHAPE = cv2.MORPH_ELLIPSE
GROW_SIZE = (11, 11)
GROW_ITERATIONS = 1

SHRINK_SHAPE = cv2.MORPH_RECT
SHRINK_SIZE = (5, 5)
SHRINK_ITERATIONS = 3

MEDIAN_KSIZE = 5

SECOND_DILATE_SIZE = (8, 8)
FINAL_DILATE_SIZE = (5, 5)

THRESHOLD_LEVEL = 127
THRESHOLD_MAX = 255

# --------------------------------------------------
# Overlay marker
# --------------------------------------------------
MARKER_RADIUS = 7
MARKER_COLOR = (0, 255, 0, 255)   # opaque green, RGBA

# --------------------------------------------------
# Live demo
# --------------------------------------------------
WEBCAM_INDEX = 0        # try 1 if wrong camera opens
WINDOW_NAME = "Hand Tracking"
DEBUG_WINDOW_NAME = "Mask / Contours"

SHOW_DEBUG_WINDOWS = False
SHOW_LATENCY = True

LOG_LEVEL = "INFO"
