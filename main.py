"""
Live hand tracking demo.

Opens the webcam, runs every frame through the pipeline and shows the
green centroid marker over the camera image.

Controls:
    [d]       Toggle mask / contour debug window
    [q] [ESC] Quit

Usage:
    python main.py --camera 0 --debug
"""

import argparse
import logging

import cv2

import camera_source
import config
import overlay
from pipeline import FramePipeline

logger = logging.getLogger(__name__)

EXIT_KEYS = (ord('q'), 27)


def run(camera_index, scale, show_debug):
    cap = camera_source.open_camera(camera_index)
    pipeline = FramePipeline(scale=scale)

    print("\n" + "=" * 54)
    print("  HAND TRACKING  -  Skin Mask + Morphology + Moments")
    print("=" * 54)
    print("  [d] Toggle debug view      [q] Quit")
    print("=" * 54 + "\n")

    try:
        while True:
            bgr, rgba = camera_source.read_rgba(cap)
            if rgba is None:
                logger.error("Webcam read failed")
                break

            # Session starts with the first frame, size is fixed from here on
            if not pipeline.active:
                height, width = rgba.shape[:2]
                pipeline.start(width, height)

            detection = pipeline.detect(rgba)

            display = overlay.composite(bgr, detection.overlay)
            if config.SHOW_LATENCY:
                overlay.draw_latency(display, detection.elapsed_ms)
            cv2.imshow(config.WINDOW_NAME, display)

            if show_debug:
                cv2.imshow(config.DEBUG_WINDOW_NAME, overlay.build_debug_view(
                    detection.mask, detection.contours, detection.hand_contour))

            key = cv2.waitKey(1) & 0xFF

            if key == ord('d'):
                show_debug = not show_debug
                if not show_debug:
                    cv2.destroyWindow(config.DEBUG_WINDOW_NAME)

            elif key in EXIT_KEYS:
                break

    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        if pipeline.active:
            pipeline.stop()
        camera_source.release_camera(cap)
        cv2.destroyAllWindows()


def main():
    parser = argparse.ArgumentParser(
        description="Classical skin-colour hand tracker",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--camera", type=int, default=config.WEBCAM_INDEX,
                        help="Webcam index")
    parser.add_argument("--scale", type=float, default=config.SCALE_FACTOR,
                        help="Working resolution factor")
    parser.add_argument("--debug", action="store_true",
                        default=config.SHOW_DEBUG_WINDOWS,
                        help="Show the mask / contour window")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-frame detections")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    run(args.camera, args.scale, args.debug)


if __name__ == "__main__":
    main()
