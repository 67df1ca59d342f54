from typing import List, NamedTuple, Tuple

import cv2
import numpy as np


class ConvexityDefect(NamedTuple):
    start: int  # hull vertex index where the dip begins
    end: int  # hull vertex index where the dip ends
    far: Tuple[int, int]  # deepest contour point
    depth: float  # pixels


# ==========================================
# GEOMETRY PRIMITIVES (OpenCV backed)
# ==========================================
class CvGeometry:
    """
    Narrow capability interface over the OpenCV geometry calls used by the
    hand pipeline. Swap it for another object with the same methods to run
    the analysis stages without OpenCV's contour code.
    """

    def extract_external_contours(self, mask: np.ndarray) -> List[np.ndarray]:
        contours, _ = cv2.findContours(
            mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE
        )
        return list(contours)

    def contour_area(self, contour: np.ndarray) -> float:
        return abs(cv2.contourArea(contour))

    def approximate_polygon(self, contour: np.ndarray, epsilon: float) -> np.ndarray:
        return cv2.approxPolyDP(contour, epsilon, True)

    def convex_hull(self, contour: np.ndarray) -> np.ndarray:
        if contour is None or len(contour) < 3:
            return np.empty((0, 1), dtype=np.int32)
        return cv2.convexHull(contour, clockwise=True, returnPoints=False)

    def convexity_defects(self, contour: np.ndarray, hull: np.ndarray) -> List[ConvexityDefect]:
        # OpenCV needs more than 3 contour points and a proper hull
        if contour is None or hull is None or len(contour) < 4 or len(hull) < 3:
            return []

        try:
            raw = cv2.convexityDefects(contour, hull)
        except cv2.error:
            # self-intersecting polylines give non-monotonous hull indices
            return []

        if raw is None:
            return []

        defects = []
        for s, e, f, d in raw.reshape(-1, 4):
            far = contour[f][0]
            defects.append(
                ConvexityDefect(int(s), int(e), (int(far[0]), int(far[1])), float(d) / 256.0)
            )
        return defects


def squared_distance(a, b):
    dx = int(a[0]) - int(b[0])
    dy = int(a[1]) - int(b[1])
    return dx * dx + dy * dy
