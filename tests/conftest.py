import math

import cv2
import numpy as np
import pytest

# BGR colour that lands inside the default HSV skin bounds (H=13, S=109, V=210)
SKIN_BGR = (120, 160, 210)


def as_contour(points):
    return np.array(points, dtype=np.int32).reshape(-1, 1, 2)


def star_points(center, n_peaks, peak_r=150, valley_r=60, start_deg=165.0, end_deg=15.0):
    """
    Valley, peak, valley, ... , peak, valley around center, sweeping the
    upper half plane (image y grows downwards).
    Returns (points, peaks).
    """
    cx, cy = center
    steps = 2 * n_peaks
    points, peaks = [], []
    for i in range(steps + 1):
        theta = math.radians(start_deg + (end_deg - start_deg) * i / steps)
        r = peak_r if i % 2 else valley_r
        p = (int(round(cx + r * math.cos(theta))), int(round(cy - r * math.sin(theta))))
        points.append(p)
        if i % 2:
            peaks.append(p)
    return points, peaks


def draw_hand(frame, color=SKIN_BGR):
    """Palm disc with five finger bars above it."""
    cv2.circle(frame, (320, 330), 80, color, -1)
    for x, top in ((230, 250), (275, 180), (320, 160), (365, 180), (410, 220)):
        cv2.rectangle(frame, (x - 14, top), (x + 14, 320), color, -1)
    return frame


@pytest.fixture
def hand_frame():
    return draw_hand(np.zeros((480, 640, 3), dtype=np.uint8))


@pytest.fixture
def black_frame():
    return np.zeros((480, 640, 3), dtype=np.uint8)
