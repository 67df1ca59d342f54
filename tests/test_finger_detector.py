import math

import numpy as np

from FingerDetector import FingerDetector
from HandState import HandState
from HullAnalyzer import HullAnalyzer

from conftest import as_contour, star_points

CENTER = (200, 300)
HEIGHT = 480


def _state(center=CENTER, **kwargs):
    state = HandState(**kwargs)
    state.center = center
    state.hull = np.zeros((3, 1), dtype=np.int32)
    state.num_defects = 1
    return state


def test_five_spread_fingers_reported_in_contour_order():
    points, peaks = star_points(CENTER, 5)
    state = _state()

    count = FingerDetector().detect(as_contour(points), state, HEIGHT)

    assert count == 5
    assert state.finger_points() == peaks
    assert state.is_complete(5)


def test_finger_count_never_exceeds_capacity():
    points, peaks = star_points(CENTER, 10, start_deg=175.0, end_deg=5.0)
    state = _state()

    FingerDetector().detect(as_contour(points), state, HEIGHT)

    assert state.num_fingers == state.max_fingers == 6
    assert state.finger_points() == peaks[:6]


def test_peaks_near_bottom_edge_are_ignored():
    points, peaks = star_points(CENTER, 5)
    # frame bottom 10 px or less below the lowest peak (y=225 for 30 deg)
    lowest = max(p[1] for p in peaks)
    state = _state()

    FingerDetector().detect(as_contour(points), state, lowest + 10)

    assert lowest not in [p[1] for p in state.finger_points()]
    assert state.num_fingers < 5


def test_custom_bottom_margin():
    points, _ = star_points(CENTER, 5)
    state = _state()

    FingerDetector({"hand": {"bottom_margin": 400}}).detect(as_contour(points), state, HEIGHT)

    assert state.num_fingers == 0


def test_peak_on_left_border_is_ignored():
    points = [(10, 100), (0, 10), (20, 100), (60, 20), (30, 100)]
    state = _state(center=(30, 120))

    FingerDetector().detect(as_contour(points), state, HEIGHT)

    assert state.finger_points() == [(60, 20)]


def test_convex_outline_yields_few_or_no_fingers():
    # distance to center only grows along this outline
    points = [(100 + i * 10, 300 - i * 10) for i in range(1, 12)]
    state = _state(center=(100, 300))

    FingerDetector().detect(as_contour(points), state, HEIGHT)

    assert state.num_fingers == 0


def test_no_contour_or_hull_resets_count():
    points, _ = star_points(CENTER, 5)
    state = _state()
    state.num_fingers = 3

    assert FingerDetector().detect(None, state, HEIGHT) == 0

    state.hull = None
    assert FingerDetector().detect(as_contour(points), state, HEIGHT) == 0


def test_no_defects_means_no_fingers():
    points, _ = star_points(CENTER, 5)
    state = _state()
    state.num_defects = 0

    assert FingerDetector().detect(as_contour(points), state, HEIGHT) == 0
    assert state.finger_points() == []


def test_convex_polygon_reports_no_fingers():
    decagon = as_contour(
        [
            (
                int(round(200 + 100 * math.cos(math.radians(a)))),
                int(round(200 + 100 * math.sin(math.radians(a)))),
            )
            for a in range(0, 360, 36)
        ]
    )
    state = HandState()

    HullAnalyzer().analyze(decagon, state)
    FingerDetector().detect(decagon, state, HEIGHT)

    assert state.num_defects == 0
    assert state.num_fingers == 0
