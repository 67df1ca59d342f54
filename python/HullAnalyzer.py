import math

from Geometry import CvGeometry


class HullAnalyzer:
    """
    Computes the convex hull of the hand contour and its convexity defects,
    then estimates the hand center and radius from the defects' depth points.

    With spread fingers the depth points sit between the fingers around the
    palm, so their centroid approximates the palm center and their mean
    distance to it approximates the palm size.
    """

    def __init__(self, geometry=None):
        self.geometry = geometry or CvGeometry()

    def analyze(self, contour, state):
        state.hull = None
        state.num_defects = 0

        if contour is None or len(contour) < 3:
            return

        hull = self.geometry.convex_hull(contour)
        if hull is None or len(hull) == 0:
            return
        state.hull = hull

        defects = self.geometry.convexity_defects(contour, hull)
        if not defects:
            return

        # storage and aggregation both use at most max_defects entries
        used = defects[: state.max_defects]
        n = len(used)

        x = y = 0
        for i, defect in enumerate(used):
            x += defect.far[0]
            y += defect.far[1]
            state.defects[i] = defect.far
        state.num_defects = n

        cx = int(x / n)
        cy = int(y / n)
        state.center = (cx, cy)

        # mean of the (truncated) distances of depth points to the center
        dist = 0
        for defect in used:
            dx = cx - defect.far[0]
            dy = cy - defect.far[1]
            dist += int(math.sqrt(dx * dx + dy * dy))
        state.radius = dist // n
