from Geometry import squared_distance


class FingerDetector:
    """
    Fingers are detected as contour points where the distance to the hand
    center is a local maximum.
    """

    def __init__(self, cfg=None):
        hcfg = (cfg or {}).get("hand", {})
        self.bottom_margin = int(hcfg.get("bottom_margin", 10))

    def detect(self, contour, state, frame_height):
        state.num_fingers = 0

        # center is only defined when defects were found
        if contour is None or state.hull is None or state.num_defects == 0:
            return state.num_fingers

        center = state.center
        limit = frame_height - self.bottom_margin

        dist1 = dist2 = 0
        max_point = (0, 0)

        for point in contour.reshape(-1, 2):
            dist = squared_distance(center, point)

            # x == 0 is treated as an unset point
            if dist < dist1 and dist1 > dist2 and max_point[0] != 0 and max_point[1] < limit:
                if not state.add_finger(max_point):
                    break

            dist2 = dist1
            dist1 = dist
            max_point = (int(point[0]), int(point[1]))

        return state.num_fingers
