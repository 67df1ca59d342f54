import numpy as np

NUM_FINGERS = 5
NUM_DEFECTS = 8


class HandState:
    """
    Per-frame hand analysis result that flows between modules.
    The finger and defect buffers are allocated once and overwritten every
    frame; only the first num_fingers / num_defects rows are meaningful.
    """

    def __init__(self, max_fingers=NUM_FINGERS + 1, max_defects=NUM_DEFECTS):
        self.max_fingers = max(1, int(max_fingers))
        self.max_defects = max(1, int(max_defects))

        self.fingers = np.zeros((self.max_fingers, 2), dtype=np.int32)
        self.defects = np.zeros((self.max_defects, 2), dtype=np.int32)
        self.reset()

    def reset(self):
        # simplified hand contour and its hull indices (for drawing)
        self.contour = None
        self.hull = None

        self.center = (0, 0)
        self.radius = 0

        self.fingers.fill(0)
        self.num_fingers = 0

        self.defects.fill(0)
        self.num_defects = 0

    def add_finger(self, point):
        """Store a finger point. Returns False once the buffer is full."""
        if self.num_fingers >= self.max_fingers:
            return False
        self.fingers[self.num_fingers] = point
        self.num_fingers += 1
        return self.num_fingers < self.max_fingers

    def finger_points(self):
        return [(int(x), int(y)) for x, y in self.fingers[: self.num_fingers]]

    def defect_points(self):
        return [(int(x), int(y)) for x, y in self.defects[: self.num_defects]]

    def is_complete(self, expected=NUM_FINGERS):
        return self.num_fingers == expected

    def to_dict(self):
        """Serialize to JSON-friendly dict."""
        return {
            "center": list(self.center),
            "radius": self.radius,
            "num_fingers": self.num_fingers,
            "fingers": [list(p) for p in self.finger_points()],
            "num_defects": self.num_defects,
            "defects": [list(p) for p in self.defect_points()],
            "has_contour": self.contour is not None,
        }
