import cv2
import numpy as np


class SkinSegmenter:
    """
    Classifies pixels as skin / non-skin with fixed HSV bounds and cleans
    the resulting mask with a morphological opening.
    """

    def __init__(self, cfg=None):
        scfg = (cfg or {}).get("segmentation", {})

        # bounds may be given as 4-tuples (h, s, v, alpha); alpha is unused
        self.hsv_lower = np.array(scfg.get("hsv_lower", [0, 55, 90])[:3], dtype=np.uint8)
        self.hsv_upper = np.array(scfg.get("hsv_upper", [28, 175, 230])[:3], dtype=np.uint8)

        self.blur_size = _odd(scfg.get("blur_size", 11))
        self.mask_blur_size = _odd(scfg.get("mask_blur_size", 3))

        ksize = int(scfg.get("kernel_size", 9))
        anchor = scfg.get("kernel_anchor", [ksize // 2, ksize // 2])
        self.kernel_anchor = (int(anchor[0]), int(anchor[1]))
        self.kernel = cv2.getStructuringElement(
            cv2.MORPH_RECT, (ksize, ksize), self.kernel_anchor
        )

    def segment(self, frame):
        # Soften image, then remove impulsive noise
        smooth = cv2.GaussianBlur(frame, (self.blur_size, self.blur_size), 0)
        smooth = cv2.medianBlur(smooth, self.blur_size)

        hsv = cv2.cvtColor(smooth, cv2.COLOR_BGR2HSV)
        mask = cv2.inRange(hsv, self.hsv_lower, self.hsv_upper)

        mask = cv2.morphologyEx(
            mask, cv2.MORPH_OPEN, self.kernel, anchor=self.kernel_anchor, iterations=1
        )
        return cv2.GaussianBlur(mask, (self.mask_blur_size, self.mask_blur_size), 0)


def _odd(value):
    value = max(1, int(value))
    return value if value % 2 else value + 1
