from Geometry import CvGeometry


class ContourFinder:
    def __init__(self, cfg=None, geometry=None):
        ccfg = (cfg or {}).get("contour", {})
        self.approx_epsilon = float(ccfg.get("approx_epsilon", 2.0))
        self.geometry = geometry or CvGeometry()

    def find(self, mask):
        """
        Select the external contour enclosing the greatest area and
        approximate it with a poly-line. Returns None when the mask holds no
        usable blob.
        """
        max_area = 0.0
        contour = None

        for candidate in self.geometry.extract_external_contours(mask):
            area = self.geometry.contour_area(candidate)
            if area > max_area:
                max_area = area
                contour = candidate

        if contour is None:
            return None
        return self.geometry.approximate_polygon(contour, self.approx_epsilon)
