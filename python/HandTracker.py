from ContourFinder import ContourFinder
from FingerDetector import FingerDetector
from Geometry import CvGeometry
from HandState import HandState
from HullAnalyzer import HullAnalyzer
from SkinSegmenter import SkinSegmenter
from helpers import DEFAULT_CONFIG, merge_config


class HandTracker:
    def __init__(self, cfg=None, geometry=None):
        self.geometry = geometry or CvGeometry()
        self.cfg = merge_config(DEFAULT_CONFIG, cfg)
        self.mask = None
        self._build()

    def _build(self):
        hcfg = self.cfg.get("hand", {})

        self.segmenter = SkinSegmenter(self.cfg)
        self.contour_finder = ContourFinder(self.cfg, self.geometry)
        self.hull_analyzer = HullAnalyzer(self.geometry)
        self.finger_detector = FingerDetector(self.cfg)

        # reused every frame, reset at the start of process_frame
        self.state = HandState(
            max_fingers=hcfg.get("max_fingers", 6),
            max_defects=hcfg.get("max_defects", 8),
        )

    def update_config(self, cfg):
        if not cfg:
            return
        merged = merge_config(self.cfg, cfg)
        if merged != self.cfg:
            self.cfg = merged
            self._build()

    def process_frame(self, frame):
        """
        Run the full pipeline on a BGR frame.
        Returns the tracker's HandState; it is overwritten by the next call,
        so copy what you need (e.g. state.to_dict()) before that.
        """
        state = self.state
        state.reset()

        self.mask = self.segmenter.segment(frame)

        contour = self.contour_finder.find(self.mask)
        if contour is None or len(contour) == 0:
            return state
        state.contour = contour

        self.hull_analyzer.analyze(contour, state)
        self.finger_detector.detect(contour, state, frame.shape[0])
        return state
