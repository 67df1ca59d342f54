import copy
import json
import os
import time

import cv2

from HandState import NUM_DEFECTS, NUM_FINGERS

RED = (0, 0, 255)
GREEN = (0, 255, 0)
BLUE = (255, 0, 0)
YELLOW = (0, 255, 255)
PURPLE = (255, 0, 255)
GREY = (200, 200, 200)

DEFAULT_CONFIG = {
    "segmentation": {
        "hsv_lower": [0, 55, 90],
        "hsv_upper": [28, 175, 230],
        "blur_size": 11,
        "mask_blur_size": 3,
        "kernel_size": 9,
        "kernel_anchor": [4, 4],
    },
    "contour": {
        "approx_epsilon": 2.0,
    },
    "hand": {
        "num_fingers": NUM_FINGERS,
        "max_fingers": NUM_FINGERS + 1,
        "max_defects": NUM_DEFECTS,
        "bottom_margin": 10,
    },
    "capture": {
        "source": 0,
    },
    "recording": {
        "enabled": True,
        "path": "video.avi",
        "fourcc": "MJPG",
        "fps_fallback": 10,
    },
    "display": {
        "output_window": "output",
        "mask_window": "thresholded",
        "output_pos": [50, 50],
        "mask_pos": [700, 50],
        "show_contour": False,
        "quit_key": "q",
    },
    "debug": {
        "show_fps": False,
        "fps_window": 20,
    },
    "server": {
        "enabled": False,
        "host": "127.0.0.1",
        "port": 5555,
    },
}


# ---------- config ----------
def merge_config(base, override):
    """Return a copy of base with override deep-merged into it."""
    merged = copy.deepcopy(base) if base else {}
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k] = merge_config(merged[k], v)
        else:
            merged[k] = copy.deepcopy(v)
    return merged


def load_config(path="config.json"):
    if not os.path.exists(path):
        print(f"[PY] config '{path}' not found, using defaults.")
        return merge_config(DEFAULT_CONFIG, {})
    try:
        with open(path, "r", encoding="utf-8") as f:
            return merge_config(DEFAULT_CONFIG, json.load(f))
    except (OSError, ValueError) as e:
        print("[PY] Failed to load config:", e)
        return merge_config(DEFAULT_CONFIG, {})


class ConfigWatcher:
    """
    Watches a JSON config file and reloads it when the file changes.
    Usage:
        watcher = ConfigWatcher("config.json")
        cfg = watcher.get_config()        # initial load
        # later, once per frame:
        cfg = watcher.check_reload()      # returns new cfg or same dict
    """

    def __init__(self, path="config.json", min_check_interval=0.5):
        self.path = path
        self._cfg = merge_config(DEFAULT_CONFIG, {})
        self._mtime = 0.0
        self._last_checked = 0.0
        self._min_check_interval = min_check_interval  # seconds between stats
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            m = os.path.getmtime(self.path)
            with open(self.path, "r", encoding="utf-8") as f:
                self._cfg = merge_config(DEFAULT_CONFIG, json.load(f))
            self._mtime = m
        except (OSError, ValueError) as e:
            # keep the previous config
            print("[ConfigWatcher] failed to load config:", e)

    def get_config(self):
        return self._cfg

    def check_reload(self):
        """
        Cheap to call every frame; the file is only stat'ed every
        min_check_interval seconds. Returns the current config.
        """
        now = time.time()
        if now - self._last_checked < self._min_check_interval:
            return self._cfg
        self._last_checked = now

        try:
            if os.path.exists(self.path) and os.path.getmtime(self.path) != self._mtime:
                print("[ConfigWatcher] Detected config change, reloading...")
                self._load()
        except OSError as e:
            print("[ConfigWatcher] check_reload error:", e)

        return self._cfg


# ---------- drawing ----------
def draw_hand_overlay(frame, state, cfg=None, fps=None):
    """
    Return a copy of frame with the hand overlay drawn on it.
    Hand annotations only appear when the expected number of fingers was
    found; every other count leaves the frame untouched.
    """
    cfg = cfg or DEFAULT_CONFIG
    hcfg = cfg.get("hand", {})
    dcfg = cfg.get("display", {})
    debug_cfg = cfg.get("debug", {})

    out = frame.copy()

    if state.is_complete(hcfg.get("num_fingers", NUM_FINGERS)):
        if dcfg.get("show_contour", False) and state.contour is not None:
            draw_hand_contour(out, state)

        cv2.circle(out, state.center, 5, PURPLE, 1, cv2.LINE_AA)
        cv2.circle(out, state.center, state.radius, RED, 1, cv2.LINE_AA)

        for finger in state.finger_points():
            cv2.circle(out, finger, 10, GREEN, 3, cv2.LINE_AA)
            cv2.line(out, state.center, finger, YELLOW, 1, cv2.LINE_AA)

        for defect in state.defect_points():
            cv2.circle(out, defect, 2, GREY, 2, cv2.LINE_AA)

    if fps is not None and debug_cfg.get("show_fps", False):
        cv2.putText(
            out,
            f"FPS: {fps:.1f}",
            (10, out.shape[0] - 20),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.7,
            (255, 255, 0),
            2,
        )

    return out


def draw_hand_contour(frame, state):
    cv2.drawContours(frame, [state.contour], -1, BLUE, 1, cv2.LINE_AA)
    if state.hull is not None and len(state.hull):
        hull_points = state.contour[state.hull.reshape(-1)]
        cv2.polylines(frame, [hull_points], True, GREEN, 1, cv2.LINE_AA)
