import argparse
import sys
import time
from collections import deque
from pathlib import Path

import cv2

from HandServer import HandServer
from HandTracker import HandTracker
from helpers import ConfigWatcher, draw_hand_overlay

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.json"


# --------------------------------------------------------
# STARTUP
# --------------------------------------------------------
def fatal(message):
    print(f"[PY] ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def parse_source(source):
    """Camera index ("0") or video file path."""
    if isinstance(source, int):
        return source
    text = str(source)
    return int(text) if text.isdigit() else text


def open_capture(source):
    cap = cv2.VideoCapture(parse_source(source))
    if not cap.isOpened():
        fatal(f"Cannot open capture source {source!r}")
    return cap


def open_recorder(cap, frame, rcfg):
    fps = cap.get(cv2.CAP_PROP_FPS)
    if not fps or fps <= 0:
        fps = rcfg.get("fps_fallback", 10)

    height, width = frame.shape[:2]
    fourcc = cv2.VideoWriter_fourcc(*rcfg.get("fourcc", "MJPG"))
    path = str(rcfg.get("path", "video.avi"))

    writer = cv2.VideoWriter(path, fourcc, fps, (width, height), True)
    if not writer.isOpened():
        fatal(f"Cannot open video writer '{path}'")
    print(f"[PY] Recording to {path} at {fps:.1f} fps")
    return writer


def init_windows(dcfg):
    out_name = dcfg.get("output_window", "output")
    mask_name = dcfg.get("mask_window", "thresholded")
    cv2.namedWindow(out_name, cv2.WINDOW_AUTOSIZE)
    cv2.namedWindow(mask_name, cv2.WINDOW_AUTOSIZE)
    cv2.moveWindow(out_name, *dcfg.get("output_pos", [50, 50]))
    cv2.moveWindow(mask_name, *dcfg.get("mask_pos", [700, 50]))
    return out_name, mask_name


# --------------------------------------------------------
# FRAME LOOP
# --------------------------------------------------------
def run(cfg_watcher, source=None, output=None, record=None, publish=None):
    cfg = cfg_watcher.get_config()
    rcfg = dict(cfg.get("recording", {}))
    if output:
        rcfg["path"] = output
    if record is None:
        record = rcfg.get("enabled", True)
    scfg = cfg.get("server", {})
    if publish is None:
        publish = scfg.get("enabled", False)
    if source is None:
        source = cfg.get("capture", {}).get("source", 0)

    cap = open_capture(source)
    ok, frame = cap.read()
    if not ok:
        cap.release()
        fatal(f"Capture source {source!r} returned no frames")

    writer = open_recorder(cap, frame, rcfg) if record else None
    out_name, mask_name = init_windows(cfg.get("display", {}))
    server = HandServer(scfg.get("host", "127.0.0.1"), scfg.get("port", 5555)) if publish else None

    tracker = HandTracker(cfg)
    fps_times = deque(maxlen=cfg.get("debug", {}).get("fps_window", 20))
    current_fps = 0.0

    print("[PY] Frame loop started. Press quit key to stop.")

    try:
        while ok:
            new_cfg = cfg_watcher.check_reload()
            if new_cfg is not cfg:
                cfg = new_cfg
                tracker.update_config(cfg)

            now = time.time()
            fps_times.append(now)
            span = fps_times[-1] - fps_times[0]
            if len(fps_times) > 1 and span > 0:
                current_fps = (len(fps_times) - 1) / span

            state = tracker.process_frame(frame)
            annotated = draw_hand_overlay(frame, state, cfg, fps=current_fps)

            cv2.imshow(out_name, annotated)
            cv2.imshow(mask_name, tracker.mask)
            if writer is not None:
                writer.write(annotated)

            if server is not None and server.update():
                server.send_state(state, fps=current_fps)

            quit_key = cfg.get("display", {}).get("quit_key") or "q"
            if cv2.waitKey(1) & 0xFF == ord(quit_key[0]):
                break

            ok, frame = cap.read()
    finally:
        cap.release()
        if writer is not None:
            writer.release()
        if server is not None:
            server.close()
        cv2.destroyAllWindows()

    print("[PY] Shutdown complete.")


# --------------------------------------------------------
# MAIN ENTRY
# --------------------------------------------------------
def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Real-time finger counter")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="JSON config file, reloaded when it changes.",
    )
    parser.add_argument(
        "--source",
        default=None,
        help="Camera index or video file (overrides capture.source).",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Recorded video path (overrides recording.path).",
    )
    parser.add_argument(
        "--no-record",
        dest="record",
        action="store_false",
        default=None,
        help="Do not record the annotated stream.",
    )
    parser.add_argument(
        "--publish",
        action="store_true",
        default=None,
        help="Publish hand state as JSON lines over TCP.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    watcher = ConfigWatcher(args.config)
    run(
        watcher,
        source=args.source,
        output=args.output,
        record=args.record,
        publish=args.publish,
    )


if __name__ == "__main__":
    main()
