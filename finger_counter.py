"""
Entry point for the finger counter.

Usage examples:
    python finger_counter.py                        # webcam 0, records video.avi
    python finger_counter.py --source clip.mp4 --no-record
    python finger_counter.py --publish              # also stream JSON over TCP
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
PY_DIR = ROOT / "python"
if str(PY_DIR) not in sys.path:
    sys.path.insert(0, str(PY_DIR))


def main() -> None:
    """Delegate to the single-threaded capture/analyze/display loop (python/main_loop)."""
    from main_loop import main as run_main_loop

    run_main_loop()


if __name__ == "__main__":
    main()
