#!/usr/bin/env python
# ruff: noqa: E402
"""
Live webcam gender labelling with a Haar cascade and a Caffe gender network.

Press 's' to save the annotated frame as captured_<n>.jpg, 'q' to quit.

Example:
  python scripts/live_gender.py --camera 0 --snapshot-dir /tmp/shots
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on the import path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gender_cam.cli import live_main


if __name__ == "__main__":
    sys.exit(live_main())
