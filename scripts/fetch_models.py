#!/usr/bin/env python
# ruff: noqa: E402
"""
Download the Caffe gender network into the model directory ahead of time.

Usage:
  python scripts/fetch_models.py
  GENDER_CAM_MODEL_DIR=/opt/models python scripts/fetch_models.py
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on the import path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gender_cam.cli import fetch_models_main


if __name__ == "__main__":
    sys.exit(fetch_models_main())
