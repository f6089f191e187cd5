#!/usr/bin/env python
# ruff: noqa: E402
"""
Menu-driven gender labelling with the skin-colour detector and rule-based
classifier. No trained model is needed; without a camera a synthetic test
pattern is analyzed instead.

Example:
  python scripts/heuristic_gender.py --synthetic
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on the import path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gender_cam.cli import heuristic_main


if __name__ == "__main__":
    sys.exit(heuristic_main())
