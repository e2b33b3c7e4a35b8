#!/usr/bin/env python3
"""Cross-check the pruning search against the brute-force oracle on random records."""
from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from springs.smoke import main


if __name__ == "__main__":
    sys.exit(main())
