"""Test package; makes edit_align and scripts importable from a checkout."""

import sys
from pathlib import Path

# Repository root holds both edit_align/ and scripts/
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
