"""Constants for the project."""

from pathlib import Path
from typing import Tuple

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "config"

# Optional edit-cost overrides read by run_demo.py
COSTS_YAML = CONFIG_FOLDER / "costs.yaml"

# ============================================================================
# Demo inputs
# ============================================================================
EXAMPLE_PAIR: Tuple[str, str] = ("intention", "execution")
EXAMPLE_TRIPLE: Tuple[str, str, str] = ("intention", "execution", "extinction")

# ============================================================================
# Display
# ============================================================================
GAP_SYMBOL = "*"
