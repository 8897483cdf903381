"""Pytest configuration for the minitac test suite."""

import sys
from pathlib import Path

# Add the repository root to the path for minitac imports
sys.path.insert(0, str(Path(__file__).parent.parent))
