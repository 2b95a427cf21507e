"""Pytest conftest: path setup and an isolated data directory."""

import os
import sys
import tempfile
from pathlib import Path

# Add the project root to sys.path so `import h5stats` works from a checkout
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Add tests/ to sys.path so `from helpers import ...` works
TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

# Keep reports, snapshots and logs written by tests out of the user's data root
os.environ.setdefault("H5STATS_DATA_DIR", tempfile.mkdtemp(prefix="h5stats_tests_"))
