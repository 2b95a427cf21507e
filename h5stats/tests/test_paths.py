"""
Tests for the paths module.

Verifies that:
1. The data root honors H5STATS_DATA_DIR and the platform defaults
2. Report and snapshot file names are stable and filesystem-safe
3. File logging attaches a handler writing to the given file
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from unittest import mock

import pytest


class TestDataRoot:
    """Test get_data_root."""

    def test_override_wins(self, tmp_path):
        """H5STATS_DATA_DIR should override the platform default."""
        from h5stats.paths import get_data_root

        with mock.patch.dict(os.environ, {'H5STATS_DATA_DIR': str(tmp_path)}):
            assert get_data_root() == tmp_path

    @pytest.mark.skipif(os.name == 'nt' or sys.platform == 'darwin', reason="XDG layout is Linux only")
    def test_xdg_data_home(self, monkeypatch, tmp_path):
        """XDG_DATA_HOME should be honored on Linux."""
        from h5stats.paths import get_data_root, APP_DIR_NAME

        monkeypatch.delenv('H5STATS_DATA_DIR', raising=False)
        monkeypatch.setenv('XDG_DATA_HOME', str(tmp_path))

        assert get_data_root() == tmp_path / APP_DIR_NAME

    @pytest.mark.skipif(os.name == 'nt' or sys.platform == 'darwin', reason="XDG layout is Linux only")
    def test_linux_default(self, monkeypatch):
        """The Linux default should be under ~/.local/share."""
        from h5stats.paths import get_data_root

        monkeypatch.delenv('H5STATS_DATA_DIR', raising=False)
        monkeypatch.delenv('XDG_DATA_HOME', raising=False)

        assert get_data_root() == Path.home() / '.local' / 'share' / 'H5_Stats'

    def test_subdirectories_under_root(self):
        """reports, snapshots and logs should live under the data root."""
        from h5stats.paths import DATA_ROOT, REPORTS_DIR, SNAPSHOTS_DIR, LOG_DIR, RUN_LOG_PATH

        for path in (REPORTS_DIR, SNAPSHOTS_DIR, LOG_DIR):
            assert path.parent == DATA_ROOT
        assert RUN_LOG_PATH.parent == LOG_DIR

    def test_ensure_data_dirs(self):
        """ensure_data_dirs should create every data directory."""
        from h5stats.paths import ensure_data_dirs, REPORTS_DIR, SNAPSHOTS_DIR, LOG_DIR

        ensure_data_dirs()

        assert REPORTS_DIR.exists()
        assert SNAPSHOTS_DIR.exists()
        assert LOG_DIR.exists()


class TestFileNaming:
    """Test report and snapshot naming."""

    def test_slugify(self):
        """slugify should make names filesystem-safe."""
        from h5stats.paths import slugify

        assert slugify("Spring Cup 2026") == "Spring_Cup_2026"
        assert slugify("  a/b\\c  ") == "a_b_c"
        assert slugify("???") == "tournament"

    def test_default_report_path(self):
        """Report names should carry the tournament and a timestamp."""
        from h5stats.paths import default_report_path, REPORTS_DIR

        path = default_report_path("Spring Cup", datetime(2026, 3, 1, 18, 45, 0))

        assert path == REPORTS_DIR / "Spring_Cup_stats_20260301_184500.xlsx"

    def test_default_snapshot_path(self):
        """Snapshots should be named after the tournament id."""
        from h5stats.paths import default_snapshot_path, SNAPSHOTS_DIR

        assert default_snapshot_path("t1") == SNAPSHOTS_DIR / "t1.json"


class TestFileLogging:
    def test_setup_file_logging_writes(self, tmp_path):
        """setup_file_logging should write records to the given file."""
        from h5stats.paths import setup_file_logging

        log_path = tmp_path / "logs" / "run.log"
        handler = setup_file_logging(log_path)
        try:
            logging.getLogger("h5stats.test").warning("hello from test")
            handler.flush()
        finally:
            logging.getLogger().removeHandler(handler)
            handler.close()

        text = log_path.read_text(encoding='utf-8')
        assert "| WARNING | hello from test" in text
