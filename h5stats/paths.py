"""
Persistent Path Management for H5 Tournament Stats.

This module provides stable, user-accessible paths for generated reports,
saved provider snapshots and log files.

Path Layout:
  Windows:  %APPDATA%\\H5_Stats\\
  macOS:    ~/Library/Application Support/H5_Stats/
  Linux:    ~/.local/share/H5_Stats/

Subdirectories:
  - reports/    -> <tournament>_stats_<timestamp>.xlsx
  - snapshots/  -> saved provider collections (JSON)
  - logs/       -> run.log
"""

import os
import re
import sys
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional


APP_DIR_NAME = 'H5_Stats'


# ==============================================================================
# PERSISTENT DATA ROOT
# ==============================================================================

def get_data_root() -> Path:
    """
    Get the persistent data root directory for the application.

    H5STATS_DATA_DIR takes precedence over the platform default.

    Returns:
        Path to the app data directory (not created here)
    """
    override = os.getenv('H5STATS_DATA_DIR')
    if override:
        return Path(override)

    if os.name == 'nt':  # Windows
        appdata = os.getenv('APPDATA')
        if appdata:
            data_root = Path(appdata) / APP_DIR_NAME
        else:
            data_root = Path.home() / 'Documents' / APP_DIR_NAME
    elif sys.platform == 'darwin':  # macOS
        data_root = Path.home() / 'Library' / 'Application Support' / APP_DIR_NAME
    else:  # Linux and others
        # Follow XDG Base Directory Specification
        xdg_data = os.getenv('XDG_DATA_HOME')
        if xdg_data:
            data_root = Path(xdg_data) / APP_DIR_NAME
        else:
            data_root = Path.home() / '.local' / 'share' / APP_DIR_NAME

    return data_root


# ==============================================================================
# DIRECTORY PATHS
# ==============================================================================

DATA_ROOT = get_data_root()

REPORTS_DIR = DATA_ROOT / 'reports'
SNAPSHOTS_DIR = DATA_ROOT / 'snapshots'
LOG_DIR = DATA_ROOT / 'logs'

RUN_LOG_PATH = LOG_DIR / 'run.log'


def ensure_data_dirs() -> None:
    """Create the data root and all subdirectories if they are missing."""
    for _dir in [DATA_ROOT, REPORTS_DIR, SNAPSHOTS_DIR, LOG_DIR]:
        _dir.mkdir(parents=True, exist_ok=True)


# ==============================================================================
# FILE NAMING
# ==============================================================================

_UNSAFE_FILENAME_CHARS = re.compile(r'[^\w\-]+', re.UNICODE)


def slugify(name: str) -> str:
    """Turn a tournament name into a filesystem-safe fragment."""
    slug = _UNSAFE_FILENAME_CHARS.sub('_', name.strip()).strip('_')
    return slug or 'tournament'


def default_report_path(tournament_name: str, now: Optional[datetime] = None) -> Path:
    """
    Build the default workbook path for a tournament.

    Example: reports/Spring_Cup_stats_20260301_184500.xlsx
    """
    now = now or datetime.now()
    timestamp = now.strftime("%Y%m%d_%H%M%S")
    return REPORTS_DIR / f"{slugify(tournament_name)}_stats_{timestamp}.xlsx"


def default_snapshot_path(tournament_id: str) -> Path:
    """Path where the provider snapshot for a tournament is stored."""
    return SNAPSHOTS_DIR / f"{tournament_id}.json"


# ==============================================================================
# LOGGING SETUP
# ==============================================================================

def setup_file_logging(log_path: Optional[Path] = None, level: int = logging.INFO):
    """
    Configure logging to write to the persistent log file.

    Returns the attached handler so callers can detach it.
    """
    log_path = log_path or RUN_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger = logging.getLogger()
    root_logger.addHandler(file_handler)
    if root_logger.level > level or root_logger.level == logging.NOTSET:
        root_logger.setLevel(level)

    return file_handler


__all__ = [
    'APP_DIR_NAME',
    'DATA_ROOT',
    'REPORTS_DIR',
    'SNAPSHOTS_DIR',
    'LOG_DIR',
    'RUN_LOG_PATH',
    'get_data_root',
    'ensure_data_dirs',
    'slugify',
    'default_report_path',
    'default_snapshot_path',
    'setup_file_logging',
]
