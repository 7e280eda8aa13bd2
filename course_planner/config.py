"""
Configuration for the course planner.

Settings come from environment variables, optionally loaded from a .env
file in the working directory or the project root.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent


def load_environment():
    """Load environment variables from the first .env file found."""
    possible_paths = [
        Path('.env'),
        BASE_DIR / '.env',
    ]

    for path in possible_paths:
        if path.exists():
            load_dotenv(dotenv_path=path)
            return path
    return None


load_environment()

DEBUG_MODE = os.getenv('DEBUG_MODE', 'False').lower() == 'true'
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FILE = os.getenv('LOG_FILE', 'course_planner.log')
DATA_FILE = os.getenv('COURSE_DATA_FILE', str(BASE_DIR / 'data' / 'ABCU_Advising_Program_Input.csv'))


def get_log_level(name=None):
    """Convert a level name to a logging constant (INFO when unknown)."""
    if name is None:
        if DEBUG_MODE:
            return logging.DEBUG
        name = LOG_LEVEL
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(name.upper(), logging.INFO)
