"""Centralized path resolution for frozen (PyInstaller) and development modes."""

import os
import sys
from pathlib import Path

if getattr(sys, "frozen", False):
    BASE_DIR = Path(sys.executable).parent
else:
    BASE_DIR = Path(__file__).resolve().parent.parent

CONFIG_DIR = BASE_DIR / "config"
CONFIG_PATH = Path(os.environ.get("SHS_CONFIG_PATH", CONFIG_DIR / "config.jsonc"))
