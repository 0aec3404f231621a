# wortkarte/core/paths.py
from __future__ import annotations

import sys
from pathlib import Path


ASSETS_DIRNAME = "assets"
CONFIG_FILENAME = "config.yml"


def runtime_root() -> Path:
    """
    Where bundled files live:
    - PyInstaller one-file: sys._MEIPASS
    - PyInstaller one-folder: next to the exe
    - source run / Android (p4a unpacks the app dir): project root
    """
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass)
        return Path(sys.executable).resolve().parent

    # Source: .../wortkarte/core/paths.py -> project root is parents[2]
    here = Path(__file__).resolve()
    if len(here.parents) >= 3:
        return here.parents[2]
    return here.parent


def assets_dir() -> Path:
    return runtime_root() / ASSETS_DIRNAME


def words_path(filename: str) -> Path:
    """Resolve the word list: absolute paths as-is, everything else inside assets/."""
    p = Path(filename)
    if p.is_absolute():
        return p
    return assets_dir() / p


def config_path() -> Path:
    return runtime_root() / CONFIG_FILENAME
