#!/usr/bin/env python3
"""Launcher for the Student Report Card Generator without installing."""

from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists() and SRC.as_posix() not in sys.path:
    sys.path.insert(0, SRC.as_posix())

from report_card.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
