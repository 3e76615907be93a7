#!/usr/bin/env python3
"""
Minesweeper - main entry point.

Usage:
    python main.py play [--mobile] [--size N] [--load FILE]
    python main.py show FILE
    python main.py demo [--games N]
"""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from frontend.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
