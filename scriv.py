#!/usr/bin/env python3
"""
Scriv RTF - Scrivener RTF <-> annotated text converter

Simple usage:
    python scriv.py to-text content.rtf           # Outputs content.txt
    python scriv.py to-text Project.scriv/Files   # Converts every .rtf in the folder
    python scriv.py to-rtf content.txt            # Outputs content.rtf
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from scriv_rtf.cli import app

if __name__ == "__main__":
    app()
