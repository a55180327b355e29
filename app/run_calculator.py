#!/usr/bin/env python3
"""
Expression Calculator Entry Point

Run with:
    python run_calculator.py

Or, once installed:
    exprcalc
"""

import sys
import os

# Add app/ to path so the package imports without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from exprcalc.shell import main


if __name__ == "__main__":
    main()
