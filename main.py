#!/usr/bin/env python3
"""
Main script for running calculators from a source checkout.

Equivalent to the installed ``calcdeck`` command.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from calcdeck.cli import main

if __name__ == "__main__":
    sys.exit(main())
