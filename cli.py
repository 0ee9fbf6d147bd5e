#!/usr/bin/env python3
"""
Development CLI entry point for knnvote

This script allows running the CLI during development without installing the package.
Usage: python cli.py 100 2 10 3 --seed 42
"""

import sys
import os

# Add src to Python path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from knnvote.main import main

if __name__ == "__main__":
    main()
