#!/usr/bin/env python3
"""
Arc Bookmarks Export

Run from a checkout without installing: python main.py [options]
"""

from arcmarks.cli import run


if __name__ == "__main__":
    run()
