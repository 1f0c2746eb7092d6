"""Entry point for the sort visualizer.

Opens the arcade window, or runs a single sort headless with ``--headless``.
"""
import sys

from sortviz.cli import main

if __name__ == "__main__":
    sys.exit(main())
