#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

Drop images into ``images/`` and run:

    python main.py build -x 8 -y 6

Or use the full CLI:

    python -m rainbow_collage.cli build --help
    python -m rainbow_collage.cli inspect photos/ -x 4 -y 3
"""

from rainbow_collage.cli import app

if __name__ == "__main__":
    app()
