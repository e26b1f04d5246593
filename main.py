#!/usr/bin/env python3
"""Microwave — entry point.

Run with:
    python main.py
    python -m microwave
"""

from microwave.__main__ import main


if __name__ == "__main__":
    main()
