#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only engine tests (no web stack)
    python -m pytest tests/ -v -m "not api"

    # Using unittest
    python -m unittest discover tests -v
"""

FILENAME_SCREENSHOTS = [
    'screenshot_1.png',
    'screenshot_2.png',
    'screenshot_3.png',
    'screenshot_4.png',
    'screenshot_5.png',
    'screenshot_6.png',
]

PRODUCTIVITY_CAPTIONS = [
    'Save time with task planning',
    'Boost productivity with focused workflows',
    'Organize your day and complete goals faster',
    'Start now and track your progress daily',
    'Simple routines for better focus and efficiency',
    'Join free to improve your productivity habits',
]
