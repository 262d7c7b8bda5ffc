#!/usr/bin/env python3
"""
Numeric Signal Score - Rewards concrete proof points ("10x faster", "50% off", "1M users").

Runs on the corpus variant without filename-like captions so digits in
names such as screenshot_1.png are not counted.
"""

from typing import List
import logging
import re

from core.utils import clamp

logger = logging.getLogger(__name__)

NUMERIC_MAX = 20
POINTS_PER_SIGNAL = 5

NUMERIC_UNITS = (
    '%', 'x', 'k', 'm', 'b',
    'days?', 'hrs?', 'hours?', 'mins?', 'minutes?',
    'sec', 'seconds?', 'users?', 'downloads?', 'stars?', 'rating',
)

_NUMERIC_PATTERN = re.compile(
    r'\b\d+(?:[.,]\d+)?(?:\s?(?:' + '|'.join(NUMERIC_UNITS) + r'))?\b',
    re.IGNORECASE
)


def extract_numeric_signals(corpus: str) -> List[str]:
    """Distinct trimmed numeric signals, in order of first appearance."""
    signals = []
    for match in _NUMERIC_PATTERN.findall(corpus):
        signal = match.strip()
        if signal not in signals:
            signals.append(signal)
    return signals


def calculate_numeric_score(numeric_corpus: str) -> int:
    """5 points per distinct numeric signal, clamped to 0-20."""
    signals = extract_numeric_signals(numeric_corpus)
    if signals:
        logger.debug(f"Numeric signals: {signals}")
    return clamp(len(signals) * POINTS_PER_SIGNAL, 0, NUMERIC_MAX)
