#!/usr/bin/env python3
"""
Clarity Score - Readability heuristic for short marketing copy.

Starts at a base of 10 and sums independent adjustments:
- Word count band: 8-40 -> +6, else 5-60 -> +3, else <5 -> -4, else -5
- Punctuation: no !/? -> +2, 1-2 -> +1, more -> -2 per extra mark
- Repeated !!/??/!? anywhere -> -2
- Average word length 4-9 -> +2
- Any word over 24 characters -> -2

The result is clamped to 0-20.
"""

import logging
import re

from core.utils import clamp

logger = logging.getLogger(__name__)

CLARITY_BASE = 10
CLARITY_MAX = 20
LONG_WORD_LENGTH = 24

_PUNCTUATION_PATTERN = re.compile(r'[!?]')
_REPEATED_PUNCTUATION_PATTERN = re.compile(r'[!?]{2,}')


def word_count_adjustment(word_count: int) -> int:
    # The narrower band is checked first; 5-7 and 41-60 fall through to +3
    if 8 <= word_count <= 40:
        return 6
    if 5 <= word_count <= 60:
        return 3
    if word_count < 5:
        return -4
    return -5


def punctuation_adjustment(corpus: str) -> int:
    punctuation_count = len(_PUNCTUATION_PATTERN.findall(corpus))
    if punctuation_count == 0:
        adjustment = 2
    elif punctuation_count <= 2:
        adjustment = 1
    else:
        adjustment = -(punctuation_count - 2) * 2

    if _REPEATED_PUNCTUATION_PATTERN.search(corpus):
        adjustment -= 2

    return adjustment


def calculate_clarity_score(corpus: str) -> int:
    """Clarity sub-score (0-20) for a normalized corpus."""
    words = corpus.split()
    clarity = CLARITY_BASE

    clarity += word_count_adjustment(len(words))
    clarity += punctuation_adjustment(corpus)

    avg_word_length = sum(len(w) for w in words) / len(words) if words else 0.0
    if 4 <= avg_word_length <= 9:
        clarity += 2

    if any(len(w) > LONG_WORD_LENGTH for w in words):
        clarity -= 2

    return clamp(clarity, 0, CLARITY_MAX)
