#!/usr/bin/env python3
"""
Keyword Sub-scores - CTA, Benefit, Emotion and Category alignment.

CTA and Emotion are raw counts (5 points per match) so repeated strong
language is rewarded up to the ceiling. Benefit and Category are ratios of
matches to total words so copy length alone neither helps nor hurts.

All matching is whole-word and case-insensitive: "cat" never matches
inside "category".
"""

from functools import lru_cache
from typing import Iterable
import logging
import re

from core.scorer.keyword_tables import (
    CTA_KEYWORDS,
    BENEFIT_KEYWORDS,
    EMOTION_KEYWORDS,
    category_keywords_for,
)
from core.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

SUBSCORE_MAX = 20
CATEGORY_MAX = 25
POINTS_PER_MATCH = 5
BENEFIT_RATIO_SCALE = 60
CATEGORY_RATIO_SCALE = 100


@lru_cache(maxsize=None)
def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(r'\b' + re.escape(keyword) + r'\b', re.IGNORECASE)


def count_keywords(corpus: str, keywords: Iterable[str]) -> int:
    """Total whole-word occurrences of every keyword in the corpus."""
    return sum(len(_keyword_pattern(kw).findall(corpus)) for kw in keywords)


def calculate_cta_score(corpus: str) -> int:
    """5 points per call-to-action keyword occurrence, clamped to 0-20."""
    return clamp(count_keywords(corpus, CTA_KEYWORDS) * POINTS_PER_MATCH, 0, SUBSCORE_MAX)


def calculate_emotion_score(corpus: str) -> int:
    """5 points per emotional keyword occurrence, clamped to 0-20."""
    return clamp(count_keywords(corpus, EMOTION_KEYWORDS) * POINTS_PER_MATCH, 0, SUBSCORE_MAX)


def calculate_benefit_score(corpus: str, total_word_count: int) -> int:
    """
    Benefit keyword density scaled to 0-20.

    Formula: round(matches / total_words * 60), clamped
    """
    benefit_count = count_keywords(corpus, BENEFIT_KEYWORDS)
    ratio = benefit_count / max(total_word_count, 1)
    return clamp(round_half_up(ratio * BENEFIT_RATIO_SCALE), 0, SUBSCORE_MAX)


def calculate_category_score(corpus: str, category: str, total_word_count: int) -> int:
    """
    Category alignment density scaled to 0-25.

    Unknown categories have no keywords and score 0.

    Formula: round(matches / total_words * 100), clamped
    """
    keywords = category_keywords_for(category)
    if not keywords:
        logger.debug(f"No keyword table for category '{category}', alignment is 0")
        return 0

    match_count = count_keywords(corpus, keywords)
    ratio = match_count / max(total_word_count, 1)
    return clamp(round_half_up(ratio * CATEGORY_RATIO_SCALE), 0, CATEGORY_MAX)
