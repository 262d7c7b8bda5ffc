#!/usr/bin/env python3
"""
Recommendations - Advisory messages for weak dimensions.

Each dimension below the threshold contributes one fixed message, always in
the order CTA, Benefit, Clarity, Numeric, Emotion, Category. When nothing is
weak a single affirmation is returned, so the list is never empty.
"""

from typing import List, Tuple
import logging

from core.scorer.models import ScoreBreakdown

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 12

RECOMMENDATION_MESSAGES: Tuple[Tuple[str, str], ...] = (
    ('cta', 'Add a clear CTA keyword (e.g. "Get", "Start", "Try free")'),
    ('benefit', 'Highlight a user benefit (e.g. "Save time", "Boost productivity")'),
    ('clarity', 'Simplify copy: keep message concise and avoid excessive punctuation'),
    ('numeric', 'Add a numeric proof point (e.g. "10x faster", "50% off")'),
    ('emotion', 'Use emotional language (e.g. "Powerful", "Effortless", "Confident")'),
    ('category', 'Align copy with your target category keywords for stronger relevance'),
)

POSITIVE_MESSAGE = 'Great copy! Keep testing variations to maintain performance.'


def build_recommendations(
    breakdown: ScoreBreakdown,
    threshold: float = DEFAULT_THRESHOLD
) -> List[str]:
    recommendations = [
        message
        for dimension, message in RECOMMENDATION_MESSAGES
        if getattr(breakdown, dimension) < threshold
    ]

    if not recommendations:
        recommendations.append(POSITIVE_MESSAGE)

    return recommendations
