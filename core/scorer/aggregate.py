#!/usr/bin/env python3
"""
Weighted Aggregator - Combine the six sub-scores into a 0-100 total.

Formula: sum(sub_score / ceiling * weight), clamped to 0-100 and rounded

Default weights: CTA 20, Benefit 20, Clarity 15, Numeric 10, Emotion 10, Category 25.
"""

from typing import Dict, Optional
import logging

from core.config_loader import ScoreWeights
from core.scorer.models import ScoreBreakdown
from core.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

SUBSCORE_CEILINGS: Dict[str, int] = {
    'cta': 20,
    'benefit': 20,
    'clarity': 20,
    'numeric': 20,
    'emotion': 20,
    'category': 25,
}


def calculate_weighted_score(
    breakdown: ScoreBreakdown,
    weights: Optional[ScoreWeights] = None
) -> int:
    """
    Calculate the overall score from a breakdown.

    Args:
        breakdown: Six bounded sub-scores
        weights: Target contribution per dimension (defaults sum to 100)

    Returns:
        Integer score in [0, 100]
    """
    weights = weights or ScoreWeights()
    weight_map = weights.model_dump()

    weighted_score = sum(
        getattr(breakdown, name) / ceiling * weight_map[name]
        for name, ceiling in SUBSCORE_CEILINGS.items()
    )

    return round_half_up(clamp(weighted_score, 0.0, 100.0))
