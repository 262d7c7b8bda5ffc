#!/usr/bin/env python3
"""
Scoring Service - Rule-based copy scoring.

Turns an app identity record (name, category, six captions) into:
- Breakdown: cta, benefit, clarity, numeric, emotion (0-20 each), category (0-25)
- Score: weighted 0-100 total
- Recommendation: advisory messages for weak dimensions

Pure and deterministic: no I/O, no randomness, no state shared between calls.
Input shape (caption count, field types) is validated upstream by the API
schema layer; the engine itself never raises on well-typed input.
"""

from typing import Any, Mapping, Optional, Union
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import ScoreInput, ScoreBreakdown, ScoreResult
from core.scorer.corpus import build_corpus, extract_words
from core.scorer import keywords
from core.scorer.clarity import calculate_clarity_score
from core.scorer.numeric import calculate_numeric_score
from core.scorer.aggregate import calculate_weighted_score
from core.scorer.recommendations import build_recommendations

logger = logging.getLogger(__name__)


def calculate_breakdown(score_input: ScoreInput) -> ScoreBreakdown:
    """Compute all six sub-scores for an input."""
    corpus = build_corpus(score_input)
    numeric_corpus = build_corpus(score_input, exclude_filename_captions=True)
    total_word_count = max(len(extract_words(corpus)), 1)

    return ScoreBreakdown(
        cta=keywords.calculate_cta_score(corpus),
        benefit=keywords.calculate_benefit_score(corpus, total_word_count),
        clarity=calculate_clarity_score(corpus),
        numeric=calculate_numeric_score(numeric_corpus),
        emotion=keywords.calculate_emotion_score(corpus),
        category=keywords.calculate_category_score(corpus, score_input.category, total_word_count),
    )


def score_copy(
    score_input: Union[ScoreInput, Mapping[str, Any]],
    config: Optional[ScorerConfig] = None
) -> ScoreResult:
    """
    Score marketing copy.

    Args:
        score_input: ScoreInput, or a mapping with appName/app_name,
            category and screenshots/captions
        config: Optional ScorerConfig (weights, recommendation threshold)

    Returns:
        ScoreResult with score, breakdown and a non-empty recommendation list
    """
    if not isinstance(score_input, ScoreInput):
        score_input = ScoreInput.from_mapping(score_input)
    config = config or ScorerConfig()

    breakdown = calculate_breakdown(score_input)
    score = calculate_weighted_score(breakdown, config.weights)
    recommendation = build_recommendations(breakdown, config.recommendation_threshold)

    logger.debug(f"Scored '{score_input.app_name}' ({score_input.category}): {score} {breakdown}")

    return ScoreResult(score=score, breakdown=breakdown, recommendation=recommendation)


class CopyScoringService:
    """
    Service wrapper binding the scoring engine to a ScorerConfig.

    Safe to share between threads: holds only immutable configuration.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score(self, score_input: Union[ScoreInput, Mapping[str, Any]]) -> ScoreResult:
        return score_copy(score_input, self.config)
