#!/usr/bin/env python3
"""
Scoring Module - Rule-based copy scoring for App Store Optimization.

Public API:
- score_copy: Score an app identity record
- CopyScoringService: Config-bound scoring service
- ScoreInput / ScoreBreakdown / ScoreResult: Data structures

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures
- keyword_tables.py: Fixed CTA/benefit/emotion/category vocabularies
- corpus.py: Corpus normalization and filename-like caption detection
- keywords.py: CTA, benefit, emotion and category sub-scores
- clarity.py: Clarity sub-score
- numeric.py: Numeric proof-point sub-score
- aggregate.py: Weighted 0-100 total
- recommendations.py: Advisory messages for weak dimensions
- service.py: score_copy orchestrator
"""

from core.scorer.models import ScoreInput, ScoreBreakdown, ScoreResult
from core.scorer.service import CopyScoringService, score_copy

__all__ = ['CopyScoringService', 'score_copy', 'ScoreInput', 'ScoreBreakdown', 'ScoreResult']
