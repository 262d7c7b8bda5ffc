#!/usr/bin/env python3
"""
Scoring Models - Data structures for copy scoring input and results.
"""

from typing import List, Dict, Any, Mapping, Tuple
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class ScoreInput:
    """App identity record to score: name, category and screenshot captions."""
    app_name: str
    category: str
    captions: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any sequence from callers but keep the record immutable
        object.__setattr__(self, 'captions', tuple(self.captions))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ScoreInput':
        """Build from wire-shaped ({appName, screenshots}) or snake_case mappings."""
        app_name = data.get('appName', data.get('app_name', ''))
        captions = data.get('screenshots', data.get('captions', ()))
        return cls(
            app_name=app_name,
            category=data.get('category', ''),
            captions=tuple(captions)
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-dimension sub-scores. cta/benefit/clarity/numeric/emotion are 0-20, category is 0-25."""
    cta: int = 0
    benefit: int = 0
    clarity: int = 0
    numeric: int = 0
    emotion: int = 0
    category: int = 0


@dataclass(frozen=True)
class ScoreResult:
    """Complete scoring result: 0-100 score, breakdown and recommendations."""
    score: int
    breakdown: ScoreBreakdown
    recommendation: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'breakdown': asdict(self.breakdown),
            'recommendation': list(self.recommendation),
        }
