#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class VariantsResponse(BaseModel):
    """Copy variants grouped by test arm."""
    A: List[str]
    B: List[str]
    C: List[str]


class BreakdownResponse(BaseModel):
    """Per-dimension sub-scores."""
    cta: int = Field(ge=0, le=20)
    benefit: int = Field(ge=0, le=20)
    clarity: int = Field(ge=0, le=20)
    numeric: int = Field(ge=0, le=20)
    emotion: int = Field(ge=0, le=20)
    category: int = Field(ge=0, le=25)


class GenerateResponse(BaseModel):
    """Response for POST /generate."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "variants": {
                    "A": ["Focus Planner A1", "Focus Planner A2"],
                    "B": ["Productivity B1", "Productivity B2"],
                    "C": ["C1", "C2"]
                },
                "score": 62,
                "breakdown": {
                    "cta": 20, "benefit": 9, "clarity": 17,
                    "numeric": 0, "emotion": 0, "category": 20
                },
                "recommendation": [
                    'Highlight a user benefit (e.g. "Save time", "Boost productivity")',
                    'Add a numeric proof point (e.g. "10x faster", "50% off")',
                    'Use emotional language (e.g. "Powerful", "Effortless", "Confident")'
                ]
            }
        }
    )

    variants: VariantsResponse
    score: int = Field(ge=0, le=100)
    breakdown: BreakdownResponse
    recommendation: List[str] = Field(min_length=1)


class HealthResponse(BaseModel):
    """Response for GET /health."""
    ok: bool = True
    service: str = "api"
