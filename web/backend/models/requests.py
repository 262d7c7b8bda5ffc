#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

SCREENSHOT_COUNT = 6


class GenerateRequest(BaseModel):
    """Request to score copy and generate variants."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "appName": "Focus Planner",
                "category": "Productivity",
                "screenshots": [
                    "Save time with task planning",
                    "Boost productivity with focused workflows",
                    "Organize your day and complete goals faster",
                    "Start now and track your progress daily",
                    "Simple routines for better focus and efficiency",
                    "Join free to improve your productivity habits"
                ]
            }
        }
    )

    app_name: str = Field(..., alias="appName", description="App display name")
    category: str = Field(..., description="App Store category, e.g. Productivity")
    screenshots: List[str] = Field(
        ...,
        min_length=SCREENSHOT_COUNT,
        max_length=SCREENSHOT_COUNT,
        description="Exactly six screenshot captions or filenames"
    )
