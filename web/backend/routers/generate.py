#!/usr/bin/env python3
"""
Generate endpoint - score screenshot copy and return variants.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request

from ..exceptions import InvalidRequestException
from ..models.requests import GenerateRequest
from ..models.responses import GenerateResponse
from ..services.generate_service import GenerateService, get_generate_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generate"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GenerateRequest.model_json_schema()}}
        }
    }
)
async def generate(
    request: Request,
    service: GenerateService = Depends(get_generate_service)
):
    """
    Score marketing copy for an app and return A/B/C variants.

    - appName: App display name
    - category: App Store category (matched case-insensitively)
    - screenshots: Exactly six captions or screenshot filenames

    Returns the 0-100 score, per-dimension breakdown and recommendations.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidRequestException("Invalid JSON")

    generate_request = service.parse_request(body)
    return service.generate(generate_request)
