#!/usr/bin/env python3
"""
Generate service - scores copy and assembles the /generate response.
"""

import logging
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from core.scorer import CopyScoringService, ScoreInput
from core.variants import generate_variants
from ..config import get_config
from ..exceptions import invalid_request_from_validation
from ..models.requests import GenerateRequest
from ..models.responses import GenerateResponse

logger = logging.getLogger(__name__)


class GenerateService:
    """Service wrapping the scoring engine for the HTTP layer."""

    def __init__(self, scoring_service: CopyScoringService):
        self.scoring_service = scoring_service

    def parse_request(self, body: Any) -> GenerateRequest:
        """
        Validate a decoded JSON body.

        Raises:
            InvalidRequestException: If the body does not match GenerateRequest.
        """
        try:
            return GenerateRequest.model_validate(body)
        except ValidationError as e:
            raise invalid_request_from_validation(e) from e

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """
        Score the request's copy and attach placeholder variants.

        Args:
            request: Validated generate request.

        Returns:
            GenerateResponse validated against the response schema.
        """
        result = self.scoring_service.score(ScoreInput(
            app_name=request.app_name,
            category=request.category,
            captions=tuple(request.screenshots)
        ))

        logger.info(f"Generated copy for '{request.app_name}' ({request.category}): score={result.score}")

        return GenerateResponse.model_validate({
            'variants': generate_variants(request.app_name, request.category),
            **result.to_dict()
        })


@lru_cache()
def get_generate_service() -> GenerateService:
    """Get the global generate service instance."""
    return GenerateService(CopyScoringService(get_config().scorer))
