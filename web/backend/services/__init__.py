"""Business logic services."""

from .generate_service import GenerateService, get_generate_service
