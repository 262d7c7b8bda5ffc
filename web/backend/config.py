#!/usr/bin/env python3
"""
Configuration management for the ASO Copilot API.
"""

import os
from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from the YAML file named by ASO_CONFIG (or the default
    config.yaml lookup) and applies environment variable overrides.
    Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config(os.environ.get("ASO_CONFIG"))
