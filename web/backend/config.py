#!/usr/bin/env python3
"""
Configuration management for the volunteer matching web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from the YAML file named by VOLUNTEER_MATCH_CONFIG (default:
    config.yaml in the project root) and applies environment variable
    overrides. Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    config_path = os.environ.get(
        "VOLUNTEER_MATCH_CONFIG",
        str(get_project_root() / "config.yaml")
    )
    config = load_config(config_path)

    # Relative records paths are resolved against the project root
    records_file = Path(config.data.records_file)
    if not records_file.is_absolute():
        config.data.records_file = str(get_project_root() / records_file)

    return config
