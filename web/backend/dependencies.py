#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from core.app_context import AppContext
from .config import get_config
from .services.matching_service import MatchingService


@lru_cache()
def get_app_context() -> AppContext:
    """
    Build the application context once per process.

    The record repository is read-only after loading, so a single instance
    is shared by every request.
    """
    return AppContext.build(get_config())


def get_matching_service() -> MatchingService:
    """
    FastAPI dependency that returns the matching service.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(service: MatchingService = Depends(get_matching_service)):
            ...
    """
    return MatchingService(get_app_context())
