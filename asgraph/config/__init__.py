"""
asgraph Configuration

Environment-driven settings for the transformer and resolvers.
"""

from __future__ import annotations

import os
from functools import lru_cache

from .schemas import ResolverSettings, Settings, TransformerOptions


def _flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings from environment.

    Uses lru_cache for singleton pattern. Call ``get_settings.cache_clear()``
    after changing the environment.
    """
    timeout = os.getenv("ASGRAPH_HTTP_TIMEOUT", "30")

    return Settings(
        transformer=TransformerOptions(
            convert_text_to_links=_flag("ASGRAPH_CONVERT_TEXT_TO_LINKS", True),
            compose_with_missing_constructors=_flag(
                "ASGRAPH_COMPOSE_WITH_MISSING_CONSTRUCTORS", True
            ),
            enable_composite_types=_flag("ASGRAPH_ENABLE_COMPOSITE_TYPES", True),
            always_return_value_on_transform=_flag(
                "ASGRAPH_ALWAYS_RETURN_VALUE_ON_TRANSFORM", False
            ),
            exclude_extraneous_values=_flag("ASGRAPH_EXCLUDE_EXTRANEOUS_VALUES", True),
        ),
        resolver=ResolverSettings(
            accept=os.getenv("ASGRAPH_HTTP_ACCEPT", "application/json"),
            timeout=None if timeout.lower() in ("", "none") else float(timeout),
            follow_redirects=_flag("ASGRAPH_HTTP_FOLLOW_REDIRECTS", True),
            user_agent=os.getenv("ASGRAPH_HTTP_USER_AGENT", "asgraph/0.1.0"),
        ),
    )


__all__ = [
    "ResolverSettings",
    "Settings",
    "TransformerOptions",
    "get_settings",
]
