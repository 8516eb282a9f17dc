"""
Default resolver for asgraph.

Used by Link.resolve() and ResolvableSequence.resolve() whenever no
custom resolver is given.
"""

from __future__ import annotations

import logging

from .base import ResolveHandler, ResolverChain
from .http import HttpFetchResolver

logger = logging.getLogger(__name__)

# Global resolver instance
_resolver: ResolveHandler | None = None


def get_default_resolver() -> ResolveHandler:
    """
    Get the default resolver.

    Creates ``ResolverChain([HttpFetchResolver()])`` on first access
    (lazy initialization).
    """
    global _resolver
    if _resolver is None:
        _resolver = ResolverChain([HttpFetchResolver()])
    return _resolver


def set_default_resolver(resolver: ResolveHandler) -> None:
    """Replace the default resolver."""
    global _resolver
    _resolver = resolver
    logger.info(f"[resolver] Default resolver set to {resolver!r}")


def reset_default_resolver() -> None:
    """
    Reset the default resolver (for testing).

    The next get_default_resolver() call builds a fresh chain.
    """
    global _resolver
    _resolver = None
