"""
HTTP fetch resolver.

Resolves an href by fetching its JSON representation and transforming
the body into vocabulary instances.

Failure Handling:
    Any transport error, non-2xx status, undecodable body or invalid
    document means "cannot resolve here": the request moves on to the
    next resolver, or falls back to the bare href. Failures are logged,
    never raised to the caller.

Usage:
    async with HttpFetchResolver() as resolver:
        note = await resolver.handle("https://example.com/notes/1")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ..config import ResolverSettings, get_settings
from .base import Resolver

if TYPE_CHECKING:
    from ..transform.transformer import Transformer

logger = logging.getLogger(__name__)


class HttpFetchResolver(Resolver):
    """
    Resolver that GETs the href with ``Accept: application/json``.

    Args:
        settings: Request settings (default: from environment settings)
        http_client: Client to use instead of creating one; an injected
            client is never closed by this resolver
        transformer: Transformer for fetched documents (default: the
            default transformer)
    """

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transformer: Transformer | None = None,
    ) -> None:
        self._settings = settings if settings is not None else get_settings().resolver
        self._client = http_client
        self._owns_client = http_client is None
        self._transformer = transformer

    @property
    def transformer(self) -> Transformer:
        if self._transformer is None:
            from ..transform.transformer import get_default_transformer

            return get_default_transformer()
        return self._transformer

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                timeout=self._settings.timeout,
                follow_redirects=self._settings.follow_redirects,
                headers={"User-Agent": self._settings.user_agent},
            )
        return self._client

    async def try_handle(self, request: str) -> Any | None:
        document = await self.fetch(request)
        if document is None:
            return None

        try:
            return self.transformer.transform(document)
        except ValueError as e:
            logger.warning(f"[resolver] Invalid document at {request}: {e}")
            return None

    async def fetch(self, href: str) -> Any | None:
        """
        Fetch the decoded JSON body for an href.

        Returns:
            The decoded body, or None on any failure
        """
        try:
            client = await self._get_client()
            response = await client.get(href, headers={"Accept": self._settings.accept})
        except (httpx.HTTPError, httpx.InvalidURL, RuntimeError) as e:
            # RuntimeError: an injected client that was already closed
            logger.debug(f"[resolver] Fetch failed for {href}: {e}")
            return None

        if not response.is_success:
            logger.debug(f"[resolver] Fetch failed for {href}: status={response.status_code}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"[resolver] Undecodable body from {href}: {e}")
            return None

    async def close(self) -> None:
        """Close the HTTP client if this resolver created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpFetchResolver:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
