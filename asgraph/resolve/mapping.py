"""
In-memory resolver.

Resolves hrefs from a fixed mapping of href -> JSON document. Useful
for fixtures, offline processing, and for putting known documents in
front of the network in a ResolverChain.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .base import Resolver

if TYPE_CHECKING:
    from ..transform.transformer import Transformer


class MappingResolver(Resolver):
    """
    Resolver backed by a dict of documents.

    Example:
        resolver = MappingResolver({
            "https://example.com/sally": {"type": "Person", "name": "Sally"},
        })
        person = await resolver.handle("https://example.com/sally")
    """

    def __init__(
        self,
        documents: Mapping[str, Any] | None = None,
        *,
        transformer: Transformer | None = None,
    ) -> None:
        self._documents: dict[str, Any] = dict(documents or {})
        self._transformer = transformer

    def add(self, href: str, document: Any) -> None:
        self._documents[href] = document

    async def try_handle(self, request: str) -> Any | None:
        document = self._documents.get(request)
        if document is None:
            return None

        transformer = self._transformer
        if transformer is None:
            from ..transform.transformer import get_default_transformer

            transformer = get_default_transformer()
        return transformer.transform(document)

    def __repr__(self) -> str:
        return f"MappingResolver(documents={len(self._documents)})"
