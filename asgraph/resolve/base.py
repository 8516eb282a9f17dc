"""
Resolver abstractions for asgraph.

Resolution turns a reference (an href) into the content it points at.
Resolvers form a chain of responsibility: each one either resolves the
request or hands it on; a resolver with nothing after it returns the
request unchanged, so the bare href is always the final fallback.

Two ways to build a chain:

    # Ordered list (preferred)
    chain = ResolverChain([MappingResolver(local_docs), HttpFetchResolver()])

    # Linked nodes. set_next() returns the node it attached, so
    # a.set_next(b).set_next(c) wires a -> b -> c.
    local.set_next(HttpFetchResolver())

Implementing a strategy:
    Subclass Resolver and override try_handle(), returning the resolved
    value or None when this strategy cannot resolve the request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class LinkResolutionError(ValueError):
    """Raised when a link cannot be resolved at all (e.g. it has no href)."""

    pass


@runtime_checkable
class ResolveHandler(Protocol):
    """Protocol for a node in a resolver chain."""

    def set_next(self, handler: ResolveHandler) -> ResolveHandler:
        """Attach the successor and return it."""
        ...

    async def handle(self, request: str) -> Any:
        """Resolve the request, or pass it on."""
        ...


@runtime_checkable
class Resolvable(Protocol):
    """Anything that can be resolved with an optional custom resolver."""

    async def resolve(self, resolver: ResolveHandler | None = None) -> Any:
        ...


class Resolver:
    """
    Base resolver node.

    On its own it resolves nothing: handle() forwards to the successor,
    or returns the request unchanged when there is none.
    """

    _next: ResolveHandler | None = None

    @property
    def next(self) -> ResolveHandler | None:
        """The successor node, if any."""
        return self._next

    def set_next(self, handler: ResolveHandler) -> ResolveHandler:
        """
        Attach a successor, replacing any previous one.

        Returns:
            The handler just attached (not self), so chained calls
            extend the chain one hop at a time.
        """
        self._next = handler
        return handler

    async def handle(self, request: str) -> Any:
        result = await self.try_handle(request)
        if result is not None:
            return result
        return await self.forward(request)

    async def try_handle(self, request: str) -> Any | None:
        """Resolve the request here, or return None to pass it on."""
        return None

    async def forward(self, request: str) -> Any:
        """Hand the request to the successor, or return it unchanged."""
        if self._next is not None:
            return await self._next.handle(request)
        return request

    async def close(self) -> None:
        """Release resources held by this resolver."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

class ResolverChain(Resolver):
    """
    Ordered list of resolution strategies.

    handle() runs each strategy's own handle() in turn, so a member's
    successors and overridden handle() take part. A member that returns
    the request unchanged (or None) did not resolve it, and the next
    strategy is tried. When none resolves it, the request goes to this
    chain's own successor (if any) or comes back unchanged.

    Example:
        chain = ResolverChain([MappingResolver(fixtures)])
        chain.append(HttpFetchResolver())

        result = await chain.handle("https://example.com/notes/1")
    """

    def __init__(self, handlers: Iterable[ResolveHandler] = ()) -> None:
        self._handlers: list[ResolveHandler] = list(handlers)

    @property
    def handlers(self) -> list[ResolveHandler]:
        """Strategies in the order they are tried."""
        return list(self._handlers)

    def append(self, handler: ResolveHandler) -> ResolverChain:
        self._handlers.append(handler)
        return self

    def extend(self, handlers: Iterable[ResolveHandler]) -> ResolverChain:
        self._handlers.extend(handlers)
        return self

    def insert(self, index: int, handler: ResolveHandler) -> ResolverChain:
        self._handlers.insert(index, handler)
        return self

    async def try_handle(self, request: str) -> Any | None:
        for handler in self._handlers:
            result = await handler.handle(request)
            if result is not None and result is not request:
                logger.debug(f"[resolver] {handler!r} resolved {request}")
                return result
        return None

    async def close(self) -> None:
        for handler in self._handlers:
            close = getattr(handler, "close", None)
            if close is not None:
                await close()

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"ResolverChain({self._handlers!r})"
