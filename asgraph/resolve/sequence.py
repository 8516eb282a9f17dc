"""
Resolvable sequences.

Reference fields holding several values (``to``, ``tag``, ``items``...)
are materialized as a ResolvableSequence, a list that can resolve all
of its members at once.
"""

from __future__ import annotations

import asyncio
from typing import Any

from .base import Resolvable, ResolveHandler


class ResolvableSequence(list):
    """
    List whose resolvable members can be resolved concurrently.

    Example:
        recipients = note.to                # ResolvableSequence of Links
        resolved = await recipients.resolve()
    """

    async def resolve(self, resolver: ResolveHandler | None = None) -> ResolvableSequence:
        """
        Resolve every member concurrently.

        Members with a ``resolve`` capability are replaced by their
        resolution; others pass through. Output order matches input
        order. If any resolution fails, the remaining ones are cancelled
        and the error propagates.

        Args:
            resolver: Custom resolver handed to every member

        Returns:
            A new ResolvableSequence with the resolved members
        """
        tasks = [asyncio.ensure_future(_resolve_item(item, resolver)) for item in self]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return ResolvableSequence(results)

    def __repr__(self) -> str:
        return f"ResolvableSequence({list.__repr__(self)})"


async def _resolve_item(item: Any, resolver: ResolveHandler | None) -> Any:
    if isinstance(item, Resolvable):
        return await item.resolve(resolver)
    return item
