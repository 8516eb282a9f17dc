"""
Type Registry for asgraph.

Maps a single type tag (the ``type`` property of a document) to the
blueprint used to materialize it.

Design Principle:
    Registries are plain, independent collections. A Transformer owns
    one; several can coexist (e.g. one per test) and be combined with
    copy()/merge(). Re-registering a tag replaces the previous binding.

Usage:
    registry = TypeRegistry()
    registry.add(Note, Person)              # bound by each blueprint's tag
    registry.register("Toot", Note)         # explicit tag
    registry.register(["Post", "Status"], Note)

    blueprint = registry.get("Note")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..vocab.base import ASRoot

logger = logging.getLogger(__name__)


class TypeRegistryError(Exception):
    """Error in type registry operations."""

    pass


class TypeRegistry:
    """
    Registry of vocabulary blueprints keyed by type tag.

    Example:
        registry = TypeRegistry()
        registry.add(Note)

        registry.has("Note")       # True
        registry.get("Video")      # None
    """

    def __init__(self, blueprints: Mapping[str, type[ASRoot]] | None = None) -> None:
        self._types: dict[str, type[ASRoot]] = dict(blueprints or {})

    def register(self, tags: str | Iterable[str], blueprint: type[ASRoot]) -> None:
        """
        Bind one or more tags to a blueprint.

        Args:
            tags: A tag or an iterable of tags
            blueprint: Blueprint class to bind

        Note:
            An existing binding for the same tag is replaced.
        """
        for tag in [tags] if isinstance(tags, str) else tags:
            if not tag:
                raise TypeRegistryError("Type tag must be a non-empty string")
            previous = self._types.get(tag)
            if previous is not None and previous is not blueprint:
                logger.warning(
                    f"[registry] Replacing {tag}: {previous.__name__} -> {blueprint.__name__}"
                )
            self._types[tag] = blueprint

    def add(self, *blueprints: type[ASRoot]) -> None:
        """
        Register blueprints under their own tags.

        Raises:
            TypeRegistryError: If a blueprint has no single tag
        """
        for blueprint in blueprints:
            tag = blueprint.vocab_type()
            if not isinstance(tag, str):
                raise TypeRegistryError(
                    f"Blueprint {blueprint.__name__} is not bound to a single type tag"
                )
            self.register(tag, blueprint)

    def get(self, tag: str) -> type[ASRoot] | None:
        """Get the blueprint for a tag, or None if unregistered."""
        return self._types.get(tag)

    def has(self, tag: str) -> bool:
        """Check if a tag is registered."""
        return tag in self._types

    def unregister(self, tag: str) -> bool:
        """
        Remove a tag.

        Returns:
            True if the tag was removed, False if not found
        """
        if tag in self._types:
            del self._types[tag]
            return True
        return False

    def clear(self) -> None:
        """Remove all bindings."""
        self._types.clear()

    def copy(self) -> TypeRegistry:
        """Independent registry with the same bindings."""
        return TypeRegistry(self._types)

    def merge(self, other: TypeRegistry) -> TypeRegistry:
        """New registry with this registry's bindings overlaid by ``other``'s."""
        merged = self.copy()
        for tag, blueprint in other.items():
            merged.register(tag, blueprint)
        return merged

    def items(self) -> Iterator[tuple[str, type[ASRoot]]]:
        return iter(list(self._types.items()))

    @property
    def tags(self) -> list[str]:
        """Registered tags in registration order."""
        return list(self._types.keys())

    def __contains__(self, tag: object) -> bool:
        return tag in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._types))

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry(tags={len(self._types)})"


# Global registry instance
_registry: TypeRegistry | None = None


def get_type_registry() -> TypeRegistry:
    """
    Get the global type registry.

    Creates the registry on first access (lazy initialization), preloaded
    with the built-in vocabulary.
    """
    global _registry
    if _registry is None:
        from ..vocab import register_vocabulary

        _registry = register_vocabulary(TypeRegistry())
        logger.debug(f"[registry] Loaded built-in vocabulary ({len(_registry)} types)")
    return _registry


def reset_type_registry() -> None:
    """
    Reset the global type registry (for testing).

    The next get_type_registry() call rebuilds it.
    """
    global _registry
    _registry = None
