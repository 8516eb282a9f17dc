"""
Transformer for asgraph.

The single entry point that turns loosely-typed JSON values into
vocabulary blueprint instances.

Flow:
    1. Lists are transformed element by element (order preserved)
    2. Scalars pass through unchanged
    3. ``type`` is a string -> registered blueprint, or pass-through
    4. ``type`` is a list -> registered tags only, merged through the
       CompositeBlueprintSynthesizer, or pass-through when none match

Blueprint population runs pydantic validation with the transformer in
the validation context, so nested reference fields (LinkedValue) are
transformed by the same transformer and registry.

Usage:
    transformer = Transformer()
    note = transformer.transform({"type": "Note", "content": "Fish swim."})

    # Module-level shortcut using the default transformer
    from asgraph.transform import transform
    person = transform({"type": "Person", "name": "Sally"})
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..config import TransformerOptions, get_settings
from ..resolve.sequence import ResolvableSequence
from ..vocab.base import ASLink, ASRoot
from .composite import CompositeBlueprintSynthesizer
from .registry import TypeRegistry, get_type_registry

logger = logging.getLogger(__name__)


class Transformer:
    """
    Converts plain JSON values into typed vocabulary instances.

    Transformation never raises for unknown or partially known types;
    such values come back unchanged. Values of registered types are
    validated by their blueprint (pydantic ``ValidationError`` on bad
    field data).

    Example:
        transformer = Transformer(TypeRegistry(), TransformerOptions(convert_text_to_links=False))
        transformer.add(Note, ASLink)

        transformer.transform([{"type": "Note"}, "plain", 3])
        # -> [Note(...), "plain", 3]
    """

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        options: TransformerOptions | None = None,
        *,
        synthesizer: CompositeBlueprintSynthesizer | None = None,
    ) -> None:
        """
        Initialize transformer.

        Args:
            registry: Blueprints to use (default: a copy of the global registry)
            options: Transformer options (default: from settings)
            synthesizer: Composite blueprint cache (default: a new one)
        """
        self.registry = registry if registry is not None else get_type_registry().copy()
        self.options = options if options is not None else get_settings().transformer
        self.synthesizer = synthesizer if synthesizer is not None else CompositeBlueprintSynthesizer()

    def add(self, *blueprints: type[ASRoot]) -> None:
        """Register blueprints under their own tags."""
        self.registry.add(*blueprints)

    def register(self, tags: str | Iterable[str], blueprint: type[ASRoot]) -> None:
        """Bind one or more tags to a blueprint."""
        self.registry.register(tags, blueprint)

    # =========================================================================
    # Transformation
    # =========================================================================

    def transform(self, value: Any) -> Any:
        """
        Transform a plain value into its typed counterpart.

        Args:
            value: Any JSON-like value

        Returns:
            A blueprint instance, a list of transformed values, or the
            value unchanged. A refused composite (see
            ``compose_with_missing_constructors``) yields None, or the
            raw value when ``always_return_value_on_transform`` is set.
        """
        if isinstance(value, list | tuple):
            return [self.transform(item) for item in value]

        if not isinstance(value, Mapping):
            return value

        type_tag = value.get("type")

        if isinstance(type_tag, str):
            blueprint = self.registry.get(type_tag)
            if blueprint is None:
                return value
            return self._populate(blueprint, value)

        if isinstance(type_tag, list) and self.options.enable_composite_types:
            return self._transform_composite(value, type_tag)

        return value

    def transform_reference(self, value: Any) -> Any:
        """
        Transform the value of a field that may hold embedded documents
        or references.

        Lists become a ResolvableSequence; bare URL strings become Links
        (when ``convert_text_to_links``); link-shaped dicts without a
        ``type`` become Links; other dicts go through ``transform``.
        """
        if isinstance(value, list | tuple):
            return ResolvableSequence(self._transform_reference_item(item) for item in value)
        return self._transform_reference_item(value)

    def blueprint_for(self, type_tag: Any) -> type[ASRoot] | None:
        """
        Blueprint used for a ``type`` value, or None.

        Composite blueprints are synthesized (and cached) on demand.
        """
        if isinstance(type_tag, str):
            return self.registry.get(type_tag)

        if isinstance(type_tag, list) and self.options.enable_composite_types:
            tags = self._registered_tags(type_tag)
            if tags:
                return self._blueprint_for_tags(tags)

        return None

    # =========================================================================
    # Links
    # =========================================================================

    def plain_to_link(self, url: str) -> ASLink:
        """
        Build an href-only Link from a bare URL.

        Raises:
            ValueError: If no Link blueprint is registered or the URL is invalid
        """
        blueprint = self.registry.get("Link")
        if blueprint is not None and self.is_valid_link(url):
            return blueprint.from_href(url)
        raise ValueError(f"Invalid URL {url} for Link.")

    def link_to_plain(self, value: Any) -> Any:
        """Serialize link instances; everything else passes through."""
        if isinstance(value, ASRoot) and value.base_type == "link":
            return value.to_plain()
        return value

    def is_valid_link(self, value: str) -> bool:
        """Whether a string may become a Link. Override for custom URL rules."""
        return value.startswith("http://") or value.startswith("https://")

    # =========================================================================
    # Internals
    # =========================================================================

    def _transform_composite(self, value: Mapping[str, Any], type_tags: list[Any]) -> Any:
        tags = self._registered_tags(type_tags)

        if not tags:
            return value

        if not self.options.compose_with_missing_constructors:
            missing = [tag for tag in type_tags if tag not in tags]
            if missing:
                logger.debug(f"[transformer] Refusing composite, unregistered types: {missing}")
                return value if self.options.always_return_value_on_transform else None

        return self._populate(self._blueprint_for_tags(tags), value)

    def _registered_tags(self, type_tags: list[Any]) -> list[str]:
        # Ordered, de-duplicated, registered tags only
        return list(
            dict.fromkeys(tag for tag in type_tags if isinstance(tag, str) and tag in self.registry)
        )

    def _blueprint_for_tags(self, tags: list[str]) -> type[ASRoot]:
        if len(tags) == 1:
            return self.registry.get(tags[0])
        return self.synthesizer.synthesize(tags, [self.registry.get(tag) for tag in tags])

    def _populate(self, blueprint: type[ASRoot], value: Mapping[str, Any]) -> ASRoot:
        if self.options.exclude_extraneous_values:
            known = _field_keys(blueprint)
            data = {key: item for key, item in value.items() if key in known}
        else:
            data = dict(value)
        return blueprint.model_validate(data, context={"transformer": self})

    def _transform_reference_item(self, value: Any) -> Any:
        if isinstance(value, str):
            if self.options.convert_text_to_links:
                return self.plain_to_link(value)
            return value

        if isinstance(value, Mapping):
            if "type" not in value and "href" in value:
                link = self.registry.get("Link")
                if link is not None:
                    return self._populate(link, value)
            return self.transform(value)

        return value

    def __repr__(self) -> str:
        return f"Transformer(registry={self.registry!r}, composites={len(self.synthesizer)})"


def _field_keys(blueprint: type[ASRoot]) -> set[str]:
    """Input keys a blueprint recognizes: field names and their aliases."""
    keys = set(blueprint.model_fields)
    keys.update(info.alias for info in blueprint.model_fields.values() if info.alias)
    return keys


# Global transformer instance
_transformer: Transformer | None = None


def get_default_transformer() -> Transformer:
    """
    Get the default transformer.

    Created on first access; shares the global type registry, so types
    added with ``get_type_registry().add(...)`` or ``define_type`` are
    picked up.
    """
    global _transformer
    if _transformer is None:
        _transformer = Transformer(get_type_registry())
    return _transformer


def reset_default_transformer() -> None:
    """Reset the default transformer (for testing)."""
    global _transformer
    _transformer = None


def transform(value: Any) -> Any:
    """Transform a plain value with the default transformer."""
    return get_default_transformer().transform(value)
