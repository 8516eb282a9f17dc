"""
Composite Blueprint Synthesizer.

Documents may declare several types at once:

    {"type": ["Person", "Service"], "name": "Bot"}

The synthesizer builds one blueprint exposing the union of the
constituents' fields and behaviours, and caches it by the ordered tag
list so every document with the same combination gets the same class.

Merge algorithm:
    Fold the constituents left to right, starting from ASRoot. Each step
    derives a new model from the accumulator and copies in every field
    definition and method of the next constituent, so on a name clash
    the later constituent wins. ``base_type`` follows the same rule:
    ["Note", "Link"] behaves like a link, ["Link", "Note"] like an
    object.

    Composites do not inherit from their constituents; dispatch on
    ``base_type``/``composed_of`` or on the cached class identity.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Sequence
from functools import reduce
from types import FunctionType

from ..vocab.base import ASRoot

logger = logging.getLogger(__name__)

# Attribute kinds carried over from a constituent's class bodies
_BEHAVIOURS = (FunctionType, property, classmethod, staticmethod)

# Dunder methods that are part of a blueprint's behaviour
_COPIED_DUNDERS = frozenset({"__str__"})


class CompositeBlueprintSynthesizer:
    """
    Builds and caches merged blueprints for multi-tag documents.

    The cache is keyed by the ordered tuple of tags (``("A", "B")`` and
    ``("B", "A")`` are distinct entries) and is never evicted. Cache
    read-modify-write happens under a lock, so concurrent synthesis of
    the same combination from several threads yields a single class.

    Example:
        synthesizer = CompositeBlueprintSynthesizer()
        PersonService = synthesizer.synthesize(["Person", "Service"], [Person, Service])
        assert synthesizer.synthesize(["Person", "Service"], [Person, Service]) is PersonService
    """

    def __init__(self, root: type[ASRoot] = ASRoot) -> None:
        self._root = root
        self._cache: dict[tuple[str, ...], type[ASRoot]] = {}
        self._lock = threading.Lock()

    def get(self, tags: Sequence[str]) -> type[ASRoot] | None:
        """Cached composite for the ordered tags, or None."""
        return self._cache.get(tuple(tags))

    def synthesize(
        self,
        tags: Sequence[str],
        blueprints: Sequence[type[ASRoot]],
    ) -> type[ASRoot]:
        """
        Get or build the composite blueprint for an ordered tag list.

        Args:
            tags: Ordered, registered tags (the cache key)
            blueprints: Blueprint for each tag, in the same order

        Returns:
            The merged blueprint
        """
        if len(tags) != len(blueprints):
            raise ValueError("Each tag needs exactly one blueprint")

        key = tuple(tags)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug(f"[composite] Cache hit: {'-'.join(key)}")
                return cached

            composite = self.compose(key, blueprints)
            self._cache[key] = composite

        logger.debug(f"[composite] Built {composite.__name__} from {'-'.join(key)}")
        return composite

    def compose(
        self,
        tags: Sequence[str],
        blueprints: Sequence[type[ASRoot]],
    ) -> type[ASRoot]:
        """Fold the blueprints into one, last-applied definitions winning. Not cached."""
        return reduce(
            lambda target, pair: self._mixin(target, *pair),
            zip(tags, blueprints),
            self._root,
        )

    def clear(self) -> None:
        """Drop every cached composite."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def _mixin(self, target: type[ASRoot], tag: str, source: type[ASRoot]) -> type[ASRoot]:
        composed_of = target.composed_of + (tag,)
        name = "".join(composed_of)

        namespace: dict = {
            "__module__": __name__,
            "__qualname__": name,
            "__doc__": f"Composite blueprint for {list(composed_of)}.",
            "__annotations__": {},
            "base_type": source.base_type,
            "composed_of": composed_of,
        }

        for klass in reversed(source.__mro__):
            if not issubclass(klass, self._root) or klass is self._root:
                continue
            for attr_name, attr in vars(klass).items():
                if attr_name.startswith("__") and attr_name not in _COPIED_DUNDERS:
                    continue
                if isinstance(attr, _BEHAVIOURS):
                    namespace[attr_name] = attr

        for field_name, info in source.model_fields.items():
            namespace["__annotations__"][field_name] = info.annotation
            namespace[field_name] = copy.deepcopy(info)

        return type(target)(name, (target,), namespace)
