"""
Collection types from the ActivityStreams vocabulary.

Members (``items``/``ordered_items``) and paging references are
LinkedValues: bare URLs become Links and embedded pages or items are
transformed into their blueprints.
"""

from __future__ import annotations

from .base import ASObject
from .fields import LinkedValue, NonNegativeInt, TypeTag


class Collection(ASObject):
    type: TypeTag = "Collection"
    total_items: NonNegativeInt | None = None
    current: LinkedValue = None
    first: LinkedValue = None
    last: LinkedValue = None
    items: LinkedValue = None


class OrderedCollection(Collection):
    type: TypeTag = "OrderedCollection"
    ordered_items: LinkedValue = None


class CollectionPage(Collection):
    type: TypeTag = "CollectionPage"
    part_of: LinkedValue = None
    next: LinkedValue = None
    prev: LinkedValue = None


class OrderedCollectionPage(CollectionPage):
    type: TypeTag = "OrderedCollectionPage"
    ordered_items: LinkedValue = None
    start_index: NonNegativeInt | None = None
