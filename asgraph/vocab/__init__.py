"""
asgraph Vocabulary

Pydantic blueprints for the ActivityStreams 2.0 core vocabulary.

Blueprint hierarchy:
- ASRoot
  - ASObject: Object, plus object, activity, actor and collection types
  - ASLink: Link, Mention

Usage:
    from asgraph.vocab import LinkedValue, Note, define_type

    note = Note.model_validate({"type": "Note", "content": "Fish swim."})

    # Add a custom type to the default registry
    Emoji = define_type("Emoji", icon=(LinkedValue, None))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import create_model

from .activities import (
    Accept,
    Activity,
    Add,
    Announce,
    Arrive,
    Block,
    Create,
    Delete,
    Dislike,
    Flag,
    Follow,
    Ignore,
    IntransitiveActivity,
    Invite,
    Join,
    Leave,
    Like,
    Listen,
    Move,
    Offer,
    Question,
    Read,
    Reject,
    Remove,
    TentativeAccept,
    TentativeReject,
    Travel,
    Undo,
    Update,
    View,
)
from .actors import Application, Group, Organization, Person, Service
from .base import ASLink, ASObject, ASRoot
from .collections import Collection, CollectionPage, OrderedCollection, OrderedCollectionPage
from .fields import ACTIVITYSTREAMS_CONTEXT, LinkedValue, TypeTag
from .links import Mention
from .objects import (
    Article,
    Audio,
    Document,
    Event,
    Image,
    Note,
    Page,
    Place,
    Profile,
    Relationship,
    Tombstone,
    Video,
)

if TYPE_CHECKING:
    from ..transform.registry import TypeRegistry

BUILTIN_TYPES: tuple[type[ASRoot], ...] = (
    # Core
    ASObject,
    ASLink,
    # Objects
    Article,
    Audio,
    Document,
    Event,
    Image,
    Note,
    Page,
    Place,
    Profile,
    Relationship,
    Tombstone,
    Video,
    # Activities
    Activity,
    IntransitiveActivity,
    Accept,
    Add,
    Announce,
    Arrive,
    Block,
    Create,
    Delete,
    Dislike,
    Flag,
    Follow,
    Ignore,
    Invite,
    Join,
    Leave,
    Like,
    Listen,
    Move,
    Offer,
    Question,
    Read,
    Reject,
    Remove,
    TentativeAccept,
    TentativeReject,
    Travel,
    Undo,
    Update,
    View,
    # Actors
    Application,
    Group,
    Organization,
    Person,
    Service,
    # Collections
    Collection,
    OrderedCollection,
    CollectionPage,
    OrderedCollectionPage,
    # Links
    Mention,
)


def register_vocabulary(registry: TypeRegistry) -> TypeRegistry:
    """Register every built-in blueprint under its tag."""
    registry.add(*BUILTIN_TYPES)
    return registry


def define_type(
    tag: str,
    base: type[ASRoot] = ASObject,
    *,
    registry: TypeRegistry | None = None,
    **fields: Any,
) -> type[ASRoot]:
    """
    Create a new vocabulary type and register it.

    Args:
        tag: Value of the ``type`` property for the new type
        base: Blueprint to derive from (ASObject, ASLink, Activity...)
        registry: Registry to add the type to (default: global registry)
        **fields: Extra fields as ``name=(annotation, default)`` pairs

    Returns:
        The new blueprint class
    """
    from ..transform.registry import get_type_registry

    blueprint = create_model(
        tag,
        __base__=base,
        __module__=__name__,
        type=(TypeTag, tag),
        **fields,
    )
    (registry if registry is not None else get_type_registry()).add(blueprint)
    return blueprint


__all__ = [
    "ACTIVITYSTREAMS_CONTEXT",
    "BUILTIN_TYPES",
    "ASLink",
    "ASObject",
    "ASRoot",
    "Accept",
    "Activity",
    "Add",
    "Announce",
    "Application",
    "Arrive",
    "Article",
    "Audio",
    "Block",
    "Collection",
    "CollectionPage",
    "Create",
    "Delete",
    "Dislike",
    "Document",
    "Event",
    "Flag",
    "Follow",
    "Group",
    "Ignore",
    "Image",
    "IntransitiveActivity",
    "Invite",
    "Join",
    "Leave",
    "Like",
    "LinkedValue",
    "Listen",
    "Mention",
    "Move",
    "Note",
    "Offer",
    "OrderedCollection",
    "OrderedCollectionPage",
    "Organization",
    "Page",
    "Person",
    "Place",
    "Profile",
    "Question",
    "Read",
    "Reject",
    "Relationship",
    "Remove",
    "Service",
    "TentativeAccept",
    "TentativeReject",
    "Tombstone",
    "Travel",
    "TypeTag",
    "Undo",
    "Update",
    "Video",
    "View",
    "define_type",
    "register_vocabulary",
]
