"""
Object types from the ActivityStreams vocabulary.

https://www.w3.org/TR/activitystreams-vocabulary/#object-types
"""

from __future__ import annotations

from .base import ASObject
from .fields import LinkedValue, NonNegativeFloat, Percentage, Timestamp, TypeTag


class Article(ASObject):
    type: TypeTag = "Article"


class Document(ASObject):
    type: TypeTag = "Document"


class Audio(Document):
    type: TypeTag = "Audio"


class Image(Document):
    type: TypeTag = "Image"


class Video(Document):
    type: TypeTag = "Video"


class Page(Document):
    type: TypeTag = "Page"


class Event(ASObject):
    type: TypeTag = "Event"


class Note(ASObject):
    type: TypeTag = "Note"


class Place(ASObject):
    """A logical or physical location."""

    type: TypeTag = "Place"
    accuracy: Percentage | None = None
    altitude: float | None = None
    latitude: float | None = None
    longitude: float | None = None
    radius: NonNegativeFloat | None = None
    units: str | None = None


class Profile(ASObject):
    """A content object that describes another object."""

    type: TypeTag = "Profile"
    describes: LinkedValue = None


class Relationship(ASObject):
    """Describes a relationship between two individuals."""

    type: TypeTag = "Relationship"
    subject: LinkedValue = None
    object: LinkedValue = None
    relationship: LinkedValue = None


class Tombstone(ASObject):
    """A placeholder for an object that has been deleted."""

    type: TypeTag = "Tombstone"
    former_type: str | list[str] | None = None
    deleted: Timestamp | None = None
