"""
Actor types from the ActivityStreams vocabulary.

Actors carry no fields beyond those of Object.
"""

from __future__ import annotations

from .base import ASObject
from .fields import TypeTag


class Application(ASObject):
    type: TypeTag = "Application"


class Group(ASObject):
    type: TypeTag = "Group"


class Organization(ASObject):
    type: TypeTag = "Organization"


class Person(ASObject):
    type: TypeTag = "Person"


class Service(ASObject):
    type: TypeTag = "Service"
