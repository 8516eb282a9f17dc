"""
Activity types from the ActivityStreams vocabulary.

https://www.w3.org/TR/activitystreams-vocabulary/#activity-types
"""

from __future__ import annotations

from .base import ASObject
from .fields import LinkedValue, Timestamp, TypeTag


class Activity(ASObject):
    """An action performed by an actor on an object."""

    type: TypeTag = "Activity"
    actor: LinkedValue = None
    object: LinkedValue = None
    target: LinkedValue = None
    result: LinkedValue = None
    origin: LinkedValue = None
    instrument: LinkedValue = None


class IntransitiveActivity(Activity):
    """An activity that does not have an object."""

    type: TypeTag = "IntransitiveActivity"


class Accept(Activity):
    type: TypeTag = "Accept"


class TentativeAccept(Accept):
    type: TypeTag = "TentativeAccept"


class Add(Activity):
    type: TypeTag = "Add"


class Arrive(IntransitiveActivity):
    type: TypeTag = "Arrive"


class Create(Activity):
    type: TypeTag = "Create"


class Delete(Activity):
    type: TypeTag = "Delete"


class Follow(Activity):
    type: TypeTag = "Follow"


class Ignore(Activity):
    type: TypeTag = "Ignore"


class Block(Ignore):
    type: TypeTag = "Block"


class Join(Activity):
    type: TypeTag = "Join"


class Leave(Activity):
    type: TypeTag = "Leave"


class Like(Activity):
    type: TypeTag = "Like"


class Dislike(Activity):
    type: TypeTag = "Dislike"


class Offer(Activity):
    type: TypeTag = "Offer"


class Invite(Offer):
    type: TypeTag = "Invite"


class Reject(Activity):
    type: TypeTag = "Reject"


class TentativeReject(Reject):
    type: TypeTag = "TentativeReject"


class Remove(Activity):
    type: TypeTag = "Remove"


class Undo(Activity):
    type: TypeTag = "Undo"


class Update(Activity):
    type: TypeTag = "Update"


class View(Activity):
    type: TypeTag = "View"


class Listen(Activity):
    type: TypeTag = "Listen"


class Read(Activity):
    type: TypeTag = "Read"


class Move(Activity):
    type: TypeTag = "Move"


class Travel(IntransitiveActivity):
    type: TypeTag = "Travel"


class Announce(Activity):
    type: TypeTag = "Announce"


class Flag(Activity):
    type: TypeTag = "Flag"


class Question(IntransitiveActivity):
    """
    A question being asked.

    Either ``one_of`` or ``any_of`` lists the possible answers; a
    ``closed`` question carries the time it closed (or just True).
    """

    type: TypeTag = "Question"
    one_of: LinkedValue = None
    any_of: LinkedValue = None
    closed: Timestamp | bool | None = None
