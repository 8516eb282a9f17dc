"""Link types from the ActivityStreams vocabulary."""

from __future__ import annotations

from .base import ASLink
from .fields import TypeTag


class Mention(ASLink):
    """A reference to an actor (e.g. an @-mention)."""

    type: TypeTag = "Mention"
