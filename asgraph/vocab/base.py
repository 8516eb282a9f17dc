"""
Root blueprints for the ActivityStreams vocabulary.

Every vocabulary type is a pydantic model deriving from ASRoot. The two
kinds of root behaviour are:

- ASObject: content nodes (notes, actors, activities, collections...)
- ASLink: references that can be resolved to the content they point at

A blueprint's tag is the default of its ``type`` field, so declaring a
new vocabulary type is just:

    class Note(ASObject):
        type: TypeTag = "Note"

Field names are snake_case in Python and camelCase on the wire
(``attributed_to`` <-> ``attributedTo``); ``@context`` maps to
``ld_context``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from ..resolve.base import LinkResolutionError
from .fields import (
    ContextValue,
    LanguageMap,
    LanguageValue,
    LinkedValue,
    MediaType,
    PositiveInt,
    Timestamp,
    TypeTag,
    UrlStr,
)

if TYPE_CHECKING:
    from ..resolve.base import ResolveHandler

logger = logging.getLogger(__name__)


class ASRoot(BaseModel):
    """
    Base model for every vocabulary blueprint.

    Holds the fields common to objects and links, the class-level meta
    used for dispatch (``base_type``, ``composed_of``) and the link
    resolution state, which stays unset for non-link kinds.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    base_type: ClassVar[str] = "root"
    composed_of: ClassVar[tuple[str, ...]] = ()

    ld_context: ContextValue | None = Field(default=None, alias="@context")
    type: TypeTag
    id: UrlStr | None = None

    _resolved: Any = PrivateAttr(default=None)
    _href_only: bool = PrivateAttr(default=False)

    @classmethod
    def vocab_type(cls) -> str | tuple[str, ...]:
        """Tag (or ordered tags, for composites) this blueprint is bound to."""
        if cls.composed_of:
            return cls.composed_of
        return cls.model_fields["type"].default

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        if self.base_type != "link":
            return handler(self)

        resolved = self._resolved
        if resolved is not None and not isinstance(resolved, str):
            if isinstance(resolved, BaseModel):
                return resolved.model_dump(
                    mode=info.mode,
                    by_alias=bool(info.by_alias),
                    exclude_none=info.exclude_none,
                )
            return resolved

        if self._href_only:
            return getattr(self, "href", None)

        return handler(self)

    def to_plain(self) -> Any:
        """Serialize to JSON-compatible data using the wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ASObject(ASRoot):
    """
    ActivityStreams Object.

    https://www.w3.org/ns/activitystreams#Object
    """

    base_type = "object"

    type: TypeTag = "Object"

    attachment: LinkedValue = None
    attributed_to: LinkedValue = None
    audience: LinkedValue = None
    content: LanguageValue | None = None
    content_map: LanguageMap | None = None
    context: LinkedValue = None
    name: LanguageValue | None = None
    name_map: LanguageMap | None = None
    end_time: Timestamp | None = None
    generator: LinkedValue = None
    icon: LinkedValue = None
    image: LinkedValue = None
    in_reply_to: LinkedValue = None
    location: LinkedValue = None
    preview: LinkedValue = None
    published: Timestamp | None = None
    replies: LinkedValue = None
    start_time: Timestamp | None = None
    summary: LanguageValue | None = None
    summary_map: LanguageMap | None = None
    tag: LinkedValue = None
    updated: Timestamp | None = None
    url: LinkedValue = None
    to: LinkedValue = None
    bto: LinkedValue = None
    cc: LinkedValue = None
    bcc: LinkedValue = None
    media_type: MediaType | None = None
    duration: str | None = None

    async def resolve(self, resolver: ResolveHandler | None = None) -> ASObject:
        """Objects are already resolved; returns the object itself."""
        return self


class ASLink(ASRoot):
    """
    ActivityStreams Link.

    A link is built either from a full link document or from a bare URL
    string (``from_href``). Calling ``resolve`` walks a resolver chain
    and records the outcome, which then takes precedence when the link
    is serialized.

    https://www.w3.org/ns/activitystreams#Link
    """

    base_type = "link"

    type: TypeTag = "Link"
    href: UrlStr | None = None
    rel: LanguageValue | None = None
    media_type: MediaType | None = None
    name: LanguageValue | None = None
    name_map: LanguageMap | None = None
    hreflang: str | None = None
    height: PositiveInt | None = None
    width: PositiveInt | None = None
    preview: LinkedValue = None

    @classmethod
    def from_href(cls, href: str) -> ASLink:
        """Create a link from a bare URL string."""
        link = cls(href=href)
        link._href_only = True
        return link

    @property
    def href_only(self) -> bool:
        """True when the link was built from a bare URL string."""
        return self._href_only

    @property
    def resolved_value(self) -> Any:
        """Outcome of the most recent ``resolve`` call, or None."""
        return self._resolved

    async def resolve(self, resolver: ResolveHandler | None = None) -> Any:
        """
        Resolve the link and return the resolved content.

        Runs the resolver every time, even if the link was resolved
        before; the latest outcome replaces the stored one.

        Args:
            resolver: Handler to use instead of the default resolver chain

        Returns:
            The resolved object or link, or the href itself when nothing
            in the chain could resolve it

        Raises:
            LinkResolutionError: If href is not set
        """
        if self.href is None:
            raise LinkResolutionError("Link href is not set")

        if resolver is None:
            from ..resolve.defaults import get_default_resolver

            resolver = get_default_resolver()

        logger.debug(f"[link] Resolving {self.href}")
        self._resolved = await resolver.handle(self.href)
        return self._resolved

    def __str__(self) -> str:
        if self._href_only and self.href is not None:
            return self.href
        return BaseModel.__str__(self)
