"""
Annotated field types shared by the vocabulary blueprints.

Validation rules live in the annotations rather than in validator
methods, so a field keeps its rules when its definition is copied into
a composite blueprint.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    AwareDatetime,
    BeforeValidator,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
)

ACTIVITYSTREAMS_CONTEXT = "https://www.w3.org/ns/activitystreams"

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Keep the original text; AnyUrl normalizes (e.g. adds trailing slashes).
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(f"{value!r} is not a valid URL") from None
    return value


def _transform_reference(value: Any, info: ValidationInfo) -> Any:
    """Hand an embedded document or reference to the active Transformer."""
    transformer = (info.context or {}).get("transformer")
    if transformer is None:
        from ..transform.transformer import get_default_transformer

        transformer = get_default_transformer()
    return transformer.transform_reference(value)


NonEmptyStr = Annotated[str, Field(min_length=1)]

# A single tag, or an ordered non-empty list of tags for composite documents
TypeTag = NonEmptyStr | Annotated[list[NonEmptyStr], Field(min_length=1)]

UrlStr = Annotated[str, AfterValidator(_check_url)]

MediaType = Annotated[str, Field(pattern=r"^[\w!#$&^.+-]+/[\w!#$&^.+-]+(\s*;.*)?$")]

Timestamp = AwareDatetime

LanguageValue = str | list[str]

LanguageMap = dict[str, str]

ContextValue = str | dict[str, Any] | list[Any]

PositiveInt = Annotated[int, Field(gt=0)]

NonNegativeInt = Annotated[int, Field(ge=0)]

NonNegativeFloat = Annotated[float, Field(ge=0)]

Percentage = Annotated[float, Field(ge=0, le=100)]

# Embedded documents or references: strings become Links, lists become
# ResolvableSequences, typed dicts become blueprint instances.
LinkedValue = Annotated[Any, BeforeValidator(_transform_reference)]
