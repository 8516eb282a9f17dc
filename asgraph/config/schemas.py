"""
Configuration Schemas for asgraph.

Pydantic models for the knobs that control transformation and
remote resolution. Instances are immutable once built; create a new
one (or use ``model_copy(update=...)``) to change a setting.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TransformerOptions(BaseModel):
    """
    Options recognized by the Transformer.

    Attributes:
        convert_text_to_links: Bare URL strings in reference fields become Links
        compose_with_missing_constructors: Build a partial composite when some
            of a document's tags are unregistered
        enable_composite_types: Handle documents declaring a list of tags
        always_return_value_on_transform: When a composite is refused, return
            the raw value instead of None
        exclude_extraneous_values: Drop keys the blueprint does not declare
    """

    model_config = ConfigDict(frozen=True)

    convert_text_to_links: bool = True
    compose_with_missing_constructors: bool = True
    enable_composite_types: bool = True
    always_return_value_on_transform: bool = False
    exclude_extraneous_values: bool = True


class ResolverSettings(BaseModel):
    """Settings for the default network resolution strategy."""

    model_config = ConfigDict(frozen=True)

    accept: str = Field("application/json", description="Accept header sent with every fetch")
    timeout: float | None = Field(30.0, gt=0, description="Request timeout in seconds (None = wait forever)")
    follow_redirects: bool = True
    user_agent: str = Field("asgraph/0.1.0", description="User-Agent header")


class Settings(BaseModel):
    """
    Application settings model.

    Groups every configuration section for type-safe access.
    """

    model_config = ConfigDict(frozen=True)

    transformer: TransformerOptions = Field(default_factory=TransformerOptions)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
