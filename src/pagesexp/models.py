"""Pydantic models for the compaction pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pagesexp.tables import DEFAULT_INTERACTIVE_TAGS, DEFAULT_KEEP_ATTRS


class CompactOptions(BaseModel):
    """Knobs for one compaction call. Read-only once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    interactive_tags: frozenset[str] = Field(
        default=frozenset(DEFAULT_INTERACTIVE_TAGS),
        description="Tags that are always kept and keep their ancestors alive",
    )
    keep_attrs: frozenset[str] = Field(
        default=frozenset(DEFAULT_KEEP_ATTRS),
        description="Attributes kept on every element and emitted by the serializer",
    )
    strip_attrs: bool = Field(default=True, description="Narrow attributes to the allow-lists")
    drop_aria_attrs: bool = Field(default=True, description="Drop aria-* attributes when stripping")
    drop_data_attrs: bool = Field(default=False, description="Drop data-* attributes when stripping")
    keep_style: bool = Field(default=True, description="Let style through when it is also allow-listed")
    pretty: bool = Field(default=False, description="One node per line, indented")
    indent: int = Field(default=2, ge=0, description="Spaces per depth level when pretty")
    css_head: bool = Field(default=True, description="Fold #id and .class into the head token")
    include_id_in_head: bool = Field(default=True, description="Put #id in the head token")
    span_alias: str = Field(default="span", min_length=1, description="Head token used for <span>")
    attr_map: bool = Field(default=True, description="Emit attributes as a {:k \"v\"} map")
    relevant_only: bool = Field(
        default=True,
        description="Keep only interactive, identified or textual subtrees",
    )

    @field_validator("interactive_tags", "keep_attrs", mode="before")
    @classmethod
    def _lower_names(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(str(v).strip().lower() for v in value if str(v).strip())


class ToolResult(BaseModel):
    """Text plus failure flag, the shape every tool call returns."""

    text: str = Field(description="S-expression, or a human-readable failure message")
    is_error: bool = Field(default=False)
