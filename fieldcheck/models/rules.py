"""
Typed rule catalog.

Each rule is a frozen, strict Pydantic model carrying its own arguments, so
a wrong argument type (``MaxLen(max="5")``) fails when the rule is built
rather than when it is applied.
"""

from typing import ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _RuleBase(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: ClassVar[str]


class Require(_RuleBase):
    """Value must not be the empty string."""

    name: ClassVar[str] = "require"


class MaxLen(_RuleBase):
    """Length of the value must not exceed *max*."""

    name: ClassVar[str] = "max_len"

    max: int
    unit: Optional[Literal["bytes", "chars"]] = Field(
        None, description="Overrides settings.LENGTH_UNIT when set."
    )


class MinLen(_RuleBase):
    """Length of the value must be at least *min*."""

    name: ClassVar[str] = "min_len"

    min: int
    unit: Optional[Literal["bytes", "chars"]] = Field(
        None, description="Overrides settings.LENGTH_UNIT when set."
    )


class Email(_RuleBase):
    name: ClassVar[str] = "email"


class Number(_RuleBase):
    name: ClassVar[str] = "number"


class Max(_RuleBase):
    """Value must parse as an integer no greater than *max* (inclusive)."""

    name: ClassVar[str] = "max"

    max: int


class Min(_RuleBase):
    """Value must parse as an integer no smaller than *min* (inclusive)."""

    name: ClassVar[str] = "min"

    min: int


class Date(_RuleBase):
    name: ClassVar[str] = "date"


class URL(_RuleBase):
    name: ClassVar[str] = "url"


class Match(_RuleBase):
    """Non-empty value must contain a match for *pattern*."""

    name: ClassVar[str] = "match"

    pattern: str


Rule = Union[Require, MaxLen, MinLen, Email, Number, Max, Min, Date, URL, Match]
