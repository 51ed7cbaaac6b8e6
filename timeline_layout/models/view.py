"""
View configuration model.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from timeline_layout.models.enums import GroupBy, ViewKind

E = TypeVar("E", bound=Enum)

# Alternative spellings used by callers, keyed by normalised text
ENUM_ALIASES: dict[type[Enum], dict[str, Enum]] = {
    ViewKind: {
        "two-week": ViewKind.TWO_WEEKS,
        "two-weeks": ViewKind.TWO_WEEKS,
        "2week": ViewKind.TWO_WEEKS,
        "1-week": ViewKind.WEEK,
        "month-fixed-30": ViewKind.MONTH,
    },
}


def lookup_enum(enum_cls: type[E], value: Any) -> Optional[E]:
    """
    Find the member of ``enum_cls`` that ``value`` names, or None.

    Accepts members, values, (case-insensitive) member names and the
    spellings listed in ``ENUM_ALIASES``.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str):
        text = value.strip().lower().replace("_", "-")
        alias = ENUM_ALIASES.get(enum_cls, {}).get(text)
        if alias is not None:
            return alias
        return enum_cls.__members__.get(text.upper().replace("-", "_"))
    return None


def coerce_enum(enum_cls: type[E], value: Any, default: E) -> E:
    member = lookup_enum(enum_cls, value)
    return default if member is None else member


def resolve_view_kind(value: Any) -> ViewKind:
    return coerce_enum(ViewKind, value, ViewKind.WEEK)


def resolve_group_by(value: Any) -> GroupBy:
    return coerce_enum(GroupBy, value, GroupBy.ASSIGNEE)


class ViewConfig(BaseModel):
    """What part of the timeline is shown and how it is split."""

    model_config = ConfigDict(frozen=True)

    kind: ViewKind = Field(ViewKind.WEEK, description="Window span")
    anchor: datetime | date = Field(
        ..., description="Any instant inside the wanted window (naive = view wall-clock time)"
    )
    zoom_percent: int = Field(100, description="Zoom level; clamped, never rejected")
    group_by: GroupBy = Field(GroupBy.ASSIGNEE, description="Row grouping dimension")
    timezone: Optional[str] = Field(
        None, description="IANA timezone for calendar days (None = settings default)"
    )

    @field_validator("kind", mode="before")
    @classmethod
    def fallback_kind(cls, value: Any) -> ViewKind:
        return resolve_view_kind(value)

    @field_validator("group_by", mode="before")
    @classmethod
    def fallback_group_by(cls, value: Any) -> GroupBy:
        return resolve_group_by(value)
