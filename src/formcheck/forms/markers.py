"""Trailing annotations — the nodes that follow a field in render order.

A field's ``trailing`` list is the single source of truth for what is
shown after it. Error markers and unrelated decoration are distinct
types, so marker removal can never take out a help text or an icon.
"""

from dataclasses import dataclass
from enum import StrEnum


class MarkerKind(StrEnum):
    """Why a marker exists."""

    ERROR = "error"  # A validator rejected the value
    DIAGNOSTIC = "diagnostic"  # A rule could not run (configuration bug)


@dataclass(frozen=True, slots=True)
class Marker:
    """One failed rule for one field."""

    message: str
    rule: str | None = None
    kind: MarkerKind = MarkerKind.ERROR


@dataclass(frozen=True, slots=True)
class Decoration:
    """Non-marker content placed after a field (help text, units, icons)."""

    text: str
    css_class: str = ""


type Annotation = Marker | Decoration
