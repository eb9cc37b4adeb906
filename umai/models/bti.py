"""
BTI (taste personality) card model.

A type code is four letters, one per axis, in fixed order:

    1. intensity    F (fiery)        / C (clean)
    2. disposition  A (adventurous)  / T (traditional)
    3. texture      H (hard)         / S (soft)
    4. value        V (value)        / P (premium)

The first two letters select the card's decorative pattern style.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from itertools import product


class PatternStyle(str, Enum):
    """Decorative background pattern, chosen by the first two letters of a type code."""

    DYNAMIC = "dynamic"
    ELEGANT = "elegant"
    MINIMAL = "minimal"
    CLASSIC = "classic"


@dataclass(frozen=True, slots=True)
class AxisLetter:
    """One pole of a taste axis."""

    letter: str
    name: str
    tag: str  # Korean label shown on the card


# Axes in type-code order; each axis lists its two poles
AXES: tuple[tuple[AxisLetter, AxisLetter], ...] = (
    (AxisLetter("F", "fiery", "자극적인"), AxisLetter("C", "clean", "깔끔한")),
    (AxisLetter("A", "adventurous", "모험적인"), AxisLetter("T", "traditional", "보수적인")),
    (AxisLetter("H", "hard", "딱딱한"), AxisLetter("S", "soft", "말캉한")),
    (AxisLetter("V", "value", "가성비"), AxisLetter("P", "premium", "품격")),
)

PATTERN_BY_PREFIX: dict[str, PatternStyle] = {
    "FA": PatternStyle.DYNAMIC,
    "FT": PatternStyle.ELEGANT,
    "CA": PatternStyle.MINIMAL,
    "CT": PatternStyle.CLASSIC,
}


def all_type_codes() -> tuple[str, ...]:
    """All 16 type codes, grouped FA, FT, CA, CT like the catalog."""
    return tuple(
        "".join(pole.letter for pole in poles)
        for poles in product(*AXES)
    )


def is_valid_type_code(code: str) -> bool:
    """Check that code has exactly one valid letter per axis."""
    if len(code) != len(AXES):
        return False
    return all(
        letter in {pole.letter for pole in axis}
        for letter, axis in zip(code, AXES, strict=True)
    )


def _require_valid(code: str) -> None:
    if not is_valid_type_code(code):
        raise ValueError(f"Invalid BTI type code: {code!r}")


def pattern_style_for(type_code: str) -> PatternStyle:
    """
    Pattern style for a type code.

    Raises:
        ValueError: If type_code is not a valid BTI code
    """
    _require_valid(type_code)
    return PATTERN_BY_PREFIX[type_code[:2]]


def tags_for(type_code: str) -> tuple[str, str, str, str]:
    """
    Axis tag labels for a type code, in axis order.

    Raises:
        ValueError: If type_code is not a valid BTI code
    """
    _require_valid(type_code)
    labels = []
    for letter, axis in zip(type_code, AXES, strict=True):
        labels.extend(pole.tag for pole in axis if pole.letter == letter)
    return (labels[0], labels[1], labels[2], labels[3])


@dataclass(frozen=True, slots=True)
class GradientColor:
    """A named color with opacity (0.0-1.0). Decorative pass-through data."""

    name: str
    opacity: float


@dataclass(frozen=True, slots=True)
class Card:
    """
    A static BTI card.

    Attributes:
        type_code: Four-letter BTI code (e.g., "CTSP")
        title: Short display name
        description: Localized one-line description
        tags: Four axis labels, in type-code order
        gradient_colors: Two decorative colors
        pattern_style: Background pattern, derived from the code prefix
        id: Opaque identity for list rendering
    """

    type_code: str
    title: str
    description: str
    tags: tuple[str, ...]
    gradient_colors: tuple[GradientColor, ...]
    pattern_style: PatternStyle
    id: uuid.UUID = field(default_factory=uuid.uuid4)
