"""
BTI card catalog.

Provides read-only access to the 16 static BTI cards, one per type code.
The catalog is built once, validated on construction and never mutated.
"""

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache

from umai.models.bti import (
    Card,
    GradientColor,
    PatternStyle,
    is_valid_type_code,
    pattern_style_for,
    tags_for,
)

logger = logging.getLogger(__name__)

CATALOG_SIZE = 16
GRADIENT_SIZE = 2


class CatalogError(Exception):
    """Raised when a card set violates a catalog invariant."""

    pass


def _card(
    type_code: str,
    title: str,
    description: str,
    colors: tuple[tuple[str, float], tuple[str, float]],
) -> Card:
    """Build a card; tags and pattern style follow from the type code."""
    return Card(
        type_code=type_code,
        title=title,
        description=description,
        tags=tags_for(type_code),
        gradient_colors=tuple(GradientColor(name, opacity) for name, opacity in colors),
        pattern_style=pattern_style_for(type_code),
    )


BTI_CARDS: tuple[Card, ...] = (
    # F (fiery) + A (adventurous)
    _card("FAHV", "The Spice Hunter", "매운 음식을 정복하는 맛 사냥꾼", (("red", 0.7), ("orange", 0.4))),
    _card("FAHP", "Fine Flavor Explorer", "프리미엄 자극의 모험가", (("red", 0.6), ("pink", 0.4))),
    _card(
        "FASV",
        "Bouncy Bargain Seeker",
        "부드럽게 만나는 가성비 탐험가",
        (("orange", 0.7), ("yellow", 0.4)),
    ),
    _card("FASP", "Silk Road Pioneer", "부드러운 맛의 럭셔리 여행자", (("red", 0.6), ("orange", 0.3))),
    # F (fiery) + T (traditional)
    _card(
        "FTHV",
        "Crispy Value Guardian",
        "바삭한 맛의 가성비 수호자",
        (("orange", 0.6), ("brown", 0.3)),
    ),
    _card(
        "FTHP",
        "Traditional Spice Artisan",
        "전통 있는 매운맛의 장인",
        (("brown", 0.6), ("orange", 0.3)),
    ),
    _card(
        "FTSV",
        "Soft Spice Economist",
        "부드러운 자극의 실속파",
        (("orange", 0.5), ("yellow", 0.3)),
    ),
    _card(
        "FTSP",
        "Premium Comfort Master",
        "고급스러운 편안함의 달인",
        (("brown", 0.5), ("orange", 0.3)),
    ),
    # C (clean) + A (adventurous)
    _card(
        "CAHV",
        "Fresh Adventure Scout",
        "깔끔한 맛의 모험 스카우트",
        (("blue", 0.6), ("mint", 0.3)),
    ),
    _card(
        "CAHP",
        "Pure Luxury Wanderer",
        "깔끔한 맛의 고급 유랑가",
        (("blue", 0.5), ("cyan", 0.3)),
    ),
    _card("CASV", "Smooth Deal Hunter", "부드러운 가성비의 사냥꾼", (("cyan", 0.6), ("mint", 0.3))),
    _card("CASP", "Elegant Taste Curator", "우아한 맛의 큐레이터", (("teal", 0.6), ("blue", 0.3))),
    # C (clean) + T (traditional)
    _card("CTHV", "Classic Value Expert", "전통적 가치의 전문가", (("green", 0.6), ("mint", 0.3))),
    _card("CTHP", "Noble Taste Keeper", "고귀한 맛의 수호자", (("green", 0.5), ("teal", 0.3))),
    _card("CTSV", "Gentle Savings Guru", "부드러운 실속의 구루", (("mint", 0.6), ("green", 0.3))),
    _card("CTSP", "The Clean Aristocrat", "깔끔한 맛의 귀족", (("teal", 0.5), ("mint", 0.3))),
)


def validate_catalog(cards: Iterable[Card]) -> None:
    """
    Check the catalog invariants.

    - Exactly 16 cards, one per type code (bijection with all_type_codes())
    - Pattern style matches the first two letters of the type code
    - Four tags matching the axis labels, two gradient colors

    Raises:
        CatalogError: On the first violated invariant
    """
    cards = list(cards)
    if len(cards) != CATALOG_SIZE:
        raise CatalogError(f"Catalog must contain {CATALOG_SIZE} cards, got {len(cards)}")

    seen: set[str] = set()
    for card in cards:
        code = card.type_code
        if not is_valid_type_code(code):
            raise CatalogError(f"Invalid type code: {code!r}")
        if code in seen:
            raise CatalogError(f"Duplicate type code: {code}")
        seen.add(code)

        if card.pattern_style != pattern_style_for(code):
            raise CatalogError(
                f"{code}: pattern style {card.pattern_style.value} "
                f"does not match prefix {code[:2]}"
            )
        if tuple(card.tags) != tags_for(code):
            raise CatalogError(f"{code}: tags {list(card.tags)} do not match the type code axes")
        if len(card.gradient_colors) != GRADIENT_SIZE:
            raise CatalogError(
                f"{code}: expected {GRADIENT_SIZE} gradient colors, "
                f"got {len(card.gradient_colors)}"
            )


class CardCatalog:
    """
    Immutable, ordered collection of BTI cards with lookup by type code.

    Safe to share between any number of concurrent readers.
    """

    __slots__ = ("_cards", "_by_code")

    def __init__(self, cards: Iterable[Card] = BTI_CARDS) -> None:
        cards = tuple(cards)
        validate_catalog(cards)
        self._cards = cards
        self._by_code = {card.type_code: card for card in cards}

    def list_cards(self) -> tuple[Card, ...]:
        """All cards in catalog order (FA, FT, CA, CT groups)."""
        return self._cards

    def get(self, type_code: str) -> Card | None:
        """Look up a card by type code (case-insensitive)."""
        return self._by_code.get(type_code.upper())

    def by_pattern(self, style: PatternStyle) -> tuple[Card, ...]:
        """Cards sharing a pattern style, in catalog order."""
        return tuple(card for card in self._cards if card.pattern_style == style)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, type_code: object) -> bool:
        return isinstance(type_code, str) and type_code.upper() in self._by_code


@lru_cache(maxsize=1)
def get_card_catalog() -> CardCatalog:
    """
    Get the process-wide card catalog.

    Built and validated once, on first use.
    """
    catalog = CardCatalog()
    logger.debug("Loaded BTI catalog with %d cards", len(catalog))
    return catalog
