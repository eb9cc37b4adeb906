"""
BTI card endpoints.

Read-only access to the static card catalog.
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from umai.models.bti import Card, PatternStyle
from umai.services.card_catalog import get_card_catalog

router = APIRouter(prefix="/cards", tags=["cards"])


class GradientColorResponse(BaseModel):
    name: str
    opacity: float


class CardResponse(BaseModel):
    """Response model for a BTI card."""

    id: str
    type_code: str
    title: str
    description: str
    tags: list[str]
    gradient_colors: list[GradientColorResponse]
    pattern_style: PatternStyle

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            id=str(card.id),
            type_code=card.type_code,
            title=card.title,
            description=card.description,
            tags=list(card.tags),
            gradient_colors=[
                GradientColorResponse(name=c.name, opacity=c.opacity) for c in card.gradient_colors
            ],
            pattern_style=card.pattern_style,
        )


@router.get("", response_model=list[CardResponse])
async def list_cards(pattern: PatternStyle | None = None) -> list[CardResponse]:
    """
    List all BTI cards in catalog order.

    Optionally filtered by pattern style.
    """
    catalog = get_card_catalog()
    cards = catalog.by_pattern(pattern) if pattern else catalog.list_cards()
    return [CardResponse.from_card(card) for card in cards]


@router.get("/{type_code}", response_model=CardResponse)
async def get_card(type_code: str) -> CardResponse:
    """Get a single card by its four-letter type code."""
    card = get_card_catalog().get(type_code)
    if card is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown BTI type code: {type_code}",
        )
    return CardResponse.from_card(card)
