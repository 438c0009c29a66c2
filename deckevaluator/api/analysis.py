"""
Deck analysis endpoint.

Computes the mana curve, color distribution, mana base metrics and card
tags for a deck whose cards the client has already enriched.
"""

from fastapi import APIRouter

from deckevaluator.analysis.deck_analysis import analyze_deck
from deckevaluator.api.schemas import DeckAnalysisRequest, DeckAnalysisResponse

router = APIRouter(tags=["analysis"])


@router.post("/deck-analysis", response_model=DeckAnalysisResponse)
async def analyze(request: DeckAnalysisRequest) -> DeckAnalysisResponse:
    """
    Analyse a deck.

    The card map may be partial; cards without metadata are skipped by
    every computation and reported in missingCards.
    """
    deck = request.deck.to_domain()
    card_map = {name: card.to_domain() for name, card in request.cards.items()}
    enabled_types = set(request.enabled_types) if request.enabled_types is not None else None

    analysis = analyze_deck(deck, card_map, enabled_types)
    return DeckAnalysisResponse.from_domain(analysis)
