"""
Card enrichment endpoint.

Looks up card names on Scryfall and returns normalized card metadata keyed
by the names the client asked for.
"""

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import APIRouter, HTTPException, status

from deckevaluator.api.schemas import DeckEnrichRequest, DeckEnrichResponse, EnrichedCardModel
from deckevaluator.config import MAX_CARD_NAME_LENGTH, MAX_UNIQUE_CARD_NAMES
from deckevaluator.models.errors import ScryfallError
from deckevaluator.services.scryfall import enrich_card_names

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cards"])


def clean_card_names(raw_names: Iterable[Any]) -> list[str]:
    """
    Trim, filter and de-duplicate requested card names.

    Non-strings and blank names are dropped. Duplicates are detected
    case-insensitively; the first spelling wins.

    Raises:
        HTTPException: 400 if a name is too long, nothing is left, or too
            many distinct names remain
    """
    unique: dict[str, str] = {}
    for name in raw_names:
        if not isinstance(name, str):
            continue
        trimmed = name.strip()
        if not trimmed:
            continue
        if len(trimmed) > MAX_CARD_NAME_LENGTH:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Card name exceeds maximum length of {MAX_CARD_NAME_LENGTH} characters",
            )
        unique.setdefault(trimmed.lower(), trimmed)

    names = list(unique.values())

    if not names:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid card names provided",
        )

    if len(names) > MAX_UNIQUE_CARD_NAMES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many unique card names ({len(names)}). "
            f"Maximum is {MAX_UNIQUE_CARD_NAMES}.",
        )

    return names


@router.post("/deck-enrich", response_model=DeckEnrichResponse)
async def enrich_deck_cards(request: DeckEnrichRequest) -> DeckEnrichResponse:
    """
    Fetch card metadata for a list of names.

    Names Scryfall cannot resolve are listed in notFound rather than
    failing the request. Returns 502 if Scryfall itself fails.
    """
    names = clean_card_names(request.card_names)

    try:
        card_map, not_found = await enrich_card_names(names)
    except ScryfallError as e:
        logger.error("Card enrichment failed: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch card data from Scryfall",
        ) from e

    return DeckEnrichResponse(
        cards={name: EnrichedCardModel.from_domain(card) for name, card in card_map.items()},
        not_found=not_found,
    )
