"""
Deck import endpoints.

Turns pasted decklist text or a deck-hosting URL into a zoned deck.
"""

import logging
from typing import Annotated
from urllib.parse import urlsplit

from fastapi import APIRouter, HTTPException, Query, status

from deckevaluator.api.schemas import DeckDataModel, DeckParseRequest
from deckevaluator.config import MAX_DECKLIST_LENGTH
from deckevaluator.models.errors import DeckServiceError, UnsupportedDeckUrlError
from deckevaluator.parsers.decklist import parse_decklist
from deckevaluator.services.deck_import import import_deck_from_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["decks"])

# Literal codes: the Starlette names for 413/422 changed between releases
HTTP_413_CONTENT_TOO_LARGE = 413
HTTP_422_UNPROCESSABLE = 422


@router.post("/deck-parse", response_model=DeckDataModel)
async def parse_deck_text(request: DeckParseRequest) -> DeckDataModel:
    """
    Parse a pasted decklist.

    Returns 400 for empty text, 413 for text over the length limit and
    422 when no card lines were recognised.
    """
    text = request.text.strip()

    if not text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="text field must not be empty",
        )

    if len(text) > MAX_DECKLIST_LENGTH:
        raise HTTPException(
            status_code=HTTP_413_CONTENT_TOO_LARGE,
            detail=f"Decklist text exceeds maximum length of {MAX_DECKLIST_LENGTH} characters",
        )

    deck = parse_decklist(text)

    if deck.entry_count() == 0:
        raise HTTPException(
            status_code=HTTP_422_UNPROCESSABLE,
            detail="No cards found in the provided decklist",
        )

    return DeckDataModel.from_domain(deck)


def _validate_deck_url(url: str) -> str:
    invalid = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid URL format",
    )
    try:
        parts = urlsplit(url.strip())
    except ValueError as e:
        raise invalid from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise invalid
    return parts.geturl()


@router.get("/deck", response_model=DeckDataModel)
async def import_deck(
    url: Annotated[str | None, Query(description="Archidekt or Moxfield deck URL")] = None,
) -> DeckDataModel:
    """
    Import a deck from a deck-hosting service.

    Returns 400 for a missing or malformed URL, 422 for an unsupported
    host and 502 when the provider request fails.
    """
    if not url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required query parameter: url",
        )

    deck_url = _validate_deck_url(url)

    try:
        deck = await import_deck_from_url(deck_url)
    except UnsupportedDeckUrlError as e:
        raise HTTPException(
            status_code=HTTP_422_UNPROCESSABLE,
            detail="Unsupported deck URL. Only Archidekt and Moxfield URLs are supported. "
            "For other sites, paste the exported decklist instead.",
        ) from e
    except DeckServiceError as e:
        logger.error("Deck fetch failed for %s: %s", deck_url, e.message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch deck: {e.message}",
        ) from e

    return DeckDataModel.from_domain(deck)
