"""
Moxfield deck import.

Moxfield groups cards into named top-level sections (commanders, mainboard,
sideboard), each a mapping of card key -> {quantity, card: {name}}.

Deck URL: https://moxfield.com/decks/<id>
API:      https://api2.moxfield.com/v2/decks/all/<id>
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

import httpx

from deckevaluator.config import settings
from deckevaluator.models.deck import DeckCard, DeckData
from deckevaluator.models.errors import DeckFetchError

logger = logging.getLogger(__name__)

MOXFIELD_URL_PATTERN = re.compile(r"^https?://(?:www\.)?moxfield\.com/decks/([A-Za-z0-9_-]+)")


def is_moxfield_url(url: str) -> bool:
    return MOXFIELD_URL_PATTERN.match(url) is not None


def extract_moxfield_deck_id(url: str) -> str | None:
    """Public deck ID from a Moxfield deck URL, or None."""
    match = MOXFIELD_URL_PATTERN.match(url)
    return match.group(1) if match else None


def normalize_moxfield_section(
    section: Mapping[str, Any] | None,
    default_quantity: int = 1,
) -> list[DeckCard]:
    """
    Convert one Moxfield section into DeckCards sorted by name.

    Entries without a card name are skipped; a missing quantity counts as
    default_quantity.
    """
    cards: list[DeckCard] = []
    for entry in (section or {}).values():
        name = (entry.get("card") or {}).get("name")
        if not name:
            continue
        quantity = entry.get("quantity")
        cards.append(
            DeckCard(
                name=str(name),
                quantity=int(quantity) if quantity is not None else default_quantity,
            )
        )
    return sorted(cards, key=lambda card: card.name)


async def fetch_moxfield_deck(
    deck_id: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """
    Fetch raw deck JSON from Moxfield.

    Raises:
        DeckFetchError: If the request fails or returns a non-2xx status
    """
    url = f"{settings.moxfield_api_url}/decks/all/{deck_id}"
    headers = {"User-Agent": settings.user_agent, "Accept": "application/json"}

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=settings.http_timeout)

    try:
        response = await client.get(url, headers=headers)
        response.raise_for_status()
        data: dict[str, Any] = response.json()
    except httpx.HTTPStatusError as e:
        raise DeckFetchError(
            f"Moxfield API returned {e.response.status_code} for deck {deck_id}",
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        raise DeckFetchError(f"Moxfield request failed for deck {deck_id}: {e}") from e
    except ValueError as e:
        raise DeckFetchError(f"Moxfield returned invalid JSON for deck {deck_id}") from e
    finally:
        if owns_client:
            await client.aclose()

    return data


async def import_moxfield_deck(
    url: str,
    client: httpx.AsyncClient | None = None,
) -> DeckData:
    """
    Fetch a Moxfield deck by URL and normalize it.

    Raises:
        DeckFetchError: If the URL has no deck ID or the fetch fails
    """
    deck_id = extract_moxfield_deck_id(url)
    if deck_id is None:
        raise DeckFetchError(f"Could not extract Moxfield deck ID from URL: {url}")

    raw = await fetch_moxfield_deck(deck_id, client=client)

    deck = DeckData(
        name=str(raw.get("name") or f"Moxfield deck {deck_id}"),
        source="moxfield",
        url=url,
        commanders=normalize_moxfield_section(raw.get("commanders")),
        mainboard=normalize_moxfield_section(raw.get("mainboard")),
        sideboard=normalize_moxfield_section(raw.get("sideboard")),
    )

    logger.info("Imported Moxfield deck %s: %d entries", deck_id, deck.entry_count())
    return deck
