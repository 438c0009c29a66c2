"""
Archidekt deck import.

Archidekt returns every card in one flat list; zones are expressed through
each card's category labels.

Deck URL: https://archidekt.com/decks/<id>/<slug>
API:      https://archidekt.com/api/decks/<id>/
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

ARCHIDEKT_URL_PATTERN = re.compile(r"^https?://(?:www\.)?archidekt\.com/decks/(\d+)")

COMMANDER_CATEGORIES = frozenset({"Commander", "Oathbreaker", "Signature Spell"})

SIDEBOARD_CATEGORIES = frozenset({"Sideboard", "Maybeboard", "Considering"})


def is_archidekt_url(url: str) -> bool:
    return ARCHIDEKT_URL_PATTERN.match(url) is not None


def extract_archidekt_deck_id(url: str) -> str | None:
    """Numeric deck ID from an Archidekt deck URL, or None."""
    match = ARCHIDEKT_URL_PATTERN.match(url)
    return match.group(1) if match else None


def _card_name(entry: Mapping[str, Any]) -> str | None:
    card = entry.get("card") or {}
    oracle_card = card.get("oracleCard") or {}
    name = oracle_card.get("name")
    return str(name) if name else None


def normalize_archidekt_cards(
    raw: Mapping[str, Any],
) -> tuple[list[DeckCard], list[DeckCard], list[DeckCard]]:
    """
    Split an Archidekt deck payload into zones.

    Commander categories win over sideboard categories; everything else is
    mainboard. Entries without a card name are skipped.

    Args:
        raw: Deck JSON from the Archidekt API

    Returns:
        (commanders, mainboard, sideboard), each sorted by name
    """
    commanders: list[DeckCard] = []
    mainboard: list[DeckCard] = []
    sideboard: list[DeckCard] = []

    for entry in raw.get("cards") or []:
        name = _card_name(entry)
        if name is None:
            continue

        quantity = entry.get("quantity")
        card = DeckCard(name=name, quantity=int(quantity) if quantity is not None else 1)
        categories = set(entry.get("categories") or [])

        if categories & COMMANDER_CATEGORIES:
            commanders.append(card)
        elif categories & SIDEBOARD_CATEGORIES:
            sideboard.append(card)
        else:
            mainboard.append(card)

    def by_name(card: DeckCard) -> str:
        return card.name

    return (
        sorted(commanders, key=by_name),
        sorted(mainboard, key=by_name),
        sorted(sideboard, key=by_name),
    )


async def fetch_archidekt_deck(
    deck_id: str,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """
    Fetch raw deck JSON from Archidekt.

    Raises:
        DeckFetchError: If the request fails or returns a non-2xx status
    """
    url = f"{settings.archidekt_api_url}/decks/{deck_id}/"
    headers = {"Accept": "application/json", "User-Agent": settings.user_agent}

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=settings.http_timeout)

    try:
        response = await client.get(url, headers=headers)
        response.raise_for_status()
        data: dict[str, Any] = response.json()
    except httpx.HTTPStatusError as e:
        raise DeckFetchError(
            f"Archidekt API returned {e.response.status_code} for deck {deck_id}",
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        raise DeckFetchError(f"Archidekt request failed for deck {deck_id}: {e}") from e
    except ValueError as e:
        raise DeckFetchError(f"Archidekt returned invalid JSON for deck {deck_id}") from e
    finally:
        if owns_client:
            await client.aclose()

    return data


async def import_archidekt_deck(
    url: str,
    client: httpx.AsyncClient | None = None,
) -> DeckData:
    """
    Fetch an Archidekt deck by URL and normalize it.

    Raises:
        DeckFetchError: If the URL has no deck ID or the fetch fails
    """
    deck_id = extract_archidekt_deck_id(url)
    if deck_id is None:
        raise DeckFetchError(f"Could not extract Archidekt deck ID from URL: {url}")

    raw = await fetch_archidekt_deck(deck_id, client=client)
    commanders, mainboard, sideboard = normalize_archidekt_cards(raw)

    logger.info(
        "Imported Archidekt deck %s: %d commanders, %d mainboard, %d sideboard entries",
        deck_id,
        len(commanders),
        len(mainboard),
        len(sideboard),
    )

    return DeckData(
        name=str(raw.get("name") or f"Archidekt deck {deck_id}"),
        source="archidekt",
        url=url,
        commanders=commanders,
        mainboard=mainboard,
        sideboard=sideboard,
    )
