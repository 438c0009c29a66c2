"""
Deck import by URL.

Picks the deck-hosting provider from the URL and delegates to it.
"""

import httpx

from deckevaluator.models.deck import DeckData
from deckevaluator.models.errors import UnsupportedDeckUrlError
from deckevaluator.services.archidekt import import_archidekt_deck, is_archidekt_url
from deckevaluator.services.moxfield import import_moxfield_deck, is_moxfield_url


async def import_deck_from_url(
    url: str,
    client: httpx.AsyncClient | None = None,
) -> DeckData:
    """
    Import a deck from Archidekt or Moxfield.

    Raises:
        UnsupportedDeckUrlError: If neither provider recognises the URL
        DeckFetchError: If the provider request fails
    """
    if is_archidekt_url(url):
        return await import_archidekt_deck(url, client=client)
    if is_moxfield_url(url):
        return await import_moxfield_deck(url, client=client)
    raise UnsupportedDeckUrlError(url)
