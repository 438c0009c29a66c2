"""
Scryfall card lookup and normalization.

Fetches card records for a list of names through Scryfall's collection
endpoint and turns each record into an EnrichedCard.

API: https://scryfall.com/docs/api/cards/collection
"""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from deckevaluator.config import settings
from deckevaluator.models.card import EnrichedCard, ImageUris
from deckevaluator.models.errors import ScryfallError
from deckevaluator.parsers.faces import front_face, front_face_record
from deckevaluator.parsers.mana import parse_mana_pips, parse_type_line

logger = logging.getLogger(__name__)


@dataclass
class CollectionResult:
    """Raw Scryfall records plus the names Scryfall could not resolve."""

    cards: list[dict[str, Any]] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)


def _with_face_fallback(raw: Mapping[str, Any], key: str) -> Any:
    """Top-level field, or the front face's when the card keeps it on its faces."""
    value = raw.get(key)
    if value is None:
        value = front_face_record(raw).get(key)
    return value


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _image_uris(value: Any) -> ImageUris | None:
    if not isinstance(value, Mapping):
        return None
    return ImageUris(
        small=str(value.get("small", "")),
        normal=str(value.get("normal", "")),
        large=str(value.get("large", "")),
    )


def normalize_card(raw: Mapping[str, Any]) -> EnrichedCard:
    """
    Convert a Scryfall card record into an EnrichedCard.

    Multi-faced cards keep their mana cost, oracle text and images on
    card_faces; those three fields fall back to the first face when the
    top-level field is absent. Supertypes and subtypes come from the
    top-level type line (front face only).

    Args:
        raw: Card object as returned by Scryfall

    Returns:
        EnrichedCard. Missing fields become None or empty lists.
    """
    mana_cost = _with_face_fallback(raw, "mana_cost") or ""
    oracle_text = _with_face_fallback(raw, "oracle_text") or ""
    type_line = raw.get("type_line") or ""
    type_parts = parse_type_line(type_line)

    return EnrichedCard(
        name=str(raw.get("name", "")),
        mana_cost=mana_cost,
        cmc=float(raw.get("cmc") or 0),
        color_identity=_string_list(raw.get("color_identity")),
        colors=_string_list(raw.get("colors")),
        type_line=type_line,
        supertypes=type_parts.supertypes,
        subtypes=type_parts.subtypes,
        oracle_text=oracle_text,
        keywords=_string_list(raw.get("keywords")),
        power=_optional_str(raw.get("power")),
        toughness=_optional_str(raw.get("toughness")),
        loyalty=_optional_str(raw.get("loyalty")),
        rarity=str(raw.get("rarity") or "common"),
        image_uris=_image_uris(_with_face_fallback(raw, "image_uris")),
        mana_pips=parse_mana_pips(mana_cost),
        produced_mana=_string_list(raw.get("produced_mana")),
        flavor_name=_optional_str(raw.get("flavor_name")),
    )


def _batches(names: Sequence[str], size: int) -> list[Sequence[str]]:
    return [names[i : i + size] for i in range(0, len(names), size)]


async def fetch_card_collection(
    names: Sequence[str],
    client: httpx.AsyncClient | None = None,
) -> CollectionResult:
    """
    Look up cards by exact name.

    Names are sent in batches of settings.scryfall_batch_size, one request
    at a time with a short pause between requests (Scryfall rate limit).

    Args:
        names: Card names, already trimmed and de-duplicated
        client: Optional httpx client for connection reuse

    Returns:
        CollectionResult with one raw record per resolved name

    Raises:
        ScryfallError: If any request fails
    """
    result = CollectionResult()
    if not names:
        return result

    url = f"{settings.scryfall_api_url}/cards/collection"
    headers = {"User-Agent": settings.user_agent, "Accept": "application/json"}
    batches = _batches(names, settings.scryfall_batch_size)

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=settings.http_timeout)

    try:
        for index, batch in enumerate(batches):
            if index > 0:
                await asyncio.sleep(settings.scryfall_request_delay)

            payload = {"identifiers": [{"name": name} for name in batch]}
            response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data = response.json()

            result.cards.extend(data.get("data", []))
            for identifier in data.get("not_found", []):
                name = identifier.get("name") if isinstance(identifier, Mapping) else None
                if name:
                    result.not_found.append(str(name))
    except httpx.HTTPStatusError as e:
        raise ScryfallError(
            f"Scryfall API error: HTTP {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        raise ScryfallError(f"Scryfall request failed: {e}") from e
    except ValueError as e:
        raise ScryfallError("Scryfall returned invalid JSON") from e
    finally:
        if owns_client:
            await client.aclose()

    logger.info(
        "Fetched %d cards from Scryfall (%d not found, %d requests)",
        len(result.cards),
        len(result.not_found),
        len(batches),
    )
    return result


def map_to_requested_names(
    requested: Sequence[str],
    cards: Sequence[Mapping[str, Any]],
) -> dict[str, EnrichedCard]:
    """
    Key normalized cards by the name the caller asked for.

    Scryfall answers with canonical names ("Delver of Secrets // Insectile
    Aberration", correct capitalisation). Matching is case-insensitive on the
    full name first, then on the front face; unmatched cards keep their
    canonical name.
    """
    requested_by_lower = {name.lower(): name for name in requested}

    card_map: dict[str, EnrichedCard] = {}
    for raw in cards:
        canonical = str(raw.get("name", ""))
        requested_name = requested_by_lower.get(canonical.lower()) or requested_by_lower.get(
            front_face(canonical).lower(), canonical
        )
        card_map[requested_name] = normalize_card(raw)

    return card_map


async def enrich_card_names(
    names: Sequence[str],
    client: httpx.AsyncClient | None = None,
) -> tuple[dict[str, EnrichedCard], list[str]]:
    """
    Fetch and normalize cards for a list of requested names.

    Returns:
        (card map keyed by requested name, names Scryfall did not find)

    Raises:
        ScryfallError: If the lookup fails
    """
    result = await fetch_card_collection(names, client=client)
    return map_to_requested_names(names, result.cards), result.not_found
