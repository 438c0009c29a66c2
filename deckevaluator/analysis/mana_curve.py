"""
Mana curve calculation.

Buckets a deck's non-land spells by mana value (0-6, 7+) and splits each
bucket into permanents and non-permanents (instants and sorceries).
"""

import math
from collections.abc import Collection

from deckevaluator.models.analysis import CARD_TYPES, CardMap, CardType, ManaCurveBucket
from deckevaluator.models.deck import DeckData
from deckevaluator.parsers.faces import front_face

BUCKET_LABELS: tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "7+")

_NON_PERMANENT_TYPES = ("Instant", "Sorcery")


def extract_card_type(type_line: str) -> CardType | None:
    """
    Get the primary spell type of a card.

    Uses the front face only. Creature beats every other type, so
    "Artifact Creature" is a Creature.

    Args:
        type_line: Scryfall type line

    Returns:
        CardType, or None for lands (any type line containing "Land") and
        type lines with no recognised spell type.
    """
    face = front_face(type_line)
    if "Land" in face:
        return None

    for card_type in CARD_TYPES:
        if card_type.value in face:
            return card_type

    return None


def is_non_permanent(type_line: str) -> bool:
    """True if the front face is an instant or sorcery."""
    face = front_face(type_line)
    return any(card_type in face for card_type in _NON_PERMANENT_TYPES)


def bucket_label(cmc: float) -> str:
    """Curve label for a mana value. Fractional values round down; 7 and up share "7+"."""
    return BUCKET_LABELS[min(math.floor(max(cmc, 0)), len(BUCKET_LABELS) - 1)]


def compute_mana_curve(
    deck: DeckData,
    card_map: CardMap,
    enabled_types: Collection[CardType] | None = None,
) -> list[ManaCurveBucket]:
    """
    Compute the mana curve of a deck.

    Args:
        deck: Deck to analyse (all three zones are counted)
        card_map: Enriched cards keyed by requested name; may be partial
        enabled_types: Only count these spell types. None counts all of
            them; an empty collection counts nothing.

    Returns:
        Exactly eight buckets labelled "0".."6", "7+", zero-filled.
    """
    permanents = dict.fromkeys(BUCKET_LABELS, 0)
    non_permanents = dict.fromkeys(BUCKET_LABELS, 0)

    for card in deck.all_cards():
        enriched = card_map.get(card.name)
        if enriched is None:
            continue

        card_type = extract_card_type(enriched.type_line)
        if card_type is None:
            continue  # Land or unknown

        if enabled_types is not None and card_type not in enabled_types:
            continue

        label = bucket_label(enriched.cmc)
        if is_non_permanent(enriched.type_line):
            non_permanents[label] += card.quantity
        else:
            permanents[label] += card.quantity

    return [
        ManaCurveBucket(
            cmc=label,
            permanents=permanents[label],
            non_permanents=non_permanents[label],
        )
        for label in BUCKET_LABELS
    ]
