"""
Parser for pasted decklist text.

Decklist format:
    <quantity>[x] <card name>

Example:
    COMMANDER:
    1 Atraxa, Praetors' Voice

    MAINBOARD:
    1 Sol Ring
    1x Command Tower

Zone headers (Commander, Mainboard, Sideboard, Companion) switch the zone
for every following line until the next header. Blank lines do not reset
the zone.
"""

import re
from types import MappingProxyType
from typing import Literal

from deckevaluator.models.deck import DeckCard, DeckData

Zone = Literal["commanders", "mainboard", "sideboard"]

IMPORTED_DECK_NAME = "Imported Decklist"

# Pattern: "4 Lightning Bolt" or "4x Lightning Bolt"
# Groups: (quantity, card_name)
# ASCII digits only; the name stops at any line or paragraph separator
CARD_LINE_PATTERN = re.compile(r"^([0-9]+)x?\s+([^\n\r\u2028\u2029]+)$")

# Pattern: "Commander", "SIDEBOARD:", "companion:" alone on a line
ZONE_LINE_PATTERN = re.compile(r"^(commander|sideboard|mainboard|companion):?\s*$", re.IGNORECASE)

# Companions live in the sideboard
ZONE_HEADERS: MappingProxyType[str, Zone] = MappingProxyType(
    {
        "commander": "commanders",
        "sideboard": "sideboard",
        "mainboard": "mainboard",
        "companion": "sideboard",
    }
)

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")


def parse_decklist(text: str) -> DeckData:
    """
    Parse pasted decklist text into a zoned deck.

    Args:
        text: Raw decklist text (clipboard paste)

    Returns:
        DeckData with source "text". Zones are empty if nothing parsed.

    Handles:
        - "4 Card Name" and "4x Card Name"
        - Zone headers with or without a trailing colon, any case
        - Blank lines (skipped, zone kept)
        - Split cards: "1 Fire // Ice"

    Unrecognised lines are skipped silently and repeated names are kept as
    separate entries.
    """
    zones: dict[Zone, list[DeckCard]] = {
        "commanders": [],
        "mainboard": [],
        "sideboard": [],
    }
    current_zone: Zone = "mainboard"

    for raw_line in LINE_SPLIT_PATTERN.split(text or ""):
        line = raw_line.strip()

        # Skip empty lines
        if not line:
            continue

        zone_match = ZONE_LINE_PATTERN.match(line)
        if zone_match:
            current_zone = ZONE_HEADERS[zone_match.group(1).lower()]
            continue

        card_match = CARD_LINE_PATTERN.match(line)
        if card_match:
            quantity, name = card_match.groups()
            zones[current_zone].append(DeckCard(name=name.strip(), quantity=int(quantity)))
        # Anything else (comments, "Deck", stray text) is ignored

    return DeckData(
        name=IMPORTED_DECK_NAME,
        source="text",
        url="",
        commanders=zones["commanders"],
        mainboard=zones["mainboard"],
        sideboard=zones["sideboard"],
    )
