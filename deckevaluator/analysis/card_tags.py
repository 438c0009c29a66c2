"""
Functional tags for cards.

Assigns gameplay roles (Ramp, Removal, Tutor, ...) by pattern matching oracle
text, keywords and type line. Each tag is an independent rule; every rule is
evaluated for every card. The patterns follow common Oracle templating and
are not exhaustive.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from deckevaluator.models.analysis import CardMap
from deckevaluator.models.card import EnrichedCard

RAMP = "Ramp"
CARD_DRAW = "Card Draw"
REMOVAL = "Removal"
BOARD_WIPE = "Board Wipe"
COUNTERSPELL = "Counterspell"
TUTOR = "Tutor"
PROTECTION = "Protection"
RECURSION = "Recursion"

TAG_NAMES: tuple[str, ...] = (
    BOARD_WIPE,
    CARD_DRAW,
    COUNTERSPELL,
    PROTECTION,
    RAMP,
    RECURSION,
    REMOVAL,
    TUTOR,
)

# Mana symbols are canonically uppercase, so the mana patterns are case-sensitive
BASIC_LAND_PATTERN = re.compile(r"^Basic Land", re.IGNORECASE)
RAMP_TAP_ADD_PATTERN = re.compile(r"\{T\}.*?[Aa]dd\s+\{[WUBRGC]\}")
RAMP_MULTI_MANA_PATTERN = re.compile(r"[Aa]dd\s+\{[WUBRGC]\}.*?\{[WUBRGC]\}")
RAMP_LAND_SEARCH_PATTERN = re.compile(r"[Ss]earch your library for.+(?:basic )?land")

CARD_DRAW_PATTERN = re.compile(r"\bdraw\b.+?\bcards?\b|\bdraw a card\b", re.IGNORECASE)

REMOVAL_TARGET_PATTERN = re.compile(r"\b(?:destroy|exile)\s+target\b", re.IGNORECASE)
REMOVAL_BOUNCE_PATTERN = re.compile(r"\breturn target.+?to its owner's hand\b", re.IGNORECASE)
REMOVAL_DAMAGE_PATTERN = re.compile(r"\bdeals?\s+\d+\s+damage to\b.+?\btarget\b", re.IGNORECASE)

BOARD_WIPE_PATTERN = re.compile(r"\b(?:destroy|exile)\s+all\b", re.IGNORECASE)
BOARD_WIPE_MINUS_PATTERN = re.compile(r"\ball creatures get -\d+/-\d+", re.IGNORECASE)

COUNTER_PATTERN = re.compile(r"\bcounter target\b.+?\bspell\b", re.IGNORECASE)

TUTOR_PATTERN = re.compile(r"\bsearch your library\b", re.IGNORECASE)
TUTOR_LAND_EXCLUSION_PATTERN = re.compile(r"search your library for.+?land\b", re.IGNORECASE)

PROTECTION_KEYWORDS = frozenset({"Hexproof", "Indestructible", "Shroud", "Ward"})
PROTECTION_ORACLE_PATTERN = re.compile(
    r"\bgains?\b.+?\b(?:hexproof|indestructible|protection|shroud)\b", re.IGNORECASE
)

RECURSION_PATTERN = re.compile(r"\breturn\b.+?\bfrom\b.+?\bgraveyard\b", re.IGNORECASE)

# (oracle_text, keywords, type_line) -> matched
TagPredicate = Callable[[str, Sequence[str], str], bool]


@dataclass(frozen=True, slots=True)
class TagRule:
    """
    One tag and the predicate that assigns it.

    Attributes:
        tag: Tag added when the predicate matches
        matches: Pure predicate over (oracle_text, keywords, type_line)
        implies: Further tags added whenever this one is
    """

    tag: str
    matches: TagPredicate
    implies: tuple[str, ...] = ()


def is_ramp(text: str, keywords: Sequence[str], type_line: str) -> bool:
    """Mana abilities and land searches, except on basic lands (their reminder text matches)."""
    if BASIC_LAND_PATTERN.search(type_line):
        return False
    return bool(
        RAMP_TAP_ADD_PATTERN.search(text)
        or RAMP_MULTI_MANA_PATTERN.search(text)
        or RAMP_LAND_SEARCH_PATTERN.search(text)
    )


def is_card_draw(text: str, keywords: Sequence[str], type_line: str) -> bool:
    return bool(CARD_DRAW_PATTERN.search(text))


def is_board_wipe(text: str, keywords: Sequence[str], type_line: str) -> bool:
    return bool(BOARD_WIPE_PATTERN.search(text) or BOARD_WIPE_MINUS_PATTERN.search(text))


def is_removal(text: str, keywords: Sequence[str], type_line: str) -> bool:
    """Single-target removal: destroy/exile, bounce, or damage."""
    return bool(
        REMOVAL_TARGET_PATTERN.search(text)
        or REMOVAL_BOUNCE_PATTERN.search(text)
        or REMOVAL_DAMAGE_PATTERN.search(text)
    )


def is_counterspell(text: str, keywords: Sequence[str], type_line: str) -> bool:
    return bool(COUNTER_PATTERN.search(text))


def is_tutor(text: str, keywords: Sequence[str], type_line: str) -> bool:
    """Library searches, unless the search is for a land (that is Ramp)."""
    if TUTOR_LAND_EXCLUSION_PATTERN.search(text):
        return False
    return bool(TUTOR_PATTERN.search(text))


def is_protection(text: str, keywords: Sequence[str], type_line: str) -> bool:
    if any(keyword in PROTECTION_KEYWORDS for keyword in keywords):
        return True
    return bool(PROTECTION_ORACLE_PATTERN.search(text))


def is_recursion(text: str, keywords: Sequence[str], type_line: str) -> bool:
    return bool(RECURSION_PATTERN.search(text))


TAG_RULES: tuple[TagRule, ...] = (
    TagRule(RAMP, is_ramp),
    TagRule(CARD_DRAW, is_card_draw),
    # A board wipe is also removal
    TagRule(BOARD_WIPE, is_board_wipe, implies=(REMOVAL,)),
    TagRule(REMOVAL, is_removal),
    TagRule(COUNTERSPELL, is_counterspell),
    TagRule(TUTOR, is_tutor),
    TagRule(PROTECTION, is_protection),
    TagRule(RECURSION, is_recursion),
)


def generate_tags(card: EnrichedCard, rules: Sequence[TagRule] = TAG_RULES) -> list[str]:
    """
    Tag a card with its gameplay roles.

    Args:
        card: Enriched card to classify
        rules: Rules to apply, TAG_RULES by default

    Returns:
        Sorted, de-duplicated tag names. Empty if nothing matched.

    Example:
        "Destroy all creatures." -> ["Board Wipe", "Removal"]
    """
    text = card.oracle_text or ""
    keywords = card.keywords or []
    type_line = card.type_line or ""

    tags: set[str] = set()
    for rule in rules:
        if rule.matches(text, keywords, type_line):
            tags.add(rule.tag)
            tags.update(rule.implies)

    return sorted(tags)


def tag_cards(card_map: CardMap) -> dict[str, list[str]]:
    """Tags for every card in a card map, keyed the same way."""
    return {name: generate_tags(card) for name, card in card_map.items()}
