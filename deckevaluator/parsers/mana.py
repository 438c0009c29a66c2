"""
Parsers for Scryfall mana cost and type line strings.

Mana cost format (brace notation):
    {2}{W}{U}       generic + single-color pips
    {W/U}           hybrid pip, counts toward both colors
    {B/P}           Phyrexian pip, counts toward its color

Type line format:
    [Supertypes] <Card Type(s)> [— Subtypes] [// <back face>]
"""

import re
from dataclasses import dataclass, field

from deckevaluator.models.card import PIP_COLORS, ManaPips
from deckevaluator.parsers.faces import front_face

# Any braced symbol; the interior is classified separately
MANA_SYMBOL_PATTERN = re.compile(r"\{([^}]*)\}")

# {W}, {C}, or Phyrexian {W/P} (and the {W/H} half-mana variant)
SINGLE_PIP_PATTERN = re.compile(r"^([WUBRGC])(?:/[PH])?$")

# {W/U}: two colors, both counted in full
HYBRID_PIP_PATTERN = re.compile(r"^([WUBRG])/([WUBRG])$")

SUPERTYPES = frozenset({"Legendary", "Basic", "Snow", "World", "Ongoing", "Host"})

# Em dash between card types and subtypes
SUBTYPE_SEPARATOR = "—"


@dataclass(frozen=True, slots=True)
class TypeLineParts:
    """A front-face type line split into its three parts."""

    supertypes: list[str] = field(default_factory=list)
    card_type: str = ""
    subtypes: list[str] = field(default_factory=list)


def parse_mana_pips(mana_cost: str | None) -> ManaPips:
    """
    Count colored pips in a mana cost.

    Args:
        mana_cost: Cost string such as "{2}{W/U}{B/P}". None or "" allowed.

    Returns:
        ManaPips with one count per color. Generic, X and unknown symbols
        add nothing; hybrid pips add one to each of their colors.
    """
    if not mana_cost:
        return ManaPips()

    counts = dict.fromkeys(PIP_COLORS, 0)

    for match in MANA_SYMBOL_PATTERN.finditer(mana_cost):
        symbol = match.group(1)

        hybrid = HYBRID_PIP_PATTERN.match(symbol)
        if hybrid:
            counts[hybrid.group(1)] += 1
            counts[hybrid.group(2)] += 1
            continue

        single = SINGLE_PIP_PATTERN.match(symbol)
        if single:
            counts[single.group(1)] += 1

    return ManaPips(**counts)


def parse_type_line(type_line: str | None) -> TypeLineParts:
    """
    Split a type line into supertypes, card type and subtypes.

    Only the front face of a multi-faced type line is parsed. Words that are
    not recognised supertypes are joined into card_type, so compound types
    such as "Artifact Creature" or "Kindred Instant" survive intact.

    Args:
        type_line: e.g. "Legendary Artifact Creature — Phyrexian Angel Horror"

    Returns:
        TypeLineParts(supertypes=["Legendary"], card_type="Artifact Creature",
        subtypes=["Phyrexian", "Angel", "Horror"])
    """
    face = front_face(type_line)
    types_part, _, subtypes_part = face.partition(SUBTYPE_SEPARATOR)

    supertypes: list[str] = []
    card_type_words: list[str] = []
    for word in types_part.split():
        if word in SUPERTYPES:
            supertypes.append(word)
        else:
            card_type_words.append(word)

    return TypeLineParts(
        supertypes=supertypes,
        card_type=" ".join(card_type_words),
        subtypes=subtypes_part.split(),
    )
