from dataclasses import dataclass, field

# The five colors of Magic, in WUBRG order
MTG_COLORS: tuple[str, ...] = ("W", "U", "B", "R", "G")

# Colors plus colorless, as counted in mana costs
PIP_COLORS: tuple[str, ...] = (*MTG_COLORS, "C")


@dataclass(frozen=True, slots=True)
class ManaPips:
    """Colored pip counts in a mana cost. Generic mana is not counted."""

    W: int = 0
    U: int = 0
    B: int = 0
    R: int = 0
    G: int = 0
    C: int = 0

    def __getitem__(self, color: str) -> int:
        if color not in PIP_COLORS:
            raise KeyError(color)
        value: int = getattr(self, color)
        return value

    def total(self) -> int:
        """Total colored and colorless pips."""
        return self.W + self.U + self.B + self.R + self.G + self.C


@dataclass(frozen=True, slots=True)
class ColorCounts:
    """One number per color. Counts for distributions, floats for ratios."""

    W: float = 0
    U: float = 0
    B: float = 0
    R: float = 0
    G: float = 0

    def __getitem__(self, color: str) -> float:
        if color not in MTG_COLORS:
            raise KeyError(color)
        value: float = getattr(self, color)
        return value

    def as_dict(self) -> dict[str, float]:
        return {color: self[color] for color in MTG_COLORS}


@dataclass(frozen=True, slots=True)
class ImageUris:
    """Card image URLs at the sizes the UI uses."""

    small: str
    normal: str
    large: str


@dataclass(frozen=True, slots=True)
class EnrichedCard:
    """
    Gameplay-relevant metadata for one card, built from a Scryfall record.

    Attributes:
        name: Canonical Scryfall name
        mana_cost: Cost in brace notation (e.g., "{2}{W}{U}"), "" for lands
        cmc: Converted mana cost
        color_identity: Color identity letters
        colors: Card colors
        type_line: Full type line, " // "-joined for multi-faced cards
        supertypes: Front-face supertypes (Legendary, Basic, ...)
        subtypes: Front-face subtypes
        oracle_text: Rules text (front face for multi-faced cards)
        keywords: Keyword abilities (Flying, Ward, ...)
        power, toughness, loyalty: Printed values, None when absent
        rarity: Scryfall rarity string
        image_uris: Image URLs, None when Scryfall has none
        mana_pips: Colored pip counts derived from mana_cost
        produced_mana: Color letters the card can add
        flavor_name: Alternate in-universe name, None when absent
    """

    name: str
    mana_cost: str = ""
    cmc: float = 0.0
    color_identity: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    type_line: str = ""
    supertypes: list[str] = field(default_factory=list)
    subtypes: list[str] = field(default_factory=list)
    oracle_text: str = ""
    keywords: list[str] = field(default_factory=list)
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    rarity: str = "common"
    image_uris: ImageUris | None = None
    mana_pips: ManaPips = field(default_factory=ManaPips)
    produced_mana: list[str] = field(default_factory=list)
    flavor_name: str | None = None
