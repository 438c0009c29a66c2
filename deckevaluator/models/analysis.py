from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from deckevaluator.models.card import ColorCounts, EnrichedCard

# Enriched cards keyed by the name the caller originally requested
CardMap = Mapping[str, EnrichedCard]


class CardType(str, Enum):
    """Spell types used for mana curve classification."""

    CREATURE = "Creature"
    INSTANT = "Instant"
    SORCERY = "Sorcery"
    ARTIFACT = "Artifact"
    ENCHANTMENT = "Enchantment"
    PLANESWALKER = "Planeswalker"
    BATTLE = "Battle"


# Classification priority: the first type contained in a type line wins
CARD_TYPES: tuple[CardType, ...] = tuple(CardType)


@dataclass(frozen=True, slots=True)
class ManaCurveBucket:
    """Card counts at one mana value."""

    cmc: str  # "0" .. "6" or "7+"
    permanents: int = 0
    non_permanents: int = 0

    @property
    def total(self) -> int:
        return self.permanents + self.non_permanents


@dataclass(frozen=True, slots=True)
class ColorDistribution:
    """
    Mana supply and demand per color.

    Attributes:
        sources: Copies of cards that can produce each color
        pips: Colored pips across all mana costs, times quantity
        colorless_sources: Copies of cards that only produce colorless mana
    """

    sources: ColorCounts = field(default_factory=ColorCounts)
    pips: ColorCounts = field(default_factory=ColorCounts)
    colorless_sources: int = 0


@dataclass(frozen=True, slots=True)
class ManaBaseMetrics:
    """
    Mana base efficiency figures for a deck.

    Attributes:
        land_count: Copies of cards whose type line contains "Land"
        total_cards: Copies across all zones, including unresolved cards
        land_percentage: land_count / total_cards * 100, 0 for an empty deck
        average_cmc: Mean mana value of resolved non-land copies
        colorless_sources: Passed through from ColorDistribution
        source_to_demand_ratio: sources / pips per color; math.inf when a
            color has sources but no demand, 0 when it has neither
    """

    land_count: int
    total_cards: int
    land_percentage: float
    average_cmc: float
    colorless_sources: int
    source_to_demand_ratio: ColorCounts
