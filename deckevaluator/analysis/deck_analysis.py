"""
Whole-deck analysis.

Runs every analysis over one deck and card map in a single call, which is
what the analysis endpoint serves.
"""

from collections.abc import Collection
from dataclasses import dataclass, field

from deckevaluator.analysis.card_tags import generate_tags
from deckevaluator.analysis.color_distribution import (
    compute_color_distribution,
    compute_mana_base_metrics,
    resolve_commander_identity,
)
from deckevaluator.analysis.mana_curve import compute_mana_curve
from deckevaluator.models.analysis import (
    CardMap,
    CardType,
    ColorDistribution,
    ManaBaseMetrics,
    ManaCurveBucket,
)
from deckevaluator.models.card import MTG_COLORS
from deckevaluator.models.deck import DeckData


@dataclass
class DeckAnalysis:
    """Everything computed for a deck."""

    mana_curve: list[ManaCurveBucket]
    color_distribution: ColorDistribution
    mana_base: ManaBaseMetrics
    commander_identity: list[str]
    card_tags: dict[str, list[str]] = field(default_factory=dict)
    missing_cards: list[str] = field(default_factory=list)


def analyze_deck(
    deck: DeckData,
    card_map: CardMap,
    enabled_types: Collection[CardType] | None = None,
) -> DeckAnalysis:
    """
    Analyse a deck against its enriched cards.

    Args:
        deck: Deck to analyse
        card_map: Enriched cards keyed by requested name; may be partial
        enabled_types: Spell types to include in the mana curve

    Returns:
        DeckAnalysis. Tags are listed for every deck card found in
        card_map; names without an entry are reported in missing_cards.
    """
    card_tags: dict[str, list[str]] = {}
    missing: list[str] = []
    for name in deck.card_names():
        enriched = card_map.get(name)
        if enriched is None:
            missing.append(name)
        else:
            card_tags[name] = generate_tags(enriched)

    identity = resolve_commander_identity(deck, card_map)

    return DeckAnalysis(
        mana_curve=compute_mana_curve(deck, card_map, enabled_types),
        color_distribution=compute_color_distribution(deck, card_map),
        mana_base=compute_mana_base_metrics(deck, card_map),
        commander_identity=[c for c in MTG_COLORS if c in identity],
        card_tags=card_tags,
        missing_cards=missing,
    )
