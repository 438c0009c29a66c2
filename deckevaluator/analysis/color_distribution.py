"""
Color distribution and mana base metrics.

Compares how many cards can produce each color (sources) with how many
colored pips the deck's spells ask for (demand).
"""

import math

from deckevaluator.models.analysis import CardMap, ColorDistribution, ManaBaseMetrics
from deckevaluator.models.card import MTG_COLORS, ColorCounts
from deckevaluator.models.deck import DeckData

ALL_FIVE_COLORS = frozenset(MTG_COLORS)

COLORLESS = "C"


def _produces_all_five(produced_mana: list[str]) -> bool:
    return ALL_FIVE_COLORS.issubset(produced_mana)


def resolve_commander_identity(deck: DeckData, card_map: CardMap) -> frozenset[str]:
    """
    Union of the color identities of the deck's commanders.

    Commanders missing from card_map are skipped. Empty if the deck has no
    commanders or none of them resolved.
    """
    identity: set[str] = set()
    for commander in deck.commanders:
        enriched = card_map.get(commander.name)
        if enriched is None:
            continue
        identity.update(c for c in enriched.color_identity if c in ALL_FIVE_COLORS)
    return frozenset(identity)


def compute_color_distribution(deck: DeckData, card_map: CardMap) -> ColorDistribution:
    """
    Count mana sources and pip demand per color.

    Every zone counts. A card that produces all five colors (Command Tower,
    Arcane Signet) only counts toward the commander's colors when the deck
    has a commander with a known identity. Cards producing a fixed subset of
    colors are never re-scoped.

    Args:
        deck: Deck to analyse
        card_map: Enriched cards keyed by requested name; may be partial

    Returns:
        ColorDistribution. Cards missing from card_map contribute nothing.
    """
    sources = dict.fromkeys(MTG_COLORS, 0)
    pips = dict.fromkeys(MTG_COLORS, 0)
    colorless_sources = 0

    commander_identity = resolve_commander_identity(deck, card_map)

    for card in deck.all_cards():
        enriched = card_map.get(card.name)
        if enriched is None:
            continue

        produced = enriched.produced_mana
        if produced:
            effective = produced
            if commander_identity and _produces_all_five(produced):
                effective = [c for c in MTG_COLORS if c in commander_identity]

            produces_color = False
            for color in effective:
                if color in ALL_FIVE_COLORS:
                    sources[color] += card.quantity
                    produces_color = True

            # Colorless-only sources (Sol Ring, Wastes)
            if not produces_color and COLORLESS in produced:
                colorless_sources += card.quantity

        for color in MTG_COLORS:
            pips[color] += enriched.mana_pips[color] * card.quantity

    return ColorDistribution(
        sources=ColorCounts(**sources),
        pips=ColorCounts(**pips),
        colorless_sources=colorless_sources,
    )


def source_to_demand_ratio(sources: float, pips: float) -> float:
    """sources / pips; math.inf when there are sources but no demand, 0 when there are neither."""
    if pips == 0:
        return math.inf if sources > 0 else 0.0
    return sources / pips


def _is_land(type_line: str) -> bool:
    return "Land" in type_line


def compute_mana_base_metrics(deck: DeckData, card_map: CardMap) -> ManaBaseMetrics:
    """
    Compute mana base efficiency metrics for a deck.

    Cards missing from card_map still count toward total_cards but not
    toward land_count or average_cmc.

    Args:
        deck: Deck to analyse
        card_map: Enriched cards keyed by requested name; may be partial

    Returns:
        ManaBaseMetrics. Never NaN: empty decks give 0 percentages and
        averages, and ratios follow source_to_demand_ratio.
    """
    distribution = compute_color_distribution(deck, card_map)

    land_count = 0
    total_cards = 0
    total_cmc = 0.0
    non_land_count = 0

    for card in deck.all_cards():
        total_cards += card.quantity
        enriched = card_map.get(card.name)
        if enriched is None:
            continue

        if _is_land(enriched.type_line):
            land_count += card.quantity
        else:
            total_cmc += enriched.cmc * card.quantity
            non_land_count += card.quantity

    land_percentage = land_count / total_cards * 100 if total_cards > 0 else 0.0
    average_cmc = total_cmc / non_land_count if non_land_count > 0 else 0.0

    ratios = ColorCounts(
        **{
            color: source_to_demand_ratio(distribution.sources[color], distribution.pips[color])
            for color in MTG_COLORS
        }
    )

    return ManaBaseMetrics(
        land_count=land_count,
        total_cards=total_cards,
        land_percentage=land_percentage,
        average_cmc=average_cmc,
        colorless_sources=distribution.colorless_sources,
        source_to_demand_ratio=ratios,
    )
