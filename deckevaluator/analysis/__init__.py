from deckevaluator.analysis.card_tags import TAG_NAMES, TAG_RULES, TagRule, generate_tags, tag_cards
from deckevaluator.analysis.color_distribution import (
    compute_color_distribution,
    compute_mana_base_metrics,
    resolve_commander_identity,
)
from deckevaluator.analysis.deck_analysis import DeckAnalysis, analyze_deck
from deckevaluator.analysis.mana_curve import (
    BUCKET_LABELS,
    compute_mana_curve,
    extract_card_type,
    is_non_permanent,
)

__all__ = [
    "BUCKET_LABELS",
    "DeckAnalysis",
    "TAG_NAMES",
    "TAG_RULES",
    "TagRule",
    "analyze_deck",
    "compute_color_distribution",
    "compute_mana_base_metrics",
    "compute_mana_curve",
    "extract_card_type",
    "generate_tags",
    "is_non_permanent",
    "resolve_commander_identity",
    "tag_cards",
]
