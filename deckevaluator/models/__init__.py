from deckevaluator.models.analysis import (
    CARD_TYPES,
    CardMap,
    CardType,
    ColorDistribution,
    ManaBaseMetrics,
    ManaCurveBucket,
)
from deckevaluator.models.card import (
    MTG_COLORS,
    PIP_COLORS,
    ColorCounts,
    EnrichedCard,
    ImageUris,
    ManaPips,
)
from deckevaluator.models.deck import DeckCard, DeckData, DeckSource
from deckevaluator.models.errors import (
    DeckFetchError,
    DeckServiceError,
    ScryfallError,
    UnsupportedDeckUrlError,
)

__all__ = [
    "CARD_TYPES",
    "CardMap",
    "CardType",
    "ColorCounts",
    "ColorDistribution",
    "DeckCard",
    "DeckData",
    "DeckFetchError",
    "DeckServiceError",
    "DeckSource",
    "EnrichedCard",
    "ImageUris",
    "MTG_COLORS",
    "ManaBaseMetrics",
    "ManaCurveBucket",
    "ManaPips",
    "PIP_COLORS",
    "ScryfallError",
    "UnsupportedDeckUrlError",
]
