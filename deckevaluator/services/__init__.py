from deckevaluator.services.archidekt import (
    extract_archidekt_deck_id,
    import_archidekt_deck,
    is_archidekt_url,
    normalize_archidekt_cards,
)
from deckevaluator.services.deck_import import import_deck_from_url
from deckevaluator.services.moxfield import (
    extract_moxfield_deck_id,
    import_moxfield_deck,
    is_moxfield_url,
    normalize_moxfield_section,
)
from deckevaluator.services.scryfall import (
    CollectionResult,
    enrich_card_names,
    fetch_card_collection,
    map_to_requested_names,
    normalize_card,
)

__all__ = [
    "CollectionResult",
    "enrich_card_names",
    "extract_archidekt_deck_id",
    "extract_moxfield_deck_id",
    "fetch_card_collection",
    "import_archidekt_deck",
    "import_deck_from_url",
    "import_moxfield_deck",
    "is_archidekt_url",
    "is_moxfield_url",
    "map_to_requested_names",
    "normalize_archidekt_cards",
    "normalize_card",
    "normalize_moxfield_section",
]
