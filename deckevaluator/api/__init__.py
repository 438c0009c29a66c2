from deckevaluator.api.analysis import router as analysis_router
from deckevaluator.api.cards import router as cards_router
from deckevaluator.api.decks import router as decks_router
from deckevaluator.api.health import router as health_router

__all__ = [
    "analysis_router",
    "cards_router",
    "decks_router",
    "health_router",
]
