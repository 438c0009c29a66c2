from collections.abc import Callable
from dataclasses import replace
from typing import Any

import pytest

from deckevaluator.models.card import EnrichedCard
from deckevaluator.models.deck import DeckCard, DeckData

CardFactory = Callable[..., EnrichedCard]


@pytest.fixture
def make_card() -> CardFactory:
    """Factory for EnrichedCards with blank defaults; override any field by keyword."""

    def _make(**overrides: Any) -> EnrichedCard:
        base = EnrichedCard(name="Test Card", type_line="Creature")
        return replace(base, **overrides)

    return _make


@pytest.fixture
def sample_decklist() -> str:
    """Commander decklist with a blank line between sections."""
    return """COMMANDER:
1 Atraxa, Praetors' Voice

MAINBOARD:
1 Sol Ring
1 Command Tower
1 Arcane Signet
1 Swords to Plowshares
1 Counterspell"""


@pytest.fixture
def empty_deck() -> DeckData:
    return DeckData(name="Test Deck", source="text")


@pytest.fixture
def make_deck() -> Callable[..., DeckData]:
    """Factory for text-sourced decks built from (name, quantity) pairs."""

    def zone(entries: list[tuple[str, int]] | None) -> list[DeckCard]:
        return [DeckCard(name=name, quantity=qty) for name, qty in entries or []]

    def _make(
        mainboard: list[tuple[str, int]] | None = None,
        commanders: list[tuple[str, int]] | None = None,
        sideboard: list[tuple[str, int]] | None = None,
    ) -> DeckData:
        return DeckData(
            name="Test Deck",
            source="text",
            commanders=zone(commanders),
            mainboard=zone(mainboard),
            sideboard=zone(sideboard),
        )

    return _make
