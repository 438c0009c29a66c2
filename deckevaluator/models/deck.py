from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

DeckSource = Literal["moxfield", "archidekt", "text"]


@dataclass(frozen=True, slots=True)
class DeckCard:
    """
    One decklist entry.

    Attributes:
        name: Card name exactly as it appeared in the source
        quantity: Number of copies (positive)
    """

    name: str
    quantity: int


@dataclass
class DeckData:
    """
    A deck split into its three zones.

    Attributes:
        name: Deck name ("Imported Decklist" for pasted text)
        source: Where the deck came from (moxfield, archidekt, text)
        url: Deck URL on the hosting service, empty for pasted text
        commanders: Commander zone entries
        mainboard: Main deck entries
        sideboard: Sideboard entries (includes companions)

    Zones may contain several entries with the same name; consumers sum them.
    """

    name: str
    source: DeckSource
    url: str = ""
    commanders: list[DeckCard] = field(default_factory=list)
    mainboard: list[DeckCard] = field(default_factory=list)
    sideboard: list[DeckCard] = field(default_factory=list)

    def all_cards(self) -> Iterator[DeckCard]:
        """Every entry across commanders, mainboard and sideboard, in that order."""
        yield from self.commanders
        yield from self.mainboard
        yield from self.sideboard

    def card_names(self) -> list[str]:
        """Distinct card names in first-seen order."""
        return list(dict.fromkeys(card.name for card in self.all_cards()))

    def entry_count(self) -> int:
        """Number of entries (not copies) across all zones."""
        return len(self.commanders) + len(self.mainboard) + len(self.sideboard)
