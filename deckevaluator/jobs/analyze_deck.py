"""
Analyse a deck from the command line.

Reads a decklist file (or an Archidekt/Moxfield URL), enriches its cards
from Scryfall and prints the full analysis as JSON.

Usage:
    python -m deckevaluator.jobs.analyze_deck --decklist deck.txt
    python -m deckevaluator.jobs.analyze_deck --url https://archidekt.com/decks/123
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from deckevaluator.analysis.deck_analysis import DeckAnalysis, analyze_deck
from deckevaluator.api.schemas import DeckAnalysisResponse
from deckevaluator.models.deck import DeckData
from deckevaluator.models.errors import DeckServiceError, UnsupportedDeckUrlError
from deckevaluator.parsers.decklist import parse_decklist
from deckevaluator.services.deck_import import import_deck_from_url
from deckevaluator.services.scryfall import enrich_card_names

logger = logging.getLogger(__name__)


async def load_deck(decklist: Path | None = None, url: str | None = None) -> DeckData:
    """Load a deck from a decklist file or a deck URL (exactly one must be given)."""
    if decklist is not None:
        return parse_decklist(decklist.read_text(encoding="utf-8"))
    if url is not None:
        return await import_deck_from_url(url)
    raise ValueError("Either decklist or url is required")


async def run_analysis(deck: DeckData) -> DeckAnalysis:
    """Enrich every card in the deck and analyse it."""
    names = deck.card_names()
    logger.info("Enriching %d unique cards from %s", len(names), deck.name)

    card_map, not_found = await enrich_card_names(names)
    if not_found:
        logger.warning("Scryfall could not find %d cards: %s", len(not_found), ", ".join(not_found))

    return analyze_deck(deck, card_map)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Analyse a Magic: The Gathering deck")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--decklist",
        type=Path,
        help="Path to a decklist text file",
    )
    source.add_argument(
        "--url",
        help="Archidekt or Moxfield deck URL",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.decklist is not None and not args.decklist.exists():
        print(f"Error: Decklist file not found: {args.decklist}")
        sys.exit(1)

    async def _run() -> DeckAnalysis:
        deck = await load_deck(decklist=args.decklist, url=args.url)
        return await run_analysis(deck)

    try:
        analysis = asyncio.run(_run())
    except DeckServiceError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    except UnsupportedDeckUrlError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(DeckAnalysisResponse.from_domain(analysis).model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    main()
