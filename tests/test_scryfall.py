"""Tests for Scryfall card lookup and normalization."""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
import respx

from deckevaluator.config import settings
from deckevaluator.models.card import ImageUris, ManaPips
from deckevaluator.models.errors import ScryfallError
from deckevaluator.services.scryfall import (
    enrich_card_names,
    fetch_card_collection,
    map_to_requested_names,
    normalize_card,
)

COLLECTION_URL = f"{settings.scryfall_api_url}/cards/collection"


@pytest.fixture
def scryfall_cards() -> dict[str, dict[str, Any]]:
    """Sample Scryfall card records keyed by canonical name."""
    path = Path(__file__).parent / "fixtures" / "scryfall_cards.json"
    cards = json.loads(path.read_text(encoding="utf-8"))
    return {card["name"]: card for card in cards}


@pytest.fixture(autouse=True)
def no_request_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "scryfall_request_delay", 0.0)


def _requested_names(request: httpx.Request) -> list[str]:
    body = json.loads(request.content)
    return [identifier["name"] for identifier in body["identifiers"]]


class TestNormalizeCard:
    def test_single_faced_card(self, scryfall_cards: dict) -> None:
        card = normalize_card(scryfall_cards["Sol Ring"])

        assert card.name == "Sol Ring"
        assert card.mana_cost == "{1}"
        assert card.cmc == 1.0
        assert card.type_line == "Artifact"
        assert card.oracle_text == "{T}: Add {C}{C}."
        assert card.produced_mana == ["C"]
        assert card.rarity == "uncommon"
        assert card.mana_pips == ManaPips()
        assert card.image_uris == ImageUris(
            small="https://cards.scryfall.io/small/front/sol-ring.jpg",
            normal="https://cards.scryfall.io/normal/front/sol-ring.jpg",
            large="https://cards.scryfall.io/large/front/sol-ring.jpg",
        )

    def test_double_faced_card_uses_front_face(self, scryfall_cards: dict) -> None:
        """Cost, text and images fall back to the first face."""
        card = normalize_card(scryfall_cards["Delver of Secrets // Insectile Aberration"])

        assert card.mana_cost == "{U}"
        assert card.mana_pips == ManaPips(U=1)
        assert card.oracle_text.startswith("At the beginning of your upkeep")
        assert card.image_uris is not None
        assert card.image_uris.normal.endswith("/front/delver.jpg")
        assert card.type_line == "Creature — Human Wizard // Creature — Human Insect"
        assert card.subtypes == ["Human", "Wizard"]
        # Colors live on the faces only
        assert card.colors == []

    def test_split_card_keeps_top_level_cost(self, scryfall_cards: dict) -> None:
        card = normalize_card(scryfall_cards["Fire // Ice"])

        assert card.mana_cost == "{1}{R} // {1}{U}"
        assert card.mana_pips == ManaPips(R=1, U=1)
        # No top-level oracle text, so the first half's is used
        assert card.oracle_text.startswith("Fire deals 2 damage")

    def test_planeswalker_fields(self, scryfall_cards: dict) -> None:
        card = normalize_card(scryfall_cards["Jace, the Mind Sculptor"])

        assert card.supertypes == ["Legendary"]
        assert card.subtypes == ["Jace"]
        assert card.loyalty == "3"
        assert card.power is None
        assert card.toughness is None
        assert card.image_uris is None
        assert card.produced_mana == []
        assert card.mana_pips == ManaPips(U=2)

    def test_basic_land(self, scryfall_cards: dict) -> None:
        card = normalize_card(scryfall_cards["Forest"])

        assert card.supertypes == ["Basic"]
        assert card.subtypes == ["Forest"]
        assert card.mana_cost == ""
        assert card.flavor_name == "Grove of the Ancients"

    def test_minimal_record(self) -> None:
        card = normalize_card({"name": "Mystery"})

        assert card.name == "Mystery"
        assert card.mana_cost == ""
        assert card.cmc == 0.0
        assert card.type_line == ""
        assert card.keywords == []
        assert card.color_identity == []
        assert card.rarity == "common"
        assert card.flavor_name is None
        assert card.mana_pips == ManaPips()


class TestMapToRequestedNames:
    def test_case_insensitive_match(self, scryfall_cards: dict) -> None:
        card_map = map_to_requested_names(["sol ring"], [scryfall_cards["Sol Ring"]])

        assert list(card_map) == ["sol ring"]
        assert card_map["sol ring"].name == "Sol Ring"

    def test_front_face_match(self, scryfall_cards: dict) -> None:
        raw = scryfall_cards["Delver of Secrets // Insectile Aberration"]

        card_map = map_to_requested_names(["Delver of Secrets"], [raw])

        assert card_map["Delver of Secrets"].name == "Delver of Secrets // Insectile Aberration"

    def test_full_split_name_match(self, scryfall_cards: dict) -> None:
        card_map = map_to_requested_names(["Fire // Ice"], [scryfall_cards["Fire // Ice"]])

        assert "Fire // Ice" in card_map

    def test_unmatched_card_keeps_canonical_name(self, scryfall_cards: dict) -> None:
        card_map = map_to_requested_names(["Something Else"], [scryfall_cards["Forest"]])

        assert list(card_map) == ["Forest"]


class TestFetchCardCollection:
    @respx.mock
    async def test_empty_names_make_no_request(self) -> None:
        """No route is mocked, so any request would fail the test."""
        result = await fetch_card_collection([])

        assert result.cards == []
        assert result.not_found == []

    @respx.mock
    async def test_fetches_cards_and_not_found(self, scryfall_cards: dict) -> None:
        route = respx.post(COLLECTION_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "object": "list",
                    "not_found": [{"name": "Not A Real Card"}],
                    "data": [scryfall_cards["Sol Ring"]],
                },
            )
        )

        result = await fetch_card_collection(["Sol Ring", "Not A Real Card"])

        assert [card["name"] for card in result.cards] == ["Sol Ring"]
        assert result.not_found == ["Not A Real Card"]
        assert _requested_names(route.calls[0].request) == ["Sol Ring", "Not A Real Card"]
        assert route.calls[0].request.headers["User-Agent"] == settings.user_agent

    @respx.mock
    async def test_batches_large_requests(self) -> None:
        names = [f"Card {i}" for i in range(settings.scryfall_batch_size + 5)]
        route = respx.post(COLLECTION_URL).mock(
            side_effect=[
                httpx.Response(200, json={"data": [{"name": "Card 0"}], "not_found": []}),
                httpx.Response(200, json={"data": [{"name": "Card 75"}], "not_found": []}),
            ]
        )

        result = await fetch_card_collection(names)

        assert route.call_count == 2
        assert len(_requested_names(route.calls[0].request)) == settings.scryfall_batch_size
        assert len(_requested_names(route.calls[1].request)) == 5
        assert [card["name"] for card in result.cards] == ["Card 0", "Card 75"]

    @respx.mock
    async def test_raises_on_http_error(self) -> None:
        """HTTP errors are wrapped in ScryfallError."""
        respx.post(COLLECTION_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(ScryfallError, match="HTTP 503") as exc_info:
            await fetch_card_collection(["Sol Ring"])

        assert exc_info.value.status_code == 503

    @respx.mock
    async def test_raises_on_connection_error(self) -> None:
        respx.post(COLLECTION_URL).mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(ScryfallError, match="request failed"):
            await fetch_card_collection(["Sol Ring"])

    @respx.mock
    async def test_raises_on_non_json_body(self) -> None:
        respx.post(COLLECTION_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ScryfallError, match="invalid JSON"):
            await fetch_card_collection(["Sol Ring"])

    @respx.mock
    async def test_uses_provided_client(self, scryfall_cards: dict) -> None:
        respx.post(COLLECTION_URL).mock(
            return_value=httpx.Response(200, json={"data": [scryfall_cards["Forest"]], "not_found": []})
        )

        async with httpx.AsyncClient() as client:
            result = await fetch_card_collection(["Forest"], client=client)
            # Caller's client stays open
            assert not client.is_closed

        assert len(result.cards) == 1


class TestEnrichCardNames:
    @respx.mock
    async def test_returns_card_map_and_not_found(self, scryfall_cards: dict) -> None:
        respx.post(COLLECTION_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": [
                        scryfall_cards["Sol Ring"],
                        scryfall_cards["Delver of Secrets // Insectile Aberration"],
                    ],
                    "not_found": [{"name": "Fake Card"}],
                },
            )
        )

        card_map, not_found = await enrich_card_names(["sol ring", "Delver of Secrets", "Fake Card"])

        assert set(card_map) == {"sol ring", "Delver of Secrets"}
        assert card_map["Delver of Secrets"].mana_pips == ManaPips(U=1)
        assert not_found == ["Fake Card"]
