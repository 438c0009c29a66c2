import math

import pytest

from deckevaluator.analysis.color_distribution import (
    compute_color_distribution,
    compute_mana_base_metrics,
    resolve_commander_identity,
    source_to_demand_ratio,
)
from deckevaluator.models.card import ColorCounts, ManaPips

FIVE_COLORS = ["W", "U", "B", "R", "G"]


@pytest.fixture
def azorius_cards(make_card):
    """Cards for a W/U commander deck, keyed by name."""
    return {
        "Raffine, Scheming Seer": make_card(
            name="Raffine, Scheming Seer",
            type_line="Legendary Creature — Sphinx Demon",
            color_identity=["W", "U", "B"],
            mana_cost="{1}{W}{U}{B}",
            cmc=4,
            mana_pips=ManaPips(W=1, U=1, B=1),
        ),
        "Brago, King Eternal": make_card(
            name="Brago, King Eternal",
            type_line="Legendary Creature — Spirit",
            color_identity=["W", "U"],
            mana_cost="{2}{W}{U}",
            cmc=4,
            mana_pips=ManaPips(W=1, U=1),
        ),
        "Command Tower": make_card(name="Command Tower", type_line="Land", produced_mana=FIVE_COLORS),
        "Plains": make_card(name="Plains", type_line="Basic Land — Plains", produced_mana=["W"]),
        "Island": make_card(name="Island", type_line="Basic Land — Island", produced_mana=["U"]),
        "Hallowed Fountain": make_card(
            name="Hallowed Fountain",
            type_line="Land — Plains Island",
            produced_mana=["W", "U"],
        ),
        "Watery Grave": make_card(
            name="Watery Grave",
            type_line="Land — Island Swamp",
            produced_mana=["U", "B"],
        ),
        "Sol Ring": make_card(name="Sol Ring", type_line="Artifact", cmc=1, mana_cost="{1}", produced_mana=["C"]),
        "Counterspell": make_card(
            name="Counterspell",
            type_line="Instant",
            cmc=2,
            mana_cost="{U}{U}",
            mana_pips=ManaPips(U=2),
        ),
    }


class TestResolveCommanderIdentity:
    def test_union_of_commanders(self, azorius_cards, make_deck) -> None:
        deck = make_deck(commanders=[("Brago, King Eternal", 1), ("Raffine, Scheming Seer", 1)])

        assert resolve_commander_identity(deck, azorius_cards) == frozenset({"W", "U", "B"})

    def test_no_commander(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Brago, King Eternal", 1)])

        assert resolve_commander_identity(deck, azorius_cards) == frozenset()

    def test_unresolved_commander_is_skipped(self, azorius_cards, make_deck) -> None:
        deck = make_deck(commanders=[("Unknown Legend", 1)])

        assert resolve_commander_identity(deck, azorius_cards) == frozenset()


class TestComputeColorDistribution:
    def test_basic_and_dual_sources(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Plains", 10), ("Island", 8), ("Hallowed Fountain", 1)])

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.sources == ColorCounts(W=11, U=9)
        assert distribution.colorless_sources == 0

    def test_five_color_source_scoped_to_commander(self, azorius_cards, make_deck) -> None:
        deck = make_deck(
            commanders=[("Brago, King Eternal", 1)],
            mainboard=[("Command Tower", 1)],
        )

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.sources == ColorCounts(W=1, U=1)

    def test_five_color_source_without_commander_counts_everything(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Command Tower", 1)])

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.sources == ColorCounts(W=1, U=1, B=1, R=1, G=1)

    def test_five_color_source_with_unresolved_commander(self, azorius_cards, make_deck) -> None:
        deck = make_deck(commanders=[("Unknown Legend", 1)], mainboard=[("Command Tower", 1)])

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.sources == ColorCounts(W=1, U=1, B=1, R=1, G=1)

    def test_fixed_subset_sources_not_rescoped(self, azorius_cards, make_deck) -> None:
        deck = make_deck(commanders=[("Brago, King Eternal", 1)], mainboard=[("Watery Grave", 1)])

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.sources == ColorCounts(U=1, B=1)

    def test_colorless_sources(self, azorius_cards, make_deck, make_card) -> None:
        card_map = {
            **azorius_cards,
            "Adarkar Wastes": make_card(type_line="Land", produced_mana=["C", "W", "U"]),
        }
        deck = make_deck(mainboard=[("Sol Ring", 2), ("Adarkar Wastes", 1)])

        distribution = compute_color_distribution(deck, card_map)

        assert distribution.colorless_sources == 2
        assert distribution.sources == ColorCounts(W=1, U=1)

    def test_pips_from_every_zone(self, azorius_cards, make_deck) -> None:
        deck = make_deck(
            commanders=[("Brago, King Eternal", 1)],
            mainboard=[("Counterspell", 3)],
            sideboard=[("Raffine, Scheming Seer", 1)],
        )

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.pips == ColorCounts(W=2, U=8, B=1)

    def test_hybrid_pips_count_toward_both_colors(self, make_card, make_deck) -> None:
        card_map = {"Kitchen Finks": make_card(type_line="Creature — Ouphe", mana_pips=ManaPips(G=2, W=2))}
        deck = make_deck(mainboard=[("Kitchen Finks", 2)])

        distribution = compute_color_distribution(deck, card_map)

        assert distribution.pips == ColorCounts(W=4, G=4)

    def test_missing_cards_contribute_nothing(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Not A Real Card", 4), ("Island", 1)])

        distribution = compute_color_distribution(deck, azorius_cards)

        assert distribution.sources == ColorCounts(U=1)
        assert distribution.pips == ColorCounts()

    def test_empty_deck(self, empty_deck) -> None:
        distribution = compute_color_distribution(empty_deck, {})

        assert distribution.sources == ColorCounts()
        assert distribution.pips == ColorCounts()
        assert distribution.colorless_sources == 0


class TestSourceToDemandRatio:
    def test_regular_ratio(self) -> None:
        assert source_to_demand_ratio(10, 4) == 2.5

    def test_sources_without_demand_is_infinite(self) -> None:
        assert source_to_demand_ratio(3, 0) == math.inf

    def test_no_sources_no_demand_is_zero(self) -> None:
        assert source_to_demand_ratio(0, 0) == 0.0

    def test_demand_without_sources_is_zero(self) -> None:
        assert source_to_demand_ratio(0, 5) == 0.0


class TestComputeManaBaseMetrics:
    def test_land_percentage_and_average_cmc(self, azorius_cards, make_deck) -> None:
        deck = make_deck(
            commanders=[("Brago, King Eternal", 1)],
            mainboard=[("Island", 4), ("Counterspell", 2), ("Sol Ring", 1)],
        )

        metrics = compute_mana_base_metrics(deck, azorius_cards)

        assert metrics.land_count == 4
        assert metrics.total_cards == 8
        assert metrics.land_percentage == 50.0
        # (4 + 2 * 2 + 1) / 4 non-land copies
        assert metrics.average_cmc == pytest.approx(2.25)

    def test_ratios(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Island", 4), ("Plains", 2), ("Counterspell", 1)])

        metrics = compute_mana_base_metrics(deck, azorius_cards)

        assert metrics.source_to_demand_ratio.U == 2.0
        assert metrics.source_to_demand_ratio.W == math.inf
        assert metrics.source_to_demand_ratio.B == 0.0

    def test_colorless_sources_passed_through(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Sol Ring", 1)])

        metrics = compute_mana_base_metrics(deck, azorius_cards)

        assert metrics.colorless_sources == 1

    def test_missing_cards_count_toward_total_only(self, azorius_cards, make_deck) -> None:
        deck = make_deck(mainboard=[("Island", 1), ("Not A Real Card", 3)])

        metrics = compute_mana_base_metrics(deck, azorius_cards)

        assert metrics.total_cards == 4
        assert metrics.land_count == 1
        assert metrics.land_percentage == 25.0
        assert metrics.average_cmc == 0.0

    def test_empty_deck_has_no_nan(self, empty_deck) -> None:
        metrics = compute_mana_base_metrics(empty_deck, {})

        assert metrics.land_count == 0
        assert metrics.total_cards == 0
        assert metrics.land_percentage == 0.0
        assert metrics.average_cmc == 0.0
        assert metrics.source_to_demand_ratio == ColorCounts()
        assert not any(math.isnan(v) for v in metrics.source_to_demand_ratio.as_dict().values())
