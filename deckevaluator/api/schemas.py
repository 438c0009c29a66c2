"""
Request and response bodies for the HTTP API.

Bodies are camelCase on the wire and convert to and from the domain
dataclasses in deckevaluator.models.
"""

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from deckevaluator.analysis.deck_analysis import DeckAnalysis
from deckevaluator.models.analysis import (
    CardType,
    ColorDistribution,
    ManaBaseMetrics,
    ManaCurveBucket,
)
from deckevaluator.models.card import ColorCounts, EnrichedCard, ImageUris, ManaPips
from deckevaluator.models.deck import DeckCard, DeckData

# JSON has no infinity literal
INFINITY = "Infinity"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeckCardModel(CamelModel):
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class DeckDataModel(CamelModel):
    """A deck split into commanders, mainboard and sideboard."""

    name: str
    source: Literal["moxfield", "archidekt", "text"]
    url: str = ""
    commanders: list[DeckCardModel] = Field(default_factory=list)
    mainboard: list[DeckCardModel] = Field(default_factory=list)
    sideboard: list[DeckCardModel] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, deck: DeckData) -> "DeckDataModel":
        # Zero-quantity entries (e.g. "0 Sol Ring") are not part of the deck
        def zone(cards: list[DeckCard]) -> list[DeckCardModel]:
            return [DeckCardModel(name=c.name, quantity=c.quantity) for c in cards if c.quantity > 0]

        return cls(
            name=deck.name,
            source=deck.source,
            url=deck.url,
            commanders=zone(deck.commanders),
            mainboard=zone(deck.mainboard),
            sideboard=zone(deck.sideboard),
        )

    def to_domain(self) -> DeckData:
        def zone(cards: list[DeckCardModel]) -> list[DeckCard]:
            return [DeckCard(name=c.name, quantity=c.quantity) for c in cards]

        return DeckData(
            name=self.name,
            source=self.source,
            url=self.url,
            commanders=zone(self.commanders),
            mainboard=zone(self.mainboard),
            sideboard=zone(self.sideboard),
        )


class ImageUrisModel(CamelModel):
    small: str
    normal: str
    large: str


class ManaPipsModel(BaseModel):
    W: int = 0
    U: int = 0
    B: int = 0
    R: int = 0
    G: int = 0
    C: int = 0


class EnrichedCardModel(CamelModel):
    """Card metadata as served by /deck-enrich and accepted by /deck-analysis."""

    name: str
    mana_cost: str = ""
    cmc: float = 0.0
    color_identity: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    type_line: str = ""
    supertypes: list[str] = Field(default_factory=list)
    subtypes: list[str] = Field(default_factory=list)
    oracle_text: str = ""
    keywords: list[str] = Field(default_factory=list)
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    rarity: str = "common"
    image_uris: ImageUrisModel | None = None
    mana_pips: ManaPipsModel = Field(default_factory=ManaPipsModel)
    produced_mana: list[str] = Field(default_factory=list)
    flavor_name: str | None = None

    @classmethod
    def from_domain(cls, card: EnrichedCard) -> "EnrichedCardModel":
        image_uris = None
        if card.image_uris is not None:
            image_uris = ImageUrisModel(
                small=card.image_uris.small,
                normal=card.image_uris.normal,
                large=card.image_uris.large,
            )
        pips = card.mana_pips
        return cls(
            name=card.name,
            mana_cost=card.mana_cost,
            cmc=card.cmc,
            color_identity=list(card.color_identity),
            colors=list(card.colors),
            type_line=card.type_line,
            supertypes=list(card.supertypes),
            subtypes=list(card.subtypes),
            oracle_text=card.oracle_text,
            keywords=list(card.keywords),
            power=card.power,
            toughness=card.toughness,
            loyalty=card.loyalty,
            rarity=card.rarity,
            image_uris=image_uris,
            mana_pips=ManaPipsModel(W=pips.W, U=pips.U, B=pips.B, R=pips.R, G=pips.G, C=pips.C),
            produced_mana=list(card.produced_mana),
            flavor_name=card.flavor_name,
        )

    def to_domain(self) -> EnrichedCard:
        image_uris = None
        if self.image_uris is not None:
            image_uris = ImageUris(
                small=self.image_uris.small,
                normal=self.image_uris.normal,
                large=self.image_uris.large,
            )
        return EnrichedCard(
            name=self.name,
            mana_cost=self.mana_cost,
            cmc=self.cmc,
            color_identity=list(self.color_identity),
            colors=list(self.colors),
            type_line=self.type_line,
            supertypes=list(self.supertypes),
            subtypes=list(self.subtypes),
            oracle_text=self.oracle_text,
            keywords=list(self.keywords),
            power=self.power,
            toughness=self.toughness,
            loyalty=self.loyalty,
            rarity=self.rarity,
            image_uris=image_uris,
            mana_pips=ManaPips(**self.mana_pips.model_dump()),
            produced_mana=list(self.produced_mana),
            flavor_name=self.flavor_name,
        )


class DeckParseRequest(CamelModel):
    text: str = Field(
        ...,
        description="Pasted decklist, one '<quantity> <name>' per line",
        examples=["COMMANDER:\n1 Atraxa, Praetors' Voice\n\nMAINBOARD:\n1 Sol Ring"],
    )


class DeckEnrichRequest(CamelModel):
    card_names: list[Any] = Field(
        ...,
        description="Card names to look up. Non-string entries are ignored.",
        examples=[["Sol Ring", "Command Tower"]],
    )


class DeckEnrichResponse(CamelModel):
    cards: dict[str, EnrichedCardModel] = Field(default_factory=dict)
    not_found: list[str] = Field(default_factory=list)


class DeckAnalysisRequest(CamelModel):
    """A deck, its enriched cards (possibly partial) and an optional curve filter."""

    deck: DeckDataModel
    cards: dict[str, EnrichedCardModel] = Field(default_factory=dict)
    enabled_types: list[CardType] | None = Field(
        default=None,
        description="Spell types to include in the mana curve; omit for all",
    )


class ManaCurveBucketModel(CamelModel):
    cmc: str
    permanents: int
    non_permanents: int

    @classmethod
    def from_domain(cls, bucket: ManaCurveBucket) -> "ManaCurveBucketModel":
        return cls(
            cmc=bucket.cmc,
            permanents=bucket.permanents,
            non_permanents=bucket.non_permanents,
        )


class ColorCountsModel(BaseModel):
    W: int = 0
    U: int = 0
    B: int = 0
    R: int = 0
    G: int = 0

    @classmethod
    def from_domain(cls, counts: ColorCounts) -> "ColorCountsModel":
        return cls(**{color: int(value) for color, value in counts.as_dict().items()})


RatioValue = float | Literal["Infinity"]


class ColorRatiosModel(BaseModel):
    W: RatioValue = 0.0
    U: RatioValue = 0.0
    B: RatioValue = 0.0
    R: RatioValue = 0.0
    G: RatioValue = 0.0

    @classmethod
    def from_domain(cls, ratios: ColorCounts) -> "ColorRatiosModel":
        return cls(
            **{
                color: INFINITY if math.isinf(value) else value
                for color, value in ratios.as_dict().items()
            }
        )


class ColorDistributionModel(CamelModel):
    sources: ColorCountsModel
    pips: ColorCountsModel
    colorless_sources: int

    @classmethod
    def from_domain(cls, distribution: ColorDistribution) -> "ColorDistributionModel":
        return cls(
            sources=ColorCountsModel.from_domain(distribution.sources),
            pips=ColorCountsModel.from_domain(distribution.pips),
            colorless_sources=distribution.colorless_sources,
        )


class ManaBaseMetricsModel(CamelModel):
    land_count: int
    total_cards: int
    land_percentage: float
    average_cmc: float
    colorless_sources: int
    source_to_demand_ratio: ColorRatiosModel

    @classmethod
    def from_domain(cls, metrics: ManaBaseMetrics) -> "ManaBaseMetricsModel":
        return cls(
            land_count=metrics.land_count,
            total_cards=metrics.total_cards,
            land_percentage=metrics.land_percentage,
            average_cmc=metrics.average_cmc,
            colorless_sources=metrics.colorless_sources,
            source_to_demand_ratio=ColorRatiosModel.from_domain(metrics.source_to_demand_ratio),
        )


class DeckAnalysisResponse(CamelModel):
    mana_curve: list[ManaCurveBucketModel]
    color_distribution: ColorDistributionModel
    mana_base: ManaBaseMetricsModel
    commander_identity: list[str]
    card_tags: dict[str, list[str]]
    missing_cards: list[str]

    @classmethod
    def from_domain(cls, analysis: DeckAnalysis) -> "DeckAnalysisResponse":
        return cls(
            mana_curve=[ManaCurveBucketModel.from_domain(b) for b in analysis.mana_curve],
            color_distribution=ColorDistributionModel.from_domain(analysis.color_distribution),
            mana_base=ManaBaseMetricsModel.from_domain(analysis.mana_base),
            commander_identity=analysis.commander_identity,
            card_tags=analysis.card_tags,
            missing_cards=analysis.missing_cards,
        )
