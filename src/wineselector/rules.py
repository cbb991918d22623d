"""
Scoring Rules: one rule table per decision dimension.

Each table maps a dimension value to a score per WineProfile. Scores sit
on a 0-50 scale; a profile missing from a row scores 0.

Dish (weight 50%):
- 45-50: classic / perfect pairing
- 30-40: very good pairing
- 20-25: good / acceptable
- 10-15: possible, not ideal
- 0-5:   not recommended

Occasion (weight 30%):
- 25-30: perfect for the occasion
- 18-22: very appropriate
- 12-15: appropriate
- 0-10:  out of place

Intimacy (weight 20%):
- 18-20: perfect for this level of closeness
- 12-15: very appropriate
- 8-10:  appropriate
- 0-7:   risky at this level
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional, Type, TypeVar

from wineselector.config import DEFAULT_CONFIG, EngineConfig
from wineselector.constants import (
    AlgorithmConstants,
    IntimacyLevel,
    MainDish,
    Occasion,
    WineProfile,
)
from wineselector.error_handling import InvalidInputError, InvariantViolationError

T = TypeVar('T', MainDish, Occasion, IntimacyLevel)

ScoreMap = Mapping[WineProfile, int]

P = WineProfile


def _freeze(table: Dict) -> Mapping:
    return MappingProxyType({key: MappingProxyType(row) for key, row in table.items()})


# =======================
# DISH TABLE
# =======================

DISH_SCORES = _freeze({
    # Classic pairing: structured reds
    MainDish.RED_MEAT: {
        P.FULL_BODIED_RED: 50, P.MEDIUM_RED: 40, P.LIGHT_RED: 25,
        P.STRUCTURED_WHITE: 10, P.LIGHT_WHITE: 0, P.ROSE: 5, P.SPARKLING: 5,
    },
    # Versatile: light reds, structured whites and rosés
    MainDish.WHITE_MEAT: {
        P.LIGHT_RED: 45, P.STRUCTURED_WHITE: 45, P.ROSE: 40, P.MEDIUM_RED: 30,
        P.LIGHT_WHITE: 25, P.SPARKLING: 20, P.FULL_BODIED_RED: 15,
    },
    MainDish.SEAFOOD: {
        P.LIGHT_WHITE: 50, P.SPARKLING: 45, P.STRUCTURED_WHITE: 35, P.ROSE: 30,
        P.LIGHT_RED: 10, P.MEDIUM_RED: 0, P.FULL_BODIED_RED: 0,
    },
    MainDish.PASTA_RED_SAUCE: {
        P.MEDIUM_RED: 50, P.LIGHT_RED: 45, P.FULL_BODIED_RED: 30, P.ROSE: 25,
        P.STRUCTURED_WHITE: 15, P.LIGHT_WHITE: 5, P.SPARKLING: 10,
    },
    MainDish.PASTA_WHITE_SAUCE: {
        P.STRUCTURED_WHITE: 50, P.LIGHT_RED: 40, P.LIGHT_WHITE: 30, P.SPARKLING: 25,
        P.ROSE: 20, P.MEDIUM_RED: 15, P.FULL_BODIED_RED: 5,
    },
    MainDish.RISOTTO: {
        P.STRUCTURED_WHITE: 50, P.LIGHT_WHITE: 40, P.LIGHT_RED: 35, P.SPARKLING: 30,
        P.ROSE: 25, P.MEDIUM_RED: 20, P.FULL_BODIED_RED: 10,
    },
    MainDish.PIZZA: {
        P.MEDIUM_RED: 45, P.LIGHT_RED: 45, P.ROSE: 40, P.STRUCTURED_WHITE: 30,
        P.SPARKLING: 25, P.FULL_BODIED_RED: 20, P.LIGHT_WHITE: 15,
    },
    MainDish.BARBECUE: {
        P.FULL_BODIED_RED: 50, P.MEDIUM_RED: 45, P.LIGHT_RED: 30, P.ROSE: 15,
        P.STRUCTURED_WHITE: 10, P.LIGHT_WHITE: 0, P.SPARKLING: 5,
    },
    MainDish.ASIAN: {
        P.LIGHT_WHITE: 50, P.ROSE: 45, P.SPARKLING: 40, P.STRUCTURED_WHITE: 30,
        P.LIGHT_RED: 20, P.MEDIUM_RED: 10, P.FULL_BODIED_RED: 0,
    },
    # Depends on the cheeses, nearly everything works
    MainDish.CHEESE_BOARD: {
        P.MEDIUM_RED: 45, P.STRUCTURED_WHITE: 45, P.SPARKLING: 40, P.FULL_BODIED_RED: 35,
        P.LIGHT_RED: 35, P.ROSE: 35, P.LIGHT_WHITE: 30,
    },
    MainDish.VEGETARIAN: {
        P.LIGHT_WHITE: 50, P.ROSE: 45, P.LIGHT_RED: 40, P.STRUCTURED_WHITE: 35,
        P.SPARKLING: 30, P.MEDIUM_RED: 20, P.FULL_BODIED_RED: 10,
    },
    # Freshness offsets the heat; tannin clashes with it
    MainDish.SPICY: {
        P.LIGHT_WHITE: 50, P.ROSE: 45, P.SPARKLING: 40, P.STRUCTURED_WHITE: 30,
        P.LIGHT_RED: 20, P.MEDIUM_RED: 10, P.FULL_BODIED_RED: 0,
    },
})


# =======================
# OCCASION TABLE
# =======================

OCCASION_SCORES = _freeze({
    # Formal: discreet elegance, no boldness
    Occasion.BUSINESS_MEETING: {
        P.MEDIUM_RED: 30, P.STRUCTURED_WHITE: 28, P.FULL_BODIED_RED: 25, P.LIGHT_WHITE: 20,
        P.SPARKLING: 18, P.LIGHT_RED: 15, P.ROSE: 10,
    },
    # Corporate but daytime: fresher and lighter
    Occasion.BUSINESS_LUNCH: {
        P.STRUCTURED_WHITE: 28, P.LIGHT_WHITE: 26, P.MEDIUM_RED: 25, P.LIGHT_RED: 20,
        P.ROSE: 18, P.SPARKLING: 15, P.FULL_BODIED_RED: 15,
    },
    Occasion.ROMANTIC_DINNER: {
        P.SPARKLING: 30, P.MEDIUM_RED: 28, P.FULL_BODIED_RED: 25, P.STRUCTURED_WHITE: 25,
        P.ROSE: 22, P.LIGHT_WHITE: 18, P.LIGHT_RED: 18,
    },
    # Avoid extremes
    Occasion.FIRST_DATE: {
        P.LIGHT_WHITE: 30, P.ROSE: 28, P.LIGHT_RED: 25, P.SPARKLING: 25,
        P.MEDIUM_RED: 22, P.STRUCTURED_WHITE: 20, P.FULL_BODIED_RED: 12,
    },
    Occasion.BIRTHDAY: {
        P.SPARKLING: 30, P.MEDIUM_RED: 25, P.FULL_BODIED_RED: 25, P.ROSE: 24,
        P.STRUCTURED_WHITE: 20, P.LIGHT_WHITE: 18, P.LIGHT_RED: 18,
    },
    Occasion.CELEBRATION: {
        P.SPARKLING: 30, P.ROSE: 25, P.MEDIUM_RED: 22, P.LIGHT_WHITE: 20,
        P.FULL_BODIED_RED: 18, P.STRUCTURED_WHITE: 18, P.LIGHT_RED: 15,
    },
    Occasion.AMONG_FRIENDS: {
        P.ROSE: 30, P.MEDIUM_RED: 28, P.FULL_BODIED_RED: 28, P.SPARKLING: 25,
        P.LIGHT_RED: 25, P.LIGHT_WHITE: 22, P.STRUCTURED_WHITE: 22,
    },
    Occasion.FAMILY_DINNER: {
        P.MEDIUM_RED: 30, P.LIGHT_RED: 28, P.LIGHT_WHITE: 25, P.ROSE: 25,
        P.STRUCTURED_WHITE: 22, P.SPARKLING: 20, P.FULL_BODIED_RED: 18,
    },
    Occasion.BRUNCH_HAPPY_HOUR: {
        P.SPARKLING: 30, P.ROSE: 30, P.LIGHT_WHITE: 28, P.LIGHT_RED: 22,
        P.STRUCTURED_WHITE: 15, P.MEDIUM_RED: 15, P.FULL_BODIED_RED: 5,
    },
    # No pressure: near-flat row
    Occasion.CASUAL: {
        P.MEDIUM_RED: 25, P.LIGHT_RED: 25, P.LIGHT_WHITE: 25, P.ROSE: 25,
        P.STRUCTURED_WHITE: 22, P.FULL_BODIED_RED: 20, P.SPARKLING: 20,
    },
})


# =======================
# INTIMACY TABLE
# =======================

INTIMACY_SCORES = _freeze({
    IntimacyLevel.FIRST_DATE: {
        P.LIGHT_WHITE: 20, P.ROSE: 18, P.LIGHT_RED: 15, P.SPARKLING: 15,
        P.MEDIUM_RED: 12, P.STRUCTURED_WHITE: 10, P.FULL_BODIED_RED: 3,
    },
    IntimacyLevel.ACQUAINTANCE: {
        P.MEDIUM_RED: 20, P.LIGHT_WHITE: 18, P.LIGHT_RED: 18, P.STRUCTURED_WHITE: 15,
        P.ROSE: 15, P.SPARKLING: 15, P.FULL_BODIED_RED: 8,
    },
    IntimacyLevel.DISTANT_FRIEND: {
        P.MEDIUM_RED: 18, P.LIGHT_RED: 16, P.STRUCTURED_WHITE: 15, P.ROSE: 15,
        P.LIGHT_WHITE: 15, P.SPARKLING: 14, P.FULL_BODIED_RED: 12,
    },
    IntimacyLevel.FRIEND: {
        P.MEDIUM_RED: 18, P.FULL_BODIED_RED: 16, P.ROSE: 16, P.STRUCTURED_WHITE: 16,
        P.LIGHT_RED: 15, P.SPARKLING: 15, P.LIGHT_WHITE: 14,
    },
    IntimacyLevel.CLOSE_FRIEND: {
        P.FULL_BODIED_RED: 20, P.MEDIUM_RED: 18, P.STRUCTURED_WHITE: 18, P.SPARKLING: 15,
        P.ROSE: 15, P.LIGHT_RED: 15, P.LIGHT_WHITE: 12,
    },
    IntimacyLevel.FRIEND_REUNION: {
        P.SPARKLING: 20, P.FULL_BODIED_RED: 18, P.MEDIUM_RED: 18, P.STRUCTURED_WHITE: 16,
        P.ROSE: 15, P.LIGHT_RED: 15, P.LIGHT_WHITE: 12,
    },
    IntimacyLevel.COWORKER: {
        P.MEDIUM_RED: 20, P.STRUCTURED_WHITE: 18, P.FULL_BODIED_RED: 15, P.LIGHT_WHITE: 15,
        P.LIGHT_RED: 15, P.SPARKLING: 12, P.ROSE: 10,
    },
    # Classic and beyond reproach
    IntimacyLevel.BOSS: {
        P.MEDIUM_RED: 20, P.FULL_BODIED_RED: 18, P.STRUCTURED_WHITE: 18, P.LIGHT_WHITE: 12,
        P.SPARKLING: 12, P.LIGHT_RED: 10, P.ROSE: 5,
    },
    IntimacyLevel.CLIENT_SUPPLIER: {
        P.MEDIUM_RED: 20, P.STRUCTURED_WHITE: 20, P.FULL_BODIED_RED: 16, P.SPARKLING: 14,
        P.LIGHT_WHITE: 14, P.LIGHT_RED: 10, P.ROSE: 6,
    },
    # Flat row: only the pairing matters
    IntimacyLevel.INTIMATE_FAMILY: {profile: 15 for profile in WineProfile},
})


# =======================
# RULE PROVIDERS
# =======================

class ScoringRules(ABC, Generic[T]):
    """
    Contract shared by every dimension.

    Each implementation looks a dimension value up in its table and returns
    a score for every WineProfile; the calculator multiplies it by weight.
    """

    dimension: Type[T]
    table: Mapping[T, ScoreMap]

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    @property
    @abstractmethod
    def weight(self) -> float:
        """Share of this dimension in the final score (0-1)."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Descriptive rule name, for logs and reports."""

    def is_valid_value(self, value) -> bool:
        try:
            self.dimension.parse(value)
        except InvalidInputError:
            return False
        return True

    def scores(self, value) -> ScoreMap:
        """
        Score every WineProfile for one dimension value.

        Args:
            value: Enum member, or a name/key/display string for it

        Returns:
            Read-only map with an entry for every WineProfile (0 when not authored)

        Raises:
            InvalidInputError: if value is missing or unknown
            InvariantViolationError: if the table has no row for a valid value
        """
        member = self.dimension.parse(value)
        row = self.table.get(member)
        if row is None:
            raise InvariantViolationError(f"{self.name}: no scores authored for {member.name}")
        return MappingProxyType({profile: row.get(profile, 0) for profile in WineProfile})

    def score_for_profile(self, value, profile: WineProfile) -> int:
        return self.scores(value)[profile]


class DishRules(ScoringRules[MainDish]):
    """Pairing rules by main dish. The most important dimension."""

    dimension = MainDish
    table = DISH_SCORES

    @property
    def weight(self) -> float:
        return self.config.dish_weight

    @property
    def name(self) -> str:
        return "Dish Pairing Rules"


class OccasionRules(ScoringRules[Occasion]):
    """Social context and formality of the event."""

    dimension = Occasion
    table = OCCASION_SCORES

    @property
    def weight(self) -> float:
        return self.config.occasion_weight

    @property
    def name(self) -> str:
        return "Social Context Rules"


class IntimacyRules(ScoringRules[IntimacyLevel]):
    """
    Social risk of the choice.

    The closer the people, the more freedom: low intimacy favours widely
    pleasing profiles, high intimacy scores every profile alike.
    """

    dimension = IntimacyLevel
    table = INTIMACY_SCORES

    @property
    def weight(self) -> float:
        return self.config.intimacy_weight

    @property
    def name(self) -> str:
        return "Intimacy Level Rules"

    def safety_factor(self, level) -> float:
        """
        How much safety the level asks for: 1 - risk_tolerance / 5.

        FIRST_DATE gives 0.8, CLOSE_FRIEND 0.0. INTIMATE_FAMILY goes
        slightly negative (-0.2), meaning no constraint at all.
        """
        member = IntimacyLevel.parse(level)
        return 1.0 - member.risk_tolerance / AlgorithmConstants.SAFETY_FACTOR_SCALE

    def is_safe_profile(self, profile: WineProfile, level) -> bool:
        """Whether a profile is a widely pleasing pick at this intimacy level."""
        member = IntimacyLevel.parse(level)
        score = self.score_for_profile(member, profile)
        if member.requires_max_safety:
            return score >= AlgorithmConstants.SAFE_SCORE_MAX_SAFETY
        return member.allows_bold_choices or score >= AlgorithmConstants.SAFE_SCORE_DEFAULT
