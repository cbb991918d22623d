"""
ScoreCalculator: Weighted Wine Profile Scoring

Turns the three rule tables into a decision:
- Weighted sum of dish, occasion and intimacy scores per WineProfile
- Deterministic ranking (score descending, then profile declaration order)
- Winner plus a close-second alternative when the gap is small
- Coarse confidence bands and a plain-text calculation report

Every call is pure: rule tables and config are read-only, and each call
builds its own Ranking.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import pandas as pd

from wineselector.config import DEFAULT_CONFIG, EngineConfig
from wineselector.constants import (
    AlgorithmConstants,
    ConfidenceBand,
    IntimacyLevel,
    MainDish,
    Occasion,
    WineProfile,
)
from wineselector.error_handling import InvariantViolationError
from wineselector.rules import DishRules, IntimacyRules, OccasionRules
from wineselector.utils import format_percentage, logger, round_half_up


@dataclass(frozen=True)
class RankedProfile:
    """One ranking entry: a profile and its weighted total (full precision)."""
    profile: WineProfile
    score: float

    @property
    def rounded_score(self) -> int:
        return round_half_up(self.score)


@dataclass(frozen=True)
class Ranking:
    """All profiles sorted by weighted total, descending."""
    entries: Tuple[RankedProfile, ...]

    @classmethod
    def from_totals(cls, totals) -> 'Ranking':
        """
        Sort (profile -> total) into a Ranking.

        Totals are compared at SCORE_PRECISION decimals, so sums that are
        equal on paper tie even when float noise differs. Ties fall back to
        WineProfile declaration order.
        """
        precision = AlgorithmConstants.SCORE_PRECISION
        ordered = sorted(totals.items(), key=lambda item: (-round(item[1], precision), item[0].order))
        return cls(tuple(RankedProfile(profile, score) for profile, score in ordered))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RankedProfile]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> RankedProfile:
        return self.entries[index]

    @property
    def top(self) -> RankedProfile:
        if not self.entries:
            raise InvariantViolationError("Ranking is empty")
        return self.entries[0]

    @property
    def runner_up(self) -> Optional[RankedProfile]:
        return self.entries[1] if len(self.entries) >= 2 else None

    @property
    def margin(self) -> Optional[float]:
        """Gap between 1st and 2nd place at SCORE_PRECISION, None without a runner-up."""
        if self.runner_up is None:
            return None
        return round(self.top.score - self.runner_up.score, AlgorithmConstants.SCORE_PRECISION)

    def score_of(self, profile: WineProfile) -> float:
        for entry in self.entries:
            if entry.profile is profile:
                return entry.score
        raise InvariantViolationError(f"{profile.name} missing from ranking")


@dataclass(frozen=True)
class Decision:
    """Engine output for one request."""
    primary: WineProfile
    primary_score: float
    alternative: Optional[WineProfile] = None
    alternative_score: Optional[float] = None

    @property
    def has_alternative(self) -> bool:
        return self.alternative is not None

    @property
    def rounded_primary_score(self) -> int:
        return round_half_up(self.primary_score)

    @property
    def rounded_alternative_score(self) -> Optional[int]:
        return round_half_up(self.alternative_score)


class ScoreCalculator:
    """
    Applies the three dimensions, sums the weighted scores and picks the winner.

    Rules and config are injected once; the calculator holds no other state.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        dish_rules: Optional[DishRules] = None,
        occasion_rules: Optional[OccasionRules] = None,
        intimacy_rules: Optional[IntimacyRules] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.dish_rules = dish_rules or DishRules(self.config)
        self.occasion_rules = occasion_rules or OccasionRules(self.config)
        self.intimacy_rules = intimacy_rules or IntimacyRules(self.config)

    def calculate_scores(self, dish, occasion, intimacy) -> Ranking:
        """
        Weighted total for every WineProfile.

        total(P) = dish(P) * w_dish + occasion(P) * w_occasion + intimacy(P) * w_intimacy

        Args:
            dish: MainDish (or a string naming one)
            occasion: Occasion (or a string naming one)
            intimacy: IntimacyLevel (or a string naming one)

        Returns:
            Ranking with exactly one entry per WineProfile

        Raises:
            InvalidInputError: if any input is missing or unknown
            InvariantViolationError: if the ranking does not cover every profile
        """
        # All three lookups run before any arithmetic
        dish_scores = self.dish_rules.scores(dish)
        occasion_scores = self.occasion_rules.scores(occasion)
        intimacy_scores = self.intimacy_rules.scores(intimacy)

        dish_weight = self.dish_rules.weight
        occasion_weight = self.occasion_rules.weight
        intimacy_weight = self.intimacy_rules.weight

        totals = {}
        for profile in WineProfile:
            dish_part = dish_scores.get(profile, 0) * dish_weight
            occasion_part = occasion_scores.get(profile, 0) * occasion_weight
            intimacy_part = intimacy_scores.get(profile, 0) * intimacy_weight
            totals[profile] = dish_part + occasion_part + intimacy_part

            logger.debug(
                f"Profile: {profile.display_name} | Dish: {dish_part:.2f} | "
                f"Occasion: {occasion_part:.2f} | Intimacy: {intimacy_part:.2f} | "
                f"Total: {totals[profile]:.2f}"
            )

        ranking = Ranking.from_totals(totals)
        self._check_complete(ranking)
        return ranking

    @staticmethod
    def _check_complete(ranking: Ranking) -> None:
        if len(ranking) == 0:
            raise InvariantViolationError("Ranking is empty")
        covered = {entry.profile for entry in ranking}
        missing = [profile.name for profile in WineProfile if profile not in covered]
        if missing or len(ranking) != len(WineProfile):
            raise InvariantViolationError(f"Ranking does not cover every profile (missing: {missing})")

    # =======================
    # SELECTION POLICY
    # =======================

    def recommended_profile(self, ranking: Ranking) -> RankedProfile:
        """Highest weighted total (ties already settled by the ranking order)."""
        return ranking.top

    def alternative_profile(self, ranking: Ranking) -> Optional[RankedProfile]:
        """
        Runner-up, when it is close enough to be a genuine toss-up.

        Offered when 1st - 2nd <= alternative_threshold (10 by default).
        """
        margin = ranking.margin
        if margin is None:
            return None

        logger.debug(f"Gap between 1st and 2nd place: {margin:.2f} points")

        if margin <= self.config.alternative_threshold:
            alternative = ranking.runner_up
            logger.info(
                f"Alternative profile found: {alternative.profile.display_name} "
                f"(gap: {margin:.2f})"
            )
            return alternative
        return None

    def select(self, ranking: Ranking) -> Tuple[RankedProfile, Optional[RankedProfile]]:
        return self.recommended_profile(ranking), self.alternative_profile(ranking)

    def decide(self, ranking: Ranking) -> Decision:
        primary, alternative = self.select(ranking)
        return Decision(
            primary=primary.profile,
            primary_score=primary.score,
            alternative=alternative.profile if alternative else None,
            alternative_score=alternative.score if alternative else None,
        )

    # =======================
    # CONFIDENCE
    # =======================

    def confidence_band(self, ranking: Ranking) -> ConfidenceBand:
        if len(ranking) == 0:
            raise InvariantViolationError("Ranking is empty")
        return ConfidenceBand.from_margin(
            ranking.margin,
            high_margin=self.config.high_confidence_margin,
            medium_margin=self.config.medium_confidence_margin,
        )

    def confidence_level(self, ranking: Ranking) -> float:
        """
        Confidence from the 1st-2nd gap.

        - gap >= 16:      1.0 (high)
        - 6 <= gap < 16:  0.7 (medium)
        - gap < 6:        0.4 (low, technical tie)

        A ranking with a single entry is fully confident.
        """
        return self.confidence_band(ranking).level

    # =======================
    # TRANSPARENCY
    # =======================

    def calculation_report(self, dish, occasion, intimacy, ranking: Ranking) -> str:
        """
        Plain-text report of inputs, weights and every final score.

        Args:
            dish, occasion, intimacy: The request inputs
            ranking: Ranking computed for those inputs

        Returns:
            Formatted multi-line report
        """
        dish = MainDish.parse(dish)
        occasion = Occasion.parse(occasion)
        intimacy = IntimacyLevel.parse(intimacy)

        lines = [
            "========== CALCULATION REPORT ==========",
            f"Dish: {dish.display_name}",
            f"Occasion: {occasion.display_name}",
            f"Intimacy: {intimacy.display_name}",
            "",
            "Applied weights:",
            f"- Dish: {format_percentage(self.dish_rules.weight)}",
            f"- Occasion: {format_percentage(self.occasion_rules.weight)}",
            f"- Intimacy: {format_percentage(self.intimacy_rules.weight)}",
            "",
            "Final scores:",
        ]
        lines.extend(f"- {entry.profile.display_name}: {entry.score:.2f} points" for entry in ranking)
        lines.append("========================================")
        return "\n".join(lines) + "\n"

    def breakdown(self, dish, occasion, intimacy) -> pd.DataFrame:
        """
        Per-dimension contributions for every profile, in ranking order.

        Columns: dish_raw, occasion_raw, intimacy_raw, dish, occasion,
        intimacy (weighted) and total. Indexed by profile key.
        """
        ranking = self.calculate_scores(dish, occasion, intimacy)
        dish_scores = self.dish_rules.scores(dish)
        occasion_scores = self.occasion_rules.scores(occasion)
        intimacy_scores = self.intimacy_rules.scores(intimacy)

        df = pd.DataFrame([
            {
                'profile': entry.profile.key,
                'dish_raw': dish_scores[entry.profile],
                'occasion_raw': occasion_scores[entry.profile],
                'intimacy_raw': intimacy_scores[entry.profile],
                'total': entry.score,
            }
            for entry in ranking
        ]).set_index('profile')

        df['dish'] = df['dish_raw'] * self.dish_rules.weight
        df['occasion'] = df['occasion_raw'] * self.occasion_rules.weight
        df['intimacy'] = df['intimacy_raw'] * self.intimacy_rules.weight

        return df[['dish_raw', 'occasion_raw', 'intimacy_raw', 'dish', 'occasion', 'intimacy', 'total']]


# Example usage
if __name__ == "__main__":
    calculator = ScoreCalculator()
    ranking = calculator.calculate_scores("red meat", "business meeting", "boss/superior")
    decision = calculator.decide(ranking)

    print(calculator.calculation_report("red meat", "business meeting", "boss/superior", ranking))
    print(f"Recommended: {decision.primary.display_name} ({decision.rounded_primary_score} points)")
    if decision.has_alternative:
        print(f"Alternative: {decision.alternative.display_name} ({decision.rounded_alternative_score} points)")
    print(f"Confidence: {calculator.confidence_level(ranking)}")
    print(calculator.breakdown("red meat", "business meeting", "boss/superior"))
