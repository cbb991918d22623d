"""
Recommendation Service

Entry point for callers: orchestrates score calculation, winner selection
and the response shaping around a Decision.
"""

from typing import Optional

from wineselector.config import EngineConfig
from wineselector.justification import JustificationGenerator, serving_suggestion
from wineselector.schema import RecommendationRequest, RecommendationResponse
from wineselector.score_calculator import Decision, ScoreCalculator
from wineselector.utils import logger


class RecommendationService:
    """
    Main recommendation service.

    Stateless apart from the injected calculator; safe to share across threads.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        calculator: Optional[ScoreCalculator] = None,
        justification_generator: Optional[JustificationGenerator] = None,
    ):
        self.calculator = calculator or ScoreCalculator(config)
        self.justification_generator = justification_generator or JustificationGenerator()

    def recommend(self, dish, occasion, intimacy) -> Decision:
        """
        Recommended profile and, for a close second, an alternative.

        Args:
            dish: MainDish (or a string naming one)
            occasion: Occasion (or a string naming one)
            intimacy: IntimacyLevel (or a string naming one)

        Returns:
            Decision with full-precision scores

        Raises:
            InvalidInputError: if any input is missing or unknown
        """
        ranking = self.calculator.calculate_scores(dish, occasion, intimacy)
        decision = self.calculator.decide(ranking)

        logger.info(
            f"Recommended profile: {decision.primary.display_name} "
            f"({decision.rounded_primary_score} points)"
        )
        return decision

    def calculation_report(self, dish, occasion, intimacy) -> str:
        """Calculation report for debugging and transparency."""
        ranking = self.calculator.calculate_scores(dish, occasion, intimacy)
        return self.calculator.calculation_report(dish, occasion, intimacy, ranking)

    def confidence(self, dish, occasion, intimacy) -> float:
        ranking = self.calculator.calculate_scores(dish, occasion, intimacy)
        return self.calculator.confidence_level(ranking)

    def serving_suggestion(self, dish, occasion, intimacy) -> str:
        """Temperature and glass for the recommended profile."""
        return serving_suggestion(self.recommend(dish, occasion, intimacy).primary)

    def get_recommendation(self, request: RecommendationRequest) -> RecommendationResponse:
        """
        Full response for a validated request.

        Args:
            request: RecommendationRequest with dish, occasion and intimacy level

        Returns:
            RecommendationResponse with justification, confidence and serving tip
        """
        logger.info(f"Processing recommendation for: {request}")

        ranking = self.calculator.calculate_scores(request.dish, request.occasion, request.intimacy_level)
        decision = self.calculator.decide(ranking)

        justification = self.justification_generator.generate(
            request.dish, request.occasion, request.intimacy_level, decision.primary
        )

        return RecommendationResponse.build(
            profile=decision.primary,
            score=decision.rounded_primary_score,
            justification=justification,
            confidence=self.calculator.confidence_level(ranking),
            serving_suggestion=serving_suggestion(decision.primary),
            alternative=decision.alternative,
            alternative_score=decision.rounded_alternative_score,
        )


_default_service: Optional[RecommendationService] = None


def _service() -> RecommendationService:
    global _default_service
    if _default_service is None:
        _default_service = RecommendationService()
    return _default_service


def recommend(dish, occasion, intimacy) -> Decision:
    return _service().recommend(dish, occasion, intimacy)


def calculation_report(dish, occasion, intimacy) -> str:
    return _service().calculation_report(dish, occasion, intimacy)


def confidence(dish, occasion, intimacy) -> float:
    return _service().confidence(dish, occasion, intimacy)
