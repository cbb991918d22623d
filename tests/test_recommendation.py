"""
End-to-end tests for the recommendation service.

Covers the full request flow: scoring, selection, confidence,
justification and serving suggestion.
"""

import pytest

import wineselector
from wineselector.constants import IntimacyLevel, MainDish, Occasion, WineProfile
from wineselector.error_handling import InvalidInputError, InvariantViolationError
from wineselector.justification import JustificationGenerator, serving_suggestion
from wineselector.recommendation import RecommendationService
from wineselector.schema import RecommendationRequest


@pytest.fixture
def service():
    return RecommendationService()


class TestGetRecommendation:
    """Test RecommendationService.get_recommendation."""

    def test_business_meeting_with_boss(self, service):
        """Red meat with the boss: close call between the two fuller reds."""
        request = RecommendationRequest(
            dish="red_meat", occasion="business_meeting", intimacy_level="boss"
        )
        response = service.get_recommendation(request)

        assert response.recommended_profile == "full_bodied_red"
        assert response.score == 36
        assert response.alternative_profile == "medium_red"
        assert response.alternative_score == 33
        assert response.confidence == 0.4
        assert "16-18°C" in response.serving_suggestion
        assert response.justification == (
            "Pairs perfectly with red meat, balancing fat and protein. "
            "Suitable for a professional setting, conveying elegance and sophistication. "
            "It is a safe, widely enjoyable choice for this level of intimacy."
        )

    def test_clear_winner_has_no_alternative(self, service):
        request = RecommendationRequest(
            dish="pasta_white_sauce", occasion="business_meeting", intimacy_level="client_supplier"
        )
        response = service.get_recommendation(request)

        assert response.recommended_profile == "structured_white"
        assert response.score == 37
        assert not response.has_alternative
        assert response.confidence == 0.7

    def test_every_combination_yields_a_response(self, service):
        for dish in MainDish:
            for occasion in Occasion:
                for intimacy in IntimacyLevel:
                    request = RecommendationRequest(
                        dish=dish, occasion=occasion, intimacy_level=intimacy
                    )
                    response = service.get_recommendation(request)
                    assert WineProfile.parse(response.recommended_profile)
                    assert response.confidence in (0.4, 0.7, 1.0)
                    assert response.justification.count(".") + response.justification.count("!") >= 3


class TestRecommend:
    """Test the Decision-level entry points."""

    def test_recommend(self, service):
        decision = service.recommend(MainDish.RED_MEAT, Occasion.BUSINESS_MEETING, IntimacyLevel.BOSS)
        assert decision.primary is WineProfile.FULL_BODIED_RED
        assert decision.primary_score == pytest.approx(36.1)
        assert decision.alternative is WineProfile.MEDIUM_RED
        assert decision.alternative_score == pytest.approx(33.0)

    def test_recommend_is_deterministic(self, service):
        first = service.recommend("seafood", "romantic dinner", "close friend")
        second = service.recommend("seafood", "romantic dinner", "close friend")
        assert first == second

    def test_invalid_input_raises(self, service):
        with pytest.raises(InvalidInputError):
            service.recommend("tofu", "casual", "friend")
        with pytest.raises(InvalidInputError):
            service.recommend("pizza", None, "friend")

    def test_confidence(self, service):
        assert service.confidence("red meat", "business meeting", "boss") == 0.4

    def test_serving_suggestion(self, service):
        assert "16-18°C" in service.serving_suggestion("red meat", "business meeting", "boss")

    def test_calculation_report(self, service):
        report = service.calculation_report("red meat", "business meeting", "boss")
        assert "Full-Bodied Red: 36.10 points" in report
        assert "- Dish: 50%" in report


class TestModuleFunctions:
    """Package-level helpers share one default service."""

    def test_recommend(self):
        decision = wineselector.recommend("red meat", "business meeting", "boss")
        assert decision.primary is WineProfile.FULL_BODIED_RED

    def test_confidence(self):
        assert wineselector.confidence("pasta white sauce", "business meeting", "client/supplier") == 0.7

    def test_calculation_report(self):
        report = wineselector.calculation_report("red meat", "business meeting", "boss")
        assert report.startswith("========== CALCULATION REPORT ==========")


class TestJustification:
    """Test JustificationGenerator sentences."""

    @pytest.fixture
    def generator(self):
        return JustificationGenerator()

    def test_every_input_has_a_reason(self, generator):
        for profile in WineProfile:
            for dish in MainDish:
                assert generator.dish_reason(dish, profile)
            for occasion in Occasion:
                assert generator.occasion_reason(occasion, profile)
            for intimacy in IntimacyLevel:
                assert generator.intimacy_reason(intimacy, profile)

    def test_spicy_reasons(self, generator):
        assert generator.dish_reason(MainDish.SPICY, WineProfile.ROSE) == (
            "The freshness of this wine offsets the heat perfectly."
        )
        assert generator.dish_reason(MainDish.SPICY, WineProfile.FULL_BODIED_RED) == (
            "Strikes an interesting balance with bold seasoning."
        )

    def test_dish_without_reason_raises(self, generator):
        with pytest.raises(InvariantViolationError):
            generator.dish_reason(Occasion.CASUAL, WineProfile.ROSE)

    def test_red_meat_contrast(self, generator):
        assert "contrast" in generator.dish_reason(MainDish.RED_MEAT, WineProfile.LIGHT_WHITE)

    def test_sparkling_celebration(self, generator):
        reason = generator.occasion_reason(Occasion.CELEBRATION, WineProfile.SPARKLING)
        assert reason == "The classic choice for celebrating special moments!"

    def test_bold_intimacy(self, generator):
        reason = generator.intimacy_reason(IntimacyLevel.CLOSE_FRIEND, WineProfile.FULL_BODIED_RED)
        assert reason == "The closeness allows a more striking, personal choice."

    def test_middle_intimacy(self, generator):
        reason = generator.intimacy_reason(IntimacyLevel.COWORKER, WineProfile.ROSE)
        assert reason == "Balances formality and comfort well for this context."

    def test_generate_accepts_strings(self, generator):
        text = generator.generate("spicy", "casual", "friend", "rose")
        assert text.startswith("The freshness of this wine offsets the heat perfectly.")

    def test_serving_suggestion(self):
        assert "flute" in serving_suggestion(WineProfile.SPARKLING)
        assert serving_suggestion("rose") == serving_suggestion(WineProfile.ROSE)
