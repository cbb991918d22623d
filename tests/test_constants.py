"""
Tests for enums and constants.

Checks parsing of user input into closed enumerations and the derived
attributes each member carries.
"""

import pytest

from wineselector.constants import (
    AlgorithmConstants,
    ConfidenceBand,
    IntimacyLevel,
    MainDish,
    Occasion,
    ServingConstants,
    WineProfile,
)
from wineselector.error_handling import InvalidInputError, WineSelectorError
from wineselector.utils import format_percentage, normalize_key, round_half_up


class TestEnumerations:
    """Cardinality and member attributes."""

    def test_cardinalities(self):
        assert len(WineProfile) == 7
        assert len(MainDish) == 12
        assert len(Occasion) == 10
        assert len(IntimacyLevel) == 10

    def test_members_carry_display_and_description(self):
        for enum_cls in (WineProfile, MainDish, Occasion, IntimacyLevel):
            for member in enum_cls:
                assert member.key
                assert member.display_name
                assert member.description
                assert str(member) == member.display_name

    def test_keys_are_unique(self):
        for enum_cls in (WineProfile, MainDish, Occasion, IntimacyLevel):
            keys = enum_cls.choices()
            assert len(keys) == len(set(keys))

    def test_profile_order_is_declaration_order(self):
        assert [profile.order for profile in WineProfile] == list(range(7))
        assert WineProfile.LIGHT_RED.order < WineProfile.SPARKLING.order

    def test_is_red(self):
        reds = {profile for profile in WineProfile if profile.is_red}
        assert reds == {WineProfile.LIGHT_RED, WineProfile.MEDIUM_RED, WineProfile.FULL_BODIED_RED}


class TestParse:
    """Test LookupEnum.parse."""

    @pytest.mark.parametrize("raw", ["red meat", "RED_MEAT", "Red Meat", " red-meat ", MainDish.RED_MEAT])
    def test_dish_spellings(self, raw):
        assert MainDish.parse(raw) is MainDish.RED_MEAT

    def test_display_name_with_slash(self):
        assert IntimacyLevel.parse("boss/superior") is IntimacyLevel.BOSS
        assert IntimacyLevel.parse("Client/Supplier") is IntimacyLevel.CLIENT_SUPPLIER
        assert Occasion.parse("Brunch/Happy Hour") is Occasion.BRUNCH_HAPPY_HOUR

    def test_same_key_in_different_dimensions(self):
        assert Occasion.parse("first date") is Occasion.FIRST_DATE
        assert IntimacyLevel.parse("first date") is IntimacyLevel.FIRST_DATE
        assert Occasion.FIRST_DATE is not IntimacyLevel.FIRST_DATE

    def test_profile_parse(self):
        assert WineProfile.parse("full-bodied red") is WineProfile.FULL_BODIED_RED
        assert WineProfile.parse("rose") is WineProfile.ROSE

    def test_unknown_value_raises(self):
        with pytest.raises(InvalidInputError) as exc_info:
            MainDish.parse("tofu")
        assert "MainDish" in str(exc_info.value)

    def test_none_raises(self):
        with pytest.raises(InvalidInputError):
            Occasion.parse(None)

    def test_non_string_raises(self):
        with pytest.raises(InvalidInputError):
            IntimacyLevel.parse(3)

    def test_member_of_other_enum_raises(self):
        with pytest.raises(InvalidInputError):
            MainDish.parse(Occasion.CASUAL)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            MainDish.parse("")
        assert issubclass(InvalidInputError, WineSelectorError)


class TestDerivedAttributes:
    """Dish predicates and intimacy risk tolerance."""

    def test_dish_predicates(self):
        assert MainDish.BARBECUE.is_red_meat_based
        assert MainDish.BARBECUE.is_intense_flavored
        assert MainDish.ASIAN.is_light_dish
        assert MainDish.RISOTTO.is_pasta_based
        assert not MainDish.SEAFOOD.is_red_meat_based

    @pytest.mark.parametrize("level, risk", [
        (IntimacyLevel.FIRST_DATE, 1),
        (IntimacyLevel.ACQUAINTANCE, 2),
        (IntimacyLevel.DISTANT_FRIEND, 3),
        (IntimacyLevel.FRIEND, 4),
        (IntimacyLevel.CLOSE_FRIEND, 5),
        (IntimacyLevel.FRIEND_REUNION, 5),
        (IntimacyLevel.COWORKER, 3),
        (IntimacyLevel.BOSS, 2),
        (IntimacyLevel.CLIENT_SUPPLIER, 2),
        (IntimacyLevel.INTIMATE_FAMILY, 6),
    ])
    def test_risk_tolerance(self, level, risk):
        assert level.risk_tolerance == risk

    def test_bold_and_safety_predicates(self):
        assert IntimacyLevel.FIRST_DATE.requires_max_safety
        assert IntimacyLevel.BOSS.requires_max_safety
        assert not IntimacyLevel.FRIEND.requires_max_safety
        assert not IntimacyLevel.FRIEND.allows_bold_choices
        assert IntimacyLevel.CLOSE_FRIEND.allows_bold_choices
        assert IntimacyLevel.INTIMATE_FAMILY.allows_bold_choices


class TestAlgorithmConstants:
    """Reference configuration values."""

    def test_weights_sum_to_one(self):
        total = (
            AlgorithmConstants.DISH_WEIGHT
            + AlgorithmConstants.OCCASION_WEIGHT
            + AlgorithmConstants.INTIMACY_WEIGHT
        )
        assert total == pytest.approx(1.0)

    def test_thresholds(self):
        assert AlgorithmConstants.ALTERNATIVE_THRESHOLD == 10
        assert AlgorithmConstants.HIGH_CONFIDENCE_MARGIN == 16
        assert AlgorithmConstants.MEDIUM_CONFIDENCE_MARGIN == 6

    def test_serving_suggestion_for_every_profile(self):
        assert set(ServingConstants.SUGGESTIONS) == set(WineProfile)
        assert "flute" in ServingConstants.SUGGESTIONS[WineProfile.SPARKLING]


class TestConfidenceBand:
    """Test ConfidenceBand.from_margin."""

    @pytest.mark.parametrize("margin, band", [
        (None, ConfidenceBand.HIGH),
        (20.0, ConfidenceBand.HIGH),
        (16.0, ConfidenceBand.HIGH),
        (15.99, ConfidenceBand.MEDIUM),
        (6.0, ConfidenceBand.MEDIUM),
        (5.99, ConfidenceBand.LOW),
        (0.0, ConfidenceBand.LOW),
    ])
    def test_from_margin(self, margin, band):
        assert ConfidenceBand.from_margin(margin) is band

    def test_levels(self):
        assert ConfidenceBand.HIGH.level == 1.0
        assert ConfidenceBand.MEDIUM.level == 0.7
        assert ConfidenceBand.LOW.level == 0.4


class TestUtils:
    """Normalisation and rounding helpers."""

    def test_normalize_key(self):
        assert normalize_key(" Red Meat ") == "red_meat"
        assert normalize_key("Boss/Superior") == "boss_superior"
        assert normalize_key("full-bodied red") == "full_bodied_red"

    @pytest.mark.parametrize("value, expected", [
        (36.1, 36),
        (36.5, 37),
        (2.5, 3),
        (33.0, 33),
        (0.49, 0),
        (None, None),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_format_percentage(self):
        assert format_percentage(0.5) == "50%"
        assert format_percentage(0.3) == "30%"

    def test_format_percentage_rounds_half_up(self):
        assert format_percentage(0.125) == "13%"
        assert format_percentage(0.875) == "88%"
