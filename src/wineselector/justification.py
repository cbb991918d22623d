"""Human-readable reasons for a recommendation, plus serving tips."""

from wineselector.constants import (
    IntimacyLevel,
    MainDish,
    Occasion,
    ServingConstants,
    WineProfile,
)
from wineselector.error_handling import InvariantViolationError

P = WineProfile


class JustificationGenerator:
    """Explains why a profile suits the dish, the occasion and the company."""

    def generate(self, dish, occasion, intimacy, profile: WineProfile) -> str:
        """
        Build a three-sentence justification.

        Args:
            dish: MainDish (or a string naming one)
            occasion: Occasion (or a string naming one)
            intimacy: IntimacyLevel (or a string naming one)
            profile: Recommended WineProfile

        Returns:
            Dish sentence, occasion sentence and intimacy sentence joined by spaces
        """
        profile = WineProfile.parse(profile)
        return " ".join([
            self.dish_reason(MainDish.parse(dish), profile),
            self.occasion_reason(Occasion.parse(occasion), profile),
            self.intimacy_reason(IntimacyLevel.parse(intimacy), profile),
        ])

    def dish_reason(self, dish: MainDish, profile: WineProfile) -> str:
        if dish is MainDish.RED_MEAT:
            if profile.is_red:
                return "Pairs perfectly with red meat, balancing fat and protein."
            return "Offers an interesting contrast with red meat."
        if dish is MainDish.WHITE_MEAT:
            return "Matches the versatility of white meat, lifting its delicate flavours."
        if dish is MainDish.SEAFOOD:
            if profile in (P.LIGHT_WHITE, P.SPARKLING):
                return "A classic pairing for fish and seafood that respects delicate flavours."
            return "Makes an interesting pairing with fish and seafood."
        if dish is MainDish.PASTA_RED_SAUCE:
            return "Balances the acidity of the tomato sauce and the texture of the pasta."
        if dish is MainDish.PASTA_WHITE_SAUCE:
            if profile is P.STRUCTURED_WHITE:
                return "The ideal match for creamy white sauces and cheese."
            return "Complements the creaminess and richness of the white sauce."
        if dish is MainDish.RISOTTO:
            return "Goes very well with the creaminess and complexity of risotto."
        if dish is MainDish.PIZZA:
            return "A classic, relaxed combination, perfect for pizza."
        if dish is MainDish.BARBECUE:
            if profile.is_red:
                return "A perfect barbecue pick, with the structure to stand up to grilled meats."
            return "Brings a refreshing contrast to the barbecue."
        if dish is MainDish.ASIAN:
            return "Works well with the complex, delicate flavours of Asian cuisine."
        if dish is MainDish.CHEESE_BOARD:
            return "An excellent choice for a cheese board, complementing a range of flavours."
        if dish is MainDish.VEGETARIAN:
            return "Respects and brings out the natural flavours of the vegetables."
        if dish is MainDish.SPICY:
            if profile in (P.LIGHT_WHITE, P.ROSE):
                return "The freshness of this wine offsets the heat perfectly."
            return "Strikes an interesting balance with bold seasoning."
        raise InvariantViolationError(f"No dish reason authored for {dish.name}")

    def occasion_reason(self, occasion: Occasion, profile: WineProfile) -> str:
        if occasion is Occasion.ROMANTIC_DINNER:
            if profile is P.SPARKLING:
                return "Creates a special, romantic atmosphere for the dinner."
            return "Fits the romantic mood, adding refinement to the moment."
        if occasion is Occasion.CELEBRATION:
            if profile is P.SPARKLING:
                return "The classic choice for celebrating special moments!"
            return "Suits the celebration, bringing joy to the moment."
        if occasion is Occasion.BIRTHDAY:
            if profile is P.SPARKLING:
                return "Bubbles make the birthday toast memorable."
            return "A special bottle that marks the birthday."
        return _OCCASION_REASONS[occasion]

    def intimacy_reason(self, intimacy: IntimacyLevel, profile: WineProfile) -> str:
        if intimacy.requires_max_safety:
            return "It is a safe, widely enjoyable choice for this level of intimacy."
        if intimacy.allows_bold_choices:
            if profile in (P.FULL_BODIED_RED, P.SPARKLING):
                return "The closeness allows a more striking, personal choice."
            return "A comfortable choice that makes the most of this level of freedom."
        return "Balances formality and comfort well for this context."


_OCCASION_REASONS = {
    Occasion.BUSINESS_MEETING: "Suitable for a professional setting, conveying elegance and sophistication.",
    Occasion.BUSINESS_LUNCH: "Fresh enough for lunch while keeping a professional tone.",
    Occasion.FIRST_DATE: "A safe, versatile choice, ideal for a first date.",
    Occasion.AMONG_FRIENDS: "Perfect for a relaxed evening among friends.",
    Occasion.FAMILY_DINNER: "Pleases a range of palates at a family gathering.",
    Occasion.BRUNCH_HAPPY_HOUR: "Light and easy-drinking, made for brunch or happy hour.",
    Occasion.CASUAL: "An uncomplicated pick for a casual occasion.",
}


def serving_suggestion(profile) -> str:
    """Serving temperature and glass for a profile."""
    return ServingConstants.SUGGESTIONS[WineProfile.parse(profile)]
