"""
Wine Selector Constants and Enums

Closed enumerations for every decision dimension plus the algorithm
constants used by the score calculator.
"""

from enum import Enum
from typing import Optional, Type, TypeVar

from wineselector.error_handling import InvalidInputError
from wineselector.utils import normalize_key

E = TypeVar('E', bound='LookupEnum')


class LookupEnum(Enum):
    """
    Enum whose members carry (key, display_name, description, ...).

    Members can be looked up by name, key or display name.
    """

    def __init__(self, key: str, display_name: str, description: str, *extra):
        self.key = key
        self.display_name = display_name
        self.description = description

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls: Type[E], value) -> E:
        """
        Resolve user input to a member.

        Args:
            value: Member instance, member name, key or display name

        Returns:
            The matching member

        Raises:
            InvalidInputError: if value is missing or not recognised
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise InvalidInputError(f"{cls.__name__} is required")
        if not isinstance(value, str):
            raise InvalidInputError(
                f"{cls.__name__} must be a string or {cls.__name__} member, "
                f"got {type(value).__name__}"
            )

        wanted = normalize_key(value)
        for member in cls:
            candidates = (member.name.lower(), member.key, normalize_key(member.display_name))
            if wanted in candidates:
                return member

        raise InvalidInputError(f"Unknown {cls.__name__}: {value!r}")

    @classmethod
    def choices(cls) -> list:
        """Keys accepted by parse(), in declaration order."""
        return [member.key for member in cls]


# =======================
# WINE PROFILES
# =======================

class WineProfile(LookupEnum):
    """Wine styles the engine can recommend. Declaration order is the ranking tie-break."""

    LIGHT_RED = (
        "light_red",
        "Light Red",
        "Red wine with soft tannins and light body, easy to drink. "
        "For anyone after something less intense and more versatile.",
    )
    MEDIUM_RED = (
        "medium_red",
        "Medium Red",
        "Balanced red with good structure and moderate tannins. "
        "The most versatile and safest choice across occasions.",
    )
    FULL_BODIED_RED = (
        "full_bodied_red",
        "Full-Bodied Red",
        "Intense red with firm tannins and big structure. "
        "For those who enjoy robust wines with strong personality.",
    )
    LIGHT_WHITE = (
        "light_white",
        "Light White",
        "Fresh, delicate white with lively acidity. "
        "Perfect for lighter, relaxed moments.",
    )
    STRUCTURED_WHITE = (
        "structured_white",
        "Structured White",
        "White with more body, complexity and presence at the table. "
        "Pairs well with more elaborate dishes.",
    )
    ROSE = (
        "rose",
        "Rosé",
        "Versatile, fresh and elegant rosé. "
        "Excellent for informal occasions and a relaxed mood.",
    )
    SPARKLING = (
        "sparkling",
        "Sparkling",
        "Festive, elegant sparkling wine with fine bubbles. "
        "Perfect for celebrations and special moments.",
    )

    @property
    def is_red(self) -> bool:
        return self in (WineProfile.LIGHT_RED, WineProfile.MEDIUM_RED, WineProfile.FULL_BODIED_RED)

    @property
    def order(self) -> int:
        """Declaration index, used as the secondary sort key."""
        return _PROFILE_ORDER[self]


_PROFILE_ORDER = {profile: index for index, profile in enumerate(WineProfile)}


# =======================
# DIMENSION ENUMS
# =======================

class MainDish(LookupEnum):
    """Main dish served. The most important dimension for pairing."""

    RED_MEAT = (
        "red_meat",
        "Red Meat",
        "Steak, ribs, picanha, lamb and other grilled or roasted red meats.",
    )
    WHITE_MEAT = (
        "white_meat",
        "White Meat",
        "Chicken, turkey and other poultry prepared in various ways.",
    )
    SEAFOOD = (
        "seafood",
        "Fish & Seafood",
        "Salmon, tilapia, shrimp, octopus, squid and other fresh seafood.",
    )
    PASTA_RED_SAUCE = (
        "pasta_red_sauce",
        "Pasta with Red Sauce",
        "Italian pasta with tomato, bolognese, arrabbiata or pomodoro sauce.",
    )
    PASTA_WHITE_SAUCE = (
        "pasta_white_sauce",
        "Pasta with White Sauce",
        "Pasta with alfredo, four cheese, carbonara or pesto.",
    )
    RISOTTO = (
        "risotto",
        "Risotto",
        "Creamy risotto with mushroom, shrimp, chicken, lemon or similar.",
    )
    PIZZA = (
        "pizza",
        "Pizza",
        "Pizza of any style, from margherita to fully loaded.",
    )
    BARBECUE = (
        "barbecue",
        "Barbecue",
        "Assorted grilled meats, Brazilian churrasco style, sausages and chicken included.",
    )
    ASIAN = (
        "asian",
        "Asian Food",
        "Sushi, sashimi, yakisoba, Thai, Chinese or Japanese dishes.",
    )
    CHEESE_BOARD = (
        "cheese_board",
        "Cheese & Charcuterie Board",
        "Selection of cheeses, cured meats, olives and accompaniments.",
    )
    VEGETARIAN = (
        "vegetarian",
        "Vegetarian Dish",
        "Grilled vegetables, hearty salads, quiches, pies or plant-based dishes.",
    )
    SPICY = (
        "spicy",
        "Spicy Food",
        "Dishes with bold, hot seasoning such as Mexican or Indian food.",
    )

    @property
    def is_red_meat_based(self) -> bool:
        return self in (MainDish.RED_MEAT, MainDish.BARBECUE)

    @property
    def is_light_dish(self) -> bool:
        return self in (MainDish.SEAFOOD, MainDish.VEGETARIAN, MainDish.ASIAN)

    @property
    def is_pasta_based(self) -> bool:
        return self in (
            MainDish.PASTA_RED_SAUCE,
            MainDish.PASTA_WHITE_SAUCE,
            MainDish.PIZZA,
            MainDish.RISOTTO,
        )

    @property
    def is_intense_flavored(self) -> bool:
        return self in (MainDish.SPICY, MainDish.BARBECUE)


class Occasion(LookupEnum):
    """Social occasion where the wine is served."""

    BUSINESS_MEETING = (
        "business_meeting",
        "Business Meeting",
        "Professional, formal setting that calls for safe and elegant choices.",
    )
    BUSINESS_LUNCH = (
        "business_lunch",
        "Business Lunch",
        "Lighter than a formal meeting but still corporate. "
        "Allows fresher, less intense wines.",
    )
    ROMANTIC_DINNER = (
        "romantic_dinner",
        "Romantic Dinner",
        "A special moment for two where elegance and sophistication matter.",
    )
    FIRST_DATE = (
        "first_date",
        "First Date",
        "Calls for versatile choices that please different palates.",
    )
    BIRTHDAY = (
        "birthday",
        "Birthday",
        "Personal, festive celebration that deserves special, memorable wines.",
    )
    CELEBRATION = (
        "celebration",
        "Celebration",
        "Festive, joyful moment, ideal for wines that feel celebratory.",
    )
    AMONG_FRIENDS = (
        "among_friends",
        "Among Friends",
        "Relaxed, informal setting that allows bolder and more varied choices.",
    )
    FAMILY_DINNER = (
        "family_dinner",
        "Family Dinner",
        "Family gathering that asks for pleasant wines everybody enjoys.",
    )
    BRUNCH_HAPPY_HOUR = (
        "brunch_happy_hour",
        "Brunch/Happy Hour",
        "Relaxed daytime or early evening moment. "
        "Favours light, fresh, easy-drinking wines.",
    )
    CASUAL = (
        "casual",
        "Casual Occasion",
        "Informal, carefree moment with no particular demands.",
    )


class IntimacyLevel(LookupEnum):
    """
    Closeness to the people present.

    The fourth member attribute is a risk tolerance on a 1-6 scale: the
    higher it is, the bolder the choice can be.
    """

    FIRST_DATE = (
        "first_date",
        "First Date",
        "Low intimacy that demands maximum safety. "
        "Prioritises versatile, widely pleasing wines.",
        1,
    )
    ACQUAINTANCE = (
        "acquaintance",
        "Acquaintance",
        "Shallow relationship that still requires conservative, safe choices. "
        "Some room for more interesting picks.",
        2,
    )
    DISTANT_FRIEND = (
        "distant_friend",
        "Distant Friend",
        "Established friendship without day-to-day closeness. "
        "Allows balanced choices with moderate safety.",
        3,
    )
    FRIEND = (
        "friend",
        "Friend",
        "Solid friendship with moderate comfort for varied choices. "
        "Good room for interesting wines.",
        4,
    )
    CLOSE_FRIEND = (
        "close_friend",
        "Close Friend",
        "High intimacy that allows bolder, more personal choices. "
        "Comfortable to experiment and take risks.",
        5,
    )
    FRIEND_REUNION = (
        "friend_reunion",
        "Friend You Are Seeing Again",
        "Reunion with a long-time friend. Shared history gives freedom. "
        "A special moment that welcomes striking choices.",
        5,
    )
    COWORKER = (
        "coworker",
        "Coworker",
        "Professional relationship that allows balanced choices while staying formal. "
        "Good room for classic, elegant wines.",
        3,
    )
    BOSS = (
        "boss",
        "Boss/Superior",
        "Hierarchical context that demands maximum formality and safety. "
        "Choices must be classic and beyond reproach.",
        2,
    )
    CLIENT_SUPPLIER = (
        "client_supplier",
        "Client/Supplier",
        "Business relationship that requires elegance, professionalism and safety. "
        "Wines should show good taste without being daring.",
        2,
    )
    INTIMATE_FAMILY = (
        "intimate_family",
        "Intimate/Family",
        "Maximum intimacy with complete freedom of choice. "
        "Any profile works, only the pairing matters.",
        6,
    )

    def __init__(self, key: str, display_name: str, description: str, risk_tolerance: int):
        super().__init__(key, display_name, description)
        self.risk_tolerance = risk_tolerance

    @property
    def allows_bold_choices(self) -> bool:
        return self.risk_tolerance >= AlgorithmConstants.BOLD_RISK_TOLERANCE

    @property
    def requires_max_safety(self) -> bool:
        return self.risk_tolerance <= AlgorithmConstants.MAX_SAFETY_RISK_TOLERANCE


# =======================
# ALGORITHM CONSTANTS
# =======================

class AlgorithmConstants:
    """Reference values for the decision engine."""

    # DIMENSION WEIGHTS (must sum to 1.0)
    # Dish drives the pairing, occasion sets formality, intimacy regulates risk
    DISH_WEIGHT = 0.50
    OCCASION_WEIGHT = 0.30
    INTIMACY_WEIGHT = 0.20

    # SELECTION
    # Max gap between 1st and 2nd place for the runner-up to be offered
    ALTERNATIVE_THRESHOLD = 10

    # CONFIDENCE BANDS (on the 1st-2nd margin)
    HIGH_CONFIDENCE_MARGIN = 16
    MEDIUM_CONFIDENCE_MARGIN = 6

    # SCORE SCALE for a single dimension table
    MIN_SCORE = 0
    MAX_SCORE = 50

    # Decimal places kept when comparing weighted totals and margins
    SCORE_PRECISION = 9

    # INTIMACY RISK TOLERANCE
    BOLD_RISK_TOLERANCE = 5
    MAX_SAFETY_RISK_TOLERANCE = 2
    SAFETY_FACTOR_SCALE = 5.0
    SAFE_SCORE_MAX_SAFETY = 15
    SAFE_SCORE_DEFAULT = 12


class ConfidenceBand(Enum):
    """Confidence bands with their value and lower margin bound."""

    HIGH = ("High", 1.0)
    MEDIUM = ("Medium", 0.7)
    LOW = ("Low", 0.4)

    def __init__(self, display: str, level: float):
        self.display = display
        self.level = level

    @classmethod
    def from_margin(
        cls,
        margin: Optional[float],
        high_margin: float = AlgorithmConstants.HIGH_CONFIDENCE_MARGIN,
        medium_margin: float = AlgorithmConstants.MEDIUM_CONFIDENCE_MARGIN,
    ) -> 'ConfidenceBand':
        """Get band from the gap between 1st and 2nd place (None = no runner-up)."""
        if margin is None or margin >= high_margin:
            return cls.HIGH
        elif margin >= medium_margin:
            return cls.MEDIUM
        else:
            return cls.LOW


# =======================
# SERVING
# =======================

class ServingConstants:
    """Serving temperature and glass per profile."""

    SUGGESTIONS = {
        WineProfile.FULL_BODIED_RED: "Serve at 16-18°C in a large red wine glass.",
        WineProfile.MEDIUM_RED: "Serve at 14-16°C in a red wine glass.",
        WineProfile.LIGHT_RED: "Serve at 14-16°C in a red wine glass.",
        WineProfile.STRUCTURED_WHITE: "Serve at 10-12°C in a white wine glass.",
        WineProfile.LIGHT_WHITE: "Serve well chilled, at 8-10°C, in a white wine glass.",
        WineProfile.ROSE: "Serve chilled, at 8-10°C, in a white wine or rosé glass.",
        WineProfile.SPARKLING: "Serve well chilled, at 6-8°C, in a flute.",
    }
