"""Pydantic schemas for Wine Selector requests and responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from wineselector.constants import IntimacyLevel, MainDish, Occasion, WineProfile


class RecommendationRequest(BaseModel):
    """The three inputs of a recommendation.

    Accepts enum members or any spelling LookupEnum.parse understands
    ('red meat', 'RED_MEAT', 'Red Meat').
    """

    model_config = ConfigDict(frozen=True)

    dish: MainDish = Field(..., description="Main dish being served")
    occasion: Occasion = Field(..., description="Social occasion")
    intimacy_level: IntimacyLevel = Field(..., description="Closeness to the people present")

    @field_validator('dish', mode='before')
    @classmethod
    def _parse_dish(cls, value):
        return MainDish.parse(value)

    @field_validator('occasion', mode='before')
    @classmethod
    def _parse_occasion(cls, value):
        return Occasion.parse(value)

    @field_validator('intimacy_level', mode='before')
    @classmethod
    def _parse_intimacy(cls, value):
        return IntimacyLevel.parse(value)

    @field_serializer('dish', 'occasion', 'intimacy_level')
    def _serialize_member(self, member) -> str:
        return member.key

    def __str__(self) -> str:
        return (
            f"Request[occasion={self.occasion.display_name}, "
            f"intimacy={self.intimacy_level.display_name}, dish={self.dish.display_name}]"
        )


class RecommendationResponse(BaseModel):
    """Recommendation shaped for display. Alternative fields are only set for a close second."""

    recommended_profile: str = Field(..., description="WineProfile key, e.g. medium_red")
    display_name: str
    description: str
    justification: str = Field(..., description="Why this profile fits the request")
    score: int = Field(..., ge=0, description="Final score, rounded half up")
    confidence: float = Field(..., ge=0.0, le=1.0)
    serving_suggestion: str

    alternative_profile: Optional[str] = None
    alternative_display_name: Optional[str] = None
    alternative_description: Optional[str] = None
    alternative_score: Optional[int] = Field(None, ge=0)

    @classmethod
    def build(
        cls,
        profile: WineProfile,
        score: int,
        justification: str,
        confidence: float,
        serving_suggestion: str,
        alternative: Optional[WineProfile] = None,
        alternative_score: Optional[int] = None,
    ) -> 'RecommendationResponse':
        data = dict(
            recommended_profile=profile.key,
            display_name=profile.display_name,
            description=profile.description,
            justification=justification,
            score=score,
            confidence=confidence,
            serving_suggestion=serving_suggestion,
        )
        if alternative is not None:
            data.update(
                alternative_profile=alternative.key,
                alternative_display_name=alternative.display_name,
                alternative_description=alternative.description,
                alternative_score=alternative_score,
            )
        return cls(**data)

    @property
    def has_alternative(self) -> bool:
        return self.alternative_profile is not None

    def to_json(self) -> str:
        """JSON without the empty alternative fields."""
        return self.model_dump_json(exclude_none=True, indent=2)
