"""
Wine Selector Configuration
Centralized settings for the decision engine
"""

import os
from typing import Optional

import numpy as np
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from wineselector.constants import AlgorithmConstants
from wineselector.error_handling import ConfigurationError


class EngineConfig(BaseModel):
    """
    Read-only engine settings, built once and injected into the rules
    and the score calculator.
    """

    model_config = ConfigDict(frozen=True)

    dish_weight: float = Field(AlgorithmConstants.DISH_WEIGHT, gt=0, le=1, description="Dish dimension weight")
    occasion_weight: float = Field(AlgorithmConstants.OCCASION_WEIGHT, gt=0, le=1, description="Occasion dimension weight")
    intimacy_weight: float = Field(AlgorithmConstants.INTIMACY_WEIGHT, gt=0, le=1, description="Intimacy dimension weight")

    alternative_threshold: float = Field(
        AlgorithmConstants.ALTERNATIVE_THRESHOLD, ge=0,
        description="Max 1st-2nd gap for offering the runner-up"
    )
    high_confidence_margin: float = Field(AlgorithmConstants.HIGH_CONFIDENCE_MARGIN, gt=0)
    medium_confidence_margin: float = Field(AlgorithmConstants.MEDIUM_CONFIDENCE_MARGIN, gt=0)

    @model_validator(mode='after')
    def _check_consistency(self) -> 'EngineConfig':
        total = self.dish_weight + self.occasion_weight + self.intimacy_weight
        if not np.isclose(total, 1.0):
            raise ValueError(f"dimension weights must sum to 1.0, got {total:.4f}")
        if self.medium_confidence_margin >= self.high_confidence_margin:
            raise ValueError("medium_confidence_margin must be below high_confidence_margin")
        return self

    @property
    def total_weight(self) -> float:
        return self.dish_weight + self.occasion_weight + self.intimacy_weight


DEFAULT_CONFIG = EngineConfig()

# Environment variable -> EngineConfig field
ENV_OVERRIDES = {
    "WINESELECTOR_DISH_WEIGHT": "dish_weight",
    "WINESELECTOR_OCCASION_WEIGHT": "occasion_weight",
    "WINESELECTOR_INTIMACY_WEIGHT": "intimacy_weight",
    "WINESELECTOR_ALTERNATIVE_THRESHOLD": "alternative_threshold",
}


def load_config(env_file: Optional[str] = None) -> EngineConfig:
    """
    Build an EngineConfig from the environment.

    Reads a .env file first (values already in the environment win), then
    applies any WINESELECTOR_* override on top of the reference values.

    Args:
        env_file: Optional path to a .env file

    Returns:
        Validated EngineConfig

    Raises:
        ConfigurationError: if an override is not a number or the result is inconsistent
    """
    load_dotenv(env_file)

    overrides = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        try:
            overrides[field_name] = float(raw)
        except ValueError as e:
            raise ConfigurationError(f"{env_name} must be a number, got {raw!r}") from e

    if not overrides:
        return DEFAULT_CONFIG

    try:
        return EngineConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid engine configuration: {e}") from e
