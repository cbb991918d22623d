"""Wine Selector - pick a wine style for the dish, the occasion and the company."""

from wineselector.constants import IntimacyLevel, MainDish, Occasion, WineProfile
from wineselector.recommendation import (
    RecommendationService,
    calculation_report,
    confidence,
    recommend,
)
from wineselector.score_calculator import Decision, Ranking, ScoreCalculator

__version__ = "0.1.0"

__all__ = [
    'RecommendationService',
    'ScoreCalculator',
    'Decision',
    'Ranking',
    'WineProfile',
    'MainDish',
    'Occasion',
    'IntimacyLevel',
    'recommend',
    'calculation_report',
    'confidence',
    '__version__',
]
