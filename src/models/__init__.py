"""Scoreline probability models."""
from src.models.base import Calculator
from src.models.errors import CalculatorError, InvalidInputError
from src.models.match import Match, MatchProbability
from src.models.poisson_matrix import DEFAULT_GOAL_LIMIT, PoissonCalculator, poisson_calc

__all__ = [
    "Calculator",
    "CalculatorError",
    "InvalidInputError",
    "Match",
    "MatchProbability",
    "DEFAULT_GOAL_LIMIT",
    "PoissonCalculator",
    "poisson_calc",
]
