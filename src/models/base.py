"""Calculator interface."""
import abc
from typing import Sequence

from src.models.match import Match, MatchProbability


class Calculator(abc.ABC):
    """Turns historical results into scoreline probabilities for fixtures."""

    @abc.abstractmethod
    def compute_all(
        self,
        future_matches: Sequence[Match],
        past_matches: Sequence[Match],
    ) -> list[MatchProbability]:
        """Compute probabilities for every fixture, preserving input order."""

    @abc.abstractmethod
    def compute_one(
        self,
        match: Match,
        past_matches: Sequence[Match],
    ) -> MatchProbability:
        """Compute the probability grid for a single fixture."""
