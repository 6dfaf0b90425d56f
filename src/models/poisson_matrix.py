"""Poisson scoreline matrix built from historical team strengths."""
import logging
import math
from operator import attrgetter
from typing import Callable, Sequence

import numpy as np

from src.models.base import Calculator
from src.models.errors import InvalidInputError
from src.models.match import Match, MatchProbability

logger = logging.getLogger(__name__)

DEFAULT_GOAL_LIMIT = 5

home_goals_of = attrgetter("home_goals")
away_goals_of = attrgetter("away_goals")


class PoissonCalculator(Calculator):
    """Calculate scoreline probabilities with independent Poisson processes.

    Each side's expected goals come from its attack strength, the opponent's
    defensive strength and a base scoring rate, all measured against league
    averages over the supplied past matches.

    Divisions follow IEEE float semantics: a zero league average yields
    ``inf`` or ``NaN`` strengths instead of raising. Set ``guard_zero_average``
    to substitute ``zero_average_default`` for zero league averages.
    """

    def __init__(
        self,
        goal_limit: int = DEFAULT_GOAL_LIMIT,
        guard_zero_average: bool = False,
        zero_average_default: float = 1.0,
    ):
        if goal_limit < 0:
            raise InvalidInputError(f"goal_limit must be >= 0, got {goal_limit}")

        self.goal_limit = goal_limit
        self.guard_zero_average = guard_zero_average
        self.zero_average_default = zero_average_default

    @classmethod
    def from_settings(cls, calculator_settings) -> "PoissonCalculator":
        """Build a calculator from ``CalculatorSettings``."""
        return cls(
            goal_limit=calculator_settings.goal_limit,
            guard_zero_average=calculator_settings.guard_zero_average,
            zero_average_default=calculator_settings.zero_average_default,
        )

    def compute_all(
        self,
        future_matches: Sequence[Match],
        past_matches: Sequence[Match],
    ) -> list[MatchProbability]:
        """Compute a probability grid for each future match, in input order.

        Raises:
            InvalidInputError: If either match collection is None.
        """
        if future_matches is None:
            raise InvalidInputError("future_matches is required")
        if past_matches is None:
            raise InvalidInputError("past_matches is required")

        logger.info(
            f"Computing probabilities for {len(future_matches)} fixtures "
            f"from {len(past_matches)} past matches"
        )

        return [self.compute_one(match, past_matches) for match in future_matches]

    def compute_one(self, match: Match, past_matches: Sequence[Match]) -> MatchProbability:
        """Compute the full scoreline grid for a single fixture."""
        if past_matches is None:
            raise InvalidInputError("past_matches is required")

        home_xg = self.expected_home_goals(match.home_team, match.away_team, past_matches)
        away_xg = self.expected_away_goals(match.home_team, match.away_team, past_matches)

        if not (math.isfinite(home_xg) and math.isfinite(away_xg)):
            logger.warning(
                f"Non-finite expected goals for {match.home_team} vs {match.away_team}: "
                f"home={home_xg}, away={away_xg}"
            )
        else:
            logger.debug(
                f"{match.home_team} vs {match.away_team}: "
                f"home_xg={home_xg:.3f}, away_xg={away_xg:.3f}"
            )

        return MatchProbability(
            home_team=match.home_team,
            away_team=match.away_team,
            score_probability=self._build_matrix(home_xg, away_xg),
        )

    def _build_matrix(self, home_xg: float, away_xg: float) -> np.ndarray:
        """Build probability matrix for all scorelines up to the goal limit."""
        goals = range(self.goal_limit + 1)
        p_home = np.array([self.poisson_probability(h, home_xg) for h in goals])
        p_away = np.array([self.poisson_probability(a, away_xg) for a in goals])

        # Independent Poisson probabilities
        with np.errstate(invalid="ignore", over="ignore"):
            matrix = np.outer(p_home, p_away)

        matrix.setflags(write=False)
        return matrix

    @staticmethod
    def poisson_probability(goals: int, expected_goals: float) -> float:
        """Probability of scoring exactly ``goals`` given ``expected_goals``.

        ``lambda**k * e**-lambda / k!``. NaN and infinite rates propagate.
        """
        with np.errstate(invalid="ignore", over="ignore"):
            probability = (
                np.power(np.float64(expected_goals), goals)
                * np.exp(-np.float64(expected_goals))
                / PoissonCalculator.factorial(goals)
            )
        return float(probability)

    @staticmethod
    def factorial(n: int) -> int:
        """Factorial for goal counts; anything below 2 maps to 1."""
        if n <= 1:
            return 1
        return math.factorial(n)

    def expected_home_goals(self, home: str, away: str, matches: Sequence[Match]) -> float:
        """Home attack x away defence x home side's own scoring rate at home."""
        attack = self.home_attack_strength(home, matches)
        defence = self.away_defensive_strength(away, matches)

        home_matches = [m for m in matches if m.home_team == home]
        base_rate = self.average_goals_scored_at_home(home_matches)

        return attack * defence * base_rate

    def expected_away_goals(self, home: str, away: str, matches: Sequence[Match]) -> float:
        """Away attack x home defence x home-goals average over the away side's away matches.

        The base rate deliberately reuses the scored-at-home aggregator, so it
        measures goals conceded by the away side on its travels.
        """
        attack = self.away_attack_strength(away, matches)
        defence = self.home_defensive_strength(home, matches)

        away_matches = [m for m in matches if m.away_team == away]
        base_rate = self.average_goals_scored_at_home(away_matches)

        return attack * defence * base_rate

    def home_attack_strength(self, team: str, matches: Sequence[Match]) -> float:
        """Team's average goals scored at home / league average goals scored at home."""
        league_average = self.average_goals_scored_at_home(matches)
        team_matches = [m for m in matches if m.home_team == team]
        return self._strength(self.average_goals_scored_at_home(team_matches), league_average)

    def away_attack_strength(self, team: str, matches: Sequence[Match]) -> float:
        """Team's average goals scored away / league average goals scored away."""
        league_average = self.average_goals_scored_away(matches)
        team_matches = [m for m in matches if m.away_team == team]
        return self._strength(self.average_goals_scored_away(team_matches), league_average)

    def home_defensive_strength(self, team: str, matches: Sequence[Match]) -> float:
        """Team's average goals conceded at home / league average conceded at home."""
        league_average = self.average_goals_conceded_at_home(matches)
        team_matches = [m for m in matches if m.home_team == team]
        return self._strength(self.average_goals_conceded_at_home(team_matches), league_average)

    def away_defensive_strength(self, team: str, matches: Sequence[Match]) -> float:
        """Team's average goals conceded away / league average conceded away."""
        league_average = self.average_goals_conceded_away(matches)
        team_matches = [m for m in matches if m.away_team == team]
        return self._strength(self.average_goals_conceded_away(team_matches), league_average)

    def _strength(self, team_average: float, league_average: float) -> float:
        """Ratio of a team average to the league average, IEEE division."""
        if self.guard_zero_average and league_average == 0:
            league_average = self.zero_average_default

        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(team_average) / np.float64(league_average))

    def average_goals_scored_at_home(self, matches: Sequence[Match]) -> float:
        return self.average_goals(matches, home_goals_of)

    def average_goals_scored_away(self, matches: Sequence[Match]) -> float:
        return self.average_goals(matches, away_goals_of)

    def average_goals_conceded_at_home(self, matches: Sequence[Match]) -> float:
        # Conceded at home is whatever the visitors scored
        return self.average_goals_scored_away(matches)

    def average_goals_conceded_away(self, matches: Sequence[Match]) -> float:
        return self.average_goals_scored_at_home(matches)

    @staticmethod
    def average_goals(
        matches: Sequence[Match],
        selector: Callable[[Match], int],
    ) -> float:
        """Mean of ``selector`` over ``matches``, 0.0 when there are none."""
        if not matches:
            return 0.0

        goal_sum = sum(selector(m) for m in matches)
        return goal_sum / len(matches)


# Singleton instance
poisson_calc = PoissonCalculator()
