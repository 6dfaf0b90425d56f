"""Match records consumed and produced by the calculators."""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Match:
    """A historical result or a scheduled fixture.

    Goals are only meaningful for matches that have already been played.
    """
    home_team: str
    away_team: str
    home_goals: int = 0
    away_goals: int = 0


@dataclass(frozen=True, eq=False)
class MatchProbability:
    """Scoreline probabilities for one fixture."""
    home_team: str
    away_team: str
    score_probability: np.ndarray  # 2D probability grid [home_goals][away_goals]

    @property
    def goal_limit(self) -> int:
        """Highest goal count represented on either axis."""
        return self.score_probability.shape[0] - 1

    def probability(self, home_goals: int, away_goals: int) -> float:
        """Probability of the fixture ending exactly home_goals - away_goals."""
        return float(self.score_probability[home_goals, away_goals])
