"""process variance applied around an update"""
import math
from typing import List
from plrate.core.errors import ShapeMismatch
from plrate.core.rating import Rating, as_rating


def inflate_sigma(match, tau: float) -> List[List[Rating]]:
    """
    Models the drift of skill since a player's last match by adding tau^2 to every variance.

    Parameters:
        match: sequence of teams of (mu, sigma) pairs.
        tau (float): process standard deviation, 0 leaves every rating as it is.

    Returns:
        list of lists of Rating with sigma' = sqrt(sigma^2 + tau^2)
    """
    tau_squared = tau**2.0
    return [[Rating(mu, math.sqrt(sigma**2.0 + tau_squared)) for mu, sigma in map(as_rating, team)] for team in match]


def limit_sigma_increase(original, updated) -> List[List[Rating]]:
    """keep the updated mu but never let sigma end up above the rating it started from"""
    expected = tuple(len(team) for team in original)
    got = tuple(len(team) for team in updated)
    if expected != got:
        raise ShapeMismatch(expected, got)
    limited = []
    for old_team, new_team in zip(original, updated):
        limited_team = []
        for old, new in zip(map(as_rating, old_team), map(as_rating, new_team)):
            limited_team.append(Rating(new.mu, min(old.sigma, new.sigma)))
        limited.append(limited_team)
    return limited
