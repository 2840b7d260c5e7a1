"""Classes and functions for working with match data"""

from typing import Dict, Hashable, List, NamedTuple, Optional, Sequence, Tuple
import numpy as np
import polars as pl
from plrate.core.environment import DEFAULT_ENV, Environment
from plrate.core.errors import ArityMismatch
from plrate.core.rating import Rating, as_rating, ordinal


class TeamAggregate(NamedTuple):
    """summary of one team used by the update models, never stored"""

    mu_sum: float
    sigma_sq_sum: float
    team: Tuple[Rating, ...]
    team_index: int

    @property
    def mus(self) -> np.ndarray:
        return np.array([player.mu for player in self.team], dtype=np.float64)

    @property
    def sigma2s(self) -> np.ndarray:
        return np.array([player.sigma for player in self.team], dtype=np.float64) ** 2.0


def normalize_match(match) -> List[Tuple[Rating, ...]]:
    """copy a match into tuples of Rating, the caller's containers are never touched"""
    return [tuple(as_rating(player) for player in team) for team in match]


def match_shape(match) -> Tuple[int, ...]:
    """number of players in each team, the length of the tuple is the number of teams"""
    return tuple(len(team) for team in match)


def team_aggregates(match) -> List[TeamAggregate]:
    """reduce every team to (sum of mus, sum of sigma^2)"""
    aggregates = []
    for team_index, team in enumerate(match):
        team = tuple(as_rating(player) for player in team)
        mu_sum = float(sum(player.mu for player in team))
        sigma_sq_sum = float(sum(player.sigma**2.0 for player in team))
        aggregates.append(TeamAggregate(mu_sum, sigma_sq_sum, team, team_index))
    return aggregates


def default_weights(match) -> List[List[float]]:
    """split the credit of each team evenly between its players"""
    return [[1.0 / len(team)] * len(team) if team else [] for team in match]


def default_ranks(match) -> List[int]:
    """the order of the teams in the match is their placement, position 0 is the winner"""
    return list(range(len(match)))


def check_ranks(match, ranks: Sequence[float]):
    if len(ranks) != len(match):
        raise ArityMismatch('ranks', (len(match),), (len(ranks),))


def check_weights(match, weights: Sequence[Sequence[float]]):
    expected = match_shape(match)
    got = tuple(len(team_weights) for team_weights in weights)
    if got != expected:
        raise ArityMismatch('weights', expected, got)


def strip_ids(match_with_ids) -> Tuple[List[list], List[list]]:
    """
    Splits a match of (id, rating) pairs into a match of ratings and the matching nested list of ids.

    Parameters:
        match_with_ids: sequence of teams, each a sequence of (id, rating) pairs.

    Returns:
        (ids, match): both nested lists with the shape of the input.
    """
    ids, match = [], []
    for team in match_with_ids:
        team_ids, team_ratings = [], []
        for player_id, player_rating in team:
            team_ids.append(player_id)
            team_ratings.append(player_rating)
        ids.append(team_ids)
        match.append(team_ratings)
    return ids, match


def attach_ids(ids, rated_match) -> List[List[Tuple[Hashable, Rating]]]:
    """zip ids back onto rated teams position for position"""
    return [list(zip(team_ids, team)) for team_ids, team in zip(ids, rated_match)]


def flatten_ids(match_with_ids) -> Dict[Hashable, Rating]:
    """one {id: rating} dict for the whole match, a repeated id keeps its last rating"""
    return {player_id: player_rating for team in match_with_ids for player_id, player_rating in team}


def leaderboard(
    ratings_by_id: Dict[Hashable, Rating],
    env: Environment = DEFAULT_ENV,
    num_places: Optional[int] = None,
) -> pl.DataFrame:
    """
    Sorted view of a set of ratings, best ordinal first.

    Parameters:
        ratings_by_id (dict): competitor id -> rating.
        env (Environment, optional): supplies z for the ordinal.
        num_places (int, optional): keep only this many rows.

    Returns:
        pl.DataFrame with columns competitor, mu, sigma, ordinal
    """
    competitors = list(ratings_by_id.keys())
    ratings = [as_rating(value) for value in ratings_by_id.values()]
    df = pl.DataFrame(
        {
            'competitor': [str(competitor) for competitor in competitors],
            'mu': [value.mu for value in ratings],
            'sigma': [value.sigma for value in ratings],
            'ordinal': [ordinal(value, env=env) for value in ratings],
        },
        schema={'competitor': pl.Utf8, 'mu': pl.Float64, 'sigma': pl.Float64, 'ordinal': pl.Float64},
    )
    df = df.sort('ordinal', descending=True)
    if num_places is not None:
        df = df.head(num_places)
    return df
