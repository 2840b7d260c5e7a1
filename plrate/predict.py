"""win probabilities for hypothetical matchups"""
from typing import List
import numpy as np
from plrate.core.environment import DEFAULT_ENV, Environment
from plrate.core.errors import InvalidMatchSize
from plrate.utils.data_utils import team_aggregates
from plrate.utils.math_utils import norm_cdf, off_diagonal_mask


def predict_win(match, env: Environment = DEFAULT_ENV) -> List[float]:
    """
    Generates the probability of each team winning the given matchup.

    Each team is compared with every other team through the normal cdf of its mean advantage
    scaled by the combined deviation sqrt(n * beta^2 + sigma2_a + sigma2_q), and the pairwise
    probabilities are averaged over the n(n-1)/2 pairs in the match.

    Parameters:
        match: sequence of teams of (mu, sigma) pairs, no ranks are needed.
        env (Environment, optional): supplies beta.

    Returns:
        list of float: one probability per team in match order.
    """
    num_teams = len(match)
    if num_teams < 2:
        raise InvalidMatchSize(num_teams)

    aggregates = team_aggregates(match)
    mu_sums = np.array([agg.mu_sum for agg in aggregates], dtype=np.float64)
    sigma_sq_sums = np.array([agg.sigma_sq_sum for agg in aggregates], dtype=np.float64)

    combined_devs = np.sqrt(num_teams * env.beta_squared + sigma_sq_sums[:, None] + sigma_sq_sums[None, :])
    pair_probs = norm_cdf((mu_sums[:, None] - mu_sums[None, :]) / combined_devs)
    denom = num_teams * (num_teams - 1) / 2.0
    probs = np.where(off_diagonal_mask(num_teams), pair_probs, 0.0).sum(axis=1) / denom
    return [float(prob) for prob in probs]
