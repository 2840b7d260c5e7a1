"""
Plackett-Luce model from "A Bayesian Approximation Method for Online Ranking" (Weng and Lin, 2011)
https://jmlr.csail.mit.edu/papers/volume12/weng11a/weng11a.pdf
"""
import math
import numpy as np
from plrate.core.base import RatingModel
from plrate.core.rating import Rating
from plrate.utils.math_utils import sigmoid, pairwise_scores, off_diagonal_mask


class PlackettLuce(RatingModel):
    """
    Bayesian approximation of the Plackett-Luce generalized Bradley-Terry model.

    All teams share one field scale c = sqrt(sum of team variances + k * beta^2), and every
    ordered pair of teams contributes the gap between its observed result and the Luce choice
    probability exp(mu_i / c) / (exp(mu_i / c) + exp(mu_q / c)).
    """

    name = 'plackett_luce'

    def update(self, aggregates, ranks, weights, env):
        num_teams = len(aggregates)
        if num_teams == 0:
            return []

        mu_sums = np.array([agg.mu_sum for agg in aggregates], dtype=np.float64)
        sigma_sq_sums = np.array([agg.sigma_sq_sum for agg in aggregates], dtype=np.float64)
        ranks = np.asarray(ranks, dtype=np.float64)

        combined_sigma2 = sigma_sq_sums.sum() + num_teams * env.beta_squared
        combined_dev = math.sqrt(combined_sigma2)

        # probs[i, q] = e^(mu_i/c) / (e^(mu_i/c) + e^(mu_q/c))
        probs = sigmoid((mu_sums[:, None] - mu_sums[None, :]) / combined_dev)
        scores = pairwise_scores(ranks)
        mask = off_diagonal_mask(num_teams)

        omegas = np.where(mask, scores - probs, 0.0).sum(axis=1)
        deltas = np.where(mask, probs * (1.0 - probs), 0.0).sum(axis=1)
        gammas = np.sqrt(sigma_sq_sums) / combined_dev

        new_teams = []
        for team_idx, agg in enumerate(aggregates):
            mus = agg.mus
            sigma2s = agg.sigma2s
            team_weights = np.asarray(weights[team_idx], dtype=np.float64)

            new_mus = mus + (sigma2s / combined_dev) * team_weights * omegas[team_idx]
            etas = (team_weights * sigma2s / combined_sigma2) * gammas[team_idx] * deltas[team_idx]
            sigma_multipliers = np.sqrt(np.maximum(1.0 - etas, env.epsilon))
            new_sigmas = np.sqrt(sigma2s) * sigma_multipliers

            new_teams.append([Rating(float(mu), float(sigma)) for mu, sigma in zip(new_mus, new_sigmas)])
        return new_teams
