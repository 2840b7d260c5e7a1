"""Weng/Lin Bayesian Online Rating system, Bradley Terry edition with every pair of teams compared"""
import numpy as np
from plrate.core.base import RatingModel
from plrate.core.rating import Rating
from plrate.utils.math_utils import sigmoid, pairwise_scores, off_diagonal_mask


class BradleyTerryFull(RatingModel):
    """
    The logistic pairwise model of Weng and Lin applied to all k(k-1) ordered pairs of teams.

    Unlike PlackettLuce each pair gets its own combined deviation
    c_iq = sqrt(sigma2_i + sigma2_q + 2 * beta^2), and a player's share of the team update is
    its fraction of the team variance.
    """

    name = 'bradley_terry_full'

    def update(self, aggregates, ranks, weights, env):
        num_teams = len(aggregates)
        if num_teams == 0:
            return []

        mu_sums = np.array([agg.mu_sum for agg in aggregates], dtype=np.float64)
        sigma_sq_sums = np.array([agg.sigma_sq_sum for agg in aggregates], dtype=np.float64)
        ranks = np.asarray(ranks, dtype=np.float64)

        combined_sigma2s = sigma_sq_sums[:, None] + sigma_sq_sums[None, :] + 2.0 * env.beta_squared
        combined_devs = np.sqrt(combined_sigma2s)
        probs = sigmoid((mu_sums[:, None] - mu_sums[None, :]) / combined_devs)
        scores = pairwise_scores(ranks)
        mask = off_diagonal_mask(num_teams)

        omegas = np.where(mask, (sigma_sq_sums[:, None] / combined_devs) * (scores - probs), 0.0).sum(axis=1)
        gammas = np.sqrt(sigma_sq_sums)[:, None] / combined_devs
        etas = gammas * (sigma_sq_sums[:, None] / combined_sigma2s) * (probs * (1.0 - probs))
        deltas = np.where(mask, etas, 0.0).sum(axis=1)

        new_teams = []
        for team_idx, agg in enumerate(aggregates):
            mus = agg.mus
            sigma2s = agg.sigma2s
            team_weights = np.asarray(weights[team_idx], dtype=np.float64)
            # only an empty team has zero variance and it has no players to update
            shares = team_weights * sigma2s / agg.sigma_sq_sum if agg.team else sigma2s

            new_mus = mus + shares * omegas[team_idx]
            sigma_multipliers = np.sqrt(np.maximum(1.0 - shares * deltas[team_idx], env.epsilon))
            new_sigmas = np.sqrt(sigma2s) * sigma_multipliers

            new_teams.append([Rating(float(mu), float(sigma)) for mu, sigma in zip(new_mus, new_sigmas)])
        return new_teams
