"""math utility functions for rating models"""
import numpy as np
from scipy.special import expit
from scipy.stats import norm


def sigmoid(x):
    """logistic function, works on scalars and on the k x k matrices of team mean gaps"""
    return expit(x)


def norm_cdf(x):
    """cdf of standard normal"""
    return norm.cdf(x)


def pairwise_scores(ranks: np.ndarray) -> np.ndarray:
    """
    Observed outcome of every ordered pair of teams from their placements.

    Parameters:
        ranks (np.ndarray of shape (k,)): lower is better, equal values are ties.

    Returns:
        np.ndarray of shape (k, k): entry [i, q] is 1.0 if i placed better than q, 0.0 if worse
        and 0.5 on a tie. The diagonal is 0.5 and is expected to be masked by the caller.
    """
    diffs = ranks[:, None] - ranks[None, :]
    scores = np.full(diffs.shape, 0.5)
    scores[diffs < 0] = 1.0
    scores[diffs > 0] = 0.0
    return scores


def off_diagonal_mask(k: int) -> np.ndarray:
    """boolean k x k mask selecting the pairs of distinct teams"""
    return ~np.eye(k, dtype=np.bool_)
