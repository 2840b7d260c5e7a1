"""the Rating value type and the scalar queries on it"""
from typing import NamedTuple, Optional
from plrate.core.environment import DEFAULT_ENV, Environment


class Rating(NamedTuple):
    """A belief about one player's skill: a gaussian with mean mu and standard deviation sigma."""

    mu: float
    sigma: float


def as_rating(value) -> Rating:
    """coerce any (mu, sigma) pair into a Rating"""
    if isinstance(value, Rating):
        return value
    mu, sigma = value
    return Rating(float(mu), float(sigma))


def rating(mu: Optional[float] = None, sigma: Optional[float] = None, env: Environment = DEFAULT_ENV) -> Rating:
    """
    Creates a rating, filling omitted fields from the environment.

    Parameters:
        mu (float, optional): mean skill. Defaults to env.mu.
        sigma (float, optional): skill uncertainty. Defaults to env.sigma.
        env (Environment, optional): where the defaults come from.

    Returns:
        Rating
    """
    return Rating(
        env.mu if mu is None else float(mu),
        env.sigma if sigma is None else float(sigma),
    )


def ordinal(value, env: Environment = DEFAULT_ENV) -> float:
    """conservative skill estimate mu - z * sigma, used as a leaderboard sort key"""
    mu, sigma = value
    return mu - env.z * sigma
