"""the functions most callers need: rate a match, keep ids attached, predict a winner"""
import logging
from typing import Optional, Sequence
from plrate.core.dynamics import inflate_sigma, limit_sigma_increase
from plrate.core.environment import DEFAULT_ENV, Environment
from plrate.core.rating import ordinal, rating
from plrate.models import get_model
from plrate.predict import predict_win
from plrate.utils.data_utils import (
    attach_ids,
    check_ranks,
    check_weights,
    default_ranks,
    default_weights,
    flatten_ids,
    normalize_match,
    strip_ids,
    team_aggregates,
)

logger = logging.getLogger(__name__)


def rate(
    match,
    weights: Optional[Sequence[Sequence[float]]] = None,
    ranks: Optional[Sequence[float]] = None,
    tau: Optional[float] = None,
    prevent_sigma_increase: Optional[bool] = None,
    model=None,
    env: Environment = DEFAULT_ENV,
):
    """
    Updates the ratings of every player in a match.

    Parameters:
        match: sequence of teams, each a sequence of (mu, sigma) pairs or Rating.
        weights (optional): per team, per player credit fraction. Defaults to 1 / team size.
        ranks (optional): one placement per team, lower is better, equal is a tie.
                          Defaults to the position of the team in match.
        tau (float, optional): process variance added before the update. Defaults to env.tau.
        prevent_sigma_increase (bool, optional): with tau > 0, cap each new sigma at its old value.
                                                 Defaults to env.prevent_sigma_increase.
        model (optional): name, class or instance of a RatingModel. Defaults to 'plackett_luce'.
        env (Environment, optional): constants for this call.

    Returns:
        list of lists of Rating with exactly the shape and player order of match.

    Raises:
        ArityMismatch: ranks or weights do not line up with the match.
        ShapeMismatch: the model returned ratings that can not be aligned with the input.
    """
    teams = normalize_match(match)
    if ranks is None:
        ranks = default_ranks(teams)
    if weights is None:
        weights = default_weights(teams)
    check_ranks(teams, ranks)
    check_weights(teams, weights)
    tau = env.tau if tau is None else tau
    if prevent_sigma_increase is None:
        prevent_sigma_increase = env.prevent_sigma_increase
    rating_model = get_model(model)

    inflated = inflate_sigma(teams, tau)
    aggregates = team_aggregates(inflated)
    output = rating_model.update(aggregates, ranks, weights, env)

    clamp = tau > 0.0 and prevent_sigma_increase
    if clamp:
        output = limit_sigma_increase(teams, output)
    logger.debug('rated %d teams with %s, tau=%s, sigma clamp %s', len(teams), rating_model.name, tau, clamp)
    return output


def rate_with_ids(match, as_map: bool = False, **options):
    """
    Same as rate() for teams of (id, rating) pairs, the ids ride along untouched.

    Parameters:
        match: sequence of teams, each a sequence of (id, rating) pairs.
        as_map (bool, optional): return one {id: Rating} dict instead of nested teams. Ids are
                                 expected to be unique across the match, a repeated id keeps
                                 the rating of its last occurrence.
        **options: forwarded to rate().

    Returns:
        list of lists of (id, Rating), or a dict when as_map is set.
    """
    ids, ratings = strip_ids(match)
    rated = attach_ids(ids, rate(ratings, **options))
    if as_map:
        return flatten_ids(rated)
    return rated


__all__ = ['ordinal', 'predict_win', 'rate', 'rate_with_ids', 'rating']
