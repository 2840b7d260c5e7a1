"""
plrate
======

Online skill ratings for multiplayer matches, using Weng and Lin's Bayesian approximation of the
Plackett-Luce model. Every operation is a pure function of its arguments:

    import plrate
    winner, loser = plrate.rating(), plrate.rating()
    [[winner], [loser]] = plrate.rate([[winner], [loser]])
    probs = plrate.predict_win([[winner], [loser]])
"""
from plrate.api import rate, rate_with_ids
from plrate.core.environment import DEFAULT_ENV, Environment
from plrate.core.errors import ArityMismatch, ConfigurationError, InvalidMatchSize, PlrateError, ShapeMismatch
from plrate.core.rating import Rating, ordinal, rating
from plrate.models import BradleyTerryFull, PlackettLuce, get_model
from plrate.predict import predict_win
from plrate.utils.data_utils import leaderboard

__all__ = [
    'ArityMismatch',
    'BradleyTerryFull',
    'ConfigurationError',
    'DEFAULT_ENV',
    'Environment',
    'InvalidMatchSize',
    'PlackettLuce',
    'PlrateError',
    'Rating',
    'ShapeMismatch',
    'get_model',
    'leaderboard',
    'ordinal',
    'predict_win',
    'rate',
    'rate_with_ids',
    'rating',
]
