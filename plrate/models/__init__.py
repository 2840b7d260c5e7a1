"""
Models Module
=============

This module contains the update models that turn the result of one multiplayer match into new
player ratings. Every model implements plrate.core.base.RatingModel and is selected by passing its
name (or an instance) as the model option of plrate.rate().

Included Rating Models:
- Plackett-Luce: Weng and Lin's Bayesian approximation of the Plackett-Luce ranking model, the default.
- Bradley-Terry Full: Weng and Lin's logistic pairwise model applied to every pair of teams.
"""
from plrate.core.base import RatingModel
from plrate.core.errors import ConfigurationError
from plrate.models.bradley_terry_full import BradleyTerryFull
from plrate.models.plackett_luce import PlackettLuce

MODELS = {
    PlackettLuce.name: PlackettLuce,
    BradleyTerryFull.name: BradleyTerryFull,
}

DEFAULT_MODEL = PlackettLuce.name


def get_model(model=None) -> RatingModel:
    """resolve a model name, class or instance to a RatingModel instance"""
    if model is None:
        model = DEFAULT_MODEL
    if isinstance(model, RatingModel):
        return model
    if isinstance(model, type) and issubclass(model, RatingModel):
        return model()
    if not isinstance(model, str) or model not in MODELS:
        raise ConfigurationError('model', f'unknown model {model!r}, expected one of {sorted(MODELS)}')
    return MODELS[model]()


__all__ = ['BradleyTerryFull', 'DEFAULT_MODEL', 'MODELS', 'PlackettLuce', 'get_model']
