"""base class for rating update models"""
from abc import ABC, abstractmethod
from typing import List, Sequence


class RatingModel(ABC):
    """
    Base class for multiplayer rating update models. This class defines the single seam that
    the rate() facade calls into, so that different Bayesian approximations (Plackett-Luce,
    Bradley-Terry, ...) can be swapped in without changing the pipeline around them.

    Attributes:
        name (str): The name the model is registered under in plrate.models.
    """

    name: str

    @abstractmethod
    def update(
        self,
        aggregates: Sequence,
        ranks: Sequence[float],
        weights: Sequence[Sequence[float]],
        env,
    ) -> List[list]:
        """
        Computes new player ratings from the result of one match.

        Parameters:
            aggregates (Sequence[TeamAggregate]): One aggregate per team, in match order. Each carries
                                                  the team's summed means, summed variances and the team itself.
            ranks (Sequence[float]): One placement per team, lower is better and equal values are ties.
            weights (Sequence[Sequence[float]]): One credit fraction per player, same shape as the match.
            env (Environment): The constants to use (beta, epsilon, ...).

        Returns:
            list of lists of Rating: the updated ratings, same shape and order as the input teams.
        """
        raise NotImplementedError
