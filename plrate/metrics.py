"""how well predict_win() anticipated a series of two team matches"""
from typing import Dict, Hashable, Tuple
import numpy as np
from plrate.api import rate_with_ids
from plrate.core.environment import DEFAULT_ENV, Environment
from plrate.core.rating import Rating, as_rating
from plrate.predict import predict_win

# ranks handed to rate() for a result seen from the first team
OUTCOME_RANKS = {1.0: [0, 1], 0.0: [1, 0], 0.5: [0, 0]}


def _check_outcomes(outcomes, num_matches: int) -> np.ndarray:
    outcomes = np.asarray(outcomes, dtype=np.float64)
    if outcomes.shape != (num_matches,):
        raise ValueError(f'got {outcomes.shape[0] if outcomes.ndim else 0} outcomes for {num_matches} matches')
    if num_matches == 0:
        raise ValueError('cannot score an empty series of matches')
    if not np.isin(outcomes, list(OUTCOME_RANKS)).all():
        raise ValueError('outcomes must be 1.0 (first team won), 0.0 (first team lost) or 0.5 (draw)')
    return outcomes


def prediction_scores(probs: np.ndarray, outcomes: np.ndarray, eps: float = 1e-6) -> Dict[str, float]:
    """
    Compares the first team's win probability with what happened.

    Parameters:
        probs (np.ndarray): predicted probability that the first team wins each match.
        outcomes (np.ndarray): 1.0, 0.0 or 0.5 for each match, from the first team's side.
        eps (float, optional): probabilities are clipped to [eps, 1 - eps] before taking logs.

    Returns:
        dict with accuracy (an even call or a draw earns half a point), log_loss and brier_score
    """
    probs = np.asarray(probs, dtype=np.float64)
    outcomes = np.asarray(outcomes, dtype=np.float64)
    called = np.sign(probs - 0.5) * 0.5 + 0.5  # 1.0, 0.5 or 0.0
    hits = 1.0 - np.abs(called - outcomes)
    clipped = np.clip(probs, eps, 1.0 - eps)
    log_loss = -(outcomes * np.log(clipped) + (1.0 - outcomes) * np.log1p(-clipped))
    return {
        'accuracy': float(np.where(called == 0.5, 0.5, hits).mean()),
        'log_loss': float(log_loss.mean()),
        'brier_score': float(np.mean((probs - outcomes) ** 2.0)),
    }


def score_matches(matches, outcomes, env: Environment = DEFAULT_ENV) -> Dict[str, float]:
    """score predict_win() on two team matches whose ratings are already the pre-match ratings"""
    matches = list(matches)
    outcomes = _check_outcomes(outcomes, len(matches))
    probs = np.array([predict_win(match, env=env)[0] for match in matches], dtype=np.float64)
    return prediction_scores(probs, outcomes)


def replay_matches(
    matches_with_ids, outcomes, env: Environment = DEFAULT_ENV, **options
) -> Tuple[Dict[str, float], Dict[Hashable, Rating]]:
    """
    Plays a series of two team matches in order: each one is predicted with the current ratings
    and then rated, so later predictions see the results of earlier matches.

    Parameters:
        matches_with_ids: two team matches of (id, rating) pairs. The rating given for an id is
                          only used the first time the id shows up.
        outcomes: 1.0, 0.0 or 0.5 for each match, from the first team's side.
        env (Environment, optional): constants for every prediction and update.
        **options: forwarded to rate(), ranks is derived from the outcome.

    Returns:
        (scores, ratings_by_id): prediction_scores() of the series and the final rating of every id.
    """
    matches_with_ids = list(matches_with_ids)
    outcomes = _check_outcomes(outcomes, len(matches_with_ids))
    current = {}
    probs = np.empty(len(matches_with_ids), dtype=np.float64)
    for idx, (match, outcome) in enumerate(zip(matches_with_ids, outcomes)):
        match = [[(player_id, current.get(player_id, as_rating(player))) for player_id, player in team] for team in match]
        probs[idx] = predict_win([[player for _, player in team] for team in match], env=env)[0]
        current.update(rate_with_ids(match, as_map=True, ranks=OUTCOME_RANKS[float(outcome)], env=env, **options))
    return prediction_scores(probs, outcomes), current
