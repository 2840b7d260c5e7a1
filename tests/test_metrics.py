import math
import pytest
from plrate import predict_win, rate, rating
from plrate.metrics import prediction_scores, score_matches, replay_matches


def test_known_values():
    scores = prediction_scores([0.9, 0.2], [1.0, 0.0])
    assert scores['accuracy'] == pytest.approx(1.0)
    assert scores['brier_score'] == pytest.approx(0.025)
    assert scores['log_loss'] == pytest.approx(-(math.log(0.9) + math.log(0.8)) / 2.0)


def test_even_call_and_draw_count_half():
    assert prediction_scores([0.5, 0.5], [1.0, 0.0])['accuracy'] == pytest.approx(0.5)
    assert prediction_scores([0.7], [0.5])['accuracy'] == pytest.approx(0.5)
    assert prediction_scores([0.3], [1.0])['accuracy'] == pytest.approx(0.0)


def test_score_matches():
    matches = [
        [[rating(30.0)], [rating(20.0)]],
        [[rating(20.0)], [rating(30.0)]],
    ]
    scores = score_matches(matches, [1.0, 1.0])
    favourite = predict_win(matches[0])[0]
    assert scores['accuracy'] == pytest.approx(0.5)
    assert scores['brier_score'] == pytest.approx(((favourite - 1.0) ** 2 + favourite**2) / 2.0)


def test_replay_matches_follows_rate():
    matches = [
        [[('alice', rating())], [('bob', rating())]],
        [[('bob', rating())], [('alice', rating())]],
        [[('alice', rating())], [('carol', rating(28.0, 4.0))]],
    ]
    scores, ratings = replay_matches(matches, [1.0, 0.0, 0.5])
    assert set(ratings) == {'alice', 'bob', 'carol'}

    [[alice], [bob]] = rate([[rating()], [rating()]])
    [[alice], [bob]] = rate([[alice], [bob]])
    [[alice], [carol]] = rate([[alice], [rating(28.0, 4.0)]], ranks=[0, 0])
    assert ratings['alice'] == pytest.approx(alice)
    assert ratings['bob'] == pytest.approx(bob)
    assert ratings['carol'] == pytest.approx(carol)

    # the first match is an even call, the second already favours alice who wins it
    assert scores['accuracy'] > 0.5
    assert scores['log_loss'] > 0.0


def test_rejects_bad_outcomes():
    match = [[rating()], [rating()]]
    with pytest.raises(ValueError):
        score_matches([match, match], [1.0])
    with pytest.raises(ValueError):
        score_matches([], [])
    with pytest.raises(ValueError):
        score_matches([match], [0.7])
