import copy
import pytest
from plrate import (
    rate,
    rating,
    Environment,
    Rating,
    ArityMismatch,
    ConfigurationError,
    ShapeMismatch,
    PlackettLuce,
)
from plrate.core.base import RatingModel

SIGMA = 25.0 / 3.0


def test_output_has_the_shape_of_the_input():
    match = [[rating()], [rating(), rating(), rating()], [rating(), rating()]]
    output = rate(match, ranks=[2, 0, 1])
    assert [len(team) for team in output] == [1, 3, 2]
    for team in output:
        for player in team:
            assert isinstance(player, Rating)
            assert player.sigma > 0.0


def test_accepts_plain_pairs():
    [[winner], [loser]] = rate([[(25.0, SIGMA)], [(25.0, SIGMA)]])
    assert winner.mu == pytest.approx(27.63523138347365, rel=1e-9)
    assert loser.mu == pytest.approx(22.36476861652635, rel=1e-9)


def test_player_order_is_preserved():
    strong, weak = rating(40.0, 2.0), rating(10.0, 8.0)
    [[new_strong, new_weak], [_]] = rate([[strong, weak], [rating()]])
    # the low sigma player barely moves
    assert abs(new_strong.mu - 40.0) < abs(new_weak.mu - 10.0)
    assert new_strong.sigma < 2.0
    assert new_weak.sigma < 8.0


def test_ranks_arity_mismatch_leaves_input_alone():
    match = [[(25.0, SIGMA)], [(25.0, SIGMA)], [(25.0, SIGMA)]]
    ranks = [0, 1]
    before = copy.deepcopy(match)
    with pytest.raises(ArityMismatch):
        rate(match, ranks=ranks)
    assert match == before
    assert ranks == [0, 1]


def test_weights_arity_mismatch():
    match = [[rating(), rating()], [rating()]]
    with pytest.raises(ArityMismatch):
        rate(match, weights=[[1.0], [1.0]])
    with pytest.raises(ArityMismatch):
        rate(match, weights=[[0.5, 0.5]])


def test_arity_mismatch_is_a_value_error():
    with pytest.raises(ValueError):
        rate([[rating()], [rating()]], ranks=[0])


def test_tau_inflates_sigma_before_the_update():
    [[winner], [loser]] = rate([[rating()], [rating()]], tau=3.0)
    # enough process variance that sigma ends above where it started
    assert winner.sigma > SIGMA
    assert loser.sigma > SIGMA


def test_prevent_sigma_increase():
    unclamped = rate([[rating()], [rating()]], tau=3.0)
    clamped = rate([[rating()], [rating()]], tau=3.0, prevent_sigma_increase=True)
    for clamped_team, unclamped_team in zip(clamped, unclamped):
        assert clamped_team[0].sigma == pytest.approx(SIGMA)
        assert clamped_team[0].mu == pytest.approx(unclamped_team[0].mu)


def test_prevent_sigma_increase_with_teams():
    match = [[rating(), rating(20.0, 3.0)], [rating(), rating(), rating(28.0, 1.0)]]
    output = rate(match, tau=3.0, prevent_sigma_increase=True)
    assert [len(team) for team in output] == [2, 3]
    for old_team, new_team in zip(match, output):
        for old, new in zip(old_team, new_team):
            assert new.sigma <= old.sigma


def test_prevent_sigma_increase_needs_tau():
    plain = rate([[rating()], [rating()]])
    flagged = rate([[rating()], [rating()]], tau=0.0, prevent_sigma_increase=True)
    assert flagged == plain


def test_environment_supplies_dynamics_defaults():
    env = Environment(tau=3.0, prevent_sigma_increase=True)
    output = rate([[rating()], [rating()]], env=env)
    assert output[0][0].sigma == pytest.approx(SIGMA)
    # explicit options win over the environment
    output = rate([[rating()], [rating()]], env=env, prevent_sigma_increase=False)
    assert output[0][0].sigma > SIGMA


def test_environment_beta():
    loose = rate([[rating()], [rating()]], env=Environment(beta=20.0))
    tight = rate([[rating()], [rating()]])
    assert loose[0][0].mu < tight[0][0].mu


class DropLastPlayer(RatingModel):
    name = 'drop_last_player'

    def update(self, aggregates, ranks, weights, env):
        return [list(agg.team[:-1]) for agg in aggregates]


def test_shape_mismatch_from_model():
    match = [[rating(), rating()], [rating(), rating()]]
    with pytest.raises(ShapeMismatch):
        rate(match, tau=1.0, prevent_sigma_increase=True, model=DropLastPlayer())


def test_model_selection():
    by_name = rate([[rating()], [rating()]], model='plackett_luce')
    by_instance = rate([[rating()], [rating()]], model=PlackettLuce())
    assert by_name == by_instance
    with pytest.raises(ConfigurationError):
        rate([[rating()], [rating()]], model='glicko')


@pytest.mark.parametrize('model', [['plackett_luce'], {'name': 'plackett_luce'}, 3])
def test_model_of_the_wrong_type(model):
    with pytest.raises(ConfigurationError):
        rate([[rating()], [rating()]], model=model)


def test_empty_match():
    assert rate([]) == []


@pytest.mark.parametrize('model', ['plackett_luce', 'bradley_terry_full'])
def test_empty_team_with_default_weights(model):
    output = rate([[rating()], []], model=model)
    explicit = rate([[rating()], []], weights=[[1.0], []], model=model)
    assert output == explicit
    assert [len(team) for team in output] == [1, 0]
    assert output[0][0].sigma > 0.0
