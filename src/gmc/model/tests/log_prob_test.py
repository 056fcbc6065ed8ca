# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
from unittest import mock

import gmc
import pytest
import scipy.stats as stats


def test_coin_model_log_prob(coin_model):
    expected = stats.beta.logpdf(0.5, 1.0, 1.0) + stats.binom.logpmf(7, 10, 0.5)
    assert coin_model.log_prob([0.5]) == pytest.approx(expected)
    assert coin_model["p"].value == 0.5

    expected = stats.beta.logpdf(0.9, 1.0, 1.0) + stats.binom.logpmf(7, 10, 0.9)
    assert coin_model.log_prob([0.9]) == pytest.approx(expected)


def test_out_of_bounds_proposal(coin_model):
    assert coin_model.log_prob([1.5]) == -math.inf
    assert coin_model.log_prob([-0.5]) == -math.inf
    assert math.isfinite(coin_model.log_prob([0.3]))


@pytest.mark.parametrize("proposed", [[], [0.1, 0.2]])
def test_wrong_number_of_proposals(coin_model, proposed):
    with pytest.raises(ValueError, match="Needed 1 value proposals"):
        coin_model.log_prob(proposed)


def test_out_of_bounds_aborts_remaining_assignments():
    model = gmc.Model(seed=0)
    p = model.beta("p", 1.0, 1.0)
    x = model.normal("x", 0.0, 1.0)
    assert model.log_prob([1.5, 3.0]) == -math.inf
    assert p.value == 0.5
    assert x.value == 0.0


def test_log_prob_sums_stochastic_and_observed():
    model = gmc.Model(seed=0)
    mu = model.normal("mu", 0.0, 1.0)
    sigma = model.uniform("sigma", 0.5, 2.0)
    y = model.normal("y", mu, sigma)
    model.observe(y, 1.2)
    expected = (
        stats.norm.logpdf(0.3, 0.0, 1.0)
        + stats.uniform.logpdf(1.0, 0.5, 1.5)
        + stats.norm.logpdf(1.2, 0.3, 1.0)
    )
    assert model.log_prob([0.3, 1.0]) == pytest.approx(expected)


def test_deterministic_nodes_do_not_contribute():
    model = gmc.Model(seed=0)
    x = model.normal("x", 0.0, 1.0)
    model.logistic(x)
    model.constant(42.0)
    assert model.log_prob([0.0]) == pytest.approx(stats.norm.logpdf(0.0))


def test_unexpected_error_is_not_a_rejection():
    model = gmc.Model(seed=0)
    x = model.normal("x", 0.0, 1.0)
    with mock.patch.object(x, "set_value", side_effect=ZeroDivisionError):
        with pytest.raises(RuntimeError, match="setting the value of x") as excinfo:
            model.log_prob([0.0])
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
