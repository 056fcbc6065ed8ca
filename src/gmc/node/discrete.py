# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Random variables with a discrete support."""

import math

import numpy as np
import scipy.stats as stats
from gmc.node.base_node import check_is_var, RandomVariable, Var
from gmc.node.errors import OutOfBoundsError


def round_half_away_from_zero(value: float) -> float:
    """
    Rounds to the nearest integer, with halfway cases rounded away from zero.
    Python's ``round`` rounds halfway cases to the nearest even number instead,
    which would accept 2.5 as 2 for a binomial with N=2.
    """
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Bernoulli(RandomVariable):
    """
    Bernoulli distributed random variable. A value is accepted when it rounds
    to 0 or 1, but the value that is stored is the one that was passed to
    ``set_value``, so a non-integer value has a log-probability of -inf.
    Defaults to 0.
    """

    def __init__(self, name: str, p: Var, rng: np.random.Generator):
        self.p = check_is_var(p, "p")
        super().__init__(name, rng, 0.0)

    def check_support(self, value: float) -> None:
        if not math.isfinite(value) or round_half_away_from_zero(value) not in (0, 1):
            raise OutOfBoundsError(
                "A bernoulli-distributed random variable can only take the values "
                f"0 or 1, got value {value}"
            )

    def log_prob(self) -> float:
        return float(stats.bernoulli.logpmf(self._value, self.p.value))

    def rand(self) -> float:
        return float(stats.bernoulli.rvs(self.p.value, random_state=self._rng))


class Binomial(RandomVariable):
    """
    Binomial distributed random variable: the number of successes in ``n``
    Bernoulli trials with success probability ``p``. The number of trials is
    fixed at construction. As for ``Bernoulli``, the bounds are checked on the
    rounded value and the raw value is stored. Defaults to ``n * p``.
    """

    def __init__(self, name: str, n: int, p: Var, rng: np.random.Generator):
        self.n = n
        self.p = check_is_var(p, "p")
        super().__init__(name, rng, n * p.value)

    def check_support(self, value: float) -> None:
        if not math.isfinite(value) or not 0 <= round_half_away_from_zero(
            value
        ) <= self.n:
            raise OutOfBoundsError(
                "A binomial-distributed random variable can only take the integers "
                f"between 0 and {self.n} as values, got value {value}"
            )

    def log_prob(self) -> float:
        return float(stats.binom.logpmf(self._value, self.n, self.p.value))

    def rand(self) -> float:
        return float(stats.binom.rvs(self.n, self.p.value, random_state=self._rng))
