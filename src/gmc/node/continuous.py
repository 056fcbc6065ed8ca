# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Random variables with a continuous support."""

import numpy as np
import scipy.stats as stats
from gmc.node.base_node import check_is_var, RandomVariable, Var
from gmc.node.errors import OutOfBoundsError


class Normal(RandomVariable):
    """
    Normally distributed random variable. The support is the real line, so
    ``set_value`` never fails. Defaults to the current value of ``mu``.
    """

    def __init__(self, name: str, mu: Var, sigma: Var, rng: np.random.Generator):
        self.mu = check_is_var(mu, "mu")
        self.sigma = check_is_var(sigma, "sigma")
        super().__init__(name, rng, mu.value)

    def check_support(self, value: float) -> None:
        pass

    def log_prob(self) -> float:
        return float(
            stats.norm.logpdf(self._value, loc=self.mu.value, scale=self.sigma.value)
        )

    def rand(self) -> float:
        return float(
            stats.norm.rvs(
                loc=self.mu.value, scale=self.sigma.value, random_state=self._rng
            )
        )


class Beta(RandomVariable):
    """
    Beta distributed random variable, defined on the closed interval [0, 1].
    Defaults to 0.5.
    """

    def __init__(self, name: str, alpha: Var, beta: Var, rng: np.random.Generator):
        self.alpha = check_is_var(alpha, "alpha")
        self.beta = check_is_var(beta, "beta")
        super().__init__(name, rng, 0.5)

    def check_support(self, value: float) -> None:
        if not 0 <= value <= 1:
            raise OutOfBoundsError(f"Beta is defined on [0, 1], got value {value}")

    def log_prob(self) -> float:
        return float(stats.beta.logpdf(self._value, self.alpha.value, self.beta.value))

    def rand(self) -> float:
        return float(
            stats.beta.rvs(self.alpha.value, self.beta.value, random_state=self._rng)
        )


class Uniform(RandomVariable):
    """
    Uniformly distributed random variable on [low, high]. The bounds are read
    from the parameter nodes every time a value is set. Defaults to the middle
    of the interval at construction.
    """

    def __init__(self, name: str, low: Var, high: Var, rng: np.random.Generator):
        self.low = check_is_var(low, "low")
        self.high = check_is_var(high, "high")
        super().__init__(name, rng, (low.value + high.value) / 2)

    def check_support(self, value: float) -> None:
        low, high = self.low.value, self.high.value
        if not low <= value <= high:
            raise OutOfBoundsError(
                f"Uniform is defined on [{low}, {high}], got value {value}"
            )

    def log_prob(self) -> float:
        low = self.low.value
        return float(
            stats.uniform.logpdf(self._value, loc=low, scale=self.high.value - low)
        )

    def rand(self) -> float:
        low = self.low.value
        return float(
            stats.uniform.rvs(
                loc=low, scale=self.high.value - low, random_state=self._rng
            )
        )
