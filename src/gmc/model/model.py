# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import math
from numbers import Real
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from gmc.inference.base_sampler import BaseSampler
from gmc.inference.metropolis_hastings import MetropolisHastings
from gmc.inference.trace import Trace
from gmc.inference.utils import check_num_samples, VerboseLevel
from gmc.model.utils import LogLevel
from gmc.node import (
    Bernoulli,
    Beta,
    Binomial,
    Constant,
    Logistic,
    Logit,
    Normal,
    OutOfBoundsError,
    Product,
    RandomVariable,
    Sum,
    Switch,
    Uniform,
    Var,
)
from gmc.node.base_node import check_is_var
from tqdm.auto import trange


LOGGER = logging.getLogger("gmc.model")

VarLike = Union[Var, float]


class Model:
    """
    A Model describes a directed probabilistic graphical model and holds the
    state needed to run inference on it.

    A graphical model represents a multivariate joint probability distribution
    as a graph whose nodes are of three kinds:

    - stochastic nodes, the random variables we want to infer;
    - observed nodes, random variables whose value is known;
    - deterministic nodes, constants or transformations of the values of
      other nodes.

    Nodes are created with the factory methods of the model, e.g.::

        model = Model(seed=42)
        p = model.beta("p", 1.0, 1.0)
        heads = model.binomial("heads", 10, p)
        model.observe(heads, 7)
        trace = model.sample(1000, initial=[0.5])

    Since a node can only be created once its parameters exist, the order in
    which the random variables are declared is a topological order of the
    graph. Sampling from the prior relies on it.

    The model owns a single random number generator that is shared by every
    random variable, so that two models declared in the same way with the same
    seed produce the same samples. The values of the random variables are
    mutated in place during sampling: a model must not be used by several
    threads at the same time.

    Args:
      seed: Seed of the random number generator. If None, fresh entropy is
        pulled from the OS.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng: np.random.Generator = np.random.default_rng(seed)
        self._stochastic: List[RandomVariable] = []
        self._observed: List[RandomVariable] = []
        self._deterministic: List[Var] = []

    @property
    def stochastic(self) -> Tuple[RandomVariable, ...]:
        return tuple(self._stochastic)

    @property
    def observed(self) -> Tuple[RandomVariable, ...]:
        return tuple(self._observed)

    @property
    def deterministic(self) -> Tuple[Var, ...]:
        return tuple(self._deterministic)

    @property
    def num_stochastic(self) -> int:
        return len(self._stochastic)

    def __getitem__(self, name: str) -> RandomVariable:
        for variable in self._stochastic + self._observed:
            if variable.name == name:
                return variable
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_taken(name)

    def __repr__(self) -> str:
        return (
            f"Model(stochastic={[v.name for v in self._stochastic]}, "
            f"observed={[v.name for v in self._observed]}, "
            f"deterministic={len(self._deterministic)})"
        )

    def is_taken(self, name: str) -> bool:
        """
        Returns True if a random variable of the model already has this name.
        """
        return any(
            variable.name == name for variable in self._stochastic + self._observed
        )

    def observe(self, variable: RandomVariable, value: float) -> None:
        """
        Sets the value of a stochastic variable and moves it to the observed
        variables. An observed variable is no longer part of the values
        proposed to ``log_prob``.

        Args:
          variable: A stochastic variable of this model.
          value: The observed value. It must lie in the support of the
            variable, otherwise ``OutOfBoundsError`` is raised and the
            variable stays stochastic.
        """
        for i, model_var in enumerate(self._stochastic):
            if model_var.name == variable.name:
                model_var.set_value(value)
                del self._stochastic[i]
                self._observed.append(model_var)
                LOGGER.log(
                    LogLevel.DEBUG_GRAPH.value,
                    "Observed variable {n} = {v}".format(n=model_var.name, v=value),
                )
                return
        raise ValueError(f"The variable does not exist: {variable.name}")

    def log_prob(self, proposed: Sequence[float]) -> float:
        """
        Computes the joint log-probability of the model given proposed values
        for the stochastic variables and the values of the observed variables.

        The proposed values are assigned in place to the stochastic variables,
        in the order in which they were declared. One call is the unit of
        consistency: the values are only meaningful until the next call.

        Args:
          proposed: One value per stochastic variable.

        Returns:
          The joint log-probability, or -inf as soon as one proposed value is
          outside of the support of its variable.
        """
        if len(proposed) != len(self._stochastic):
            raise ValueError(
                f"Needed {len(self._stochastic)} value proposals, got {len(proposed)}"
            )
        for variable, value in zip(self._stochastic, proposed):
            try:
                variable.set_value(value)
            except OutOfBoundsError:
                return -math.inf
            except Exception as e:
                raise RuntimeError(
                    f"Unexpected error while setting the value of {variable.name}"
                ) from e

        log_prob = 0.0
        for variable in self._stochastic:
            log_prob += variable.log_prob()
        for observed in self._observed:
            log_prob += observed.log_prob()
        return log_prob

    def sample_prior_predictive(
        self, num_samples: int, verbose: VerboseLevel = VerboseLevel.OFF
    ) -> Trace:
        """
        Generates synthetic values of the observed variables by drawing the
        stochastic variables from their prior distribution. Used to perform
        prior predictive checks as described in "Visualization in Bayesian
        workflow" (Gabry et al. 2017) https://arxiv.org/abs/1709.01449

        The variables are stored in topological order, so iterating from the
        first declared to the last one draws every variable after its parents.
        The stochastic variables keep the values of the last draw.

        :param num_samples: Number of samples.
        :returns: a ``Trace`` of the observed variables.
        """
        check_num_samples(num_samples)
        samples = {o.name: np.empty(num_samples) for o in self._observed}
        for i in trange(
            num_samples,
            desc="Samples collected",
            disable=verbose == VerboseLevel.OFF,
        ):
            for variable in self._stochastic:
                variable.set_value(variable.rand())
            for observed in self._observed:
                samples[observed.name][i] = observed.rand()

        LOGGER.info("Drew %d prior predictive samples", num_samples)
        return Trace(samples, namespace="prior_predictive")

    def sample(
        self,
        num_samples: int,
        initial: Sequence[float],
        sampler: Optional[BaseSampler] = None,
    ) -> Trace:
        """
        Draws samples from the posterior distribution of the stochastic
        variables given the observed ones.

        Args:
          num_samples: Number of samples.
          initial: Starting value of each stochastic variable, in declaration
            order.
          sampler: The sampler that uses ``log_prob`` as its target. Defaults to
            ``MetropolisHastings()``.

        Returns:
          A ``Trace`` that maps the name of each stochastic variable to its
          samples.
        """
        check_num_samples(num_samples)
        if len(initial) != len(self._stochastic):
            raise ValueError(
                f"Needed {len(self._stochastic)} initial points, got {len(initial)}"
            )
        if sampler is None:
            sampler = MetropolisHastings()

        batch = np.asarray(
            sampler.sample(self, list(initial), num_samples, self.rng), dtype=float
        )
        expected_shape = (num_samples, len(self._stochastic))
        if batch.shape != expected_shape:
            raise ValueError(
                f"The sampler returned samples of shape {batch.shape}, "
                f"expected {expected_shape}"
            )

        LOGGER.info(
            "Drew %d posterior samples of %d variables",
            num_samples,
            len(self._stochastic),
        )
        return Trace(
            {
                variable.name: batch[:, j]
                for j, variable in enumerate(self._stochastic)
            },
            namespace="posterior",
        )

    def sample_posterior_predictive(
        self,
        num_samples: int,
        trace: Mapping[str, Sequence[float]],
        verbose: VerboseLevel = VerboseLevel.OFF,
    ) -> Trace:
        """
        Generates synthetic values of the observed variables from posterior
        samples. Each sample picks a uniformly random position in the trace,
        sets the stochastic variables to the values found there and draws the
        observed variables. Used to perform posterior predictive checks as
        described in "Visualization in Bayesian workflow" (Gabry et al. 2017)
        https://arxiv.org/abs/1709.01449

        :param num_samples: Number of samples.
        :param trace: Samples of every stochastic variable, all of the same
            length, e.g. the output of ``sample``.
        :returns: a ``Trace`` of the observed variables.
        """
        check_num_samples(num_samples)
        trace_length = self._get_trace_length(trace)

        samples: Dict[str, np.ndarray] = {
            o.name: np.empty(num_samples) for o in self._observed
        }
        for i in trange(
            num_samples,
            desc="Samples collected",
            disable=verbose == VerboseLevel.OFF,
        ):
            if self._stochastic:
                loc = int(self.rng.integers(trace_length))
                for variable in self._stochastic:
                    variable.set_value(trace[variable.name][loc])
            for observed in self._observed:
                samples[observed.name][i] = observed.rand()

        LOGGER.info("Drew %d posterior predictive samples", num_samples)
        return Trace(samples, namespace="posterior_predictive")

    def _get_trace_length(self, trace: Mapping[str, Sequence[float]]) -> int:
        lengths = {}
        for variable in self._stochastic:
            if variable.name not in trace:
                raise KeyError(f"The trace is missing variable {variable.name}")
            lengths[variable.name] = len(trace[variable.name])

        if len(set(lengths.values())) > 1:
            raise ValueError(
                "All the variables of the trace must have the same length, "
                f"got {lengths}"
            )
        trace_length = next(iter(lengths.values()), 0)
        if self._stochastic and trace_length == 0:
            raise ValueError("The trace does not contain any sample")
        return trace_length

    def _add_random_variable(self, variable: RandomVariable) -> None:
        self._stochastic.append(variable)
        LOGGER.log(
            LogLevel.DEBUG_GRAPH.value,
            "Added stochastic variable {v}".format(v=variable),
        )

    def _add_deterministic(self, node: Var) -> Var:
        self._deterministic.append(node)
        LOGGER.log(
            LogLevel.DEBUG_GRAPH.value,
            "Added deterministic node {n}".format(n=type(node).__name__),
        )
        return node

    def _check_name(self, name: str) -> None:
        if not isinstance(name, str):
            t = type(name).__name__
            raise TypeError(
                f"A variable name is required to be a str but is of type {t}."
            )
        if self.is_taken(name):
            raise ValueError(f"Variable name is already taken: {name}")

    def _as_var(self, param: VarLike, arg_name: str) -> Var:
        """Wraps plain numbers in a constant node of the model."""
        if isinstance(param, Real) and not isinstance(param, bool):
            return self.constant(float(param))
        return check_is_var(param, arg_name)

    def normal(self, name: str, mu: VarLike, sigma: VarLike) -> Normal:
        """
        Adds a stochastic variable whose value is normally distributed to the
        model.
        """
        self._check_name(name)
        variable = Normal(
            name, self._as_var(mu, "mu"), self._as_var(sigma, "sigma"), self.rng
        )
        self._add_random_variable(variable)
        return variable

    def beta(self, name: str, alpha: VarLike, beta: VarLike) -> Beta:
        """
        Adds a stochastic variable whose value follows a Beta distribution to
        the model.
        """
        self._check_name(name)
        variable = Beta(
            name, self._as_var(alpha, "alpha"), self._as_var(beta, "beta"), self.rng
        )
        self._add_random_variable(variable)
        return variable

    def uniform(self, name: str, low: VarLike, high: VarLike) -> Uniform:
        """
        Adds a stochastic variable whose value is uniformly distributed on
        [low, high] to the model.
        """
        self._check_name(name)
        variable = Uniform(
            name, self._as_var(low, "low"), self._as_var(high, "high"), self.rng
        )
        self._add_random_variable(variable)
        return variable

    def bernoulli(self, name: str, p: VarLike) -> Bernoulli:
        """
        Adds a stochastic variable whose value follows a Bernoulli distribution
        to the model.
        """
        self._check_name(name)
        variable = Bernoulli(name, self._as_var(p, "p"), self.rng)
        self._add_random_variable(variable)
        return variable

    def binomial(self, name: str, n: int, p: VarLike) -> Binomial:
        """
        Adds a stochastic variable whose value follows a Binomial distribution
        with ``n`` trials to the model.
        """
        if n <= 0 or n != int(n):
            raise ValueError(
                f"The number of bernoulli trials must be a positive integer, got {n}"
            )
        self._check_name(name)
        variable = Binomial(name, int(n), self._as_var(p, "p"), self.rng)
        self._add_random_variable(variable)
        return variable

    def constant(self, value: float) -> Constant:
        """Adds a deterministic node that has a constant value."""
        return self._add_deterministic(Constant(value))

    def sum(self, x: VarLike, y: VarLike) -> Sum:
        """
        Adds a deterministic node whose value is the sum of the values of the
        two input nodes.
        """
        return self._add_deterministic(Sum(self._as_var(x, "x"), self._as_var(y, "y")))

    def prod(self, x: VarLike, y: VarLike) -> Product:
        """
        Adds a deterministic node whose value is the product of the values of
        the two input nodes.
        """
        return self._add_deterministic(
            Product(self._as_var(x, "x"), self._as_var(y, "y"))
        )

    def logistic(self, x: VarLike) -> Logistic:
        """
        Adds a deterministic node whose value is the logistic transformation of
        the value of the input node.
        """
        return self._add_deterministic(Logistic(self._as_var(x, "x")))

    def logit(self, x: VarLike) -> Logit:
        """
        Adds a deterministic node whose value is the logit transformation of
        the value of the input node.
        """
        return self._add_deterministic(Logit(self._as_var(x, "x")))

    def switch(
        self, threshold: float, switch: VarLike, left: VarLike, right: VarLike
    ) -> Switch:
        """
        Adds a deterministic node whose value is the value of ``left`` when the
        value of ``switch`` is lower than or equal to ``threshold``, and the
        value of ``right`` otherwise.
        """
        return self._add_deterministic(
            Switch(
                threshold,
                self._as_var(switch, "switch"),
                self._as_var(left, "left"),
                self._as_var(right, "right"),
            )
        )
