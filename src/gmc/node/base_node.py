# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from abc import ABCMeta, abstractmethod

import numpy as np


class Var(metaclass=ABCMeta):
    """
    Parent class to every node of a graphical model. A ``Var`` only knows how
    to produce its current value.

    The value of a node is recomputed every time it is read: deterministic
    nodes read the current values of their inputs, which change in place while
    the model is being sampled, so a cached value would go stale.
    """

    @property
    @abstractmethod
    def value(self) -> float:
        raise NotImplementedError


class RandomVariable(Var):
    """
    A named node whose value follows a probability distribution parametrized by
    the current values of other nodes.

    Random variables are created through the factory methods of
    ``gmc.Model``, which enforces that names are unique and hands every
    variable a reference to the model's random number generator.

    Args:
      name: Name of the variable, unique within a model.
      rng: The generator shared by every variable of the model. It is kept by
        reference so that all draws come from a single stream.
      value: The initial value of the variable.
    """

    def __init__(self, name: str, rng: np.random.Generator, value: float):
        self._name = name
        self._rng = rng
        self._value = float(value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        """
        Set the value of the variable.

        Raises:
          OutOfBoundsError: if ``value`` is outside of the support of the
            distribution. The current value is kept in that case.
        """
        self.check_support(value)
        self._value = float(value)

    @abstractmethod
    def check_support(self, value: float) -> None:
        """Raise an ``OutOfBoundsError`` if ``value`` is not in the support."""
        raise NotImplementedError

    @abstractmethod
    def log_prob(self) -> float:
        """
        Returns:
          The log-probability of the current value given the current values of
          the parameters.
        """
        raise NotImplementedError

    @abstractmethod
    def rand(self) -> float:
        """
        Returns:
          A fresh draw from the distribution given the current values of the
          parameters. The value of the variable is not modified.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value})"


def check_is_var(node, arg_name: str) -> Var:
    if not isinstance(node, Var):
        t = type(node).__name__
        raise TypeError(
            f"Parameter '{arg_name}' is required to be a node but is of type {t}."
        )
    return node
