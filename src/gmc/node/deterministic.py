# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""
Deterministic nodes: constants and transformations of the values of other
nodes. They never contribute to the log-probability of a model.
"""

import math

from gmc.node.base_node import check_is_var, Var


class Constant(Var):
    def __init__(self, value: float):
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"Constant({self._value})"


class Sum(Var):
    """The value of the node is the sum of the values of ``x`` and ``y``."""

    def __init__(self, x: Var, y: Var):
        self.x = check_is_var(x, "x")
        self.y = check_is_var(y, "y")

    @property
    def value(self) -> float:
        return self.x.value + self.y.value


class Product(Var):
    """The value of the node is the product of the values of ``x`` and ``y``."""

    def __init__(self, x: Var, y: Var):
        self.x = check_is_var(x, "x")
        self.y = check_is_var(y, "y")

    @property
    def value(self) -> float:
        return self.x.value * self.y.value


class Logistic(Var):
    """
    Applies the logistic function to the value x of ``x``::

        1 / (1 + exp(-x))

    The computation branches on the sign of x so that ``exp`` is only ever
    called on non-positive numbers and cannot overflow.

    See https://en.wikipedia.org/wiki/Logistic_function
    """

    def __init__(self, x: Var):
        self.x = check_is_var(x, "x")

    @property
    def value(self) -> float:
        v = self.x.value
        if v >= 0:
            return 1 / (1 + math.exp(-v))
        z = math.exp(v)
        return z / (1 + z)


class Logit(Var):
    """
    Applies the transformation ``log(1 / (1 - x))`` to the value x of ``x``.
    Only defined for x in [0, 1]; reading the value of the node raises a
    ``ValueError`` otherwise.

    See https://en.wikipedia.org/wiki/Logit
    """

    def __init__(self, x: Var):
        self.x = check_is_var(x, "x")

    @property
    def value(self) -> float:
        v = self.x.value
        if not 0 <= v <= 1:
            raise ValueError(f"The logit function is defined on [0, 1], got {v}")
        if v == 1:
            return math.inf
        return math.log(1 / (1 - v))


class Switch(Var):
    """
    Chooses between the values of ``left`` and ``right`` depending on the value
    s of ``switch``:

    - if s <= threshold, the value of the node is the value of ``left``;
    - if s > threshold, the value of the node is the value of ``right``.
    """

    def __init__(self, threshold: float, switch: Var, left: Var, right: Var):
        self.threshold = float(threshold)
        self.switch = check_is_var(switch, "switch")
        self.left = check_is_var(left, "left")
        self.right = check_is_var(right, "right")

    @property
    def value(self) -> float:
        if self.switch.value <= self.threshold:
            return self.left.value
        return self.right.value
