# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from gmc.node.base_node import RandomVariable, Var
from gmc.node.continuous import Beta, Normal, Uniform
from gmc.node.deterministic import Constant, Logistic, Logit, Product, Sum, Switch
from gmc.node.discrete import Bernoulli, Binomial
from gmc.node.errors import OutOfBoundsError


__all__ = [
    "Bernoulli",
    "Beta",
    "Binomial",
    "Constant",
    "Logistic",
    "Logit",
    "Normal",
    "OutOfBoundsError",
    "Product",
    "RandomVariable",
    "Sum",
    "Switch",
    "Uniform",
    "Var",
]
