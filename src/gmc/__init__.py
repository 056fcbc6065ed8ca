# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .model import get_gmc_logger, LogLevel, Model  # usort: skip
from .inference import BaseSampler, MetropolisHastings, Trace, VerboseLevel
from .node import OutOfBoundsError, RandomVariable, Var


__version__ = "0.1.0"

LOGGER = get_gmc_logger()

__all__ = [
    "BaseSampler",
    "LogLevel",
    "MetropolisHastings",
    "Model",
    "OutOfBoundsError",
    "RandomVariable",
    "Trace",
    "Var",
    "VerboseLevel",
    "get_gmc_logger",
]
