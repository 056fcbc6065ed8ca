# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from gmc.inference.base_sampler import BaseSampler, LogDensity
from gmc.inference.metropolis_hastings import MetropolisHastings
from gmc.inference.trace import Trace
from gmc.inference.utils import VerboseLevel


__all__ = [
    "BaseSampler",
    "LogDensity",
    "MetropolisHastings",
    "Trace",
    "VerboseLevel",
]
