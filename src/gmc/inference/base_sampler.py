# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from abc import ABCMeta, abstractmethod
from typing import Sequence

import numpy as np
from typing_extensions import Protocol


class LogDensity(Protocol):
    """
    Anything that exposes an unnormalized joint log-density over a vector of
    floats, e.g. ``gmc.Model``.
    """

    def log_prob(self, proposed: Sequence[float]) -> float:
        ...


class BaseSampler(metaclass=ABCMeta):
    """
    Abstract class all samplers should inherit from. A sampler only sees the
    target through its ``log_prob`` method, and must draw all of its random
    numbers from the generator it is given.
    """

    @abstractmethod
    def sample(
        self,
        target: LogDensity,
        initial: Sequence[float],
        num_samples: int,
        rng: np.random.Generator,
    ) -> np.ndarray:
        """
        Draws samples from the distribution whose log-density is
        ``target.log_prob``.

        Args:
          target: The distribution to sample from.
          initial: Starting point of the chain.
          num_samples: Number of samples to return.
          rng: Source of randomness.

        Returns:
          An array of shape ``(num_samples, len(initial))`` where each row is a
          sample.
        """
        raise NotImplementedError
