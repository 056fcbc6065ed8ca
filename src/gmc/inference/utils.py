# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from enum import Enum


class VerboseLevel(Enum):
    """
    Enum class which is used to set how much output is printed during sampling.
    LOAD_BAR enables tqdm for the full sampling loop.
    """

    OFF = 0
    LOAD_BAR = 1


def check_num_samples(num_samples: int) -> int:
    if isinstance(num_samples, bool) or not isinstance(num_samples, int):
        t = type(num_samples).__name__
        raise TypeError(
            f"Parameter 'num_samples' is required to be an int but is of type {t}."
        )
    if num_samples < 0:
        raise ValueError(f"The number of samples must be >= 0, got {num_samples}")
    return num_samples
