# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

# utils must be loaded before model: gmc.inference imports LogLevel from it
from gmc.model.utils import get_gmc_logger, LogLevel  # usort: skip
from gmc.model.model import Model


__all__ = [
    "LogLevel",
    "Model",
    "get_gmc_logger",
]
