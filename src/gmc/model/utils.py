# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """
    Enum class mapping the logging levels to numeric values.
    """

    ERROR = 40
    WARNING = 30
    INFO = 20
    DEBUG_SAMPLER = 16
    DEBUG_PROPOSAL = 14
    DEBUG_GRAPH = 12


def get_gmc_logger(
    console_level: LogLevel = LogLevel.WARNING,
    file_level: LogLevel = LogLevel.INFO,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configures the ``gmc`` logger. Records are always sent to the console; they
    are also written to ``log_file`` when one is given.
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level.value)

    logger = logging.getLogger("gmc")
    logger.handlers.clear()
    logger.addHandler(console_handler)
    if log_file is None:
        logger.setLevel(console_level.value)
    else:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level.value)
        logger.addHandler(file_handler)
        logger.setLevel(min(file_level.value, console_level.value))
    return logger
