# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


class OutOfBoundsError(Exception):
    """
    Raised by ``RandomVariable.set_value`` when the proposed value lies outside
    of the support of the variable's distribution. The stored value is left
    untouched when this error is raised.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
