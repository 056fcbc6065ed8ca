# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import gmc
import numpy as np
import pytest


@pytest.fixture
def rng():
    """A seeded generator for tests that build nodes outside of a model."""
    return np.random.default_rng(0)


@pytest.fixture
def coin_model():
    """Beta(1, 1) prior on the bias of a coin that landed heads 7 times out of 10."""
    model = gmc.Model(seed=0)
    p = model.beta("p", 1.0, 1.0)
    heads = model.binomial("heads", 10, p)
    model.observe(heads, 7)
    return model
