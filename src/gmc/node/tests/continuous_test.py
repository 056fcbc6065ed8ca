# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
import unittest

import numpy as np
import pytest
import scipy.stats as stats
from gmc.node import Beta, Constant, Normal, OutOfBoundsError, Uniform


class BetaTest(unittest.TestCase):
    def setUp(self):
        self.rng = np.random.default_rng(0)
        self.beta = Beta("test", Constant(1.0), Constant(1.0), self.rng)

    def test_default_value(self):
        self.assertEqual(self.beta.value, 0.5)

    def test_set_value(self):
        for value, is_error in [(1, False), (0, False), (-0.1, True), (1.1, True)]:
            with self.subTest(value=value):
                before = self.beta.value
                if is_error:
                    with self.assertRaises(OutOfBoundsError):
                        self.beta.set_value(value)
                    self.assertEqual(self.beta.value, before)
                else:
                    self.beta.set_value(value)
                    self.assertEqual(self.beta.value, value)

    def test_error_message_names_the_value(self):
        with self.assertRaises(OutOfBoundsError) as cm:
            self.beta.set_value(1.1)
        self.assertIn("1.1", str(cm.exception))

    def test_log_prob(self):
        beta = Beta("b", Constant(2.0), Constant(5.0), self.rng)
        beta.set_value(0.3)
        self.assertAlmostEqual(beta.log_prob(), stats.beta.logpdf(0.3, 2.0, 5.0))

    def test_rand_stays_in_support(self):
        beta = Beta("b", Constant(0.5), Constant(0.5), self.rng)
        for _ in range(100):
            self.assertTrue(0 <= beta.rand() <= 1)
        # drawing does not change the value of the variable
        self.assertEqual(beta.value, 0.5)


class NormalTest(unittest.TestCase):
    def setUp(self):
        self.rng = np.random.default_rng(0)

    def test_default_value_is_mean(self):
        normal = Normal("n", Constant(3.0), Constant(1.0), self.rng)
        self.assertEqual(normal.value, 3.0)

    def test_set_value_never_fails(self):
        normal = Normal("n", Constant(0.0), Constant(1.0), self.rng)
        for value in [-1e300, 0.0, 1e300, math.inf]:
            normal.set_value(value)
            self.assertEqual(normal.value, value)

    def test_log_prob_reads_current_parameters(self):
        mu = Normal("mu", Constant(0.0), Constant(1.0), self.rng)
        x = Normal("x", mu, Constant(2.0), self.rng)
        x.set_value(1.0)
        self.assertAlmostEqual(x.log_prob(), stats.norm.logpdf(1.0, 0.0, 2.0))
        mu.set_value(1.0)
        self.assertAlmostEqual(x.log_prob(), stats.norm.logpdf(1.0, 1.0, 2.0))

    def test_shared_generator(self):
        # two variables drawing from the same generator produce a single stream
        first = Normal("a", Constant(0.0), Constant(1.0), np.random.default_rng(1))
        rng = np.random.default_rng(1)
        a = Normal("a", Constant(0.0), Constant(1.0), rng)
        b = Normal("b", Constant(0.0), Constant(1.0), rng)
        draws = [a.rand(), b.rand()]
        self.assertEqual(draws[0], first.rand())
        self.assertEqual(draws[1], first.rand())

    def test_parameters_must_be_nodes(self):
        with self.assertRaises(TypeError):
            Normal("n", 0.0, Constant(1.0), self.rng)


def test_uniform_support_follows_parameters(rng):
    high = Normal("high", Constant(2.0), Constant(1.0), rng)
    uniform = Uniform("u", Constant(0.0), high, rng)
    assert uniform.value == 1.0
    uniform.set_value(2.0)
    with pytest.raises(OutOfBoundsError):
        uniform.set_value(2.5)
    high.set_value(3.0)
    uniform.set_value(2.5)
    assert uniform.value == 2.5
    assert uniform.log_prob() == pytest.approx(math.log(1 / 3))


def test_uniform_rand(rng):
    uniform = Uniform("u", Constant(-1.0), Constant(1.0), rng)
    draws = [uniform.rand() for _ in range(100)]
    assert all(-1.0 <= d <= 1.0 for d in draws)
