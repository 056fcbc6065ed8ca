# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import unittest

import numpy as np
import xarray as xr
from gmc.inference import Trace


class TraceTest(unittest.TestCase):
    def setUp(self):
        self.trace = Trace({"p": [0.1, 0.2, 0.3], "mu": np.array([1.0, 2.0, 3.0])})

    def test_mapping(self):
        self.assertEqual(len(self.trace), 2)
        self.assertEqual(list(self.trace), ["p", "mu"])
        self.assertIsInstance(self.trace["p"], np.ndarray)
        self.assertEqual(self.trace["p"].dtype, np.float64)
        self.assertEqual(self.trace.num_samples, 3)
        self.assertEqual(self.trace.namespace, "posterior")

    def test_empty(self):
        trace = Trace({}, namespace="prior_predictive")
        self.assertEqual(trace.num_samples, 0)
        self.assertEqual(len(trace), 0)

    def test_ragged(self):
        with self.assertRaisesRegex(ValueError, "same length"):
            Trace({"p": [0.1, 0.2], "mu": [1.0]})

    def test_to_dict(self):
        self.assertEqual(
            self.trace.to_dict(), {"p": [0.1, 0.2, 0.3], "mu": [1.0, 2.0, 3.0]}
        )

    def test_to_xarray(self):
        dataset = self.trace.to_xarray()
        self.assertIsInstance(dataset, xr.Dataset)
        self.assertEqual(dict(dataset["p"].sizes), {"chain": 1, "draw": 3})
        np.testing.assert_array_equal(dataset["mu"].values[0], [1.0, 2.0, 3.0])

    def test_to_inference_data(self):
        trace = Trace({"coin": [0.0, 1.0, 1.0]}, namespace="prior_predictive")
        inference_data = trace.to_inference_data()
        self.assertIn("prior_predictive", inference_data.groups())
        np.testing.assert_array_equal(
            inference_data.prior_predictive["coin"].values, [[0.0, 1.0, 1.0]]
        )

    def test_repr(self):
        self.assertEqual(
            repr(self.trace),
            "Trace(namespace='posterior', variables=['p', 'mu'], num_samples=3)",
        )
