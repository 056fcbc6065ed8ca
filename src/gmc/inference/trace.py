# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import Dict, Iterator, List, Mapping, Sequence

import arviz as az
import numpy as np
import xarray as xr
from typing_extensions import Literal


Namespace = Literal["posterior", "prior_predictive", "posterior_predictive"]


class Trace(Mapping[str, np.ndarray]):
    """
    Maps the name of each sampled variable to the sequence of values that were
    drawn for it, in the order in which they were drawn. All the sequences of a
    trace have the same length.

    Args:
      samples: Mapping from variable names to sequences of samples.
      namespace: What the samples represent; used as the group name when the
        trace is converted to ArviZ.
    """

    def __init__(
        self,
        samples: Mapping[str, Sequence[float]],
        namespace: Namespace = "posterior",
    ):
        self.namespace = namespace
        self._samples: Dict[str, np.ndarray] = {
            name: np.asarray(values, dtype=float) for name, values in samples.items()
        }
        lengths = {values.shape[0] for values in self._samples.values()}
        if len(lengths) > 1:
            raise ValueError(
                f"All the sequences of a trace must have the same length, got {lengths}"
            )

    def __getitem__(self, name: str) -> np.ndarray:
        return self._samples[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __str__(self) -> str:
        return str(self._samples)

    def __repr__(self) -> str:
        return (
            f"Trace(namespace={self.namespace!r}, variables={list(self)}, "
            f"num_samples={self.num_samples})"
        )

    @property
    def num_samples(self) -> int:
        """
        :returns: the number of samples stored for each variable
        """
        if not self._samples:
            return 0
        return next(iter(self._samples.values())).shape[0]

    def to_dict(self) -> Dict[str, List[float]]:
        return {name: values.tolist() for name, values in self._samples.items()}

    def to_xarray(self) -> xr.Dataset:
        """
        Return an xarray.Dataset with a single chain.
        """
        return xr.Dataset(
            {
                name: (("chain", "draw"), values[np.newaxis, :])
                for name, values in self._samples.items()
            },
            coords={"chain": [0], "draw": np.arange(self.num_samples)},
        )

    def to_inference_data(self) -> az.InferenceData:
        """
        Return an az.InferenceData whose only group is named after the namespace
        of the trace.
        """
        group = {name: values[np.newaxis, :] for name, values in self._samples.items()}
        return az.from_dict(**{self.namespace: group})
