# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import math
from typing import Optional, Sequence

import numpy as np
from gmc.inference.base_sampler import BaseSampler, LogDensity
from gmc.inference.utils import check_num_samples, VerboseLevel
from gmc.model.utils import LogLevel
from tqdm.auto import trange


LOGGER = logging.getLogger("gmc.inference")


class MetropolisHastings(BaseSampler):
    """
    Random walk `Metropolis-Hastings
    <https://en.wikipedia.org/wiki/Metropolis%E2%80%93Hastings_algorithm>`_.
    Every variable is moved at once by an isotropic Normal proposal, which is
    symmetric so the acceptance ratio reduces to the ratio of the target
    densities. Proposals outside of the support of the target have a
    log-density of -inf and are always rejected.

    Args:
        step_size: Standard deviation of the Normal proposal.
        burn_in: Number of steps that are run, and discarded, before samples
            start being recorded.
        verbose: Whether to display the progress bar or not.
    """

    def __init__(
        self,
        step_size: float = 0.05,
        burn_in: int = 1000,
        verbose: VerboseLevel = VerboseLevel.LOAD_BAR,
    ):
        if step_size <= 0:
            raise ValueError(f"The step size must be > 0, got {step_size}")
        self.step_size = step_size
        self.burn_in = check_num_samples(burn_in)
        self.verbose = verbose
        self.acceptance_rate: Optional[float] = None

    def sample(
        self,
        target: LogDensity,
        initial: Sequence[float],
        num_samples: int,
        rng: np.random.Generator,
    ) -> np.ndarray:
        check_num_samples(num_samples)
        current = np.array(initial, dtype=float)
        current_log_prob = target.log_prob(current)
        if not math.isfinite(current_log_prob):
            raise ValueError(
                f"The initial point {current.tolist()} has log-probability "
                f"{current_log_prob}; please start the chain inside the support "
                "of the model."
            )

        samples = np.empty((num_samples, current.shape[0]))
        num_steps = self.burn_in + num_samples
        num_accepted = 0
        for step in trange(
            num_steps,
            desc="Samples collected",
            disable=self.verbose == VerboseLevel.OFF,
        ):
            proposed = current + rng.normal(0.0, self.step_size, size=current.shape)
            proposed_log_prob = target.log_prob(proposed)
            accept_log_prob = proposed_log_prob - current_log_prob
            is_accepted = bool(np.log(rng.uniform()) < accept_log_prob)
            if is_accepted:
                current, current_log_prob = proposed, proposed_log_prob
                num_accepted += 1

            LOGGER.log(
                LogLevel.DEBUG_SAMPLER.value,
                "- Step: {s}\n".format(s=step)
                + "- Proposed value: {p}\n".format(p=proposed.tolist())
                + "- Log acceptance ratio: {a}\n".format(a=accept_log_prob)
                + "- Is accepted: {ia}\n".format(ia=is_accepted),
            )
            if step >= self.burn_in:
                samples[step - self.burn_in] = current

        self.acceptance_rate = num_accepted / num_steps if num_steps else None
        LOGGER.info(
            "Metropolis-Hastings collected %d samples after %d burn-in steps, "
            "acceptance rate: %s",
            num_samples,
            self.burn_in,
            self.acceptance_rate,
        )
        return samples
