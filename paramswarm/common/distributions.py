# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Random-number capabilities injected in initializers and velocity providers.
Each distribution pulls from a numpy RandomState which can be seeded or shared.
"""

import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import errors


class Distribution:
    """Base class for sampling real numbers from two parameters.

    Parameters
    ----------
    random_state: np.random.RandomState or int (optional)
        random state (or seed) to pull from. If not provided, it is lazily
        initialized from numpy's global random state.
    """

    def __init__(self, random_state: tp.Optional[tp.Union[int, np.random.RandomState]] = None) -> None:
        if isinstance(random_state, (int, np.integer)):
            random_state = np.random.RandomState(random_state)
        self._random_state: tp.Optional[np.random.RandomState] = random_state

    @property
    def random_state(self) -> np.random.RandomState:
        if self._random_state is None:
            seed = np.random.randint(2 ** 32, dtype=np.uint32)
            self._random_state = np.random.RandomState(seed)
        return self._random_state

    @random_state.setter
    def random_state(self, random_state: np.random.RandomState) -> None:
        self._random_state = random_state

    def sample(self, first: float, second: float) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UniformDistribution(Distribution):
    """Uniform sampling between two numbers, whichever order they are provided in"""

    def sample(self, first: float, second: float) -> float:
        low, high = min(first, second), max(first, second)
        return float(self.random_state.uniform(low, high))


class GaussianDistribution(Distribution):
    """Normal sampling with the first argument as mean and the second as deviation"""

    def sample(self, first: float, second: float) -> float:
        if second < 0:
            raise errors.ParamSwarmValueError(f"Deviation must be non-negative (got {second})")
        return float(self.random_state.normal(first, second))


def as_distribution(distribution: tp.Optional[tp.DistributionLike]) -> tp.DistributionLike:
    """Returns the provided distribution, or a new uniform one if None"""
    return UniformDistribution() if distribution is None else distribution
