# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import distributions
from paramswarm.parametrization import controlparameter as cp
from paramswarm.entity.particle import ParameterizedParticle
from paramswarm.entity.particle import Slot


I = tp.TypeVar("I", bound="InitializationStrategy")


class InitializationStrategy(tp.Protocol):
    """Initializes one slot of a particle"""

    # pylint: disable=pointless-statement, unused-argument

    def initialize(self, slot: Slot, particle: ParameterizedParticle) -> None:
        ...

    def copy(self: I) -> I:
        ...


@tp.runtime_checkable
class BoundsConfigurable(tp.Protocol):
    """Capability of initializers whose bounds can be configured by an orchestrating strategy"""

    lower_bound: cp.ControlParameter
    upper_bound: cp.ControlParameter


class RandomBoundedInitializer:
    """Fills every dimension of a particle slot with an independent draw
    between the lower and upper bounds.

    Parameters
    ----------
    lower_bound: ControlParameter or float
        lower bound, shared by all dimensions
    upper_bound: ControlParameter or float
        upper bound, shared by all dimensions
    distribution: DistributionLike (optional)
        random capability (uniform if not provided)
    """

    def __init__(
        self,
        lower_bound: tp.Union[cp.ControlParameter, float] = 0.1,
        upper_bound: tp.Union[cp.ControlParameter, float] = 0.9,
        distribution: tp.Optional[tp.DistributionLike] = None,
    ) -> None:
        self.lower_bound = cp.as_control_parameter(lower_bound)
        self.upper_bound = cp.as_control_parameter(upper_bound)
        self.distribution = distributions.as_distribution(distribution)

    def initialize(self, slot: Slot, particle: ParameterizedParticle) -> None:
        low, high = cp.check_bounds(self.lower_bound, self.upper_bound)
        data = np.array([self.distribution.sample(low, high) for _ in range(particle.dimension)], dtype=float)
        particle.set_slot(slot, data)

    def copy(self) -> "RandomBoundedInitializer":
        """Copies the bounds, shares the distribution"""
        return RandomBoundedInitializer(self.lower_bound.copy(), self.upper_bound.copy(), self.distribution)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.lower_bound.value}, {self.upper_bound.value})"


class ConstantInitializer:
    """Fills every dimension of a particle slot with the same value
    (typically zero velocities)
    """

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def initialize(self, slot: Slot, particle: ParameterizedParticle) -> None:
        particle.set_slot(slot, np.full(particle.dimension, self.value))

    def copy(self) -> "ConstantInitializer":
        return ConstantInitializer(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value})"
