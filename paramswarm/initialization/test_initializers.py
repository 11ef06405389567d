# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from paramswarm.common import errors
from paramswarm.common import testing
from paramswarm.common import distributions
from paramswarm.entity.particle import ParameterizedParticle
from paramswarm.entity.particle import Slot
from . import initializers


@testing.parametrized(**{slot.name.lower(): (slot,) for slot in Slot})
def test_random_bounded_initializer(slot: Slot) -> None:
    init = initializers.RandomBoundedInitializer(-2, 3, distributions.UniformDistribution(12))
    particle = ParameterizedParticle(20)
    init.initialize(slot, particle)
    values = particle.get_slot(slot)
    testing.assert_within(values, -2, 3)
    assert len(set(values.tolist())) == 20
    others = [s for s in Slot if s != slot]
    for other in others:
        np.testing.assert_array_equal(particle.get_slot(other), np.zeros(20))


def test_random_bounded_initializer_invalid_bounds() -> None:
    init = initializers.RandomBoundedInitializer(0.9, 0.1)
    particle = ParameterizedParticle(position=[0.5, 0.5])
    with pytest.raises(errors.InvalidBoundsError):
        init.initialize(Slot.CANDIDATE_SOLUTION, particle)
    np.testing.assert_array_equal(particle.position, [0.5, 0.5])


def test_random_bounded_initializer_copy() -> None:
    init = initializers.RandomBoundedInitializer()
    assert init.lower_bound.value == 0.1
    assert init.upper_bound.value == 0.9
    copied = init.copy()
    assert copied.distribution is init.distribution
    copied.lower_bound.value = 0.5
    assert init.lower_bound.value == 0.1
    assert repr(copied) == "RandomBoundedInitializer(0.5, 0.9)"


def test_bounds_configurable() -> None:
    assert isinstance(initializers.RandomBoundedInitializer(), initializers.BoundsConfigurable)
    assert not isinstance(initializers.ConstantInitializer(), initializers.BoundsConfigurable)


def test_constant_initializer() -> None:
    init = initializers.ConstantInitializer(0.5)
    particle = ParameterizedParticle(3)
    init.initialize(Slot.VELOCITY, particle)
    np.testing.assert_array_equal(particle.velocity, [0.5, 0.5, 0.5])
    np.testing.assert_array_equal(particle.position, [0, 0, 0])
    assert init.copy().value == 0.5
    assert repr(init) == "ConstantInitializer(0.5)"
