# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from paramswarm.common import errors
from paramswarm.common import testing
from paramswarm.common import distributions
from paramswarm.entity.particle import ParameterizedParticle
from paramswarm.entity.particle import CONTROL_PARAMETERS
from . import velocity


def _particles(
    local: float = 0.1, global_: float = 0.9, dimension: int = 1
) -> tp.Tuple[ParameterizedParticle, ParameterizedParticle]:
    particle = ParameterizedParticle(position=[local] * dimension)
    nbest = ParameterizedParticle(position=[global_] * dimension)
    for name in CONTROL_PARAMETERS:
        particle.get_control_parameter(name).best_value = local
        nbest.get_control_parameter(name).best_value = global_
    particle.neighbourhood_best = nbest
    return particle, nbest


def test_registry() -> None:
    assert set(velocity.registry) == {"BareBonesVelocityProvider", "StandardVelocityProvider"}
    assert velocity.registry.get_or_raise("BareBonesVelocityProvider") is velocity.BareBonesVelocityProvider


@testing.parametrized(**{f"seed_{seed}": (seed,) for seed in range(4)})
def test_bare_bones_position_velocity(seed: int) -> None:
    particle, _nbest = _particles()
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(seed))
    testing.assert_within(provider.get(particle), 0.5, 0.8)


@testing.parametrized(**{f"seed_{seed}": (seed,) for seed in range(4)})
def test_bare_bones_control_parameter_velocity(seed: int) -> None:
    particle, _nbest = _particles()
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(seed))
    output = provider.get_control_parameter_velocity(particle)
    assert set(output) == {
        "InertiaVelocity",
        "SocialAccelerationVelocity",
        "CognitiveAccelerationVelocity",
        "VmaxVelocity",
    }
    testing.assert_within(list(output.values()), 0.5, 0.8)


_GUIDE_PAIRS = dict(
    reference=(0.1, 0.9, 0.1, 0.1),
    upper=(0.6, 0.9, 0.1, 0.1),
    narrow=(0.2, 0.3, 0.1, 0.1),
    reversed_=(0.9, 0.1, 0.1, 0.1),
    reversed_upper=(0.9, 0.6, 0.1, 0.1),
    unequal_weights=(0.6, 0.9, 0.3, 0.7),
    unequal_weights_reversed=(0.9, 0.2, 0.8, 0.4),
)


@testing.parametrized(**_GUIDE_PAIRS)
def test_bare_bones_velocity_between_guides(local: float, global_: float, c1: float, c2: float) -> None:
    particle, _nbest = _particles(local=local, global_=global_, dimension=100)
    particle.cognitive_acceleration = c1
    particle.social_acceleration = c2
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    testing.assert_within(provider.get(particle), min(local, global_), max(local, global_), strict=True)


@testing.parametrized(**_GUIDE_PAIRS)
def test_bare_bones_control_parameter_velocity_between_guides(
    local: float, global_: float, c1: float, c2: float
) -> None:
    particle, _nbest = _particles(local=local, global_=global_)
    particle.cognitive_acceleration = c1
    particle.social_acceleration = c2
    for name in ["cognitive_acceleration", "social_acceleration"]:
        particle.get_control_parameter(name).best_value = local
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    for _ in range(50):
        output = provider.get_control_parameter_velocity(particle)
        values = list(output.values())
        testing.assert_within(values, min(local, global_), max(local, global_), strict=True)


def test_bare_bones_equal_guides_do_not_draw() -> None:
    particle, _nbest = _particles(local=0.7, global_=0.7, dimension=3)
    dist = distributions.UniformDistribution(12)
    state = dist.random_state.get_state()
    provider = velocity.BareBonesVelocityProvider(dist)
    np.testing.assert_array_equal(provider.get(particle), [0.7, 0.7, 0.7])
    np.testing.assert_array_equal(dist.random_state.get_state()[1], state[1])


def test_bare_bones_is_weighted_by_acceleration() -> None:
    particle, _nbest = _particles(dimension=50)
    particle.cognitive_acceleration = 0.0
    particle.social_acceleration = 1.0
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    # the mean is then the global guide 0.9, and the deviation 0.8
    testing.assert_within(provider.get(particle), 0.8, 0.9)


def test_bare_bones_without_weights() -> None:
    particle, _nbest = _particles(dimension=10)
    particle.cognitive_acceleration = 0.0
    particle.social_acceleration = 0.0
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    testing.assert_within(provider.get(particle), 0.5, 0.8)


def test_bare_bones_gaussian() -> None:
    particle, _nbest = _particles(local=0.4, global_=0.4, dimension=3)
    provider = velocity.BareBonesVelocityProvider(distributions.GaussianDistribution(12))
    # no spread when guides are equal
    np.testing.assert_almost_equal(provider.get(particle), [0.4, 0.4, 0.4])


def test_self_reference() -> None:
    particle = ParameterizedParticle(position=[0.3, 0.3])
    particle.neighbourhood_best = particle
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    np.testing.assert_almost_equal(provider.get(particle), [0.3, 0.3])
    output = provider.get_control_parameter_velocity(particle)
    np.testing.assert_almost_equal(list(output.values()), [0.1] * 4)


def test_missing_neighbourhood_best() -> None:
    particle = ParameterizedParticle(position=[0.3, 0.3])
    dist = distributions.UniformDistribution(12)
    state = dist.random_state.get_state()
    provider = velocity.BareBonesVelocityProvider(dist)
    for method in [provider.get, provider.get_control_parameter_velocity, provider.compute_velocity]:
        with pytest.raises(errors.MissingNeighbourhoodBestError):
            method(particle)  # type: ignore
    np.testing.assert_array_equal(dist.random_state.get_state()[1], state[1])  # nothing drawn


def test_compute_velocity() -> None:
    particle, _nbest = _particles(dimension=4)
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    position, controls = provider.compute_velocity(particle)
    assert position.shape == (4,)
    testing.assert_within(position, 0.5, 0.8)
    assert len(controls) == 4


def test_standard_velocity() -> None:
    particle, _nbest = _particles(local=1.0, global_=2.0, dimension=20)
    particle.position = [0.0] * 20
    particle.velocity = [0.5] * 20
    particle.inertia = 0.5
    particle.cognitive_acceleration = 1.0
    particle.social_acceleration = 1.0
    particle.vmax = 0.0  # no clamping
    provider = velocity.StandardVelocityProvider(distributions.UniformDistribution(12))
    # 0.5 * 0.5 + r1 * 1 + r2 * 2
    testing.assert_within(provider.get(particle), 0.25, 3.25)
    particle.vmax = 0.3
    testing.assert_within(provider.get(particle), 0.25, 0.3)


def test_standard_velocity_is_deterministic_when_seeded() -> None:
    outputs = []
    for _ in range(2):
        particle, _nbest = _particles(dimension=3)
        provider = velocity.StandardVelocityProvider(distributions.UniformDistribution(24))
        outputs.append(provider.get(particle))
    np.testing.assert_array_equal(outputs[0], outputs[1])


def test_copy_shares_distribution() -> None:
    provider = velocity.BareBonesVelocityProvider(distributions.UniformDistribution(12))
    copied = provider.copy()
    assert isinstance(copied, velocity.BareBonesVelocityProvider)
    assert copied is not provider
    assert copied.distribution is provider.distribution
    assert repr(copied) == "BareBonesVelocityProvider(UniformDistribution())"


def test_base_provider_not_implemented() -> None:
    particle, _nbest = _particles()
    with pytest.raises(NotImplementedError):
        velocity.VelocityProvider().get(particle)
