# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import distributions
from paramswarm.common.decorators import Registry
from paramswarm.entity.keys import CONTROL_PARAMETERS
from paramswarm.entity.keys import VELOCITY_KEYS

if tp.TYPE_CHECKING:
    from paramswarm.entity.particle import ParameterizedParticle


logger = logging.getLogger(__name__)
V = tp.TypeVar("V", bound="VelocityProvider")
registry: Registry[tp.Type["VelocityProvider"]] = Registry()
_ControlGuides = tp.Dict[str, tp.Tuple[float, float]]


class VelocityProvider:
    """Computes the velocity of the position of a particle and, by the identical rule,
    the velocity of each of its control parameters.

    The position velocity is computed dimension-wise from the local guide and global guide
    provided by the particle's guide providers; a control parameter velocity uses the best value
    of the parameter (local) and the best value of the same parameter on the
    neighbourhood best (global).

    Parameters
    ----------
    distribution: DistributionLike (optional)
        random capability used by the update rule (uniform if not provided)
    """

    def __init__(self, distribution: tp.Optional[tp.DistributionLike] = None) -> None:
        self.distribution = distributions.as_distribution(distribution)

    def _step(
        self,
        particle: "ParameterizedParticle",
        current: float,
        velocity: float,
        local_guide: float,
        global_guide: float,
    ) -> float:
        """Update rule for one scalar quantity"""
        raise NotImplementedError

    def get(self, particle: "ParameterizedParticle") -> np.ndarray:
        """Returns the new velocity of the position"""
        local = particle.local_guide_provider.get(particle)
        global_ = particle.global_guide_provider.get(particle)
        return self._position_velocity(particle, local, global_)

    def get_control_parameter_velocity(self, particle: "ParameterizedParticle") -> tp.Dict[str, float]:
        """Returns the new velocity of each control parameter, keyed by
        InertiaVelocity, SocialAccelerationVelocity, CognitiveAccelerationVelocity and VmaxVelocity
        """
        return self._control_velocities(particle, self._control_guides(particle))

    def compute_velocity(
        self, particle: "ParameterizedParticle"
    ) -> tp.Tuple[np.ndarray, tp.Dict[str, float]]:
        """Returns both the position velocity and the control parameter velocities.
        All guides are resolved before any computation, so that a missing neighbourhood best
        fails before drawing any random number.
        """
        local = particle.local_guide_provider.get(particle)
        global_ = particle.global_guide_provider.get(particle)
        guides = self._control_guides(particle)
        velocity = self._position_velocity(particle, local, global_)
        controls = self._control_velocities(particle, guides)
        logger.debug("%s computed control parameter velocities %s", self, controls)
        return velocity, controls

    def _position_velocity(
        self, particle: "ParameterizedParticle", local: np.ndarray, global_: np.ndarray
    ) -> np.ndarray:
        return np.array(
            [
                self._step(particle, x, v, lg, gg)
                for x, v, lg, gg in zip(particle.position, particle.velocity, local, global_)
            ],
            dtype=float,
        )

    @staticmethod
    def _control_guides(particle: "ParameterizedParticle") -> _ControlGuides:
        return {
            name: (
                particle.local_guide_provider.get_control(particle, name),
                particle.global_guide_provider.get_control(particle, name),
            )
            for name in CONTROL_PARAMETERS
        }

    def _control_velocities(
        self, particle: "ParameterizedParticle", guides: _ControlGuides
    ) -> tp.Dict[str, float]:
        velocities = {}
        for name, (local, global_) in guides.items():
            param = particle.get_control_parameter(name)
            velocities[VELOCITY_KEYS[name]] = float(
                self._step(particle, param.value, param.velocity, local, global_)
            )
        return velocities

    def copy(self: V) -> V:
        """New provider of the same kind and settings, sharing the random distribution"""
        new = self.__class__.__new__(self.__class__)
        new.__dict__.update(self.__dict__)
        return new

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.distribution!r})"


@registry.register
class BareBonesVelocityProvider(VelocityProvider):
    """Bare bones update: the new velocity is drawn from the distribution around
    a weighted mean of the local and global guides. The second argument of the draw is
    the distance between the guides, bounded to the interval they span, so that a uniform
    draw always falls between both guides. Equal guides provide this guide, without drawing.
    The weights are the particle's own cognitive (local) and social (global)
    acceleration values, so that adapted coefficients steer the sampling.

    With a uniform distribution and equal weights, guides 0.1 and 0.9 provide
    a velocity between the mean 0.5 and the distance 0.8, while guides 0.6 and 0.9
    provide a velocity between 0.6 (bounded distance) and the mean 0.75.

    Note
    ----
    Kennedy, J. (2003). Bare bones particle swarms. Proceedings of the IEEE Swarm
    Intelligence Symposium, pp. 80-87.
    """

    def _step(  # pylint: disable=unused-argument
        self,
        particle: "ParameterizedParticle",
        current: float,
        velocity: float,
        local_guide: float,
        global_guide: float,
    ) -> float:
        c1 = particle.cognitive_acceleration.value
        c2 = particle.social_acceleration.value
        total = c1 + c2
        if total:
            mean = (c1 * local_guide + c2 * global_guide) / total
        else:
            mean = 0.5 * (local_guide + global_guide)
        low, high = min(local_guide, global_guide), max(local_guide, global_guide)
        if low == high:
            return float(low)
        deviation = float(np.clip(high - low, low, high))
        return self.distribution.sample(mean, deviation)


@registry.register
class StandardVelocityProvider(VelocityProvider):
    """Inertia weight update using the particle's own control parameters:
    :code:`w * v + c1 * r1 * (local - x) + c2 * r2 * (global - x)`
    with :code:`r1, r2` drawn from the distribution between 0 and 1,
    then clamped to :code:`[-vmax, vmax]` when vmax is positive.
    """

    def _step(
        self,
        particle: "ParameterizedParticle",
        current: float,
        velocity: float,
        local_guide: float,
        global_guide: float,
    ) -> float:
        rp = self.distribution.sample(0.0, 1.0)
        rg = self.distribution.sample(0.0, 1.0)
        speed = (
            particle.inertia.value * velocity
            + particle.cognitive_acceleration.value * rp * (local_guide - current)
            + particle.social_acceleration.value * rg * (global_guide - current)
        )
        vmax = particle.vmax.value
        if vmax > 0:
            speed = float(np.clip(speed, -vmax, vmax))
        return speed
