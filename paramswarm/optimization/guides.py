# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Guide providers resolve the reference positions (and reference control parameter
values) which steer the velocity of a particle.
They are pure functions of the particle state and never modify it.
"""

import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import errors
from paramswarm.entity.keys import CONTROL_PARAMETERS

if tp.TYPE_CHECKING:
    from paramswarm.entity.particle import ParameterizedParticle


class GuideProvider(tp.Protocol):
    # pylint: disable=pointless-statement, unused-argument

    def get(self, particle: "ParameterizedParticle") -> np.ndarray:
        ...

    def get_control(self, particle: "ParameterizedParticle", name: str) -> float:
        ...


def _check_name(name: str) -> None:
    if name not in CONTROL_PARAMETERS:
        raise errors.UnknownControlParameterError(f'Unknown control parameter "{name}"')


class PBestGuideProvider:
    """Personal best: the particle's own best position (and best control parameter values)"""

    def get(self, particle: "ParameterizedParticle") -> np.ndarray:
        return np.array(particle.best_position, copy=True)

    def get_control(self, particle: "ParameterizedParticle", name: str) -> float:
        _check_name(name)
        return particle.get_control_parameter(name).best_value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NBestGuideProvider:
    """Neighbourhood best: best position (and best control parameter values)
    of the particle's neighbourhood best, which may be the particle itself.

    Raises
    ------
    MissingNeighbourhoodBestError
        if the particle has no neighbourhood best
    """

    @staticmethod
    def neighbourhood_best(particle: "ParameterizedParticle") -> "ParameterizedParticle":
        nbest = particle.neighbourhood_best
        if nbest is None:
            raise errors.MissingNeighbourhoodBestError(
                "The particle has no neighbourhood best, it must be set before computing its velocity "
                "and kept alive by the caller (it is held through a weak reference)"
            )
        return nbest

    def get(self, particle: "ParameterizedParticle") -> np.ndarray:
        nbest = self.neighbourhood_best(particle)
        if nbest.dimension != particle.dimension:
            raise errors.DimensionMismatchError(
                f"Neighbourhood best has dimension {nbest.dimension} instead of {particle.dimension}"
            )
        return np.array(nbest.best_position, copy=True)

    def get_control(self, particle: "ParameterizedParticle", name: str) -> float:
        _check_name(name)
        return self.neighbourhood_best(particle).get_control_parameter(name).best_value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
