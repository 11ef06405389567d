# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import weakref
import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import errors
from paramswarm.parametrization import controlparameter as cp
from paramswarm.optimization import guides as _guides
from paramswarm.optimization import velocity as _velocity
from .keys import Slot as Slot
from .keys import CONTROL_PARAMETERS as CONTROL_PARAMETERS
from .keys import VELOCITY_KEYS as VELOCITY_KEYS


P = tp.TypeVar("P", bound="ParameterizedParticle")
_SLOT_ATTRIBUTES = {
    Slot.CANDIDATE_SOLUTION: "_position",
    Slot.BEST_POSITION: "_best_position",
    Slot.VELOCITY: "_velocity",
}


def check_control_name(name: str) -> str:
    if name not in CONTROL_PARAMETERS:
        raise errors.UnknownControlParameterError(
            f'Unknown control parameter "{name}" (expected one of {", ".join(CONTROL_PARAMETERS)})'
        )
    return name


# pylint: disable=too-many-instance-attributes
class ParameterizedParticle:
    """Particle carrying, on top of its position, velocity and best position,
    four control parameters (inertia, social acceleration, cognitive acceleration, vmax)
    which are optimized through the same slots as the position.

    Parameters
    ----------
    dimension: int (optional)
        dimension of the position vector (vectors are initialized to zeros)
    position: array-like (optional)
        initial candidate solution, defining the dimension if not provided

    Note
    ----
    - the neighbourhood best is a weak reference: it is never owned, may point
      to the particle itself, and is not transmitted to copies.
    - fitness is minimized.
    """

    def __init__(
        self, dimension: tp.Optional[int] = None, position: tp.Optional[tp.ArrayLike] = None
    ) -> None:
        if position is not None:
            data = self._as_vector(position)
            if dimension is not None and data.size != dimension:
                raise errors.DimensionMismatchError(
                    f"Position of size {data.size} does not match dimension {dimension}"
                )
            dimension = data.size
        dimension = 0 if dimension is None else int(dimension)
        if dimension < 0:
            raise errors.ParamSwarmValueError(f"Dimension must be non-negative (got {dimension})")
        self._position = np.zeros(dimension) if position is None else data
        self._velocity = np.zeros(dimension)
        self._best_position = np.array(self._position, copy=True)
        self.fitness = float("inf")
        self.best_fitness = float("inf")
        self._controls: tp.Dict[str, cp.ControlParameter] = {
            name: cp.ControlParameter() for name in CONTROL_PARAMETERS
        }
        self._neighbourhood_best: tp.Optional["weakref.ReferenceType[ParameterizedParticle]"] = None
        self.local_guide_provider: _guides.GuideProvider = _guides.PBestGuideProvider()
        self.global_guide_provider: _guides.GuideProvider = _guides.NBestGuideProvider()
        self.velocity_provider: _velocity.VelocityProvider = _velocity.BareBonesVelocityProvider()

    @property
    def dimension(self) -> int:
        return int(self._position.size)

    @staticmethod
    def _as_vector(data: tp.ArrayLike) -> np.ndarray:
        array = np.array(data, dtype=float, copy=True)
        if array.ndim != 1:
            raise errors.DimensionMismatchError(f"Expected a 1d vector but got shape {array.shape}")
        return array

    # %% slots

    def get_slot(self, slot: Slot) -> np.ndarray:
        """Returns the vector stored in the slot (not a copy)"""
        if not isinstance(slot, Slot):
            raise errors.UnsupportedSlotError(f"Expected a Slot but got {slot!r}")
        return getattr(self, _SLOT_ATTRIBUTES[slot])  # type: ignore

    def set_slot(self, slot: Slot, data: tp.ArrayLike) -> None:
        """Stores a copy of the vector in the slot.
        A particle without dimension takes the dimension of its first candidate solution.
        """
        if not isinstance(slot, Slot):
            raise errors.UnsupportedSlotError(f"Expected a Slot but got {slot!r}")
        array = self._as_vector(data)
        if array.size != self.dimension:
            if slot != Slot.CANDIDATE_SOLUTION or self.dimension:
                raise errors.DimensionMismatchError(
                    f"Cannot set a vector of size {array.size} in {slot.name} of dimension {self.dimension}"
                )
            self._velocity = np.zeros(array.size)
            self._best_position = np.zeros(array.size)
        setattr(self, _SLOT_ATTRIBUTES[slot], array)

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, data: tp.ArrayLike) -> None:
        self.set_slot(Slot.CANDIDATE_SOLUTION, data)

    @property
    def best_position(self) -> np.ndarray:
        return self._best_position

    @best_position.setter
    def best_position(self, data: tp.ArrayLike) -> None:
        self.set_slot(Slot.BEST_POSITION, data)

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity

    @velocity.setter
    def velocity(self, data: tp.ArrayLike) -> None:
        self.set_slot(Slot.VELOCITY, data)

    # %% control parameters

    def get_control_parameter(self, name: str) -> cp.ControlParameter:
        return self._controls[check_control_name(name)]

    def set_control_parameter(self, name: str, param: tp.Union[cp.ControlParameter, float]) -> None:
        """Replaces the control parameter (numbers are converted to pinned constants)"""
        self._controls[check_control_name(name)] = cp.as_control_parameter(param)

    def control_parameters(self) -> tp.Dict[str, cp.ControlParameter]:
        """Ordered name -> control parameter mapping"""
        return dict(self._controls)

    @property
    def inertia(self) -> cp.ControlParameter:
        return self._controls["inertia"]

    @inertia.setter
    def inertia(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_control_parameter("inertia", param)

    @property
    def social_acceleration(self) -> cp.ControlParameter:
        return self._controls["social_acceleration"]

    @social_acceleration.setter
    def social_acceleration(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_control_parameter("social_acceleration", param)

    @property
    def cognitive_acceleration(self) -> cp.ControlParameter:
        return self._controls["cognitive_acceleration"]

    @cognitive_acceleration.setter
    def cognitive_acceleration(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_control_parameter("cognitive_acceleration", param)

    @property
    def vmax(self) -> cp.ControlParameter:
        return self._controls["vmax"]

    @vmax.setter
    def vmax(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_control_parameter("vmax", param)

    # %% neighbourhood

    @property
    def neighbourhood_best(self) -> tp.Optional["ParameterizedParticle"]:
        """Best particle of the neighbourhood, or None if unset (or garbage collected).

        Note
        ----
        The particle is held through a weak reference: the caller (typically the swarm)
        must keep the neighbourhood best alive. Assigning a temporary, such as
        :code:`particle.neighbourhood_best = other.copy()`, leaves the field unset.
        """
        return None if self._neighbourhood_best is None else self._neighbourhood_best()

    @neighbourhood_best.setter
    def neighbourhood_best(self, particle: tp.Optional["ParameterizedParticle"]) -> None:
        # weak reference, see the getter: the referent must be kept alive by the caller
        if particle is not None and not isinstance(particle, ParameterizedParticle):
            raise errors.ParamSwarmTypeError(f"Expected a ParameterizedParticle but got {particle!r}")
        self._neighbourhood_best = None if particle is None else weakref.ref(particle)

    # %% optimization steps

    def update_velocity(self) -> None:
        """Computes and stores the new velocities of the position and of each control parameter.
        Nothing is written if the computation fails (eg: no neighbourhood best).
        """
        velocity, controls = self.velocity_provider.compute_velocity(self)
        self._velocity = self._as_vector(velocity)
        for name, key in VELOCITY_KEYS.items():
            self._controls[name].velocity = float(controls[key])

    def update_personal_best(self, fitness: tp.FloatLoss) -> bool:
        """Records the fitness of the current position, and stores the position and
        control parameter values as best if it improves (minimization).

        Returns
        -------
        bool
            whether the personal best was updated
        """
        self.fitness = float(fitness)
        if not self.fitness < self.best_fitness:
            return False
        self.best_fitness = self.fitness
        self._best_position = np.array(self._position, copy=True)
        for param in self._controls.values():
            param.best_value = param.value
        return True

    # %% copy

    def copy(self: P) -> P:
        """Creates an independent copy of the particle.
        Vectors and control parameters are copied, guide and velocity providers are shared,
        and the copy has no neighbourhood best.
        """
        child = self.__class__.__new__(self.__class__)
        child.__dict__.update(self.__dict__)
        for attribute in _SLOT_ATTRIBUTES.values():
            setattr(child, attribute, np.array(getattr(self, attribute), copy=True))
        child._controls = {name: param.copy() for name, param in self._controls.items()}
        child._neighbourhood_best = None
        return child

    def __getstate__(self) -> tp.Dict[str, tp.Any]:
        state = dict(self.__dict__)
        state["_neighbourhood_best"] = None  # weak references cannot be pickled
        return state

    def __setstate__(self, state: tp.Dict[str, tp.Any]) -> None:
        self.__dict__.update(state)

    def __repr__(self) -> str:
        controls = ", ".join(f"{name}={param.value:.4g}" for name, param in self._controls.items())
        return f"{self.__class__.__name__}(position={self._position.tolist()}, {controls})"
