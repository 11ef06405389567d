# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import paramswarm.common.typing as tp
from paramswarm.common import errors
from paramswarm.common import distributions
from paramswarm.common import tools
from paramswarm.common.decorators import Registry
from paramswarm.parametrization import controlparameter as cp
from paramswarm.entity.particle import CONTROL_PARAMETERS
from paramswarm.entity.particle import ParameterizedParticle
from paramswarm.entity.particle import Slot
from paramswarm.entity.particle import check_control_name
from . import initializers


logger = logging.getLogger(__name__)
registry: Registry["ConfParameterInclusive"] = Registry()
_ParamLike = tp.Optional[tp.Union[cp.ControlParameter, float]]
_BoundsLike = tp.Union[cp.Bounds, tp.Tuple[tp.Any, tp.Any]]
_DEFAULT_BOUNDS = (0.1, 0.9)


# pylint: disable=too-many-instance-attributes
class ParameterInclusiveInitializer:
    """Initializes a ParameterizedParticle: its vectors are initialized by a delegate
    initializer (random within bounds by default), and its four control parameters
    (inertia, social acceleration, cognitive acceleration, vmax) are sampled within
    their own bounds. Parameters set by the user are never resampled.

    Parameters
    ----------
    inertia, social_acceleration, cognitive_acceleration, vmax: ControlParameter or float (optional)
        the control parameters. If not provided, an adaptive parameter is created. A float
        provides a parameter pinned to this value. Parameters are copied.
    inertia_bounds, social_bounds, cognitive_bounds, vmax_bounds: Bounds or tuple
        (lower, upper) bounds within which each control parameter is sampled
    bounds: Bounds or tuple
        (lower, upper) bounds of the position, provided to the delegate initializer
        if it is bounds-configurable
    initializer: InitializationStrategy (optional)
        delegate initializer for the position, best position and velocity vectors
        (RandomBoundedInitializer if not provided)
    distribution: DistributionLike (optional)
        random capability for sampling the parameters (uniform if not provided).
        It is shared with copies of this instance.

    Note
    ----
    Initializing a particle for the CANDIDATE_SOLUTION slot hands over copies of the
    four parameters, while BEST_POSITION and VELOCITY slots only update respectively
    the best value and the velocity of the particle's existing parameters.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        *,
        inertia: _ParamLike = None,
        social_acceleration: _ParamLike = None,
        cognitive_acceleration: _ParamLike = None,
        vmax: _ParamLike = None,
        inertia_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        social_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        cognitive_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        vmax_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        bounds: _BoundsLike = _DEFAULT_BOUNDS,
        initializer: tp.Optional[initializers.InitializationStrategy] = None,
        distribution: tp.Optional[tp.DistributionLike] = None,
    ) -> None:
        self.distribution = distributions.as_distribution(distribution)
        given = dict(
            inertia=inertia,
            social_acceleration=social_acceleration,
            cognitive_acceleration=cognitive_acceleration,
            vmax=vmax,
        )
        self._parameters: tp.Dict[str, cp.ControlParameter] = {
            name: cp.ControlParameter() if value is None else cp.as_control_parameter(value).copy()
            for name, value in given.items()
        }
        given_bounds = dict(
            inertia=inertia_bounds,
            social_acceleration=social_bounds,
            cognitive_acceleration=cognitive_bounds,
            vmax=vmax_bounds,
        )
        self._bounds: tp.Dict[str, cp.Bounds] = {
            name: cp.as_bounds(given_bounds[name]).copy() for name in CONTROL_PARAMETERS
        }
        entity_bounds = cp.as_bounds(bounds).copy()
        self.lower_bound = entity_bounds.lower
        self.upper_bound = entity_bounds.upper
        self._initializer: initializers.InitializationStrategy = (
            initializers.RandomBoundedInitializer(distribution=self.distribution)
            if initializer is None
            else initializer
        )

    # %% initialization

    def initialize(self, slot: Slot, particle: ParameterizedParticle) -> None:
        """Initializes the slot of the particle, along with the corresponding slot
        of its control parameters.

        Parameters
        ----------
        slot: Slot
            CANDIDATE_SOLUTION, BEST_POSITION or VELOCITY
        particle: ParameterizedParticle
            the particle to initialize

        Raises
        ------
        UnsupportedSlotError
            if slot is not a Slot
        InvalidBoundsError
            if any of the bound pairs has its lower value above its upper value.
            In both cases, the particle is not modified.
        """
        if not isinstance(slot, Slot):
            raise errors.UnsupportedSlotError(f"Cannot initialize {slot!r}, expected one of {list(Slot)}")
        cp.check_bounds(self.lower_bound, self.upper_bound)
        for bounds in self._bounds.values():
            bounds.check()
        if isinstance(self._initializer, initializers.BoundsConfigurable):
            delegate = self._initializer.copy()
            delegate.lower_bound = self.lower_bound.copy()
            delegate.upper_bound = self.upper_bound.copy()
            logger.debug("Refreshed bounds of %s for %s", delegate, slot.name)
            self._initializer = delegate
        self._initializer.initialize(slot, particle)
        self._initialize_parameters()
        if slot == Slot.CANDIDATE_SOLUTION:
            for name, param in self._parameters.items():
                particle.set_control_parameter(name, param.copy())
        elif slot == Slot.BEST_POSITION:
            for name, param in self._parameters.items():
                particle.get_control_parameter(name).best_value = param.value
        elif slot == Slot.VELOCITY:
            for name, param in self._parameters.items():
                particle.get_control_parameter(name).velocity = param.value
        else:
            raise AssertionError(f"Unhandled slot {slot}")

    def _initialize_parameters(self) -> None:
        for name, param in self._parameters.items():
            if not param.set_by_user:
                bounds = self._bounds[name]
                param.sample(self.distribution, bounds.lower, bounds.upper)
                logger.debug("Sampled %s=%s within %s", name, param.value, bounds)

    # %% accessors

    def get_parameter(self, name: str) -> cp.ControlParameter:
        return self._parameters[check_control_name(name)]

    def set_parameter(self, name: str, param: tp.Union[cp.ControlParameter, float]) -> None:
        """Sets a copy of the parameter (a float provides a parameter pinned to this value)"""
        self._parameters[check_control_name(name)] = cp.as_control_parameter(param).copy()

    def get_bounds(self, name: str) -> cp.Bounds:
        return self._bounds[check_control_name(name)]

    def set_bounds(self, name: str, bounds: _BoundsLike) -> None:
        self._bounds[check_control_name(name)] = cp.as_bounds(bounds)

    def get_lower_bound(self, name: str) -> cp.ControlParameter:
        return self.get_bounds(name).lower

    def set_lower_bound(self, name: str, bound: tp.Union[cp.ControlParameter, float]) -> None:
        bounds = self.get_bounds(name)
        self._bounds[name] = bounds._replace(lower=cp.as_control_parameter(bound))

    def get_upper_bound(self, name: str) -> cp.ControlParameter:
        return self.get_bounds(name).upper

    def set_upper_bound(self, name: str, bound: tp.Union[cp.ControlParameter, float]) -> None:
        bounds = self.get_bounds(name)
        self._bounds[name] = bounds._replace(upper=cp.as_control_parameter(bound))

    @property
    def inertia(self) -> cp.ControlParameter:
        return self._parameters["inertia"]

    @inertia.setter
    def inertia(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_parameter("inertia", param)

    @property
    def social_acceleration(self) -> cp.ControlParameter:
        return self._parameters["social_acceleration"]

    @social_acceleration.setter
    def social_acceleration(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_parameter("social_acceleration", param)

    @property
    def cognitive_acceleration(self) -> cp.ControlParameter:
        return self._parameters["cognitive_acceleration"]

    @cognitive_acceleration.setter
    def cognitive_acceleration(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_parameter("cognitive_acceleration", param)

    @property
    def vmax(self) -> cp.ControlParameter:
        return self._parameters["vmax"]

    @vmax.setter
    def vmax(self, param: tp.Union[cp.ControlParameter, float]) -> None:
        self.set_parameter("vmax", param)

    @property
    def initializer(self) -> initializers.InitializationStrategy:
        """Delegate initializer of the particle vectors"""
        return self._initializer

    @initializer.setter
    def initializer(self, initializer: initializers.InitializationStrategy) -> None:
        self._initializer = initializer

    # %% copy

    def copy(self) -> "ParameterInclusiveInitializer":
        """Creates an independent copy: parameters, bounds and delegate initializer are
        copied, the random distribution is shared.
        """
        new = self.__class__.__new__(self.__class__)
        new.distribution = self.distribution
        new._parameters = {name: param.copy() for name, param in self._parameters.items()}
        new._bounds = {name: bounds.copy() for name, bounds in self._bounds.items()}
        new.lower_bound = self.lower_bound.copy()
        new.upper_bound = self.upper_bound.copy()
        new._initializer = self._initializer.copy()
        return new

    def __repr__(self) -> str:
        params = ", ".join(f"{name}={param!r}" for name, param in self._parameters.items())
        bounds = cp.Bounds(self.lower_bound, self.upper_bound)
        return f"{self.__class__.__name__}({params}, bounds={bounds!r})"


class ConfParameterInclusive:
    """Configuration of a ParameterInclusiveInitializer, gathering all its settings at a
    single call site. Calling it creates a new, independent initializer, so that each particle
    of a swarm gets its own parameters.
    Parameters are the same as ParameterInclusiveInitializer.

    Example
    -------
    >>> conf = ConfParameterInclusive(inertia=0.7, vmax_bounds=(0.2, 0.5))
    >>> initializer = conf()
    """

    # pylint: disable=unused-argument,too-many-arguments
    def __init__(
        self,
        *,
        inertia: _ParamLike = None,
        social_acceleration: _ParamLike = None,
        cognitive_acceleration: _ParamLike = None,
        vmax: _ParamLike = None,
        inertia_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        social_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        cognitive_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        vmax_bounds: _BoundsLike = _DEFAULT_BOUNDS,
        bounds: _BoundsLike = _DEFAULT_BOUNDS,
        initializer: tp.Optional[initializers.InitializationStrategy] = None,
        distribution: tp.Optional[tp.DistributionLike] = None,
    ) -> None:
        config = dict(locals())
        config.pop("self", None)  # self comes from "locals()"
        config.pop("__class__", None)
        self._config = config
        diff = tools.different_from_defaults(instance=self, instance_dict=config, check_mismatches=True)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"
        self()  # instantiating for init checks

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(self) -> ParameterInclusiveInitializer:
        """Creates a new initializer from the configuration"""
        config = dict(self._config)
        if config["initializer"] is not None:
            config["initializer"] = config["initializer"].copy()
        return ParameterInclusiveInitializer(**config)

    def __repr__(self) -> str:
        return self.name

    def set_name(self, name: str, register: bool = False) -> "ConfParameterInclusive":
        """Set a new representation for the instance"""
        self.name = name
        if register:
            registry.register_name(name, self)
        return self

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            return self._config == other._config
        return False


AdaptiveParameters = ConfParameterInclusive().set_name("AdaptiveParameters", register=True)
FixedInertiaParameters = ConfParameterInclusive(inertia=0.729).set_name(
    "FixedInertiaParameters", register=True
)
