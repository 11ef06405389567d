# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import warnings
import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import errors


C = tp.TypeVar("C", bound="ControlParameter")
DEFAULT_VALUE = 0.1


class ControlParameter:
    """Scalar algorithm parameter (inertia, acceleration coefficients, velocity clamp...)
    which can be optimized alongside the position of a particle.
    It carries the same three slots as a particle: current value, best value and velocity.

    Parameters
    ----------
    value: float
        initial value of the parameter

    Note
    ----
    - assigning :code:`param.value = x` is an explicit user assignment: the parameter
      is then pinned, and automatic initialization never overwrites it again.
    - adaptive updates (initialization, optimization) go through :code:`update`.

    Example
    -------
    >>> param = ControlParameter(0.4)
    >>> param.set_by_user
    False
    >>> param.value = 0.7
    >>> param.set_by_user
    True
    """

    def __init__(self, value: float = DEFAULT_VALUE) -> None:
        self._value = float(value)
        self._set_by_user = False
        self.best_value = float(value)
        self.velocity = 0.0

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self.mark_user_set(value)

    @property
    def set_by_user(self) -> bool:
        """Whether the value was explicitly provided by the user (sticky)"""
        return self._set_by_user

    def mark_user_set(self: C, value: float) -> C:
        """Sets the value and pins the parameter to it"""
        self._value = float(value)
        self._set_by_user = True
        return self

    def update(self, value: float) -> None:
        """Adaptive update of the value, ignored if the parameter was set by the user"""
        if not self._set_by_user:
            self._value = float(value)

    def sample(self, distribution: tp.DistributionLike, lower: tp.BoundLike, upper: tp.BoundLike) -> float:
        """Draws a new value within [lower, upper], stores it and returns it.
        A parameter set by the user keeps its value and nothing is drawn.

        Parameters
        ----------
        distribution: DistributionLike
            the random capability to draw from
        lower: ControlParameter or float
            lower bound
        upper: ControlParameter or float
            upper bound

        Raises
        ------
        InvalidBoundsError
            if the lower bound is above the upper bound
        """
        low, high = check_bounds(lower, upper)
        if self._set_by_user:
            return self._value
        self._value = float(distribution.sample(low, high))
        return self._value

    def copy(self: C) -> C:
        """Creates a full, independent copy of the parameter (flag included)"""
        child = self.__class__.__new__(self.__class__)
        child.__dict__.update(self.__dict__)
        return child

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        pinned = ", set_by_user" if self._set_by_user else ""
        return f"{self.__class__.__name__}({self._value}{pinned})"


def constant(value: float) -> ControlParameter:
    """Creates a control parameter pinned to the provided value"""
    return ControlParameter(value).mark_user_set(value)


def as_control_parameter(param: tp.Union[ControlParameter, float, int]) -> ControlParameter:
    """Returns a ControlParameter from anything:
    either the input if it is already a parameter, or a constant if it is a number
    """
    if isinstance(param, ControlParameter):
        return param
    if isinstance(param, (bool, np.bool_)) or not isinstance(param, (int, float, np.integer, np.floating)):
        raise errors.ParamSwarmTypeError(f"Expected a ControlParameter or a number but got {param!r}")
    return constant(float(param))


def _bound_value(bound: tp.BoundLike) -> float:
    return float(bound.value) if hasattr(bound, "value") else float(bound)  # type: ignore


def check_bounds(lower: tp.BoundLike, upper: tp.BoundLike) -> tp.Tuple[float, float]:
    """Returns the (lower, upper) values after checking that lower <= upper

    Raises
    ------
    InvalidBoundsError
        if lower is above upper
    """
    low, high = _bound_value(lower), _bound_value(upper)
    if not low <= high:
        raise errors.InvalidBoundsError(f"Lower bound {low} is above upper bound {high}")
    if low == high:
        warnings.warn(
            f"Lower and upper bounds are both {low}, sampling will always provide this value",
            errors.DegenerateBoundsWarning,
        )
    return low, high


class Bounds(tp.NamedTuple):
    """(lower, upper) pair of control parameters within which a quantity is sampled"""

    lower: ControlParameter
    upper: ControlParameter

    def check(self) -> tp.Tuple[float, float]:
        """Returns the bound values, raising InvalidBoundsError if lower > upper"""
        return check_bounds(self.lower, self.upper)

    def copy(self) -> "Bounds":
        return Bounds(self.lower.copy(), self.upper.copy())

    def __repr__(self) -> str:
        return f"Bounds({self.lower.value}, {self.upper.value})"


def as_bounds(bounds: tp.Union[Bounds, tp.Tuple[tp.Any, tp.Any]]) -> Bounds:
    """Converts a pair of numbers or parameters into a Bounds instance.
    The ordering is not checked here, but when sampling.
    """
    if isinstance(bounds, Bounds):
        return bounds
    if len(bounds) != 2:
        raise errors.ParamSwarmValueError(f"Bounds must be a (lower, upper) pair, got {bounds!r}")
    lower, upper = bounds
    return Bounds(as_control_parameter(lower), as_control_parameter(upper))
