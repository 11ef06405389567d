# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Boundary with the fitness evaluation layer: the particle swarm only needs
"a problem which returns a fitness given a solution".
"""

import numbers
import numpy as np
import paramswarm.common.typing as tp
from paramswarm.common import errors
from . import corefuncs


Pb = tp.TypeVar("Pb", bound="Problem")


class Problem(tp.Protocol):
    # pylint: disable=pointless-statement, unused-argument

    @property
    def evaluations(self) -> int:
        ...

    def fitness(self, solution: tp.Any) -> float:
        ...

    def copy(self: Pb) -> Pb:
        ...


class FunctionProblem:
    """Minimization problem defined by a continuous function of a position vector.

    Parameters
    ----------
    function: callable or str
        function mapping a 1d array to a float, or name of a function of corefuncs.registry
    dimension: int (optional)
        expected dimension of the solutions, not checked if not provided
    """

    def __init__(
        self,
        function: tp.Union[str, tp.Callable[[np.ndarray], float]],
        dimension: tp.Optional[int] = None,
    ) -> None:
        self.function = corefuncs.registry.get_or_raise(function) if isinstance(function, str) else function
        self.dimension = dimension
        self._evaluations = 0

    @property
    def evaluations(self) -> int:
        """Number of times the function has been evaluated"""
        return self._evaluations

    def fitness(self, solution: tp.Any) -> float:
        """Returns the fitness of the solution

        Raises
        ------
        SolutionTypeError
            if the solution is not a 1d vector of numbers of the expected dimension
        """
        if isinstance(solution, (str, bytes)) or not isinstance(solution, (np.ndarray, tuple, list)):
            raise errors.SolutionTypeError(
                f"{self.__class__.__name__} expects a vector of real numbers, got {type(solution).__name__}"
            )
        if not all(isinstance(x, numbers.Real) for x in np.asarray(solution).ravel().tolist()):
            raise errors.SolutionTypeError(
                f"{self.__class__.__name__} expects real numbers, got {solution!r}"
            )
        data = np.asarray(solution, dtype=float)
        if data.ndim != 1 or (self.dimension is not None and data.size != self.dimension):
            raise errors.SolutionTypeError(
                f"Expected a vector of dimension {self.dimension} but got shape {data.shape}"
            )
        self._evaluations += 1
        return float(self.function(data))

    def copy(self) -> "FunctionProblem":
        """New problem on the same function, with evaluation count reset"""
        return FunctionProblem(self.function, self.dimension)

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", self.function.__class__.__name__)
        return f"{self.__class__.__name__}({name}, dimension={self.dimension})"
