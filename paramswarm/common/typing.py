# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Definitions of some convenient types.
"""
# pylint: disable=unused-import
# structures
from typing import Any as Any
from typing import Type as Type
from typing import TypeVar as TypeVar
from typing import Optional as Optional
from typing import Union as Union
from typing import NamedTuple as NamedTuple
from typing import TYPE_CHECKING as TYPE_CHECKING

# containers
from typing import Dict as Dict
from typing import Tuple as Tuple
from typing import List as List
from typing import Sequence as Sequence
from typing import MutableMapping as MutableMapping

# iterables
from typing import Iterator as Iterator
from typing import Iterable as Iterable

# others
from typing import Callable as Callable
from typing import Hashable as Hashable
from typing_extensions import Protocol as Protocol
from typing_extensions import runtime_checkable as runtime_checkable

#
import numpy as _np


ArrayLike = Union[Tuple[float, ...], List[float], _np.ndarray]
FloatLoss = float


class ControlParameterLike(Protocol):
    # pylint: disable=pointless-statement

    @property
    def value(self) -> float:
        ...


class DistributionLike(Protocol):
    """Random capability injected in initializers and velocity providers.
    The meaning of both arguments depends on the distribution
    (low/high for uniform, mean/deviation for gaussian).
    """

    # pylint: disable=pointless-statement, unused-argument

    def sample(self, first: float, second: float) -> float:
        ...


BoundLike = Union[float, int, ControlParameterLike]
