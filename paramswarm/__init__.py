# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import distributions as distributions
from .parametrization import controlparameter as cp
from .entity.particle import ParameterizedParticle as ParameterizedParticle
from .entity.particle import Slot as Slot
from .initialization import initializers as initializers
from .initialization import strategy as strategy
from .initialization.strategy import ParameterInclusiveInitializer as ParameterInclusiveInitializer
from .initialization.strategy import ConfParameterInclusive as ConfParameterInclusive
from .optimization import guides as guides
from .optimization import velocity as velocity
from .functions import corefuncs as corefuncs
from .functions import FunctionProblem as FunctionProblem


__all__ = [
    "typing",
    "distributions",
    "cp",
    "ParameterizedParticle",
    "Slot",
    "initializers",
    "strategy",
    "ParameterInclusiveInitializer",
    "ConfParameterInclusive",
    "guides",
    "velocity",
    "corefuncs",
    "FunctionProblem",
]


__version__ = "0.1.0"
