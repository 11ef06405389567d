# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


# base classes


class ParamSwarmError(Exception):
    """Base class for error raised by paramswarm"""


class ParamSwarmWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class ParamSwarmRuntimeError(RuntimeError, ParamSwarmError):
    """Runtime error raised by paramswarm"""


class ParamSwarmTypeError(TypeError, ParamSwarmError):
    """Type error raised by paramswarm"""


class ParamSwarmValueError(ValueError, ParamSwarmError):
    """Value error raised by paramswarm"""


class InvalidBoundsError(ParamSwarmValueError):
    """A bound pair has its lower value above its upper value"""


class UnknownControlParameterError(ParamSwarmValueError, KeyError):
    """The name does not match any of the control parameters of a particle"""

    def __str__(self) -> str:  # KeyError would add quotes around the message
        return str(self.args[0]) if self.args else ""


class MissingNeighbourhoodBestError(ParamSwarmRuntimeError):
    """A global guide was requested for a particle without neighbourhood best"""


class UnsupportedSlotError(ParamSwarmTypeError):
    """Initialization was requested for a key which is not a particle slot"""


class DimensionMismatchError(ParamSwarmValueError):
    """A vector does not match the dimension of the particle"""


class SolutionTypeError(ParamSwarmTypeError):
    """The solution representation does not match what the problem expects"""


# warnings


class ParamSwarmRuntimeWarning(RuntimeWarning, ParamSwarmWarning):
    """Runtime warning raised by paramswarm"""


class DegenerateBoundsWarning(ParamSwarmRuntimeWarning):
    """Lower and upper bounds are equal, sampling always provides the same value"""
