# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

# pylint: disable=unused-import
# import with "as" to explicitely allow reexport (mypy)

from .controlparameter import ControlParameter as ControlParameter
from .controlparameter import Bounds as Bounds
from .controlparameter import constant as constant
from .controlparameter import as_control_parameter as as_control_parameter
from .controlparameter import as_bounds as as_bounds
from .controlparameter import check_bounds as check_bounds
