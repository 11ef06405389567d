# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import inspect
import typing as tp


def different_from_defaults(
    *, instance: tp.Any, instance_dict: tp.Dict[str, tp.Any], check_mismatches: bool = False
) -> tp.Dict[str, tp.Any]:
    """Returns the entries of instance_dict which differ from the default
    arguments of the instance's __init__

    Parameters
    ----------
    instance: object
        the configured object
    instance_dict: dict
        the keyword arguments the instance was created with
    check_mismatches: bool
        checks that the keys match the parameters of __init__

    Note
    ----
    This is convenient for short repr of configuration objects
    """
    defaults = {
        x: y.default
        for x, y in inspect.signature(instance.__class__.__init__).parameters.items()
        if x not in ["self", "__class__"]
    }
    if check_mismatches:
        diff = set(defaults.keys()).symmetric_difference(instance_dict.keys())
        if diff:  # this is to help during development
            raise RuntimeError(f"Mismatch between attributes and arguments of {instance}: {diff}")
    return {
        x: instance_dict[x]
        for x, y in defaults.items()
        if x in instance_dict and not x.startswith("_")
        and y is not instance_dict[x] and y != instance_dict[x]
    }
