# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import inspect
import typing as tp
import pytest
import numpy as np


class parametrized:
    """Simplified decorator API for specifying named parametrized test with pytests
    (like with old "genty" package)

    Parameters
    ----------
    **kwargs:
        name of the argument is converted as id of the experiments, and the provided tuple
        contains a value for each of the arguments of the underlying function (in the definition order).
    """

    def __init__(self, **kwargs: tp.Tuple[tp.Any, ...]):
        self.ids = sorted(kwargs)
        self.params = tuple(kwargs[name] for name in self.ids)
        assert self.params
        self.num_params = len(self.params[0])
        assert all(isinstance(p, (tuple, list)) for p in self.params)
        assert all(self.num_params == len(p) for p in self.params[1:])

    def __call__(self, func: tp.Callable[..., None]) -> tp.Any:  # type is lost here :(
        names = list(inspect.signature(func).parameters.keys())
        assert len(names) == self.num_params, f"Parameter names: {names}"
        return pytest.mark.parametrize(
            ",".join(names),
            self.params if self.num_params > 1 else [p[0] for p in self.params],
            ids=self.ids,
        )(func)


def assert_within(
    values: tp.Any, lower: float, upper: float, strict: bool = False, err_msg: str = ""
) -> None:
    """Asserts that all values lie in [lower, upper] (or (lower, upper) if strict),
    printing the offending values otherwise.
    This function should only be used in tests.
    """
    array = np.atleast_1d(np.asarray(values, dtype=float))
    inside = (array > lower) & (array < upper) if strict else (array >= lower) & (array <= upper)
    if not np.all(inside):
        interval = f"({lower}, {upper})" if strict else f"[{lower}, {upper}]"
        message = f"Values {array[~inside].tolist()} are not in {interval}"
        messages = ([err_msg] if err_msg else []) + [message]
        raise AssertionError("\n".join(messages))
