# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import pytest
import numpy as np
from paramswarm.common import testing
from . import corefuncs


@testing.parametrized(**{name: (name, func) for name, func in corefuncs.registry.items()})
def testcorefuncs_function(name: str, func: tp.Callable[..., tp.Any]) -> None:
    x = np.random.normal(0, 1, 2)
    outputs = []
    for _ in range(2):
        np.random.seed(12)
        outputs.append(func(x))
    np.testing.assert_equal(outputs[0], outputs[1], f"Function {name} is not deterministic")


@testing.parametrized(
    sphere=(corefuncs.sphere, 30, [1, 2, 3, 4]),
    sphere_0=(corefuncs.sphere, 0, [0, 0]),
    bukin4=(corefuncs.bukin4, 400.11, [1, 2]),
    bukin4_0=(corefuncs.bukin4, 0, [-10, 0]),
    rastrigin_0=(corefuncs.rastrigin, 0, [0, 0, 0]),
    rastrigin=(corefuncs.rastrigin, 2, [1, 1]),
)
def test_core_function_values(
    func: tp.Callable[[np.ndarray], float], expected: float, data: tp.List[float]
) -> None:
    value = func(np.array(data, dtype=float))
    np.testing.assert_almost_equal(value, expected, decimal=5)


def test_bukin4_dimension() -> None:
    with pytest.raises(ValueError):
        corefuncs.bukin4(np.array([1.0, 2.0, 3.0]))
