# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
from paramswarm.common.decorators import Registry
import paramswarm.common.typing as tp


registry: Registry[tp.Callable[[np.ndarray], float]] = Registry()


@registry.register
def sphere(x: np.ndarray) -> float:
    """The most classical continuous optimization testbed.

    If you do not solve that one then you have a bug."""
    assert x.ndim == 1
    return float(x.dot(x))


@registry.register
def bukin4(x: np.ndarray) -> float:
    """Bukin function N.4, two dimensional, minimum 0 at (-10, 0).

    :code:`100 * x2 ** 2 + 0.01 * |x1 + 10|`"""
    if x.size != 2:
        raise ValueError(f"Bukin N.4 is only defined in dimension 2 (got {x.size})")
    return float(100.0 * x[1] ** 2 + 0.01 * abs(x[0] + 10.0))


@registry.register
def rastrigin(x: np.ndarray) -> float:
    """Classical multimodal function."""
    cosi = float(np.sum(np.cos(2 * np.pi * x)))
    return float(10.0 * (len(x) - cosi) + sphere(x))
