# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
from . import testing


@testing.parametrized(
    inside=([0.2, 0.5], 0.2, 0.5, False, True),
    strict_boundary=([0.2, 0.5], 0.2, 0.5, True, False),
    strict_inside=([0.3, 0.4], 0.2, 0.5, True, True),
    outside=([0.1, 0.3], 0.2, 0.5, False, False),
    scalar=(0.3, 0.2, 0.5, False, True),
)
def test_assert_within(values: list, lower: float, upper: float, strict: bool, expected: bool) -> None:
    if expected:
        testing.assert_within(values, lower, upper, strict=strict)
    else:
        with pytest.raises(AssertionError):
            testing.assert_within(values, lower, upper, strict=strict, err_msg="blublu")


def test_assert_within_message() -> None:
    with pytest.raises(AssertionError, match=r"Values \[0.1\] are not in \(0.2, 0.5\)"):
        testing.assert_within([0.1, 0.3], 0.2, 0.5, strict=True)
