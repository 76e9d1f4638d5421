"""Extended Euclidean Algorithm Utilities.

Provides the greatest common divisor of two natural numbers together with their Bezout coefficients, computed either
iteratively, recursively or with an explicit stack. Results follow fixed-width integer semantics by default.

Typical usage example:

    g, x, y = extended_gcd(240, 46)
    res = extended_gcd_recursive(35, 15)
    assert 35 * res.x + 15 * res.y == res.gcd
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from euclidutils.euclid import DEFAULT_WIDTH
from euclidutils.euclid import EuclidResult
from euclidutils.euclid import STRATEGIES
from euclidutils.euclid import extended_gcd
from euclidutils.euclid import extended_gcd_iterative
from euclidutils.euclid import extended_gcd_recursive
from euclidutils.euclid import extended_gcd_stack

__version__ = "0.0.1"
__all__ = [
    "DEFAULT_WIDTH",
    "EuclidResult",
    "STRATEGIES",
    "extended_gcd",
    "extended_gcd_iterative",
    "extended_gcd_recursive",
    "extended_gcd_stack",
]
