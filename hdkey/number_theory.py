#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic over the curve field.

Python int already is the arbitrary precision integer;
only inversion and square root modulo a prime are needed on top of it.
"""

from typing import Tuple

from hdkey.exceptions import HDKeyValueError
from hdkey.utils import hex_string


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    Extended Euclidean Algorithm.
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m)."

    a %= m
    g, x, _ = xgcd(a, m)
    if g != 1:
        raise HDKeyValueError(f"no inverse for {hex_string(a)} mod {hex_string(m)}")
    return x % m


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p), p being a prime equal to 3 mod 4.

    The other root is p - r.
    """

    if p % 4 != 3:
        raise HDKeyValueError(f"field prime is not equal to 3 mod 4: {hex_string(p)}")

    a %= p
    r = pow(a, (p + 1) // 4, p)
    if r * r % p != a:
        raise HDKeyValueError(f"no root for {hex_string(a)} mod {hex_string(p)}")
    return r
