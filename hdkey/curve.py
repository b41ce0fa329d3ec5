#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve of prime order over Fp.

The curve is the set of points (x, y) that are solutions
to the short Weierstrass equation y^2 = x^3 + a*x + b (mod p),
together with a point at infinity INF,
under the point addition group law.

Scalar multiplication uses Jacobian coordinates internally
(a single modular inversion at the end) and affine coordinates
at the interface.
"""

from math import ceil

from hdkey.alias import INF, INFJ, Integer, JacPoint, Point
from hdkey.exceptions import HDKeyValueError
from hdkey.number_theory import mod_inv, mod_sqrt
from hdkey.utils import hex_string, int_from_integer


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


class Curve:
    "Elliptic curve of prime order n, with generator G."

    def __init__(
        self,
        name: str,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
    ) -> None:

        self.name = name
        self.p = int_from_integer(p)
        self._a = int_from_integer(a)
        self._b = int_from_integer(b)
        self.n = int_from_integer(n)

        if (4 * self._a**3 + 27 * self._b**2) % self.p == 0:
            raise HDKeyValueError("zero discriminant")

        self.p_size = ceil(self.p.bit_length() / 8)
        self.n_size = ceil(self.n.bit_length() / 8)

        self.G = G
        self.require_on_curve(self.G)
        if self.G[1] == 0:
            raise HDKeyValueError("INF point cannot be a generator")

    def __repr__(self) -> str:
        return f"Curve('{self.name}', '{hex_string(self.p)}')"

    @property
    def order(self) -> int:
        return self.n

    def is_infinity(self, Q: Point) -> bool:
        return Q[1] == 0

    def _y2(self, x: int) -> int:
        # no check that y^2 is a quadratic residue here
        return ((x * x + self._a) * x + self._b) % self.p

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if len(Q) != 2:
            raise HDKeyValueError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:
            return False
        return self._y2(Q[0]) == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        if not self.is_on_curve(Q):
            raise HDKeyValueError("point not on curve")

    def y(self, x: int) -> int:
        "Return one of the two y-coordinates associated to x."
        if not 0 <= x < self.p:
            raise HDKeyValueError(f"x-coordinate not in 0..p-1: {hex_string(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except HDKeyValueError as e:
            raise HDKeyValueError(f"invalid x-coordinate: {hex_string(x)}") from e

    def recover_y(self, x: int, odd: bool) -> Point:
        "Return the point (x, y) with y odd/even as requested."
        root = self.y(x)
        if root == 0:
            raise HDKeyValueError(f"invalid x-coordinate: {hex_string(x)}")
        # switch even/odd root as needed
        return x, self.p - root if (root & 1) != odd else root

    # affine coordinates

    def negate(self, Q: Point) -> Point:
        # % self.p so that negate(INF) = INF
        return Q[0], (self.p - Q[1]) % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)

        if Q1[1] == 0:
            return Q2
        if Q2[1] == 0:
            return Q1
        if Q1[0] == Q2[0]:
            if Q1[1] == Q2[1]:
                return self.aff_from_jac(self._double_jac(jac_from_aff(Q1)))
            # opposite points
            return INF

        lam = (Q2[1] - Q1[1]) * mod_inv(Q2[0] - Q1[0], self.p)
        x = (lam * lam - Q1[0] - Q2[0]) % self.p
        y = (lam * (Q1[0] - x) - Q1[1]) % self.p
        return x, y

    # Jacobian coordinates

    def aff_from_jac(self, Q: JacPoint) -> Point:
        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return INF

        Z2 = Q[2] * Q[2]
        x = Q[0] * mod_inv(Z2, self.p)
        y = Q[1] * mod_inv(Z2 * Q[2], self.p)
        return x % self.p, y % self.p

    def _double_jac(self, Q: JacPoint) -> JacPoint:
        if Q[2] == 0:
            return INFJ

        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def _add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        if Q[2] == 0:
            return R
        if R[2] == 0:
            return Q

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2 % self.p
        N = R[0] * QZ2 % self.p
        T = Q[1] * RZ3 % self.p
        U = R[1] * QZ3 % self.p

        if M == N:  # same affine x
            if T == U:
                return self._double_jac(Q)
            return INFJ

        W = U - T
        V = N - M
        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2
        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p
        return X, Y, Z

    def mult(self, m: int, Q: Point) -> Point:
        """Scalar multiplication of a curve point.

        'double & add', 'right-to-left' binary decomposition
        of the m coefficient, Jacobian coordinates.
        m is reduced mod n.
        """
        self.require_on_curve(Q)
        m %= self.n

        R = INFJ
        QJ = jac_from_aff(Q)
        while m > 0:
            if m & 1:
                R = self._add_jac(R, QJ)
            QJ = self._double_jac(QJ)
            m >>= 1
        return self.aff_from_jac(R)

    def multiply(self, m: int) -> Point:
        "Return m*G."
        return self.mult(m, self.G)


secp256k1 = Curve(
    "secp256k1",
    "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F",
    0,
    7,
    (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141",
)
