#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Collaborator protocols.

The derivation engine and the extended key codec only rely on
these structural interfaces, so that the default implementations
(hdkey.curve.secp256k1, hdkey.hashes.HASHLIB, hdkey.b58.BITCOIN_BASE58)
can be swapped, e.g. with deterministic test doubles.

Arbitrary precision integer arithmetic is provided by Python int.
"""

from typing import Protocol

from hdkey.alias import Point


class CurveProvider(Protocol):
    @property
    def order(self) -> int:
        ...

    def multiply(self, m: int) -> Point:
        "Return m*G, G being the curve generator."

    def add(self, Q1: Point, Q2: Point) -> Point:
        ...

    def recover_y(self, x: int, odd: bool) -> Point:
        "Return the curve point with the given x and y parity or raise."

    def is_infinity(self, Q: Point) -> bool:
        ...


class HashProvider(Protocol):
    def hmac_sha512(self, key: bytes, msg: bytes) -> bytes:
        ...

    def sha256(self, msg: bytes) -> bytes:
        ...

    def ripemd160(self, msg: bytes) -> bytes:
        ...


class Base58Codec(Protocol):
    def encode(self, v: bytes) -> str:
        ...

    def decode(self, v: str) -> bytes:
        ...
