#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "0488ade4"
# "000102030405060708090a0b0c0d0e0f"
# "02 cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
#
# use hdkey.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for seeds, BIP32 versions (4 bytes),
# parent fingerprints (4 bytes), chain codes (32 bytes), and key material
Octets = Union[bytes, str]

# bytes or 'ascii' text string (not hex-string),
# e.g. a base58 extended key:
# "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
#
# leading/trailing blanks should always be stripped
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
Point = Tuple[int, int]

# The infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'.
# 5 is not a valid x-coordinate in secp256k1.
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates: 'INFJ[2] == 0'
INFJ = 7, 0, 0
