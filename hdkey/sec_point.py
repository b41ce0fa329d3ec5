#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed point representation.

BIP32 serP(P) is the 33 bytes compressed form of SEC 1 v.2, section 2.3.3:
(0x02 + even y) or (0x03 + odd y), followed by the 32 bytes x-coordinate.
"""

from hdkey.alias import Octets, Point
from hdkey.curve import secp256k1
from hdkey.exceptions import HDKeyValueError, InvalidPublicKeyEncoding
from hdkey.providers import CurveProvider
from hdkey.utils import bytes_from_octets, hex_string

P_SIZE = 32


def bytes_from_point(Q: Point, ec: CurveProvider = secp256k1) -> bytes:
    "Return a point as compressed octet sequence (BIP32 serP)."

    if ec.is_infinity(Q):
        raise InvalidPublicKeyEncoding("no bytes representation for infinity point")

    return (b"\x03" if Q[1] & 1 else b"\x02") + Q[0].to_bytes(
        P_SIZE, byteorder="big", signed=False
    )


def point_from_octets(pub_key: Octets, ec: CurveProvider = secp256k1) -> Point:
    """Return the curve point (x_Q, y_Q) of a compressed public key.

    Inverse of bytes_from_point (BIP32 parseP),
    according to SEC 1 v.2, section 2.3.4.
    """

    pub_key = bytes_from_octets(pub_key)
    if len(pub_key) != P_SIZE + 1:
        err_msg = "invalid size for compressed point: "
        err_msg += f"{len(pub_key)} instead of {P_SIZE + 1}"
        raise InvalidPublicKeyEncoding(err_msg)

    if pub_key[0] not in (0x02, 0x03):
        err_msg = "invalid public key prefix not in (0x02, 0x03): "
        err_msg += f"0x{pub_key[:1].hex()}"
        raise InvalidPublicKeyEncoding(err_msg)

    x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
    try:
        return ec.recover_y(x_Q, pub_key[0] == 0x03)
    except HDKeyValueError as e:
        msg = f"invalid x-coordinate: '{hex_string(x_Q)}'"
        raise InvalidPublicKeyEncoding(msg) from e
