#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Besides the generic Octets/Integer conversions, this module hosts
the fixed-width big-endian helpers named in BIP32:

- ser32(i): 32-bit unsigned integer i as 4 bytes, most significant first
- ser256(p): integer p as 32 bytes, most significant first
- parse256(p): 32 bytes p as integer, most significant first
"""

from typing import Optional

from hdkey.alias import Integer, Octets
from hdkey.exceptions import HDKeyValueError


def bytes_from_octets(octets: Octets, out_size: Optional[int] = None) -> bytes:
    """Return the bytes of a hex-string (blanks are ignored) or bytes input.

    If out_size is given, the result must be out_size bytes long.
    """

    octets = bytes.fromhex(octets) if isinstance(octets, str) else octets
    if out_size is not None and len(octets) != out_size:
        err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
        raise HDKeyValueError(err_msg)
    return octets


def int_from_integer(i: Integer) -> int:
    "Return an int from an int, a (0x-prefixed) hex-string, or big-endian bytes."

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the upper case hex-string of a non-negative integer.

    Even number of hex-digits, blank separated in groups of four bytes:
    meant for error messages, e.g. "0ABC" or "01 FFFFFFFF".
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise HDKeyValueError(f"negative integer: {int_}")
    a_str = f"{int_:x}"
    if len(a_str) % 2:
        a_str = "0" + a_str

    chunks = [a_str[max(0, i - 8) : i] for i in range(len(a_str), 0, -8)]
    return " ".join(reversed(chunks)).upper()


def ser32(i: int) -> bytes:
    if not 0 <= i <= 0xFFFFFFFF:
        raise HDKeyValueError(f"invalid index: {i}")
    return i.to_bytes(4, byteorder="big", signed=False)


def ser256(p: int) -> bytes:
    if not 0 <= p < 2**256:
        raise HDKeyValueError("integer does not fit in 32 bytes")
    return p.to_bytes(32, byteorder="big", signed=False)


def parse256(p: bytes) -> int:
    return int.from_bytes(p, byteorder="big", signed=False)
