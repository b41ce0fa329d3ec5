#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkey.utils` module."

import pytest

from hdkey.exceptions import HDKeyValueError
from hdkey.utils import (
    bytes_from_octets,
    hex_string,
    int_from_integer,
    parse256,
    ser32,
    ser256,
)


def test_bytes_from_octets() -> None:

    assert bytes_from_octets("  0a0B ") == b"\x0a\x0b"
    assert bytes_from_octets(b"\x0a\x0b", 2) == b"\x0a\x0b"

    with pytest.raises(HDKeyValueError, match="invalid size: "):
        bytes_from_octets("0a0b", 3)


def test_int_conversions() -> None:

    i = 0xDEADBEEF
    for integer in (i, "0xdeadbeef", " DEADBEEF ", b"\xde\xad\xbe\xef"):
        assert int_from_integer(integer) == i

    assert hex_string(i) == "DEADBEEF"
    assert hex_string(0xABC) == "0ABC"
    assert hex_string(2**64 - 1) == "FFFFFFFF FFFFFFFF"
    with pytest.raises(HDKeyValueError, match="negative integer: "):
        hex_string(-1)


def test_ser32() -> None:

    assert ser32(0) == b"\x00" * 4
    assert ser32(1) == b"\x00\x00\x00\x01"
    assert ser32(0x80000000) == b"\x80\x00\x00\x00"
    assert ser32(0xFFFFFFFF) == b"\xff" * 4

    for i in (-1, 0xFFFFFFFF + 1):
        with pytest.raises(HDKeyValueError, match="invalid index: "):
            ser32(i)


def test_ser256_parse256() -> None:

    assert ser256(0) == b"\x00" * 32
    assert ser256(1) == b"\x00" * 31 + b"\x01"
    assert parse256(b"\x00" * 31 + b"\x01") == 1
    p = 2**256 - 1
    assert parse256(ser256(p)) == p

    for i in (-1, 2**256):
        with pytest.raises(HDKeyValueError, match="integer does not fit in 32 bytes"):
            ser256(i)
