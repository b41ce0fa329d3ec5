#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkey.b58` module."

import pytest

from hdkey.b58 import BITCOIN_BASE58, b58decode, b58encode
from hdkey.exceptions import ChecksumMismatch, HDKeyValueError, InvalidEncoding

prv_key = "0C28FCA386C7A227600B2FE50B7CAE11EC86D3BF1FBE471BE89827E19D72AA1D"


def test_raw_base58() -> None:

    assert BITCOIN_BASE58.encode(b"") == ""
    assert BITCOIN_BASE58.encode(b"\x00\x00\x01") == "112"
    assert BITCOIN_BASE58.decode("112") == b"\x00\x00\x01"
    assert BITCOIN_BASE58.encode(b"hello world") == "StV1DL6CwTryKyV"
    assert BITCOIN_BASE58.decode("StV1DL6CwTryKyV") == b"hello world"

    for invalid_char in ("0", "O", "I", "l", "+", "/"):
        with pytest.raises(InvalidEncoding, match="invalid base58 string: "):
            BITCOIN_BASE58.decode("StV1DL6CwTry" + invalid_char)


def test_wif() -> None:

    # private key in Wallet Import Format
    payload = b"\x80" + bytes.fromhex(prv_key)
    wif = "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
    assert b58encode(payload) == wif
    assert b58decode(wif) == payload
    assert b58decode(wif.encode("ascii")) == payload
    assert b58decode(" " + wif + " ") == payload

    payload += b"\x01"
    wif = "KwdMAjGmerYanjeui5SHS7JkmpZvVipYvB2LJGU1ZxJwYvP98617"
    assert b58encode(payload, 34) == wif
    assert b58decode(wif, 34) == payload


def test_exceptions() -> None:

    payload = b"\x80" + bytes.fromhex(prv_key)

    with pytest.raises(HDKeyValueError, match="invalid size: "):
        b58encode(payload, 34)

    encoded = b58encode(payload)
    with pytest.raises(InvalidEncoding, match="valid checksum, invalid decoded size"):
        b58decode(encoded, 34)

    # checksum of the unexpected payload
    invalid_checksum = BITCOIN_BASE58.encode(payload + b"\x00" * 4)
    with pytest.raises(ChecksumMismatch, match="invalid checksum: "):
        b58decode(invalid_checksum)

    with pytest.raises(InvalidEncoding, match="not enough bytes for checksum"):
        b58decode(BITCOIN_BASE58.encode(b"\x01\x02\x03"))

    # ChecksumMismatch and InvalidEncoding are both ValueError
    with pytest.raises(ValueError):
        b58decode("StV1DL6CwTry0")
