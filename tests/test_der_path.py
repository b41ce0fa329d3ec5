#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkey.der_path` module."

import dataclasses

import pytest

from hdkey.codec import ExtendedKeyCodec
from hdkey.der_path import (
    PathWalker,
    int_from_index_str,
    parse_path,
    str_from_der_path,
    str_from_index_int,
)
from hdkey.engine import KeyDerivationEngine
from hdkey.exceptions import (
    HDKeyTypeError,
    HDKeyValueError,
    InvalidPath,
    UnsupportedDerivation,
)
from hdkey.keys import HARDENED, PrivateExtendedKey, PublicExtendedKey

engine = KeyDerivationEngine()
walker = PathWalker(engine)
codec = ExtendedKeyCodec()

seed = "000102030405060708090a0b0c0d0e0f"


def test_index_int_to_from_str() -> None:

    for i in (0, 1, 2147483647):
        assert int_from_index_str(str(i)) == i
        assert str_from_index_int(i) == str(i)

    for i in (0, 1, 2147483647):
        assert int_from_index_str(str(i) + "'") == i + HARDENED
        assert str_from_index_int(i + HARDENED) == str(i) + "'"

    with pytest.raises(InvalidPath, match="invalid index: "):
        int_from_index_str("2147483648")

    with pytest.raises(InvalidPath, match="invalid index: "):
        int_from_index_str("2147483648'")

    for i in (-1, 0xFFFFFFFF + 1):
        with pytest.raises(HDKeyValueError, match="invalid index: "):
            str_from_index_int(i)


def test_parse_path() -> None:

    test_vectors = [
        ("m", True, []),
        ("M", False, []),
        ("m/0", True, [0]),
        ("M/0", False, [0]),
        ("m/0'", True, [HARDENED]),
        ("m/44'/0'/0'/0/1", True, [44 + HARDENED, HARDENED, HARDENED, 0, 1]),
        ("M/0/2147483647", False, [0, 2147483647]),
        ("m/2147483647'", True, [0xFFFFFFFF]),
    ]
    for der_path, private, indexes in test_vectors:
        assert parse_path(der_path) == (private, indexes)
        assert str_from_der_path(indexes, private) == der_path


def test_invalid_paths() -> None:

    invalid_paths = [
        "",
        "/0",
        "0/1",
        "m/",
        "m//1",
        "m/1/",
        "m/a",
        "m/-1",
        "m/1''",
        "m/1h",
        "m/ 1",
        " m/1",
        "M/0'",
        "n/1",
        "mm/1",
    ]
    for der_path in invalid_paths:
        with pytest.raises(InvalidPath):
            parse_path(der_path)

    with pytest.raises(InvalidPath, match="invalid index: "):
        parse_path("m/2147483648")

    with pytest.raises(HDKeyTypeError, match="invalid path type: "):
        parse_path(b"m/0")  # type: ignore

    with pytest.raises(UnsupportedDerivation, match="hardened index in public"):
        str_from_der_path([HARDENED], private=False)


def test_walk() -> None:

    xprv = engine.generate_master_key(seed)
    xpub = engine.private_to_public(xprv)

    assert walker.walk(xprv, "m") == xprv
    assert walker.walk(xprv, "M") == xpub
    assert walker.walk(xpub, "M") == xpub

    child = walker.walk(xprv, "m/0'/1")
    assert isinstance(child, PrivateExtendedKey)
    assert child == engine.ckd_priv(engine.ckd_priv(xprv, HARDENED), 1)
    assert child.depth == 2

    # M/i from a private root is the neutered m/i
    for der_path in ("0", "0/1", "1/2/3"):
        child_pub = walker.walk(xprv, "M/" + der_path)
        assert isinstance(child_pub, PublicExtendedKey)
        assert child_pub == walker.walk(xpub, "M/" + der_path)
        assert child_pub == engine.private_to_public(walker.walk(xprv, "m/" + der_path))

    # walking in two steps
    xprv_1 = walker.walk(xprv, "m/0'")
    assert walker.walk(xprv_1, "m/1") == walker.walk(xprv, "m/0'/1")


def test_walk_exceptions() -> None:

    xprv = engine.generate_master_key(seed)
    xpub = engine.private_to_public(xprv)

    err_msg = "private derivation path from public key: "
    with pytest.raises(UnsupportedDerivation, match=err_msg):
        walker.walk(xpub, "m/0")
    with pytest.raises(UnsupportedDerivation, match=err_msg):
        walker.walk(xpub, "m")

    with pytest.raises(InvalidPath):
        walker.walk(xpub, "M/0'")

    deep = dataclasses.replace(walker.walk(xprv, "m/0"), depth=254)
    assert walker.walk(deep, "m/1").depth == 255
    with pytest.raises(InvalidPath, match="final depth greater than 255: 256"):
        walker.walk(deep, "m/1/2")

    path_256 = "M" + "/0" * 256
    with pytest.raises(InvalidPath, match="final depth greater than 255: 256"):
        walker.walk(xpub, path_256)
