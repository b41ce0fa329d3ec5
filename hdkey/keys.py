#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended key data classes.

An extended key is a key plus the metadata needed
to derive its children and to serialize it, 78 bytes in total:

- [  : 4] version
- [ 4: 5] depth in the derivation path
- [ 5: 9] parent fingerprint
- [ 9:13] index
- [13:45] chain code
- [45:78] compressed pub_key or [0x00][prv_key]

The 33 bytes key field is the canonical representation of the key:
the private key integer and the public key point
are projections computed on access.
"""

from dataclasses import InitVar, dataclass, field
from typing import List, Tuple, Union

from dataclasses_json import DataClassJsonMixin, config

from hdkey.alias import Point
from hdkey.curve import secp256k1
from hdkey.exceptions import (
    HDKeyValueError,
    InvalidMasterKeyEncoding,
    InvalidPrivateKeyEncoding,
)
from hdkey.hashes import hash160
from hdkey.sec_point import bytes_from_point, point_from_octets
from hdkey.utils import bytes_from_octets, parse256

HARDENED = 0x80000000

_KEY_SIZE: List[Tuple[str, int]] = [
    ("version", 4),
    ("parent_fingerprint", 4),
    ("chain_code", 32),
    ("key", 33),
]

_BYTES = config(encoder=lambda v: v.hex(), decoder=bytes.fromhex)


@dataclass(frozen=True)
class _ExtendedKey(DataClassJsonMixin):
    version: bytes = field(metadata=_BYTES)
    depth: int
    parent_fingerprint: bytes = field(metadata=_BYTES)
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes = field(metadata=_BYTES)
    key: bytes = field(metadata=_BYTES)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        for key, _ in _KEY_SIZE:
            object.__setattr__(self, key, bytes_from_octets(getattr(self, key)))
        if check_validity:
            self.assert_valid()

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def public_key(self) -> bytes:
        raise NotImplementedError

    @property
    def identifier(self) -> bytes:
        "HASH160 of the compressed public key."
        return hash160(self.public_key)

    @property
    def fingerprint(self) -> bytes:
        "First 4 bytes of the identifier, the parent fingerprint of children."
        return self.identifier[:4]

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise HDKeyValueError(err_msg)

        if not 0 <= self.index <= 0xFFFFFFFF:
            raise HDKeyValueError(f"invalid index: {self.index}")

        if not 0 <= self.depth <= 255:
            raise HDKeyValueError(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise InvalidMasterKeyEncoding(err_msg)
            if self.index != 0:
                err_msg = f"zero depth with non-zero index: {self.index}"
                raise InvalidMasterKeyEncoding(err_msg)

        self._assert_valid_key()

    def _assert_valid_key(self) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class PrivateExtendedKey(_ExtendedKey):
    "Extended private key: the key field is [0x00][ser256(secret)]."

    is_private = True

    def _assert_valid_key(self) -> None:
        if self.key[0] != 0:
            err_msg = f"invalid private key prefix: 0x{self.key[:1].hex()}"
            raise InvalidPrivateKeyEncoding(err_msg)
        if not 0 < self.secret < secp256k1.n:
            raise InvalidPrivateKeyEncoding("invalid private key not in 1..n-1")

    @property
    def secret(self) -> int:
        return parse256(self.key[1:])

    @property
    def public_key(self) -> bytes:
        return bytes_from_point(secp256k1.multiply(self.secret))


@dataclass(frozen=True)
class PublicExtendedKey(_ExtendedKey):
    "Extended public key: the key field is the compressed point serP(K)."

    is_private = False

    def _assert_valid_key(self) -> None:
        point_from_octets(self.key)

    @property
    def point(self) -> Point:
        return point_from_octets(self.key)

    @property
    def public_key(self) -> bytes:
        return self.key


ExtendedKey = Union[PrivateExtendedKey, PublicExtendedKey]
