#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import ctypes
import ctypes.util
import hashlib
import hmac

from hdkey.alias import Octets
from hdkey.utils import bytes_from_octets

# see https://bugs.python.org/issue47101
# With OpenSSL 3.x, hashlib still includes ripemd160
# but it is not usable unless the legacy provider is loaded.
try:
    hashlib.new("ripemd160")
except ValueError:  # pragma: no cover
    _libssl = ctypes.CDLL(ctypes.util.find_library("ssl") or "libssl.so")
    _libssl.OSSL_PROVIDER_load(None, b"legacy")
    _libssl.OSSL_PROVIDER_load(None, b"default")


def ripemd160(octets: Octets) -> bytes:
    "Return the RIPEMD160(*) of the input octet sequence."
    octets = bytes_from_octets(octets)
    return hashlib.new("ripemd160", octets).digest()


def sha256(octets: Octets) -> bytes:
    "Return the SHA256(*) of the input octet sequence."
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash160(octets: Octets) -> bytes:
    "Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."
    return ripemd160(sha256(octets))


def hash256(octets: Octets) -> bytes:
    "Return the SHA256(SHA256(*)) of the input octet sequence."
    return sha256(sha256(octets))


def hmac_sha512(key: Octets, msg: Octets) -> bytes:
    key = bytes_from_octets(key)
    msg = bytes_from_octets(msg)
    return hmac.new(key, msg, "sha512").digest()


class HashlibHashes:
    "HashProvider backed by hashlib and hmac."

    def hmac_sha512(self, key: bytes, msg: bytes) -> bytes:
        return hmac_sha512(key, msg)

    def sha256(self, msg: bytes) -> bytes:
        return sha256(msg)

    def ripemd160(self, msg: bytes) -> bytes:
        return ripemd160(msg)


HASHLIB = HashlibHashes()
