#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet functions.

The BIP32 class ties together, for a given network,
the derivation engine, the derivation path walker,
and the extended key codec.

The module level functions use the network
of the extended key version bytes
(or mainnet, if there is no extended key to look at).

>>> from hdkey import bip32
>>> xprv = bip32.generate_master_key("000102030405060708090a0b0c0d0e0f")
>>> xpub = bip32.derive(xprv, "M/0/1")
>>> bip32.serialize(xpub)[:4]
'xpub'
"""

import functools
from typing import Optional, Union

from hdkey.alias import Octets, String
from hdkey.b58 import BITCOIN_BASE58, b58decode
from hdkey.codec import PAYLOAD_SIZE, ExtendedKeyCodec
from hdkey.curve import secp256k1
from hdkey.der_path import PathWalker
from hdkey.engine import MAX_RETRIES, KeyDerivationEngine
from hdkey.exceptions import InvalidVersion, UnsupportedVersion
from hdkey.hashes import HASHLIB
from hdkey.keys import ExtendedKey, PrivateExtendedKey, PublicExtendedKey
from hdkey.network import VersionResolver
from hdkey.providers import Base58Codec, CurveProvider, HashProvider

BIP32Key = Union[ExtendedKey, String]


class BIP32:
    "BIP32 operations for a network."

    def __init__(
        self,
        network: str = "mainnet",
        curve: CurveProvider = secp256k1,
        hashes: HashProvider = HASHLIB,
        base58_codec: Base58Codec = BITCOIN_BASE58,
        max_retries: int = MAX_RETRIES,
    ) -> None:

        self.resolver = VersionResolver(network)
        self.engine = KeyDerivationEngine(self.resolver, curve, hashes, max_retries)
        self.codec = ExtendedKeyCodec(self.resolver, base58_codec)
        self.walker = PathWalker(self.engine)

    def __repr__(self) -> str:
        return f"BIP32('{self.resolver.network.name}')"

    def generate_master_key(self, seed: Octets) -> PrivateExtendedKey:
        return self.engine.generate_master_key(seed)

    def ckd_priv(self, parent: PrivateExtendedKey, index: int) -> PrivateExtendedKey:
        return self.engine.ckd_priv(parent, index)

    def ckd_pub(self, parent: PublicExtendedKey, index: int) -> PublicExtendedKey:
        return self.engine.ckd_pub(parent, index)

    def private_to_public(self, xprv: PrivateExtendedKey) -> PublicExtendedKey:
        return self.engine.private_to_public(xprv)

    def serialize(self, xkey: ExtendedKey) -> str:
        return self.codec.encode(xkey)

    def deserialize(self, xkey: String) -> ExtendedKey:
        return self.codec.decode(xkey)

    def derive(self, root: BIP32Key, der_path: str) -> ExtendedKey:
        """Derive a key across a path spanning multiple depth levels.

        The root is an extended key or its serialization.
        """

        if not isinstance(root, (PrivateExtendedKey, PublicExtendedKey)):
            root = self.deserialize(root)
        return self.walker.walk(root, der_path)


@functools.lru_cache()
def _bip32(network: str = "mainnet") -> BIP32:
    return BIP32(network)


def _bip32_from_version(version: bytes) -> BIP32:
    return _bip32(VersionResolver.from_version(version).network.name)


def generate_master_key(seed: Octets, network: str = "mainnet") -> PrivateExtendedKey:
    "Return the BIP32 master extended private key from the seed."
    return _bip32(network).generate_master_key(seed)


def serialize(xkey: ExtendedKey) -> str:
    "Return the Base58Check serialization of the extended key."
    # encoding does not depend on the network
    return _bip32().serialize(xkey)


def deserialize(xkey: String, network: Optional[str] = None) -> ExtendedKey:
    """Return the extended key from its Base58Check serialization.

    If no network is given, it is inferred from the version bytes.
    """

    if network is not None:
        return _bip32(network).deserialize(xkey)

    data = b58decode(xkey, PAYLOAD_SIZE)
    try:
        bip32 = _bip32_from_version(data[:4])
    except UnsupportedVersion as e:
        raise InvalidVersion(str(e)) from e
    return bip32.codec.parse(data)


def private_to_public(xprv: PrivateExtendedKey) -> PublicExtendedKey:
    "Return the extended public key of the extended private key."
    return _bip32_from_version(xprv.version).private_to_public(xprv)


def derive(
    root: BIP32Key, der_path: str, network: Optional[str] = None
) -> ExtendedKey:
    """Derive a key across a path spanning multiple depth levels.

    Valid derivation paths are:

    - "m/44'/0'/1'/0/10" for private derivation from a private root
    - "M/0/10" for public derivation from a public or private root
    """

    if not isinstance(root, (PrivateExtendedKey, PublicExtendedKey)):
        root = deserialize(root, network)
    if network is None:
        return _bip32_from_version(root.version).walker.walk(root, der_path)
    return _bip32(network).walker.walk(root, der_path)


def rootxprv_from_seed(seed: Octets, network: str = "mainnet") -> str:
    "Return the serialized BIP32 master extended private key from the seed."
    return serialize(generate_master_key(seed, network))


def xpub_from_xprv(xprv: BIP32Key) -> str:
    "Return the serialized extended public key of the extended private key."

    if not isinstance(xprv, (PrivateExtendedKey, PublicExtendedKey)):
        xprv = deserialize(xprv)
    return serialize(private_to_public(xprv))  # type: ignore
