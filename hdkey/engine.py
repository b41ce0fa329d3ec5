#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 key derivation functions.

A deterministic wallet is a hash-chain of private/public key pairs that
derives from a single root, which is the only element requiring backup.
A hierarchical deterministic wallet is a tree of multiple hash-chains,
derived from a single root, allowing for selective sharing of keypair
chains.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki:

- master key generation from a seed
- private parent key to private child key (CKDpriv)
- public parent key to public child key (CKDpub)
- private key to public key ("neutered" derivation)

In the very unlikely case that a candidate child key is invalid,
derivation proceeds with the next index: this is done
in a bounded loop, see KeyDerivationEngine.max_retries.
"""

import logging
from typing import Optional

from hdkey.alias import Octets, Point
from hdkey.curve import secp256k1
from hdkey.exceptions import (
    HDKeyRuntimeError,
    HDKeyTypeError,
    HDKeyValueError,
    InvalidSeed,
    UnsupportedDerivation,
)
from hdkey.hashes import HASHLIB
from hdkey.keys import HARDENED, ExtendedKey, PrivateExtendedKey, PublicExtendedKey
from hdkey.network import VersionResolver
from hdkey.providers import CurveProvider, HashProvider
from hdkey.sec_point import bytes_from_point, point_from_octets
from hdkey.utils import parse256, ser32, ser256

_LOGGER = logging.getLogger(__name__)

MASTER_KEY_HMAC_KEY = b"Bitcoin seed"
MAX_RETRIES = 256


def _seed_from_octets(seed: Octets) -> bytes:

    if isinstance(seed, bytes):
        if not seed:
            raise InvalidSeed("empty seed")
        return seed

    if not isinstance(seed, str):
        raise HDKeyTypeError(f"invalid seed type: {type(seed).__name__}")

    seed = seed.strip()
    if not seed:
        raise InvalidSeed("empty seed")
    if len(seed) % 2 or any(c not in "0123456789abcdefABCDEF" for c in seed):
        raise InvalidSeed(f"seed is not a hex-string: '{seed}'")
    return bytes.fromhex(seed)


class KeyDerivationEngine:
    """BIP32 derivation over injected curve and hash providers.

    The version bytes of master keys and of neutered keys
    are taken from the VersionResolver (mainnet by default).
    """

    def __init__(
        self,
        resolver: Optional[VersionResolver] = None,
        curve: CurveProvider = secp256k1,
        hashes: HashProvider = HASHLIB,
        max_retries: int = MAX_RETRIES,
    ) -> None:

        if max_retries < 1:
            raise HDKeyValueError(f"invalid max_retries: {max_retries}")
        self.resolver = VersionResolver() if resolver is None else resolver
        self.curve = curve
        self.hashes = hashes
        self.max_retries = max_retries

    def __repr__(self) -> str:
        return f"KeyDerivationEngine({self.resolver!r})"

    def _hash160(self, data: bytes) -> bytes:
        return self.hashes.ripemd160(self.hashes.sha256(data))

    def _ser_p(self, Q: Point) -> bytes:
        return bytes_from_point(Q, self.curve)

    def fingerprint(self, key: ExtendedKey) -> bytes:
        "Return the first 4 bytes of the key identifier."

        if isinstance(key, PrivateExtendedKey):
            pub_key = self._ser_p(self.curve.multiply(key.secret))
        else:
            pub_key = key.key
        return self._hash160(pub_key)[:4]

    def generate_master_key(self, seed: Octets) -> PrivateExtendedKey:
        """Return the BIP32 master extended private key from the seed.

        The seed is a hex-string (or its bytes), usually 128 to 512 bits.
        """

        seed = _seed_from_octets(seed)

        hmac_ = self.hashes.hmac_sha512(MASTER_KEY_HMAC_KEY, seed)
        q = parse256(hmac_[:32])
        if not 0 < q < self.curve.order:
            raise InvalidSeed("seed results in an invalid master key")

        xkey = PrivateExtendedKey(
            version=self.resolver.private_version_bytes(),
            depth=0,
            parent_fingerprint=b"\x00" * 4,
            index=0,
            chain_code=hmac_[32:],
            key=b"\x00" + ser256(q),
        )
        if _LOGGER.isEnabledFor(logging.DEBUG):
            fingerprint = self.fingerprint(xkey).hex()
            _LOGGER.debug("master key generated: fingerprint %s", fingerprint)
        return xkey

    def ckd_priv(self, parent: PrivateExtendedKey, index: int) -> PrivateExtendedKey:
        "Private parent key to private child key."

        if not isinstance(parent, PrivateExtendedKey):
            raise HDKeyTypeError(f"not a private key: {type(parent).__name__}")
        if parent.depth == 255:
            raise HDKeyValueError("depth greater than 255")

        k_par = parent.secret
        Q_bytes = self._ser_p(self.curve.multiply(k_par))
        parent_fingerprint = self._hash160(Q_bytes)[:4]

        for _ in range(self.max_retries):
            if index >= HARDENED:  # hardened derivation
                data = b"\x00" + ser256(k_par) + ser32(index)
            else:  # normal derivation
                data = Q_bytes + ser32(index)
            hmac_ = self.hashes.hmac_sha512(parent.chain_code, data)
            offset = parse256(hmac_[:32])
            k_i = (offset + k_par) % self.curve.order
            if offset < self.curve.order and k_i != 0:
                return PrivateExtendedKey(
                    version=parent.version,
                    depth=parent.depth + 1,
                    parent_fingerprint=parent_fingerprint,
                    index=index,
                    chain_code=hmac_[32:],
                    key=b"\x00" + ser256(k_i),
                )
            _LOGGER.debug("invalid private child at index %s, trying next one", index)
            index += 1

        raise HDKeyRuntimeError(f"no valid child key in {self.max_retries} attempts")

    def ckd_pub(self, parent: PublicExtendedKey, index: int) -> PublicExtendedKey:
        "Public parent key to public child key."

        if not isinstance(parent, PublicExtendedKey):
            raise HDKeyTypeError(f"not a public key: {type(parent).__name__}")
        if parent.depth == 255:
            raise HDKeyValueError("depth greater than 255")

        K_par = point_from_octets(parent.key, self.curve)
        parent_fingerprint = self._hash160(parent.key)[:4]

        for _ in range(self.max_retries):
            if index >= HARDENED:
                err_msg = f"invalid hardened derivation from public key: {index}"
                raise UnsupportedDerivation(err_msg)
            data = parent.key + ser32(index)
            hmac_ = self.hashes.hmac_sha512(parent.chain_code, data)
            offset = parse256(hmac_[:32])
            if offset < self.curve.order:
                K_i = self.curve.add(self.curve.multiply(offset), K_par)
                if not self.curve.is_infinity(K_i):
                    return PublicExtendedKey(
                        version=parent.version,
                        depth=parent.depth + 1,
                        parent_fingerprint=parent_fingerprint,
                        index=index,
                        chain_code=hmac_[32:],
                        key=self._ser_p(K_i),
                    )
            _LOGGER.debug("invalid public child at index %s, trying next one", index)
            index += 1

        raise HDKeyRuntimeError(f"no valid child key in {self.max_retries} attempts")

    def private_to_public(self, xprv: PrivateExtendedKey) -> PublicExtendedKey:
        """Neutered Derivation (N).

        Derivation of the extended public key corresponding to an extended
        private key ("neutered" as it removes the ability to sign transactions).
        """

        if not isinstance(xprv, PrivateExtendedKey):
            raise HDKeyTypeError(f"not a private key: {type(xprv).__name__}")

        return PublicExtendedKey(
            version=self.resolver.convert_version_bytes(xprv.version),
            depth=xprv.depth,
            parent_fingerprint=xprv.parent_fingerprint,
            index=xprv.index,
            chain_code=xprv.chain_code,
            key=self._ser_p(self.curve.multiply(xprv.secret)),
        )
