#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended key serialization.

The 78 bytes payload (see hdkey.keys) is followed by a 4 bytes checksum,
the first 4 bytes of SHA256(SHA256(payload)),
and the resulting 82 bytes are Base58 encoded.

Decoding verifies the checksum,
then checks the version bytes against the network VersionResolver:
its private or public version selects the extended key type.
"""

from typing import Optional

from hdkey.alias import String
from hdkey.b58 import BITCOIN_BASE58, b58decode, b58encode
from hdkey.exceptions import InvalidEncoding, InvalidMasterKeyEncoding, InvalidVersion
from hdkey.keys import ExtendedKey, PrivateExtendedKey, PublicExtendedKey
from hdkey.network import VersionResolver
from hdkey.providers import Base58Codec

PAYLOAD_SIZE = 78


class _Reader:
    "Read cursor over an immutable byte buffer."

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def read(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            err_msg = f"not enough bytes: {len(self.data) - self.offset}"
            err_msg += f" instead of {size} at offset {self.offset}"
            raise InvalidEncoding(err_msg)
        chunk = self.data[self.offset : end]
        self.offset = end
        return chunk

    def read_int(self, size: int) -> int:
        return int.from_bytes(self.read(size), byteorder="big", signed=False)


class ExtendedKeyCodec:
    def __init__(
        self,
        resolver: Optional[VersionResolver] = None,
        base58_codec: Base58Codec = BITCOIN_BASE58,
    ) -> None:
        self.resolver = VersionResolver() if resolver is None else resolver
        self.base58_codec = base58_codec

    def __repr__(self) -> str:
        return f"ExtendedKeyCodec({self.resolver!r})"

    def serialize(self, xkey: ExtendedKey) -> bytes:
        "Return the 78 bytes payload of the extended key."

        xkey.assert_valid()
        return b"".join(
            [
                xkey.version,
                xkey.depth.to_bytes(1, byteorder="big", signed=False),
                xkey.parent_fingerprint,
                xkey.index.to_bytes(4, byteorder="big", signed=False),
                xkey.chain_code,
                xkey.key,
            ]
        )

    def encode(self, xkey: ExtendedKey) -> str:
        "Return the Base58Check serialization of the extended key."
        return b58encode(self.serialize(xkey), PAYLOAD_SIZE, self.base58_codec)

    def parse(self, data: bytes) -> ExtendedKey:
        "Return an extended key by parsing the 78 bytes payload."

        if len(data) != PAYLOAD_SIZE:
            err_msg = f"invalid payload size: {len(data)}"
            err_msg += f" instead of {PAYLOAD_SIZE}"
            raise InvalidEncoding(err_msg)

        reader = _Reader(bytes(data))

        version = reader.read(4)
        if self.resolver.is_private_version(version):
            cls = PrivateExtendedKey
        elif self.resolver.is_public_version(version):
            cls = PublicExtendedKey
        else:
            raise InvalidVersion(f"unknown extended key version: 0x{version.hex()}")

        depth = reader.read_int(1)

        parent_fingerprint = reader.read(4)
        if depth == 0 and parent_fingerprint != b"\x00" * 4:
            err_msg = "zero depth with non-zero parent fingerprint: "
            err_msg += f"0x{parent_fingerprint.hex()}"
            raise InvalidMasterKeyEncoding(err_msg)

        index = reader.read_int(4)
        if depth == 0 and index != 0:
            raise InvalidMasterKeyEncoding(f"zero depth with non-zero index: {index}")

        chain_code = reader.read(32)
        key = reader.read(33)

        # key material is checked by the key constructor
        return cls(
            version=version,
            depth=depth,
            parent_fingerprint=parent_fingerprint,
            index=index,
            chain_code=chain_code,
            key=key,
        )

    def decode(self, xkey: String) -> ExtendedKey:
        "Return an extended key from its Base58Check serialization."
        data = b58decode(xkey, PAYLOAD_SIZE, self.base58_codec)
        return self.parse(data)
