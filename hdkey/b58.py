#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58Check encoding and decoding functions.

Base58 omits the similar-looking characters
0 (zero), O (capital o), I (capital i), and l (lower case L),
together with '+' and '/', so that a double-click selects the whole string.
The raw Base58 transformation is delegated to the base58 package.

Base58Check is the checksummed version of Base58, using
hash256(v)[:4] as checksum suffix before encoding;
at the decoding stage the checksum is verified to ensure data integrity.
"""

from typing import Optional

import base58

from hdkey.alias import Octets, String
from hdkey.exceptions import ChecksumMismatch, InvalidEncoding
from hdkey.hashes import hash256
from hdkey.providers import Base58Codec
from hdkey.utils import bytes_from_octets


class BitcoinBase58:
    "Base58 codec with the Bitcoin alphabet."

    alphabet = base58.BITCOIN_ALPHABET

    def encode(self, v: bytes) -> str:
        return base58.b58encode(v, alphabet=self.alphabet).decode("ascii")

    def decode(self, v: str) -> bytes:
        try:
            return base58.b58decode(v, alphabet=self.alphabet)
        except ValueError as e:
            raise InvalidEncoding(f"invalid base58 string: {e}") from e


BITCOIN_BASE58 = BitcoinBase58()


def b58encode(
    v: Octets, in_size: Optional[int] = None, codec: Base58Codec = BITCOIN_BASE58
) -> str:
    "Encode a bytes-like object using Base58Check."

    v = bytes_from_octets(v, in_size)
    return codec.encode(v + hash256(v)[:4])


def b58decode(
    v: String, out_size: Optional[int] = None, codec: Base58Codec = BITCOIN_BASE58
) -> bytes:
    """Decode a Base58Check encoded bytes-like object or ASCII string.

    Optionally, it also ensures required output size.
    """

    if isinstance(v, bytes):
        v = v.decode("ascii")

    result = codec.decode(v.strip())
    if len(result) < 4:
        err_msg = "not enough bytes for checksum, "
        err_msg += f"invalid base58 decoded size: {len(result)}"
        raise InvalidEncoding(err_msg)

    result, checksum = result[:-4], result[-4:]
    h256 = hash256(result)
    if checksum != h256[:4]:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{h256[:4].hex()}"
        raise ChecksumMismatch(err_msg)

    if out_size is None or len(result) == out_size:
        return result

    err_msg = "valid checksum, invalid decoded size: "
    err_msg += f"{len(result)} bytes instead of {out_size}"
    raise InvalidEncoding(err_msg)
