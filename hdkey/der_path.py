#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A derivation path is a string like:

- "m/44'/0'/1'/0/10": private derivation from a private root,
  an apostrophe marking hardened indexes
- "M/0/10": public (non-hardened only) derivation,
  from a public root or from the neutered private root

"m" and "M" alone address the root itself.
"""

import functools
import logging
import re
from typing import List, Sequence, Tuple

from hdkey.engine import KeyDerivationEngine
from hdkey.exceptions import (
    HDKeyTypeError,
    HDKeyValueError,
    InvalidPath,
    UnsupportedDerivation,
)
from hdkey.keys import HARDENED, ExtendedKey, PrivateExtendedKey

_LOGGER = logging.getLogger(__name__)

_PRIVATE_PATH = re.compile(r"m(/[0-9]+'?)*")
_PUBLIC_PATH = re.compile(r"M(/[0-9]+)*")


def int_from_index_str(s: str) -> int:

    hardened = s.endswith("'")
    if hardened:
        s = s[:-1]

    index = int(s)
    if not 0 <= index < HARDENED:
        raise InvalidPath(f"invalid index: {index}")
    return index + (HARDENED if hardened else 0)


def str_from_index_int(i: int) -> str:

    if not 0 <= i <= 0xFFFFFFFF:
        raise HDKeyValueError(f"invalid index: {i}")
    if i < HARDENED:
        return str(i)
    return str(i - HARDENED) + "'"


def parse_path(der_path: str) -> Tuple[bool, List[int]]:
    """Return the (private derivation, indexes) pair of the path.

    Private derivation is selected by a leading 'm',
    public derivation by a leading 'M'.
    """

    if not isinstance(der_path, str):
        raise HDKeyTypeError(f"invalid path type: {type(der_path).__name__}")

    if der_path.startswith("m"):
        private = True
        if not _PRIVATE_PATH.fullmatch(der_path):
            raise InvalidPath(f"invalid private derivation path: '{der_path}'")
    elif der_path.startswith("M"):
        private = False
        if not _PUBLIC_PATH.fullmatch(der_path):
            raise InvalidPath(f"invalid public derivation path: '{der_path}'")
    else:
        raise InvalidPath(f"invalid derivation path: '{der_path}'")

    indexes = [int_from_index_str(s) for s in der_path.split("/")[1:]]
    return private, indexes


def str_from_der_path(indexes: Sequence[int], private: bool = True) -> str:
    "Return the derivation path string of the indexes."

    if not private and any(i >= HARDENED for i in indexes):
        raise UnsupportedDerivation("hardened index in public derivation path")
    steps = ["m" if private else "M"]
    steps += [str_from_index_int(i) for i in indexes]
    return "/".join(steps)


class PathWalker:
    "Fold the engine child key derivations along a derivation path."

    def __init__(self, engine: KeyDerivationEngine) -> None:
        self.engine = engine

    def walk(self, root: ExtendedKey, der_path: str) -> ExtendedKey:

        private, indexes = parse_path(der_path)

        final_depth = root.depth + len(indexes)
        if final_depth > 255:
            raise InvalidPath(f"final depth greater than 255: {final_depth}")

        if private:
            if not isinstance(root, PrivateExtendedKey):
                err_msg = f"private derivation path from public key: '{der_path}'"
                raise UnsupportedDerivation(err_msg)
            ckd = self.engine.ckd_priv
        else:
            if isinstance(root, PrivateExtendedKey):
                root = self.engine.private_to_public(root)
            ckd = self.engine.ckd_pub

        _LOGGER.debug(
            "walking %s to depth %s", str_from_der_path(indexes, private), final_depth
        )
        return functools.reduce(ckd, indexes, root)  # type: ignore
