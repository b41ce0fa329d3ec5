#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
raised by hdkey from those raised by other codebase;
users can usually just deal with the regular
ValueError, TypeError, and RuntimeError from which they are derived.

The HDKeyValueError subclasses name the specific failure,
e.g. a checksum mismatch while decoding an extended key.
"""


class HDKeyValueError(ValueError):
    pass


class HDKeyTypeError(TypeError):
    pass


class HDKeyRuntimeError(RuntimeError):
    pass


class InvalidSeed(HDKeyValueError):
    pass


class InvalidPath(HDKeyValueError):
    pass


class UnsupportedDerivation(HDKeyValueError):
    "Hardened derivation requested from a public-only key."


class UnsupportedVersion(HDKeyValueError):
    "Version bytes the resolver cannot classify or convert."


class InvalidVersion(HDKeyValueError):
    "Unknown version bytes found while decoding."


class InvalidMasterKeyEncoding(HDKeyValueError):
    "Zero depth with non-zero parent fingerprint or index."


class InvalidPrivateKeyEncoding(HDKeyValueError):
    pass


class InvalidPublicKeyEncoding(HDKeyValueError):
    pass


class ChecksumMismatch(HDKeyValueError):
    pass


class InvalidEncoding(HDKeyValueError):
    "Malformed base58 text or wrong decoded size."
