#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from hdkey import bip32

seed = (
    "3635ace556665090d13a8010b038cfa4697d917902f70bfa336b14af008cefc9"
    "677da51a2822542595e649ca85ddd076f2c4027bbb70775eefc3f63a8841288c"
)

print("\n*** BIP44 account derivation")

print("\n0. Seed")
print(seed)

print("\n1. Master key")
root = bip32.generate_master_key(seed)
print(bip32.serialize(root))

print("\n2. Account key: m/44'/0'/0'")
account = bip32.derive(root, "m/44'/0'/0'")
print(bip32.serialize(account))
account_xpub = bip32.xpub_from_xprv(account)
print(account_xpub)

print("\n3. Receive public keys, from the account xpub")
for der_path in ("M/0/0", "M/0/1"):
    xpub = bip32.derive(account_xpub, der_path)
    print(f"{der_path}: {xpub.key.hex()}")
