#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and the extended key version resolver.

The version bytes of a network are what make a serialized
extended key start with 'xprv'/'xpub' (mainnet) or 'tprv'/'tpub' (testnet).
They are configured in the _data/networks.json package data file.
"""

import json
from dataclasses import InitVar, dataclass, field
from os import path
from typing import Dict, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from hdkey.alias import Octets
from hdkey.exceptions import HDKeyValueError, UnsupportedVersion
from hdkey.utils import bytes_from_octets

_Network = TypeVar("_Network", bound="Network")

_BYTES = config(encoder=lambda v: v.hex(), decoder=bytes.fromhex)


@dataclass(frozen=True)
class Network(DataClassJsonMixin):
    name: str
    # BIP32 serialized private key starts with 'xprv' on mainnet
    bip32_prv: bytes = field(metadata=_BYTES)
    # BIP32 serialized public key starts with 'xpub' on mainnet
    bip32_pub: bytes = field(metadata=_BYTES)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(self, "bip32_prv", bytes_from_octets(self.bip32_prv))
        object.__setattr__(self, "bip32_pub", bytes_from_octets(self.bip32_pub))
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        for key in ("bip32_prv", "bip32_pub"):
            value = getattr(self, key)
            if len(value) != 4:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes instead of 4"
                raise HDKeyValueError(err_msg)
        if self.bip32_prv == self.bip32_pub:
            err_msg = f"same private/public version: {self.bip32_prv.hex()}"
            raise HDKeyValueError(err_msg)


NETWORKS: Dict[str, Network] = {}
datadir = path.join(path.dirname(__file__), "_data")
with open(path.join(datadir, "networks.json"), "r", encoding="ascii") as file_:
    for net_name, net_dict in json.load(file_).items():
        NETWORKS[net_name] = Network.from_dict(net_dict)


def network_from_name(network: str = "mainnet") -> Network:
    "Return the Network, the name being case/blank insensitive."
    net = network.strip().lower()
    if net not in NETWORKS:
        raise HDKeyValueError(f"unknown network: {network}")
    return NETWORKS[net]


_VersionResolver = TypeVar("_VersionResolver", bound="VersionResolver")


class VersionResolver:
    """Version bytes policy of a network.

    It maps the network to the 4-bytes version tags
    of serialized extended keys and converts
    between the private and public tag of the same network.
    """

    def __init__(self, network: str = "mainnet") -> None:
        self.network = network_from_name(network)

    def __repr__(self) -> str:
        return f"VersionResolver('{self.network.name}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionResolver):
            return NotImplemented
        return self.network == other.network

    def __hash__(self) -> int:
        return hash(self.network.name)

    def public_version_bytes(self) -> bytes:
        return self.network.bip32_pub

    def private_version_bytes(self) -> bytes:
        return self.network.bip32_prv

    def is_private_version(self, version: Octets) -> bool:
        return bytes_from_octets(version) == self.network.bip32_prv

    def is_public_version(self, version: Octets) -> bool:
        return bytes_from_octets(version) == self.network.bip32_pub

    def convert_version_bytes(self, version: Octets) -> bytes:
        "Convert private version bytes to public ones and vice versa."

        version = bytes_from_octets(version)
        if version == self.network.bip32_prv:
            return self.network.bip32_pub
        if version == self.network.bip32_pub:
            return self.network.bip32_prv
        err_msg = f"unsupported version for {self.network.name}: 0x{version.hex()}"
        raise UnsupportedVersion(err_msg)

    @classmethod
    def from_version(
        cls: Type[_VersionResolver], version: Octets
    ) -> _VersionResolver:
        "Return the resolver of the network owning the version bytes."

        version = bytes_from_octets(version)
        for net in NETWORKS.values():
            if version in (net.bip32_prv, net.bip32_pub):
                return cls(net.name)
        raise UnsupportedVersion(f"unknown extended key version: 0x{version.hex()}")
