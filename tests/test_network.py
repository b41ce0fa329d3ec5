#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdkey developers
#
# This file is part of hdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkey.network` module."

import json

import pytest

from hdkey.exceptions import HDKeyValueError, UnsupportedVersion
from hdkey.network import NETWORKS, Network, VersionResolver, network_from_name

MAINNET_PRV = bytes.fromhex("0488ade4")
MAINNET_PUB = bytes.fromhex("0488b21e")
TESTNET_PRV = bytes.fromhex("04358394")
TESTNET_PUB = bytes.fromhex("043587cf")


def test_bad_network() -> None:

    with pytest.raises(HDKeyValueError, match="invalid bip32_prv length: "):
        Network(name="bad", bip32_prv="0488ad", bip32_pub="0488b21e")

    with pytest.raises(HDKeyValueError, match="invalid bip32_pub length: "):
        Network(name="bad", bip32_prv="0488ade4", bip32_pub="0488b21e00")

    with pytest.raises(HDKeyValueError, match="same private/public version: "):
        Network(name="bad", bip32_prv="0488ade4", bip32_pub="0488ade4")

    net = Network(
        name="bad", bip32_prv="0488ad", bip32_pub="0488b21e", check_validity=False
    )
    assert net.bip32_prv == bytes.fromhex("0488ad")


def test_numbers_of_networks() -> None:
    assert sorted(NETWORKS) == ["mainnet", "testnet"]


def test_space_and_caps() -> None:

    assert network_from_name(" MainNet ") == NETWORKS["mainnet"]

    with pytest.raises(HDKeyValueError, match="unknown network: "):
        network_from_name(" MainNet2 ")

    with pytest.raises(HDKeyValueError, match="unknown network: "):
        VersionResolver("regtest")


def test_dataclasses_json_dict() -> None:

    for net in NETWORKS.values():
        net_dict = net.to_dict()
        assert isinstance(net_dict["bip32_prv"], str)
        assert net == Network.from_dict(net_dict)
        assert net == Network.from_json(json.dumps(net_dict))


def test_version_resolver() -> None:

    resolver = VersionResolver()
    assert resolver == VersionResolver("mainnet")
    assert resolver != VersionResolver("testnet")
    assert hash(resolver) == hash(VersionResolver(" MAINNET"))
    assert repr(resolver) == "VersionResolver('mainnet')"

    assert resolver.private_version_bytes() == MAINNET_PRV
    assert resolver.public_version_bytes() == MAINNET_PUB
    assert resolver.is_private_version(MAINNET_PRV)
    assert resolver.is_private_version("0488ade4")
    assert not resolver.is_private_version(MAINNET_PUB)
    assert resolver.is_public_version(MAINNET_PUB)
    assert not resolver.is_public_version(TESTNET_PUB)

    resolver = VersionResolver("testnet")
    assert resolver.private_version_bytes() == TESTNET_PRV
    assert resolver.public_version_bytes() == TESTNET_PUB


def test_convert_version_bytes() -> None:

    for name in NETWORKS:
        resolver = VersionResolver(name)
        prv = resolver.private_version_bytes()
        pub = resolver.public_version_bytes()
        assert resolver.convert_version_bytes(prv) == pub
        assert resolver.convert_version_bytes(pub) == prv

    resolver = VersionResolver("mainnet")
    with pytest.raises(UnsupportedVersion, match="unsupported version for mainnet: "):
        resolver.convert_version_bytes(TESTNET_PRV)
    with pytest.raises(UnsupportedVersion, match="unsupported version for mainnet: "):
        resolver.convert_version_bytes(b"\x00" * 4)


def test_from_version() -> None:

    assert VersionResolver.from_version(MAINNET_PRV) == VersionResolver("mainnet")
    assert VersionResolver.from_version(MAINNET_PUB) == VersionResolver("mainnet")
    assert VersionResolver.from_version(TESTNET_PRV) == VersionResolver("testnet")
    assert VersionResolver.from_version("043587cf") == VersionResolver("testnet")

    with pytest.raises(UnsupportedVersion, match="unknown extended key version: "):
        VersionResolver.from_version("0488ade5")
