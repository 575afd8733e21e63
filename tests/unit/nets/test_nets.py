"""
Copyright (c) 2020, the Forknet developers
See LICENSE for details
"""

import pytest

from forknet import ForknetError, nets
from forknet.compact import Compact
from forknet.forks import bitcoincash, zcash


def test_parse():
    assert nets.parse("mainnet") is nets.mainnet
    assert nets.parse("testnet3") is nets.testnet
    assert nets.parse("testnet") is nets.testnet
    assert nets.parse("regtest") is nets.regtest
    assert nets.parse("regnet") is nets.regtest
    assert nets.parse("unitest") is nets.unitest
    with pytest.raises(ForknetError):
        nets.parse("mainnet3")


def test_normalizeName():
    assert nets.normalizeName("testnet3") == "testnet"
    assert nets.normalizeName("testnet") == "testnet"
    assert nets.normalizeName("mainnet") == "mainnet"


def test_powLimits():
    tests = [
        (nets.mainnet, 0x1D00FFFF),
        (nets.testnet, 0x1D00FFFF),
        (nets.regtest, 0x207FFFFF),
        (nets.unitest, 0x2100FFFF),
    ]
    for net, bits in tests:
        assert Compact.fromInt(net.PowLimit).bits == bits, net.Name
        assert Compact.fromInt(net.PowLimit).toInt() <= net.PowLimit


def test_unitest():
    assert nets.unitest.Magic == 0
    assert nets.unitest.DefaultPort == nets.regtest.DefaultPort
    assert nets.unitest.RPCPort == nets.regtest.RPCPort
    assert nets.unitest.GenesisBlock == nets.regtest.GenesisBlock
    assert nets.unitest.VerificationEdge is None


def test_forkTables():
    netNames = {"mainnet", "testnet", "regtest", "unitest"}
    for fork in (bitcoincash, zcash):
        for table in (fork.Magics, fork.PowLimits, fork.Ports, fork.ConsensusParams):
            assert set(table) <= netNames
        assert set(fork.ConsensusParams) == netNames
        assert len(set(fork.Magics.values())) == len(fork.Magics)
    assert set(zcash.GenesisBlocks) == set(zcash.GenesisHashes)
    assert not hasattr(bitcoincash, "GenesisBlocks")
