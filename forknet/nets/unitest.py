"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details.

unitest is a network for unit tests. Proof of work difficulty is almost zero,
so tests can mine blocks trivially. It shares the regtest genesis block and
ports.
"""

from forknet.compact import Compact

from . import regtest


Name = "unitest"
Magic = 0x00000000
DefaultPort = regtest.DefaultPort
RPCPort = regtest.RPCPort

# The largest target a compact encoding can express.
PowLimit = Compact.maxValue().toInt()

GenesisHash = regtest.GenesisHash
GenesisBlock = regtest.GenesisBlock

VerificationEdge = None
