"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details.

regtest holds the reference chain's regression test network parameters.
Values mirror https://github.com/bitcoin/bitcoin/blob/master/src/chainparams.cpp
"""

Name = "regtest"
Magic = 0xDAB5BFFA
DefaultPort = 18444
RPCPort = 18443

PowLimit = (1 << 255) - 1

GenesisHash = "0f9188f13cb7b2c71f2a335e3a4fc328bf5beb436012afca590b1a11466e2206"

GenesisBlock = (
    "010000000000000000000000000000000000000000000000000000000000000000000000"
    "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4adae5494d"
    "ffff7f200200000001010000000100000000000000000000000000000000000000000000"
    "00000000000000000000ffffffff4d04ffff001d0104455468652054696d65732030332f"
    "4a616e2f32303039204368616e63656c6c6f72206f6e206272696e6b206f66207365636f"
    "6e64206261696c6f757420666f722062616e6b73ffffffff0100f2052a01000000434104"
    "678afdb0fe5548271967f1a67130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f"
    "4cef38c4f35504e51ec112de5c384df7ba0b8d578a4c702b6bf11d5fac00000000"
)

# No curated checkpoint. Regtest chains are private.
VerificationEdge = None
