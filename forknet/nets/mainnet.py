"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details.

mainnet holds the reference chain's mainnet parameters. Values mirror
https://github.com/bitcoin/bitcoin/blob/master/src/chainparams.cpp
"""

Name = "mainnet"
Magic = 0xD9B4BEF9
DefaultPort = 8333
RPCPort = 8332

# Proof of work limit, the easiest acceptable target.
PowLimit = (1 << 224) - 1

GenesisHash = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"

# The serialized genesis block: the header followed by the coinbase
# transaction carrying "The Times 03/Jan/2009 Chancellor on brink of second
# bailout for banks".
GenesisBlock = (
    "010000000000000000000000000000000000000000000000000000000000000000000000"
    "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a29ab5f49"
    "ffff001d1dac2b7c01010000000100000000000000000000000000000000000000000000"
    "00000000000000000000ffffffff4d04ffff001d0104455468652054696d65732030332f"
    "4a616e2f32303039204368616e63656c6c6f72206f6e206272696e6b206f66207365636f"
    "6e64206261696c6f757420666f722062616e6b73ffffffff0100f2052a01000000434104"
    "678afdb0fe5548271967f1a67130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f"
    "4cef38c4f35504e51ec112de5c384df7ba0b8d578a4c702b6bf11d5fac00000000"
)

# Blocks up to and including the verification edge are accepted without full
# script verification.
VerificationEdge = "0000000000000000030abc968e1bd635736e880b946085c93152969b9a81a6e2"
