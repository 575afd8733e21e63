"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details.

Bitcoin Cash shares the reference chain's history, genesis blocks, ports and
proof-of-work limits. Only the message magic differs.
"""

Name = "bitcoincash"

Magics = {
    "mainnet": 0xE8F3E1E3,
    "testnet": 0xF4F3E5F4,
    "regtest": 0xFABFB5DA,
}

PowLimits = {}
Ports = {}

# Consensus activation points: the fork height, the height the new
# difficulty adjustment algorithm starts at, and the median-time-past
# activation times of the May 2018 (monolith) and November 2018 (magnetic
# anomaly) upgrades.
ConsensusParams = {
    "mainnet": dict(
        height=478559,
        difficultyAdjustmentHeight=504031,
        monolithTime=1526400000,
        magneticAnomalyTime=1542300000,
    ),
    "testnet": dict(
        height=1155876,
        difficultyAdjustmentHeight=1188697,
        monolithTime=1526400000,
        magneticAnomalyTime=1542300000,
    ),
    "regtest": dict(
        height=0,
        difficultyAdjustmentHeight=0,
        monolithTime=1526400000,
        magneticAnomalyTime=1542300000,
    ),
    "unitest": dict(
        height=0,
        difficultyAdjustmentHeight=0,
        monolithTime=1526400000,
        magneticAnomalyTime=1542300000,
    ),
}
