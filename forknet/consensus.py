"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

The consensus fork selector. A fork carries its own parameters, but the
network parameter tables only dispatch on its kind.
"""

from forknet import ForknetError
from forknet.forks import bitcoincash, zcash


class ForkKind:
    BitcoinCore = "bitcoincore"
    BitcoinCash = "bitcoincash"
    ZCash = "zcash"

    all = (BitcoinCore, BitcoinCash, ZCash)


def _paramsFor(table, network):
    # Custom networks use the fork's mainnet rules.
    kind = "mainnet" if network.kind == "other" else network.kind
    return table[kind]


class BitcoinCashParams:
    """
    Bitcoin Cash activation heights and times.
    """

    def __init__(self, height, difficultyAdjustmentHeight, monolithTime, magneticAnomalyTime):
        self.height = height
        self.difficultyAdjustmentHeight = difficultyAdjustmentHeight
        self.monolithTime = monolithTime
        self.magneticAnomalyTime = magneticAnomalyTime

    def __eq__(self, other):
        return isinstance(other, BitcoinCashParams) and vars(self) == vars(other)

    @staticmethod
    def new(network):
        """
        The default parameters for the network.

        Args:
            network (Network): The network.
        """
        return BitcoinCashParams(**_paramsFor(bitcoincash.ConsensusParams, network))


class ZCashParams:
    """
    Zcash difficulty adjustment and Equihash parameters.
    """

    def __init__(
        self,
        powAveragingWindow,
        powMaxAdjustDown,
        powMaxAdjustUp,
        powTargetSpacing,
        equihashN,
        equihashK,
    ):
        self.powAveragingWindow = powAveragingWindow
        self.powMaxAdjustDown = powMaxAdjustDown
        self.powMaxAdjustUp = powMaxAdjustUp
        self.powTargetSpacing = powTargetSpacing
        self.equihashN = equihashN
        self.equihashK = equihashK

    def __eq__(self, other):
        return isinstance(other, ZCashParams) and vars(self) == vars(other)

    @staticmethod
    def new(network):
        """
        The default parameters for the network.

        Args:
            network (Network): The network.
        """
        return ZCashParams(**_paramsFor(zcash.ConsensusParams, network))

    def averagingWindowTimespan(self):
        return self.powAveragingWindow * self.powTargetSpacing


class ConsensusFork:
    """
    ConsensusFork selects the rule set a node follows. Use the bitcoinCore,
    bitcoinCash and zcash constructors.
    """

    def __init__(self, kind, params=None):
        if kind not in ForkKind.all:
            raise ForknetError(f"unknown consensus fork {kind}")
        self.kind = kind
        self.params = params

    def __eq__(self, other):
        return (
            isinstance(other, ConsensusFork)
            and self.kind == other.kind
            and self.params == other.params
        )

    def __hash__(self):
        return hash(self.kind)

    def __repr__(self):
        return f"ConsensusFork({self.kind})"

    @staticmethod
    def bitcoinCore():
        return ConsensusFork(ForkKind.BitcoinCore)

    @staticmethod
    def bitcoinCash(params):
        return ConsensusFork(ForkKind.BitcoinCash, params)

    @staticmethod
    def zcash(params):
        return ConsensusFork(ForkKind.ZCash, params)

    def isBitcoinCore(self):
        return self.kind == ForkKind.BitcoinCore

    def isBitcoinCash(self):
        return self.kind == ForkKind.BitcoinCash

    def isZCash(self):
        return self.kind == ForkKind.ZCash

    @staticmethod
    def parse(name, network):
        """
        Parse a fork name, building the fork's default parameters for the
        network.

        Args:
            name (str): A fork name or ticker, e.g. "btc", "bitcoincash", "zec".
            network (Network): The network the parameters are for.

        Returns:
            ConsensusFork: The fork.
        """
        name = name.lower()
        if name in ("btc", "bitcoin", ForkKind.BitcoinCore):
            return ConsensusFork.bitcoinCore()
        if name in ("bch", "bcc", ForkKind.BitcoinCash):
            return ConsensusFork.bitcoinCash(BitcoinCashParams.new(network))
        if name in ("zec", ForkKind.ZCash):
            return ConsensusFork.zcash(ZCashParams.new(network))
        raise ForknetError(f"unrecognized consensus fork {name}")
