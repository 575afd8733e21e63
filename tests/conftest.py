"""
Copyright (c) 2020, the Forknet developers
See LICENSE for details
"""

import pytest

from forknet.consensus import BitcoinCashParams, ConsensusFork, ZCashParams
from forknet.network import Network
from forknet.util import helpers


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def core():
    return ConsensusFork.bitcoinCore()


@pytest.fixture
def bch():
    return ConsensusFork.bitcoinCash(BitcoinCashParams.new(Network.Mainnet))


@pytest.fixture
def zec():
    return ConsensusFork.zcash(ZCashParams.new(Network.Mainnet))


@pytest.fixture
def allForks(core, bch, zec):
    return [core, bch, zec]
