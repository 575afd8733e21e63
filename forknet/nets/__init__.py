"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details.

Reference chain parameters, one module per network.
"""

from forknet import ForknetError

from . import mainnet, regtest, testnet, unitest


the_nets = {n.Name: n for n in (mainnet, testnet, regtest, unitest)}
the_nets["testnet"] = the_nets["testnet3"]
the_nets["regnet"] = the_nets["regtest"]


def parse(name):
    """
    Get the network parameters based on the network name.
    """
    try:
        return the_nets[name]
    except KeyError:
        raise ForknetError(f"unrecognized network name {name}")


def normalizeName(netName):
    """
    Remove the numerals from testnet.

    Args:
        netName (string): The raw network name.

    Returns:
        string: The network name with numerals stripped.
    """
    return "testnet" if "testnet" in netName else netName
