"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Node configuration: which network and consensus fork to run. Settings are
read from an INI file in the OS data directory and can be overridden on the
command line.
"""

import argparse
import logging
import os

from appdirs import AppDirs

from forknet import ForknetError
from forknet.consensus import ConsensusFork
from forknet.network import Network
from forknet.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("Forknet", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "forknet.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

DEFAULT_FORK = "btc"

configKeys = ("network", "fork", "magic")

log = helpers.getLogger("CONFIG")

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.lower()]


def parseMagic(s):
    """
    Parse a decimal or 0x-prefixed hexadecimal magic.
    """
    try:
        return int(s, 0)
    except ValueError:
        raise ForknetError(f"invalid network magic {s!r}")


class NodeConfig:
    """
    NodeConfig resolves the network and consensus fork. Command-line flags
    take precedence over the configuration file.
    """

    def __init__(self, argv=None, path=CONFIG_PATH):
        fileCfg = helpers.readINI(path, configKeys) if os.path.isfile(path) else {}
        self.file = fileCfg
        parser = argparse.ArgumentParser()
        netGroup = parser.add_mutually_exclusive_group()
        netGroup.add_argument("--testnet", action="store_true", help="use testnet")
        netGroup.add_argument("--regtest", action="store_true", help="use regtest")
        netGroup.add_argument("--unitest", action="store_true", help="use unitest")
        netGroup.add_argument("--magic", help="use a custom network with this magic")
        parser.add_argument("--fork", help="consensus fork: btc, bch or zec")
        parser.add_argument("--loglevel", help="a level, or module:level pairs separated by commas")
        args, unknown = parser.parse_known_args(argv)
        if unknown:
            log.warning(f"ignoring unknown arguments: {unknown!r}")

        self.logLevel = logging.INFO
        self.moduleLevels = {}
        if args.loglevel:
            try:
                if any(ch in args.loglevel for ch in (",", ":")):
                    pairs = (s.split(":") for s in args.loglevel.split(","))
                    self.moduleLevels = {k: logLvl(v) for k, v in pairs}
                else:
                    self.logLevel = logLvl(args.loglevel)
            except (KeyError, ValueError):
                raise ForknetError(f"malformed loglevel specifier: {args.loglevel}")

        if args.testnet:
            self.network = Network.Testnet
        elif args.regtest:
            self.network = Network.Regtest
        elif args.unitest:
            self.network = Network.Unitest
        elif args.magic:
            self.network = Network.other(parseMagic(args.magic))
        elif "magic" in fileCfg:
            self.network = Network.other(parseMagic(fileCfg["magic"]))
        elif "network" in fileCfg:
            self.network = Network.parse(fileCfg["network"])
        else:
            self.network = Network.Mainnet

        forkName = args.fork or fileCfg.get("fork", DEFAULT_FORK)
        self.fork = ConsensusFork.parse(forkName, self.network)
        log.info(f"using {self.network.name} on {self.fork.kind}")

    def prepareLogging(self, filepath=None):
        """
        Configure logging with the parsed levels.

        Args:
            filepath (str): optional. A rotating log file path.
        """
        helpers.prepareLogging(filepath, self.logLevel, self.moduleLevels)

    @property
    def magic(self):
        return self.network.magic(self.fork)

    @property
    def port(self):
        return self.network.port(self.fork)

    @property
    def rpcPort(self):
        return self.network.rpcPort()


nodeConfig = None


def load(argv=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular
    `load` function will return the same instance.

    Returns:
        NodeConfig: The current configuration.
    """
    global nodeConfig
    if not nodeConfig:
        nodeConfig = NodeConfig(argv, CONFIG_PATH)
    return nodeConfig
