"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Network selection and the per-(network, fork) parameters every part of a node
has to agree on: message magic, proof-of-work limit, ports, genesis block and
the default verification edge.

Parameters are resolved from a table keyed by (fork kind, network kind) that
is built once at import. A fork's override for a network always wins over the
reference chain's value. The table is checked for completeness as it is
built, so the parameter accessors cannot fail.
"""

import threading

from forknet import ForknetError, MalformedError, UnsupportedCombinationError
from forknet import nets
from forknet.consensus import ForkKind
from forknet.forks import bitcoincash, zcash
from forknet.util import helpers
from forknet.util.encode import hexToBytes, rba
from forknet.wire import wire
from forknet.wire.msgblock import MsgBlock


log = helpers.getLogger("NETWORK")

MaxMagic = 0xFFFFFFFF


class NetworkKind:
    Mainnet = "mainnet"
    Testnet = "testnet"
    Regtest = "regtest"
    Unitest = "unitest"
    Other = "other"

    all = (Mainnet, Testnet, Regtest, Unitest, Other)


class Network:
    """
    Network is one of Mainnet, Testnet, Regtest, Unitest, or a custom network
    created with Network.other(magic). Custom networks carry their own message
    magic and otherwise behave like the fork's mainnet.
    """

    # Set after the class definition.
    Mainnet = Testnet = Regtest = Unitest = None

    def __init__(self, kind, customMagic=None):
        if kind not in NetworkKind.all:
            raise ForknetError(f"unknown network kind {kind}")
        if kind == NetworkKind.Other:
            if not isinstance(customMagic, int) or not 0 <= customMagic <= MaxMagic:
                raise ForknetError(f"invalid magic for custom network: {customMagic}")
        elif customMagic is not None:
            raise ForknetError(f"only custom networks carry a magic, not {kind}")
        self.kind = kind
        self.customMagic = customMagic

    def __eq__(self, other):
        return (
            isinstance(other, Network)
            and self.kind == other.kind
            and self.customMagic == other.customMagic
        )

    def __hash__(self):
        return hash((self.kind, self.customMagic))

    def __repr__(self):
        if self.kind == NetworkKind.Other:
            return f"Network.other({self.customMagic:#010x})"
        return f"Network.{self.kind.capitalize()}"

    @property
    def name(self):
        return self.kind

    @staticmethod
    def other(magic):
        """
        A custom network identified by its message magic.

        Args:
            magic (int): The uint32 message magic.
        """
        return Network(NetworkKind.Other, magic)

    @staticmethod
    def parse(name):
        """
        Get the Network for a network name, e.g. "mainnet" or "testnet3".
        """
        netParams = nets.parse(name)
        return _byName[nets.normalizeName(netParams.Name)]

    def baseKind(self):
        """
        The network kind whose parameters apply. Custom networks use mainnet
        values except for their magic.
        """
        return NetworkKind.Mainnet if self.kind == NetworkKind.Other else self.kind

    def magic(self, fork):
        """
        The message magic, a uint32.

        Args:
            fork (ConsensusFork): The consensus fork.
        """
        if self.kind == NetworkKind.Other:
            return self.customMagic
        return _table[(fork.kind, self.kind)].magic

    def maxBits(self, fork):
        """
        The proof-of-work limit, the numerically largest target any block may
        have.

        Args:
            fork (ConsensusFork): The consensus fork.

        Returns:
            int: A 256-bit target.
        """
        return _table[(fork.kind, self.kind)].powLimit

    def port(self, fork):
        """
        The default peer-to-peer port.

        Args:
            fork (ConsensusFork): The consensus fork.
        """
        return _table[(fork.kind, self.kind)].port

    def rpcPort(self):
        """
        The default RPC port. RPC ports do not depend on the consensus fork.
        """
        return _rpcPorts[self.baseKind()]

    def genesisBlock(self, fork):
        """
        The genesis block. Blocks are decoded on first use and cached for the
        life of the process. Every caller receives the same MsgBlock, which
        must not be modified.

        Args:
            fork (ConsensusFork): The consensus fork.

        Returns:
            MsgBlock: The genesis block.

        Raises:
            UnsupportedCombinationError: if there is no known genesis block for
                the network and fork.
            DecodeError: if the embedded block does not decode.
        """
        params = _table[(fork.kind, self.kind)]
        if params.genesis is None:
            raise UnsupportedCombinationError(
                f"no genesis block for {self.kind} on {fork.kind}"
            )
        key = (fork.kind, self.baseKind())
        block = _genesisCache.get(key)
        if block is not None:
            return block
        with _genesisLock:
            block = _genesisCache.get(key)
            if block is None:
                block = params.genesis.decode()
                _genesisCache[key] = block
        return block

    def defaultVerificationEdge(self, fork):
        """
        The hash of the block up to which blocks are accepted without full
        verification. Networks without a curated checkpoint use their genesis
        block.

        Args:
            fork (ConsensusFork): The consensus fork.

        Returns:
            ByteArray: The 32-byte hash, in internal byte order.

        Raises:
            UnsupportedCombinationError, DecodeError: see genesisBlock.
        """
        edge = _table[(fork.kind, self.kind)].verificationEdge
        if edge is not None:
            return edge
        return self.genesisBlock(fork).hash()


Network.Mainnet = Network(NetworkKind.Mainnet)
Network.Testnet = Network(NetworkKind.Testnet)
Network.Regtest = Network(NetworkKind.Regtest)
Network.Unitest = Network(NetworkKind.Unitest)

_byName = {
    NetworkKind.Mainnet: Network.Mainnet,
    NetworkKind.Testnet: Network.Testnet,
    NetworkKind.Regtest: Network.Regtest,
    NetworkKind.Unitest: Network.Unitest,
}


class GenesisPayload:
    """
    An embedded, serialized genesis block and the wire encoding it is in.
    """

    def __init__(self, name, payload, encoding, genesisHash):
        self.name = name
        self.payload = payload
        self.encoding = encoding
        self.genesisHash = genesisHash

    def decode(self):
        """
        Decode the payload and check the block hash against the known genesis
        hash.

        Raises:
            InvalidHexError: if the payload is not hex.
            MalformedError: if the bytes are not a block in the payload's
                encoding, or the block hash is not the genesis hash.
        """
        block = MsgBlock.deserialize(hexToBytes(self.payload), self.encoding)
        blockID = block.id()
        if blockID != self.genesisHash:
            raise MalformedError(
                f"{self.name} genesis block hash {blockID} != {self.genesisHash}"
            )
        log.debug(f"decoded {self.name} genesis block {blockID}")
        return block


class NetParams:
    """
    One cell of the parameter table. magic is None for custom networks, which
    carry their own.
    """

    def __init__(self, magic, powLimit, port, genesis, verificationEdge):
        self.magic = magic
        self.powLimit = powLimit
        self.port = port
        self.genesis = genesis
        self.verificationEdge = verificationEdge


_refNets = {
    NetworkKind.Mainnet: nets.mainnet,
    NetworkKind.Testnet: nets.testnet,
    NetworkKind.Regtest: nets.regtest,
    NetworkKind.Unitest: nets.unitest,
}

_rpcPorts = {k: n.RPCPort for k, n in _refNets.items()}

# Fork overrides. Forks with their own GenesisBlocks table have their own
# chain history and do not inherit the reference genesis blocks or
# checkpoints.
_forkMods = {
    ForkKind.BitcoinCore: None,
    ForkKind.BitcoinCash: bitcoincash,
    ForkKind.ZCash: zcash,
}

_genesisEncodings = {
    ForkKind.ZCash: wire.ZcashEncoding,
}


def _override(forkMod, tableName, netKind, default):
    if forkMod is None:
        return default
    return getattr(forkMod, tableName).get(netKind, default)


def _buildParams(forkKind, netKind):
    forkMod = _forkMods[forkKind]
    baseKind = NetworkKind.Mainnet if netKind == NetworkKind.Other else netKind
    ref = _refNets[baseKind]

    magic = None
    if netKind != NetworkKind.Other:
        magic = _override(forkMod, "Magics", netKind, ref.Magic)

    enc = _genesisEncodings.get(forkKind, wire.WitnessEncoding)
    ownChain = forkMod is not None and hasattr(forkMod, "GenesisBlocks")
    genesis = None
    edge = None
    if ownChain:
        if baseKind in forkMod.GenesisBlocks:
            genesis = GenesisPayload(
                f"{forkKind} {baseKind}",
                forkMod.GenesisBlocks[baseKind],
                enc,
                forkMod.GenesisHashes[baseKind],
            )
    else:
        genesis = GenesisPayload(
            f"{forkKind} {baseKind}", ref.GenesisBlock, enc, ref.GenesisHash
        )
        if netKind != NetworkKind.Other and ref.VerificationEdge:
            edge = rba(ref.VerificationEdge)

    return NetParams(
        magic=magic,
        powLimit=_override(forkMod, "PowLimits", baseKind, ref.PowLimit),
        port=_override(forkMod, "Ports", baseKind, ref.DefaultPort),
        genesis=genesis,
        verificationEdge=edge,
    )


def _buildTable():
    table = {}
    for forkKind in ForkKind.all:
        for netKind in NetworkKind.all:
            table[(forkKind, netKind)] = _buildParams(forkKind, netKind)
    _checkTable(table)
    return table


def _checkTable(table):
    """
    Every (fork kind, network kind) pair must resolve to a magic, a
    proof-of-work limit and a port.
    """
    for forkKind in ForkKind.all:
        for netKind in NetworkKind.all:
            params = table.get((forkKind, netKind))
            if params is None:
                raise ForknetError(f"missing network parameters for ({forkKind}, {netKind})")
            if netKind != NetworkKind.Other and not 0 <= params.magic <= MaxMagic:
                raise ForknetError(f"bad magic for ({forkKind}, {netKind})")
            if not 0 < params.powLimit < 1 << 256:
                raise ForknetError(f"bad proof-of-work limit for ({forkKind}, {netKind})")
            if not 0 < params.port <= 0xFFFF:
                raise ForknetError(f"bad port for ({forkKind}, {netKind})")


_table = _buildTable()

_genesisCache = {}
_genesisLock = threading.Lock()
