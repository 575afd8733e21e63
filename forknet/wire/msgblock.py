"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Block and block header codec. The reference header is the 80-byte bitcoin
header. The Zcash header adds a reserved hash, widens the nonce to 32 bytes
and appends the Equihash solution.
"""

from forknet import MalformedError
from forknet.crypto import crypto
from forknet.util.encode import ByteArray
from forknet.wire import msgtx, wire


HASH_SIZE = crypto.HASH_SIZE

# MaxBlockHeaderPayload is the size of a reference block header.
# Version 4 bytes + Timestamp 4 bytes + Bits 4 bytes + Nonce 4 bytes +
# PrevBlock and MerkleRoot hashes.
MaxBlockHeaderPayload = 16 + (HASH_SIZE * 2)

ZcashNonceSize = 32

# MaxEquihashSolutionSize bounds the solution field. Equihash(200, 9)
# solutions are 1344 bytes.
MaxEquihashSolutionSize = 1344

# maxTxPerBlock is the maximum number of transactions that could
# possibly fit into a block.
maxTxPerBlock = (wire.MaxBlockPayload // msgtx.minTxInPayload) + 1


class BlockHeader:
    """
    BlockHeader defines information about a block and is used in the block
    (MsgBlock) and headers messages. The Zcash-only fields are None for
    reference headers.
    """

    def __init__(
        self,
        version=1,
        prevBlock=None,
        merkleRoot=None,
        timestamp=0,
        bits=0,
        nonce=0,
        reservedHash=None,
        solution=None,
        encoding=wire.BaseEncoding,
    ):
        # version of the block. This is not the same as the protocol version.
        self.version = version  # int32

        # hash of the previous block in the block chain.
        self.prevBlock = prevBlock if prevBlock else ByteArray(0, length=HASH_SIZE)

        # merkle tree reference to hash of all transactions for the block.
        self.merkleRoot = merkleRoot if merkleRoot else ByteArray(0, length=HASH_SIZE)

        # time the block was created. Encoded as a uint32 on the wire.
        self.timestamp = timestamp

        # difficulty target for the block, in compact form.
        self.bits = bits  # uint32

        # uint32 for reference headers, 32-byte ByteArray for Zcash headers.
        self.nonce = nonce

        # Zcash: reserved for a future commitment, zero in the genesis block.
        self.reservedHash = reservedHash

        # Zcash: the Equihash solution.
        self.solution = solution

        self.encoding = encoding

        # cachedH is the cached header hash
        self.cachedH = None

    def __eq__(self, bh):
        return (
            self.version == bh.version
            and self.prevBlock == bh.prevBlock
            and self.merkleRoot == bh.merkleRoot
            and self.timestamp == bh.timestamp
            and self.bits == bh.bits
            and self.nonce == bh.nonce
            and self.reservedHash == bh.reservedHash
            and self.solution == bh.solution
        )

    def isZcash(self):
        return self.encoding == wire.ZcashEncoding

    @staticmethod
    def btcDecode(b, pver, enc=wire.BaseEncoding):
        """
        btcDecode decodes the header from the front of b.

        Args:
            b (ByteArray): the bytes to decode.
            pver (int): the protocol version.
            enc (int): the wire encoding.
        """
        bh = BlockHeader(encoding=enc)
        bh.version = b.pop(4).unLittle().int()
        if bh.version & (1 << 31):
            bh.version -= 1 << 32
        bh.prevBlock = b.pop(HASH_SIZE)
        bh.merkleRoot = b.pop(HASH_SIZE)
        if enc == wire.ZcashEncoding:
            bh.reservedHash = b.pop(HASH_SIZE)
        bh.timestamp = b.pop(4).unLittle().int()
        bh.bits = b.pop(4).unLittle().int()
        if enc == wire.ZcashEncoding:
            bh.nonce = b.pop(ZcashNonceSize)
            bh.solution = wire.readVarBytes(
                b, pver, MaxEquihashSolutionSize, "equihash solution"
            )
        else:
            bh.nonce = b.pop(4).unLittle().int()
        return bh

    def btcEncode(self, pver):
        """
        Args:
            pver (int): the protocol version.
        """
        b = ByteArray(self.version % (1 << 32), length=4).littleEndian()
        b += ByteArray(self.prevBlock, length=HASH_SIZE)
        b += ByteArray(self.merkleRoot, length=HASH_SIZE)
        if self.isZcash():
            b += ByteArray(self.reservedHash, length=HASH_SIZE)
        b += ByteArray(self.timestamp, length=4).littleEndian()
        b += ByteArray(self.bits, length=4).littleEndian()
        if self.isZcash():
            b += ByteArray(self.nonce, length=ZcashNonceSize)
            b += wire.writeVarBytes(pver, self.solution)
        else:
            b += ByteArray(self.nonce, length=4).littleEndian()
        return b

    def serialize(self):
        """
        Serialize the BlockHeader.

        Returns:
            ByteArray: The serialized BlockHeader.
        """
        return self.btcEncode(0)

    @staticmethod
    def deserialize(b, enc=wire.BaseEncoding):
        """
        Args:
            b (bytes-like): the bytes to deserialize.
            enc (int): the wire encoding.
        """
        b = ByteArray(b)
        bh = BlockHeader.btcDecode(b, 0, enc)
        if len(b):
            raise MalformedError(f"BlockHeader.deserialize: {len(b)} unexpected trailing bytes")
        return bh

    def hash(self):
        """
        hash computes the block identifier hash for the given block header.
        """
        if self.cachedH is None:
            self.cachedH = crypto.doubleHashH(self.serialize().bytes())
        return self.cachedH

    def id(self):
        return self.hash().rhex()


class MsgBlock:
    """
    MsgBlock is a block message: a header followed by its transactions.
    """

    def __init__(self, header=None, transactions=None):
        self.header = header if header else BlockHeader()
        self.transactions = transactions or []

    def __eq__(self, block):
        return self.header == block.header and self.transactions == block.transactions

    def addTransaction(self, tx):
        self.transactions.append(tx)

    @staticmethod
    def btcDecode(b, pver, enc=wire.WitnessEncoding):
        """
        btcDecode decodes a block from the front of b.

        Args:
            b (ByteArray): the bytes to decode.
            pver (int): the protocol version.
            enc (int): the wire encoding.
        """
        hdrEnc = wire.ZcashEncoding if enc == wire.ZcashEncoding else wire.BaseEncoding
        block = MsgBlock(header=BlockHeader.btcDecode(b, pver, hdrEnc))
        txCount = wire.readVarInt(b, pver)
        # Prevent more transactions than could possibly fit into a block.
        if txCount > maxTxPerBlock:
            raise MalformedError(
                f"MsgBlock.btcDecode: too many transactions to fit into a block [count {txCount}, max {maxTxPerBlock}]"
            )
        for _ in range(txCount):
            block.addTransaction(msgtx.MsgTx.btcDecode(b, pver, enc))
        return block

    @staticmethod
    def deserialize(b, enc=wire.WitnessEncoding):
        """
        Deserialize a complete block. Any bytes left over after the block are
        an error.

        Args:
            b (bytes-like): the serialized block.
            enc (int): the wire encoding.

        Raises:
            MalformedError: if b is not a block in the selected encoding.
        """
        b = ByteArray(b)
        block = MsgBlock.btcDecode(b, 0, enc)
        if len(b):
            raise MalformedError(f"MsgBlock.deserialize: {len(b)} unexpected trailing bytes")
        return block

    def btcEncode(self, pver, enc):
        b = self.header.btcEncode(pver)
        b += wire.writeVarInt(pver, len(self.transactions))
        for tx in self.transactions:
            b += tx.btcEncode(pver, enc)
        return b

    def serialize(self):
        enc = wire.ZcashEncoding if self.header.isZcash() else wire.WitnessEncoding
        return self.btcEncode(0, enc)

    def hash(self):
        """The block hash is the hash of its header."""
        return self.header.hash()

    def id(self):
        return self.header.id()

    def merkleRoot(self):
        """
        Compute the merkle root of the block's transactions.
        """
        return crypto.merkleRoot([tx.hash() for tx in self.transactions])
