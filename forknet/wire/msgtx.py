"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Transaction codec. The reference encoding follows btcd's MsgTx. Under
ZcashEncoding, version 2 (sprout) transactions carry a JoinSplit vector after
the lock time.
"""

from typing import List, Optional

from forknet import MalformedError
from forknet.crypto import crypto
from forknet.util.encode import ByteArray
from forknet.wire import wire


HASH_SIZE = crypto.HASH_SIZE

# TxVersion is the current latest supported transaction version.
TxVersion = 1

# MaxTxInSequenceNum is the maximum sequence number the sequence field
# of a transaction input can be.
MaxTxInSequenceNum = 0xFFFFFFFF

# MaxPrevOutIndex is the maximum index the index field of a previous
# outpoint can be.
MaxPrevOutIndex = 0xFFFFFFFF

# minTxInPayload is the minimum payload size for a transaction input.
# PreviousOutPoint.Hash + PreviousOutPoint.Index 4 bytes + Varint for
# SignatureScript length 1 byte + Sequence 4 bytes.
minTxInPayload = 9 + HASH_SIZE

# maxTxInPerMessage is the maximum number of transactions inputs that
# a transaction which fits into a message could possibly have.
maxTxInPerMessage = (wire.MaxMessagePayload // minTxInPayload) + 1

# MinTxOutPayload is the minimum payload size for a transaction output.
# Value 8 bytes + Varint for PkScript length 1 byte.
MinTxOutPayload = 9

# maxTxOutPerMessage is the maximum number of transactions outputs that
# a transaction which fits into a message could possibly have.
maxTxOutPerMessage = (wire.MaxMessagePayload // MinTxOutPayload) + 1

# maxWitnessItemsPerInput is the maximum number of witness items to
# be read for the witness data for a single TxIn.
maxWitnessItemsPerInput = 500000

# maxWitnessItemSize is the maximum allowed size for an item within
# an input's witness data.
maxWitnessItemSize = 11000

# TxFlagMarker is the first byte of the FLAG field in a bitcoin tx
# message. It allows decoders to distinguish a regular serialized
# transaction from one that would require a different parsing logic.
TxFlagMarker = 0x00

# WitnessFlag is a flag specific to witness encoding. If the TxFlagMarker
# is encountered followed by the WitnessFlag, then it indicates a
# transaction has witness data.
WitnessFlag = 0x01

# OverwinterFlag is set in the version field of Overwinter and later Zcash
# transactions, which use a different layout.
OverwinterFlag = 1 << 31

# JoinSplitsVersion is the first Zcash transaction version with a JoinSplit
# vector.
JoinSplitsVersion = 2

# Sizes of the sprout JSDescription fields.
JSInputs = 2
JSOutputs = 2
PHGRProofSize = 296
NoteCiphertextSize = 601
JoinSplitPubKeySize = 32
JoinSplitSigSize = 64

# minJSDescriptionPayload is the serialized size of one JSDescription.
minJSDescriptionPayload = (
    8  # vpubOld
    + 8  # vpubNew
    + HASH_SIZE  # anchor
    + JSInputs * HASH_SIZE  # nullifiers
    + JSOutputs * HASH_SIZE  # commitments
    + HASH_SIZE  # ephemeralKey
    + HASH_SIZE  # randomSeed
    + JSInputs * HASH_SIZE  # macs
    + PHGRProofSize
    + JSOutputs * NoteCiphertextSize
)

maxJoinSplitsPerMessage = (wire.MaxMessagePayload // minJSDescriptionPayload) + 1


class OutPoint:
    """
    OutPoint defines a data type that is used to track previous transaction
    outputs.
    """

    def __init__(self, txHash: Optional[ByteArray], idx: int):
        self.hash = txHash if txHash else ByteArray(0, length=HASH_SIZE)
        self.index = idx

    def __eq__(self, other: "OutPoint") -> bool:
        return self.hash == other.hash and self.index == other.index

    def txid(self) -> str:
        return self.hash.rhex()


class TxIn:
    """
    TxIn defines a transaction input.
    """

    def __init__(
        self,
        previousOutPoint: OutPoint,
        sequence: int = MaxTxInSequenceNum,
        signatureScript: Optional[ByteArray] = None,
        witness: Optional[List[ByteArray]] = None,
    ):
        self.previousOutPoint = previousOutPoint
        self.sequence = sequence  # uint32
        self.signatureScript = signatureScript or ByteArray(b"")
        self.witness = witness or []

    def __eq__(self, ti: "TxIn") -> bool:
        return (
            self.previousOutPoint == ti.previousOutPoint
            and self.sequence == ti.sequence
            and self.signatureScript == ti.signatureScript
            and self.witness == ti.witness
        )


class TxOut:
    """
    TxOut defines a transaction output.
    """

    def __init__(self, value: int = 0, pkScript: Optional[ByteArray] = None):
        self.value = value
        self.pkScript = pkScript or ByteArray()

    def __eq__(self, to: "TxOut") -> bool:
        return self.value == to.value and self.pkScript == to.pkScript


class JSDescription:
    """
    JSDescription is a Zcash sprout JoinSplit description. The zero-knowledge
    proof and note ciphertexts are kept as opaque bytes.
    """

    def __init__(
        self,
        vpubOld: int,
        vpubNew: int,
        anchor: ByteArray,
        nullifiers: List[ByteArray],
        commitments: List[ByteArray],
        ephemeralKey: ByteArray,
        randomSeed: ByteArray,
        macs: List[ByteArray],
        proof: ByteArray,
        ciphertexts: List[ByteArray],
    ):
        self.vpubOld = vpubOld
        self.vpubNew = vpubNew
        self.anchor = anchor
        self.nullifiers = nullifiers
        self.commitments = commitments
        self.ephemeralKey = ephemeralKey
        self.randomSeed = randomSeed
        self.macs = macs
        self.proof = proof
        self.ciphertexts = ciphertexts

    def __eq__(self, js: "JSDescription") -> bool:
        return self.serialize() == js.serialize()

    @staticmethod
    def btcDecode(b: ByteArray, pver: int) -> "JSDescription":
        return JSDescription(
            vpubOld=b.pop(8).unLittle().int(),
            vpubNew=b.pop(8).unLittle().int(),
            anchor=b.pop(HASH_SIZE),
            nullifiers=[b.pop(HASH_SIZE) for _ in range(JSInputs)],
            commitments=[b.pop(HASH_SIZE) for _ in range(JSOutputs)],
            ephemeralKey=b.pop(HASH_SIZE),
            randomSeed=b.pop(HASH_SIZE),
            macs=[b.pop(HASH_SIZE) for _ in range(JSInputs)],
            proof=b.pop(PHGRProofSize),
            ciphertexts=[b.pop(NoteCiphertextSize) for _ in range(JSOutputs)],
        )

    def serialize(self) -> ByteArray:
        b = ByteArray(self.vpubOld, length=8).littleEndian()
        b += ByteArray(self.vpubNew, length=8).littleEndian()
        b += self.anchor
        for n in self.nullifiers:
            b += n
        for c in self.commitments:
            b += c
        b += self.ephemeralKey
        b += self.randomSeed
        for m in self.macs:
            b += m
        b += self.proof
        for ct in self.ciphertexts:
            b += ct
        return b


class MsgTx:
    """
    MsgTx represents a transaction message. The encoding the transaction was
    decoded with is remembered so that hash serializes it the same way.
    """

    def __init__(
        self,
        version: int = TxVersion,
        txIn: Optional[List[TxIn]] = None,
        txOut: Optional[List[TxOut]] = None,
        lockTime: int = 0,
        joinSplits: Optional[List[JSDescription]] = None,
        joinSplitPubKey: Optional[ByteArray] = None,
        joinSplitSig: Optional[ByteArray] = None,
        encoding: int = wire.WitnessEncoding,
    ):
        self.version = version
        self.txIn = txIn or []
        self.txOut = txOut or []
        self.lockTime = lockTime
        self.joinSplits = joinSplits or []
        self.joinSplitPubKey = joinSplitPubKey
        self.joinSplitSig = joinSplitSig
        self.encoding = encoding

    def __eq__(self, tx):
        """
        Check equality of all fields.
        """
        return (
            self.version == tx.version
            and self.txIn == tx.txIn
            and self.txOut == tx.txOut
            and self.lockTime == tx.lockTime
            and self.joinSplits == tx.joinSplits
            and self.joinSplitPubKey == tx.joinSplitPubKey
            and self.joinSplitSig == tx.joinSplitSig
        )

    def addTxIn(self, ti: TxIn):
        """addTxIn adds a transaction input to the message."""
        self.txIn.append(ti)

    def addTxOut(self, to: TxOut):
        """addTxOut adds a transaction output to the message."""
        self.txOut.append(to)

    def isCoinBase(self) -> bool:
        """
        A coinbase transaction has exactly one input, which spends the null
        outpoint.
        """
        if len(self.txIn) != 1:
            return False
        prevOut = self.txIn[0].previousOutPoint
        return prevOut.index == MaxPrevOutIndex and prevOut.hash.iszero()

    def hash(self) -> ByteArray:
        """
        hash generates the transaction identifier. Witness data is never
        part of the identifier.
        """
        enc = wire.ZcashEncoding if self.encoding == wire.ZcashEncoding else wire.BaseEncoding
        return crypto.doubleHashH(self.btcEncode(0, enc).bytes())

    def txid(self) -> str:
        return self.hash().rhex()

    def hasWitness(self) -> bool:
        """
        hasWitness returns False if none of the inputs within the transaction
        contain witness data, True otherwise.
        """
        return any(len(txIn.witness) != 0 for txIn in self.txIn)

    @staticmethod
    def btcDecode(b: ByteArray, pver: int, enc: int) -> "MsgTx":
        """
        btcDecode decodes b using the selected encoding, consuming the
        transaction's bytes from the front of b.

        Raises:
            MalformedError: if the bytes do not describe a transaction in the
                selected encoding.
        """
        version = b.pop(4).unLittle().int()
        if enc == wire.ZcashEncoding and version & OverwinterFlag:
            raise MalformedError(f"MsgTx.btcDecode: overwintered transaction version {version:#x} not supported")
        if version & OverwinterFlag:
            # Reference transactions carry a signed version.
            version -= 1 << 32

        tx = MsgTx(version=version, encoding=enc)

        count = wire.readVarInt(b, pver)

        # A count of zero (meaning no TxIn's to the uninitiated) means that the
        # value is a TxFlagMarker, and hence indicates the presence of a flag.
        flag = 0
        if count == TxFlagMarker and enc == wire.WitnessEncoding:
            flag = b.pop(1)[0]

            # At the moment, the flag MUST be WitnessFlag (0x01).
            if flag != WitnessFlag:
                raise MalformedError(f"MsgTx.btcDecode: witness tx but flag byte is {flag:#x}")

            count = wire.readVarInt(b, pver)

        if count > maxTxInPerMessage:
            raise MalformedError(
                f"MsgTx.btcDecode: too many input transactions to fit into max message size [count {count}, max {maxTxInPerMessage}]"
            )

        for _ in range(count):
            tx.addTxIn(readTxIn(b, pver, tx.version))

        count = wire.readVarInt(b, pver)

        if count > maxTxOutPerMessage:
            raise MalformedError(
                f"MsgTx.btcDecode: too many output transactions to fit into max message size [count {count}, max {maxTxOutPerMessage}]"
            )

        for _ in range(count):
            tx.addTxOut(readTxOut(b, pver, tx.version))

        # If the transaction's flag byte isn't 0x00 at this point, then one or
        # more of its inputs has accompanying witness data.
        if flag != 0:
            for txIn in tx.txIn:
                witCount = wire.readVarInt(b, pver)
                if witCount > maxWitnessItemsPerInput:
                    raise MalformedError(
                        f"too many witness items to fit into max message size [count {witCount}, max {maxWitnessItemsPerInput}]"
                    )
                for _ in range(witCount):
                    txIn.witness.append(
                        wire.readVarBytes(b, pver, maxWitnessItemSize, "script witness item")
                    )

        tx.lockTime = b.pop(4).unLittle().int()

        if enc == wire.ZcashEncoding and tx.version >= JoinSplitsVersion:
            count = wire.readVarInt(b, pver)
            if count > maxJoinSplitsPerMessage:
                raise MalformedError(
                    f"MsgTx.btcDecode: too many joinsplits to fit into max message size [count {count}, max {maxJoinSplitsPerMessage}]"
                )
            for _ in range(count):
                tx.joinSplits.append(JSDescription.btcDecode(b, pver))
            if count > 0:
                tx.joinSplitPubKey = b.pop(JoinSplitPubKeySize)
                tx.joinSplitSig = b.pop(JoinSplitSigSize)

        return tx

    @staticmethod
    def deserialize(b, enc=wire.WitnessEncoding):
        """
        Deserialize the MsgTx. Any bytes left over after the transaction are
        an error.
        """
        b = ByteArray(b)
        tx = MsgTx.btcDecode(b, 0, enc)
        if len(b):
            raise MalformedError(f"MsgTx.deserialize: {len(b)} unexpected trailing bytes")
        return tx

    def btcEncode(self, pver: int, enc: int) -> ByteArray:
        """
        btcEncode encodes the transaction using the selected encoding.
        """
        b = ByteArray(self.version % (1 << 32), length=4).littleEndian()

        doWitness = enc == wire.WitnessEncoding and self.hasWitness()
        if doWitness:
            b += TxFlagMarker
            b += WitnessFlag

        b += wire.writeVarInt(pver, len(self.txIn))
        for ti in self.txIn:
            b += writeTxIn(pver, self.version, ti)

        b += wire.writeVarInt(pver, len(self.txOut))
        for to in self.txOut:
            b += writeTxOut(pver, self.version, to)

        if doWitness:
            for ti in self.txIn:
                b += writeTxWitness(pver, self.version, ti.witness)

        b += ByteArray(self.lockTime, length=4).littleEndian()

        if enc == wire.ZcashEncoding and self.version >= JoinSplitsVersion:
            b += wire.writeVarInt(pver, len(self.joinSplits))
            for js in self.joinSplits:
                b += js.serialize()
            if self.joinSplits:
                b += ByteArray(self.joinSplitPubKey, length=JoinSplitPubKeySize)
                b += ByteArray(self.joinSplitSig, length=JoinSplitSigSize)

        return b

    def serialize(self) -> ByteArray:
        """
        serialize encodes the transaction in the encoding it was created with.
        """
        return self.btcEncode(0, self.encoding)


def readOutPoint(b: ByteArray, pver: int, version: int) -> OutPoint:
    """
    readOutPoint reads the next sequence of bytes from b as an OutPoint.
    """
    return OutPoint(txHash=b.pop(HASH_SIZE), idx=b.pop(4).unLittle().int())


def writeOutPoint(pver: int, version: int, op: OutPoint) -> ByteArray:
    return op.hash + ByteArray(op.index, length=4).littleEndian()


def readTxIn(b: ByteArray, pver: int, version: int) -> TxIn:
    """
    readTxIn reads and decodes the next sequence of bytes from b as a
    transaction input (TxIn).
    """
    return TxIn(
        previousOutPoint=readOutPoint(b, pver, version),
        signatureScript=wire.readVarBytes(
            b, pver, wire.MaxMessagePayload, "transaction input signature script"
        ),
        sequence=b.pop(4).unLittle().int(),
    )


def writeTxIn(pver: int, version: int, ti: TxIn) -> ByteArray:
    b = writeOutPoint(pver, version, ti.previousOutPoint)
    b += wire.writeVarBytes(pver, ti.signatureScript)
    return b + ByteArray(ti.sequence, length=4).littleEndian()


def readTxOut(b: ByteArray, pver: int, version: int) -> TxOut:
    """
    readTxOut reads the next sequence of bytes from b as a transaction output
    (TxOut).
    """
    return TxOut(
        value=b.pop(8).unLittle().int(),
        pkScript=wire.readVarBytes(
            b, pver, wire.MaxMessagePayload, "transaction output public key script"
        ),
    )


def writeTxOut(pver: int, version: int, to: TxOut) -> ByteArray:
    b = ByteArray(to.value, length=8).littleEndian()
    return b + wire.writeVarBytes(pver, to.pkScript)


def writeTxWitness(pver: int, version: int, wit: List[ByteArray]) -> ByteArray:
    b = wire.writeVarInt(pver, len(wit))
    for item in wit:
        b += wire.writeVarBytes(pver, item)
    return b
