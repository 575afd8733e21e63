"""
Copyright (c) 2020, the Forknet developers
See LICENSE for details
"""

import pytest

from forknet import ForknetError, MalformedError
from forknet.util.encode import ByteArray
from forknet.wire import msgtx, wire


def coinbaseTx113875():
    # First transaction from block 113875.
    msgTx = msgtx.MsgTx()
    msgTx.addTxIn(
        msgtx.TxIn(
            previousOutPoint=msgtx.OutPoint(txHash=ByteArray(length=32), idx=0xffffffff),
            signatureScript=ByteArray("0431dc001b0162"),
            sequence=0xffffffff,
        )
    )
    msgTx.addTxOut(
        msgtx.TxOut(
            value=5000000000,
            pkScript=ByteArray(
                "4104d64bdfd09eb1c5fe295abdeb1dca4281be988e2da0b6c1c6a59dc226c28624"
                "e18175e851c96b973d81b01cc31f047834bc06d6d6edf620d184241a6aed8b63a6"
                "ac"
            ),
        )
    )
    return msgTx


def test_txHash():
    """
    test_txHash tests the ability to generate the hash of a transaction accurately.
    """
    txid = "f051e59b5e2503ac626d03aaeac8ab7be2d72ba4b7e97119c5852d70d52dcb86"
    msgTx = coinbaseTx113875()
    assert msgTx.hash() == reversed(ByteArray(txid))
    assert msgTx.txid() == txid
    assert msgTx.isCoinBase()


def test_witnessTxHash():
    """
    The transaction identifier of a witness transaction excludes the witness.
    """
    txid = "0f167d1385a84d1518cfee208b653fc9163b605ccf1b75347e2850b3e2eb19f3"

    # From block 23157 in a past version of segnet.
    msgTx = msgtx.MsgTx()
    msgTx.addTxIn(
        msgtx.TxIn(
            previousOutPoint=msgtx.OutPoint(
                txHash=ByteArray("a53352d5135766f03076597418263da2d9c958315968fea823529467481ff9cd"),
                idx=19,
            ),
            witness=[
                ByteArray(  # 70-byte signature
                    "3043021f4d2381dc97f182abd8185f51753018523212f5ddc07cc4e63a8dc03658da190220608b5c4d92b86b6de7d78ef23a2fa735bcb59b914a48b0e187c5e7569a18197001",
                ),
                ByteArray(  # 33-byte serialize pub key
                    "0307ead084807eb76346df6977000c89392f45c76425b26181f521d7f370066a8f",
                ),
            ],
            sequence=0xffffffff,
        )
    )
    msgTx.addTxOut(
        msgtx.TxOut(
            value=395019,
            pkScript=ByteArray("00149ddac6f39d51e0398e532a22c41ba189406a8523"),
        )
    )
    assert msgTx.hasWitness()
    assert not msgTx.isCoinBase()
    assert msgTx.hash() == reversed(ByteArray(txid))

    # The witness survives a trip through the witness encoding, and is
    # dropped by the base encoding.
    b = msgTx.serialize()
    assert b[4:6] == ByteArray("0001")
    reTx = msgtx.MsgTx.deserialize(b)
    assert reTx == msgTx
    assert reTx.txIn[0].witness == msgTx.txIn[0].witness
    stripped = msgtx.MsgTx.deserialize(msgTx.btcEncode(0, wire.BaseEncoding), wire.BaseEncoding)
    assert stripped.txIn[0].witness == []
    assert stripped.hash() == msgTx.hash()


def test_emptyTx():
    noTx = msgtx.MsgTx(version=1)
    noTxEncoded = ByteArray([
        0x01, 0x00, 0x00, 0x00,  # Version
        0x00,                    # Varint for number of input transactions
        0x00,                    # Varint for number of output transactions
        0x00, 0x00, 0x00, 0x00,  # Lock time
    ])
    assert noTx.btcEncode(0, wire.BaseEncoding) == noTxEncoded
    assert msgtx.MsgTx.deserialize(noTxEncoded, wire.BaseEncoding) == noTx


def test_TxOverflowErrors():
    """
    Transactions crafted to use large values for the variable number of inputs
    and outputs, or script lengths, are rejected.
    """
    pver = 70001
    prevOut = "00" * 32 + "ffffffff"
    tests = [
        # ~uint64(0) inputs.
        ("too many inputs", "00000001" + "ff" * 9),
        # ~uint64(0) outputs.
        ("too many outputs", "00000001" + "00" + "ff" * 9),
        # An input with a signature script of ~uint64(0) length.
        ("sig script too long", "00000001" + "01" + prevOut + "ff" * 9),
        # An output with a public key script of ~uint64(0) length.
        (
            "pubkey script too long",
            "00000001" + "01" + prevOut + "00" + "ffffffff" + "01" + "00" * 8 + "ff" * 9,
        ),
    ]

    for name, enc in tests:
        b = ByteArray(enc)
        with pytest.raises(MalformedError):
            msgtx.MsgTx.btcDecode(b.copy(), pver, wire.BaseEncoding)

        with pytest.raises(ForknetError):
            msgtx.MsgTx.deserialize(b)


def test_truncatedAndTrailing():
    b = coinbaseTx113875().serialize()
    with pytest.raises(MalformedError):
        msgtx.MsgTx.deserialize(b[:-1])
    with pytest.raises(MalformedError):
        msgtx.MsgTx.deserialize(b + ByteArray("00"))


def makeJoinSplit(fill):
    h = lambda i: ByteArray(bytes([fill + i]) * 32)
    return msgtx.JSDescription(
        vpubOld=0,
        vpubNew=10000,
        anchor=h(0),
        nullifiers=[h(1), h(2)],
        commitments=[h(3), h(4)],
        ephemeralKey=h(5),
        randomSeed=h(6),
        macs=[h(7), h(8)],
        proof=ByteArray(bytes([fill]) * msgtx.PHGRProofSize),
        ciphertexts=[
            ByteArray(bytes([fill + 9]) * msgtx.NoteCiphertextSize),
            ByteArray(bytes([fill + 10]) * msgtx.NoteCiphertextSize),
        ],
    )


def test_zcashJoinSplits():
    tx = coinbaseTx113875()
    tx.version = 2
    tx.encoding = wire.ZcashEncoding
    tx.joinSplits = [makeJoinSplit(0x10), makeJoinSplit(0x40)]
    tx.joinSplitPubKey = ByteArray("ab" * msgtx.JoinSplitPubKeySize)
    tx.joinSplitSig = ByteArray("cd" * msgtx.JoinSplitSigSize)

    b = tx.serialize()
    refLen = len(coinbaseTx113875().serialize())
    assert len(b) == (
        refLen
        + 1  # joinsplit count
        + 2 * msgtx.minJSDescriptionPayload
        + msgtx.JoinSplitPubKeySize
        + msgtx.JoinSplitSigSize
    )

    reTx = msgtx.MsgTx.deserialize(b, wire.ZcashEncoding)
    assert reTx == tx
    assert reTx.joinSplits[1].vpubNew == 10000
    assert reTx.joinSplits[1].nullifiers[0] == ByteArray("41" * 32)
    assert reTx.hash() == tx.hash()
    # The joinsplits are part of the transaction identifier.
    assert tx.hash() != coinbaseTx113875().hash()

    # Under the reference encoding the joinsplits are trailing garbage.
    with pytest.raises(MalformedError):
        msgtx.MsgTx.deserialize(b, wire.WitnessEncoding)


def test_zcashVersion1():
    # Version 1 transactions have no joinsplit vector, even under the Zcash
    # encoding.
    tx = coinbaseTx113875()
    b = tx.btcEncode(0, wire.ZcashEncoding)
    assert b == tx.btcEncode(0, wire.BaseEncoding)
    reTx = msgtx.MsgTx.deserialize(b, wire.ZcashEncoding)
    assert reTx.joinSplits == []
    assert reTx.hash() == tx.hash()


def test_overwinterRejected():
    b = ByteArray("03000080") + ByteArray("00" * 6)
    with pytest.raises(MalformedError):
        msgtx.MsgTx.deserialize(b, wire.ZcashEncoding)
