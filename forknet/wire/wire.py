"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Constants and common routines for the bitcoin-family wire encoding.
"""

from forknet import MalformedError
from forknet.util.encode import ByteArray


# fmt: off
MaxUint16 = (1 << 16) - 1
MaxUint32 = (1 << 32) - 1
# fmt: on

# MaxMessagePayload is the maximum bytes a message can be regardless of other
# individual limits imposed by messages themselves.
MaxMessagePayload = 1024 * 1024 * 32  # 32MB

# MaxBlockPayload is the maximum bytes a block message can be in bytes.
# After Segregated Witness, the max block payload has been raised to 4MB.
MaxBlockPayload = 4000000

# Message encodings
# -----------------
# BaseEncoding encodes all messages in the default format specified
# for the Bitcoin wire protocol.
BaseEncoding = 1 << 0

# WitnessEncoding is BaseEncoding plus the BIP0144 transaction format with
# witness data.
WitnessEncoding = 1 << 1

# ZcashEncoding selects the Zcash block header, with its Equihash nonce and
# solution, and the Zcash sprout transaction format.
ZcashEncoding = 1 << 2


def writeVarInt(pver, val):
    """
    writeVarInt serializes val using a variable number of bytes depending
    on its value.

    Args:
        pver int: the protocol version.
        val int: the value to be serialized.
    """
    if val < 0xFD:
        return ByteArray(val, length=1)

    if val <= MaxUint16:
        return ByteArray(0xFD) + ByteArray(val, length=2).littleEndian()

    if val <= MaxUint32:
        return ByteArray(0xFE) + ByteArray(val, length=4).littleEndian()

    return ByteArray(0xFF) + ByteArray(val, length=8).littleEndian()


def writeVarBytes(pver, inBytes):
    """
    writeVarBytes serializes a variable length byte array as a var-int
    containing the number of bytes, followed by the bytes themselves.
    """
    return writeVarInt(pver, len(inBytes)) + inBytes


# discriminant -> (width, smallest value that needs the width)
_varIntWidths = {
    0xFF: (8, 0x100000000),
    0xFE: (4, 0x10000),
    0xFD: (2, 0xFD),
}


def readVarInt(b, pver):
    """
    readVarInt reads a variable length integer from b and returns it as an int.

    Args:
        b ByteArray: the encoded integer.
        pver int: the protocol version (unused).

    Raises:
        MalformedError: if the encoding is truncated or not canonical.
    """
    discriminant = b.pop(1).int()
    if discriminant not in _varIntWidths:
        return discriminant
    width, minRv = _varIntWidths[discriminant]
    rv = b.pop(width).unLittle().int()
    # The encoding is not canonical if the value could have been
    # encoded using fewer bytes.
    if rv < minRv:
        raise MalformedError(
            f"readVarInt: non-canonical varint {rv:#x} - discriminant {discriminant:#x} must encode a value >= {minRv:#x}"
        )
    return rv


def readVarBytes(b, pver, maxAllowed, fieldName):
    """
    readVarBytes reads a var-int length prefix followed by that many bytes.

    Args:
        b (ByteArray): The encoded bytes.
        pver (int): The protocol version.
        maxAllowed (int): The largest acceptable length.
        fieldName (str): Used for the error message.

    Raises:
        MalformedError: if the length exceeds maxAllowed or the data is short.
    """
    count = readVarInt(b, pver)
    if count > maxAllowed:
        raise MalformedError(
            f"readVarBytes: {fieldName} is larger than the max allowed size [count {count}, max {maxAllowed}]"
        )
    return b.pop(count)
