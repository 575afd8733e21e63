"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

ByteArray is the byte buffer shared by the wire codecs. Decoders consume it
from the front with pop.
"""

import re

from forknet import ForknetError, InvalidHexError, MalformedError


def intToBytes(i, signed=False):
    """
    Encodes an integer to the shortest big-endian byte string.

    Args:
        i (int): The integer.
        signed (bool): Whether to encode as a signed integer.

    Returns:
        bytearray: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return bytearray(i.to_bytes(length, byteorder="big", signed=signed))


def intFromBytes(b, signed=False):
    """
    Decodes a big-endian integer from bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def hexToBytes(s):
    """
    Decode a hexadecimal string. The whole string must be valid hex; nothing
    is silently dropped.

    Args:
        s (str): The hex string.

    Returns:
        bytearray: The decoded bytes.

    Raises:
        InvalidHexError: if s is not an even-length hexadecimal string.
    """
    if len(s) % 2:
        raise InvalidHexError(f"odd-length hex string ({len(s)} characters)")
    # bytearray.fromhex would skip whitespace.
    if not re.fullmatch("[0-9a-fA-F]*", s):
        raise InvalidHexError(f"invalid hex string: {s[:16]!r}...")
    return bytearray.fromhex(s)


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode to
            a bytearray. Strings are interpreted as hexadecimal. Integers are
            minimally encoded to an unsigned integer.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray([0])
    if isinstance(b, str):
        return hexToBytes(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray is a bytearray manager with conveniences for wire decoding. An
    integer argument to the constructor results in the shortest possible byte
    representation of the integer. To get a zero-padded ByteArray of length
    n, use the `length` keyword argument.
    """

    def __init__(self, b=b"", copy=True, length=None):
        if length:
            self.b = bytearray(length)
            v = decodeBA(b)
            if len(v) > length:
                raise ForknetError(f"value too long: {len(v)} > {length}")
            self.b[length - len(v) :] = v
        else:
            self.b = decodeBA(b, copy=copy)

    def __eq__(self, a):
        try:
            return bytearray.__eq__(self.b, decodeBA(a))
        except Exception:
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        """Append the bytes and return a new ByteArray."""
        return ByteArray(self.b + decodeBA(a))

    def __iadd__(self, a):
        return self.__add__(a)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __reversed__(self):
        return ByteArray(bytearray(reversed(self.b)))

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(bytes(self.b))

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def rhex(self):
        """
        A reversed hexadecimal string representation of the bytes. Hashes are
        displayed this way.

        Returns:
            str: The hex bytes.
        """
        return self.__reversed__().hex()

    def iszero(self):
        """
        True if all bytes are zero.
        """
        return all((v == 0 for v in self.b))

    def int(self):
        """The bytes as an integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)

    def unLittle(self):
        """A copy of the ByteArray, reversed."""
        return self.littleEndian()

    def littleEndian(self):
        """A copy of the ByteArray, reversed."""
        return ByteArray(reversed(self.b))

    def copy(self):
        """A copy of the ByteArray."""
        return ByteArray(self.b)

    def pop(self, n):
        """
        Remove n bytes from the beginning of the ByteArray, returning the bytes.

        Raises:
            MalformedError: if fewer than n bytes remain.
        """
        if n > len(self.b):
            raise MalformedError(f"unexpected end of data: need {n} bytes, have {len(self.b)}")
        b = self[:n]
        self.b = self.b[n:]
        return b


def rba(*a, **k):
    """
    Reversed ByteArray. All args and kwargs are passed to the ByteArray
    constructor. Used to turn display-order hash strings into internal byte
    order.
    """
    return reversed(ByteArray(*a, **k))
