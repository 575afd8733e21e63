"""
Copyright (c) 2020, the Forknet developers
See LICENSE for details
"""

import pytest

from forknet import DecodeError, ForknetError, InvalidHexError, MalformedError
from forknet.util import encode
from forknet.util.encode import ByteArray


class TestEncode:
    def test_ByteArray(self):
        makeA = lambda: ByteArray([0, 0, 255])
        makeB = lambda: ByteArray([0, 255, 0])
        makeC = lambda: ByteArray([255, 0, 0])
        zero = ByteArray([0, 0, 0])

        assert ByteArray(0, length=3) == zero
        assert zero.iszero()
        assert not makeA().iszero()

        zero2 = ByteArray(zero)
        assert zero.b is not zero2.b
        assert zero == zero2

        zero2 = ByteArray(zero, copy=False)
        assert zero.b is zero2.b

        assert makeA() != makeB()
        assert makeA() != None  # noqa
        assert makeA() == bytearray([0, 0, 255])
        assert makeA() == "0000ff"

        a = makeA()
        assert a[2] == 255
        assert a[1:] == ByteArray([0, 255])
        assert a + makeB() == ByteArray([0, 0, 255, 0, 255, 0])
        assert a.int() == 255
        assert a.hex() == "0000ff"
        assert a.rhex() == "ff0000"
        assert reversed(a) == makeC()
        assert a.littleEndian() == makeC()
        assert a.unLittle().int() == 0xFF0000
        assert a.bytes() == b"\x00\x00\xff"
        assert repr(a) == "ByteArray(0000ff)"

        # Padding is on the left.
        assert ByteArray(1, length=4) == "00000001"
        assert ByteArray(1, length=4).littleEndian() == "01000000"
        with pytest.raises(ForknetError):
            ByteArray(0xFFFF, length=1)

        d = {makeA(): 1}
        assert d[ByteArray("0000ff")] == 1

    def test_pop(self):
        b = ByteArray("0102030405")
        assert b.pop(2) == "0102"
        assert b == "030405"
        assert b.pop(0) == ByteArray(b"")
        with pytest.raises(MalformedError):
            b.pop(4)
        # A failed pop leaves the buffer alone.
        assert b == "030405"
        assert b.pop(3) == "030405"
        assert len(b) == 0

    def test_copy(self):
        a = ByteArray("0102")
        b = a.copy()
        b.pop(1)
        assert a == "0102"
        assert b == "02"


def test_hexToBytes():
    assert encode.hexToBytes("") == bytearray()
    assert encode.hexToBytes("00ff") == bytearray([0, 255])
    assert encode.hexToBytes("00FF") == bytearray([0, 255])

    for s in ("0", "abc", "zz", "0g", "00 ff", "00  ff", "00ff\n\t", " 00ff ", "\u0660\u0661"):
        with pytest.raises(InvalidHexError):
            encode.hexToBytes(s)

    # The hex error is a decoding error.
    with pytest.raises(DecodeError):
        ByteArray("xyz1")


def test_intBytes():
    assert encode.intToBytes(0) == bytearray()
    assert encode.intToBytes(255) == bytearray([255])
    assert encode.intToBytes(256) == bytearray([1, 0])
    assert encode.intToBytes(-1, signed=True) == bytearray([255])
    assert encode.intFromBytes(b"\x01\x00") == 256
    assert encode.intFromBytes(b"\xff", signed=True) == -1


def test_rba():
    h = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
    ba = encode.rba(h)
    assert ba[0] == 0x6F
    assert ba.rhex() == h
