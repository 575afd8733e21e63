"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Compact ("nBits") encoding of 256-bit proof-of-work targets. The high byte is
a base-256 exponent and the low 23 bits are the mantissa. Bit 23 is a sign
bit, which is why a mantissa with its top bit set is shifted into the next
exponent.
"""

from forknet import ForknetError


MaxTarget = (1 << 256) - 1

signBit = 0x00800000
mantissaMask = 0x007FFFFF


class Compact:
    """
    Compact wraps a uint32 compact-encoded target.
    """

    def __init__(self, bits):
        if not 0 <= bits <= 0xFFFFFFFF:
            raise ForknetError(f"compact value out of range: {bits}")
        self.bits = bits

    def __eq__(self, other):
        return isinstance(other, Compact) and self.bits == other.bits

    def __hash__(self):
        return hash(self.bits)

    def __repr__(self):
        return f"Compact({self.bits:#010x})"

    @staticmethod
    def fromInt(target):
        """
        Encode a non-negative integer target. Precision beyond the three most
        significant bytes is dropped.

        Args:
            target (int): The target, 0 <= target < 2**256.

        Returns:
            Compact: The encoded target.
        """
        if not 0 <= target <= MaxTarget:
            raise ForknetError(f"target out of range: {target:#x}")
        size = (target.bit_length() + 7) // 8
        if size <= 3:
            mantissa = target << (8 * (3 - size))
        else:
            mantissa = target >> (8 * (size - 3))
        if mantissa & signBit:
            mantissa >>= 8
            size += 1
        return Compact(mantissa | (size << 24))

    def toInt(self):
        """
        Decode to the integer target.

        Returns:
            int: The target.

        Raises:
            ForknetError: if the encoding is negative or does not fit in 256
                bits.
        """
        size = self.bits >> 24
        mantissa = self.bits & mantissaMask
        if mantissa != 0 and self.bits & signBit:
            raise ForknetError(f"negative compact target {self.bits:#010x}")
        if mantissa != 0 and (
            size > 34 or (mantissa > 0xFF and size > 33) or (mantissa > 0xFFFF and size > 32)
        ):
            raise ForknetError(f"compact target {self.bits:#010x} overflows 256 bits")
        if size <= 3:
            return mantissa >> (8 * (3 - size))
        return mantissa << (8 * (size - 3))

    @staticmethod
    def maxValue():
        """
        The compact encoding of the largest 256-bit target.
        """
        return Compact.fromInt(MaxTarget)
