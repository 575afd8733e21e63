"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details

Hashing used for block and transaction identity.
"""

import hashlib

from forknet.util.encode import ByteArray


HASH_SIZE = 32


def doubleHashB(b):
    """
    Double-SHA256 hash.

    Args:
        b (byte-like): The bytes to hash.

    Returns:
        bytes: The 32-byte digest.
    """
    return hashlib.sha256(hashlib.sha256(b).digest()).digest()


def doubleHashH(b):
    """
    The double-SHA256 hash as a ByteArray, in internal byte order.

    Args:
        b (byte-like): The thing to hash.

    Returns:
        ByteArray: The hash.
    """
    return ByteArray(doubleHashB(b))


def merkleRoot(hashes):
    """
    Compute the merkle root of the transaction hashes. An odd node at any
    level is paired with itself.

    Args:
        hashes (list(ByteArray)): The leaf hashes, in block order.

    Returns:
        ByteArray: The merkle root. Zero-valued if hashes is empty.
    """
    if not hashes:
        return ByteArray(0, length=HASH_SIZE)
    level = [h.bytes() for h in hashes]
    while len(level) > 1:
        if len(level) % 2:
            level.append(level[-1])
        level = [
            doubleHashB(level[i] + level[i + 1]) for i in range(0, len(level), 2)
        ]
    return ByteArray(level[0])
