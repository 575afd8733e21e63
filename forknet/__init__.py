"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details
"""


class ForknetError(Exception):
    pass


class DecodeError(ForknetError):
    """
    An embedded constant could not be decoded. Either kind of DecodeError
    indicates a defect in the constants shipped with the package.
    """

    pass


class InvalidHexError(DecodeError):
    pass


class MalformedError(DecodeError):
    pass


class UnsupportedCombinationError(ForknetError):
    """
    There is no known value for the requested network and consensus fork.
    """

    pass
