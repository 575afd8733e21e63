"""
Copyright (c) 2020, The Forknet developers
See LICENSE for details.

Parameters of the consensus forks that differ from the reference chain. Every
table is keyed by network kind. A missing key means the fork uses the
reference chain's value for that network.
"""

from . import bitcoincash, zcash  # noqa: F401
