"""
Copyright (c) 2020, the Forknet developers
See LICENSE for details
"""

import logging

from forknet.util import helpers


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.name == "forknet.1"
    assert logger.getEffectiveLevel() == logging.INFO

    logger.info("something")
    assert path.is_file()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.ERROR, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.ERROR
    assert helpers.getLogger("4").getEffectiveLevel() == logging.INFO


def test_readINI(tmp_path):
    path = tmp_path / "forknet.conf"
    path.write_text(
        "network = testnet\n"
        "ignored = 1\n"
        "[more]\n"
        "fork = zec\n"
    )
    assert helpers.readINI(path, ("network", "fork", "magic")) == {
        "network": "testnet",
        "fork": "zec",
    }
    assert helpers.readINI(path, ()) == {}
