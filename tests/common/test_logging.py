import logging

from ffmovie.common.logging import configure_logging, get_logger


def test_child_loggers_follow_configured_level():
    configure_logging("debug")
    child = get_logger("ffmovie.services.output.base")
    assert child.getEffectiveLevel() == logging.DEBUG
    configure_logging(logging.WARNING)
    assert child.getEffectiveLevel() == logging.WARNING


def test_explicit_level_wins():
    log = get_logger("ffmovie.test.explicit", logging.ERROR)
    assert log.level == logging.ERROR
