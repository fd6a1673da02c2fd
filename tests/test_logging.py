import logging

from metrika.utils import logging as mlogging


def test_logger_name():
    assert mlogging.GetLogger().name == "metrika"


def test_helpers_emit(caplog):
    caplog.set_level(logging.DEBUG, logger="metrika")
    mlogging.Debug("debug message")
    mlogging.Info("info message")
    mlogging.Warn("warn message")
    mlogging.Error("error message")
    mlogging.Critical("critical message")
    levels = [record.levelno for record in caplog.records if record.name == "metrika"]
    assert levels == [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL]


def test_set_logging_level():
    logger = mlogging.GetLogger()
    previous = logger.level
    try:
        mlogging.SetLoggingLevel(logging.WARNING)
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)


def test_enable_console_logging_is_idempotent():
    logger = mlogging.GetLogger()
    previous_handlers = list(logger.handlers)
    previous_level = logger.level
    try:
        mlogging.EnableConsoleLogging(logging.INFO)
        mlogging.EnableConsoleLogging(logging.INFO)
        streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(streams) == 1
        assert logger.level == logging.INFO
    finally:
        logger.handlers = previous_handlers
        logger.setLevel(previous_level)
