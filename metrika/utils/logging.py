import logging

logger = logging.getLogger("metrika")
logger.addHandler(logging.NullHandler())


def GetLogger():
    return logger


def Warn(message):
    logger.warning(message)


def Info(message):
    logger.info(message)


def Debug(message):
    logger.debug(message)


def Error(message):
    logger.error(message)


def Critical(message):
    logger.critical(message)


def SetLoggingLevel(level):
    logger.setLevel(level)


def EnableConsoleLogging(level=logging.DEBUG):
    """Attaches a stream handler to the ``metrika`` logger, for scripts and examples.

    :param level: The level to log at. Defaults to ``logging.DEBUG``.
    :type level: int, optional
    """
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
