"""Logging configuration shared by the app entry point."""
import logging

_LOGGER_CONFIGURED = False


def setup_logging(level="INFO"):
    """控制台日志，只配置一次"""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True
