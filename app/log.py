# app/log.py
import logging

HANDLER_NAME = "employees"


def setup(level: str = "INFO"):
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    if any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        return

    formatter = logging.Formatter(fmt="employees %(process)d: %(levelname)s: %(name)s: %(message)s")

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
