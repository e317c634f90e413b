# Copyright (c) Microsoft. All rights reserved.

import logging

from .exceptions import ChatOptionsException

LOGGER_NAME = "mistral_chat_options"
LOG_FORMAT = "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger for the chat options library.

    Args:
        name: The name of the logger, must live under the ``mistral_chat_options`` namespace.

    Returns:
        The logger.

    Raises:
        ChatOptionsException: If the name is outside the library namespace.
    """
    if not name.startswith(LOGGER_NAME):
        raise ChatOptionsException(f"Logger name must start with '{LOGGER_NAME}'.")
    return logging.getLogger(name)


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a stream handler with the library log format to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
