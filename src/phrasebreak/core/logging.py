"""Adapter from the stdlib ``logging`` module to the ``Logger`` protocol."""

import logging
from typing import Any


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="{asctime} {levelname} {name} {message}",
        style="{",
    )
    return logging.getLogger(name)


class StdLogger:
    """Structured ``Logger`` implementation that forwards to a stdlib logger."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @staticmethod
    def _format(msg: str, kv: dict) -> str:
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        return f"{msg} {details}" if details else msg

    def debug(self, msg: str, **kv: Any) -> None:
        self._logger.debug(self._format(msg, kv))

    def info(self, msg: str, **kv: Any) -> None:
        self._logger.info(self._format(msg, kv))

    def warn(self, msg: str, **kv: Any) -> None:
        self._logger.warning(self._format(msg, kv))

    def error(self, msg: str, **kv: Any) -> None:
        self._logger.error(self._format(msg, kv))
