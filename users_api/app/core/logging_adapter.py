"""
Thin logging adapter used by the service layer.

Services log through ``LoggerAdapter`` instead of a raw
``logging.Logger`` so that message templates and their arguments stay
observable: every record carries the unformatted template in
``message_template`` and the positional arguments in ``message_args``.
Templates use ``str.format`` positional placeholders (``{0}``, ``{1}``).
"""

import logging
from typing import Any


class LoggerAdapter:
    """Leveled logger accepting a message template and positional arguments."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def log_information(self, template: str, *args: Any) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        self._logger.info(
            template.format(*args),
            extra={"message_template": template, "message_args": args},
        )

    def log_error(self, error: BaseException, template: str, *args: Any) -> None:
        """Log ``template`` at ERROR level with ``error`` attached as exc_info."""
        if not self._logger.isEnabledFor(logging.ERROR):
            return
        self._logger.error(
            template.format(*args),
            exc_info=error,
            extra={"message_template": template, "message_args": args},
        )


def get_logger_adapter(name: str) -> LoggerAdapter:
    return LoggerAdapter(logging.getLogger(name))
