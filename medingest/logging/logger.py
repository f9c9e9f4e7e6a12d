import logging
import sys
from typing import ClassVar, TextIO

LOGGER_NAME = "medingest"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Logging facade for the ingestion pipeline.

    Keyword arguments are rendered after the message as `key=value` pairs,
    so call sites can attach document ids, storage keys and the like without
    building the string themselves.
    """

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)
    _handler: ClassVar[logging.Handler | None] = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and route output to a single handler on `stream` (stdout by default).

        Calling it again replaces the handler installed by the previous call.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._handler is not None:
            cls._logger.removeHandler(cls._handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        cls._logger.addHandler(handler)
        cls._handler = handler

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log an info message."""
        cls._logger.info(cls._render(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log an error message."""
        cls._logger.error(cls._render(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a warning message."""
        cls._logger.warning(cls._render(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log a debug message."""
        cls._logger.debug(cls._render(message, context))

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log an error together with the active exception's traceback."""
        cls._logger.exception(cls._render(message, context))

    @staticmethod
    def _render(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        fields = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{fields}]"
