import logging
import sys
from typing import TextIO

# Libraries that log every page parsed or request sent at INFO/DEBUG.
_NOISY_LOGGERS = ("pdfminer", "pdfplumber", "httpx", "httpcore", "openai")


class Log:
    """Centralized logging for the docanalyst process."""

    _logger: logging.Logger = logging.getLogger("docanalyst")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level, attach one stream handler, and quiet third-party loggers.

        Calling this again only changes the level.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
            cls._logger.propagate = False
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(logging.WARNING, cls._logger.level))

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, *, exc_info: bool = False, **kwargs: object) -> None:
        """Log an error, with the active traceback when *exc_info* is set."""
        cls._logger.error(message, exc_info=exc_info, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
