import logging
import sys

BODY_EXCERPT_LIMIT = 500

# httpx and httpcore log every request at INFO; their chatter only helps when debugging.
_LIBRARY_LOGGERS = ("httpx", "httpcore")


class Log:
    """Centralized logging for the client, with a single stdout handler."""

    _logger: logging.Logger = logging.getLogger("domaincheck")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler.

        HTTP library loggers follow the same level at DEBUG and are held at
        WARNING otherwise.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        library_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in _LIBRARY_LOGGERS:
            logging.getLogger(name).setLevel(library_level)

    @staticmethod
    def excerpt(text: str, limit: int = BODY_EXCERPT_LIMIT) -> str:
        """Shorten a response body for logging, noting how much was cut."""
        if len(text) <= limit:
            return text
        return f"{text[:limit]}... [{len(text) - limit} more chars]"

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
