import json
import logging

logger = logging.getLogger("cdn_invalidator")
logger.setLevel(logging.INFO)


class StructuredLogger:
    """JSON log lines for CloudWatch Logs Insights."""

    @staticmethod
    def _emit(level: int, message: str, **kwargs) -> None:
        log_data = {"level": logging.getLevelName(level), "message": message, **kwargs}
        logger.log(level, json.dumps(log_data, default=str))

    @staticmethod
    def info(message: str, **kwargs) -> None:
        StructuredLogger._emit(logging.INFO, message, **kwargs)

    @staticmethod
    def error(message: str, exception: Exception = None, **kwargs) -> None:
        """Log error level with exception details."""
        if exception:
            kwargs["exception"] = str(exception)
            kwargs["exception_type"] = type(exception).__name__

        StructuredLogger._emit(logging.ERROR, message, **kwargs)

    @staticmethod
    def warning(message: str, **kwargs) -> None:
        StructuredLogger._emit(logging.WARNING, message, **kwargs)

    @staticmethod
    def debug(message: str, **kwargs) -> None:
        StructuredLogger._emit(logging.DEBUG, message, **kwargs)
