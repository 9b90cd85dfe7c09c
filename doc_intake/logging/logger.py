import logging
import sys
import uuid
from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("intake_request_id", default=None)


class Log:
    """Centralized logging for the intake service.

    Keyword arguments are rendered as ``key=value`` pairs after the message and
    the current request id, when one is bound, is appended to every line.
    """

    _logger: logging.Logger = logging.getLogger("doc_intake")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def bind_request(cls, request_id: str | None = None) -> str:
        """Bind a request id to the current context and return it."""
        request_id = request_id or uuid.uuid4().hex
        _request_id.set(request_id)
        return request_id

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._render(message, fields))

    @classmethod
    def exception(cls, message: str, **fields: object) -> None:
        """Log an error together with the active exception's traceback."""
        cls._logger.exception(cls._render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(cls._render(message, fields))

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        request_id = _request_id.get()
        if request_id:
            fields = {**fields, "request_id": request_id}
        if not fields:
            return message
        pairs = ", ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} [{pairs}]"
