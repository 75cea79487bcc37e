# logline/logger/structlog_config.py
"""
Structlog configuration module.

Routes structlog events into the stdlib loggers so they are filtered and
rendered by the same handler init_logger installed. Configure once at
application startup via configure_structlog().
"""
import os
import threading
from typing import Any, Dict, Optional
import structlog
from structlog.processors import CallsiteParameter
from structlog.typing import EventDict, WrappedLogger

from .formatter import CALLSITE_LINENO, CALLSITE_PATHNAME


class _StructlogState:
    """
    Thread-safe, process-safe singleton for structlog configuration state.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    _initialized: bool
    _newline: Optional[bool]
    _process_id: Optional[int]

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check locking
                    instance = super().__new__(cls)
                    instance._initialized = False
                    instance._newline = None
                    instance._process_id = None
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        """Check if configured in the CURRENT process."""
        return self._initialized and self._process_id == os.getpid()

    @property
    def newline(self) -> Optional[bool]:
        return self._newline

    def mark_configured(self, newline: bool) -> None:
        with self._lock:
            self._newline = newline
            self._process_id = os.getpid()
            self._initialized = True

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._newline = None
            self._process_id = None


_state = _StructlogState()


class MessageRenderer:
    """
    Render an event dict as `event key=value ...`.

    Level, timestamp and location are left to the stdlib formatter. The
    call site found by CallsiteParameterAdder travels in `extra`, so lines
    point at the caller even when the stdlib logger predates structlog's
    logger class.
    """

    def __init__(self, newline: bool = True) -> None:
        self._terminator = "\n" if newline else ""

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> Dict[str, Any]:
        extra: Dict[str, Any] = {}
        pathname = event_dict.pop(CallsiteParameter.PATHNAME.value, None)
        if pathname:
            extra[CALLSITE_PATHNAME] = pathname
        lineno = event_dict.pop(CallsiteParameter.LINENO.value, None)
        if lineno:
            extra[CALLSITE_LINENO] = lineno

        event = str(event_dict.pop("event", ""))
        stack = event_dict.pop("stack", None)
        exception = event_dict.pop("exception", None)
        pairs = " ".join(f"{key}={value!r}" for key, value in event_dict.items())

        rendered = f"{event} {pairs}" if pairs else event
        details = [str(text) for text in (stack, exception) if text]
        rendered = "\n".join([rendered, *details])
        return {"msg": f"{rendered}{self._terminator}", "extra": extra}


def configure_structlog(newline: bool = True) -> None:
    """
    Configure structlog to log through the stdlib handler.

    Args:
        newline: Append a line break to every event

    Raises:
        RuntimeError: If already configured in this process with other options
    """
    if _state.is_configured:
        # Idempotent - allow reconfiguration with same options
        if _state.newline == newline:
            return
        raise RuntimeError(
            f"structlog already configured in this process. "
            f"Current newline: {_state.newline}, attempted: {newline}"
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.CallsiteParameterAdder(
                [CallsiteParameter.PATHNAME, CallsiteParameter.LINENO]
            ),
            MessageRenderer(newline=newline),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _state.mark_configured(newline)


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger bound to the stdlib logger `name`.

    Args:
        name: Logger name, usually __name__
        **initial_values: Context bound to every event

    Raises:
        RuntimeError: If structlog hasn't been configured yet in this process
    """
    if not _state.is_configured:
        raise RuntimeError(
            "structlog not configured. "
            "Call configure_structlog() at application startup."
        )
    return structlog.get_logger(name, **initial_values)


def is_structlog_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return _state.is_configured


def reset_structlog() -> None:
    """Drop the structlog configuration. FOR TESTING ONLY."""
    structlog.reset_defaults()
    _state.reset()


__all__ = [
    "MessageRenderer",
    "configure_structlog",
    "get_logger",
    "is_structlog_configured",
    "reset_structlog",
]
