import logging
from typing import Any

logger = logging.getLogger(__name__)


class ZPipeError(Exception):
    """base class for everything zpipe raises on purpose."""
    pass


class PreconditionViolation(ZPipeError, ValueError):
    """a construction-time check failed. the offending values travel with it."""

    def __init__(self, message: str, **values: Any):
        self.values = values
        if values:
            details = ", ".join(f"{name}={value!r}" for name, value in values.items())
            message = f"{message} ({details})"
        super().__init__(message)


class ContractViolation(ZPipeError, IndexError):
    """current() or advance() was called on an exhausted enumerator."""
    pass


def require(condition: Any, message: str, **values: Any) -> None:
    """fail fast with a labelled PreconditionViolation when condition is falsy."""
    if condition:
        return
    error = PreconditionViolation(message, **values)
    logger.error(f"precondition failed: {error}")
    raise error


def exhausted(enum: Any, operation: str) -> ContractViolation:
    """build the error for touching an enumerator past its end."""
    return ContractViolation(f"{operation}() called on exhausted {type(enum).__name__}")
