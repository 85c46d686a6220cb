"""
Exception hierarchy for the creational examples.

Every error raised by a creator derives from CreationalError, which carries a
technical message, structured details and a context block, and logs itself
when constructed.
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """
    Contextual information for error handling.

    Records which example and which creator were involved when an error was
    raised.
    """

    example: str | None = None
    creator: str | None = None
    product: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "example": self.example,
            "creator": self.creator,
            "product": self.product,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


class CreationalError(Exception):
    """
    Base exception for all creational example errors.

    Provides structured error handling with context and metadata
    for proper error categorization and debugging.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a creational error.

        Args:
            message: Technical error message
            context: Error context information
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.details = details or {}
        self.timestamp = datetime.now()

        self._log_error()

    def _log_error(self) -> None:
        """Log the error with structured context."""
        logger.error(
            "Creational error occurred",
            error_type=self.__class__.__name__,
            message=self.message,
            context=self.context.to_dict(),
            details=self.details,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context.to_dict(),
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidShapeError(CreationalError, ValueError):
    """Shape dimensions that cannot describe a valid shape."""

    def __init__(self, message: str, context: ErrorContext | None = None, shape: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.shape = shape
        if shape:
            self.details["shape"] = shape


class UnknownObjectTypeError(CreationalError):
    """A factory was asked for a product/arity combination it does not make."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        object_type: str | None = None,
        arity: int | None = None,
        **kwargs,
    ):
        super().__init__(message, context, **kwargs)
        self.object_type = object_type
        self.arity = arity
        if object_type:
            self.details["object_type"] = object_type
        if arity is not None:
            self.details["arity"] = arity


class UnknownFamilyError(CreationalError, ValueError):
    """No concrete factory exists for the requested product family."""

    def __init__(self, message: str, context: ErrorContext | None = None, family: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.family = family
        if family:
            self.details["family"] = family


class InvalidDiceError(CreationalError, ValueError):
    """Dice parameters outside the supported range."""

    def __init__(self, message: str, context: ErrorContext | None = None, quantity: int = 0, sides: int = 0, **kwargs):
        super().__init__(message, context, **kwargs)
        self.quantity = quantity
        self.sides = sides
        self.details["quantity"] = quantity
        self.details["sides"] = sides


class BuilderStateError(CreationalError):
    """A builder was asked for its product before the product was complete."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        builder: str | None = None,
        missing: list[str] | None = None,
        **kwargs,
    ):
        super().__init__(message, context, **kwargs)
        self.builder = builder
        self.missing = list(missing or [])
        if builder:
            self.details["builder"] = builder
        if self.missing:
            self.details["missing"] = self.missing


def create_error_context(**kwargs) -> ErrorContext:
    """
    Create an error context with the given parameters.

    Args:
        **kwargs: Context parameters

    Returns:
        ErrorContext object
    """
    return ErrorContext(**kwargs)


def handle_exception(exc: Exception, context: ErrorContext | None = None) -> CreationalError:
    """
    Convert a generic exception to a creational error.

    Args:
        exc: The original exception
        context: Error context

    Returns:
        CreationalError instance
    """
    if isinstance(exc, CreationalError):
        return exc

    if isinstance(exc, ValueError | TypeError):
        return CreationalError(str(exc), context, details={"original_type": type(exc).__name__})
    return CreationalError(
        str(exc), context, details={"original_type": type(exc).__name__, "traceback": traceback.format_exc()}
    )
