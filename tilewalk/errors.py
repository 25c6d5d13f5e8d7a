"""Exception types and the tolerated-error policy at the collaborator seams."""

from __future__ import annotations

import logging
from typing import TypeAlias


class TilewalkError(Exception):
    """Base class for errors raised by tilewalk."""


class LayoutLoadError(TilewalkError, RuntimeError):
    """A layout definition could not be loaded or is malformed."""


# Errors the window or display service may raise that the navigator
# absorbs (logged, then replaced by a neutral result).
RecoverableErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_PROVIDER_ERRORS: RecoverableErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
    LookupError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated exception, keeping the traceback for debugging."""
    logger.log(level, message, *args, exc_info=True)
