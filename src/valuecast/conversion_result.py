"""Tagged success/error result shared by every converter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .exceptions import ConversionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a single conversion.

    Exactly one of ``error`` and ``value`` is populated: ``error`` holds a
    human-readable message on failure, ``value`` holds the converted value on success.
    """

    error: Optional[str] = None
    value: Any = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("ConversionResult cannot carry both an error and a value")
        if self.error is None and self.value is None:
            raise ValueError("ConversionResult requires either an error or a value")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the converted value, raising ConversionError on failure."""
        if self.error is not None:
            raise ConversionError(self.error)
        return self.value

    def as_dict(self) -> dict[str, Any]:
        return {"error": self.error, "value": self.value}


def format_result(error: Union[BaseException, str, None], value: Any = None) -> ConversionResult:
    """
    Wrap an error or a value into a ConversionResult.

    When an error is given the value is discarded.
    """
    if error is not None:
        message = str(error)
        logger.debug("Conversion failed: %s", message)
        return ConversionResult(error=message)
    return ConversionResult(value=value)


__all__ = ["ConversionResult", "format_result"]
