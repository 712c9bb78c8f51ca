"""
Exceptions for the indicator protocol.

Exception hierarchy:
- IndicatorError (base)
  - InvalidConfigurationError: init() on a configuration that fails validate()
  - UnknownParameterError: set() with a name the configuration does not know
  - ParseFailureError: set() with text that cannot become the parameter's type
"""

from __future__ import annotations

from typing import Any, Optional


class IndicatorError(Exception):
    """Base exception for all indicator errors."""

    def __init__(
        self,
        message: str,
        *,
        indicator: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.indicator = indicator
        self.details = dict(details or {})
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.args[0] if self.args else ""]
        if self.indicator:
            parts.append(f"[indicator={self.indicator}]")
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


class InvalidConfigurationError(IndicatorError):
    """Raised by init() when the configuration does not validate."""

    def __init__(
        self,
        message: str,
        *,
        params: Optional[dict[str, Any]] = None,
        indicator: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.params = dict(params or {})
        details = dict(details or {})
        if params:
            details["params"] = self.params
        super().__init__(message, indicator=indicator, details=details)


class UnknownParameterError(IndicatorError, KeyError):
    """Raised by set() when the parameter name is not recognized."""

    def __init__(
        self,
        message: str,
        *,
        parameter: str,
        indicator: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.parameter = parameter
        details = dict(details or {})
        details["parameter"] = parameter
        super().__init__(message, indicator=indicator, details=details)


class ParseFailureError(IndicatorError, ValueError):
    """Raised by set() when the text cannot be converted to the parameter type."""

    def __init__(
        self,
        message: str,
        *,
        parameter: str,
        value: str,
        expected: Optional[str] = None,
        indicator: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.expected = expected
        details = dict(details or {})
        details["parameter"] = parameter
        details["value"] = value
        if expected:
            details["expected"] = expected
        super().__init__(message, indicator=indicator, details=details)
