"""
Custom exceptions for gematrix.

All exceptions inherit from GematrixError so callers can catch library errors in one place.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

class GematrixError(Exception):
    """Base exception for all gematrix errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

class UnknownMethodError(GematrixError, ValueError):
    """Raised when a calculation method name cannot be resolved."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available: List[str] = list(available)
        ctx: Dict[str, Any] = {}
        if self.available:
            ctx["available"] = "|".join(self.available)
        super().__init__(f"Unknown gematria method: {name!r}", ctx)

class ConfigurationError(GematrixError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name

class SourceError(GematrixError):
    """Raised when a text source cannot be read or has an unsupported shape."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        ctx: Dict[str, Any] = {}
        if path:
            ctx["path"] = path
        super().__init__(message, ctx)
        self.path = path
