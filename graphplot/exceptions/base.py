"""Base exception hierarchy for graphplot.

Every error carries a machine-readable ``code``, a human-readable
``message`` and an optional ``details`` mapping so that API layers can
serialize it without inspecting the exception type.
"""

from typing import Any, Dict, Optional


class GraphPlotError(Exception):
    """Root of all graphplot exceptions."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}

    def __str__(self) -> str:
        return self.message


class ValidationError(GraphPlotError):
    """Input failed validation."""

    pass


class ConfigurationError(GraphPlotError):
    """Environment or runtime configuration is invalid."""

    pass


class RegistryError(GraphPlotError):
    """A registry lookup failed."""

    pass
