"""Exception hierarchy for paneldash.

Lookups by unknown panel id never raise: the manager treats them as no-ops.
These exceptions cover the misuse that can be detected up front, at
registration or configuration time.

Exception Hierarchy:
    PaneldashError (base)
    ├── ConfigurationError - bad extents, bad shortcut specs
    └── InvalidPanelError - registering an object that is not a panel

Usage:
    from paneldash.exceptions import ConfigurationError

    if width < 0:
        raise ConfigurationError("Extent must be non-negative", setting="left_width", value=width)
"""

from typing import Any, Optional


class PaneldashError(Exception):
    """Base exception for all paneldash errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (ids, values)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(PaneldashError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


class InvalidPanelError(PaneldashError):
    """An object handed to the manager does not implement the panel protocol."""

    def __init__(
        self,
        message: str = "Object does not implement the panel protocol",
        *,
        panel_id: Optional[str] = None,
        **context: Any,
    ) -> None:
        if panel_id is not None:
            context["panel_id"] = panel_id
        super().__init__(message, **context)
