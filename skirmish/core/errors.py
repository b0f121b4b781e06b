"""Exception taxonomy for the battle simulation.

Every failure here is a caller error: nothing is transient and nothing is retried.
"""

from typing import Optional


class BattleError(Exception):
    """Base class for all battle simulation errors."""


class InvalidArgumentError(BattleError, ValueError):
    """Raised when a required argument is missing or outside its valid range."""

    def __init__(self, param_name: str, message: Optional[str] = None):
        self.param_name = param_name
        detail = message or "Value is required"
        super().__init__(f"Invalid argument '{param_name}': {detail}")


class InvalidStateError(BattleError, RuntimeError):
    """Raised when an operation is not allowed in the current battle state."""


class ConfigurationError(BattleError):
    """Raised when configuration or template data cannot be loaded."""
