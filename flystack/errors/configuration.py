"""Configuration error raised when merged parameters fail validation."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class ConfigurationError(ValueError):
    """Merged configuration contains invalid values."""

    def __init__(self, message: str, errors: Optional[list["ValidationError"]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
