"""Options controlling glob expansion."""

from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from pathglob.core.constants import Limits
from pathglob.core.validators import ValidationError, validate_max_depth

ErrorSink = Callable[[str], None]


@dataclass
class GlobOptions:
    """Glob expansion behaviour.

    Attributes:
        ignore_case: Compare names case-insensitively
        directories_only: Only match directories
        max_depth: Levels a ``**`` wildcard may descend; negative is unlimited
        cache_compiled_matchers: Reuse compiled segment matchers process-wide
        throw_on_error: Re-raise filesystem errors instead of skipping the branch
        error_sink: Receives a formatted message for every filesystem error
    """

    ignore_case: bool = True
    directories_only: bool = False
    max_depth: int = Limits.UNLIMITED_DEPTH
    cache_compiled_matchers: bool = True
    throw_on_error: bool = False
    error_sink: Optional[ErrorSink] = field(default=None, compare=False)

    def validate(self) -> None:
        """Validate option values.

        Raises:
            ValidationError: If a value has the wrong type
        """
        for name in ("ignore_case", "directories_only", "cache_compiled_matchers", "throw_on_error"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValidationError(f"{name} must be boolean: {value!r}")

        validate_max_depth(self.max_depth)

        if self.error_sink is not None and not callable(self.error_sink):
            raise ValidationError(f"error_sink must be callable: {self.error_sink!r}")

    def copy(self, **changes) -> "GlobOptions":
        """Return a copy with some fields replaced."""
        return replace(self, **changes)
