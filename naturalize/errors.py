"""Domain exceptions for naturalization diagnostics."""

from __future__ import annotations


class NaturalizeError(ValueError):
    """Raised when a value cannot be naturalized."""

    def __init__(
        self,
        *,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a naturalization error with an optional remediation hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint
