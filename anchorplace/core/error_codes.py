"""
Structured error codes for placement and run failures.
Use these keys in return values; map to user-facing messages in the UI.
"""

from __future__ import annotations

# Known error keys
INVALID_STRATEGY = "invalid_strategy"
INVALID_CASE = "invalid_case"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_STRATEGY: "Unknown placement strategy. Pick one of the listed strategies.",
    INVALID_CASE: "Case is missing parent, child or viewport values.",
}


class InvalidStrategyError(ValueError):
    """Raised when a strategy name is not one of the known placements."""

    error_key = INVALID_STRATEGY

    def __init__(self, name: object, valid_names: tuple[str, ...]) -> None:
        self.name = name
        self.valid_names = valid_names
        super().__init__(
            f"Unknown strategy {name!r}; expected one of: {', '.join(valid_names)}"
        )


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
