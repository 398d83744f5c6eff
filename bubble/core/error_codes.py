"""
Structured error codes for invalid bubble input.
Use these keys on raised errors; map to user-facing messages in callers.
"""

# Known error keys (carried by InvalidArgumentError.error_key)
INVALID_POSITION_RATIO = "invalid_position_ratio"
MISSING_DIRECTION = "missing_direction"
INVALID_RECT = "invalid_rect"
INVALID_SCALE = "invalid_scale"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_POSITION_RATIO: "Arrow position ratio must be between 0.0 and 1.0.",
    MISSING_DIRECTION: "Arrow direction must be one of left, top, right, bottom.",
    INVALID_RECT: "Bubble width and height must not be negative.",
    INVALID_SCALE: "Scale factor must not be negative.",
}


class InvalidArgumentError(ValueError):
    """Bubble input rejected before any geometry is computed."""

    def __init__(self, error_key: str, detail: str = "") -> None:
        self.error_key = error_key
        message = user_message(error_key)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
