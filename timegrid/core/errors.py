class TimegridError(Exception):
    """Base class for errors raised by timegrid."""

    pass


class InvalidDateTimeError(TimegridError, ValueError):
    """Raised when a typed date and time cannot be combined into a valid moment (strict mode only)."""

    def __init__(self, value: str, reason: str = ""):
        self.value = value
        self.reason = reason
        msg = f"Invalid date/time {value!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
