"""
Frequency Data Errors

Raised when the frequency reference cannot be loaded or fails validation.
These are the only errors the analysis pipeline lets escape to callers.
"""


class FrequencyDataError(Exception):
    """Frequency table could not be loaded or is malformed."""


class DuplicatePinError(FrequencyDataError):
    """The same PIN appeared on more than one accepted row."""

    def __init__(self, pin: str):
        self.pin = pin
        super().__init__(f"Duplicate PIN found: {pin}")


class IncompleteTableError(FrequencyDataError):
    """Accepted rows do not cover every 4-digit PIN."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} PINs, got {actual}")
