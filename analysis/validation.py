"""Input validation for dice-roll records.

Only two failure modes exist: the wrong number of digits, and a digit outside
[1, 6]. Both are raised as `RecordValidationError` subclasses so callers can
surface the message without treating it as an unexpected fault.
"""

from __future__ import annotations

import string
from collections.abc import Sequence

from .dto import COLUMN_COUNT, DIGIT_MAX, DIGIT_MIN


class RecordValidationError(ValueError):
    """Base class for user-facing record validation failures."""


class DigitCountError(RecordValidationError):
    """Raised when a submission does not contain exactly three digits."""

    def __init__(self, *, count: int) -> None:
        """Initialize the error.

        Args:
            count: Number of digits actually supplied.
        """

        super().__init__(f"Please enter exactly {COLUMN_COUNT} digits")
        self.count = count


class DigitRangeError(RecordValidationError):
    """Raised when a digit falls outside [1, 6]."""

    def __init__(self, message: str, *, value: object) -> None:
        super().__init__(message)
        self.value = value


SUBMIT_RANGE_MESSAGE = f"Each digit must be between {DIGIT_MIN} and {DIGIT_MAX}"
EDIT_RANGE_MESSAGE = f"Number must be between {DIGIT_MIN} and {DIGIT_MAX}"


def is_valid_digit(value: object) -> bool:
    """Return True when `value` is an int in [1, 6]."""

    return isinstance(value, int) and not isinstance(value, bool) and DIGIT_MIN <= value <= DIGIT_MAX


def parse_digits(raw: str | Sequence[int]) -> tuple[int, int, int]:
    """Parse a submission into a validated digit triple.

    Args:
        raw: Either free text such as `"123"` (anything other than ASCII
            0-9 is discarded) or a sequence of integers.

    Returns:
        A tuple of three digits, each in [1, 6].

    Raises:
        DigitCountError: When the input does not hold exactly three digits.
        DigitRangeError: When any digit falls outside [1, 6].
    """

    if isinstance(raw, str):
        digits = [int(ch) for ch in raw if ch in string.digits]
    else:
        digits = list(raw)

    if len(digits) != COLUMN_COUNT:
        raise DigitCountError(count=len(digits))

    for digit in digits:
        if not is_valid_digit(digit):
            raise DigitRangeError(SUBMIT_RANGE_MESSAGE, value=digit)

    first, second, third = digits
    return first, second, third


def parse_edit_value(raw: object) -> int:
    """Parse a single replacement digit for a cell edit.

    Args:
        raw: Submitted value; ints and integer strings are accepted.

    Returns:
        The digit as an int in [1, 6].

    Raises:
        DigitRangeError: When the value is not an integer in [1, 6].
    """

    value: object = raw
    if isinstance(raw, str):
        stripped = raw.strip()
        if not stripped or any(ch not in string.digits for ch in stripped):
            raise DigitRangeError(EDIT_RANGE_MESSAGE, value=raw)
        value = int(stripped)

    if not is_valid_digit(value):
        raise DigitRangeError(EDIT_RANGE_MESSAGE, value=raw)
    assert isinstance(value, int)
    return value
