"""Forms for the tracker dashboard.

The dashboard offers two entry modes that produce the same triple:
- free text (`"123"`),
- click-to-select (one 1-6 choice per column).
"""

from __future__ import annotations

from django import forms

from analysis.dto import COLUMN_COUNT, DIGIT_MAX, DIGIT_MIN
from analysis.validation import RecordValidationError, parse_digits, parse_edit_value

DIGIT_CHOICES = tuple((str(value), str(value)) for value in range(DIGIT_MIN, DIGIT_MAX + 1))


class RecordEntryForm(forms.Form):
    """Validate a free-text three-digit roll."""

    digits = forms.CharField(
        label="3-Digit Number",
        max_length=16,
        widget=forms.TextInput(attrs={"placeholder": "123", "inputmode": "numeric", "autocomplete": "off"}),
        help_text="Example: 123 will become 1, 2, 3",
    )

    def clean_digits(self) -> tuple[int, int, int]:
        """Parse the input into a validated digit triple.

        Returns:
            The three digits, each in [1, 6].
        """

        raw = self.cleaned_data.get("digits") or ""
        try:
            return parse_digits(raw)
        except RecordValidationError as exc:
            raise forms.ValidationError(str(exc)) from exc


class RecordPickerForm(forms.Form):
    """Validate a roll entered by picking one value per column."""

    first = forms.TypedChoiceField(label="Num1", choices=DIGIT_CHOICES, coerce=int, widget=forms.RadioSelect)
    second = forms.TypedChoiceField(label="Num2", choices=DIGIT_CHOICES, coerce=int, widget=forms.RadioSelect)
    third = forms.TypedChoiceField(label="Num3", choices=DIGIT_CHOICES, coerce=int, widget=forms.RadioSelect)

    def digits(self) -> tuple[int, int, int]:
        """Return the picked triple (only valid after `is_valid()`)."""

        return parse_digits([self.cleaned_data["first"], self.cleaned_data["second"], self.cleaned_data["third"]])


class DigitEditForm(forms.Form):
    """Validate a replacement value for one cell of the history table."""

    value = forms.CharField(label="Value", max_length=4)

    def clean_value(self) -> int:
        """Parse the replacement digit.

        Returns:
            The digit as an int in [1, 6].
        """

        try:
            return parse_edit_value(self.cleaned_data.get("value") or "")
        except RecordValidationError as exc:
            raise forms.ValidationError(str(exc)) from exc


class HistoryConfirmForm(forms.Form):
    """Require explicit confirmation before destructive history actions."""

    confirm = forms.BooleanField(
        required=True,
        label="I understand this permanently removes records",
        error_messages={"required": "Confirm to continue."},
    )


def column_label(column_index: int) -> str:
    """Return the display label for a 0-based column index."""

    if not 0 <= column_index < COLUMN_COUNT:
        raise ValueError(f"column_index must be in [0, {COLUMN_COUNT - 1}]")
    return f"Num{column_index + 1}"
