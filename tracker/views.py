"""Views for the tracker dashboard, history edits and the JSON snapshot."""

from __future__ import annotations

from typing import Any

from django.contrib import messages
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from analysis.predictions import pad_columns
from analysis.validation import RecordValidationError
from tracker.forms import DigitEditForm, HistoryConfirmForm, RecordEntryForm, RecordPickerForm, column_label
from tracker.services import current_analysis, edit_digit, reset_history, submit, truncate_history
from tracker.store import DEFAULT_KEEP


def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the entry form, analysis tables and history; accept new rolls."""

    entry_form = RecordEntryForm()
    picker_form = RecordPickerForm()

    if request.method == "POST":
        action = request.POST.get("action") or "submit"
        if action == "pick":
            picker_form = RecordPickerForm(request.POST)
            if picker_form.is_valid():
                return _submit_and_redirect(request, picker_form.digits())
        else:
            entry_form = RecordEntryForm(request.POST)
            if entry_form.is_valid():
                return _submit_and_redirect(request, entry_form.cleaned_data["digits"])

    return render(request, "tracker/dashboard.html", _dashboard_context(entry_form, picker_form))


def _submit_and_redirect(request: HttpRequest, digits: tuple[int, int, int]) -> HttpResponse:
    """Submit a validated triple and redirect back to the dashboard."""

    try:
        record = submit(digits)
    except RecordValidationError as exc:
        messages.error(request, str(exc))
    else:
        messages.success(request, f"Added {'-'.join(str(n) for n in record.numbers)}.")
    return redirect("tracker:dashboard")


def _dashboard_context(entry_form: RecordEntryForm, picker_form: RecordPickerForm) -> dict[str, Any]:
    """Build the template context from a fresh analysis snapshot."""

    analysis = current_analysis()
    return {
        "analysis": analysis,
        "entry_form": entry_form,
        "picker_form": picker_form,
        "truncate_form": HistoryConfirmForm(auto_id="truncate_%s"),
        "reset_form": HistoryConfirmForm(auto_id="reset_%s"),
        "backward_rows": pad_columns(analysis.backward_prediction.columns),
        "forward_rows": pad_columns(analysis.forward_prediction.columns),
        "histogram_rows": pad_columns(analysis.histogram),
        "keep": DEFAULT_KEEP,
    }


@require_POST
def edit_digit_view(request: HttpRequest, record_id: int, column: int) -> HttpResponse:
    """Replace one digit of one record."""

    form = DigitEditForm(request.POST)
    if not form.is_valid():
        for error in form.errors.get("value", []):
            messages.error(request, error)
        return redirect("tracker:dashboard")

    try:
        updated = edit_digit(record_id, column, form.cleaned_data["value"])
    except RecordValidationError as exc:
        messages.error(request, str(exc))
        return redirect("tracker:dashboard")

    if updated:
        messages.success(request, f"Updated {column_label(column)} of record {record_id}.")
    else:
        messages.warning(request, "Record not found.")
    return redirect("tracker:dashboard")


@require_POST
def truncate_history_view(request: HttpRequest) -> HttpResponse:
    """Keep only the newest records after explicit confirmation."""

    form = HistoryConfirmForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Confirm before deleting history.")
        return redirect("tracker:dashboard")

    removed = truncate_history(DEFAULT_KEEP)
    if removed:
        messages.success(request, f"Deleted {removed} older records; kept the newest {DEFAULT_KEEP}.")
    else:
        messages.info(request, f"Nothing to delete; history has {DEFAULT_KEEP} or fewer records.")
    return redirect("tracker:dashboard")


@require_POST
def reset_history_view(request: HttpRequest) -> HttpResponse:
    """Remove every record after explicit confirmation."""

    form = HistoryConfirmForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Confirm before resetting history.")
        return redirect("tracker:dashboard")

    removed = reset_history()
    messages.success(request, f"Reset history ({removed} records removed).")
    return redirect("tracker:dashboard")


@require_GET
def analysis_api(request: HttpRequest) -> JsonResponse:
    """Return the current analysis snapshot as JSON."""

    return JsonResponse(current_analysis().as_json())
