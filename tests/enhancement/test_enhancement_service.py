from __future__ import annotations

import json
from datetime import date

import pytest
import requests

from src.attendance_reconciler.attendance_reconciler.core.enums import AttendanceStatus
from src.attendance_reconciler.attendance_reconciler.core.exceptions import (
    EnhancementError,
    EnhancementUnavailableError,
    RecordNotFoundError,
)
from src.attendance_reconciler.attendance_reconciler.enhancement.client import (
    GeminiSuggestionClient,
    Suggestion,
    parse_suggestions,
)
from src.attendance_reconciler.attendance_reconciler.enhancement.service import EnhancementService, flagged_records


class FakeClient:
    def __init__(self, suggestions=None, error: Exception | None = None):
        self._suggestions = suggestions or {}
        self._error = error
        self.calls = []

    def suggest(self, *, employee_name, records):
        self.calls.append((employee_name, list(records)))
        if self._error:
            raise self._error
        return [Suggestion(date=r["date"], suggested_reason=self._suggestions.get((employee_name, r["date"]), "Left early"))
                for r in records]


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.last_request = None

    def post(self, url, **kwargs):
        self.last_request = {"url": url, **kwargs}
        if self._error:
            raise self._error
        return self._response


def test_only_flagged_days_are_sent(loaded_service):
    sam = loaded_service.get_employee("Sam")
    records = flagged_records(sam.days)

    # Jan 2 absent, Jan 3 short hours, Jan 6 absent; Jan 1 is work on holiday
    assert [r["date"] for r in records] == ["2025-01-02", "2025-01-03", "2025-01-06"]
    assert records[1] == {"date": "2025-01-03", "status": "Short Hours", "workHours": "5.00"}


def test_suggestions_are_merged_per_employee(loaded_service):
    client = FakeClient({("Dolly", "2025-01-03"): "No check-in record found"})
    result = EnhancementService(loaded_service, client).enhance()

    assert [name for name, _ in client.calls] == ["Dolly", "Sam"]
    assert result.updated_days == 5

    dolly_jan3 = loaded_service.get_employee("Dolly").get_day(date(2025, 1, 3))
    assert dolly_jan3.reason == "No check-in record found"
    assert dolly_jan3.is_ai_enhanced is True
    assert dolly_jan3.status == AttendanceStatus.ABSENT

    present = loaded_service.get_employee("Dolly").get_day(date(2025, 1, 2))
    assert present.reason == ""
    assert present.is_ai_enhanced is False


def test_human_edit_clears_ai_flag(loaded_service):
    EnhancementService(loaded_service, FakeClient()).enhance()

    day = loaded_service.edit_day(employee_name="Sam", work_date=date(2025, 1, 6), reason="Doctor")
    assert day.is_ai_enhanced is False


def test_collaborator_failure_leaves_dataset_untouched(loaded_service):
    before = loaded_service.snapshot()
    client = FakeClient(error=EnhancementError("boom"))

    with pytest.raises(EnhancementError):
        EnhancementService(loaded_service, client).enhance()

    assert loaded_service.snapshot() == before


def test_enhance_requires_loaded_file(attendance_service):
    with pytest.raises(RecordNotFoundError):
        EnhancementService(attendance_service, FakeClient()).enhance()


def test_client_without_key_is_unavailable():
    client = GeminiSuggestionClient("")

    assert client.enabled is False
    with pytest.raises(EnhancementUnavailableError):
        client.suggest(employee_name="Dolly", records=[{"date": "2025-01-03"}])


def test_client_posts_prompt_and_parses_answer():
    answer = [{"date": "2025-01-03", "suggestedStatus": "Absent", "suggestedReason": "No check-in record found"}]
    session = FakeSession(FakeResponse({"candidates": [{"content": {"parts": [{"text": json.dumps(answer)}]}}]}))
    client = GeminiSuggestionClient("key-123", model="gemini-test", session=session)

    records = [{"date": "2025-01-03", "status": "Absent", "workHours": "0.00"}]
    suggestions = client.suggest(employee_name="Dolly", records=records)

    assert suggestions == [
        Suggestion(date="2025-01-03", suggested_reason="No check-in record found", suggested_status="Absent")
    ]
    req = session.last_request
    assert req["url"].endswith("/models/gemini-test:generateContent")
    assert req["params"] == {"key": "key-123"}
    prompt = req["json"]["contents"][0]["parts"][0]["text"]
    assert "Dolly" in prompt
    assert "2025-01-03" in prompt
    assert req["json"]["generationConfig"]["responseMimeType"] == "application/json"


def test_client_empty_records_skip_the_call():
    session = FakeSession(error=AssertionError("should not be called"))
    assert GeminiSuggestionClient("key", session=session).suggest(employee_name="Dolly", records=[]) == []


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("down")),
        FakeSession(FakeResponse({}, status_code=503)),
        FakeSession(FakeResponse({"candidates": []})),
        FakeSession(FakeResponse({"candidates": [{"content": {"parts": [{"text": "not json"}]}}]})),
        FakeSession(FakeResponse({"candidates": [{"content": {"parts": [{"text": "{}"}]}}]})),
    ],
)
def test_client_failures_become_enhancement_errors(session):
    client = GeminiSuggestionClient("key", session=session)
    with pytest.raises(EnhancementError):
        client.suggest(employee_name="Dolly", records=[{"date": "2025-01-03"}])


def test_parse_suggestions_drops_incomplete_items():
    parsed = parse_suggestions([{"date": "2025-01-03"}, {"date": "2025-01-06", "suggestedReason": " Left early "}, "x"])
    assert parsed == [Suggestion(date="2025-01-06", suggested_reason="Left early", suggested_status=None)]
