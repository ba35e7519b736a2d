from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import requests

from ..core.constants import DEFAULT_GEMINI_MODEL, DEFAULT_GEMINI_TIMEOUT
from ..core.exceptions import EnhancementError, EnhancementUnavailableError

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "date": {"type": "STRING", "description": "The date of the record in YYYY-MM-DD format."},
            "suggestedStatus": {
                "type": "STRING",
                "description": "A more descriptive status like 'Full Day', 'Absent', 'Short Hours', 'Half Day'.",
            },
            "suggestedReason": {
                "type": "STRING",
                "description": "A concise, plausible reason for the status.",
            },
        },
        "required": ["date", "suggestedStatus", "suggestedReason"],
    },
}

PROMPT_TEMPLATE = """Act as an expert HR analyst. I will provide you with a list of daily attendance records for an employee named {employee}.
These records have been flagged for review. A standard workday is {full_day:g} hours.
Your task is to analyze each record and provide a more descriptive status and a concise, plausible reason for the attendance status.

- If work hours are very close to {full_day:g} (e.g., 7.8), consider it a 'Full Day'.
- If work hours are 0 on a workday, it's 'Absent'.
- If hours are >= {half_day:g} but below a full day, it's 'Short Hours'.
- If hours are > 0 and < {half_day:g}, it's 'Half Day'.

Review the following data:
{records}

Return your analysis ONLY as a JSON array that strictly adheres to the provided schema. Do not include any other text or explanations.
"""


@dataclass(frozen=True)
class Suggestion:
    date: str
    suggested_reason: str
    suggested_status: Optional[str] = None


class SuggestionClient(Protocol):
    def suggest(self, *, employee_name: str, records: Sequence[dict]) -> list[Suggestion]:
        raise NotImplementedError


def parse_suggestions(payload) -> list[Suggestion]:
    """Validate the JSON array returned by the model."""
    if not isinstance(payload, list):
        raise EnhancementError("AI response is not a list")
    out = []
    for item in payload:
        if not isinstance(item, dict) or not item.get("date") or not item.get("suggestedReason"):
            continue
        out.append(
            Suggestion(
                date=str(item["date"]).strip(),
                suggested_reason=str(item["suggestedReason"]).strip(),
                suggested_status=item.get("suggestedStatus"),
            )
        )
    return out


class GeminiSuggestionClient:
    """Ask Gemini for a plausible reason behind each flagged day."""

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = DEFAULT_GEMINI_MODEL,
        timeout: int = DEFAULT_GEMINI_TIMEOUT,
        full_day_hours: float = 8,
        half_day_hours: float = 4,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = (api_key or "").strip()
        self._model = model
        self._timeout = timeout
        self._full_day_hours = full_day_hours
        self._half_day_hours = half_day_hours
        self._session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def _prompt(self, employee_name: str, records: Sequence[dict]) -> str:
        return PROMPT_TEMPLATE.format(
            employee=employee_name,
            full_day=self._full_day_hours,
            half_day=self._half_day_hours,
            records=json.dumps(list(records), indent=2),
        )

    def suggest(self, *, employee_name: str, records: Sequence[dict]) -> list[Suggestion]:
        if not self.enabled:
            raise EnhancementUnavailableError("Gemini API key is not configured.")
        if not records:
            return []

        body = {
            "contents": [{"parts": [{"text": self._prompt(employee_name, records)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        try:
            response = self._session.post(
                GEMINI_URL.format(model=self._model),
                params={"key": self._api_key},
                json=body,
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
            return parse_suggestions(json.loads(text.strip()))
        except EnhancementError:
            raise
        except (requests.RequestException, KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Gemini request for %s failed: %s", employee_name, e)
            raise EnhancementError(
                "Failed to get analysis from Gemini AI. The model may be overloaded or the input is invalid."
            ) from e
