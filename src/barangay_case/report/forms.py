"""Intake form schema and validation.

These pydantic models are the boundary between whatever collects the form
(HTTP JSON, a CLI file, a UI) and the report pipeline. Validation failures are
turned into a flat ``{field path: message}`` mapping and never raised further.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

MIN_SUMMARY_LENGTH = 30
DEFAULT_CASE_TITLE = 'Complainant Case'

FIELD_MESSAGES = {
    'incident.summary': f'Please describe the incident in at least {MIN_SUMMARY_LENGTH} characters.',
    'incident.location': 'Please provide the location of the incident.',
    'incident.date_time': 'Please provide a valid date and time of the incident.',
    'incident': 'Incident details are required.',
    'date_received': 'Date received must be a valid date.',
}


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


class PartyInfo(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""

    @field_validator('name', 'phone', 'email', 'address', mode='before')
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def has_any(self) -> bool:
        return bool(self.name or self.phone or self.email or self.address)


class IncidentInfo(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    summary: str = Field(min_length=MIN_SUMMARY_LENGTH)
    location: str = Field(min_length=1)
    date_time: datetime

    @field_validator('summary', 'location', mode='before')
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator('date_time', mode='before')
    @classmethod
    def _blank_date_time(cls, v: Any) -> Any:
        return _blank_to_none(v)


class FormData(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    case_id: str = ""
    date_received: Optional[date] = None
    complainant: PartyInfo = Field(default_factory=PartyInfo)
    respondents: Tuple[PartyInfo, ...] = ()
    incident: IncidentInfo

    @field_validator('case_id', mode='before')
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator('date_received', mode='before')
    @classmethod
    def _blank_date(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator('respondents', mode='after')
    @classmethod
    def _drop_empty_respondents(cls, v: Tuple[PartyInfo, ...]) -> Tuple[PartyInfo, ...]:
        return tuple(p for p in v if p.has_any())

    @property
    def case_title(self) -> str:
        if self.complainant.name:
            return f'{self.complainant.name} Case'
        return DEFAULT_CASE_TITLE


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Collapse a pydantic ValidationError into one message per field path."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        path = '.'.join(str(p) for p in err.get('loc', ()))
        if path in errors:
            continue
        errors[path] = FIELD_MESSAGES.get(path, err.get('msg', 'Invalid value'))
    return errors


def validate_form(raw: Any) -> Tuple[Optional[FormData], Dict[str, str]]:
    """Validate raw form input. Returns (form, {}) or (None, field errors)."""
    if not isinstance(raw, dict):
        return None, {'__root__': 'Form data must be an object.'}
    try:
        return FormData(**raw), {}
    except ValidationError as ve:
        return None, field_errors(ve)
