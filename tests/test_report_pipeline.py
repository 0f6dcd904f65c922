from datetime import date, datetime

from barangay_case.categories import CaseCategory, Role
from barangay_case.knowledge_base import lookup
from barangay_case.mediation import generate_questions, strategize
from barangay_case.report import (
    PartyQuestions,
    ReportState,
    assemble,
    generate_report,
    validate_form,
)

CARABAO_FORM = {
    "case_id": "BRGY-2024-001",
    "date_received": "2024-05-02",
    "complainant": {"name": "  Juan Dela Cruz ", "phone": "0917 000 0000"},
    "respondents": [
        {"name": "Pedro Santos", "address": "Purok 4"},
        {"name": "", "phone": "  ", "email": "", "address": ""},
    ],
    "incident": {
        "summary": "Someone took my neighbor's carabao while I was sleeping",
        "location": "Purok 3, San Pedro City",
        "date_time": "2024-05-01T20:00",
    },
}


class RecordingRenderer:
    def __init__(self):
        self.rendered = []

    def render(self, report):
        self.rendered.append(report)


def test_end_to_end_carabao_theft():
    renderer = RecordingRenderer()
    result = generate_report(CARABAO_FORM, renderer=renderer)
    assert result.state is ReportState.RENDERED
    assert result.ok
    report = result.report
    assert report.category is CaseCategory.THEFT
    assert report.analysis.nature == "Theft / Qualified Theft"
    assert "Return of the allegedly stolen property or restitution of its value" in report.mediation.issues
    first = report.questions.complainant.open_ended[0]
    assert "Purok 3, San Pedro City" in first
    assert "5/1/2024, 8:00:00 PM" in first
    assert renderer.rendered == [report]


def test_form_fields_are_copied_and_normalised():
    report = generate_report(CARABAO_FORM).report
    assert report.case_id == "BRGY-2024-001"
    assert report.date_received == date(2024, 5, 2)
    assert report.complainant.name == "Juan Dela Cruz"
    assert report.case_title == "Juan Dela Cruz Case"
    # blank respondent rows are dropped
    assert [r.name for r in report.respondents] == ["Pedro Santos"]
    assert report.incident.date_time == datetime(2024, 5, 1, 20, 0)


def test_default_case_title_without_complainant_name():
    form = dict(CARABAO_FORM, complainant={})
    assert generate_report(form).report.case_title == "Complainant Case"


def test_short_summary_blocks_report():
    form = dict(CARABAO_FORM, incident=dict(CARABAO_FORM["incident"], summary="x" * 29))
    renderer = RecordingRenderer()
    result = generate_report(form, renderer=renderer)
    assert result.state is ReportState.IDLE
    assert result.report is None
    assert "incident.summary" in result.errors
    assert renderer.rendered == []


def test_summary_length_counts_trimmed_text():
    padded = "   " + "a" * 29 + "   "
    form = dict(CARABAO_FORM, incident=dict(CARABAO_FORM["incident"], summary=padded))
    assert "incident.summary" in validate_form(form)[1]
    form = dict(CARABAO_FORM, incident=dict(CARABAO_FORM["incident"], summary="a" * 30))
    assert validate_form(form)[1] == {}


def test_long_narrative_and_location_are_accepted():
    incident = dict(
        CARABAO_FORM["incident"],
        summary="Someone took my carabao. " * 300,
        location="Sitio Malinis, " * 40,
    )
    result = generate_report(dict(CARABAO_FORM, incident=incident))
    assert result.state is ReportState.RENDERED
    assert result.errors == {}
    assert result.report.category is CaseCategory.THEFT
    assert len(result.report.incident.summary) > 7000


def test_all_incident_fields_reported():
    form, errors = validate_form({"incident": {"summary": "", "location": "  ", "date_time": "yesterday"}})
    assert form is None
    assert set(errors) == {"incident.summary", "incident.location", "incident.date_time"}


def test_missing_incident_and_non_dict_input():
    assert "incident" in validate_form({})[1]
    assert validate_form(["not", "a", "form"])[0] is None


def test_assemble_is_idempotent():
    form, _ = validate_form(CARABAO_FORM)
    category = CaseCategory.THEFT
    incident = form.incident

    def build():
        questions = PartyQuestions(
            complainant=generate_questions(category, Role.COMPLAINANT, incident.location, incident.date_time),
            respondent=generate_questions(category, Role.RESPONDENT, incident.location, incident.date_time),
        )
        return assemble(form, category, lookup(category), strategize(category), questions)

    first, second = build(), build()
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_general_case_report():
    form = dict(CARABAO_FORM, incident=dict(
        CARABAO_FORM["incident"], summary="The karaoke next door plays until three in the morning",
    ))
    report = generate_report(form).report
    assert report.category is CaseCategory.GENERAL
    assert report.analysis.jurisprudence == ()
    assert report.mediation.outcomes[0] == "Amicable settlement documented with the Lupong Tagapamayapa"


def test_report_serialises_to_json_types():
    data = generate_report(CARABAO_FORM).report.to_dict()
    assert data["category"] == "theft"
    assert data["incident"]["date_time"] == "2024-05-01T20:00:00"
    assert data["date_received"] == "2024-05-02"
    assert len(data["questions"]["respondent"]["conscience"]) == 3
