from datetime import datetime, timezone

import pytest

from barangay_case.categories import CaseCategory, Role
from barangay_case.mediation import generate_questions, strategize
from barangay_case.mediation.questions import QUESTION_GROUPS
from barangay_case.mediation.strategy import COMMON_OBJECTIVES, MEDIATION_GUIDANCE


def test_objectives_identical_across_categories():
    objectives = {strategize(c).objectives for c in CaseCategory}
    assert len(objectives) == 1
    only = objectives.pop()
    assert len(only) == 5
    assert only == COMMON_OBJECTIVES


def test_every_category_has_guidance():
    assert set(MEDIATION_GUIDANCE) == set(CaseCategory)


def test_theft_strategy():
    strategy = strategize(CaseCategory.THEFT)
    assert strategy.issues[0] == "Return of the allegedly stolen property or restitution of its value"
    assert strategy.not_for_mediation == (
        "Determination of criminal guilt for theft (requires court jurisdiction)",
    )
    assert len(strategy.outcomes) == 2


def test_strategy_is_deterministic():
    assert strategize(CaseCategory.INJURY) == strategize(CaseCategory.INJURY)


@pytest.mark.parametrize("category", list(CaseCategory))
@pytest.mark.parametrize("role", list(Role))
def test_three_questions_per_group(category, role):
    qs = generate_questions(category, role, "Purok 3", "2024-05-01T20:00")
    for group in QUESTION_GROUPS:
        assert len(getattr(qs, group)) == 3


def test_location_and_date_interpolated():
    qs = generate_questions(CaseCategory.THEFT, Role.COMPLAINANT, "Purok 3, San Pedro City", "2024-05-01T20:00")
    assert qs.open_ended[0] == (
        "Can you describe in your own words what happened at Purok 3, San Pedro City on 5/1/2024, 8:00:00 PM?"
    )
    assert qs.clarifying[1] == "Where exactly at Purok 3, San Pedro City did the interaction take place?"


def test_aware_datetime_is_shown_in_manila_time():
    dt = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    qs = generate_questions(CaseCategory.GENERAL, Role.RESPONDENT, "the plaza", dt)
    assert "on 5/1/2024, 8:00:00 PM?" in qs.open_ended[0]


def test_midnight_uses_twelve_hour_clock():
    qs = generate_questions(CaseCategory.GENERAL, Role.RESPONDENT, "the plaza", datetime(2024, 1, 2, 0, 5))
    assert "on 1/2/2024, 12:05:00 AM?" in qs.open_ended[0]


def test_missing_location_and_date():
    qs = generate_questions(CaseCategory.THREAT, Role.COMPLAINANT, "", None)
    assert qs.open_ended[0] == "Can you describe in your own words what happened at the location on ?"
    bad = generate_questions(CaseCategory.THREAT, Role.COMPLAINANT, None, "not a date")
    assert bad.open_ended[0] == qs.open_ended[0]


def test_role_and_category_do_not_change_wording():
    a = generate_questions(CaseCategory.THEFT, Role.COMPLAINANT, "Purok 1", "2024-05-01T20:00")
    b = generate_questions(CaseCategory.INJURY, Role.RESPONDENT, "Purok 1", "2024-05-01T20:00")
    assert a == b
