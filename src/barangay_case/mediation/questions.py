"""Strategic mediation questions for each party.

Every question set holds exactly three questions in each of five groups.
Only the first open-ended question and the second clarifying question are
personalised (incident location and date/time). Wording is currently the same
for both roles and for every case category; both are accepted so that
tailored wording can be added without touching callers.
"""
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from barangay_case.categories import CaseCategory, Role
from barangay_case.utils.formatting import DateTimeLike, format_datetime

LOCATION_PLACEHOLDER = 'the location'

QUESTION_GROUPS = ('open_ended', 'clarifying', 'reflective', 'exploratory', 'conscience')

QUESTION_GROUP_LABELS = {
    'open_ended': 'Open‑Ended Questions',
    'clarifying': 'Clarifying Questions',
    'reflective': 'Reflective Questions',
    'exploratory': 'Exploratory Questions',
    'conscience': 'Questions Appealing to Conscience',
}


class QuestionSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    open_ended: Tuple[str, ...]
    clarifying: Tuple[str, ...]
    reflective: Tuple[str, ...]
    exploratory: Tuple[str, ...]
    conscience: Tuple[str, ...]


def generate_questions(
    category: CaseCategory,
    role: Role,
    location: Optional[str],
    date_time: DateTimeLike,
) -> QuestionSet:
    loc = location or LOCATION_PLACEHOLDER
    dt = format_datetime(date_time)
    return QuestionSet(
        open_ended=(
            f'Can you describe in your own words what happened at {loc} on {dt}?',
            'What events led up to the incident and how did you react?',
            'How has this incident affected you personally and your daily life?',
        ),
        clarifying=(
            'What time did the incident occur and who else was present?',
            f'Where exactly at {loc} did the interaction take place?',
            'Can you specify any statements or actions you find particularly significant?',
        ),
        reflective=(
            'How do you think the other party felt during the incident?',
            'Looking back, is there anything you wish had been done differently?',
            'How has this dispute impacted your relationship with the other party?',
        ),
        exploratory=(
            'What do you consider a fair and just resolution to this dispute?',
            'Are there any compromises you are willing to make to settle this matter?',
            'What would rebuilding trust look like for you?',
        ),
        conscience=(
            'If the roles were reversed, how would you want to be treated?',
            'What message do you want to send to the community about resolving disputes?',
            'How would an amicable settlement benefit both you and the other party?',
        ),
    )
