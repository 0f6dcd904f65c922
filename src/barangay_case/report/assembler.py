from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from barangay_case.categories import CaseCategory
from barangay_case.knowledge_base import LegalRecord
from barangay_case.mediation import MediationStrategy, QuestionSet
from barangay_case.report.forms import FormData, IncidentInfo, PartyInfo


class PartyQuestions(BaseModel):
    model_config = ConfigDict(frozen=True)

    complainant: QuestionSet
    respondent: QuestionSet


class CaseReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    case_id: str = ""
    date_received: Optional[date] = None
    complainant: PartyInfo
    respondents: Tuple[PartyInfo, ...] = ()
    incident: IncidentInfo
    case_title: str
    category: CaseCategory
    analysis: LegalRecord
    mediation: MediationStrategy
    questions: PartyQuestions

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json')


def assemble(
    form: FormData,
    category: CaseCategory,
    analysis: LegalRecord,
    mediation: MediationStrategy,
    questions: PartyQuestions,
) -> CaseReport:
    """Compose a report from already-validated form data and derived analysis.

    All derived parts must come from the same ``category``; the pipeline
    classifies once and passes that value to every generator.
    """
    return CaseReport(
        case_id=form.case_id,
        date_received=form.date_received,
        complainant=form.complainant,
        respondents=form.respondents,
        incident=form.incident,
        case_title=form.case_title,
        category=category,
        analysis=analysis,
        mediation=mediation,
        questions=questions,
    )
