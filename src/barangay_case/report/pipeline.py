"""End-to-end report generation.

    IDLE -> VALIDATING -> INVALID -> IDLE             (field errors surfaced)
                       -> CLASSIFYING -> ANALYZING -> ASSEMBLING -> RENDERED

The summary is classified exactly once and the resulting category is handed
to the knowledge base, the strategy generator and both question generators.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from barangay_case.categories import Role
from barangay_case.classifier import matched_rule
from barangay_case.knowledge_base import lookup
from barangay_case.mediation import generate_questions, strategize
from barangay_case.report.assembler import CaseReport, PartyQuestions, assemble
from barangay_case.report.forms import validate_form
from barangay_case.report.renderer import Renderer

logger = logging.getLogger(__name__)


class ReportState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    CLASSIFYING = "classifying"
    ANALYZING = "analyzing"
    ASSEMBLING = "assembling"
    RENDERED = "rendered"


@dataclass
class ReportResult:
    state: ReportState
    report: Optional[CaseReport] = None
    errors: Dict[str, str] = field(default_factory=dict)
    keyword: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is ReportState.RENDERED


def _transition(state: ReportState) -> ReportState:
    logger.debug(f"report pipeline -> {state.value}")
    return state


def generate_report(raw: Any, renderer: Optional[Renderer] = None) -> ReportResult:
    """Validate ``raw`` form input and, if valid, produce (and optionally render) a CaseReport."""
    _transition(ReportState.VALIDATING)
    form, errors = validate_form(raw)
    if form is None:
        _transition(ReportState.INVALID)
        logger.info(f"Report generation blocked by validation errors: {sorted(errors)}")
        return ReportResult(state=_transition(ReportState.IDLE), errors=errors)

    _transition(ReportState.CLASSIFYING)
    category, keyword = matched_rule(form.incident.summary)
    logger.info(f"Case classified as {category.value} (keyword={keyword!r})")

    _transition(ReportState.ANALYZING)
    incident = form.incident
    analysis = lookup(category)
    mediation = strategize(category)
    questions = PartyQuestions(
        complainant=generate_questions(category, Role.COMPLAINANT, incident.location, incident.date_time),
        respondent=generate_questions(category, Role.RESPONDENT, incident.location, incident.date_time),
    )

    _transition(ReportState.ASSEMBLING)
    report = assemble(form, category, analysis, mediation, questions)

    if renderer is not None:
        renderer.render(report)
    state = _transition(ReportState.RENDERED)
    return ReportResult(state=state, report=report, keyword=keyword)
