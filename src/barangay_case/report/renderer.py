"""Report rendering adapters.

The pipeline only knows the ``Renderer`` protocol. ``render_html`` turns a
CaseReport into a standalone HTML document; ``HtmlFileRenderer`` exports that
document to disk for download or printing.
"""
from __future__ import annotations

import logging
import os
import time
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol

from jinja2 import Environment, PackageLoader, select_autoescape

from barangay_case.mediation.questions import QUESTION_GROUP_LABELS, QUESTION_GROUPS
from barangay_case.utils.formatting import format_date, format_datetime, now_manila

if TYPE_CHECKING:
    from barangay_case.report.assembler import CaseReport
    from barangay_case.search.legal_search import Citation

logger = logging.getLogger(__name__)

DISCLAIMER = (
    'Disclaimer: This report is generated for informational purposes only and does not constitute legal '
    'advice. Barangay officials and parties should consult a qualified lawyer for definitive legal counsel.'
)

_env = Environment(
    loader=PackageLoader('barangay_case.report', 'templates'),
    autoescape=select_autoescape(['html']),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters['date'] = format_date
_env.filters['datetime'] = format_datetime


class Renderer(Protocol):
    def render(self, report: "CaseReport") -> None:
        ...


def party_contact(party) -> str:
    contact: List[str] = []
    if party.phone:
        contact.append(f'Phone: {party.phone}')
    if party.email:
        contact.append(f'Email: {party.email}')
    if party.address:
        contact.append(f'Address: {party.address}')
    return '; '.join(contact)


def render_html(
    report: "CaseReport",
    generated_at: Optional[datetime] = None,
    citations: Iterable["Citation"] = (),
) -> str:
    template = _env.get_template('report.html')
    return template.render(
        report=report,
        generated_on=format_datetime(generated_at or now_manila()),
        party_contact=party_contact,
        question_groups=[(g, QUESTION_GROUP_LABELS[g]) for g in QUESTION_GROUPS],
        citations=list(citations),
        disclaimer=DISCLAIMER,
    )


def export_filename() -> str:
    return f'barangay_case_report_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}.html'


class HtmlFileRenderer:
    """Write each rendered report as an HTML file under ``output_dir``."""

    def __init__(self, output_dir: str, citations: Iterable["Citation"] = ()):
        self.output_dir = output_dir
        self.citations = list(citations)
        self.last_path: Optional[str] = None

    def render(self, report: "CaseReport") -> None:
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, export_filename())
        with open(path, 'w', encoding='utf-8') as f:
            f.write(render_html(report, citations=self.citations))
        self.last_path = path
        logger.info(f"Report exported to {path}")
