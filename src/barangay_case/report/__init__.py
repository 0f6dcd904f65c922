from barangay_case.report.forms import FormData, IncidentInfo, PartyInfo, validate_form
from barangay_case.report.assembler import CaseReport, PartyQuestions, assemble
from barangay_case.report.renderer import HtmlFileRenderer, Renderer, render_html
from barangay_case.report.pipeline import ReportResult, ReportState, generate_report

__all__ = [
    'FormData', 'IncidentInfo', 'PartyInfo', 'validate_form',
    'CaseReport', 'PartyQuestions', 'assemble',
    'HtmlFileRenderer', 'Renderer', 'render_html',
    'ReportResult', 'ReportState', 'generate_report',
]
