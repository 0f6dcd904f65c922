import logging
from flask import Blueprint, Response, request, jsonify
from flasgger import swag_from
from werkzeug.exceptions import BadRequest
from pydantic import ValidationError

from barangay_case.api import config, dependencies, models, state
from barangay_case.api.extensions import limiter
from barangay_case.categories import CaseCategory
from barangay_case.classifier import matched_rule, rule_keywords
from barangay_case.knowledge_base import categories, lookup
from barangay_case.mediation import strategize
from barangay_case.report import HtmlFileRenderer, generate_report, render_html
from barangay_case.report.renderer import export_filename

logger = logging.getLogger(__name__)
report_bp = Blueprint('report', __name__)

_FORM_SCHEMA = {
    'type': 'object',
    'properties': {
        'case_id': {'type': 'string'},
        'date_received': {'type': 'string', 'example': '2024-05-02'},
        'complainant': {'type': 'object'},
        'respondents': {'type': 'array', 'items': {'type': 'object'}},
        'incident': {
            'type': 'object',
            'properties': {
                'summary': {'type': 'string', 'example': "Someone took my neighbor's carabao while I was sleeping"},
                'location': {'type': 'string', 'example': 'Purok 3, San Pedro City'},
                'date_time': {'type': 'string', 'example': '2024-05-01T20:00'},
            },
        },
    },
}


def _run_pipeline(renderer=None):
    raw = request.json
    if raw is None:
        return None, (jsonify({"error": "Expected application/json body"}), 400)
    if not isinstance(raw, dict):
        raise BadRequest("Body must be a JSON object")
    result = generate_report(raw, renderer=renderer)
    if not result.ok:
        state.update_report_stats(invalid=True)
        return None, (jsonify({"error": "validation_failed", "fields": result.errors}), 400)
    category = result.report.category.value
    state.update_report_stats(category=category)
    try:
        state.REPORTS_TOTAL.labels(category).inc()
    except Exception:
        pass
    return result, None


@report_bp.route("/api/categories", methods=["GET"])
def list_categories():
    return jsonify({"categories": categories(), "rules": rule_keywords()})


@report_bp.route("/api/knowledge/<category>", methods=["GET"])
def get_knowledge(category):
    try:
        cat = CaseCategory.parse(category)
    except ValueError:
        return jsonify({"error": "Category not found"}), 404
    return jsonify({
        "category": cat.value,
        "analysis": lookup(cat).model_dump(mode='json'),
        "mediation": strategize(cat).model_dump(mode='json'),
    })


@report_bp.route("/api/classify", methods=["POST"])
@limiter.limit("60/minute")
def classify_summary():
    raw = request.json or {}
    if not isinstance(raw, dict):
        raise BadRequest("Body must be a JSON object")
    try:
        parsed = models.ClassifyRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    category, keyword = matched_rule(parsed.summary)
    return jsonify({"category": category.value, "keyword": keyword, "nature": lookup(category).nature})


@report_bp.route("/api/report", methods=["POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['report'],
    'consumes': ['application/json'],
    'parameters': [{'name': 'body', 'in': 'body', 'required': True, 'schema': _FORM_SCHEMA}],
    'responses': {200: {'description': 'Case report'}, 400: {'description': 'Field validation errors'}}
})
def create_report():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    result, error = _run_pipeline()
    if error:
        return error
    return jsonify({"report": result.report.to_dict(), "keyword": result.keyword})


@report_bp.route("/api/report/html", methods=["POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['report'],
    'consumes': ['application/json'],
    'produces': ['text/html'],
    'parameters': [{'name': 'body', 'in': 'body', 'required': True, 'schema': _FORM_SCHEMA}],
    'responses': {200: {'description': 'HTML report document'}, 400: {'description': 'Field validation errors'}}
})
def create_report_html():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    result, error = _run_pipeline()
    if error:
        return error
    html = render_html(result.report, citations=state.citations)
    disposition = 'attachment' if request.args.get('download') == '1' else 'inline'
    return Response(
        html,
        mimetype='text/html',
        headers={'Content-Disposition': f'{disposition}; filename="{export_filename()}"'},
    )


@report_bp.route("/api/report/export", methods=["POST"])
@limiter.limit("10/minute")
def export_report():
    """Render the report to an HTML file under REPORT_OUTPUT_DIR."""
    auth = dependencies.require_api_key()
    if auth:
        return auth
    renderer = HtmlFileRenderer(config.REPORT_OUTPUT_DIR, citations=state.citations)
    result, error = _run_pipeline(renderer=renderer)
    if error:
        return error
    return jsonify({"path": renderer.last_path, "case_title": result.report.case_title}), 201
