from flask import Blueprint, request, jsonify
from flasgger import swag_from
from werkzeug.exceptions import BadRequest
from pydantic import ValidationError

from barangay_case.api import config, dependencies, models, state
from barangay_case.api.extensions import limiter
from barangay_case.search import ConfigurationError, NetworkError, SearchResult

search_bp = Blueprint('search', __name__)


@search_bp.route("/api/legal-search", methods=["POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['search'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {'type': 'object', 'properties': {'query': {'type': 'string'}}}
    }],
    'responses': {200: {'description': 'OK'}, 502: {'description': 'Search provider error'},
                  503: {'description': 'Search not configured'}}
})
def legal_search():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw = request.json or {}
    if not isinstance(raw, dict):
        raise BadRequest("Body must be a JSON object")
    try:
        parsed = models.LegalSearchRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    query = parsed.query.strip()
    if not query:
        return jsonify({"error": "missing_query"}), 400
    try:
        results = dependencies.get_search_client().search(query)
    except ConfigurationError as e:
        return jsonify({"error": "search_not_configured", "message": str(e)}), 503
    except NetworkError as e:
        return jsonify({"error": "search_failed", "message": str(e)}), 502
    if not results:
        return jsonify({"results": [], "message": "No results found on trusted sources."})
    return jsonify({"results": [r.to_dict() for r in results]})


@search_bp.route("/api/citations", methods=["GET"])
def list_citations():
    return jsonify({"citations": state.citations.to_list(), "size": len(state.citations)})


@search_bp.route("/api/citations", methods=["POST"])
def attach_citation():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw = request.json or {}
    if not isinstance(raw, dict):
        return jsonify({"error": "invalid_body"}), 400
    try:
        parsed = models.CitationRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors()}), 400
    if len(state.citations) >= config.MAX_CITATIONS:
        return jsonify({"error": "citation_limit_reached", "limit": config.MAX_CITATIONS}), 409
    item = state.citations.attach(SearchResult.from_item(parsed.model_dump()))
    return jsonify(dict(item.to_dict(), label=state.citations.label(item))), 201


@search_bp.route("/api/citations", methods=["DELETE"])
def clear_citations():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    state.citations.clear()
    return jsonify({"size": 0})
