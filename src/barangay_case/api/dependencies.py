import logging
from flask import request, jsonify
from barangay_case.api import config
from barangay_case.search import LegalSearchClient

logger = logging.getLogger("api")

_search_client = None


def require_api_key():
    if config.API_KEY:
        key = request.headers.get("X-API-Key", "")
        if key != config.API_KEY:
            return jsonify({"error": "Unauthorized"}), 401
    return None


def get_search_client() -> LegalSearchClient:
    global _search_client
    if _search_client is None:
        _search_client = LegalSearchClient()
        if not _search_client.configured:
            logger.warning("[api] Legal search credentials not configured; /api/legal-search will return 503")
    return _search_client


def set_search_client(client) -> None:
    """Swap the search client (used by tests)."""
    global _search_client
    _search_client = client
