import os
import platform
from flask import Blueprint, jsonify, Response

from barangay_case.api import config, state
from barangay_case.categories import CaseCategory
from barangay_case.classifier import classify
from barangay_case.knowledge_base import knowledge_base_metadata, lookup

monitoring_bp = Blueprint('monitoring', __name__)


@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


@monitoring_bp.route("/version", methods=["GET"])
def version():
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "commit": os.getenv("GIT_COMMIT"),
        "python": platform.python_version(),
        "knowledge_base": knowledge_base_metadata(),
    })


@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()


@monitoring_bp.route("/api/health", methods=["GET"])
def health():
    try:
        _ = lookup(classify("healthcheck"))
        return jsonify({"status": "ok"}), 200
    except Exception as e:
        return jsonify({"status": "error", "detail": str(e)}), 500


@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - every category resolves to a knowledge base record."""
    checks = {c.value: lookup(c) is not None for c in CaseCategory}
    all_ready = all(checks.values())
    return jsonify({"ready": all_ready, "checks": checks}), 200 if all_ready else 503


@monitoring_bp.route("/api/stats/reports", methods=["GET"])
def report_stats():
    return jsonify(state.report_stats)
