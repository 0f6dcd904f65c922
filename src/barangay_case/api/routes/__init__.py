from barangay_case.api.routes.report import report_bp
from barangay_case.api.routes.search import search_bp
from barangay_case.api.routes.monitoring import monitoring_bp

__all__ = ['report_bp', 'search_bp', 'monitoring_bp']
