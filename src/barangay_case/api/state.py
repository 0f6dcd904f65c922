import time
from typing import Any, Dict

from barangay_case.search import CitationList

# Citations attached from legal search results (not part of any CaseReport)
citations = CitationList()

# Report Stats (for monitoring)
report_stats: Dict[str, Any] = {
    'total_requests': 0,
    'generated': 0,
    'validation_failures': 0,
    'by_category': {},
    'last_report_time': None,
}

# Metrics
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None
REPORTS_TOTAL: Any = None


def update_report_stats(category: Any = None, invalid: bool = False) -> None:
    """Update report generation statistics for monitoring."""
    report_stats['total_requests'] = int(report_stats.get('total_requests') or 0) + 1
    if invalid:
        report_stats['validation_failures'] = int(report_stats.get('validation_failures') or 0) + 1
        return
    report_stats['generated'] = int(report_stats.get('generated') or 0) + 1
    report_stats['last_report_time'] = time.time()
    if category is not None:
        by_cat = report_stats['by_category']
        by_cat[category] = by_cat.get(category, 0) + 1
