from barangay_case.search.legal_search import (
    Citation,
    CitationList,
    ConfigurationError,
    LegalSearchClient,
    NetworkError,
    SearchResult,
)

__all__ = [
    'Citation', 'CitationList', 'ConfigurationError', 'LegalSearchClient', 'NetworkError', 'SearchResult',
]
