import pytest
import requests

from barangay_case.search import CitationList, ConfigurationError, LegalSearchClient, NetworkError, SearchResult
from barangay_case.search.legal_search import SEARCH_URL, build_query


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.exc:
            raise self.exc
        return self.response


def _client(session, **kwargs):
    opts = dict(api_key="key", cse_id="cx", allowed_sites=["lawphil.net", "chanrobles.com"], timeout=5)
    opts.update(kwargs)
    return LegalSearchClient(session=session, **opts)


def test_build_query_restricts_to_sites():
    assert build_query("qualified theft", ["lawphil.net", "chanrobles.com"]) == (
        "qualified theft (site:lawphil.net OR site:chanrobles.com)"
    )


def test_search_maps_items():
    payload = {"items": [
        {"title": "Art. 308", "link": "https://lawphil.net/rpc", "displayLink": "lawphil.net", "snippet": "Theft"},
        {"title": "G.R. No. 257483", "link": "https://chanrobles.com/x", "displayLink": "chanrobles.com"},
    ]}
    session = FakeSession(FakeResponse(200, payload))
    results = _client(session).search("qualified theft")
    assert results[0] == SearchResult("Art. 308", "https://lawphil.net/rpc", "lawphil.net", "Theft")
    assert results[1].snippet == ""
    url, params, timeout = session.calls[0]
    assert url == SEARCH_URL
    assert params == {
        "key": "key",
        "cx": "cx",
        "q": "qualified theft (site:lawphil.net OR site:chanrobles.com)",
        "num": "10",
    }
    assert timeout == 5


def test_search_without_items_returns_empty():
    assert _client(FakeSession(FakeResponse(200, {}))).search("nothing") == []


@pytest.mark.parametrize("kwargs", [{"api_key": ""}, {"cse_id": ""}])
def test_missing_credentials(kwargs):
    session = FakeSession(FakeResponse(200, {}))
    with pytest.raises(ConfigurationError):
        _client(session, **kwargs).search("theft")
    assert session.calls == []


def test_http_error_raises_network_error():
    with pytest.raises(NetworkError) as ei:
        _client(FakeSession(FakeResponse(403, {"error": {}}))).search("theft")
    assert str(ei.value) == "Search request failed: 403"
    assert ei.value.status_code == 403


def test_transport_error_raises_network_error():
    session = FakeSession(exc=requests.exceptions.ConnectionError("offline"))
    with pytest.raises(NetworkError):
        _client(session).search("theft")


def test_non_json_body_raises_network_error():
    response = FakeResponse(200, json_error=ValueError("Expecting value"))
    with pytest.raises(NetworkError) as ei:
        _client(FakeSession(response)).search("theft")
    assert "invalid response" in str(ei.value)
    assert ei.value.status_code == 200


def test_citation_list():
    citations = CitationList()
    item = SearchResult("Art. 282", "https://lawphil.net/282", "lawphil.net")
    citations.attach(item)
    assert len(citations) == 1
    assert list(citations) == [item]
    assert citations.to_list()[0]["label"] == "Art. 282 — lawphil.net"
    citations.clear()
    assert len(citations) == 0
