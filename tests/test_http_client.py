"""Tests for the requests-based HTTP client."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from helium_nodes.models import RequestSpec
from helium_nodes.sdk import HttpApiError, HttpClient, NodeTimeoutError


def make_response(status_code=200, json_data=None, content=b'{"ok": true}', reason="OK"):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.content = content
    response.text = content.decode() if content else ""
    response.url = "https://api.helium.io/v1/hotspots"
    response.request = MagicMock(method="GET")
    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON")
    return response


SPEC = RequestSpec(
    method="GET",
    url="https://api.helium.io/v1/hotspots",
    headers={"Content-Type": "application/json"},
    query={"limit": 100},
)


class TestHttpClientSend:

    @patch("helium_nodes.sdk.http.requests.request")
    def test_send_passes_spec_through(self, mock_request):
        mock_request.return_value = make_response(json_data={"data": []})

        result = HttpClient(timeout=12).send(SPEC)

        assert result == {"data": []}
        mock_request.assert_called_once_with(
            method="GET",
            url="https://api.helium.io/v1/hotspots",
            params={"limit": 100},
            json=None,
            headers={"Content-Type": "application/json"},
            timeout=12,
        )

    @patch("helium_nodes.sdk.http.requests.request")
    def test_default_headers_merged(self, mock_request):
        mock_request.return_value = make_response(json_data={})

        HttpClient(default_headers={"User-Agent": "helium-nodes"}).send(SPEC)

        headers = mock_request.call_args.kwargs["headers"]
        assert headers == {"User-Agent": "helium-nodes", "Content-Type": "application/json"}

    @patch("helium_nodes.sdk.http.requests.request")
    def test_empty_body_is_empty_dict(self, mock_request):
        mock_request.return_value = make_response(status_code=204, content=b"")

        assert HttpClient().send(SPEC) == {}

    @patch("helium_nodes.sdk.http.requests.request")
    def test_error_status_raises_with_body(self, mock_request):
        mock_request.return_value = make_response(
            status_code=404,
            json_data={"error": "hotspot not found"},
            content=b'{"error": "hotspot not found"}',
            reason="Not Found",
        )

        with pytest.raises(HttpApiError) as exc_info:
            HttpClient().send(SPEC)

        assert str(exc_info.value) == "HTTP 404: Not Found"
        assert exc_info.value.status_code == 404
        assert exc_info.value.response_body == {"error": "hotspot not found"}

    @patch("helium_nodes.sdk.http.requests.request")
    def test_error_status_with_text_body(self, mock_request):
        mock_request.return_value = make_response(
            status_code=502, content=b"<html>bad gateway</html>", reason="Bad Gateway",
        )

        with pytest.raises(HttpApiError) as exc_info:
            HttpClient().send(SPEC)

        assert exc_info.value.response_body == "<html>bad gateway</html>"

    @patch("helium_nodes.sdk.http.requests.request")
    def test_invalid_json_on_success(self, mock_request):
        mock_request.return_value = make_response(content=b"not json")

        with pytest.raises(HttpApiError, match="Invalid JSON"):
            HttpClient().send(SPEC)

    @patch("helium_nodes.sdk.http.requests.request")
    def test_timeout(self, mock_request):
        mock_request.side_effect = requests.exceptions.Timeout()

        with pytest.raises(NodeTimeoutError) as exc_info:
            HttpClient(timeout=5).send(SPEC)

        assert exc_info.value.timeout == 5
        assert exc_info.value.url == SPEC.url

    @patch("helium_nodes.sdk.http.requests.request")
    def test_connection_error_has_no_status(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(HttpApiError) as exc_info:
            HttpClient().send(SPEC)

        assert exc_info.value.status_code is None
        assert "refused" in str(exc_info.value)

    def test_session_is_used(self):
        session = MagicMock()
        session.request.return_value = make_response(json_data={"ok": True})

        result = HttpClient(session=session).send(SPEC)

        assert result == {"ok": True}
        session.request.assert_called_once()
