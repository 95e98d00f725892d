"""Tests for batch dispatch: continue-on-fail and abort semantics."""
import logging

import pytest

from helium_nodes.dispatcher import RequestDispatcher, classify_error
from helium_nodes.registry import Resource
from helium_nodes.sdk import (
    HttpApiError,
    NodeApiError,
    NodeOperationError,
    NodeTimeoutError,
    NodeValidationError,
)

from conftest import RecordingHttpClient, resolver


ITEMS = [{"json": {}}, {"json": {}}, {"json": {}}]


class TestDispatchSuccess:

    def test_list_hotspots_passthrough(self, credential):
        payload = {"data": [{"address": "HS1"}], "cursor": "next"}
        client = RecordingHttpClient([payload])

        records = RequestDispatcher(client).dispatch(
            "hotspots", "listHotspots", [{"json": {}}], credential,
            resolver({"cursor": "", "limit": 100}),
        )

        assert records == [{"json": payload, "pairedItem": {"item": 0}}]
        assert client.requests[0].url == "https://api.helium.io/v1/hotspots"
        assert client.requests[0].query == {"limit": 100}

    def test_one_request_per_item_in_order(self, http_client, anonymous_credential):
        get_parameter = resolver({}, per_item=[{"address": "A"}, {"address": "B"}, {"address": "C"}])

        records = RequestDispatcher(http_client).dispatch(
            "accounts", "getAccount", ITEMS, anonymous_credential, get_parameter,
        )

        assert [r["pairedItem"]["item"] for r in records] == [0, 1, 2]
        assert [s.url.rsplit("/", 1)[1] for s in http_client.requests] == ["A", "B", "C"]

    def test_empty_batch(self, http_client, credential):
        records = RequestDispatcher(http_client).dispatch(
            "hotspots", "listHotspots", [], credential, resolver({}),
        )
        assert records == []
        assert http_client.requests == []


class TestContinueOnFail:

    def test_generic_error_becomes_record(self, credential):
        client = RecordingHttpClient([Exception("not found")])

        records = RequestDispatcher(client).dispatch(
            "hotspots", "getHotspot", [{"json": {}}], credential,
            resolver({"address": "HS1"}), continue_on_fail=True,
        )

        assert records == [{"json": {"error": "not found"}, "pairedItem": {"item": 0}}]

    def test_accounts_error_carries_context(self, credential):
        client = RecordingHttpClient([{"ok": 1}, HttpApiError("HTTP 404: Not Found", status_code=404)])

        records = RequestDispatcher(client).dispatch(
            "accounts", "getAccount", ITEMS[:2], credential,
            resolver({"address": "ADDR"}), continue_on_fail=True,
        )

        assert records[0] == {"json": {"ok": 1}, "pairedItem": {"item": 0}}
        assert records[1] == {
            "json": {"error": "HTTP 404: Not Found", "operation": "getAccount", "itemIndex": 1},
            "pairedItem": {"item": 1},
        }

    def test_failure_in_middle_keeps_going(self, credential):
        client = RecordingHttpClient([{"n": 0}, RuntimeError("boom"), {"n": 2}])

        records = RequestDispatcher(client).dispatch(
            "validators", "getValidator", ITEMS, credential,
            resolver({"address": "V"}), continue_on_fail=True,
        )

        assert len(records) == 3
        assert records[1]["json"] == {"error": "boom"}
        assert records[2]["json"] == {"n": 2}
        assert len(client.requests) == 3

    def test_validation_error_becomes_record(self, http_client, credential):
        get_parameter = resolver({}, per_item=[{"address": "A"}, {"address": ""}])

        records = RequestDispatcher(http_client).dispatch(
            "hotspots", "getHotspot", ITEMS[:2], credential, get_parameter, continue_on_fail=True,
        )

        assert records[1]["json"] == {"error": "Required parameter 'address' not provided"}
        assert len(http_client.requests) == 1

    def test_error_is_logged(self, credential, caplog):
        client = RecordingHttpClient([Exception("not found")])

        with caplog.at_level(logging.ERROR, logger="helium_nodes.dispatcher"):
            RequestDispatcher(client).dispatch(
                "hotspots", "getHotspot", [{"json": {}}], credential,
                resolver({"address": "HS1"}), continue_on_fail=True,
            )

        record = caplog.records[0]
        assert "getHotspot" in record.getMessage()
        assert record.resource == "hotspots"
        assert record.item_index == 0


class TestAbort:

    def test_api_error_is_classified(self, credential):
        error = HttpApiError("HTTP 500: Server Error", status_code=500, response_body={"error": "down"})
        client = RecordingHttpClient([error])

        with pytest.raises(NodeApiError) as exc_info:
            RequestDispatcher(client).dispatch(
                "hotspots", "getHotspot", [{"json": {}}], credential, resolver({"address": "HS1"}),
            )

        assert exc_info.value.message == "HTTP 500: Server Error"
        assert exc_info.value.status_code == 500
        assert exc_info.value.response_body == {"error": "down"}
        assert exc_info.value.item_index == 0

    def test_first_error_stops_batch(self, credential):
        client = RecordingHttpClient([{"n": 0}, RuntimeError("boom"), {"n": 2}])

        with pytest.raises(NodeOperationError) as exc_info:
            RequestDispatcher(client).dispatch(
                "validators", "getValidator", ITEMS, credential, resolver({"address": "V"}),
            )

        assert not isinstance(exc_info.value, NodeApiError)
        assert exc_info.value.message == "boom"
        assert exc_info.value.item_index == 1
        assert len(client.requests) == 2

    def test_network_error_without_status_is_generic(self, credential):
        client = RecordingHttpClient([HttpApiError("Request failed: refused")])

        with pytest.raises(NodeOperationError) as exc_info:
            RequestDispatcher(client).dispatch(
                "blockchain", "getNetworkStats", [{"json": {}}], credential, resolver({}),
            )

        assert type(exc_info.value) is NodeOperationError

    def test_validation_error_propagates(self, http_client, credential):
        with pytest.raises(NodeValidationError) as exc_info:
            RequestDispatcher(http_client).dispatch(
                "accounts", "submitTransaction", [{"json": {}}], credential,
                resolver({"address": "ADDR"}),
            )

        assert exc_info.value.item_index == 0
        assert http_client.requests == []

    def test_unknown_operation_fails_batch_even_with_continue(self, http_client, credential):
        with pytest.raises(NodeValidationError, match="Unknown operation"):
            RequestDispatcher(http_client).dispatch(
                "hotspots", "deleteHotspot", ITEMS, credential, resolver({}), continue_on_fail=True,
            )
        assert http_client.requests == []

    def test_unknown_resource_fails_batch(self, http_client, credential):
        with pytest.raises(NodeValidationError, match="not supported"):
            RequestDispatcher(http_client).dispatch(
                "miners", "listMiners", ITEMS, credential, resolver({}), continue_on_fail=True,
            )


class TestClassifyError:

    def test_timeout_is_generic(self):
        error = classify_error(NodeTimeoutError("Request timed out after 30s", 30, "http://x"), 4)
        assert type(error) is NodeOperationError
        assert error.message == "Request timed out after 30s"
        assert error.item_index == 4

    def test_node_error_keeps_type(self):
        original = NodeValidationError("bad")
        assert classify_error(original, 2) is original
        assert original.item_index == 2

    def test_blockchain_not_found_message(self):
        error = classify_error(
            HttpApiError("HTTP 404: Not Found", status_code=404, response_body={"error": "no block"}),
            0,
            resource=Resource.BLOCKCHAIN,
        )
        assert isinstance(error, NodeApiError)
        assert error.message == "Resource not found"
        assert error.status_code == 404
        assert error.response_body == {"error": "no block"}

    def test_not_found_keeps_message_for_other_resources(self):
        error = classify_error(HttpApiError("HTTP 404: Not Found", status_code=404), 0, resource=Resource.HOTSPOTS)
        assert error.message == "HTTP 404: Not Found"


def test_blockchain_404_aborts_with_not_found(credential):
    client = RecordingHttpClient([HttpApiError("HTTP 404: Not Found", status_code=404)])

    with pytest.raises(NodeApiError, match="Resource not found"):
        RequestDispatcher(client).dispatch(
            "blockchain", "getBlock", [{"json": {}}], credential, resolver({"height": 99}),
        )


def test_blockchain_404_record_keeps_transport_message(credential):
    client = RecordingHttpClient([HttpApiError("HTTP 404: Not Found", status_code=404)])

    records = RequestDispatcher(client).dispatch(
        "blockchain", "getBlock", [{"json": {}}], credential,
        resolver({"height": 99}), continue_on_fail=True,
    )

    assert records[0]["json"] == {"error": "HTTP 404: Not Found"}
