"""Testes para o classificador de respostas do provedor."""

from __future__ import annotations

import pytest

from api.connectors.response_classifier import (
    FlatFieldIdExtractor,
    ProviderResponseClassifier,
    ResourceNameIdExtractor,
    get_json_string,
)
from api.handlers.rbm import RBM_CLASSIFIER
from api.handlers.whatsapp import WHATSAPP_CLASSIFIER
from app.protocols.http_transport import HttpResult
from app.protocols.models import FailureKind
from fakes.fake_transport import error_result, json_result


class TestGetJsonString:
    def test_nested_path(self) -> None:
        assert get_json_string({"messages": [{"id": "157b"}]}, ("messages", 0, "id")) == "157b"

    @pytest.mark.parametrize(
        "data",
        [None, {}, {"messages": []}, {"messages": {"id": "x"}}, {"messages": [{"id": 12}]}],
    )
    def test_missing_or_wrong_type(self, data: object) -> None:
        assert get_json_string(data, ("messages", 0, "id")) is None


class TestWhatsAppClassifier:
    def test_success(self) -> None:
        result = WHATSAPP_CLASSIFIER.classify(json_result({"messages": [{"id": "157b5e14568e8"}]}))

        assert result.ok
        assert result.external_id == "157b5e14568e8"

    def test_provider_error_title(self) -> None:
        body = {"errors": [{"title": "Unknown contact"}], "messages": [{"id": "ignored"}]}
        result = WHATSAPP_CLASSIFIER.classify(json_result(body, status_code=200))

        assert result.failure is not None
        assert result.failure.kind is FailureKind.PROVIDER_REJECTED
        assert result.failure.message == "received error from send endpoint: Unknown contact"

    def test_empty_error_title_is_not_rejection(self) -> None:
        body = {"errors": [{"title": "   "}], "messages": [{"id": "157b"}]}
        result = WHATSAPP_CLASSIFIER.classify(json_result(body))

        assert result.external_id == "157b"

    def test_missing_id(self) -> None:
        result = WHATSAPP_CLASSIFIER.classify(json_result({"messages": []}))

        assert result.failure.kind is FailureKind.MALFORMED_RESPONSE
        assert result.failure.message == "unable to get message id from response body"

    def test_non_json_body(self) -> None:
        result = WHATSAPP_CLASSIFIER.classify(HttpResult(status_code=502, body=b"<html>bad gateway</html>"))

        assert result.failure.kind is FailureKind.MALFORMED_RESPONSE

    def test_http_status_is_ignored(self) -> None:
        result = WHATSAPP_CLASSIFIER.classify(json_result({"messages": [{"id": "x1"}]}, status_code=500))

        assert result.external_id == "x1"

    def test_transport_error_wins(self) -> None:
        result = WHATSAPP_CLASSIFIER.classify(error_result())

        assert result.failure.kind is FailureKind.TRANSPORT
        assert result.failure.is_retryable


class TestRbmClassifier:
    def test_resource_name_last_segment(self) -> None:
        result = RBM_CLASSIFIER.classify(json_result({"name": "phones/+12223334444/agentMessages/ABC123"}))

        assert result.external_id == "ABC123"

    def test_name_without_segments(self) -> None:
        result = RBM_CLASSIFIER.classify(json_result({"name": "ABC123"}))

        assert result.external_id == "ABC123"

    def test_empty_last_segment_is_malformed(self) -> None:
        result = RBM_CLASSIFIER.classify(json_result({"name": "/"}))

        assert result.failure.kind is FailureKind.MALFORMED_RESPONSE

    def test_error_status(self) -> None:
        body = {"error": {"code": 404, "message": "Requested entity was not found.", "status": "NOT_FOUND"}}
        result = RBM_CLASSIFIER.classify(json_result(body, status_code=404))

        assert result.failure.kind is FailureKind.PROVIDER_REJECTED
        assert result.failure.message == "received error from send endpoint: NOT_FOUND"
        assert not result.failure.is_retryable


def test_custom_paths() -> None:
    classifier = ProviderResponseClassifier(
        error_path=("fault",),
        id_extractor=ResourceNameIdExtractor(("result", "resource")),
    )
    assert classifier.classify(json_result({"result": {"resource": "a/b/c"}})).external_id == "c"
    assert classifier.classify(json_result({"fault": "boom"})).failure.kind is FailureKind.PROVIDER_REJECTED


def test_flat_field_extractor_empty_string() -> None:
    assert FlatFieldIdExtractor(("id",)).extract({"id": ""}) is None
