import logging
import uuid

import pytest

ORDERS_URL = "/api/v1/orders/"


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get(ORDERS_URL, HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get(ORDERS_URL)
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get(ORDERS_URL, HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_correlation_id_rebound_per_request(self, client, caplog):
        client.get(ORDERS_URL, HTTP_X_REQUEST_ID="first-request-id")
        caplog.clear()

        with caplog.at_level(logging.INFO):
            client.get(ORDERS_URL, HTTP_X_REQUEST_ID="second-request-id")

        messages = [record.getMessage() for record in caplog.records]
        assert any("second-request-id" in message for message in messages)
        assert not any("first-request-id" in message for message in messages)


class TestAllowedHosts:
    def test_settings_module_default(self):
        import os

        import config.settings as project_settings

        if "ALLOWED_HOSTS" in os.environ:
            pytest.skip("ALLOWED_HOSTS overridden by the environment")
        assert project_settings.ALLOWED_HOSTS == ["127.0.0.1", "localhost"]

    def test_test_client_host_still_accepted(self, client):
        response = client.get(ORDERS_URL)
        assert response.status_code != 400


class TestSensitiveDataMasking:
    def test_email_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "customer": "ana@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "ana@example.com" not in result["customer"]
        assert "***MASKED***" in result["customer"]

    def test_password_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    @pytest.mark.parametrize(
        "key,value",
        [("event", "order.created"), ("order_id", "0190c1f2-7a4e-7000-8000-000000000001")],
    )
    def test_non_sensitive_data_unchanged(self, key, value):
        from config.settings import mask_sensitive_data

        result = mask_sensitive_data(None, None, {key: value})
        assert result[key] == value
