"""
Log sanitisation used by the error handlers
"""

from utils.error_handling import ErrorHandlingConfig


def test_sensitive_headers_are_redacted():
    headers = {"Authorization": "Bearer abc", "content-type": "application/json"}

    sanitized = ErrorHandlingConfig.sanitize_data(headers)

    assert sanitized["Authorization"] == "***REDACTED***"
    assert sanitized["content-type"] == "application/json"


def test_nested_values_are_sanitized():
    data = {"items": [{"api_key": "k"}, {"name": "Alice"}]}

    assert ErrorHandlingConfig.sanitize_data(data) == {
        "items": [{"api_key": "***REDACTED***"}, {"name": "Alice"}]
    }


def test_large_bodies_are_truncated():
    body = "x" * (ErrorHandlingConfig.MAX_BODY_LOG_SIZE + 10)

    sanitized = ErrorHandlingConfig.sanitize_data(body)

    assert sanitized.endswith("...[TRUNCATED]")
    assert len(sanitized) == ErrorHandlingConfig.MAX_BODY_LOG_SIZE + len("...[TRUNCATED]")
