"""Tests for error classification."""

import httpx
import pytest

from aideal_llm_sdk.providers.base import (
    EmptyResponseError,
    InvalidRequestError,
    ProviderConfigurationError,
    UnknownProviderError,
)
from aideal_llm_sdk.providers.errors import ErrorCategory, ErrorMapper
from tests.helpers.mock_exceptions import (
    AuthenticationError,
    BadRequestError,
    MockAPIError,
    MockGeminiError,
    MockServerError,
    RateLimitError,
)

pytestmark = pytest.mark.unit


class TestErrorMapper:

    @pytest.mark.parametrize("error,category,retryable", [
        (RateLimitError(), ErrorCategory.RATE_LIMIT, True),
        (AuthenticationError(), ErrorCategory.AUTHENTICATION, False),
        (BadRequestError(), ErrorCategory.CLIENT_ERROR, False),
        (MockServerError(), ErrorCategory.SERVER_ERROR, True),
        (MockServerError(status_code=503), ErrorCategory.SERVER_ERROR, True),
        (MockGeminiError("RESOURCE_EXHAUSTED", 429), ErrorCategory.RATE_LIMIT, True),
        (MockGeminiError("PERMISSION_DENIED", 403), ErrorCategory.AUTHENTICATION, False),
        (MockAPIError("Request timed out", 408), ErrorCategory.TIMEOUT, True),
    ])
    def test_vendor_errors(self, error, category, retryable):
        classification = ErrorMapper.classify(error)

        assert classification.category == category
        assert classification.is_retryable is retryable

    def test_status_code_is_reported(self):
        assert ErrorMapper.classify(RateLimitError()).status_code == 429

    def test_status_from_response_only(self):
        error = MockAPIError("boom", 502)
        error.status_code = None

        assert ErrorMapper.get_status_code(error) == 502

    def test_generic_class_with_specific_status(self):
        error = BadRequestError()
        error.status_code = 429

        assert ErrorMapper.classify(error).category == ErrorCategory.RATE_LIMIT

    def test_httpx_timeout(self):
        error = httpx.ReadTimeout("timed out")

        assert ErrorMapper.classify(error).category == ErrorCategory.TIMEOUT
        assert ErrorMapper.is_retryable(error)

    def test_httpx_connect_error(self):
        error = httpx.ConnectError("refused")

        assert ErrorMapper.classify(error).category == ErrorCategory.NETWORK

    def test_rate_limit_from_message(self):
        assert ErrorMapper.categorize(Exception("Too Many Requests")) == "rate_limit"

    def test_unknown(self):
        classification = ErrorMapper.classify(ValueError("bad"))

        assert classification.category == ErrorCategory.UNKNOWN
        assert classification.is_retryable is False

    @pytest.mark.parametrize("error,expected", [
        (EmptyResponseError("gpt", "gpt-test", "length"), "empty_response"),
        (ProviderConfigurationError("no key", provider="gpt"), "configuration"),
        (InvalidRequestError("no user message"), "invalid_request"),
        (UnknownProviderError("llama"), "invalid_request"),
    ])
    def test_router_errors(self, error, expected):
        assert ErrorMapper.categorize(error) == expected
        assert ErrorMapper.is_retryable(error) is False


class TestRouterErrors:

    def test_empty_response_message(self):
        error = EmptyResponseError("claude", "claude-test", finish_reason="max_tokens")

        assert error.provider == "claude"
        assert error.model == "claude-test"
        assert "finish_reason=max_tokens" in str(error)

    def test_empty_response_without_reason(self):
        assert "finish_reason=unknown" in str(EmptyResponseError("gpt", "m"))

    def test_invalid_request_is_value_error(self):
        assert isinstance(InvalidRequestError("x"), ValueError)
