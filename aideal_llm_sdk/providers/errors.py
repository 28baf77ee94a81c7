"""
Error classification utilities for provider adapters.

Vendor SDK exceptions are propagated to callers unchanged. This module only
classifies them (category + retryable flag) so that logs and multi-provider
placeholders can say what went wrong without touching the exception itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx

from .base import (
    EmptyResponseError,
    InvalidRequestError,
    ProviderConfigurationError,
)


class ErrorCategory(Enum):
    """Standard error categories across all providers."""
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    NETWORK = "network"
    SERVER_ERROR = "server_error"
    CLIENT_ERROR = "client_error"
    EMPTY_RESPONSE = "empty_response"
    CONFIGURATION = "configuration"
    INVALID_REQUEST = "invalid_request"
    UNKNOWN = "unknown"


@dataclass
class ErrorClassification:
    """Classification of a single error."""
    category: ErrorCategory
    is_retryable: bool
    status_code: Optional[int] = None


class ErrorMapper:
    """Maps provider-specific errors to standard categories."""

    # Common HTTP status codes that indicate retryable errors
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    # Exception class names shared by the openai and anthropic SDKs
    CLASS_NAME_CATEGORIES = {
        'AuthenticationError': ErrorCategory.AUTHENTICATION,
        'PermissionDeniedError': ErrorCategory.AUTHENTICATION,
        'RateLimitError': ErrorCategory.RATE_LIMIT,
        'APITimeoutError': ErrorCategory.TIMEOUT,
        'APIConnectionError': ErrorCategory.NETWORK,
        'InternalServerError': ErrorCategory.SERVER_ERROR,
        'ServerError': ErrorCategory.SERVER_ERROR,
        'BadRequestError': ErrorCategory.CLIENT_ERROR,
        'NotFoundError': ErrorCategory.CLIENT_ERROR,
        'UnprocessableEntityError': ErrorCategory.CLIENT_ERROR,
        'ClientError': ErrorCategory.CLIENT_ERROR,
    }

    RATE_LIMIT_PHRASES = ('rate limit', 'too many requests', 'quota exceeded', 'too_many_requests',
                          'resource_exhausted')

    @staticmethod
    def get_status_code(error: Exception) -> Optional[int]:
        """Extract an HTTP status code from SDK exceptions if present."""
        # openai/anthropic use status_code; google-genai uses code
        for attr in ('status_code', 'code'):
            value = getattr(error, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        response = getattr(error, 'response', None)
        value = getattr(response, 'status_code', None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    @staticmethod
    def _category_from_status(status_code: int) -> ErrorCategory:
        if status_code in (401, 403):
            return ErrorCategory.AUTHENTICATION
        if status_code == 429:
            return ErrorCategory.RATE_LIMIT
        if status_code in (408, 504):
            return ErrorCategory.TIMEOUT
        if status_code >= 500:
            return ErrorCategory.SERVER_ERROR
        if status_code >= 400:
            return ErrorCategory.CLIENT_ERROR
        return ErrorCategory.UNKNOWN

    @classmethod
    def classify(cls, error: Exception) -> ErrorClassification:
        """
        Classify an exception raised while serving a request.

        Args:
            error: The exception to classify

        Returns:
            ErrorClassification with category, retryable flag and status code
        """
        if isinstance(error, EmptyResponseError):
            return ErrorClassification(ErrorCategory.EMPTY_RESPONSE, False)
        if isinstance(error, ProviderConfigurationError):
            return ErrorClassification(ErrorCategory.CONFIGURATION, False)
        if isinstance(error, InvalidRequestError):
            return ErrorClassification(ErrorCategory.INVALID_REQUEST, False)

        status_code = cls.get_status_code(error)

        if isinstance(error, httpx.TimeoutException):
            category = ErrorCategory.TIMEOUT
        elif isinstance(error, (httpx.ConnectError, httpx.NetworkError)):
            category = ErrorCategory.NETWORK
        elif type(error).__name__ in cls.CLASS_NAME_CATEGORIES:
            category = cls.CLASS_NAME_CATEGORIES[type(error).__name__]
        elif status_code is not None:
            category = cls._category_from_status(status_code)
        elif any(phrase in str(error).lower() for phrase in cls.RATE_LIMIT_PHRASES):
            category = ErrorCategory.RATE_LIMIT
        else:
            category = ErrorCategory.UNKNOWN

        # A vendor error class can be generic while its status code is specific
        if category in (ErrorCategory.CLIENT_ERROR, ErrorCategory.UNKNOWN) and status_code is not None:
            category = cls._category_from_status(status_code)

        is_retryable = category in (
            ErrorCategory.RATE_LIMIT,
            ErrorCategory.TIMEOUT,
            ErrorCategory.NETWORK,
            ErrorCategory.SERVER_ERROR,
        ) or status_code in cls.RETRYABLE_STATUS_CODES

        return ErrorClassification(category, is_retryable, status_code)

    @classmethod
    def is_retryable(cls, error: Exception) -> bool:
        return cls.classify(error).is_retryable

    @classmethod
    def categorize(cls, error: Exception) -> str:
        """Category value for logging/metrics."""
        return cls.classify(error).category.value
