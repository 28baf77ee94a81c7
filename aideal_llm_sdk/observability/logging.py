"""
Structured logging for the router and the provider adapters.

Every line is ``[provider=.. model=.. request_id=.. key=value ...] message``
on a standard library logger named ``aideal_llm_sdk.providers.<name>``.
The library never installs handlers.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Sequence

from ..providers.errors import ErrorMapper


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class ProviderLogger:
    """Structured logger bound to one provider (or "router", "http", "config")."""

    def __init__(self, provider_name: str):
        self.provider = provider_name
        self.logger = logging.getLogger(f"aideal_llm_sdk.providers.{provider_name}")

    def _format_message(self, message: str, **fields) -> str:
        parts = [f"provider={self.provider}"]
        parts.extend(f"{key}={value}" for key, value in fields.items() if value is not None)
        return f"[{' '.join(parts)}] {message}"

    def _log(self, level: int, message: str, **fields):
        # Skip formatting when the level is filtered out
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._format_message(message, **fields))

    def debug(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, **kwargs):
        self._log(logging.DEBUG, message, model=model, request_id=request_id, **kwargs)

    def info(self, message: str, model: Optional[str] = None,
             request_id: Optional[str] = None, **kwargs):
        self._log(logging.INFO, message, model=model, request_id=request_id, **kwargs)

    def warning(self, message: str, model: Optional[str] = None,
                request_id: Optional[str] = None, **kwargs):
        self._log(logging.WARNING, message, model=model, request_id=request_id, **kwargs)

    def error(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, error: Optional[Exception] = None, **kwargs):
        """Log an error; ``error`` adds its type, category and message as fields."""
        if error is not None:
            kwargs.update(
                error_type=type(error).__name__,
                error_category=ErrorMapper.categorize(error),
                error_msg=str(error),
            )
        self._log(logging.ERROR, message, model=model, request_id=request_id, **kwargs)

    @contextmanager
    def track_request(self, method: str, model: str,
                      request_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """
        Time one vendor call and log its start, completion or failure.

        Exceptions are logged and re-raised unchanged.

        Args:
            method: Operation name (e.g. "generate")
            model: Model being called
            request_id: Correlation id; generated when omitted

        Yields:
            Dict with ``request_id``, ``model``, ``method`` and ``start_time``
        """
        request_info = {
            'request_id': request_id or new_request_id(),
            'model': model,
            'method': method,
            'start_time': time.monotonic(),
        }
        fields = {'model': model, 'request_id': request_info['request_id'], 'method': method}

        self.debug(f"Starting {method} request", **fields)
        try:
            yield request_info
        except Exception as e:
            elapsed_ms = int((time.monotonic() - request_info['start_time']) * 1000)
            self.error(f"Failed {method} request", duration_ms=elapsed_ms, error=e, **fields)
            raise

        elapsed_ms = int((time.monotonic() - request_info['start_time']) * 1000)
        self.info(f"Completed {method} request", duration_ms=elapsed_ms, **fields)

    def log_request_shape(self, model: str, request_id: str, messages: Sequence[Any],
                          max_tokens: Optional[int] = None, temperature: Optional[float] = None,
                          json_mode: bool = False):
        """Log the shape of an outgoing vendor request (never the content itself)."""
        total_length = 0
        for message in messages:
            if isinstance(message, dict):
                content = message.get("content", message.get("parts"))
            else:
                content = getattr(message, "content", "")
            if isinstance(content, str):
                total_length += len(content)
            elif isinstance(content, list):
                # Gemini-style parts
                for part in content:
                    text = part.get("text") if isinstance(part, dict) else None
                    if isinstance(text, str):
                        total_length += len(text)

        self.info(
            "Request shape",
            model=model,
            request_id=request_id,
            max_tokens=max_tokens if max_tokens is not None else "default",
            temperature=temperature,
            json_mode=json_mode,
            message_count=len(messages),
            content_length=total_length
        )

    def log_response_shape(self, model: str, request_id: str, content: Optional[str],
                           finish_reason: Optional[str] = None,
                           usage: Optional[Dict[str, Any]] = None):
        """Log finish reason, content length and token usage of a vendor answer."""
        usage = usage or {}
        self.info(
            "Response shape",
            model=model,
            request_id=request_id,
            finish_reason=finish_reason or "unknown",
            content_length=len(content or ""),
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
            total_tokens=usage.get("total_tokens")
        )
