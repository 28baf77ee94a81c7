"""Normalization helpers: message role translation, JSON payload recovery, usage."""

from .json_extraction import extract_json_payload, is_valid_json, looks_like_json
from .messages import (
    coerce_messages,
    merge_consecutive_turns,
    split_system_messages,
    to_openai_messages,
    validate_messages,
)
from .usage import normalize_usage

__all__ = [
    "extract_json_payload",
    "is_valid_json",
    "looks_like_json",
    "coerce_messages",
    "merge_consecutive_turns",
    "split_system_messages",
    "to_openai_messages",
    "validate_messages",
    "normalize_usage",
]
