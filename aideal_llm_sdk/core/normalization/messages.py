"""
Message normalization shared by the provider adapters.

Callers hand the router a list of UnifiedMessage (or plain role/content
dicts). Vendors differ in which roles they accept and in where the system
instruction lives, so each adapter picks the helpers it needs from here.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from ...models.generation import MessageRole, UnifiedMessage
from ...providers.base import InvalidRequestError

MessageInput = Union[UnifiedMessage, Dict[str, Any]]

SYSTEM_SEPARATOR = "\n\n"


def coerce_messages(messages: Union[str, Iterable[MessageInput]]) -> List[UnifiedMessage]:
    """Convert a prompt string, dicts or UnifiedMessage objects into UnifiedMessage."""
    if isinstance(messages, str):
        return [UnifiedMessage(role=MessageRole.USER, content=messages)]

    if messages is None:
        raise InvalidRequestError("messages must not be None")

    coerced = []
    for msg in messages:
        if isinstance(msg, UnifiedMessage):
            coerced.append(msg)
            continue
        if isinstance(msg, dict) and 'role' in msg and 'content' in msg:
            try:
                coerced.append(UnifiedMessage(role=msg['role'], content=msg['content']))
            except ValidationError as e:
                raise InvalidRequestError(f"Invalid message {msg!r}: {e}") from e
            continue
        if hasattr(msg, 'role') and hasattr(msg, 'content'):
            try:
                coerced.append(UnifiedMessage(role=msg.role, content=msg.content))
            except ValidationError as e:
                raise InvalidRequestError(f"Invalid message {msg!r}: {e}") from e
            continue
        raise InvalidRequestError(f"Invalid message format: {type(msg)} - {msg}")
    return coerced


def validate_messages(messages: Union[str, Iterable[MessageInput]]) -> List[UnifiedMessage]:
    """Coerce and check the request contract: non-empty, at least one user turn."""
    coerced = coerce_messages(messages)
    if not coerced:
        raise InvalidRequestError("messages must not be empty")
    if not any(m.role == MessageRole.USER for m in coerced):
        raise InvalidRequestError("messages must contain at least one user message")
    return coerced


def to_openai_messages(messages: List[UnifiedMessage]) -> List[Dict[str, str]]:
    """
    Format messages for OpenAI-compatible chat completions (GPT and Grok).

    ``developer`` is rewritten to ``system``; order is preserved.
    """
    formatted = []
    for msg in messages:
        role = MessageRole.SYSTEM if msg.role == MessageRole.DEVELOPER else msg.role
        formatted.append({"role": role.value, "content": msg.content})
    return formatted


def split_system_messages(messages: List[UnifiedMessage]) -> Tuple[Optional[str], List[UnifiedMessage]]:
    """
    Separate system-level instructions from conversation turns.

    All ``system`` and ``developer`` contents are joined, in order, into a
    single instruction string for vendors that accept only one.

    Returns:
        (system text or None, remaining user/assistant messages)
    """
    system_parts = []
    conversation = []
    for msg in messages:
        if msg.is_system_level:
            if msg.content.strip():
                system_parts.append(msg.content)
        else:
            conversation.append(msg)

    system_text = SYSTEM_SEPARATOR.join(system_parts) if system_parts else None
    return system_text, conversation


def merge_consecutive_turns(messages: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Merge adjacent same-role turns so roles strictly alternate."""
    merged: List[Dict[str, str]] = []
    for msg in messages:
        if merged and merged[-1]["role"] == msg["role"]:
            merged[-1] = {
                "role": msg["role"],
                "content": f"{merged[-1]['content']}{SYSTEM_SEPARATOR}{msg['content']}",
            }
        else:
            merged.append(dict(msg))
    return merged
