from typing import Any, Dict, List, Optional, Tuple

from ...models.generation import GenerationOptions, MessageRole, UnifiedMessage
from ...core.normalization.messages import merge_consecutive_turns, split_system_messages

CLAUDE_DEFAULT_MAX_TOKENS = 8192
CLAUDE_DEFAULT_TEMPERATURE = 1.0

JSON_SYSTEM_INSTRUCTION = (
    "IMPORTANT: You must respond with valid JSON only. "
    "Do not wrap the JSON in markdown code blocks. "
    "Do not include any explanatory text before or after the JSON. "
    "Return only the raw JSON object."
)

JSON_USER_REMINDER = (
    "REMINDER: Respond with valid JSON only. "
    "No markdown code blocks, no explanations, just the raw JSON."
)

LEADING_USER_TURN = "Continue the conversation."


def to_claude_messages(conversation: List[UnifiedMessage]) -> List[Dict[str, str]]:
    """Map user/assistant turns to Anthropic messages with strict alternation.

    The Messages API requires the first turn to come from the user, so a
    conversation opening with an assistant turn gets ``LEADING_USER_TURN``
    in front of it.
    """
    turns = []
    for msg in conversation:
        role = "user" if msg.role == MessageRole.USER else "assistant"
        turns.append({"role": role, "content": msg.content})
    turns = merge_consecutive_turns(turns)
    if turns and turns[0]["role"] == "assistant":
        turns.insert(0, {"role": "user", "content": LEADING_USER_TURN})
    return turns


def apply_json_instructions(system: Optional[str],
                            messages: List[Dict[str, str]]) -> Tuple[Optional[str], List[Dict[str, str]]]:
    """Emulate JSON mode: Claude has no response_format, so instruct it in the prompt.

    The instruction is appended to the system prompt and a reminder to the
    final message when that message is from the user.
    """
    if system:
        system = f"{system}\n\n{JSON_SYSTEM_INSTRUCTION}"
    else:
        system = JSON_SYSTEM_INSTRUCTION

    messages = [dict(m) for m in messages]
    if messages and messages[-1]["role"] == "user":
        messages[-1]["content"] = f"{messages[-1]['content']}\n\n{JSON_USER_REMINDER}"
    return system, messages


def build_messages_payload(model: str,
                           messages: List[UnifiedMessage],
                           options: GenerationOptions) -> Dict[str, Any]:
    """Assemble messages.create parameters.

    ``system`` is omitted when there is no system text.
    """
    system, conversation = split_system_messages(messages)
    claude_messages = to_claude_messages(conversation)

    if options.json_mode:
        system, claude_messages = apply_json_instructions(system, claude_messages)

    params: Dict[str, Any] = {
        "model": model,
        "max_tokens": options.max_tokens or CLAUDE_DEFAULT_MAX_TOKENS,
        "temperature": (
            options.temperature if options.temperature is not None else CLAUDE_DEFAULT_TEMPERATURE
        ),
        "messages": claude_messages,
    }
    if system:
        params["system"] = system
    return params
