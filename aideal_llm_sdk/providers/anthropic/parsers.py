from typing import Any


def extract_text_from_messages_response(response: Any) -> str:
    """Extract concatenated text from Anthropic messages.create response."""
    text_content = ""
    for content_block in getattr(response, "content", None) or []:
        if getattr(content_block, "type", None) != "text":
            continue
        text_piece = getattr(content_block, "text", "")
        if text_piece:
            text_content += text_piece
    return text_content
