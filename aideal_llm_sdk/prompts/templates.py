"""
Prompt templates for the prompt-builder features.

Each builder returns ``[developer message, user message]``: the developer
message holds identity, rules and few-shot examples (stable across calls, so
vendors can cache it); the user message holds the request context and ends
with an output prefix.
"""

from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models.generation import MessageRole, UnifiedMessage

_TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_DIR)),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    autoescape=False,
)

# Tools the prompt generator may recommend
AVAILABLE_TOOLS = [
    ("chatgpt", "GPT-5 for creative content, structured outputs"),
    ("claude", "Claude for long context, analysis, code generation"),
    ("gemini", "Google Gemini for multimodal tasks"),
    ("midjourney", "AI image generation"),
    ("dall-e", "OpenAI image generation"),
    ("github-copilot", "Code completion and generation"),
    ("perplexity", "AI-powered search and research"),
    ("stable-diffusion", "Open-source image generation"),
    ("eleven-labs", "AI voice generation"),
    ("runway", "AI video editing and generation"),
    ("grok", "Real-time information and trends"),
    ("sora-2", "AI video generation"),
    ("veo-3", "Google video generation"),
]

# Overall score weights (percent) used by the analysis prompt
ANALYSIS_WEIGHTS = {"clarity": 30, "specificity": 40, "structure": 30}


def render_template(name: str, **context) -> str:
    """Render ``name`` (relative to the templates directory) with ``context``."""
    return _env.get_template(name).render(**context).strip()


def _message_pair(template_prefix: str, **context) -> List[UnifiedMessage]:
    return [
        UnifiedMessage(
            role=MessageRole.DEVELOPER,
            content=render_template(f"{template_prefix}_developer.j2", **context),
        ),
        UnifiedMessage(
            role=MessageRole.USER,
            content=render_template(f"{template_prefix}_user.j2", **context),
        ),
    ]


def create_question_generation_prompt(topic: str,
                                      existing_prompt: Optional[str] = None) -> List[UnifiedMessage]:
    """Messages asking for 5 clarifying questions about ``topic`` as JSON."""
    return _message_pair(
        "question_generation",
        topic=topic,
        existing_prompt=existing_prompt,
    )


def create_prompt_generation_prompt(topic: str,
                                    answers: Dict[str, str],
                                    existing_prompt: Optional[str] = None) -> List[UnifiedMessage]:
    """
    Messages asking for a production-ready prompt built from Q&A answers.

    Args:
        topic: The user's goal
        answers: Question -> answer pairs, rendered as ``<qa>`` blocks in order
        existing_prompt: Prompt to refine instead of creating a new one
    """
    return _message_pair(
        "prompt_generation",
        topic=topic,
        answers=list(answers.items()),
        existing_prompt=existing_prompt,
        tools=AVAILABLE_TOOLS,
    )


def create_prompt_analysis_prompt(prompt: str) -> List[UnifiedMessage]:
    return _message_pair("prompt_analysis", prompt=prompt, weights=ANALYSIS_WEIGHTS)
