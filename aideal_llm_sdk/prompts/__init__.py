"""Prompt templates and prompt-engineering helpers."""

from .techniques import (
    AdvancedPrompt,
    AdvancedPromptConfig,
    ContextPlacement,
    LongContextStrategy,
    PatternExample,
    PromptStrategy,
    PTCFPrompt,
    TaskComplexity,
    add_chain_of_thought,
    add_self_criticism,
    build_advanced_prompt,
    build_ptcf_prompt,
    create_decomposition_prompt,
    create_positive_pattern_prompt,
    create_prefilled_response,
    determine_strategy,
    get_optimal_temperature,
    optimize_long_context,
    wrap_with_xml_tags,
)
from .templates import (
    create_prompt_analysis_prompt,
    create_prompt_generation_prompt,
    create_question_generation_prompt,
    render_template,
)

__all__ = [
    "AdvancedPrompt",
    "AdvancedPromptConfig",
    "ContextPlacement",
    "LongContextStrategy",
    "PatternExample",
    "PromptStrategy",
    "PTCFPrompt",
    "TaskComplexity",
    "add_chain_of_thought",
    "add_self_criticism",
    "build_advanced_prompt",
    "build_ptcf_prompt",
    "create_decomposition_prompt",
    "create_positive_pattern_prompt",
    "create_prefilled_response",
    "determine_strategy",
    "get_optimal_temperature",
    "optimize_long_context",
    "wrap_with_xml_tags",
    "create_prompt_analysis_prompt",
    "create_prompt_generation_prompt",
    "create_question_generation_prompt",
    "render_template",
]
