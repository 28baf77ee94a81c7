"""
Prompt-engineering helpers.

Small composable builders for common techniques (chain of thought, the
Persona/Task/Context/Format layout, XML tagging, decomposition,
self-review, few-shot positive examples, long-context placement) and
``build_advanced_prompt``, which combines them from a single config.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.generation import MessageRole, UnifiedMessage

DEFAULT_TEMPERATURE = 0.7

CONTEXT_SEPARATOR = "\n\n---\n\n"

TEMPERATURE_BY_TASK = {
    # creative
    "creative_writing": 1.0,
    "brainstorming": 0.9,
    "storytelling": 0.8,
    # balanced
    "content_generation": 0.7,
    "translation": 0.5,
    "summarization": 0.5,
    # precision
    "code_generation": 0.2,
    "data_extraction": 0.1,
    "classification": 0.0,
    "math_problems": 0.0,
}


class TaskComplexity(str, Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class ContextPlacement(str, Enum):
    BEGINNING = "beginning"
    MIDDLE = "middle"
    END = "end"


class PTCFPrompt(BaseModel):
    persona: str
    task: str
    context: str
    format: str


class PatternExample(BaseModel):
    input: str
    output: str
    explanation: Optional[str] = None


class LongContextStrategy(BaseModel):
    placement: ContextPlacement = ContextPlacement.MIDDLE
    chunking: bool = False
    chunk_size: Optional[int] = None


class PromptStrategy(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_examples: bool
    example_count: int
    use_chain_of_thought: bool
    use_self_consistency: bool


class AdvancedPromptConfig(BaseModel):
    task: str
    task_complexity: TaskComplexity = TaskComplexity.MEDIUM
    task_type: Optional[str] = None

    persona: Optional[str] = None
    context: Optional[str] = None
    format: Optional[str] = None

    examples: List[PatternExample] = Field(default_factory=list)

    use_chain_of_thought: bool = False
    use_xml_tags: bool = False

    supplementary_info: Optional[List[str]] = None
    context_strategy: Optional[LongContextStrategy] = None


class AdvancedPrompt(BaseModel):
    messages: List[UnifiedMessage]
    temperature: float
    strategy: PromptStrategy


def add_chain_of_thought(instruction: str) -> str:
    return (
        f"{instruction}\n\n"
        "**Think Step by Step:**\n"
        "Before providing your final answer, please:\n"
        "1. Break down the problem into smaller components\n"
        "2. Explain your reasoning for each step\n"
        "3. Verify your logic at each stage\n"
        "4. Then provide the final solution\n\n"
        "Let's work through this systematically."
    )


def build_ptcf_prompt(config: PTCFPrompt) -> str:
    """Lay out a prompt as Persona / Task / Context / Expected Format sections."""
    return (
        f"# Persona\n{config.persona}\n\n"
        f"# Task\n{config.task}\n\n"
        f"# Context\n{config.context}\n\n"
        f"# Expected Format\n{config.format}"
    )


def wrap_with_xml_tags(content: str, tag: str, attributes: Optional[Dict[str, str]] = None) -> str:
    attrs = ""
    if attributes:
        attrs = " " + " ".join(f'{key}="{value}"' for key, value in attributes.items())
    return f"<{tag}{attrs}>\n{content}\n</{tag}>"


def create_prefilled_response(prefill: str) -> UnifiedMessage:
    """Assistant turn that fixes how the answer starts (useful with Claude)."""
    return UnifiedMessage(role=MessageRole.ASSISTANT, content=prefill)


def create_decomposition_prompt(task: str) -> str:
    return (
        "# Task Decomposition\n\n"
        "Break down the following complex task into smaller, manageable steps:\n\n"
        f"{wrap_with_xml_tags(task, 'task')}\n\n"
        "**Requirements:**\n"
        "1. Identify all necessary sub-tasks\n"
        "2. Determine dependencies between steps\n"
        "3. Order steps logically\n"
        "4. Provide clear success criteria for each step\n\n"
        "**Output Format:**\n"
        "Return a JSON array of steps:\n"
        "```json\n"
        "[\n"
        "  {\n"
        '    "id": "step1",\n'
        '    "description": "Clear description of what to do",\n'
        '    "dependencies": [],\n'
        '    "successCriteria": "How to verify completion"\n'
        "  }\n"
        "]\n"
        "```"
    )


def add_self_criticism(initial_response: str) -> str:
    return (
        "You previously provided this response:\n\n"
        f"{wrap_with_xml_tags(initial_response, 'previous_response')}\n\n"
        "Now, critically evaluate your response:\n\n"
        "**Self-Review Checklist:**\n"
        "1. **Accuracy**: Are there any factual errors or misconceptions?\n"
        "2. **Completeness**: Did you address all aspects of the question?\n"
        "3. **Clarity**: Is the explanation clear and easy to understand?\n"
        "4. **Examples**: Would adding examples improve the response?\n"
        "5. **Edge Cases**: Are there important edge cases or caveats to mention?\n\n"
        "After your review, provide an **improved version** that addresses any identified issues."
    )


def _format_pattern_example(index: int, example: PatternExample) -> str:
    lines = [
        f'<example id="{index}">',
        f"<input>{example.input}</input>",
        f"<output>{example.output}</output>",
    ]
    if example.explanation:
        lines.append(f"<why_this_works>{example.explanation}</why_this_works>")
    lines.append("</example>")
    return "\n".join(lines)


def create_positive_pattern_prompt(task: str,
                                   good_examples: List[PatternExample],
                                   user_input: str) -> str:
    """Few-shot prompt that only shows examples of the desired output."""
    examples = "\n\n".join(
        _format_pattern_example(i, example) for i, example in enumerate(good_examples, start=1)
    )
    return (
        f"# Task\n{task}\n\n"
        "# Examples of Excellent Outputs\n"
        "These examples demonstrate the desired pattern:\n\n"
        f"{examples}\n\n"
        "# Your Task\n"
        "Apply the same pattern to this input:\n\n"
        f"{wrap_with_xml_tags(user_input, 'user_input')}"
    )


def optimize_long_context(important_info: str,
                          supplementary_info: List[str],
                          strategy: LongContextStrategy) -> str:
    """Place the critical information at the start, end or middle of long context."""
    chunks = CONTEXT_SEPARATOR.join(supplementary_info)

    if strategy.placement == ContextPlacement.BEGINNING:
        return (
            f"# Critical Information\n{important_info}\n\n---\n\n"
            f"# Supporting Information\n{chunks}"
        )

    if strategy.placement == ContextPlacement.END:
        return (
            f"# Supporting Information\n{chunks}\n\n---\n\n"
            f"# Critical Information (READ THIS CAREFULLY)\n{important_info}"
        )

    half = len(supplementary_info) // 2
    first_half = CONTEXT_SEPARATOR.join(supplementary_info[:half])
    second_half = CONTEXT_SEPARATOR.join(supplementary_info[half:])
    return (
        f"# Context Part 1\n{first_half}\n\n---\n\n"
        f"# MOST IMPORTANT INFORMATION\n{important_info}\n\n---\n\n"
        f"# Context Part 2\n{second_half}"
    )


_STRATEGIES = {
    # zero-shot
    TaskComplexity.SIMPLE: PromptStrategy(
        use_examples=False, example_count=0,
        use_chain_of_thought=False, use_self_consistency=False,
    ),
    # few-shot
    TaskComplexity.MEDIUM: PromptStrategy(
        use_examples=True, example_count=2,
        use_chain_of_thought=False, use_self_consistency=False,
    ),
    TaskComplexity.COMPLEX: PromptStrategy(
        use_examples=True, example_count=3,
        use_chain_of_thought=True, use_self_consistency=True,
    ),
}


def determine_strategy(task_complexity: TaskComplexity) -> PromptStrategy:
    return _STRATEGIES[TaskComplexity(task_complexity)]


def get_optimal_temperature(task_type: str) -> float:
    return TEMPERATURE_BY_TASK.get(task_type, DEFAULT_TEMPERATURE)


def build_advanced_prompt(config: AdvancedPromptConfig) -> AdvancedPrompt:
    """
    Apply the configured techniques and return a single developer message.

    Order: chain of thought, PTCF layout, XML-tagged examples and context,
    then long-context placement. The temperature comes from ``task_type``.
    """
    strategy = determine_strategy(config.task_complexity)
    temperature = get_optimal_temperature(config.task_type) if config.task_type else DEFAULT_TEMPERATURE

    instruction = config.task

    if strategy.use_chain_of_thought or config.use_chain_of_thought:
        instruction = add_chain_of_thought(instruction)

    if config.persona or config.context or config.format:
        instruction = build_ptcf_prompt(PTCFPrompt(
            persona=config.persona or "You are an expert AI assistant.",
            task=instruction,
            context=config.context or "No additional context provided.",
            format=config.format or "Provide a clear, well-structured response.",
        ))

    if config.use_xml_tags:
        if config.examples:
            examples = "\n\n".join(
                wrap_with_xml_tags(
                    f"{wrap_with_xml_tags(ex.input, 'input')}\n{wrap_with_xml_tags(ex.output, 'output')}",
                    "example",
                    {"id": str(i)},
                )
                for i, ex in enumerate(config.examples, start=1)
            )
            instruction += f"\n\n# Examples\n\n{examples}"

        if config.context:
            instruction = instruction.replace(
                config.context, wrap_with_xml_tags(config.context, "context"), 1
            )

    if config.supplementary_info and config.context_strategy:
        instruction = optimize_long_context(
            instruction, config.supplementary_info, config.context_strategy
        )

    return AdvancedPrompt(
        messages=[UnifiedMessage(role=MessageRole.DEVELOPER, content=instruction)],
        temperature=temperature,
        strategy=strategy,
    )
