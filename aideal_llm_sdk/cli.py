"""CLI entry point for the AI router."""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .config.tasks import SERVICE_TASK_MAPPING, TASK_PROVIDER_MAPPING
from .core.routing.router import AIRouter
from .models.generation import MessageRole, UnifiedMessage, UnifiedResponse


def build_router() -> AIRouter:
    return AIRouter.from_env()


def _build_messages(prompt: str, system: Optional[str]) -> List[UnifiedMessage]:
    messages = []
    if system:
        messages.append(UnifiedMessage(role=MessageRole.SYSTEM, content=system))
    messages.append(UnifiedMessage(role=MessageRole.USER, content=prompt))
    return messages


def _build_options(args) -> dict:
    options = {"json_mode": args.json}
    if args.max_tokens is not None:
        options["max_tokens"] = args.max_tokens
    if args.temperature is not None:
        options["temperature"] = args.temperature
    if args.model:
        options["model"] = args.model
    return options


def _print_response(response: UnifiedResponse):
    header = f"Response from {response.provider.value} ({response.model})"
    if response.fell_back:
        header += f" [fallback for {response.requested_provider.value}: {response.fallback_reason}]"
    print(f"{header}:\n")
    print(response.content)
    if response.usage:
        print(f"\nTokens used: {response.usage}")


async def generate_text(args) -> int:
    """Generate text with an explicit provider."""
    router = build_router()
    response = await router.generate_with_ai(
        args.provider, _build_messages(args.prompt, args.system), _build_options(args)
    )
    _print_response(response)
    return 0


async def generate_task(args) -> int:
    """Generate text with the provider mapped to a task."""
    router = build_router()
    response = await router.generate_for_task(
        args.task_type, _build_messages(args.prompt, args.system), _build_options(args)
    )
    _print_response(response)
    return 0


async def compare_providers(args) -> int:
    """Run the same prompt against several providers."""
    router = build_router()
    providers = [p.strip() for p in args.providers.split(",") if p.strip()]
    responses = await router.generate_with_multiple_ais(
        providers, _build_messages(args.prompt, args.system), _build_options(args)
    )
    for response in responses:
        print("-" * 50)
        if response.failed:
            print(f"✗ {response.provider_name}: {response.error} ({response.error_category})")
        else:
            _print_response(response)
    return 0


def show_status(args) -> int:
    """Print which providers are configured."""
    status = build_router().get_provider_status()
    if args.json:
        print(json.dumps(status))
        return 0

    print("Provider Status:")
    print("-" * 50)
    for provider, available in status.items():
        mark = "✓" if available else "✗ (falls back to gpt)"
        print(f"{provider}: {mark}")
    return 0


def list_tasks(args) -> int:
    """Print the task and service task tables."""
    print("Tasks:")
    print("-" * 50)
    for task, provider in TASK_PROVIDER_MAPPING.items():
        print(f"{task.name:<24} -> {provider.value}")

    print("\nService tasks:")
    print("-" * 50)
    for name, task in SERVICE_TASK_MAPPING.items():
        print(f"{name:<26} -> {task.provider.value} ({task.task_type})")
    return 0


def _add_generation_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('prompt', help='User prompt')
    parser.add_argument('--system', help='System instruction')
    parser.add_argument('--json', action='store_true', help='Request raw JSON output')
    parser.add_argument('--max-tokens', type=int, help='Maximum tokens to generate')
    parser.add_argument('--temperature', type=float, help='Temperature (0.0-2.0)')
    parser.add_argument('--model', help='Model override (GPT only)')


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="A.IDEAL AI router CLI")
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    generate_parser = subparsers.add_parser('generate', help='Generate text with a provider')
    generate_parser.add_argument('provider', help='Provider (gpt, claude, grok, gemini)')
    _add_generation_arguments(generate_parser)

    task_parser = subparsers.add_parser('task', help='Generate text for a task type')
    task_parser.add_argument('task_type', help='Task type (e.g. PROMPT_ANALYSIS)')
    _add_generation_arguments(task_parser)

    compare_parser = subparsers.add_parser('compare', help='Run a prompt against several providers')
    compare_parser.add_argument('providers', help='Comma separated providers (e.g. gpt,claude)')
    _add_generation_arguments(compare_parser)

    status_parser = subparsers.add_parser('status', help='Show configured providers')
    status_parser.add_argument('--json', action='store_true', help='Print status as JSON')

    subparsers.add_parser('list-tasks', help='List task routing tables')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    try:
        if args.command == 'generate':
            return asyncio.run(generate_text(args))
        elif args.command == 'task':
            return asyncio.run(generate_task(args))
        elif args.command == 'compare':
            return asyncio.run(compare_providers(args))
        elif args.command == 'status':
            return show_status(args)
        elif args.command == 'list-tasks':
            return list_tasks(args)
        else:
            parser.print_help()
            return 1
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
