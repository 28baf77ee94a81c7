"""Unit tests for individual AI providers."""

import pytest

from aideal_llm_sdk.models.generation import (
    GenerationOptions,
    MessageRole,
    ProviderType,
    UnifiedMessage,
)
from aideal_llm_sdk.providers.anthropic.adapter import ClaudeProvider
from aideal_llm_sdk.providers.anthropic.payloads import (
    JSON_SYSTEM_INSTRUCTION,
    JSON_USER_REMINDER,
    LEADING_USER_TURN,
)
from aideal_llm_sdk.providers.base import EmptyResponseError, ProviderConfigurationError
from aideal_llm_sdk.providers.gemini.adapter import GeminiProvider
from aideal_llm_sdk.providers.openai.adapter import GPTProvider
from aideal_llm_sdk.providers.xai.adapter import GrokProvider
from tests.helpers.mock_exceptions import RateLimitError
from tests.helpers.mock_responses import (
    make_anthropic_client,
    make_chat_completion,
    make_claude_message,
    make_gemini_client,
    make_gemini_response,
    make_openai_client,
)

pytestmark = pytest.mark.unit


def _msgs(*pairs):
    return [UnifiedMessage(role=role, content=content) for role, content in pairs]


class TestGPTProvider:
    """Test GPT provider."""

    @pytest.fixture
    def provider(self, mock_gpt_client):
        return GPTProvider(mock_gpt_client, "gpt-test")

    @pytest.mark.asyncio
    async def test_generate_simple_prompt(self, provider, mock_gpt_client):
        response = await provider.generate(
            _msgs((MessageRole.USER, "Hello")), GenerationOptions()
        )

        assert response.content == "Test response"
        assert response.provider == ProviderType.GPT
        assert response.model == "gpt-test"
        assert response.finish_reason == "stop"
        assert response.usage["total_tokens"] == 15
        assert mock_gpt_client.chat.completions.create.await_count == 1

    @pytest.mark.asyncio
    async def test_developer_role_becomes_system(self, provider, mock_gpt_client):
        messages = _msgs(
            (MessageRole.DEVELOPER, "Rules"),
            (MessageRole.USER, "Hello"),
            (MessageRole.ASSISTANT, "Hi"),
            (MessageRole.USER, "Again"),
        )

        await provider.generate(messages, GenerationOptions())

        sent = mock_gpt_client.chat.completions.create.call_args.kwargs["messages"]
        assert [m["role"] for m in sent] == ["system", "user", "assistant", "user"]
        assert sent[0]["content"] == "Rules"
        assert all(m["role"] != "developer" for m in sent)

    @pytest.mark.asyncio
    async def test_temperature_is_always_one(self, provider, mock_gpt_client):
        await provider.generate(
            _msgs((MessageRole.USER, "Hello")), GenerationOptions(temperature=0.2)
        )

        kwargs = mock_gpt_client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 1

    @pytest.mark.asyncio
    async def test_json_mode_and_max_tokens(self, provider, mock_gpt_client):
        await provider.generate(
            _msgs((MessageRole.USER, "Hello")),
            GenerationOptions(json_mode=True, max_tokens=256)
        )

        kwargs = mock_gpt_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["max_completion_tokens"] == 256
        assert "max_tokens" not in kwargs

    @pytest.mark.asyncio
    async def test_no_optional_fields_by_default(self, provider, mock_gpt_client):
        await provider.generate(_msgs((MessageRole.USER, "Hello")), GenerationOptions())

        kwargs = mock_gpt_client.chat.completions.create.call_args.kwargs
        assert "response_format" not in kwargs
        assert "max_completion_tokens" not in kwargs

    @pytest.mark.asyncio
    async def test_model_override(self, provider, mock_gpt_client):
        response = await provider.generate(
            _msgs((MessageRole.USER, "Hello")), GenerationOptions(model="gpt-5-mini")
        )

        assert mock_gpt_client.chat.completions.create.call_args.kwargs["model"] == "gpt-5-mini"
        assert response.model == "gpt-5-mini"

    @pytest.mark.asyncio
    async def test_zero_choices_raises(self):
        provider = GPTProvider(make_openai_client(make_chat_completion(no_choices=True)), "gpt-test")

        with pytest.raises(EmptyResponseError) as exc_info:
            await provider.generate(_msgs((MessageRole.USER, "Hello")), GenerationOptions())

        assert exc_info.value.provider == "gpt"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   \n"])
    async def test_empty_content_raises_with_finish_reason(self, content):
        completion = make_chat_completion(content=content, finish_reason="length")
        provider = GPTProvider(make_openai_client(completion), "gpt-test")

        with pytest.raises(EmptyResponseError) as exc_info:
            await provider.generate(_msgs((MessageRole.USER, "Hello")), GenerationOptions())

        assert exc_info.value.finish_reason == "length"
        assert "length" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self, provider, mock_gpt_client):
        error = RateLimitError()
        mock_gpt_client.chat.completions.create.side_effect = error

        with pytest.raises(RateLimitError) as exc_info:
            await provider.generate(_msgs((MessageRole.USER, "Hello")), GenerationOptions())

        assert exc_info.value is error

    def test_availability(self, mock_gpt_client):
        assert GPTProvider(mock_gpt_client, "gpt-test").is_available() is True
        assert GPTProvider(None, "gpt-test").is_available() is False

    @pytest.mark.asyncio
    async def test_unconfigured_client_raises(self):
        provider = GPTProvider(None, "gpt-test")

        with pytest.raises(ProviderConfigurationError):
            await provider.generate(_msgs((MessageRole.USER, "Hello")), GenerationOptions())


class TestClaudeProvider:
    """Test Claude provider."""

    @pytest.fixture
    def provider(self, mock_claude_client):
        return ClaudeProvider(mock_claude_client, "claude-test")

    @pytest.mark.asyncio
    async def test_generate_simple_prompt(self, provider, mock_claude_client):
        response = await provider.generate(_msgs((MessageRole.USER, "Hello")), GenerationOptions())

        assert response.content == "Test response"
        assert response.provider == ProviderType.CLAUDE
        assert response.model == "claude-test"
        assert response.finish_reason == "end_turn"
        assert response.usage == {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15}

        kwargs = mock_claude_client.messages.create.call_args.kwargs
        assert kwargs["max_tokens"] == 8192
        assert kwargs["temperature"] == 1.0
        assert "system" not in kwargs

    @pytest.mark.asyncio
    async def test_system_and_developer_are_coalesced(self, provider, mock_claude_client):
        messages = _msgs(
            (MessageRole.SYSTEM, "First rule"),
            (MessageRole.USER, "Hello"),
            (MessageRole.DEVELOPER, "Second rule"),
        )

        await provider.generate(messages, GenerationOptions())

        kwargs = mock_claude_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "First rule\n\nSecond rule"
        assert kwargs["messages"] == [{"role": "user", "content": "Hello"}]

    @pytest.mark.asyncio
    async def test_consecutive_turns_are_merged(self, provider, mock_claude_client):
        messages = _msgs(
            (MessageRole.USER, "One"),
            (MessageRole.USER, "Two"),
            (MessageRole.ASSISTANT, "Reply"),
            (MessageRole.USER, "Three"),
        )

        await provider.generate(messages, GenerationOptions())

        sent = mock_claude_client.messages.create.call_args.kwargs["messages"]
        assert sent == [
            {"role": "user", "content": "One\n\nTwo"},
            {"role": "assistant", "content": "Reply"},
            {"role": "user", "content": "Three"},
        ]

    @pytest.mark.asyncio
    async def test_conversation_opening_with_assistant_starts_with_user(self, provider, mock_claude_client):
        messages = _msgs(
            (MessageRole.SYSTEM, "Rules"),
            (MessageRole.ASSISTANT, "How can I help?"),
            (MessageRole.USER, "Hello"),
        )

        await provider.generate(messages, GenerationOptions())

        sent = mock_claude_client.messages.create.call_args.kwargs["messages"]
        assert sent == [
            {"role": "user", "content": LEADING_USER_TURN},
            {"role": "assistant", "content": "How can I help?"},
            {"role": "user", "content": "Hello"},
        ]

    @pytest.mark.asyncio
    async def test_caller_sampling_options(self, provider, mock_claude_client):
        await provider.generate(
            _msgs((MessageRole.USER, "Hello")),
            GenerationOptions(temperature=0.3, max_tokens=1000)
        )

        kwargs = mock_claude_client.messages.create.call_args.kwargs
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 1000

    @pytest.mark.asyncio
    async def test_json_mode_instructions(self, provider, mock_claude_client):
        mock_claude_client.messages.create.return_value = make_claude_message(['{"a": 1}'])
        messages = _msgs((MessageRole.SYSTEM, "Be terse"), (MessageRole.USER, "Give JSON"))

        await provider.generate(messages, GenerationOptions(json_mode=True))

        kwargs = mock_claude_client.messages.create.call_args.kwargs
        assert kwargs["system"] == f"Be terse\n\n{JSON_SYSTEM_INSTRUCTION}"
        assert kwargs["messages"][-1]["content"] == f"Give JSON\n\n{JSON_USER_REMINDER}"
        assert "response_format" not in kwargs

    @pytest.mark.asyncio
    async def test_json_mode_without_system_prompt(self, provider, mock_claude_client):
        mock_claude_client.messages.create.return_value = make_claude_message(['{"a": 1}'])

        await provider.generate(_msgs((MessageRole.USER, "Give JSON")), GenerationOptions(json_mode=True))

        assert mock_claude_client.messages.create.call_args.kwargs["system"] == JSON_SYSTEM_INSTRUCTION

    @pytest.mark.asyncio
    async def test_json_mode_strips_fence(self):
        message = make_claude_message(['```json\n{"a": 1}\n```'])
        provider = ClaudeProvider(make_anthropic_client(message), "claude-test")

        response = await provider.generate(
            _msgs((MessageRole.USER, "Give JSON")), GenerationOptions(json_mode=True)
        )

        assert response.content == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_json_mode_raw_json_is_trimmed_only(self):
        message = make_claude_message(['  {"a": [1, 2]}\n'])
        provider = ClaudeProvider(make_anthropic_client(message), "claude-test")

        response = await provider.generate(
            _msgs((MessageRole.USER, "Give JSON")), GenerationOptions(json_mode=True)
        )

        assert response.content == '{"a": [1, 2]}'

    @pytest.mark.asyncio
    async def test_fence_kept_without_json_mode(self):
        text = '```json\n{"a": 1}\n```'
        provider = ClaudeProvider(make_anthropic_client(make_claude_message([text])), "claude-test")

        response = await provider.generate(_msgs((MessageRole.USER, "Hi")), GenerationOptions())

        assert response.content == text

    @pytest.mark.asyncio
    async def test_text_blocks_are_concatenated(self):
        message = make_claude_message(["Hello", ", world"])
        message.content.insert(1, type("ToolBlock", (), {"type": "tool_use"})())
        provider = ClaudeProvider(make_anthropic_client(message), "claude-test")

        response = await provider.generate(_msgs((MessageRole.USER, "Hi")), GenerationOptions())

        assert response.content == "Hello, world"

    @pytest.mark.asyncio
    async def test_empty_content_raises_with_stop_reason(self):
        message = make_claude_message([], stop_reason="max_tokens")
        provider = ClaudeProvider(make_anthropic_client(message), "claude-test")

        with pytest.raises(EmptyResponseError) as exc_info:
            await provider.generate(_msgs((MessageRole.USER, "Hi")), GenerationOptions())

        assert exc_info.value.finish_reason == "max_tokens"


class TestGrokProvider:
    """Test Grok provider."""

    @pytest.fixture
    def provider(self, mock_grok_client):
        return GrokProvider(mock_grok_client, "grok-test")

    @pytest.mark.asyncio
    async def test_generate(self, provider, mock_grok_client):
        response = await provider.generate(
            _msgs((MessageRole.DEVELOPER, "Rules"), (MessageRole.USER, "Trends?")),
            GenerationOptions()
        )

        assert response.content == "Test response"
        assert response.provider == ProviderType.GROK
        assert response.model == "grok-test"

        kwargs = mock_grok_client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"][0] == {"role": "system", "content": "Rules"}
        assert kwargs["temperature"] == 1
        assert "response_format" not in kwargs
        assert "max_tokens" not in kwargs

    @pytest.mark.asyncio
    async def test_options_are_passed(self, provider, mock_grok_client):
        await provider.generate(
            _msgs((MessageRole.USER, "Trends?")),
            GenerationOptions(temperature=0.4, json_mode=True, max_tokens=300)
        )

        kwargs = mock_grok_client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 0.4
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["max_tokens"] == 300

    @pytest.mark.asyncio
    async def test_model_override_is_ignored(self, provider, mock_grok_client):
        await provider.generate(_msgs((MessageRole.USER, "Hi")), GenerationOptions(model="gpt-5-mini"))

        assert mock_grok_client.chat.completions.create.call_args.kwargs["model"] == "grok-test"

    @pytest.mark.asyncio
    async def test_empty_content_raises(self):
        provider = GrokProvider(make_openai_client(make_chat_completion(content="")), "grok-test")

        with pytest.raises(EmptyResponseError):
            await provider.generate(_msgs((MessageRole.USER, "Hi")), GenerationOptions())


class TestGeminiProvider:
    """Test Gemini provider."""

    @pytest.fixture
    def provider(self, mock_gemini_client):
        return GeminiProvider(mock_gemini_client, "gemini-test")

    @pytest.mark.asyncio
    async def test_generate(self, provider, mock_gemini_client):
        messages = _msgs(
            (MessageRole.SYSTEM, "Rules"),
            (MessageRole.DEVELOPER, "More rules"),
            (MessageRole.USER, "Hi"),
            (MessageRole.ASSISTANT, "Hello"),
            (MessageRole.USER, "Again"),
        )

        response = await provider.generate(messages, GenerationOptions())

        assert response.content == "Test response"
        assert response.provider == ProviderType.GEMINI
        assert response.finish_reason == "STOP"
        assert response.usage["total_tokens"] == 15

        kwargs = mock_gemini_client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert [c["role"] for c in kwargs["contents"]] == ["user", "model", "user"]
        assert kwargs["contents"][0]["parts"] == [{"text": "Hi"}]

        config = kwargs["config"]
        assert config.system_instruction == "Rules\n\nMore rules"
        assert config.temperature == 1.0
        assert config.max_output_tokens == 8192
        assert config.response_mime_type is None

    @pytest.mark.asyncio
    async def test_json_mode_and_options(self, provider, mock_gemini_client):
        await provider.generate(
            _msgs((MessageRole.USER, "Hi")),
            GenerationOptions(json_mode=True, temperature=0.5, max_tokens=100)
        )

        config = mock_gemini_client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"
        assert config.temperature == 0.5
        assert config.max_output_tokens == 100
        assert config.system_instruction is None

    @pytest.mark.asyncio
    async def test_empty_text_raises_with_finish_reason(self):
        response = make_gemini_response(text=None, finish_reason="SAFETY")
        provider = GeminiProvider(make_gemini_client(response), "gemini-test")

        with pytest.raises(EmptyResponseError) as exc_info:
            await provider.generate(_msgs((MessageRole.USER, "Hi")), GenerationOptions())

        assert exc_info.value.finish_reason == "SAFETY"
