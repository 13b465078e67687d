"""
Tests for provider strategy selection and gateway construction from settings.
"""
import pytest
from langchain_anthropic import ChatAnthropic
from langchain_core.runnables import RunnableBinding
from langchain_openai import ChatOpenAI

from luna.core.config import Settings, settings
from luna.services.completion_gateway import CompletionGateway, PROVIDER_FALLBACK_RESPONSE
from luna.services.llm_models import LLMConfigurationError, LLMModelFactory
from luna.services.llm_models.anthropic import AnthropicModel
from luna.services.llm_models.openai import OpenAIModel


@pytest.fixture
def no_api_keys(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", None)


class TestStrategySelection:

    @pytest.mark.parametrize("model_name,strategy", [
        ("gpt-4o", OpenAIModel),
        ("gpt-4o-mini", OpenAIModel),
        ("claude-3-5-sonnet-latest", AnthropicModel),
        ("some-unknown-model", OpenAIModel),
    ])
    def test_strategy_for(self, model_name, strategy):
        assert isinstance(LLMModelFactory().strategy_for(model_name), strategy)

    def test_openai_model_uses_json_mode(self):
        llm = LLMModelFactory().create_json_llm(
            model_name="gpt-4o",
            temperature=0.7,
            max_tokens=500,
            api_key="sk-test",
            timeout=10,
        )

        assert isinstance(llm, RunnableBinding)
        assert isinstance(llm.bound, ChatOpenAI)
        assert llm.kwargs["response_format"] == {"type": "json_object"}

    def test_anthropic_model_is_plain_chat_model(self):
        llm = LLMModelFactory().create_json_llm(
            model_name="claude-3-5-sonnet-latest",
            temperature=0.7,
            max_tokens=500,
            api_key="sk-ant-test",
        )

        assert isinstance(llm, ChatAnthropic)

    def test_missing_key_raises_configuration_error(self, no_api_keys):
        with pytest.raises(LLMConfigurationError):
            LLMModelFactory().create_json_llm(model_name="gpt-4o", temperature=0.7, max_tokens=500)


class TestGatewayFromSettings:

    @pytest.mark.asyncio
    async def test_missing_credential_degrades_to_fallback(self, no_api_keys):
        config = Settings(_env_file=None, LLM_MODEL="gpt-4o", OPENAI_API_KEY=None)

        gateway = CompletionGateway.from_settings(config)

        assert gateway.is_available is False
        result = await gateway.complete("hello")
        assert result.response == PROVIDER_FALLBACK_RESPONSE
        assert result.resources == []

    def test_configured_credential_builds_model(self, no_api_keys):
        config = Settings(_env_file=None, LLM_MODEL="gpt-4o", OPENAI_API_KEY="sk-test", LLM_TIMEOUT_SECONDS=12)

        gateway = CompletionGateway.from_settings(config)

        assert gateway.is_available is True
        assert gateway.timeout == 12
