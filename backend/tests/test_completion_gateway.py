"""
Tests for the Completion Gateway

Covers prompt assembly, context-window trimming, reply validation and the
fallback paths for provider failures.
"""
import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from luna.models import Message, MessageRole
from luna.services.completion_gateway import (
    DEFAULT_TOPIC_LABEL,
    HISTORY_WINDOW,
    PARSE_FALLBACK_RESPONSE,
    PROVIDER_FALLBACK_RESPONSE,
    CompletionGateway,
    ReplyOutcome,
    extract_text_content,
    parse_reply,
)

from conftest import provider_json


def history_of(count: int):
    roles = [MessageRole.USER, MessageRole.ASSISTANT]
    return [Message(role=roles[i % 2], content=f"message {i}") for i in range(count)]


def recording_llm(reply: str = None):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content=reply or provider_json("ok")))
    return llm


class TestPromptAssembly:
    """Test the turns sent to the provider"""

    def test_system_prompt_mentions_topic(self):
        prompt = CompletionGateway.build_system_prompt("menstrual-health")
        assert "Current topic context: menstrual-health" in prompt
        assert '"response"' in prompt

    def test_system_prompt_default_topic(self):
        prompt = CompletionGateway.build_system_prompt(None)
        assert f"Current topic context: {DEFAULT_TOPIC_LABEL}" in prompt

    def test_message_order_and_roles(self):
        gateway = CompletionGateway(llm=None)
        history = history_of(2)

        messages = gateway.build_messages("how are you?", "relationships", history)

        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage) and messages[1].content == "message 0"
        assert isinstance(messages[2], AIMessage) and messages[2].content == "message 1"
        assert isinstance(messages[-1], HumanMessage) and messages[-1].content == "how are you?"

    def test_history_trimmed_to_last_six(self):
        gateway = CompletionGateway(llm=None)

        messages = gateway.build_messages("new", None, history_of(10))

        prior = [m.content for m in messages[1:-1]]
        assert len(prior) == HISTORY_WINDOW == 6
        assert prior == [f"message {i}" for i in range(4, 10)]

    @pytest.mark.asyncio
    async def test_provider_receives_trimmed_context(self):
        llm = recording_llm()
        gateway = CompletionGateway(llm=llm, timeout=5)

        await gateway.complete("latest", topic="mental-health", history=history_of(8))

        sent = llm.ainvoke.await_args.args[0]
        assert len(sent) == 1 + HISTORY_WINDOW + 1
        assert sent[1].content == "message 2"


class TestReplyParsing:
    """Test validation of the provider's JSON reply"""

    def test_valid_reply(self):
        result = parse_reply(provider_json("You are not alone 💙", [
            {"title": "988 Lifeline", "description": "24/7 support", "url": "tel:988"},
            {"title": "Journal", "description": "Write it down"},
        ]))

        assert result.outcome == ReplyOutcome.PARSED
        assert result.response == "You are not alone 💙"
        assert [r.title for r in result.resources] == ["988 Lifeline", "Journal"]
        assert result.resources[1].url is None

    def test_resources_optional(self):
        result = parse_reply(json.dumps({"response": "Hi there"}))
        assert result.outcome == ReplyOutcome.PARSED
        assert result.resources == []

    def test_code_fenced_json(self):
        result = parse_reply("```json\n" + provider_json("fenced") + "\n```")
        assert result.response == "fenced"

    @pytest.mark.parametrize("raw", [
        "",
        "not json at all",
        "[1, 2, 3]",
        json.dumps({"resources": []}),
        json.dumps({"response": "   "}),
        json.dumps({"response": 42}),
    ])
    def test_unusable_reply_falls_back(self, raw):
        result = parse_reply(raw)

        assert result.outcome == ReplyOutcome.FALLBACK
        assert result.response == PARSE_FALLBACK_RESPONSE
        assert result.resources == []

    def test_malformed_resources_are_dropped(self):
        result = parse_reply(json.dumps({
            "response": "Here are some ideas",
            "resources": [{"title": "Good", "description": "ok"}, {"url": "no title"}, "junk"],
        }))

        assert result.outcome == ReplyOutcome.PARSED
        assert [r.title for r in result.resources] == ["Good"]

    def test_non_list_resources_ignored(self):
        result = parse_reply(json.dumps({"response": "Hello", "resources": "none"}))
        assert result.response == "Hello"
        assert result.resources == []

    def test_extract_text_from_content_blocks(self):
        content = [{"type": "text", "text": '{"response": '}, '"hi"}', {"type": "tool_use"}]
        assert extract_text_content(content) == '{"response": "hi"}'


class TestProviderFailures:
    """Test that provider failures never escape the gateway"""

    @pytest.mark.asyncio
    async def test_successful_completion(self, gateway):
        result = await gateway.complete("I feel anxious", topic="mental-health")

        assert result.outcome == ReplyOutcome.PARSED
        assert "weighing on you" in result.response
        assert result.resources[0].url == "sms:741741"

    @pytest.mark.asyncio
    async def test_provider_error_returns_fallback(self):
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=RuntimeError("502 Bad Gateway"))
        gateway = CompletionGateway(llm=llm, timeout=5)

        result = await gateway.complete("hello")

        assert result.response == PROVIDER_FALLBACK_RESPONSE
        assert result.resources == []
        assert result.outcome == ReplyOutcome.FALLBACK

    @pytest.mark.asyncio
    async def test_timeout_returns_fallback(self):
        async def never_answers(*args, **kwargs):
            await asyncio.sleep(5)

        llm = MagicMock()
        llm.ainvoke = never_answers
        gateway = CompletionGateway(llm=llm, timeout=0.01)

        result = await gateway.complete("hello")

        assert result.response == PROVIDER_FALLBACK_RESPONSE
        assert result.resources == []

    @pytest.mark.asyncio
    async def test_missing_provider_returns_fallback(self, offline_gateway):
        assert offline_gateway.is_available is False

        result = await offline_gateway.complete("hello")

        assert result.response == PROVIDER_FALLBACK_RESPONSE

    @pytest.mark.asyncio
    async def test_unparseable_reply_uses_parse_fallback(self):
        gateway = CompletionGateway(llm=FakeListChatModel(responses=["sorry, plain text"]), timeout=5)

        result = await gateway.complete("hello")

        assert result.response == PARSE_FALLBACK_RESPONSE
        assert result.outcome == ReplyOutcome.FALLBACK
