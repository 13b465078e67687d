"""
Completion Gateway - obtains one structured reply from the text-generation provider.

Packages the system persona, a bounded slice of conversation history and the
new user message into a single LangChain call, then validates the JSON reply.
Every failure is converted into a fixed fallback reply: complete() never raises.
"""
import asyncio
import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import Runnable
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from luna.core.config import Settings, settings as default_settings
from luna.models import Message, MessageRole
from luna.schemas.chat import ResourceStub
from luna.services.llm_models import LLMConfigurationError, LLMModelFactory

logger = logging.getLogger(__name__)

# Number of prior messages sent with each request
HISTORY_WINDOW = 6

DEFAULT_TOPIC_LABEL = "general conversation"

PARSE_FALLBACK_RESPONSE = (
    "I'm here to listen and support you. Could you tell me more about what's on your mind? 💜"
)
PROVIDER_FALLBACK_RESPONSE = (
    "I'm having trouble responding right now, but I'm still here for you. "
    "Could you try sharing that with me again? 💙"
)

SYSTEM_PROMPT_TEMPLATE = """You are Luna, a supportive AI companion designed specifically for teenage girls. You provide a safe, judgment-free space for discussing sensitive topics including mental health, relationships, menstrual health, and other traditionally taboo subjects.

Your personality traits:
- Warm, empathetic, and non-judgmental
- Use age-appropriate language for teenagers
- Validate feelings and experiences
- Provide practical, actionable advice
- Know when to recommend professional help
- Be encouraging and supportive
- Use gentle, caring tone with occasional emojis (💙💜💕)

Current topic context: {topic}

Guidelines:
- Keep responses concise but meaningful (2-3 sentences usually)
- Ask follow-up questions to encourage dialogue
- Provide helpful resources when appropriate
- If discussing serious mental health issues, gently suggest professional support
- Always maintain a supportive, understanding tone
- Remember this is a safe space for sensitive topics

Respond in JSON format with:
{{
  "response": "your empathetic response",
  "resources": [optional array of relevant resources, each {{"title": "...", "description": "...", "url": "..."}}]
}}"""

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class ReplyOutcome(str, enum.Enum):
    """How a completion was produced"""
    PARSED = "parsed"
    FALLBACK = "fallback"


class CompletionResult(BaseModel):
    """Reply handed back to the chat orchestrator"""
    response: str
    resources: List[ResourceStub] = []
    outcome: ReplyOutcome = ReplyOutcome.PARSED


class ProviderReply(BaseModel):
    """Shape the provider is asked to return. Resources are checked one by one."""
    model_config = ConfigDict(str_strip_whitespace=True)

    response: str = Field(..., min_length=1)
    resources: Any = None


@dataclass(frozen=True)
class Ok:
    reply: CompletionResult


@dataclass(frozen=True)
class Err:
    reason: str


ProviderResult = Union[Ok, Err]


def provider_fallback() -> CompletionResult:
    return CompletionResult(
        response=PROVIDER_FALLBACK_RESPONSE,
        resources=[],
        outcome=ReplyOutcome.FALLBACK,
    )


def extract_text_content(content: Any) -> str:
    """
    Extract text content from response.content which might be a string or list.

    Args:
        content: Response content (str or list of content blocks)

    Returns:
        Extracted text as string
    """
    if isinstance(content, str):
        return content
    elif isinstance(content, list):
        text_parts = []
        for block in content:
            if isinstance(block, dict) and block.get('type') == 'text':
                text_parts.append(block.get('text', ''))
            elif isinstance(block, str):
                text_parts.append(block)
        return ''.join(text_parts)
    else:
        return str(content)


def parse_reply(raw: str) -> CompletionResult:
    """
    Validate the provider's text as a `{response, resources}` JSON object.

    Unusable text yields the parse fallback. Malformed resource entries are
    dropped without discarding the response itself.
    """
    text = _CODE_FENCE.sub("", raw.strip())
    try:
        reply = ProviderReply.model_validate_json(text)
    except ValidationError as e:
        logger.warning("Discarding unusable provider reply: %s", e.errors()[0]["type"] if e.errors() else e)
        return CompletionResult(
            response=PARSE_FALLBACK_RESPONSE,
            resources=[],
            outcome=ReplyOutcome.FALLBACK,
        )

    resources: List[ResourceStub] = []
    suggestions = reply.resources if isinstance(reply.resources, list) else []
    for item in suggestions:
        try:
            resources.append(ResourceStub.model_validate(item))
        except ValidationError:
            logger.debug("Dropping malformed resource suggestion: %r", item)

    return CompletionResult(response=reply.response, resources=resources)


class CompletionGateway:
    """
    Isolates the chat flow from the provider's API shape and failure modes.
    """

    def __init__(self, llm: Optional[Runnable], timeout: Optional[float] = None):
        """
        Args:
            llm: LangChain runnable returning an AIMessage, or None when no
                provider is configured (every call then falls back)
            timeout: Upper bound in seconds on a single provider call
        """
        self.llm = llm
        self.timeout = timeout

    @classmethod
    def from_settings(
        cls,
        config: Settings = default_settings,
        factory: Optional[LLMModelFactory] = None
    ) -> "CompletionGateway":
        """
        Build a gateway for the configured model.

        A missing credential does not stop the service: the gateway is
        created without a model and answers with the fallback reply.
        """
        factory = factory or LLMModelFactory()
        strategy = factory.strategy_for(config.LLM_MODEL)
        try:
            llm = factory.create_json_llm(
                model_name=config.LLM_MODEL,
                temperature=config.LLM_TEMPERATURE,
                max_tokens=config.LLM_MAX_TOKENS,
                api_key=getattr(config, strategy.api_key_setting, None),
                timeout=config.LLM_TIMEOUT_SECONDS,
                max_retries=config.LLM_MAX_RETRIES
            )
        except LLMConfigurationError as e:
            logger.warning("Completion provider unavailable, using fallback replies: %s", e)
            llm = None
        return cls(llm=llm, timeout=config.LLM_TIMEOUT_SECONDS)

    @property
    def is_available(self) -> bool:
        return self.llm is not None

    @staticmethod
    def build_system_prompt(topic: Optional[str] = None) -> str:
        return SYSTEM_PROMPT_TEMPLATE.format(topic=topic or DEFAULT_TOPIC_LABEL)

    def build_messages(
        self,
        user_message: str,
        topic: Optional[str] = None,
        history: Optional[Sequence[Message]] = None
    ) -> List[BaseMessage]:
        """
        Assemble the ordered turns for one request.

        Only the last HISTORY_WINDOW prior messages are included.
        """
        messages: List[BaseMessage] = [SystemMessage(content=self.build_system_prompt(topic))]

        for msg in list(history or [])[-HISTORY_WINDOW:]:
            if msg.role == MessageRole.USER:
                messages.append(HumanMessage(content=msg.content))
            elif msg.role == MessageRole.ASSISTANT:
                messages.append(AIMessage(content=msg.content))

        messages.append(HumanMessage(content=user_message))
        return messages

    async def complete(
        self,
        user_message: str,
        topic: Optional[str] = None,
        history: Optional[Sequence[Message]] = None
    ) -> CompletionResult:
        """
        Generate the assistant's reply for one chat turn.

        Returns:
            CompletionResult, the provider fallback when the call failed
        """
        result = await self._call_provider(self.build_messages(user_message, topic, history))

        if isinstance(result, Err):
            logger.warning("Completion provider failed, using fallback reply: %s", result.reason)
            return provider_fallback()
        return result.reply

    async def _call_provider(self, messages: List[BaseMessage]) -> ProviderResult:
        if self.llm is None:
            return Err("provider not configured")

        try:
            response = await asyncio.wait_for(self.llm.ainvoke(messages), timeout=self.timeout)
        except asyncio.TimeoutError:
            return Err(f"timed out after {self.timeout}s")
        except Exception as e:
            return Err(f"{type(e).__name__}: {e}")

        return Ok(parse_reply(extract_text_content(getattr(response, "content", response))))
