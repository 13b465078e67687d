from typing import Optional
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel
from .base import LLMBaseModel
from luna.core.config import settings

class AnthropicModel(LLMBaseModel):
    """
    Strategy for creating Anthropic Claude Models.
    Claude has no JSON response switch, so replies are shaped by the system prompt.
    """

    api_key_setting = "ANTHROPIC_API_KEY"

    def is_provider_for(self, model_name: str) -> bool:
        model_lower = model_name.lower()
        return any(x in model_lower for x in ['claude', 'anthropic'])

    def create_model(
        self,
        model_name: str,
        temperature: float,
        max_tokens: int,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 0,
        **kwargs
    ) -> BaseChatModel:
        return ChatAnthropic(
            model=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            api_key=self.require_api_key(api_key or getattr(settings, self.api_key_setting), "Anthropic"),
            timeout=timeout,
            max_retries=max_retries
        )
