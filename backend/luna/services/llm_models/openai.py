from typing import Optional
from langchain_openai import ChatOpenAI
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.runnables import Runnable
from .base import LLMBaseModel
from luna.core.config import settings

class OpenAIModel(LLMBaseModel):
    """
    Strategy for creating OpenAI Chat Models.
    """

    api_key_setting = "OPENAI_API_KEY"

    def is_provider_for(self, model_name: str) -> bool:
        model_lower = model_name.lower()
        return any(x in model_lower for x in ['gpt', 'o1', 'o3', 'o4', 'openai'])

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
        return ChatOpenAI(
            model=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            api_key=self.require_api_key(api_key or getattr(settings, self.api_key_setting), "OpenAI"),
            timeout=timeout,
            max_retries=max_retries
        )

    def with_json_mode(self, model: BaseChatModel) -> Runnable:
        return model.bind(response_format={"type": "json_object"})
