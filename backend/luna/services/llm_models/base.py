from abc import ABC, abstractmethod
from typing import Optional
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.runnables import Runnable


class LLMConfigurationError(RuntimeError):
    """Raised when a provider model cannot be built, e.g. no API key is configured."""


class LLMBaseModel(ABC):
    """
    Abstract base class for LLM provider strategies.
    Different providers (OpenAI, Anthropic, etc.) should implement this interface.
    """

    # Settings attribute holding the provider credential
    api_key_setting: str = ""

    @abstractmethod
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
        """
        Creates and returns a LangChain chat model instance.
        """
        pass

    @abstractmethod
    def is_provider_for(self, model_name: str) -> bool:
        """
        Determines if this strategy handles the given model name.
        """
        pass

    def with_json_mode(self, model: BaseChatModel) -> Runnable:
        """
        Ask the provider for a JSON object reply where it has a native switch for it.
        Providers without one rely on the prompt alone.
        """
        return model

    @staticmethod
    def require_api_key(api_key: Optional[str], provider: str) -> str:
        if not api_key:
            raise LLMConfigurationError(f"No API key configured for {provider}")
        return api_key
