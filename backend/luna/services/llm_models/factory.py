from typing import List, Optional
from langchain_core.runnables import Runnable
from .base import LLMBaseModel
from .openai import OpenAIModel
from .anthropic import AnthropicModel

class LLMModelFactory:
    """
    Factory class to create LLM models using registered strategies.
    Implements the Strategy Pattern context.
    """

    def __init__(self):
        # Register available strategies
        self.strategies: List[LLMBaseModel] = [
            OpenAIModel(),
            AnthropicModel()
        ]

    def strategy_for(self, model_name: str) -> LLMBaseModel:
        """
        Iterates through registered strategies to find one that supports the model_name.
        Unknown names are treated as OpenAI models.
        """
        for strategy in self.strategies:
            if strategy.is_provider_for(model_name):
                return strategy
        return self.strategies[0]

    def create_json_llm(
        self,
        model_name: str,
        temperature: float,
        max_tokens: int,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: int = 0
    ) -> Runnable:
        """
        Build a chat model that is asked to answer with a JSON object.

        Raises:
            LLMConfigurationError: If the provider has no API key
        """
        strategy = self.strategy_for(model_name)
        model = strategy.create_model(
            model_name=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries
        )
        return strategy.with_json_mode(model)
