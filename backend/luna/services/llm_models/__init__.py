from .base import LLMBaseModel, LLMConfigurationError
from .factory import LLMModelFactory

__all__ = ["LLMBaseModel", "LLMConfigurationError", "LLMModelFactory"]
