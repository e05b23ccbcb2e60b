"""
LLM provider abstraction layer.

Text-generation backends (currently Ollama) behind a common interface.
"""

from .base import BaseLLMProvider, ModelResponse
from .factory import get_llm_provider, reset_provider
from .ollama import OllamaProvider


__all__ = [
    'BaseLLMProvider',
    'ModelResponse',
    'get_llm_provider',
    'reset_provider',
    'OllamaProvider',
]
