"""
Abstract base class for LLM providers.
Defines the interface that text-generation backends must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class ModelResponse:
    """Response from an LLM model."""
    model_name: str
    response: str
    response_time_ms: int
    success: bool
    error: Optional[str] = None


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate_response(
        self,
        model: str,
        prompt: str,
        system_prompt: Optional[str] = None,
        timeout_seconds: int = 30,
    ) -> ModelResponse:
        """
        Generate a single response from the model.

        Implementations never raise for model or transport errors; they
        return a ModelResponse with success=False and the error text.
        """
        pass

    @property
    @abstractmethod
    def primary_model(self) -> str:
        """Get the primary/default model identifier for this provider."""
        pass

    @property
    @abstractmethod
    def backup_model(self) -> Optional[str]:
        """Get the backup/fallback model identifier for this provider."""
        pass
