"""
Ollama LLM provider implementation.
Connects to an Ollama instance for model inference.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

import ollama
from django.conf import settings

from .base import BaseLLMProvider, ModelResponse

logger = logging.getLogger(__name__)


def _elapsed_ms(start_time: datetime) -> int:
    return int((datetime.now() - start_time).total_seconds() * 1000)


class OllamaProvider(BaseLLMProvider):
    """Provider for interacting with Ollama LLM models."""

    def __init__(self):
        self.client = ollama.AsyncClient(host=getattr(settings, 'OLLAMA_HOST', None))
        self._primary_model = getattr(settings, 'LLM_PRIMARY_MODEL', 'llama3.2:3b')
        self._backup_model = getattr(settings, 'LLM_BACKUP_MODEL', '') or None

    @property
    def primary_model(self) -> str:
        return self._primary_model

    @property
    def backup_model(self) -> Optional[str]:
        return self._backup_model

    async def generate_response(
        self,
        model: str,
        prompt: str,
        system_prompt: Optional[str] = None,
        timeout_seconds: int = 30,
    ) -> ModelResponse:
        start_time = datetime.now()

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await asyncio.wait_for(
                self.client.chat(model=model, messages=messages, stream=False),
                timeout=timeout_seconds,
            )
        except asyncio.TimeoutError:
            return ModelResponse(
                model_name=model,
                response="",
                response_time_ms=timeout_seconds * 1000,
                success=False,
                error=f"Timeout after {timeout_seconds}s",
            )
        except Exception as e:
            logger.warning(f"Ollama request to {model} failed: {e}")
            return ModelResponse(
                model_name=model,
                response="",
                response_time_ms=_elapsed_ms(start_time),
                success=False,
                error=str(e),
            )

        content = (response.get('message', {}).get('content') or '').strip()
        return ModelResponse(
            model_name=model,
            response=content,
            response_time_ms=_elapsed_ms(start_time),
            success=bool(content),
            error=None if content else "Empty response",
        )
