"""TTS provider implementations (ElevenLabs, OpenAI)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ResponseFormat, TTSProvider
from .elevenlabs_provider import ElevenLabsProvider
from .openai_provider import OpenAIProvider

if TYPE_CHECKING:
    from speechstitch.settings import Settings


def build_provider(settings: Settings) -> TTSProvider:
    """Instantiate the provider named by ``settings.tts_provider``."""
    if settings.tts_provider == "eleven":
        return ElevenLabsProvider(
            api_key=settings.elevenlabs_api_key,
            model_id=settings.elevenlabs_model_id,
            stability=settings.elevenlabs_stability,
            similarity_boost=settings.elevenlabs_similarity_boost,
        )
    if settings.tts_provider == "openai":
        return OpenAIProvider(api_key=settings.openai_api_key, model=settings.openai_tts_model)
    raise ValueError(f"Unsupported TTS provider: {settings.tts_provider}")


__all__ = [
    "ElevenLabsProvider",
    "OpenAIProvider",
    "ResponseFormat",
    "TTSProvider",
    "build_provider",
]
