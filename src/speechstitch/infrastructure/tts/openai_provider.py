from __future__ import annotations

import logging
from pathlib import Path

from openai import OpenAI

from speechstitch.infrastructure.tts.base import ResponseFormat, TTSProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(TTSProvider):
    """TTS provider for OpenAI API (v1.0+).

    Uses tts-1 by default; pass model="tts-1-hd" for the high-definition model.
    """

    name: str = "openai"

    def __init__(self, api_key: str | None = None, model: str = "tts-1") -> None:
        if not api_key:
            raise ValueError("OpenAI API key not found. Set OPENAI_API_KEY or pass api_key.")
        self.client = OpenAI(api_key=api_key)
        self.model = model

    def synth(
        self,
        *,
        text: str,
        voice: str,  # alloy, echo, fable, onyx, nova, shimmer, ...
        style: str | None = None,
        format: ResponseFormat = "mp3",
        out_path: Path,
    ) -> None:
        """Synthesize audio using OpenAI TTS API."""
        if style:
            logger.debug("Style prompts are not supported by OpenAI tts models; ignoring")

        with self.client.audio.speech.with_streaming_response.create(
            model=self.model,
            voice=voice,  # type: ignore[arg-type]
            input=text,
            response_format=format,
        ) as response:
            response.stream_to_file(out_path)
