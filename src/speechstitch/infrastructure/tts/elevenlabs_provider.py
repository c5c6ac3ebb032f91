from __future__ import annotations

import logging
from pathlib import Path

from elevenlabs import ElevenLabs, VoiceSettings

from speechstitch.infrastructure.tts.base import ResponseFormat, TTSProvider

logger = logging.getLogger(__name__)

# ElevenLabs encodes format, sample rate and bitrate in one identifier
OUTPUT_FORMATS: dict[str, str] = {
    "mp3": "mp3_44100_128",
}


class ElevenLabsProvider(TTSProvider):
    """TTS provider for ElevenLabs API."""

    name: str = "eleven"

    def __init__(
        self,
        api_key: str | None = None,
        model_id: str = "eleven_monolingual_v1",
        stability: float = 0.5,
        similarity_boost: float = 0.5,
    ) -> None:
        if not api_key:
            raise ValueError(
                "ElevenLabs API key not found. Set ELEVENLABS_API_KEY or pass api_key."
            )
        self.client = ElevenLabs(api_key=api_key)
        self.model_id = model_id
        self.voice_settings = VoiceSettings(
            stability=stability,
            similarity_boost=similarity_boost,
        )

    def synth(
        self,
        *,
        text: str,
        voice: str,
        style: str | None = None,
        format: ResponseFormat = "mp3",
        out_path: Path,
    ) -> None:
        """Synthesize audio using ElevenLabs API and stream it to *out_path*."""
        output_format = OUTPUT_FORMATS.get(format)
        if output_format is None:
            raise ValueError(f"Unsupported ElevenLabs output format: {format}")
        if style:
            logger.debug("Style prompts are not supported by ElevenLabs; ignoring")

        audio_stream = self.client.text_to_speech.convert(
            voice_id=voice,
            text=text,
            model_id=self.model_id,
            output_format=output_format,
            voice_settings=self.voice_settings,
        )
        with open(out_path, "wb") as f:
            for chunk in audio_stream:
                if isinstance(chunk, bytes):
                    f.write(chunk)
