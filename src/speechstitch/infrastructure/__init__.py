"""I/O boundary adapters (TTS APIs, ffmpeg, object storage)."""

from .ffmpeg import AudioToolError, FFmpeg
from .storage import StorageClient
from .tts import (
    ElevenLabsProvider,
    OpenAIProvider,
    ResponseFormat,
    TTSProvider,
    build_provider,
)

__all__ = [
    "AudioToolError",
    "ElevenLabsProvider",
    "FFmpeg",
    "OpenAIProvider",
    "ResponseFormat",
    "StorageClient",
    "TTSProvider",
    "build_provider",
]
