from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal

# Clips are joined with a stream-copy concat, so every clip must be MP3
ResponseFormat = Literal["mp3"]


class TTSProvider(ABC):
    """Abstract base class for TTS providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the (unique) short-name for this provider (e.g. 'eleven')."""

    @abstractmethod
    def synth(
        self,
        *,  # force keyword-only args
        text: str,
        voice: str,  # voice ID
        style: str | None = None,  # style prompt
        format: ResponseFormat = "mp3",
        out_path: Path,
    ) -> None:
        """Synthesise *text* to *out_path* using *voice*.

        Blocking; callers that need concurrency run it in a worker thread.
        """
