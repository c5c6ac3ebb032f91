from __future__ import annotations

import asyncio
import logging
import shutil
from functools import lru_cache
from pathlib import Path
from uuid import uuid4

from speechstitch.infrastructure import FFmpeg, StorageClient, TTSProvider, build_provider
from speechstitch.models import StitchRequest, StitchResult
from speechstitch.settings import get_settings

logger = logging.getLogger(__name__)


def interleave(clips: list[Path], silence: Path | None) -> list[Path]:
    """Return clip, silence, clip, ..., clip; the clips alone when *silence* is None."""
    if silence is None:
        return list(clips)
    ordered: list[Path] = []
    for i, clip in enumerate(clips):
        ordered.append(clip)
        if i < len(clips) - 1:
            ordered.append(silence)
    return ordered


class SpeechStitcher:
    """Narrate a list of texts and store them as one audio file with silence gaps."""

    def __init__(
        self,
        provider: TTSProvider,
        storage: StorageClient,
        audio_tool: FFmpeg,
        default_voice_id: str,
        work_dir: str | Path = "/tmp/tts",
        output_prefix: str = "tts-output",
    ) -> None:
        self.provider = provider
        self.storage = storage
        self.audio_tool = audio_tool
        self.default_voice_id = default_voice_id
        self.work_dir = Path(work_dir)
        self.output_prefix = output_prefix.rstrip("/")

    async def stitch(self, request: StitchRequest) -> StitchResult:
        voice_id = request.voice_id or self.default_voice_id
        key = request.output_key or f"{self.output_prefix}/{uuid4()}.mp3"
        gap = request.gap_seconds

        # Left in place if any step below raises
        scratch = self.work_dir / uuid4().hex
        await asyncio.to_thread(scratch.mkdir, parents=True, exist_ok=True)

        logger.info(
            f"Stitching {len(request.texts)} clips with {gap}s gaps "
            f"(provider={self.provider.name}, voice={voice_id}) -> {key}"
        )
        clips = await self.synthesize_clips(request.texts, voice_id, scratch)

        silence = None
        if len(clips) > 1 and gap > 0:
            silence = await self.audio_tool.generate_silence(gap, scratch / "silence.mp3")

        output_path = await self.audio_tool.concatenate(
            interleave(clips, silence), scratch / "output.mp3"
        )
        audio_data = await asyncio.to_thread(output_path.read_bytes)
        logger.info(f"Assembled {output_path.name} ({len(audio_data)} bytes)")

        await self.storage.upload_audio_file(key, audio_data)
        await asyncio.to_thread(shutil.rmtree, scratch, ignore_errors=True)

        return StitchResult(
            bucket=self.storage.bucket,
            key=key,
            clip_count=len(request.texts),
            gap_seconds=gap,
        )

    async def synthesize_clips(self, texts: list[str], voice_id: str, work_dir: Path) -> list[Path]:
        """Synthesize every text concurrently; paths come back in input order."""
        clip_paths = [work_dir / f"clip_{i}.mp3" for i in range(len(texts))]

        async def _synth(text: str, out_path: Path) -> None:
            logger.debug(f"Synthesizing {out_path.name} ({len(text)} chars)")
            await asyncio.to_thread(
                self.provider.synth,
                text=text,
                voice=voice_id,
                format="mp3",
                out_path=out_path,
            )

        await asyncio.gather(*(_synth(text, path) for text, path in zip(texts, clip_paths)))
        logger.info(f"Synthesized {len(clip_paths)} clips")
        return clip_paths


@lru_cache
def get_stitcher() -> SpeechStitcher:
    """Return the process-wide stitcher built from settings."""
    settings = get_settings()
    return SpeechStitcher(
        provider=build_provider(settings),
        storage=StorageClient(
            bucket=settings.s3_bucket,
            region=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
            access_key_id=settings.s3_access_key_id,
            secret_access_key=settings.s3_secret_access_key,
        ),
        audio_tool=FFmpeg(settings.ffmpeg_path, sample_rate=settings.silence_sample_rate),
        default_voice_id=settings.default_voice_id,
        work_dir=settings.work_dir,
        output_prefix=settings.output_prefix,
    )
