"""Thin async wrapper around the ffmpeg executable."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path

logger = logging.getLogger(__name__)


class AudioToolError(RuntimeError):
    """ffmpeg exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{self.command[0]} exited with status {returncode}: {stderr.strip()}")


def format_duration(seconds: float) -> str:
    """Render *seconds* in plain decimal; ffmpeg rejects exponent notation like 1e-05."""
    return format(Decimal(repr(seconds)), "f")


def _concat_entry(path: Path | str) -> str:
    # concat demuxer quoting: close the quote, emit an escaped quote, reopen
    escaped = str(path).replace("'", "'\\''")
    return f"file '{escaped}'"


class FFmpeg:
    """Run ffmpeg for silence generation and stream-copy concatenation."""

    def __init__(self, executable: str = "ffmpeg", sample_rate: int = 44100):
        self.executable = executable
        self.sample_rate = sample_rate

    async def run(self, *args: str) -> None:
        command = [self.executable, *args]
        logger.debug(f"Running {' '.join(command)}")
        proc = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await proc.communicate()
        if proc.returncode != 0:
            raise AudioToolError(
                command, proc.returncode, stderr.decode("utf-8", errors="replace")
            )

    async def generate_silence(self, duration: float, out_path: Path) -> Path:
        """Create a mono MP3 of *duration* seconds of silence."""
        await self.run(
            "-f", "lavfi",
            "-i", f"anullsrc=r={self.sample_rate}:cl=mono",
            "-t", format_duration(duration),
            "-q:a", "9",
            "-acodec", "libmp3lame",
            "-y",
            str(out_path),
        )
        return out_path

    async def concatenate(self, paths: Sequence[Path | str], out_path: Path) -> Path:
        """Join *paths* in order into *out_path* without re-encoding."""
        if not paths:
            raise ValueError("No audio files to concatenate")

        list_path = Path(out_path).parent / "filelist.txt"
        content = "\n".join(_concat_entry(p) for p in paths)
        await asyncio.to_thread(list_path.write_text, content, encoding="utf-8")

        await self.run(
            "-f", "concat",
            "-safe", "0",
            "-i", str(list_path),
            "-c", "copy",
            "-y",
            str(out_path),
        )
        return out_path
