import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or `.env` file."""

    log_level: str = Field(default="INFO", description="Logging level")

    # TTS providers
    tts_provider: Literal["eleven", "openai"] = Field(
        default="eleven", description="TTS provider used for synthesis: eleven or openai"
    )
    elevenlabs_api_key: str | None = None
    elevenlabs_voice_id: str = Field(
        default="21m00Tcm4TlvDq8ikWAM", description="Default ElevenLabs voice"
    )
    elevenlabs_model_id: str = "eleven_monolingual_v1"
    elevenlabs_stability: float = 0.5
    elevenlabs_similarity_boost: float = 0.5
    openai_api_key: str | None = None
    openai_tts_model: str = "tts-1"
    openai_voice_id: str = Field(default="alloy", description="Default OpenAI voice")

    # Object storage (S3 or S3-compatible)
    s3_bucket: str | None = None
    s3_region: str | None = None
    s3_endpoint_url: str | None = None
    s3_access_key_id: str | None = None
    s3_secret_access_key: str | None = None

    # Audio assembly
    ffmpeg_path: str = Field(default="/opt/bin/ffmpeg", description="ffmpeg executable")
    work_dir: str = Field(default="/tmp/tts", description="Scratch root for intermediate clips")
    output_prefix: str = Field(default="tts-output", description="Prefix of generated output keys")
    silence_sample_rate: int = 44100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def default_voice_id(self) -> str:
        """Voice used when a request does not name one."""
        if self.tts_provider == "openai":
            return self.openai_voice_id
        return self.elevenlabs_voice_id


@lru_cache
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached instance of Settings."""
    s = Settings()
    logging.basicConfig(
        level=s.log_level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info(f"TTS Provider: {s.tts_provider}")
    logger.info(f"Default voice: {s.default_voice_id}")
    logger.info(f"S3 Bucket: {s.s3_bucket}")
    logger.info(f"ffmpeg: {s.ffmpeg_path}")
    logger.info(f"Work dir: {s.work_dir}")
    logger.info("=" * 60)

    if not s.s3_bucket:
        logger.warning("S3_BUCKET not set - uploads will fail!")
    if s.tts_provider == "eleven" and not s.elevenlabs_api_key:
        logger.warning("ELEVENLABS_API_KEY not set!")
    if s.tts_provider == "openai" and not s.openai_api_key:
        logger.warning("OPENAI_API_KEY not set!")

    return s
